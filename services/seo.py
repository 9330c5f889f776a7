"""
SEO helpers for prompt detail pages.

Builds slugs, page titles, meta descriptions, Open Graph tags and
schema.org structured data for a prompt.
"""

import re
from typing import Dict, Optional
from uuid import UUID

from schemas.prompt import Prompt

SITE_NAME = "StumbleUponPrompt"
META_DESCRIPTION_MAX_LENGTH = 150
# Room left for the "Try this ... prompt now." suffix
META_DESCRIPTION_SUFFIX_ROOM = 30
MIN_SLUG_ID_LENGTH = 6

_UUID_SUFFIX = re.compile(
    r'([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})$'
)


def create_slug(title: str) -> str:
    """
    Turn a prompt title into a URL slug.

    Example:
        >>> create_slug("World-Class Copywriter!")
        'world-class-copywriter'
    """
    slug = title.lower()
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip()


def create_prompt_url(title: str, prompt_id: str) -> str:
    """Site-relative URL of a prompt detail page."""
    return f"/prompt/{create_slug(title)}-{prompt_id}"


def extract_id_from_slug(slug: str) -> Optional[str]:
    """
    Recover the prompt id from a "title-slug-id" path segment.

    A trailing UUID is returned whole. Otherwise the last hyphen-separated
    part is used if it is long enough to look like an id.
    """
    match = _UUID_SUFFIX.search(slug)
    if match:
        return str(UUID(match.group(1)))

    last_part = slug.split("-")[-1]
    if len(last_part) >= MIN_SLUG_ID_LENGTH:
        return last_part

    return None


def _primary_tag(prompt: Prompt) -> str:
    return prompt.tags[0] if prompt.tags else ""


def generate_meta_description(prompt: Prompt) -> str:
    """Description trimmed to fit a search snippet, plus a call to action."""
    meta = prompt.description or ""
    limit = META_DESCRIPTION_MAX_LENGTH - META_DESCRIPTION_SUFFIX_ROOM
    if len(meta) > limit:
        meta = meta[:limit] + "..."

    category = _primary_tag(prompt)
    suffix = f" Try this {category.lower()} prompt now." if category else " Try this AI prompt now."
    return meta + suffix


def generate_page_title(prompt: Prompt) -> str:
    category = _primary_tag(prompt) or "AI"
    return f"Try {prompt.title} - {category} Prompt | {SITE_NAME}"


def generate_structured_data(prompt: Prompt) -> dict:
    """schema.org CreativeWork JSON-LD for a prompt."""
    tags = ", ".join(prompt.tags)
    return {
        "@context": "https://schema.org",
        "@type": "CreativeWork",
        "name": prompt.title,
        "description": prompt.description,
        "author": {
            "@type": "Person",
            "name": prompt.creator_name,
        },
        "genre": tags,
        "version": "1.0.0",
        "dateCreated": prompt.created_at.isoformat(),
        "keywords": tags,
        "mainEntity": {
            "@type": "TextDigitalDocument",
            "text": prompt.content,
        },
    }


def generate_open_graph_tags(prompt: Prompt, current_url: str) -> Dict[str, str]:
    title = generate_page_title(prompt)
    description = generate_meta_description(prompt)
    return {
        "og:title": title,
        "og:description": description,
        "og:type": "article",
        "og:url": current_url,
        "og:site_name": SITE_NAME,
        "twitter:card": "summary",
        "twitter:title": title,
        "twitter:description": description,
    }
