"""
Services package.

Prompt filtering, deep links, SEO metadata and sitemap generation.
"""

from services.deep_links import generate_deep_links
from services.filters import filter_prompts
from services.seo import create_prompt_url, create_slug
from services.sitemap import generate_sitemap

__all__ = [
    "create_prompt_url",
    "create_slug",
    "filter_prompts",
    "generate_deep_links",
    "generate_sitemap",
]
