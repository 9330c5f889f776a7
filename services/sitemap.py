"""Sitemap generation for the browsing site.

Lists the static pages, every prompt page, and one category and tag page
per distinct tag.
"""

from datetime import date
from typing import Iterable, List, Optional
from xml.dom import minidom
from xml.etree.ElementTree import Element, SubElement, tostring

from schemas.prompt import Prompt
from services.deep_links import encode_uri_component
from services.seo import create_prompt_url

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

STATIC_PAGES = [
    ("", "1.0", "daily"),
    ("/create", "0.8", "weekly"),
]


def _unique_tags(prompts: List[Prompt]) -> List[str]:
    seen = set()
    tags = []
    for prompt in prompts:
        for tag in prompt.tags:
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
    return tags


def generate_sitemap(
    prompts: Iterable[Prompt],
    base_url: str,
    today: Optional[date] = None,
) -> str:
    """Generate sitemap XML.

    Args:
        prompts: Prompts to list
        base_url: Public site URL without trailing slash
        today: Date used for lastmod (defaults to today)

    Returns:
        Sitemap XML string
    """
    prompts = list(prompts)
    lastmod = (today or date.today()).isoformat()
    tags = _unique_tags(prompts)

    root = Element("urlset")
    root.set("xmlns", SITEMAP_NAMESPACE)

    for path, priority, changefreq in STATIC_PAGES:
        _add_url(root, base_url + path, lastmod, changefreq, priority)

    for prompt in prompts:
        _add_url(root, base_url + create_prompt_url(prompt.title, prompt.id), lastmod, "weekly", "0.9")

    # Categories are derived from tags, same as the tag pages
    for tag in tags:
        _add_url(root, f"{base_url}/category/{encode_uri_component(tag)}", lastmod, "daily", "0.7")

    for tag in tags:
        _add_url(root, f"{base_url}/tag/{encode_uri_component(tag)}", lastmod, "daily", "0.6")

    xml_str = tostring(root, encoding="unicode")
    return _prettify(xml_str)


def _add_url(root: Element, loc: str, lastmod: str, changefreq: str, priority: str) -> None:
    """Add a url element to the urlset root."""
    url_elem = SubElement(root, "url")
    SubElement(url_elem, "loc").text = loc
    SubElement(url_elem, "lastmod").text = lastmod
    SubElement(url_elem, "changefreq").text = changefreq
    SubElement(url_elem, "priority").text = priority


def _prettify(xml_str: str) -> str:
    """Return pretty-printed XML string with a UTF-8 declaration."""
    dom = minidom.parseString(xml_str)
    return dom.toprettyxml(indent="  ", encoding="UTF-8").decode("utf-8")
