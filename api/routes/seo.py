"""SEO endpoints: per-prompt metadata and the sitemap."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
import logfire

from config import settings
from database import MemoryPromptStore, get_store
from schemas.prompt import PromptSeoResponse
from services.seo import (
    create_prompt_url,
    generate_meta_description,
    generate_open_graph_tags,
    generate_page_title,
    generate_structured_data,
)
from services.sitemap import generate_sitemap


router = APIRouter(tags=["SEO"])


@router.get("/api/prompts/{prompt_id}/seo", response_model=PromptSeoResponse)
async def get_prompt_seo(
    prompt_id: str,
    url: Optional[str] = None,
    store: MemoryPromptStore = Depends(get_store),
):
    """
    Metadata for a prompt detail page.

    Args:
        prompt_id: Prompt ID
        url: Current page URL (defaults to the canonical prompt URL)

    Raises:
        HTTPException 404: If prompt doesn't exist
    """
    prompt = store.get_prompt(prompt_id)
    if prompt is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Prompt not found"
        )

    canonical_url = settings.site_base_url + create_prompt_url(prompt.title, prompt.id)

    return PromptSeoResponse(
        title=generate_page_title(prompt),
        description=generate_meta_description(prompt),
        canonical_url=canonical_url,
        open_graph=generate_open_graph_tags(prompt, url or canonical_url),
        structured_data=generate_structured_data(prompt),
    )


@router.get("/sitemap.xml", response_class=Response)
async def sitemap(store: MemoryPromptStore = Depends(get_store)):
    """Sitemap of the browsing site."""
    with logfire.span("api.sitemap"):
        prompts = store.get_all_prompts()
        xml = generate_sitemap(prompts, settings.site_base_url)
        logfire.info("Sitemap generated", prompt_count=len(prompts))
        return Response(content=xml, media_type="application/xml")
