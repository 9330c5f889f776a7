"""Prompt browsing and submission API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
import logfire

from database import MemoryPromptStore, get_store
from schemas.prompt import (
    DeepLinks,
    MessageResponse,
    PromptCreate,
    PromptResponse,
    RenderPromptRequest,
    RenderPromptResponse,
    TokenRange,
)
from services.deep_links import generate_deep_links
from services.filters import filter_prompts, split_csv
from services.seo import extract_id_from_slug
from template_engine import (
    estimate_token_count,
    find_unfilled_placeholders,
    substitute,
    validate_template,
)


router = APIRouter(prefix="/api/prompts", tags=["Prompts"])


def _get_prompt_or_404(store: MemoryPromptStore, prompt_id: str):
    prompt = store.get_prompt(prompt_id)
    if prompt is None:
        logfire.warning("Prompt not found", prompt_id=prompt_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Prompt not found"
        )
    return prompt


@router.get("", response_model=List[PromptResponse])
async def list_prompts(
    category: Optional[str] = None,
    tags: Optional[str] = Query(default=None, description="Comma-separated tags"),
    search: Optional[str] = None,
    models: Optional[str] = Query(default=None, description="Comma-separated model names"),
    token_range: TokenRange = TokenRange.ALL,
    store: MemoryPromptStore = Depends(get_store),
):
    """
    List prompts.

    The base set is chosen by the first of search, category or tags that is
    given; models and token_range then narrow it.

    Args:
        category: Exact category name
        tags: Comma-separated tags (any match)
        search: Free-text query over title, description and tags
        models: Comma-separated compatible models (any match)
        token_range: Length bucket by estimated tokens
        store: Prompt store (injected by dependency)

    Returns:
        List[PromptResponse]: Matching prompts
    """
    with logfire.span(
        "api.list_prompts",
        category=category,
        tags=tags,
        search=search,
        models=models,
        token_range=token_range.value,
    ):
        if search:
            prompts = store.search_prompts(search)
        elif category:
            prompts = store.get_prompts_by_category(category)
        elif tags:
            prompts = store.get_prompts_by_tags(split_csv(tags))
        else:
            prompts = store.get_all_prompts()

        prompts = filter_prompts(
            prompts,
            models=split_csv(models),
            token_range=token_range,
        )

        logfire.info("Prompts retrieved", count=len(prompts))
        return prompts


@router.get("/random", response_model=PromptResponse)
async def get_random_prompt(store: MemoryPromptStore = Depends(get_store)):
    """
    Stumble onto a random prompt.

    Raises:
        HTTPException 404: If the store is empty
    """
    prompt = store.get_random_prompt()
    if prompt is None:
        logfire.warning("Random prompt requested from empty store")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No prompts available"
        )

    logfire.info("Random prompt served", prompt_id=prompt.id)
    return prompt


@router.get("/by-slug/{slug}", response_model=PromptResponse)
async def get_prompt_by_slug(slug: str, store: MemoryPromptStore = Depends(get_store)):
    """
    Resolve a "title-slug-id" path segment to its prompt.

    Raises:
        HTTPException 404: If no id can be read from the slug or it is unknown
    """
    prompt_id = extract_id_from_slug(slug)
    if prompt_id is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Prompt not found"
        )

    return _get_prompt_or_404(store, prompt_id)


@router.get("/{prompt_id}", response_model=PromptResponse)
async def get_prompt(prompt_id: str, store: MemoryPromptStore = Depends(get_store)):
    """
    Get specific prompt by ID.

    Raises:
        HTTPException 404: If prompt doesn't exist
    """
    with logfire.span("api.get_prompt", prompt_id=prompt_id):
        return _get_prompt_or_404(store, prompt_id)


@router.post("", response_model=PromptResponse, status_code=status.HTTP_201_CREATED)
async def create_prompt(
    request: PromptCreate,
    store: MemoryPromptStore = Depends(get_store),
):
    """
    Submit a new prompt.

    Variables and the token estimate are derived from the content when the
    request leaves them empty.

    Raises:
        HTTPException 400: If the prompt content fails template validation
    """
    with logfire.span("api.create_prompt", title=request.title):
        validation = validate_template(request.content)
        if not validation.is_valid:
            logfire.warning(
                "Prompt rejected by template validation",
                title=request.title,
                errors=validation.errors
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Invalid prompt data", "errors": validation.errors}
            )

        try:
            prompt = store.create_prompt(request)
        except Exception as e:
            logfire.error(
                "Prompt creation failed",
                title=request.title,
                error=str(e),
                error_type=type(e).__name__
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create prompt"
            )

        return prompt


@router.post("/{prompt_id}/use", response_model=MessageResponse)
async def increment_use_count(prompt_id: str, store: MemoryPromptStore = Depends(get_store)):
    """Record that a prompt was copied or opened in a chat tool."""
    store.increment_use_count(prompt_id)
    logfire.info("Prompt use recorded", prompt_id=prompt_id)
    return MessageResponse(message="Use count incremented")


@router.post("/{prompt_id}/render", response_model=RenderPromptResponse)
async def render_prompt(
    prompt_id: str,
    request: RenderPromptRequest,
    store: MemoryPromptStore = Depends(get_store),
):
    """
    Fill a prompt's placeholders and build deep links for the result.

    Placeholders without a value stay in the text and are listed in
    unfilled_placeholders.

    Raises:
        HTTPException 404: If prompt doesn't exist
    """
    with logfire.span("api.render_prompt", prompt_id=prompt_id):
        prompt = _get_prompt_or_404(store, prompt_id)

        text = substitute(prompt.content, request.variables)
        unfilled = find_unfilled_placeholders(prompt.content, request.variables)

        logfire.info(
            "Prompt rendered",
            prompt_id=prompt_id,
            bound=len(request.variables),
            unfilled=len(unfilled)
        )

        return RenderPromptResponse(
            prompt_id=prompt.id,
            text=text,
            unfilled_placeholders=unfilled,
            estimated_tokens=estimate_token_count(text),
            deep_links=DeepLinks(**generate_deep_links(prompt.content, request.variables)),
        )
