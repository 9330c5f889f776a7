"""Browse filters applied to prompt listings."""

from typing import Iterable, List, Optional, Sequence

from schemas.prompt import Prompt, TokenRange

SHORT_PROMPT_MAX_TOKENS = 100
LONG_PROMPT_MIN_TOKENS = 500


def matches_token_range(prompt: Prompt, token_range: TokenRange) -> bool:
    """Check a prompt's estimated length against a length bucket."""
    tokens = prompt.estimated_tokens or 0

    if token_range == TokenRange.SHORT:
        return tokens < SHORT_PROMPT_MAX_TOKENS
    if token_range == TokenRange.MEDIUM:
        return SHORT_PROMPT_MAX_TOKENS <= tokens <= LONG_PROMPT_MIN_TOKENS
    if token_range == TokenRange.LONG:
        return tokens > LONG_PROMPT_MIN_TOKENS
    return True


def matches_search(prompt: Prompt, query: str) -> bool:
    """Case-insensitive substring match on title, description and tags."""
    lower_query = query.lower()
    return (
        lower_query in prompt.title.lower()
        or lower_query in prompt.description.lower()
        or any(lower_query in tag.lower() for tag in prompt.tags)
    )


def filter_prompts(
    prompts: Iterable[Prompt],
    categories: Optional[Sequence[str]] = None,
    models: Optional[Sequence[str]] = None,
    token_range: TokenRange = TokenRange.ALL,
    search: Optional[str] = None,
) -> List[Prompt]:
    """
    Narrow a prompt listing with the browse sidebar filters.

    All filters combine with AND; empty filters are skipped.

    Args:
        prompts: Prompts to filter
        categories: Keep prompts in any of these categories
        models: Keep prompts compatible with any of these models
        token_range: Length bucket by estimated tokens
        search: Free-text query

    Returns:
        Filtered prompts in their original order
    """
    filtered = list(prompts)

    if categories:
        filtered = [p for p in filtered if p.category in categories]

    if models:
        filtered = [
            p for p in filtered
            if any(model in p.compatible_models for model in models)
        ]

    if token_range != TokenRange.ALL:
        filtered = [p for p in filtered if matches_token_range(p, token_range)]

    if search and search.strip():
        filtered = [p for p in filtered if matches_search(p, search.strip())]

    return filtered


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated query parameter, dropping blanks."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
