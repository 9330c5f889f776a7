"""
FastAPI dependency injection for the prompt store.
"""

from typing import Optional

from config import settings
from database.memory_store import MemoryPromptStore
from database.seed import sample_prompts


_store: Optional[MemoryPromptStore] = None


def get_store() -> MemoryPromptStore:
    """
    FastAPI dependency that provides the process-wide prompt store.

    Usage:
        @router.get("/prompts")
        def list_prompts(store: MemoryPromptStore = Depends(get_store)):
            return store.get_all_prompts()

    The store is created on first use and seeded with the sample prompts
    unless SEED_SAMPLE_PROMPTS is false.
    """
    global _store

    if _store is None:
        seed = sample_prompts() if settings.seed_sample_prompts else None
        _store = MemoryPromptStore(seed=seed)

    return _store
