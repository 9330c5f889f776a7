"""
Prompt store module.
Exports the in-memory store and its FastAPI dependency.
"""

from database.memory_store import MemoryPromptStore
from database.dependencies import get_store
from database.seed import sample_prompts

__all__ = [
    "MemoryPromptStore",
    "get_store",
    "sample_prompts",
]
