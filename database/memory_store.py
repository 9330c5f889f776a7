"""
In-memory prompt store.

Prompts live in a dict keyed by id for the lifetime of the process.
Nothing is written to disk.
"""

import random
from typing import Dict, Iterable, List, Optional

import logfire

from schemas.prompt import Prompt, PromptCreate, PromptUpdate
from template_engine import estimate_token_count, extract_placeholders


class MemoryPromptStore:
    """
    Prompt store backed by an insertion-ordered dict.

    Attributes:
        _prompts: Prompt id -> Prompt
    """

    def __init__(self, seed: Optional[Iterable[PromptCreate]] = None):
        self._prompts: Dict[str, Prompt] = {}

        if seed is not None:
            for prompt_in in seed:
                prompt = self._build_prompt(prompt_in)
                prompt.use_count = random.randint(100, 2099)
                self._prompts[prompt.id] = prompt

            logfire.info("Prompt store seeded", count=len(self._prompts))

    def __len__(self) -> int:
        return len(self._prompts)

    @staticmethod
    def _build_prompt(prompt_in: PromptCreate) -> Prompt:
        """Create a Prompt record, deriving variables and token estimate when absent."""
        data = prompt_in.model_dump()

        if not data["variables"]:
            data["variables"] = [
                "{" + name + "}" for name in extract_placeholders(prompt_in.content)
            ]

        if not data["estimated_tokens"]:
            data["estimated_tokens"] = estimate_token_count(prompt_in.content)

        return Prompt(**data)

    def get_prompt(self, prompt_id: str) -> Optional[Prompt]:
        return self._prompts.get(prompt_id)

    def get_all_prompts(self) -> List[Prompt]:
        return list(self._prompts.values())

    def get_prompts_by_category(self, category: str) -> List[Prompt]:
        return [p for p in self._prompts.values() if p.category == category]

    def get_prompts_by_tags(self, tags: List[str]) -> List[Prompt]:
        """Return prompts carrying at least one of the given tags."""
        return [
            p for p in self._prompts.values()
            if any(tag in p.tags for tag in tags)
        ]

    def search_prompts(self, query: str) -> List[Prompt]:
        """Case-insensitive substring search over title, description and tags."""
        lower_query = query.lower()
        return [
            p for p in self._prompts.values()
            if lower_query in p.title.lower()
            or lower_query in p.description.lower()
            or any(lower_query in tag.lower() for tag in p.tags)
        ]

    def create_prompt(self, prompt_in: PromptCreate) -> Prompt:
        prompt = self._build_prompt(prompt_in)
        self._prompts[prompt.id] = prompt

        logfire.info("Prompt created", prompt_id=prompt.id, title=prompt.title)
        return prompt

    def update_prompt(self, prompt_id: str, updates: PromptUpdate) -> Optional[Prompt]:
        existing = self._prompts.get(prompt_id)
        if existing is None:
            return None

        updated = Prompt.model_validate(
            {**existing.model_dump(), **updates.model_dump(exclude_unset=True, exclude_none=True)}
        )
        self._prompts[prompt_id] = updated
        return updated

    def delete_prompt(self, prompt_id: str) -> bool:
        return self._prompts.pop(prompt_id, None) is not None

    def get_random_prompt(self) -> Optional[Prompt]:
        """Pick a prompt uniformly at random ("stumble")."""
        if not self._prompts:
            return None
        return random.choice(list(self._prompts.values()))

    def increment_use_count(self, prompt_id: str) -> None:
        """Bump the use counter; unknown ids are ignored."""
        prompt = self._prompts.get(prompt_id)
        if prompt is not None:
            prompt.use_count += 1
