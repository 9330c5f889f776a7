"""
Unit tests for the in-memory prompt store and application settings.
"""

import pytest

from config.settings import Settings
from database import MemoryPromptStore, sample_prompts
from schemas.prompt import PromptCreate, PromptExample, PromptUpdate
from template_engine import extract_placeholders


pytestmark = pytest.mark.unit


@pytest.fixture
def store():
    return MemoryPromptStore(seed=sample_prompts())


@pytest.fixture
def new_prompt():
    return PromptCreate(
        title="Code Reviewer",
        description="Review a diff like a senior engineer.",
        content="Review this {language} diff and list risks:\n{diff}",
        tags=["Code", "Review"],
        category="Engineering",
        creator_name="Lee Wong",
        creator_initials="LW",
    )


def test_seeded_store(store):
    prompts = store.get_all_prompts()
    assert len(prompts) == 5
    assert all(100 <= p.use_count <= 2099 for p in prompts)
    assert len({p.id for p in prompts}) == 5


def test_empty_store():
    store = MemoryPromptStore()
    assert len(store) == 0
    assert store.get_random_prompt() is None


def test_seed_variables_match_content(store):
    for prompt in store.get_all_prompts():
        assert prompt.variables == ["{" + name + "}" for name in extract_placeholders(prompt.content)]


def test_create_prompt(store, new_prompt):
    created = store.create_prompt(new_prompt)

    assert store.get_prompt(created.id) == created
    assert created.use_count == 0
    assert created.variables == ["{language}", "{diff}"]
    assert created.estimated_tokens > 0
    assert created.created_at is not None


def test_get_by_category_and_tags(store):
    assert {p.title for p in store.get_prompts_by_category("Analysis & Research")} == {
        "The Brutal Truth Engine",
        "Elite Research Analyst",
    }
    assert {p.title for p in store.get_prompts_by_tags(["Learning"])} == {"Expert Teacher Prompt"}
    assert store.get_prompts_by_tags([]) == []


def test_search_prompts(store):
    assert {p.title for p in store.search_prompts("COPY")} == {"World-Class Copywriter"}
    assert store.search_prompts("no such thing") == []


def test_update_prompt(store, new_prompt):
    created = store.create_prompt(new_prompt)

    updated = store.update_prompt(
        created.id,
        PromptUpdate(
            title="Strict Code Reviewer",
            examples=[{"input": "diff", "output": "risks", "model": "GPT-4"}],
        ),
    )

    assert updated.title == "Strict Code Reviewer"
    assert updated.description == created.description
    assert updated.examples == [PromptExample(input="diff", output="risks", model="GPT-4")]
    assert store.get_prompt(created.id) == updated


def test_update_unknown_prompt(store):
    assert store.update_prompt("missing", PromptUpdate(title="x")) is None


def test_delete_prompt(store, new_prompt):
    created = store.create_prompt(new_prompt)
    assert store.delete_prompt(created.id) is True
    assert store.get_prompt(created.id) is None
    assert store.delete_prompt(created.id) is False


def test_increment_use_count(store):
    prompt = store.get_all_prompts()[0]
    before = prompt.use_count
    store.increment_use_count(prompt.id)
    store.increment_use_count("unknown")
    assert store.get_prompt(prompt.id).use_count == before + 1


def test_random_prompt_comes_from_store(store):
    ids = {p.id for p in store.get_all_prompts()}
    for _ in range(10):
        assert store.get_random_prompt().id in ids


# ===================================================================
# Settings
# ===================================================================

def test_settings_parse_origins_and_base_url(mock_env_vars):
    mock_env_vars({
        "ALLOWED_ORIGINS": "https://a.test, https://b.test,",
        "SITE_BASE_URL": "https://prompts.example.com/",
    })

    settings = Settings(_env_file=None)

    assert settings.allowed_origins == ["https://a.test", "https://b.test"]
    assert settings.site_base_url == "https://prompts.example.com"


def test_settings_reject_bad_base_url(mock_env_vars):
    mock_env_vars({"SITE_BASE_URL": "prompts.example.com"})
    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_update_prompt_ignores_explicit_none(store, new_prompt):
    created = store.create_prompt(new_prompt)

    updated = store.update_prompt(
        created.id,
        PromptUpdate(title=None, content=None, category="Code Quality"),
    )

    assert updated.title == created.title
    assert updated.content == created.content
    assert updated.category == "Code Quality"


def test_seed_content_is_kept_verbatim(store):
    brutal = next(p for p in store.get_all_prompts() if p.title == "The Brutal Truth Engine")
    assert "No emojis. No em dashes. No special formatting." in brutal.content
