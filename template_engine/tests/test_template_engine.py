"""
Test suite for the Template Engine

Run with:
    pytest template_engine/tests/test_template_engine.py -v
"""

import pytest

from template_engine import (
    estimate_token_count,
    extract_placeholders,
    find_unfilled_placeholders,
    format_display_name,
    inspect_template,
    substitute,
    validate_template,
)


pytestmark = pytest.mark.unit


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def expert_template():
    return (
        "Pretend you are an expert with 20 years of experience in {industry/topic}. "
        "Break down the core principles a total beginner must understand.\n\n"
        "Topic to explain: {topic}"
    )


# ===================================================================
# TESTS - extract_placeholders
# ===================================================================

@pytest.mark.parametrize("text", ["", "plain text", "no braces at all, just words."])
def test_extract_without_braces_is_empty(text):
    assert extract_placeholders(text) == []


def test_extract_distinct_in_first_appearance_order():
    assert extract_placeholders("{a}{a}{b}") == ["a", "b"]


def test_extract_keeps_inner_text_exactly(expert_template):
    assert extract_placeholders(expert_template) == ["industry/topic", "topic"]
    assert extract_placeholders("{ name }{Name}{name}") == [" name ", "Name", "name"]


def test_extract_ignores_stray_braces():
    assert extract_placeholders("{open only") == []
    assert extract_placeholders("close only}") == []
    assert extract_placeholders("}{") == []
    assert extract_placeholders("{}") == []


def test_extract_nested_braces_match_from_first_open_brace():
    # "[^}]+" lets an inner "{" be part of the name
    assert extract_placeholders("{outer {inner}}") == ["outer {inner"]


# ===================================================================
# TESTS - format_display_name
# ===================================================================

@pytest.mark.parametrize("name, expected", [
    ("user_name", "User Name"),
    ("industry/topic", "Industry Topic"),
    ("my-idea", "My Idea"),
    ("topic", "Topic"),
    ("my idea/problem", "My idea Problem"),
    ("landing page/sales pitch/email", "Landing page Sales pitch Email"),
    ("camelCase_value", "CamelCase Value"),
])
def test_format_display_name(name, expected):
    assert format_display_name(name) == expected


def test_format_display_name_keeps_empty_segments():
    assert format_display_name("a__b") == "A  B"
    assert format_display_name("") == ""


# ===================================================================
# TESTS - validate_template
# ===================================================================

def test_validate_accepts_well_formed_template(expert_template):
    result = validate_template(expert_template)
    assert result.is_valid is True
    assert result.errors == []


def test_validate_empty_collects_empty_and_length_errors():
    result = validate_template("")
    assert result.is_valid is False
    assert result.errors == [
        "Prompt content cannot be empty",
        "Prompt content should be at least 20 characters long",
    ]


def test_validate_whitespace_only_is_empty():
    result = validate_template(" " * 25)
    assert result.errors == ["Prompt content cannot be empty"]


def test_validate_short_template():
    result = validate_template("short")
    assert result.is_valid is False
    assert "Prompt content should be at least 20 characters long" in result.errors


def test_validate_length_boundaries():
    assert validate_template("x" * 20).is_valid is True
    assert validate_template("x" * 5000).is_valid is True

    too_long = validate_template("x" * 5001)
    assert too_long.errors == ["Prompt content should be less than 5000 characters"]


def test_validate_unbalanced_braces():
    result = validate_template("{open only")
    assert result.is_valid is False
    assert "Mismatched curly brackets in variable definitions" in result.errors


def test_validate_collects_every_failure():
    result = validate_template("{short")
    assert result.errors == [
        "Prompt content should be at least 20 characters long",
        "Mismatched curly brackets in variable definitions",
    ]


def test_validate_brace_check_counts_only():
    result = validate_template("This reversed pair }{ still balances")
    assert result.is_valid is True


# ===================================================================
# TESTS - substitute
# ===================================================================

def test_substitute_replaces_bound_placeholder():
    assert substitute("Hello {name}!", {"name": "World"}) == "Hello World!"


def test_substitute_leaves_unbound_placeholder():
    assert substitute("Hello {name}!", {}) == "Hello {name}!"
    assert substitute("{a} and {b}", {"a": "1"}) == "1 and {b}"


def test_substitute_replaces_every_occurrence():
    assert substitute("{x}-{x}-{x}", {"x": "y"}) == "y-y-y"


def test_substitute_matches_keys_case_insensitively():
    assert substitute("Dear {Name}, hi {NAME}", {"name": "Ada"}) == "Dear Ada, hi Ada"


def test_substitute_treats_key_and_value_literally():
    assert substitute("{a.b} {axb}", {"a.b": "dot"}) == "dot {axb}"
    assert substitute("{industry/topic}", {"industry/topic": "fintech"}) == "fintech"
    assert substitute("path: {dir}", {"dir": r"C:\new\1"}) == r"path: C:\new\1"


def test_substitute_applies_bindings_in_order():
    # The first binding inserts "{b}", which the later "b" binding then sees
    assert substitute("{a}", {"a": "{b}", "b": "done"}) == "done"
    assert substitute("{a}", {"b": "done", "a": "{b}"}) == "{b}"


def test_substitute_does_not_mutate_input(expert_template):
    original = str(expert_template)
    substitute(expert_template, {"topic": "compilers"})
    assert expert_template == original


def test_substitute_converts_values_to_strings():
    assert substitute("{n} items", {"n": 3}) == "3 items"


@pytest.mark.parametrize("template, bindings", [
    ("Hello {name}!", {"name": "World"}),
    ("{a} {b} {a}", {"a": "1"}),
    ("no placeholders here", {"unused": "x"}),
    ("{x}", {"x": "{y}"}),
])
def test_second_empty_substitution_changes_nothing(template, bindings):
    once = substitute(template, bindings)
    assert substitute(once, {}) == once


# ===================================================================
# TESTS - estimate_token_count
# ===================================================================

@pytest.mark.parametrize("text, expected", [
    ("", 0),
    ("a", 1),
    ("abcd", 1),
    ("abcde", 2),
    ("x" * 400, 100),
])
def test_estimate_token_count_rounds_up(text, expected):
    assert estimate_token_count(text) == expected


# ===================================================================
# TESTS - inspection helpers
# ===================================================================

def test_inspect_template_labels_placeholders(expert_template):
    inspection = inspect_template(expert_template)

    assert [p.name for p in inspection.placeholders] == ["industry/topic", "topic"]
    assert [p.display_name for p in inspection.placeholders] == ["Industry Topic", "Topic"]
    assert inspection.estimated_tokens == estimate_token_count(expert_template)
    assert inspection.validation.is_valid is True


def test_inspect_template_reports_invalid_template():
    inspection = inspect_template("{oops")
    assert inspection.placeholders == []
    assert inspection.validation.is_valid is False


def test_find_unfilled_placeholders(expert_template):
    assert find_unfilled_placeholders(expert_template, {"TOPIC": "x"}) == ["industry/topic"]
    assert find_unfilled_placeholders(expert_template, {}) == ["industry/topic", "topic"]


@pytest.mark.parametrize("template, key", [
    ("{s}", "ſ"),
    ("{I}", "ı"),
    ("{STRASSE}", "strasse"),
])
def test_find_unfilled_agrees_with_substitute_on_case_variants(template, key):
    bindings = {key: "X"}
    rendered = substitute(template, bindings)

    assert rendered == "X"
    assert find_unfilled_placeholders(template, bindings) == extract_placeholders(rendered)
    assert find_unfilled_placeholders(template, bindings) == []


def test_find_unfilled_treats_keys_literally():
    assert find_unfilled_placeholders("{a.b} {axb}", {"a.b": "x"}) == ["axb"]
