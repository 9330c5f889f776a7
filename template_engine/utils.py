"""
Template Engine Utilities

Placeholder extraction, substitution and template analysis for prompt text.
"""

import math
import re
from typing import Any, List, Mapping

import logfire

from .models import PlaceholderField, TemplateInspection, TemplateValidationResult

# Match {variable} pattern
PLACEHOLDER_PATTERN = re.compile(r'\{([^}]+)\}')

DISPLAY_NAME_DELIMITERS = re.compile(r'[/_-]')

MIN_TEMPLATE_LENGTH = 20
MAX_TEMPLATE_LENGTH = 5000

# Rough estimation: 1 token ~ 4 characters
CHARS_PER_TOKEN = 4


def extract_placeholders(template: str) -> List[str]:
    """
    Extract all {placeholder} names from a template.

    Args:
        template: Prompt template string

    Returns:
        List of unique placeholder names (without braces)

    Example:
        >>> extract_placeholders("Explain {topic} to a {audience}, {topic} first")
        ['topic', 'audience']
    """
    matches = PLACEHOLDER_PATTERN.findall(template)

    # Return unique placeholders in order of appearance
    seen = set()
    unique_matches = []
    for match in matches:
        if match not in seen:
            seen.add(match)
            unique_matches.append(match)

    return unique_matches


def format_display_name(placeholder_name: str) -> str:
    """
    Turn a placeholder name into a form label.

    Example:
        >>> format_display_name("industry/topic")
        'Industry Topic'
    """
    words = DISPLAY_NAME_DELIMITERS.split(placeholder_name)
    return " ".join(word[:1].upper() + word[1:] for word in words)


def validate_template(template: str) -> TemplateValidationResult:
    """
    Validate prompt template content before it is accepted.

    Checks:
    - Content is not blank
    - Minimum length (20 characters)
    - Maximum length (5000 characters)
    - Equal number of opening and closing curly brackets

    Every failing check contributes an error; validation never raises.

    Args:
        template: Prompt template string

    Returns:
        TemplateValidationResult with validation status and error messages
    """
    errors: List[str] = []

    # Check 1: Not blank
    if not template.strip():
        errors.append("Prompt content cannot be empty")

    # Check 2: Minimum length
    if len(template) < MIN_TEMPLATE_LENGTH:
        errors.append(
            f"Prompt content should be at least {MIN_TEMPLATE_LENGTH} characters long"
        )

    # Check 3: Maximum length
    if len(template) > MAX_TEMPLATE_LENGTH:
        errors.append(
            f"Prompt content should be less than {MAX_TEMPLATE_LENGTH} characters"
        )

    # Check 4: Bracket counts only, not nesting order
    if template.count("{") != template.count("}"):
        errors.append("Mismatched curly brackets in variable definitions")

    return TemplateValidationResult(is_valid=not errors, errors=errors)


def substitute(template: str, bindings: Mapping[str, Any]) -> str:
    """
    Replace {key} placeholders with their bound values.

    Keys are matched case-insensitively and applied in the mapping's order.
    Placeholders without a binding are left untouched.

    Args:
        template: Prompt template string
        bindings: Placeholder name -> replacement value

    Returns:
        New string with bound placeholders replaced
    """
    result = template

    for key, value in bindings.items():
        pattern = re.compile(r'\{' + re.escape(key) + r'\}', re.IGNORECASE)
        replacement = str(value)
        # Callable replacement keeps backslashes in values literal
        result, count = pattern.subn(lambda _: replacement, result)
        logfire.debug("Placeholder substituted", key=key, occurrences=count)

    return result


def estimate_token_count(text: str) -> int:
    """Estimate token count as one token per four characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def inspect_template(template: str) -> TemplateInspection:
    """
    Collect everything a render form needs to know about a template.

    Args:
        template: Prompt template string

    Returns:
        TemplateInspection with labelled placeholders, token estimate and validation
    """
    placeholders = [
        PlaceholderField(name=name, display_name=format_display_name(name))
        for name in extract_placeholders(template)
    ]

    return TemplateInspection(
        placeholders=placeholders,
        estimated_tokens=estimate_token_count(template),
        validation=validate_template(template),
    )


def find_unfilled_placeholders(template: str, bindings: Mapping[str, Any]) -> List[str]:
    """Return the template's placeholders that substitute() would leave in place."""
    # Same case-insensitive rule substitute() applies to keys
    return [
        name for name in extract_placeholders(template)
        if not any(re.fullmatch(re.escape(key), name, re.IGNORECASE) for key in bindings)
    ]
