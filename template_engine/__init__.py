"""
Template Engine

Pure text transformations over prompt templates:
- Placeholder extraction and display-name formatting
- Template validation
- Token estimation
- Variable substitution
"""

from .models import PlaceholderField, TemplateInspection, TemplateValidationResult
from .utils import (
    estimate_token_count,
    extract_placeholders,
    find_unfilled_placeholders,
    format_display_name,
    inspect_template,
    substitute,
    validate_template,
)

__all__ = [
    "PlaceholderField",
    "TemplateInspection",
    "TemplateValidationResult",
    "estimate_token_count",
    "extract_placeholders",
    "find_unfilled_placeholders",
    "format_display_name",
    "inspect_template",
    "substitute",
    "validate_template",
]
