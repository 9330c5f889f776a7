"""
Template Engine Models

Pydantic models describing the results of template analysis.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TemplateValidationResult(BaseModel):
    """Outcome of validating prompt template content."""

    is_valid: bool = Field(
        description="True if no validation check failed"
    )

    errors: List[str] = Field(
        default_factory=list,
        description="Human-readable reasons the template was rejected, in check order"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "is_valid": False,
                "errors": ["Mismatched curly brackets in variable definitions"]
            }
        }
    )


class PlaceholderField(BaseModel):
    """A placeholder paired with the label shown next to its input field."""

    name: str = Field(description="Exact placeholder text between the braces")
    display_name: str = Field(description="Formatted label, e.g. 'User Name'")


class TemplateInspection(BaseModel):
    """Everything the render form needs about a template."""

    placeholders: List[PlaceholderField] = Field(default_factory=list)
    estimated_tokens: int = Field(ge=0)
    validation: TemplateValidationResult

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "placeholders": [
                    {"name": "industry/topic", "display_name": "Industry Topic"},
                    {"name": "topic", "display_name": "Topic"}
                ],
                "estimated_tokens": 58,
                "validation": {"is_valid": True, "errors": []}
            }
        }
    )
