"""Prompt-related Pydantic schemas for the prompt browsing API."""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenRange(str, Enum):
    """Length buckets used by the browse filters (by estimated tokens)."""
    ALL = "all"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class PromptExample(BaseModel):
    """A sample input/output pair showing a prompt in use."""

    input: str
    output: str
    model: str


class PromptBase(BaseModel):
    """Fields shared by stored prompts and creation requests."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    content: str = Field(..., description="Prompt template with {placeholder} variables")
    tags: List[str] = Field(default_factory=list)
    category: str = Field(..., min_length=1)
    estimated_tokens: int = Field(default=0, ge=0)
    creator_name: str = Field(..., min_length=1)
    creator_initials: str = Field(..., min_length=1, max_length=4)
    variables: List[str] = Field(default_factory=list)
    compatible_models: List[str] = Field(default_factory=list)
    examples: List[PromptExample] = Field(default_factory=list)

    @field_validator("tags", "compatible_models")
    @classmethod
    def strip_blank_entries(cls, v: List[str]) -> List[str]:
        """Drop empty strings and surrounding whitespace."""
        return [item.strip() for item in v if item.strip()]


class PromptCreate(PromptBase):
    """Request schema for POST /api/prompts"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Expert Teacher Prompt",
                "description": "Break down complex topics like you're explaining to a 5-year-old.",
                "content": "Pretend you are an expert in {industry/topic}. Topic to explain: {topic}",
                "tags": ["Education", "Learning"],
                "category": "Writing & Content",
                "creator_name": "Sarah Chen",
                "creator_initials": "SC",
                "compatible_models": ["GPT-4", "Claude 3"]
            }
        }
    )


class Prompt(PromptBase):
    """A stored prompt record."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    use_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PromptUpdate(BaseModel):
    """Partial update applied to a stored prompt."""

    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    estimated_tokens: Optional[int] = Field(default=None, ge=0)
    variables: Optional[List[str]] = None
    compatible_models: Optional[List[str]] = None
    examples: Optional[List[PromptExample]] = None


class PromptResponse(Prompt):
    """Response schema for prompt data."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Personal Thought Partner",
                "description": "Question every assumption and point out blind spots.",
                "content": "Act as my personal thought partner. My idea/problem: {idea_or_problem}",
                "tags": ["Strategy", "Innovation"],
                "category": "Business & Strategy",
                "estimated_tokens": 80,
                "use_count": 1204,
                "creator_name": "Alex Rivera",
                "creator_initials": "AR",
                "variables": ["{idea_or_problem}"],
                "compatible_models": ["GPT-4", "Claude 3"],
                "examples": [],
                "created_at": "2025-01-13T10:30:00Z"
            }
        }
    )


class RenderPromptRequest(BaseModel):
    """Request schema for POST /api/prompts/{id}/render"""

    variables: Dict[str, str] = Field(
        default_factory=dict,
        description="Placeholder name -> value entered by the user"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"variables": {"topic": "quantum computing"}}
        }
    )


class DeepLinks(BaseModel):
    """Links that open the rendered prompt in external chat tools."""

    chatgpt: str
    claude: str
    gemini: str
    grok: str
    openrouter: str


class RenderPromptResponse(BaseModel):
    """Response schema for a rendered prompt."""

    prompt_id: str
    text: str = Field(description="Prompt content with bound placeholders replaced")
    unfilled_placeholders: List[str] = Field(default_factory=list)
    estimated_tokens: int
    deep_links: DeepLinks


class TemplateRequest(BaseModel):
    """Request schema for the template validation and inspection endpoints."""

    template: str = Field(..., max_length=20000)


class PromptSeoResponse(BaseModel):
    """Response schema for GET /api/prompts/{id}/seo"""

    title: str
    description: str
    canonical_url: str
    open_graph: Dict[str, str]
    structured_data: dict


class MessageResponse(BaseModel):
    """Simple acknowledgement payload."""

    message: str
