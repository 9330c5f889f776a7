"""
Pydantic schemas for request/response validation.
"""

from schemas.prompt import (
    DeepLinks,
    MessageResponse,
    Prompt,
    PromptCreate,
    PromptExample,
    PromptResponse,
    PromptSeoResponse,
    PromptUpdate,
    RenderPromptRequest,
    RenderPromptResponse,
    TemplateRequest,
    TokenRange,
)

__all__ = [
    # Prompt records
    "Prompt",
    "PromptCreate",
    "PromptExample",
    "PromptResponse",
    "PromptUpdate",
    "TokenRange",

    # Rendering
    "DeepLinks",
    "RenderPromptRequest",
    "RenderPromptResponse",

    # Templates
    "TemplateRequest",

    # SEO
    "PromptSeoResponse",

    # Misc
    "MessageResponse",
]
