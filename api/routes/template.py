"""Template checking API endpoints used by the prompt submission form."""

from fastapi import APIRouter
import logfire

from schemas.prompt import TemplateRequest
from template_engine import TemplateInspection, TemplateValidationResult, inspect_template, validate_template


router = APIRouter(prefix="/api/templates", tags=["Templates"])


@router.post("/validate", response_model=TemplateValidationResult)
async def validate(request: TemplateRequest):
    """
    Validate template content without saving it.

    An invalid template is still a 200 response; the errors list says why.
    """
    result = validate_template(request.template)
    logfire.info(
        "Template validated",
        is_valid=result.is_valid,
        error_count=len(result.errors),
        length=len(request.template)
    )
    return result


@router.post("/inspect", response_model=TemplateInspection)
async def inspect(request: TemplateRequest):
    """Return labelled placeholders, token estimate and validation for a template."""
    with logfire.span("api.inspect_template", length=len(request.template)):
        return inspect_template(request.template)
