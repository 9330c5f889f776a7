"""
API route handlers.
"""

from api.routes.prompt import router as prompt_router
from api.routes.seo import router as seo_router
from api.routes.template import router as template_router

__all__ = ["prompt_router", "seo_router", "template_router"]
