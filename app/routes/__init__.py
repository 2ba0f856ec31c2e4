"""Route handlers."""

from .annotate import router as annotate_router
from .health import router as health_router
from .verify import router as verify_router

__all__ = ["health_router", "annotate_router", "verify_router"]
