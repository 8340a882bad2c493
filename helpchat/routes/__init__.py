"""FastAPI routes package."""

from helpchat.routes.chat import router as chat_router
from helpchat.routes.health import router as health_router

__all__ = ["chat_router", "health_router"]
