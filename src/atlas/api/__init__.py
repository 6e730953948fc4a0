"""Atlas domain API package."""

from atlas.api.errors import register_error_handlers
from atlas.api.routes import country_router

__all__ = ["country_router", "register_error_handlers"]
