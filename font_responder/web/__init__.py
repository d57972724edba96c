"""
Font Responder web layer: ASGI middleware and FastAPI application.

Usage:
    from font_responder.web import create_app

    app = create_app(config_path="fonts.yaml")
    # Run with: uvicorn --factory ...  or  font-responder serve -c fonts.yaml
"""

from .middleware import FontCssMiddleware, FontRequest, match_font_request, set_cache_control_headers
from .server import create_app

__all__ = [
    "create_app",
    "FontCssMiddleware",
    "FontRequest",
    "match_font_request",
    "set_cache_control_headers",
]
