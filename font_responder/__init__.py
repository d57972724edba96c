"""
Font Responder: serves generated web-font CSS.

Requests of the form /:locale/:font1,font2/fonts.css are answered with
@font-face CSS generated for the requesting user agent, cached in memory
and on disk.

Basic Usage:
    from font_responder import FontCssService

    service = FontCssService()
    service.setup({"fonts": fonts, "locale_to_url_keys": {"default": "latin"}})
    entry = await service.get_css("all", "en", ["opensans-regular"])

ASGI Usage:
    from font_responder.web import create_app

    app = create_app(config_path="fonts.yaml")
"""

__version__ = "0.3.0"

from .cache import CacheEntry, CssCache, cache_filename, derive_key
from .config import ResponderConfig
from .errors import (
    FontResponderError,
    GenerationError,
    InvalidFontError,
    MissingRequiredOptionError,
)
from .generator import CssGenerator, FontFaceGenerator
from .service import FontCssService, GeneratedCss
from .storage import TempStorage

__all__ = [
    "__version__",
    # Service
    "FontCssService",
    "GeneratedCss",
    # Configuration
    "ResponderConfig",
    # Cache
    "CacheEntry",
    "CssCache",
    "cache_filename",
    "derive_key",
    # Generators
    "CssGenerator",
    "FontFaceGenerator",
    # Storage
    "TempStorage",
    # Errors
    "FontResponderError",
    "GenerationError",
    "InvalidFontError",
    "MissingRequiredOptionError",
]
