"""
FastAPI application serving font CSS.

Provides:
- FontCssMiddleware in front of the app for /[locale/]fonts/fonts.css
- A health endpoint reporting cache size
- Temp directory cleanup on shutdown
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Mapping, Optional, Union

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ResponderConfig
from ..generator import CssGenerator
from ..service import FontCssService
from .middleware import FontCssMiddleware

logger = logging.getLogger(__name__)


def create_app(
    config: Union[ResponderConfig, Mapping[str, Any], None] = None,
    config_path: Optional[str] = None,
    generator: Optional[CssGenerator] = None,
    service: Optional[FontCssService] = None,
) -> FastAPI:
    """Create a FastAPI application that answers font CSS requests.

    Args:
        config: Configuration object or dict (fonts, locale_to_url_keys, ...)
        config_path: Path to YAML config file (used when config is None)
        generator: CSS generator override (default: FontFaceGenerator)
        service: Pre-built service; config is still applied when given

    Returns:
        FastAPI application instance

    Raises:
        MissingRequiredOptionError: If the configuration lacks required options
    """
    if config is None and config_path:
        config = ResponderConfig.load(config_path)

    if service is None:
        service = FontCssService(generator=generator)
    if config is not None:
        service.setup(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Font responder accepting connections")
        yield
        logger.info("Shutting down font responder...")
        service.close()

    app = FastAPI(
        title="Font Responder",
        description="Generated web-font CSS keyed by user agent, locale and font set",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service
    app.add_middleware(FontCssMiddleware, service=service)

    @app.get("/api/fonts/health")
    async def get_health() -> JSONResponse:
        """Health check."""
        return JSONResponse({
            "healthy": True,
            "version": __version__,
            "cached": len(service.cache),
        })

    return app
