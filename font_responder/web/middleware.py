"""
ASGI middleware answering font CSS requests.

Looks for GET requests whose path has the form:

    /:locale/:comma,separated,list,of,fonts/fonts.css
    /:comma,separated,list,of,fonts/fonts.css

Matching requests are answered from the FontCssService; everything else,
including requests for unknown fonts, goes to the wrapped application.
"""

import logging
import re
from dataclasses import dataclass
from email.utils import formatdate
from typing import List, Optional

from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.gzip import GZipMiddleware
from starlette.responses import FileResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from ..errors import InvalidFontError
from ..service import FontCssService

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "default"

# The locale group is optional; without it the default locale is used.
_FONT_CSS_PATH_RE = re.compile(r"(?:/([^/]+))?/([^/]+)/fonts\.css$")


@dataclass(frozen=True)
class FontRequest:
    locale: str
    fonts: List[str]


def match_font_request(method: str, path: str) -> Optional[FontRequest]:
    """Parse a request into locale and fonts, or None if it is not ours."""
    if method != "GET":
        return None
    match = _FONT_CSS_PATH_RE.search(path)
    if match is None:
        return None
    locale = match.group(1) or DEFAULT_LOCALE
    return FontRequest(locale=locale, fonts=match.group(2).split(","))


def set_cache_control_headers(headers: MutableHeaders, maxage: int) -> None:
    """Add Date and Cache-Control when a max-age is configured.

    Headers that are already set are left alone.
    """
    if not maxage:
        return
    if "date" not in headers:
        headers["Date"] = formatdate(usegmt=True)
    if "cache-control" not in headers:
        headers["Cache-Control"] = f"public, max-age={int(maxage) // 1000}"


class FontCssMiddleware:
    """Serves generated font CSS in front of another ASGI app."""

    def __init__(self, app: ASGIApp, service: FontCssService) -> None:
        self.app = app
        self.service = service

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        font_request = match_font_request(scope["method"], scope["path"])
        if font_request is None:
            await self.app(scope, receive, send)
            return

        config = self.service.config
        ua = config.ua or Headers(scope=scope).get("user-agent")
        if not ua:
            await self.app(scope, receive, send)
            return

        try:
            entry = await self.service.get_css(ua, font_request.locale, font_request.fonts)
        except InvalidFontError as exc:
            # Let a higher level decide (usually a 404).
            logger.debug(f"Passing on font request: {exc}")
            await self.app(scope, receive, send)
            return

        response = FileResponse(entry.css_path, media_type="text/css")
        set_cache_control_headers(response.headers, config.maxage)

        responder: ASGIApp = response
        if config.compress:
            responder = GZipMiddleware(response, minimum_size=0)
        await responder(scope, receive, send)
