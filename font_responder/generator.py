"""CSS generator collaborators.

A generator turns a font table into ``@font-face`` CSS for one user agent,
locale and font set. To plug in another generator:
1. Subclass CssGenerator, implement setup() and get_font_css()
2. Pass an instance to FontCssService(generator=...)
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from .errors import InvalidFontError

ALL_USER_AGENTS = "all"

# Internet Explorer 6-8 only understand EOT.
_LEGACY_IE_RE = re.compile(r"MSIE [678]\.")

_KNOWN_FORMATS = frozenset({"embedded-opentype", "woff2", "woff", "truetype", "svg"})


class CssGenerator(ABC):
    """Abstract font-face CSS generator."""

    @abstractmethod
    def setup(self, fonts: Mapping[str, Any], locale_to_url_keys: Mapping[str, str]) -> None:
        """Install the font table and locale to URL key mapping."""

    @abstractmethod
    async def get_font_css(self, ua: str, locale: str, fonts: Sequence[str]) -> str:
        """Return CSS for ``fonts``.

        Raises InvalidFontError if a font is not in the font table.
        """


class FontFaceGenerator(CssGenerator):
    """Renders one ``@font-face`` block per requested font.

    Font table entries look like::

        opensans-regular:
          fontFamily: Open Sans
          fontStyle: normal
          fontWeight: "400"
          formats:
            - type: local
              url: Open Sans Regular
            - type: woff
              url:
                latin: /fonts/latin/OpenSans-Regular.woff
                cyrillic: /fonts/cyrillic/OpenSans-Regular.woff
    """

    def __init__(self) -> None:
        self._fonts: dict[str, Any] = {}
        self._locale_to_url_keys: dict[str, str] = {}

    def setup(self, fonts: Mapping[str, Any], locale_to_url_keys: Mapping[str, str]) -> None:
        self._fonts = dict(fonts)
        self._locale_to_url_keys = dict(locale_to_url_keys)

    async def get_font_css(self, ua: str, locale: str, fonts: Sequence[str]) -> str:
        # Validate everything before rendering anything.
        for name in fonts:
            if name not in self._fonts:
                raise InvalidFontError(name)

        url_key = self._url_key(locale)
        blocks = [self._render(self._fonts[name], ua, url_key) for name in fonts]
        return "\n".join(blocks)

    def _url_key(self, locale: str) -> str | None:
        if locale in self._locale_to_url_keys:
            return self._locale_to_url_keys[locale]
        return self._locale_to_url_keys.get("default")

    def _render(self, font: Mapping[str, Any], ua: str, url_key: str | None) -> str:
        sources = []
        for fmt in font.get("formats", []):
            fmt_type = fmt.get("type", "")
            if not _supports(ua, fmt_type):
                continue
            src = _source(fmt_type, fmt.get("url"), url_key)
            if src:
                sources.append(src)

        lines = [
            "@font-face {",
            f"  font-family: '{font['fontFamily']}';",
            f"  font-style: {font.get('fontStyle', 'normal')};",
            f"  font-weight: {font.get('fontWeight', '400')};",
        ]
        if sources:
            lines.append("  src: " + ",\n       ".join(sources) + ";")
        lines.append("}")
        return "\n".join(lines) + "\n"


def _supports(ua: str, fmt_type: str) -> bool:
    if ua == ALL_USER_AGENTS:
        return True
    if _LEGACY_IE_RE.search(ua):
        return fmt_type == "embedded-opentype"
    return fmt_type != "embedded-opentype"


def _source(fmt_type: str, url: Any, url_key: str | None) -> str | None:
    if isinstance(url, Mapping):
        url = url.get(url_key) if url_key is not None else None
    if not url:
        return None
    if fmt_type == "local":
        return f"local('{url}')"
    if fmt_type not in _KNOWN_FORMATS:
        return f"url('{url}')"
    return f"url('{url}') format('{fmt_type}')"
