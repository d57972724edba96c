"""Shared fixtures for font responder tests."""

from typing import Any, Dict, List, Sequence

import pytest

from font_responder.errors import InvalidFontError
from font_responder.generator import CssGenerator
from font_responder.storage import TempStorage


FONTS: Dict[str, Any] = {
    "opensans-regular": {
        "fontFamily": "Open Sans",
        "fontStyle": "normal",
        "fontWeight": "400",
        "formats": [
            {"type": "local", "url": "Open Sans Regular"},
            {"type": "embedded-opentype", "url": "/fonts/OpenSans-Regular.eot"},
            {
                "type": "woff",
                "url": {
                    "latin": "/fonts/latin/OpenSans-Regular.woff",
                    "cyrillic": "/fonts/cyrillic/OpenSans-Regular.woff",
                },
            },
        ],
    },
    "opensans-bold": {
        "fontFamily": "Open Sans",
        "fontWeight": "700",
        "formats": [
            {"type": "woff2", "url": "/fonts/OpenSans-Bold.woff2"},
        ],
    },
}

LOCALE_TO_URL_KEYS = {
    "default": "latin",
    "en": "latin",
    "ru": "cyrillic",
}


class RecordingGenerator(CssGenerator):
    """Generator that records calls and returns predictable CSS."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.setups: List[tuple] = []
        self.fonts: Dict[str, Any] = {}

    def setup(self, fonts, locale_to_url_keys) -> None:
        self.fonts = dict(fonts)
        self.setups.append((fonts, locale_to_url_keys))

    async def get_font_css(self, ua: str, locale: str, fonts: Sequence[str]) -> str:
        self.calls.append((ua, locale, list(fonts)))
        for name in fonts:
            if name not in self.fonts:
                raise InvalidFontError(name)
        return f"/* {ua} {locale} {','.join(fonts)} */\n"


@pytest.fixture
def options() -> Dict[str, Any]:
    return {"fonts": FONTS, "locale_to_url_keys": LOCALE_TO_URL_KEYS}


@pytest.fixture
def generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture
def storage(tmp_path):
    store = TempStorage(parent=tmp_path)
    yield store
    store.cleanup()
