"""Tests for font_responder.generator — FontFaceGenerator."""

import pytest

from font_responder.errors import InvalidFontError
from font_responder.generator import FontFaceGenerator

from conftest import FONTS, LOCALE_TO_URL_KEYS

MODERN_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
IE8_UA = "Mozilla/4.0 (compatible; MSIE 8.0; Windows NT 6.1; Trident/4.0)"


@pytest.fixture
def font_generator():
    gen = FontFaceGenerator()
    gen.setup(FONTS, LOCALE_TO_URL_KEYS)
    return gen


class TestFontFaceGenerator:
    @pytest.mark.asyncio
    async def test_renders_font_face(self, font_generator):
        css = await font_generator.get_font_css(MODERN_UA, "en", ["opensans-regular"])

        assert css.startswith("@font-face {")
        assert "font-family: 'Open Sans';" in css
        assert "font-style: normal;" in css
        assert "font-weight: 400;" in css
        assert "local('Open Sans Regular')" in css
        assert "url('/fonts/latin/OpenSans-Regular.woff') format('woff')" in css

    @pytest.mark.asyncio
    async def test_one_block_per_font(self, font_generator):
        css = await font_generator.get_font_css(
            MODERN_UA, "en", ["opensans-regular", "opensans-bold"],
        )
        assert css.count("@font-face") == 2
        assert "font-weight: 700;" in css
        assert "format('woff2')" in css

    @pytest.mark.asyncio
    async def test_locale_selects_url_key(self, font_generator):
        css = await font_generator.get_font_css(MODERN_UA, "ru", ["opensans-regular"])
        assert "/fonts/cyrillic/OpenSans-Regular.woff" in css
        assert "/fonts/latin/" not in css

    @pytest.mark.asyncio
    async def test_unknown_locale_uses_default_url_key(self, font_generator):
        css = await font_generator.get_font_css(MODERN_UA, "xx", ["opensans-regular"])
        assert "/fonts/latin/OpenSans-Regular.woff" in css

    @pytest.mark.asyncio
    async def test_modern_ua_skips_eot(self, font_generator):
        css = await font_generator.get_font_css(MODERN_UA, "en", ["opensans-regular"])
        assert ".eot" not in css

    @pytest.mark.asyncio
    async def test_legacy_ie_gets_only_eot(self, font_generator):
        css = await font_generator.get_font_css(IE8_UA, "en", ["opensans-regular"])
        assert "format('embedded-opentype')" in css
        assert "woff" not in css
        assert "local(" not in css

    @pytest.mark.asyncio
    async def test_all_ua_gets_every_format(self, font_generator):
        css = await font_generator.get_font_css("all", "en", ["opensans-regular"])
        assert "local('Open Sans Regular')" in css
        assert "format('embedded-opentype')" in css
        assert "format('woff')" in css

    @pytest.mark.asyncio
    async def test_unknown_font(self, font_generator):
        with pytest.raises(InvalidFontError) as exc_info:
            await font_generator.get_font_css("all", "en", ["opensans-regular", "comic-sans"])
        assert exc_info.value.font == "comic-sans"

    @pytest.mark.asyncio
    async def test_setup_replaces_font_table(self, font_generator):
        font_generator.setup({"arial": {"fontFamily": "Arial"}}, {"default": "latin"})
        with pytest.raises(InvalidFontError):
            await font_generator.get_font_css("all", "en", ["opensans-regular"])
        css = await font_generator.get_font_css("all", "en", ["arial"])
        assert "font-family: 'Arial';" in css
        assert "src:" not in css
