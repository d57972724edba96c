"""
Font CSS service.

Holds the configuration, the CSS cache and the temp storage for one
responder. Usage:

    service = FontCssService()
    service.setup({"fonts": {...}, "locale_to_url_keys": {...}})
    entry = await service.get_css("all", "en", ["opensans-regular"])
    print(entry.css_path)
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from .cache import CacheEntry, CssCache, cache_filename, derive_key
from .config import ResponderConfig
from .errors import GenerationError, InvalidFontError
from .generator import CssGenerator, FontFaceGenerator
from .storage import TempStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedCss:
    """CSS returned by the generator, before it is persisted."""
    css: str


class FontCssService:
    """Generates, caches and persists font CSS.

    setup() must be called before generate_css() or get_css().
    """

    def __init__(
        self,
        generator: Optional[CssGenerator] = None,
        storage: Optional[TempStorage] = None,
    ) -> None:
        self._generator = generator or FontFaceGenerator()
        self._storage = storage or TempStorage()
        self._cache = CssCache()
        self._config: Optional[ResponderConfig] = None

    @property
    def config(self) -> ResponderConfig:
        if self._config is None:
            raise RuntimeError("FontCssService.setup() has not been called")
        return self._config

    @property
    def cache(self) -> CssCache:
        return self._cache

    @property
    def storage(self) -> TempStorage:
        return self._storage

    def setup(self, options: Union[ResponderConfig, Mapping[str, Any]]) -> None:
        """Install configuration and reset the CSS cache.

        Raises MissingRequiredOptionError if fonts or locale_to_url_keys
        is missing.
        """
        if isinstance(options, ResponderConfig):
            config = ResponderConfig.from_dict(options.to_dict())
        else:
            config = ResponderConfig.from_dict(options)

        self._config = config
        self._cache.clear()
        self._generator.setup(config.fonts, config.locale_to_url_keys)
        logger.info(
            f"Font CSS service configured: {len(config.fonts)} font(s), "
            f"maxage={config.maxage}ms, compress={config.compress}"
        )

    async def generate_css(self, ua: str, locale: str, fonts: Sequence[str]) -> GeneratedCss:
        """Generate CSS without touching the cache.

        InvalidFontError propagates unchanged; any other generator failure
        is raised as GenerationError.
        """
        if self._config is None:
            raise RuntimeError("FontCssService.setup() has not been called")
        try:
            css = await self._generator.get_font_css(ua=ua, locale=locale, fonts=list(fonts))
        except InvalidFontError:
            raise
        except Exception as exc:
            raise GenerationError(f"CSS generation failed: {exc}") from exc
        return GeneratedCss(css=css)

    async def get_css(self, ua: str, locale: str, fonts: Sequence[str]) -> CacheEntry:
        """Return cached CSS, generating and persisting it on a miss.

        Raises InvalidFontError, GenerationError or OSError. Failures are
        not cached.
        """
        key = derive_key(ua, locale, fonts)

        async def build() -> CacheEntry:
            generation = self._cache.generation
            generated = await self.generate_css(ua, locale, fonts)
            staged = await self._storage.write_staged(cache_filename(key), generated.css)
            if self._cache.generation != generation:
                # setup() ran meanwhile: the shared file name belongs to newer builds.
                logger.debug(f"Discarding stale font CSS build: {key}")
                return CacheEntry(css=generated.css, css_path=staged)
            css_path = self._storage.commit(staged, cache_filename(key))
            logger.info(f"Generated font CSS: {css_path.name}")
            return CacheEntry(css=generated.css, css_path=css_path)

        return await self._cache.get_or_build(key, build)

    def close(self) -> None:
        """Remove persisted CSS files and forget cached entries."""
        self._cache.clear()
        self._storage.cleanup()
