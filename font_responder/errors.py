"""
Font Responder error types.

Only InvalidFontError is recovered by the responder (the request is passed on
to the wrapped application). Everything else propagates.
"""


class FontResponderError(Exception):
    """Base class for font responder errors."""


class MissingRequiredOptionError(FontResponderError, ValueError):
    """A required setup option is absent."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Missing required option: {option}")


class InvalidFontError(FontResponderError, LookupError):
    """A requested font is not in the font table."""

    def __init__(self, font: str):
        self.font = font
        super().__init__(f"Invalid font: {font}")


class GenerationError(FontResponderError):
    """The CSS generator failed for a reason other than an unknown font."""
