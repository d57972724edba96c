"""Allow ``python -m font_responder``."""

from .cli import cli

if __name__ == "__main__":
    cli()
