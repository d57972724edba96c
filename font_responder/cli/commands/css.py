"""CSS command."""

import asyncio

import click
from rich.console import Console

from ...errors import InvalidFontError
from ...service import FontCssService
from ..app import load_config

console = Console()


@click.command()
@click.argument("fonts")
@click.option("--ua", default="all", show_default=True, help="User agent to generate for")
@click.option("--locale", "-l", default="default", show_default=True, help="Locale")
@click.pass_context
def css(ctx: click.Context, fonts: str, ua: str, locale: str) -> None:
    """Print generated CSS for a comma separated list of FONTS.

    Examples:

        font-responder css opensans-regular,opensans-bold

        font-responder css --ua "Mozilla/5.0" -l ru opensans-regular
    """
    config = load_config(ctx)
    service = FontCssService()
    service.setup(config)

    try:
        result = asyncio.run(service.generate_css(ua, locale, fonts.split(",")))
    except InvalidFontError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1)

    click.echo(result.css, nl=False)
