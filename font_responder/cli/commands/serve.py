"""Serve command."""

import click
from rich.console import Console

from ...utils.logging import setup_logging
from ..app import load_config

console = Console()


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Server host")
@click.option("--port", type=int, default=8430, show_default=True, help="Server port")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    help="Log level (default: from config)",
)
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, log_level: str | None) -> None:
    """Run the font CSS web server.

    Examples:

        font-responder -c fonts.yaml serve

        font-responder serve --port 9000 --log-level DEBUG
    """
    import uvicorn

    from ...web import create_app

    config = load_config(ctx)
    if log_level:
        config.log_level = log_level
    setup_logging(config)

    app = create_app(config=config)

    console.print("\n  [bold]Font Responder[/bold]")
    console.print(f"  Fonts: {len(config.fonts)}")
    console.print(f"  URL: http://{host}:{port}/<locale>/<fonts>/fonts.css\n")

    # With a max-age the middleware sets Date itself; a second one from
    # uvicorn would duplicate it.
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=config.log_level.lower(),
        date_header=not config.maxage,
    )
