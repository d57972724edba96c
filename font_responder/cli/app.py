"""Font Responder CLI application."""

import os
from pathlib import Path

import click
from rich.console import Console

from .. import __version__
from ..config import ResponderConfig

console = Console()

CONFIG_ENV_VAR = "FONT_RESPONDER_CONFIG"


def find_config() -> str | None:
    """
    Find config file using standard priority order:

    1. FONT_RESPONDER_CONFIG environment variable
    2. fonts.yaml in current directory

    Returns None if no config found.
    """
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        path = Path(env_config)
        if path.exists():
            return str(path)

    project_config = Path.cwd() / "fonts.yaml"
    if project_config.exists():
        return str(project_config)

    return None


def load_config(ctx: click.Context) -> ResponderConfig:
    """Load the config chosen by the group options, or fail the command."""
    path = ctx.obj.get("config")
    if not path:
        raise click.UsageError(
            f"No config file. Pass -c/--config or set {CONFIG_ENV_VAR}."
        )
    return ResponderConfig.load(path)


@click.group()
@click.version_option(version=__version__, prog_name="font-responder")
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """Font Responder: serve generated web-font CSS.

    Config file locations (in priority order):

        1. -c/--config PATH (explicit)

        2. FONT_RESPONDER_CONFIG env var

        3. fonts.yaml (current directory)

    Examples:

        font-responder serve --port 8430

        font-responder css --ua all --locale en opensans-regular
    """
    ctx.ensure_object(dict)

    if config is None:
        config = find_config()
        if config and verbose:
            console.print(f"[dim]Using config: {config}[/dim]")

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


# Import and register commands
from .commands import css, serve

cli.add_command(css.css)
cli.add_command(serve.serve)
