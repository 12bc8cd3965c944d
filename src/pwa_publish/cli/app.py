"""Typer CLI root application."""

import typer
from pydantic import ValidationError

from pwa_publish.core.config import get_settings
from pwa_publish.core.logging import setup_logging

app = typer.Typer(name="pwa-publish", help="Build installable packages for a web app manifest")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    try:
        settings = get_settings()
    except ValidationError:
        # Service commands load settings again and report the problem
        setup_logging()
        return
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


@app.command("platforms")
def platforms() -> None:
    """List the platforms packages can be built for."""
    from pwa_publish.lib.platforms import PLATFORM_KEYS, PlatformDirective

    for key, platform in PLATFORM_KEYS.items():
        typer.echo(f"{key:12s} {platform}")
    typer.echo(f"{'all':12s} {PlatformDirective.ALL} (every platform above, in this order)")


def _register_subcommands() -> None:
    """Register the build commands."""
    from pwa_publish.cli.build_cmd import build, build_appx, build_teams

    app.command("build")(build)
    app.command("build-appx")(build_appx)
    app.command("build-teams")(build_teams)


_register_subcommands()
