"""Build CLI commands.

Each command sets up a one-shot publish session from its options, runs the
matching publish operation and prints the produced link.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from pydantic import ValidationError

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from pwa_publish.core.config import Settings
    from pwa_publish.lib.session import PublishSession
    from pwa_publish.schemas.teams import TeamsParams

_IMAGE_KEYS = ("colorImageFile", "outlineImageFile")


def _load_settings() -> Settings:
    """Load settings, turning a configuration error into a CLI error exit."""
    from pwa_publish.core.config import get_settings

    try:
        return get_settings()
    except ValidationError as exc:
        typer.echo(f"Error: invalid configuration:\n{exc}")
        raise typer.Exit(code=1) from exc


def _open_session(settings: Settings, manifest_id: str | None, serviceworker: str | None = None) -> PublishSession:
    """Create a publish session backed by a live build-service client."""
    from pwa_publish.lib.build_service import BuildServiceClient
    from pwa_publish.lib.session import GeneratorState, PublishSession, ServiceWorkerState

    return PublishSession(
        client=BuildServiceClient(settings.manifests_url, timeout=settings.build_timeout),
        generator=GeneratorState(manifest_id=manifest_id),
        serviceworker=ServiceWorkerState(serviceworker=serviceworker),
    )


def _load_teams_params(path: Path) -> TeamsParams:
    """Read Teams metadata from a JSON file.

    Image entries that name an existing file (relative to the JSON file) are
    replaced by that file's contents; other values are taken as base64.
    """
    from pwa_publish.schemas.teams import TeamsParams

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object"
        raise ValueError(msg)
    for key in _IMAGE_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value:
            image_path = path.parent / value
            if image_path.is_file():
                data[key] = image_path.read_bytes()
    return TeamsParams.model_validate(data)


async def _run(operation: Awaitable[None], session: PublishSession) -> None:
    """Await a publish operation, turning PublishError into a CLI error exit."""
    from pwa_publish.lib.build_service import PublishError

    try:
        await operation
    except PublishError as exc:
        typer.echo(f"Error: {exc.code}: {exc.message}")
        raise typer.Exit(code=1) from exc
    finally:
        await session.client.close()


def build(
    manifest_id: Annotated[str, typer.Option("--manifest-id", help="Manifest identifier from the generator")],
    serviceworker: Annotated[str, typer.Option("--serviceworker", help="Service worker identifier")],
    platform: Annotated[str, typer.Option("--platform", help="Platform key, or 'all' for every platform")],
    href: Annotated[str, typer.Option("--href", help="URL of the site being packaged")],
    option: Annotated[
        list[str] | None,
        typer.Option("--option", help="Opaque build parameter (repeatable)"),
    ] = None,
    android_options: Annotated[
        Path | None,
        typer.Option("--android-options", help="JSON file with Android package settings", exists=True),
    ] = None,
) -> None:
    """Build packages for a platform (or all platforms) and print the archive link."""
    options = list(option) if option else None
    if android_options is not None:
        from pwa_publish.schemas.android import AndroidApkOptions, encode_android_options

        try:
            apk = AndroidApkOptions.model_validate_json(android_options.read_text(encoding="utf-8"))
        except ValidationError as exc:
            typer.echo(f"Error: invalid Android settings in {android_options}:\n{exc}")
            raise typer.Exit(code=1) from exc
        options = [encode_android_options(apk), *(options or [])]

    asyncio.run(_build_impl(manifest_id, serviceworker, platform, href, options))


async def _build_impl(
    manifest_id: str,
    serviceworker: str,
    platform: str,
    href: str,
    options: list[str] | None,
) -> None:
    """Async implementation of the build command."""
    from pwa_publish.services import publish_service

    settings = _load_settings()
    session = _open_session(settings, manifest_id, serviceworker)
    await _run(publish_service.build(session, platform, href, options), session)
    typer.echo(f"Archive: {session.state.archive_link}")


def build_appx(
    manifest_id: Annotated[str, typer.Option("--manifest-id", help="Manifest identifier from the generator")],
    publisher: Annotated[str, typer.Option("--publisher", help="Publisher display name")],
    publisher_id: Annotated[str, typer.Option("--publisher-id", help="Publisher identity, e.g. CN=...")],
    package: Annotated[str, typer.Option("--package", help="Package identity name")],
    version: Annotated[str, typer.Option("--version", help="Package version, e.g. 1.0.0.0")],
) -> None:
    """Build a Windows package and print its link."""
    asyncio.run(_build_appx_impl(manifest_id, publisher, publisher_id, package, version))


async def _build_appx_impl(
    manifest_id: str,
    publisher: str,
    publisher_id: str,
    package: str,
    version: str,
) -> None:
    """Async implementation of the build-appx command."""
    from pwa_publish.services import publish_service

    settings = _load_settings()
    session = _open_session(settings, manifest_id)
    await _run(publish_service.build_appx(session, publisher, publisher_id, package, version), session)
    typer.echo(f"Package: {session.state.appx_link}")


def build_teams(
    manifest_id: Annotated[str, typer.Option("--manifest-id", help="Manifest identifier from the generator")],
    serviceworker: Annotated[str, typer.Option("--serviceworker", help="Service worker identifier")],
    href: Annotated[str, typer.Option("--href", help="URL of the site being packaged")],
    teams_file: Annotated[
        Path,
        typer.Option("--teams-file", help="JSON file with Teams metadata", exists=True, dir_okay=False),
    ],
) -> None:
    """Build a Microsoft Teams package and print the archive link."""
    try:
        params = _load_teams_params(teams_file)
    except ValueError as exc:
        typer.echo(f"Error: invalid Teams metadata in {teams_file}:\n{exc}")
        raise typer.Exit(code=1) from exc

    asyncio.run(_build_teams_impl(manifest_id, serviceworker, href, params))


async def _build_teams_impl(
    manifest_id: str,
    serviceworker: str,
    href: str,
    params: TeamsParams,
) -> None:
    """Async implementation of the build-teams command."""
    from pwa_publish.services import publish_service

    settings = _load_settings()
    session = _open_session(settings, manifest_id, serviceworker)
    await _run(publish_service.build_teams(session, href, params=params), session)
    typer.echo(f"Archive: {session.state.archive_link}")
