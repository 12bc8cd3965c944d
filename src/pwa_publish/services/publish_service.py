"""Publish service — build orchestration for a publish session.

Validates a build request against the session's upstream state, expands the
platform selection, calls the build service and records the produced
artifact links on the session's ``PublishState``.
"""

from collections.abc import Sequence

from loguru import logger

from pwa_publish.lib.build_service import (
    AppxBuildRequest,
    BuildFailure,
    BuildRequest,
    PublishError,
    PublishErrorCode,
    appx_error_text,
    classify_appx_error,
    default_message,
)
from pwa_publish.lib.platforms import (
    Platform,
    PlatformDirective,
    PlatformTarget,
    expand_platforms,
    parse_platform,
)
from pwa_publish.lib.session import PublishSession
from pwa_publish.schemas.teams import TeamsParams, decode_teams_options, encode_teams_params


def _raise_first(failures: list[tuple[PublishErrorCode, str | None]]) -> None:
    """Raise the first gate failure, carrying every detected failure.

    All gates of an operation are evaluated before this is called, so a
    caller sees the earliest failure and can inspect the rest on
    ``PublishError.failures``.
    """
    if not failures:
        return
    code, message = failures[0]
    logger.warning("Publish request rejected: {}", ", ".join(str(c) for c, _ in failures))
    raise PublishError(code, message, failures=tuple(c for c, _ in failures))


def _resolve_target(platform: PlatformTarget | str | None) -> PlatformTarget | None:
    if isinstance(platform, Platform | PlatformDirective):
        return platform
    return parse_platform(platform)


async def build(
    session: PublishSession,
    platform: PlatformTarget | str | None,
    href: str,
    options: Sequence[str] | None = None,
) -> None:
    """Build packages for one platform, or for every platform.

    Args:
        session: The publish session.
        platform: A platform, ``PlatformDirective.ALL`` or a raw platform key.
        href: URL of the site being packaged.
        options: Platform-specific build parameters, passed through opaque.

    Raises:
        PublishError: MANIFEST_REQUIRED or PLATFORM_REQUIRED before any
            network call; BUILD_FAILED when the service reports a failure.
    """
    manifest_id = session.manifest_id
    serviceworker = session.serviceworker_id
    target = _resolve_target(platform)

    failures: list[tuple[PublishErrorCode, str | None]] = []
    if not manifest_id or not serviceworker:
        failures.append((PublishErrorCode.MANIFEST_REQUIRED, None))
    if target is None:
        detail = f"Unknown platform {platform!r}." if platform else None
        failures.append((PublishErrorCode.PLATFORM_REQUIRED, detail))
    _raise_first(failures)
    assert manifest_id is not None and serviceworker is not None and target is not None

    request = BuildRequest(
        platforms=expand_platforms(target),
        dir_suffix=target,
        parameters=tuple(options) if options is not None else None,
    )
    logger.info("Building {} for manifest {}", ", ".join(request.platforms), manifest_id)
    result = await session.client.build(manifest_id, serviceworker, href, request)

    if isinstance(result, BuildFailure):
        logger.error("Build for {} failed: {}", target, result.message)
        raise PublishError(PublishErrorCode.BUILD_FAILED, result.message, status_code=result.status_code)

    session.state.update_archive_link(result.archive)
    logger.info("Archive ready for {}: {}", target, result.archive)


async def build_appx(
    session: PublishSession,
    publisher: str | None,
    publisher_id: str | None,
    package: str | None,
    version: str | None,
) -> None:
    """Build a Windows package.

    Args:
        session: The publish session.
        publisher: Publisher display name.
        publisher_id: Publisher identity (e.g. ``CN=...``).
        package: Package identity name.
        version: Package version (``1.0.0.0`` form).

    Raises:
        PublishError: MANIFEST_REQUIRED or FIELDS_REQUIRED before any network
            call; a classified appx code when the service reports a failure.
    """
    manifest_id = session.manifest_id
    fields = {"publisher": publisher, "publisherId": publisher_id, "package": package, "version": version}
    missing = [name for name, value in fields.items() if not value]

    failures: list[tuple[PublishErrorCode, str | None]] = []
    if not manifest_id:
        failures.append((PublishErrorCode.MANIFEST_REQUIRED, "A manifest is required."))
    if missing:
        failures.append((PublishErrorCode.FIELDS_REQUIRED, f"Missing required fields: {', '.join(missing)}"))
    _raise_first(failures)
    assert manifest_id is not None

    request = AppxBuildRequest(
        publisher=publisher or "",
        publisher_id=publisher_id or "",
        package=package or "",
        version=version or "",
    )
    logger.info("Building Windows package {} {} for manifest {}", package, version, manifest_id)
    result = await session.client.build_appx(manifest_id, request)

    if isinstance(result, BuildFailure):
        code = classify_appx_error(appx_error_text(result))
        logger.error("Windows package build failed ({}): {}", code, result.message)
        raise PublishError(code, default_message(code), status_code=result.status_code)

    session.state.update_appx_link(result.archive)
    logger.info("Windows package ready: {}", result.archive)


async def build_teams(
    session: PublishSession,
    href: str,
    options: Sequence[str] | None = None,
    *,
    params: TeamsParams | None = None,
) -> None:
    """Validate Teams metadata, then build the Teams package.

    Metadata is read from the first entry of ``options``.  A structured
    ``params`` may be given instead; it is encoded into ``options`` when no
    options were passed.

    Raises:
        PublishError: MANIFEST_REQUIRED or FIELDS_REQUIRED before delegating;
            anything ``build`` raises afterwards.
    """
    if options is None and params is not None:
        options = [encode_teams_params(params)]

    failures: list[tuple[PublishErrorCode, str | None]] = []
    if not session.manifest_id:
        failures.append((PublishErrorCode.MANIFEST_REQUIRED, "A manifest is required."))

    try:
        teams = decode_teams_options(options)
    except ValueError as exc:
        logger.warning("Unreadable Teams options: {}", exc)
        failures.append((PublishErrorCode.FIELDS_REQUIRED, "Teams options could not be read."))
    else:
        missing = teams.missing_fields()
        if missing:
            failures.append((PublishErrorCode.FIELDS_REQUIRED, f"Missing required fields: {', '.join(missing)}"))
    _raise_first(failures)

    await build(session, Platform.MSTEAMS, href, options)


def disable_download_button(session: PublishSession) -> None:
    """Gate the download button off while a package is not ready."""
    session.state.update_download_disabled(True)


def enable_download_button(session: PublishSession) -> None:
    """Open the download button once a package is ready."""
    session.state.update_download_disabled(False)


def update_status(session: PublishSession) -> None:
    """Recompute readiness from whether the manifest has a source URL."""
    session.state.update_status(bool(session.generator.url))


def reset_app_data(session: PublishSession) -> None:
    """Reset the generator and service worker states for a new publish flow.

    The session's own ``PublishState`` is left as is; a new flow starts
    from a new ``PublishSession``.
    """
    logger.debug("Resetting generator and service worker state")
    session.generator.reset()
    session.serviceworker.reset()
