"""Static platform registry for package builds.

Concrete platforms map a canonical key (as the web client names them) to the
identifier the build service expects.  The "all platforms" request is a
separate directive, so it can never be sent as a literal platform name.
"""

from enum import StrEnum


class Platform(StrEnum):
    """A concrete package target, valued by its build-service identifier."""

    WEB = "web"
    WINDOWS10 = "windows10"
    WINDOWS = "windows"
    IOS = "ios"
    ANDROID = "android"
    ANDROID_TWA = "android-twa"
    SAMSUNG = "samsung"
    MSTEAMS = "msteams"


class PlatformDirective(StrEnum):
    """Request-time instructions that expand to several platforms."""

    ALL = "All"


PlatformTarget = Platform | PlatformDirective

# Canonical key -> platform.  Order is the fan-out order for ALL; the build
# service reports per-platform progress positionally, so it must not change.
PLATFORM_KEYS: dict[str, Platform] = {
    "web": Platform.WEB,
    "windows10": Platform.WINDOWS10,
    "windows": Platform.WINDOWS,
    "ios": Platform.IOS,
    "android": Platform.ANDROID,
    "androidTWA": Platform.ANDROID_TWA,
    "samsung": Platform.SAMSUNG,
    "msteams": Platform.MSTEAMS,
}

ALL_PLATFORMS: tuple[Platform, ...] = tuple(PLATFORM_KEYS.values())


def parse_platform(key: str | None) -> PlatformTarget | None:
    """Resolve a platform key to a registry target.

    Accepts a canonical key (``androidTWA``), a build-service identifier
    (``android-twa``) or the ``all`` directive in either case.

    Args:
        key: Raw platform key from the caller.

    Returns:
        The matching Platform or PlatformDirective, or None when the key is
        empty or unknown.
    """
    if not key:
        return None
    if key.lower() == PlatformDirective.ALL.lower():
        return PlatformDirective.ALL
    if key in PLATFORM_KEYS:
        return PLATFORM_KEYS[key]
    try:
        return Platform(key)
    except ValueError:
        return None


def expand_platforms(target: PlatformTarget) -> tuple[Platform, ...]:
    """Expand a target into the ordered list of concrete platforms to build.

    Args:
        target: A single platform or the ALL directive.

    Returns:
        Every registered platform in registry order for ALL, otherwise a
        one-element tuple holding the target.
    """
    if target is PlatformDirective.ALL:
        return ALL_PLATFORMS
    return (Platform(target),)
