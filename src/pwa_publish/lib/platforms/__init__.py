"""Platform registry — concrete package targets and the "all" fan-out.

Public API:
    - Platform: Concrete platform enum (values are build-service identifiers)
    - PlatformDirective: Request-time directives (ALL)
    - ALL_PLATFORMS: Fixed fan-out order for ALL
    - parse_platform: Resolve a raw key to a target
    - expand_platforms: Expand a target into concrete platforms
"""

from pwa_publish.lib.platforms.registry import (
    ALL_PLATFORMS,
    PLATFORM_KEYS,
    Platform,
    PlatformDirective,
    PlatformTarget,
    expand_platforms,
    parse_platform,
)

__all__ = [
    "ALL_PLATFORMS",
    "PLATFORM_KEYS",
    "Platform",
    "PlatformDirective",
    "PlatformTarget",
    "expand_platforms",
    "parse_platform",
]
