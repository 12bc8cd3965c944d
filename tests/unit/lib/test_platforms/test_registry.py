"""Unit tests for the platform registry."""

import pytest

from pwa_publish.lib.platforms import (
    ALL_PLATFORMS,
    PLATFORM_KEYS,
    Platform,
    PlatformDirective,
    expand_platforms,
    parse_platform,
)


class TestParsePlatform:
    """Tests for parse_platform()."""

    @pytest.mark.parametrize(("key", "platform"), list(PLATFORM_KEYS.items()))
    def test_canonical_keys(self, key: str, platform: Platform) -> None:
        assert parse_platform(key) is platform

    @pytest.mark.parametrize("platform", list(Platform))
    def test_wire_identifiers(self, platform: Platform) -> None:
        assert parse_platform(str(platform)) is platform

    @pytest.mark.parametrize("key", ["all", "All", "ALL"])
    def test_all_is_a_directive(self, key: str) -> None:
        target = parse_platform(key)
        assert target is PlatformDirective.ALL
        assert not isinstance(target, Platform)

    @pytest.mark.parametrize("key", [None, "", "blackberry", "Web"])
    def test_unknown_or_empty_returns_none(self, key: str | None) -> None:
        assert parse_platform(key) is None


class TestExpandPlatforms:
    """Tests for expand_platforms()."""

    def test_all_expands_in_fixed_order(self) -> None:
        assert [str(p) for p in expand_platforms(PlatformDirective.ALL)] == [
            "web",
            "windows10",
            "windows",
            "ios",
            "android",
            "android-twa",
            "samsung",
            "msteams",
        ]

    def test_all_expansion_is_stable(self) -> None:
        assert expand_platforms(PlatformDirective.ALL) == expand_platforms(PlatformDirective.ALL) == ALL_PLATFORMS

    def test_all_never_appears_in_expansion(self) -> None:
        assert "All" not in [str(p) for p in expand_platforms(PlatformDirective.ALL)]

    @pytest.mark.parametrize("platform", list(Platform))
    def test_single_platform(self, platform: Platform) -> None:
        assert expand_platforms(platform) == (platform,)
