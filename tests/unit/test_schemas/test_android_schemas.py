"""Unit tests for the Android package settings schema."""

import json

import pytest
from pydantic import ValidationError

from pwa_publish.schemas.android import AndroidApkOptions, encode_android_options


def _options_json(**overrides: object) -> dict:
    data: dict = {
        "packageId": "com.contoso.app",
        "name": "Contoso",
        "launcherName": "Contoso",
        "appVersion": "1.0.0",
        "appVersionCode": 1,
        "host": "contoso.example.com",
        "startUrl": "/",
        "webManifestUrl": "https://contoso.example.com/manifest.json",
        "themeColor": "#112233",
        "navigationColor": "#112233",
        "backgroundColor": "#ffffff",
        "iconUrl": "https://contoso.example.com/icon-512.png",
        "shortcuts": [{"name": "Inbox", "short_name": "Inbox", "url": "/inbox"}],
    }
    data.update(overrides)
    return data


class TestAndroidApkOptions:
    """Tests for AndroidApkOptions validation and encoding."""

    def test_defaults(self) -> None:
        options = AndroidApkOptions.model_validate(_options_json())
        assert options.display == "standalone"
        assert options.signing_mode == "new"
        assert options.fallback_type == "customtabs"
        assert options.signing is None
        assert options.shortcuts[0].short_name == "Inbox"

    def test_encoded_keys_are_camel_case(self) -> None:
        options = AndroidApkOptions.model_validate(_options_json())
        data = json.loads(encode_android_options(options))
        assert data["packageId"] == "com.contoso.app"
        assert data["splashScreenFadeOutDuration"] == 300
        assert data["enableNotifications"] is False
        # Shortcut entries keep web manifest spelling
        assert data["shortcuts"][0]["short_name"] == "Inbox"

    def test_signing_options(self) -> None:
        signing = {
            "file": None,
            "alias": "my-key-alias",
            "fullName": "Jane Doe",
            "organization": "Contoso",
            "organizationalUnit": "Engineering",
            "countryCode": "US",
            "keyPassword": "secret",
            "storePassword": "secret",
        }
        options = AndroidApkOptions.model_validate(_options_json(signingMode="mine", signing=signing))
        assert options.signing is not None
        assert options.signing.organizational_unit == "Engineering"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"display": "minimal-ui"},
            {"signingMode": "other"},
            {"fallbackType": "chrome"},
            {"appVersionCode": 0},
        ],
    )
    def test_rejects_invalid_values(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            AndroidApkOptions.model_validate(_options_json(**overrides))
