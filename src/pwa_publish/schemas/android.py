"""Pydantic v2 schemas for Android (TWA) package settings.

These mirror the settings object the Android packaging service accepts.
They travel to the build service as a JSON string build parameter.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortcutItem(BaseModel):
    """A web manifest ``shortcuts`` entry (manifest spelling, not camelCase)."""

    name: str
    url: str
    short_name: str | None = None
    description: str | None = None
    icons: list[dict[str, str]] = Field(default_factory=list)


class AndroidSigningOptions(_CamelModel):
    """Keystore details for signing the generated APK."""

    file: str | None = Field(
        default=None,
        description="Base64 keystore contents; null when signing mode is 'new' or 'none'",
    )
    alias: str
    full_name: str
    organization: str
    organizational_unit: str
    country_code: str = Field(min_length=2, max_length=2)
    key_password: str
    store_password: str


class AndroidApkOptions(_CamelModel):
    """Settings for generating an Android package from a PWA."""

    package_id: str
    name: str
    launcher_name: str
    app_version: str
    app_version_code: int = Field(gt=0)
    display: Literal["standalone", "fullscreen"] = "standalone"
    host: str
    start_url: str
    web_manifest_url: str
    theme_color: str
    navigation_color: str
    background_color: str
    icon_url: str
    maskable_icon_url: str | None = None
    monochrome_icon_url: str | None = None
    shortcuts: list[ShortcutItem] = Field(default_factory=list)
    signing_mode: Literal["new", "none", "mine"] = "new"
    signing: AndroidSigningOptions | None = None
    fallback_type: Literal["customtabs", "webview"] = "customtabs"
    splash_screen_fade_out_duration: int = Field(default=300, ge=0)
    enable_notifications: bool = False


def encode_android_options(options: AndroidApkOptions) -> str:
    """Serialize Android settings to a build-parameter string."""
    return options.model_dump_json(by_alias=True)
