"""Shared test fixtures for settings, build-service stubs and publish sessions."""

import base64
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from pwa_publish.core.config import Settings
from pwa_publish.lib.build_service import BuildServiceClient, BuildSuccess
from pwa_publish.lib.session import GeneratorState, PublishSession, ServiceWorkerState

ARCHIVE_URL = "https://x/y.zip"
APPX_URL = "https://x/app.msixbundle"
SITE_URL = "https://site.example.com"


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        api_url="https://build.example.com",
        build_timeout=5.0,
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def build_client() -> MagicMock:
    """Build-service client stub whose calls succeed by default."""
    client = MagicMock(spec=BuildServiceClient)
    client.build = AsyncMock(return_value=BuildSuccess(archive=ARCHIVE_URL, payload={"archive": ARCHIVE_URL}))
    client.build_appx = AsyncMock(return_value=BuildSuccess(archive=APPX_URL, payload={"archive": APPX_URL}))
    client.close = AsyncMock()
    return client


@pytest.fixture
def publish_session(build_client: MagicMock) -> PublishSession:
    """A session whose upstream steps have produced a manifest and a service worker."""
    return PublishSession(
        client=build_client,
        generator=GeneratorState(manifest_id="manifest-123", url=SITE_URL),
        serviceworker=ServiceWorkerState(serviceworker="1"),
    )


@pytest.fixture
def teams_payload() -> dict:
    """Complete Teams metadata in wire form."""
    return {
        "publisherName": "Contoso",
        "shortDescription": "Short",
        "longDescription": "A much longer description",
        "privacyUrl": "https://contoso.example.com/privacy",
        "termsOfUseUrl": "https://contoso.example.com/terms",
        "colorImageFile": base64.b64encode(b"\x89PNG color").decode("ascii"),
    }


@pytest.fixture
def teams_options(teams_payload: dict) -> list[str]:
    """Build options carrying complete Teams metadata."""
    return [json.dumps(teams_payload)]
