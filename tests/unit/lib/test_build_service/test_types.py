"""Unit tests for build-service request and result types."""

import pytest

from pwa_publish.lib.build_service import (
    AppxBuildRequest,
    BuildFailure,
    BuildRequest,
    PublishError,
    PublishErrorCode,
    ServiceErrorKind,
)
from pwa_publish.lib.platforms import Platform, PlatformDirective


class TestBuildRequest:
    """Tests for BuildRequest."""

    def test_payload_without_parameters_omits_key(self) -> None:
        request = BuildRequest(platforms=(Platform.WEB,), dir_suffix=Platform.WEB)
        assert request.to_payload() == {"platforms": ["web"], "dirSuffix": "web"}

    def test_payload_keeps_parameter_order(self) -> None:
        request = BuildRequest(
            platforms=(Platform.MSTEAMS,),
            dir_suffix=Platform.MSTEAMS,
            parameters=("b", "a"),
        )
        assert request.to_payload()["parameters"] == ["b", "a"]

    def test_dir_suffix_is_the_requested_target(self) -> None:
        request = BuildRequest(platforms=(Platform.WEB, Platform.IOS), dir_suffix=PlatformDirective.ALL)
        assert request.to_payload()["dirSuffix"] == "All"

    def test_empty_platforms_rejected(self) -> None:
        with pytest.raises(ValueError, match="platforms must not be empty"):
            BuildRequest(platforms=(), dir_suffix=Platform.WEB)


class TestAppxBuildRequest:
    """Tests for AppxBuildRequest."""

    def test_wire_fields_are_remapped(self) -> None:
        request = AppxBuildRequest(publisher="Contoso", publisher_id="CN=contoso", package="App", version="1.0.0.0")
        payload = request.to_payload()
        assert payload["name"] == "Contoso"
        assert payload["publisher"] == "CN=contoso"
        assert "publisher_id" not in payload


class TestBuildFailure:
    """Tests for BuildFailure.message preference."""

    def test_message_preference(self) -> None:
        assert BuildFailure(kind=ServiceErrorKind.HTTP_ERROR, error="e", text="t", status_text="s").message == "e"
        assert BuildFailure(kind=ServiceErrorKind.HTTP_ERROR, text="t", status_text="s").message == "t"
        assert BuildFailure(kind=ServiceErrorKind.HTTP_ERROR, status_text="s").message == "s"
        assert BuildFailure(kind=ServiceErrorKind.TRANSPORT_ERROR).message == "transport_error"


class TestPublishError:
    """Tests for PublishError."""

    def test_default_message(self) -> None:
        exc = PublishError(PublishErrorCode.INVALID_VERSION_NUMBER)
        assert exc.message == "Invalid Version Number."
        assert exc.failures == (PublishErrorCode.INVALID_VERSION_NUMBER,)
        assert str(exc) == "InvalidVersionNumber: Invalid Version Number."

    def test_custom_message_and_failures(self) -> None:
        exc = PublishError(
            PublishErrorCode.MANIFEST_REQUIRED,
            "no manifest",
            failures=(PublishErrorCode.MANIFEST_REQUIRED, PublishErrorCode.PLATFORM_REQUIRED),
        )
        assert exc.message == "no manifest"
        assert exc.failures[1] == PublishErrorCode.PLATFORM_REQUIRED
