"""Stable error identifiers surfaced by publish operations."""

from enum import StrEnum


class PublishErrorCode(StrEnum):
    """Error identifiers a caller can branch on."""

    MANIFEST_REQUIRED = "ManifestRequired"
    PLATFORM_REQUIRED = "PlatformRequired"
    FIELDS_REQUIRED = "FieldsRequired"
    BUILD_FAILED = "BuildFailed"
    INVALID_PUBLISHER_IDENTITY = "InvalidPublisherIdentity"
    INVALID_VERSION_NUMBER = "InvalidVersionNumber"
    PACKAGE_BUILDING_ERROR = "PackageBuildingError"


# User-facing messages for codes whose text is not taken from the service
_DEFAULT_MESSAGES: dict[PublishErrorCode, str] = {
    PublishErrorCode.MANIFEST_REQUIRED: "A manifest and a service worker are required.",
    PublishErrorCode.PLATFORM_REQUIRED: "A platform is required.",
    PublishErrorCode.FIELDS_REQUIRED: "Required fields are missing.",
    PublishErrorCode.BUILD_FAILED: "Build failed.",
    PublishErrorCode.INVALID_PUBLISHER_IDENTITY: "Invalid Publisher Identity.",
    PublishErrorCode.INVALID_VERSION_NUMBER: "Invalid Version Number.",
    PublishErrorCode.PACKAGE_BUILDING_ERROR: "Package building error.",
}


def default_message(code: PublishErrorCode) -> str:
    """Return the user-facing message for an error code."""
    return _DEFAULT_MESSAGES[code]


class PublishError(Exception):
    """Raised when a publish operation fails.

    Args:
        code: Stable error identifier.
        message: Human-readable description; defaults to the code's message.
        failures: Every gate failure detected for the call, in evaluation
            order.  The first entry is always ``code``.
        status_code: HTTP status from the build service, when there was one.
    """

    def __init__(
        self,
        code: PublishErrorCode,
        message: str | None = None,
        *,
        failures: tuple[PublishErrorCode, ...] = (),
        status_code: int | None = None,
    ) -> None:
        self.code = code
        self.message = message or default_message(code)
        self.failures = failures or (code,)
        self.status_code = status_code
        super().__init__(f"{code}: {self.message}")
