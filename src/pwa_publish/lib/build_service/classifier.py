"""Classification of Windows package build failures.

The appx endpoint reports failures as free text from the packaging tool, so
known faults are recognized by signature.  Anything unrecognized falls into
the generic bucket.
"""

from pwa_publish.lib.build_service.errors import PublishErrorCode
from pwa_publish.lib.build_service.types import BuildFailure

PUBLISHER_IDENTITY_MARKER = "@Publisher\nPackage creation failed"
VERSION_NUMBER_MARKER = "@Version\nPackage creation failed."

# Checked in order; first match wins
_SIGNATURES: tuple[tuple[str, PublishErrorCode], ...] = (
    (PUBLISHER_IDENTITY_MARKER, PublishErrorCode.INVALID_PUBLISHER_IDENTITY),
    (VERSION_NUMBER_MARKER, PublishErrorCode.INVALID_VERSION_NUMBER),
)


def classify_appx_error(text: str) -> PublishErrorCode:
    """Reduce raw appx error text to a stable error code.

    Args:
        text: Error text reported by the build service.

    Returns:
        The first matching fault code, or PACKAGE_BUILDING_ERROR.
    """
    for marker, code in _SIGNATURES:
        if marker in text:
            return code
    return PublishErrorCode.PACKAGE_BUILDING_ERROR


def appx_error_text(failure: BuildFailure) -> str:
    """Pick the text to classify: the structured error, else the failure's string form."""
    return failure.error if failure.error is not None else failure.message
