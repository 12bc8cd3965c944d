"""Build service library — transport, request types and error classification.

Public API:
    - BuildServiceClient: Async HTTP client returning tagged results
    - BuildRequest / AppxBuildRequest: Request bodies
    - BuildSuccess / BuildFailure: Tagged call results
    - PublishError / PublishErrorCode: Stable error taxonomy
    - classify_appx_error: Signature-based appx failure classifier
"""

from pwa_publish.lib.build_service.classifier import appx_error_text, classify_appx_error
from pwa_publish.lib.build_service.client import BuildServiceClient
from pwa_publish.lib.build_service.errors import PublishError, PublishErrorCode, default_message
from pwa_publish.lib.build_service.types import (
    AppxBuildRequest,
    BuildFailure,
    BuildRequest,
    BuildResult,
    BuildSuccess,
    ServiceErrorKind,
)

__all__ = [
    "AppxBuildRequest",
    "BuildFailure",
    "BuildRequest",
    "BuildResult",
    "BuildServiceClient",
    "BuildSuccess",
    "PublishError",
    "PublishErrorCode",
    "ServiceErrorKind",
    "appx_error_text",
    "classify_appx_error",
    "default_message",
]
