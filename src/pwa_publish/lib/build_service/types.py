"""Request and result types for the package build service.

Requests know how to render their JSON wire body; results are a tagged
union so callers never inspect an exception's shape.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pwa_publish.lib.platforms import Platform, PlatformTarget


@dataclass(frozen=True)
class BuildRequest:
    """Body of a generic ``/build`` request.

    Attributes:
        platforms: Concrete platforms to build, in fan-out order.
        dir_suffix: The target the caller asked for (``All`` for a fan-out);
            the service uses it for output layout.
        parameters: Optional platform-specific opaque strings.
    """

    platforms: tuple[Platform, ...]
    dir_suffix: PlatformTarget
    parameters: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not self.platforms:
            msg = "platforms must not be empty"
            raise ValueError(msg)

    def to_payload(self) -> dict[str, Any]:
        """Render the JSON body; ``parameters`` is omitted when absent."""
        payload: dict[str, Any] = {
            "platforms": [str(p) for p in self.platforms],
            "dirSuffix": str(self.dir_suffix),
        }
        if self.parameters is not None:
            payload["parameters"] = list(self.parameters)
        return payload


@dataclass(frozen=True)
class AppxBuildRequest:
    """Body of a Windows package ``/appx`` request.

    The service names its fields differently from the form: the wire
    ``name`` carries the publisher display name and the wire ``publisher``
    carries the publisher identity.
    """

    publisher: str
    publisher_id: str
    package: str
    version: str

    def to_payload(self) -> dict[str, str]:
        """Render the JSON body with the service's field names."""
        return {
            "name": self.publisher,
            "publisher": self.publisher_id,
            "package": self.package,
            "version": self.version,
        }


class ServiceErrorKind(StrEnum):
    """Why a build-service call did not produce an artifact."""

    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class BuildSuccess:
    """A build that returned an artifact link."""

    archive: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildFailure:
    """A build the service (or the transport) reported as failed.

    Attributes:
        kind: Failure category.
        status_code: HTTP status, when a response was received.
        error: The ``error`` field of a structured error body.
        text: Raw response body, or the transport error's message.
        status_text: HTTP reason phrase.
    """

    kind: ServiceErrorKind
    status_code: int | None = None
    error: str | None = None
    text: str | None = None
    status_text: str | None = None

    @property
    def message(self) -> str:
        """Best available description: structured error, raw text, status text."""
        return self.error or self.text or self.status_text or str(self.kind)


BuildResult = BuildSuccess | BuildFailure
