"""In-memory state of a single publish session.

``PublishState`` is owned by the orchestrator and written only through its
four ``update_*`` mutation points.  The generator and service-worker states
belong to upstream steps; the orchestrator only reads them and asks them to
reset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pwa_publish.lib.build_service import BuildServiceClient


@dataclass
class PublishState:
    """Readiness flag, produced artifact links and the download gate.

    Attributes:
        status: None until computed, then whether the manifest has a source URL.
        archive_link: URL of the last generic archive built.
        appx_link: URL of the last Windows package built.
        download_disabled: Whether the download button is gated off.
    """

    status: bool | None = None
    archive_link: str | None = None
    appx_link: str | None = None
    download_disabled: bool = False

    def update_status(self, status: bool) -> None:
        self.status = status

    def update_archive_link(self, url: str) -> None:
        self.archive_link = url

    def update_appx_link(self, url: str) -> None:
        self.appx_link = url

    def update_download_disabled(self, disabled: bool) -> None:
        self.download_disabled = disabled


class GeneratorStateLike(Protocol):
    """Manifest generator state as seen by the orchestrator."""

    manifest_id: str | None
    url: str | None

    def reset(self) -> None: ...


class ServiceWorkerStateLike(Protocol):
    """Service worker selection state as seen by the orchestrator."""

    serviceworker: str | None

    def reset(self) -> None: ...


@dataclass
class GeneratorState:
    """Minimal in-memory generator state."""

    manifest_id: str | None = None
    url: str | None = None

    def reset(self) -> None:
        self.manifest_id = None
        self.url = None


@dataclass
class ServiceWorkerState:
    """Minimal in-memory service worker state."""

    serviceworker: str | None = None

    def reset(self) -> None:
        self.serviceworker = None


@dataclass
class PublishSession:
    """Everything one publish flow needs, passed explicitly to each operation.

    A fresh session starts with a default ``PublishState``; there is no
    process-wide session.
    """

    client: BuildServiceClient
    generator: GeneratorStateLike = field(default_factory=GeneratorState)
    serviceworker: ServiceWorkerStateLike = field(default_factory=ServiceWorkerState)
    state: PublishState = field(default_factory=PublishState)

    @property
    def manifest_id(self) -> str | None:
        return self.generator.manifest_id

    @property
    def serviceworker_id(self) -> str | None:
        return self.serviceworker.serviceworker
