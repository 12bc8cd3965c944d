"""Publish session state and the explicit session context."""

from pwa_publish.lib.session.state import (
    GeneratorState,
    GeneratorStateLike,
    PublishSession,
    PublishState,
    ServiceWorkerState,
    ServiceWorkerStateLike,
)

__all__ = [
    "GeneratorState",
    "GeneratorStateLike",
    "PublishSession",
    "PublishState",
    "ServiceWorkerState",
    "ServiceWorkerStateLike",
]
