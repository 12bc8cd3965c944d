"""HTTP client for the package build service.

Wraps ``httpx.AsyncClient``.  Service and transport failures come back as
``BuildFailure`` values rather than exceptions, so the orchestration layer
decides how each one is surfaced.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from pwa_publish.lib.build_service.types import (
    AppxBuildRequest,
    BuildFailure,
    BuildRequest,
    BuildResult,
    BuildSuccess,
    ServiceErrorKind,
)


class BuildServiceClient:
    """Talks to the ``/manifests`` routes of the build service.

    Args:
        base_url: URL of the ``manifests`` collection
            (e.g. ``https://api.example.com/manifests``).
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, used to stub the service.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> BuildServiceClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def build(
        self,
        manifest_id: str,
        serviceworker: str,
        href: str,
        request: BuildRequest,
    ) -> BuildResult:
        """Request a package build for one or more platforms.

        Args:
            manifest_id: Identifier of the analysed manifest.
            serviceworker: Identifier of the chosen service worker.
            href: URL of the site being packaged.
            request: Platforms, output suffix and extra parameters.

        Returns:
            BuildSuccess with the archive link, or BuildFailure.
        """
        path = f"/{quote(manifest_id, safe='')}/build"
        params = {"ids": serviceworker, "href": href}
        return await self._post(path, request.to_payload(), params=params)

    async def build_appx(self, manifest_id: str, request: AppxBuildRequest) -> BuildResult:
        """Request a Windows package build.

        Args:
            manifest_id: Identifier of the analysed manifest.
            request: Publisher identity, package name and version.

        Returns:
            BuildSuccess with the package link, or BuildFailure.
        """
        path = f"/{quote(manifest_id, safe='')}/appx"
        return await self._post(path, request.to_payload())

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _post(
        self,
        path: str,
        body: dict[str, Any],
        params: dict[str, str] | None = None,
    ) -> BuildResult:
        """POST a JSON body and translate the outcome into a BuildResult."""
        try:
            logger.debug("POST {} platforms={}", path, body.get("platforms"))
            response = await self._client.post(path, json=body, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Build service error: {} {} for {}",
                exc.response.status_code,
                exc.response.reason_phrase,
                path,
            )
            return _failure_from_response(exc.response)
        except httpx.RequestError as exc:
            logger.error("Build service request failed: {}", exc)
            return BuildFailure(kind=ServiceErrorKind.TRANSPORT_ERROR, text=str(exc) or type(exc).__name__)

        try:
            result = response.json()
        except ValueError:
            logger.error("Build service returned non-JSON response for {}", path)
            return BuildFailure(
                kind=ServiceErrorKind.INVALID_RESPONSE,
                status_code=response.status_code,
                text=response.text or None,
                status_text=response.reason_phrase,
            )

        archive = result.get("archive") if isinstance(result, dict) else None
        if not isinstance(archive, str) or not archive:
            logger.error("Build service response for {} has no archive link", path)
            return BuildFailure(
                kind=ServiceErrorKind.INVALID_RESPONSE,
                status_code=response.status_code,
                text=f"No archive link in response for {path}",
                status_text=response.reason_phrase,
            )

        return BuildSuccess(archive=archive, payload=result)


def _failure_from_response(response: httpx.Response) -> BuildFailure:
    """Build a failure from an error response, keeping the structured ``error`` field if any."""
    error: str | None = None
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error") is not None:
        error = str(data["error"])

    return BuildFailure(
        kind=ServiceErrorKind.HTTP_ERROR,
        status_code=response.status_code,
        error=error,
        text=response.text or None,
        status_text=response.reason_phrase or None,
    )
