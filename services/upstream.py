"""Client for the spreadsheet / Drive exec endpoint"""

import logging
from typing import Any

import httpx

from core.exceptions import UpstreamError, UpstreamNotConfiguredError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Async wrapper around the single upstream HTTP endpoint.

    Every call is ``GET {base_url}?action=...`` and the endpoint answers with
    JSON. The endpoint redirects to a content host before answering, so
    redirects are always followed.
    """

    BODY_PREVIEW_CHARS = 200

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize upstream client.

        Args:
            base_url: Exec URL of the upstream script (empty = not configured)
            timeout: Request timeout in seconds
            transport: Optional transport override, used by tests
        """
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_missionaries(self) -> dict[str, Any]:
        """Missionary directory: ``{"items": [...]}``."""
        return await self._get({"action": "missionaries"})

    async def fetch_images(self, folder_id: str) -> dict[str, Any]:
        """Image list of one missionary folder: ``{"images": [...]}``."""
        return await self._get({"action": "images", "folderId": folder_id})

    async def _get(self, params: dict[str, str]) -> dict[str, Any]:
        if not self.configured:
            raise UpstreamNotConfiguredError("Missing APPS_SCRIPT_EXEC_URL")

        action = params["action"]
        try:
            response = await self._client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Upstream {action} request failed: {e}")
            raise UpstreamError(str(e) or e.__class__.__name__) from e

        text = response.text
        preview = text[: self.BODY_PREVIEW_CHARS]
        if response.is_error:
            logger.error(f"Upstream {action} error: {response.status_code} {preview}")
            raise UpstreamError(f"Upstream error: {response.status_code} - {preview}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Upstream {action} returned invalid JSON: {preview}")
            raise UpstreamError(f"Invalid JSON response: {preview}") from e

        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected {action} payload type: {type(data).__name__}")

        if data.get("error") == "unknown action":
            raise UpstreamError(f"Upstream does not support action {action!r}")

        return data
