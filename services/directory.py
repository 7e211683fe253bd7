"""Cached access to the missionary directory and folder images"""

import logging
from collections.abc import Mapping
from typing import Any

from core.cache import TTLCache
from core.exceptions import UpstreamError
from services.upstream import UpstreamClient

logger = logging.getLogger(__name__)

MISSIONARIES_KEY = "missionaries"


def _require_entry_list(data: dict[str, Any], key: str, label: str) -> None:
    """Reject payloads whose ``key`` is not a list of objects.

    Entries themselves are passed through untouched; a missing key is an
    empty list.
    """
    entries = data.get(key)
    if entries is None:
        return
    if not isinstance(entries, list) or not all(isinstance(e, Mapping) for e in entries):
        logger.error(f"Upstream {label} payload has malformed {key!r}: {type(entries).__name__}")
        raise UpstreamError(f"Invalid {label} payload")


class DirectoryService:
    """Memoizes upstream responses for a fixed time.

    Only successful, well-shaped responses are stored; upstream errors
    propagate to the caller and the next request tries again.
    """

    def __init__(
        self,
        upstream: UpstreamClient,
        missionaries_ttl_seconds: float = 300,
        images_ttl_seconds: float = 120,
    ):
        self.upstream = upstream
        self.missionaries_cache = TTLCache(missionaries_ttl_seconds)
        self.images_cache = TTLCache(images_ttl_seconds)

    async def get_missionaries(self, refresh: bool = False) -> tuple[dict[str, Any], bool]:
        """
        Missionary directory payload.

        Args:
            refresh: Skip the cache and fetch from upstream

        Returns:
            Tuple of (payload, served_from_cache)

        Raises:
            UpstreamError: Upstream failed or ``items`` is not a list of objects
        """
        if not refresh:
            cached = self.missionaries_cache.get(MISSIONARIES_KEY)
            if cached is not None:
                return cached, True

        data = await self.upstream.fetch_missionaries()
        _require_entry_list(data, "items", "missionaries")
        self.missionaries_cache.set(MISSIONARIES_KEY, data)
        logger.info(f"Fetched {len(data.get('items') or [])} missionaries from upstream")
        return data, False

    async def get_images(self, folder_id: str) -> tuple[dict[str, Any], bool]:
        """Image list payload for one folder, as (payload, served_from_cache)."""
        cached = self.images_cache.get(folder_id)
        if cached is not None:
            return cached, True

        data = await self.upstream.fetch_images(folder_id)
        _require_entry_list(data, "images", "images")
        self.images_cache.set(folder_id, data)
        return data, False
