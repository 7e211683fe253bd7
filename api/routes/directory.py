"""Missionary directory and image list API endpoints"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.schemas import ImagesResponse, MissionariesResponse
from app.dependencies import get_directory_service
from core.exceptions import UpstreamError, UpstreamNotConfiguredError
from services.directory import DirectoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Directory"])

CACHED_RESPONSE_HEADERS = {"Cache-Control": "private, max-age=60"}
FRESH_RESPONSE_HEADERS = {"Cache-Control": "no-store, no-cache, must-revalidate"}


def _error_response(message: str, status_code: int, empty_key: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, empty_key: []})


@router.get("/missionaries", response_model=MissionariesResponse)
async def list_missionaries(
    refresh: bool = Query(False, description="Bypass the cache"),
    directory: DirectoryService = Depends(get_directory_service),
):
    """
    Missionary directory from the upstream spreadsheet.

    Args:
        refresh: Fetch from upstream even if a cached copy exists

    Returns:
        Directory entries with folder ids, names and countries
    """
    try:
        data, from_cache = await directory.get_missionaries(refresh=refresh)
    except UpstreamNotConfiguredError as e:
        return _error_response(str(e), status_code=500, empty_key="items")
    except UpstreamError as e:
        logger.error(f"Missionaries fetch error: {e}")
        return _error_response(str(e), status_code=502, empty_key="items")

    headers = CACHED_RESPONSE_HEADERS if from_cache else FRESH_RESPONSE_HEADERS
    return JSONResponse(content=data, headers=headers)


@router.get("/images", response_model=ImagesResponse)
async def list_images(
    folder_id: str | None = Query(None, alias="folderId", description="Missionary folder id"),
    directory: DirectoryService = Depends(get_directory_service),
):
    """
    Prayer letter images stored in one missionary folder.

    Args:
        folder_id: Upstream folder id

    Returns:
        Image file ids, names and URLs
    """
    if not folder_id:
        return JSONResponse(status_code=400, content={"error": "folderId required"})

    try:
        data, from_cache = await directory.get_images(folder_id)
    except UpstreamNotConfiguredError as e:
        return _error_response(str(e), status_code=500, empty_key="images")
    except UpstreamError as e:
        logger.error(f"Images fetch error for {folder_id}: {e}")
        return _error_response(str(e), status_code=502, empty_key="images")

    headers = CACHED_RESPONSE_HEADERS if from_cache else {}
    return JSONResponse(content=data, headers=headers)
