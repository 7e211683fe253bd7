"""Prayer topic list API endpoints"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from api.schemas import PrayerListResponse, PrayerTopicItem
from app.dependencies import (
    get_directory_service,
    get_missionary_matcher,
    get_prayer_list_cache,
    get_prayer_list_service,
)
from core.cache import TTLCache
from core.exceptions import MissionPrayerError
from parsers.prayer_models import ParseFailure, ParseSuccess
from services.directory import DirectoryService
from services.missionary_matcher import MissionaryMatcher
from services.prayer_list import PrayerListService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prayer-list", tags=["Prayer List"])

PRAYER_LIST_KEY = "prayer-list"
CACHED_RESPONSE_HEADERS = {"Cache-Control": "private, max-age=60"}


def _failure_response(reason: str, status_code: int) -> JSONResponse:
    body = PrayerListResponse(success=False, items=[], error=reason)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def _folder_ids(
    result: ParseSuccess,
    directory: DirectoryService,
    matcher: MissionaryMatcher,
) -> list[str | None]:
    """Folder id for each record, all None if the directory is unavailable"""
    try:
        data, _ = await directory.get_missionaries()
    except MissionPrayerError as e:
        logger.warning(f"Missionary directory unavailable for matching: {e}")
        return [None] * len(result.items)

    missionaries = data.get("items") or []
    return [matcher.match(missionaries, item.name) for item in result.items]


@router.get("", response_model=PrayerListResponse, response_model_exclude_none=True)
async def get_prayer_list(
    refresh: bool = Query(False, description="Bypass the cache"),
    match: bool = Query(False, description="Annotate items with missionary folder ids"),
    service: PrayerListService | None = Depends(get_prayer_list_service),
    cache: TTLCache = Depends(get_prayer_list_cache),
    directory: DirectoryService = Depends(get_directory_service),
    matcher: MissionaryMatcher = Depends(get_missionary_matcher),
):
    """
    Parsed prayer topics from the newest prayer document.

    Args:
        refresh: Re-read the document even if a cached result exists
        match: Look up each topic's missionary folder id

    Returns:
        Prayer topics in document order with the source file name
    """
    if service is None:
        return _failure_response("Missing PRAYER_DOCUMENTS_DIR", status_code=500)

    result = None if refresh else cache.get(PRAYER_LIST_KEY)
    from_cache = result is not None

    if result is None:
        result = await run_in_threadpool(service.load)
        if isinstance(result, ParseFailure):
            logger.error(f"Prayer list unavailable: {result.reason}")
            return _failure_response(result.reason, status_code=502)
        cache.set(PRAYER_LIST_KEY, result)

    if match:
        folder_ids = await _folder_ids(result, directory, matcher)
    else:
        folder_ids = [None] * len(result.items)

    body = PrayerListResponse(
        success=True,
        items=[
            PrayerTopicItem.from_record(record, folder_id)
            for record, folder_id in zip(result.items, folder_ids)
        ],
        file_name=result.source_name or None,
    )
    if from_cache:
        return JSONResponse(
            content=body.model_dump(by_alias=True, exclude_none=True),
            headers=CACHED_RESPONSE_HEADERS,
        )
    return body
