"""Dependency injection utilities"""

from fastapi import Depends, Request

from app.config import Settings, get_settings
from core.cache import TTLCache
from services.directory import DirectoryService
from services.document_source import DirectoryDocumentSource
from services.missionary_matcher import MissionaryMatcher
from services.prayer_list import PrayerListService


def get_config() -> Settings:
    """Dependency for getting application config"""
    return get_settings()


def get_directory_service(request: Request) -> DirectoryService:
    """Dependency for the cached missionary directory, created at startup"""
    return request.app.state.directory


def get_prayer_list_cache(request: Request) -> TTLCache:
    """Dependency for the parsed prayer list cache, created at startup"""
    return request.app.state.prayer_list_cache


def get_prayer_list_service(settings: Settings = Depends(get_config)) -> PrayerListService | None:
    """Dependency for the prayer list service (None when no directory is configured)"""
    if not settings.prayer_documents_dir:
        return None
    source = DirectoryDocumentSource(settings.prayer_documents_dir, settings.prayer_file_prefix)
    return PrayerListService(source)


def get_missionary_matcher(settings: Settings = Depends(get_config)) -> MissionaryMatcher:
    """Dependency for prayer topic to missionary matching"""
    return MissionaryMatcher(threshold=settings.fuzzy_match_threshold)
