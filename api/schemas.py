"""API Pydantic schemas for request/response validation"""

from pydantic import BaseModel, ConfigDict, Field

from parsers.prayer_models import PrayerTopicRecord


class CamelModel(BaseModel):
    """Accepts snake_case names, serializes with the camelCase aliases"""

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(default="healthy")
    upstream_configured: bool = False
    prayer_documents_configured: bool = False
    version: str = Field(default="0.1.0")


class PrayerTopicItem(CamelModel):
    """One prayer topic"""

    order: int
    name: str = ""
    country: str = ""
    prayer_content: str = Field(default="", alias="prayerContent")
    reference: str = ""
    folder_id: str | None = Field(default=None, alias="folderId")

    @classmethod
    def from_record(cls, record: PrayerTopicRecord, folder_id: str | None = None) -> "PrayerTopicItem":
        return cls(
            order=record.order,
            name=record.name,
            country=record.country,
            prayer_content=record.prayer_content,
            reference=record.reference,
            folder_id=folder_id,
        )


class PrayerListResponse(CamelModel):
    """Prayer topic list response"""

    success: bool
    items: list[PrayerTopicItem] = []
    file_name: str | None = Field(default=None, alias="fileName")
    error: str | None = None


class MissionaryEntry(CamelModel):
    """Missionary directory entry as returned by the upstream.

    Documents the usual keys only; entries are passed through unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    folder_id: str | None = Field(default=None, alias="folderId")
    folder_name: str | None = Field(default=None, alias="folderName")
    name: str | None = None
    country: str | None = None
    ministry: str | None = None
    updated_at_ms: float | None = Field(default=None, alias="updatedAtMs")


class MissionariesResponse(BaseModel):
    """Missionary directory response"""

    model_config = ConfigDict(extra="allow")

    items: list[MissionaryEntry] = []


class ImageItem(CamelModel):
    """Prayer letter image in a missionary folder"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    file_id: str | None = Field(default=None, alias="fileId")
    name: str | None = None
    url: str | None = None


class ImagesResponse(BaseModel):
    """Folder image list response"""

    model_config = ConfigDict(extra="allow")

    images: list[ImageItem] = []

