"""Prayer topic data models"""

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class PrayerTopicRecord:
    """One prayer topic block from the source document"""

    order: int
    name: str = ""
    country: str = ""
    prayer_content: str = ""
    reference: str = ""

    def to_dict(self) -> dict:
        return {
            "order": self.order,
            "name": self.name,
            "country": self.country,
            "prayerContent": self.prayer_content,
            "reference": self.reference,
        }


@dataclass
class ParseSuccess:
    """Parsed document"""

    items: list[PrayerTopicRecord] = field(default_factory=list)
    source_name: str = ""
    success: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> dict:
        return {
            "success": True,
            "items": [item.to_dict() for item in self.items],
            "fileName": self.source_name,
        }


@dataclass
class ParseFailure:
    """Document could not be located, read or parsed"""

    reason: str
    success: Literal[False] = field(default=False, init=False)

    @property
    def items(self) -> list[PrayerTopicRecord]:
        return []

    def to_dict(self) -> dict:
        return {"success": False, "items": [], "error": self.reason}


ParseResult = ParseSuccess | ParseFailure
