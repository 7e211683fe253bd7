"""Prayer topic list built from the newest document"""

import logging

from core.exceptions import DocumentReadError, SourceNotFoundError
from parsers.prayer_models import ParseFailure, ParseResult
from parsers.prayer_text import parse_prayer_document
from services.document_source import DocumentSource

logger = logging.getLogger(__name__)


class PrayerListService:
    """Reads the current prayer document and parses it."""

    def __init__(self, source: DocumentSource):
        self.source = source

    def load(self) -> ParseResult:
        """
        Locate, read and parse the newest prayer document.

        Returns:
            ParseSuccess with the records and file name, or ParseFailure
            describing why no records could be produced. Never raises.
        """
        try:
            path = self.source.find_newest()
            text = self.source.read(path)
        except (SourceNotFoundError, DocumentReadError) as e:
            logger.warning(f"Prayer document unavailable: {e}")
            return ParseFailure(reason=str(e))

        result = parse_prayer_document(text, source_name=path.name)
        if result.success:
            logger.info(f"Parsed {len(result.items)} prayer topics from {path.name}")
        return result
