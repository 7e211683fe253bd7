"""Locate and read the current prayer topic document"""

import logging
from pathlib import Path
from typing import Protocol

from core.exceptions import DocumentReadError, SourceNotFoundError

logger = logging.getLogger(__name__)


class DocumentSource(Protocol):
    """Anything that can find the newest prayer document and read it."""

    def find_newest(self) -> Path: ...

    def read(self, path: Path) -> str: ...


class DirectoryDocumentSource:
    """Prayer documents stored as text files in a single directory.

    The document is replaced periodically by uploading a new file whose name
    starts with a fixed prefix; older uploads are left in place, so the file
    with the latest modification time is the current one.
    """

    def __init__(self, directory: str | Path, prefix: str):
        """
        Initialize the source.

        Args:
            directory: Directory holding the uploaded documents
            prefix: File name prefix identifying prayer documents
        """
        self.directory = Path(directory)
        self.prefix = prefix

    def find_newest(self) -> Path:
        """
        Return the most recently modified matching file.

        Raises:
            SourceNotFoundError: Directory missing or no file name matches
        """
        if not self.directory.is_dir():
            raise SourceNotFoundError(f"Prayer document directory not found: {self.directory}")

        newest: Path | None = None
        newest_mtime = 0.0
        try:
            for path in self.directory.iterdir():
                if not path.name.startswith(self.prefix) or not path.is_file():
                    continue
                mtime = path.stat().st_mtime
                if newest is None or mtime > newest_mtime:
                    newest = path
                    newest_mtime = mtime
        except OSError as e:
            raise DocumentReadError(f"Could not list {self.directory}: {e}") from e

        if newest is None:
            raise SourceNotFoundError(
                f"No file starting with {self.prefix!r} found in {self.directory}"
            )

        logger.debug(f"Newest prayer document: {newest.name}")
        return newest

    def read(self, path: Path) -> str:
        """
        Read a document as UTF-8, dropping a leading byte order mark.

        Raises:
            DocumentReadError: File unreadable or not valid UTF-8
        """
        try:
            return path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"{path.name} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DocumentReadError(f"Could not read {path.name}: {e}") from e
