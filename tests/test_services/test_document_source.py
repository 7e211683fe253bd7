"""Tests for locating the newest prayer document."""

import pytest

from core.exceptions import DocumentReadError, SourceNotFoundError
from services.document_source import DirectoryDocumentSource

PREFIX = "선교사를_위한_기도문"


def test_newest_file_by_modification_time(prayer_dir, write_document):
    """The most recently modified matching file wins, regardless of name."""
    write_document(f"{PREFIX}_12월.txt", "old", mtime=1_700_000_000)
    newest = write_document(f"{PREFIX}_01월.txt", "new", mtime=1_700_100_000)
    write_document(f"{PREFIX}_11월.txt", "older", mtime=1_690_000_000)

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    assert source.find_newest() == newest


def test_files_without_prefix_are_ignored(prayer_dir, write_document):
    expected = write_document(f"{PREFIX}.txt", "doc", mtime=1_700_000_000)
    write_document("회의록.txt", "other", mtime=1_800_000_000)

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    assert source.find_newest() == expected


def test_subdirectories_are_ignored(prayer_dir, write_document):
    expected = write_document(f"{PREFIX}.txt", "doc")
    (prayer_dir / f"{PREFIX}_backup").mkdir()

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    assert source.find_newest() == expected


def test_no_matching_file_raises(prayer_dir, write_document):
    write_document("다른_문서.txt", "other")

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    with pytest.raises(SourceNotFoundError, match=PREFIX):
        source.find_newest()


def test_missing_directory_raises(tmp_path):
    source = DirectoryDocumentSource(tmp_path / "missing", PREFIX)

    with pytest.raises(SourceNotFoundError):
        source.find_newest()


def test_read_strips_byte_order_mark(prayer_dir):
    path = prayer_dir / f"{PREFIX}.txt"
    path.write_bytes("\ufeff참고\n1\n".encode("utf-8"))

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    assert source.read(path) == "참고\n1\n"


def test_read_invalid_utf8_raises(prayer_dir):
    path = prayer_dir / f"{PREFIX}.txt"
    path.write_bytes("참고".encode("euc-kr"))

    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    with pytest.raises(DocumentReadError, match="UTF-8"):
        source.read(path)


def test_read_missing_file_raises(prayer_dir):
    source = DirectoryDocumentSource(prayer_dir, PREFIX)

    with pytest.raises(DocumentReadError):
        source.read(prayer_dir / "gone.txt")
