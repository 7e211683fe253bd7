"""Pytest configuration and fixtures"""

import os
from pathlib import Path

import httpx
import pytest

from app.config import get_settings

UPSTREAM_URL = "https://script.example.test/exec"
PRAYER_PREFIX = "선교사를_위한_기도문"

SAMPLE_DOCUMENT = """선교사를 위한 기도문
[국가명 순서]
참고
1
김민수
(태국)
건강을 위해 기도해 주세요.
2025.
12.13
2
이소영
사역지 정착을  위해 기도해주세요.
"""


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Isolate settings from any local .env"""
    monkeypatch.setenv("APPS_SCRIPT_EXEC_URL", UPSTREAM_URL)
    monkeypatch.setenv("PRAYER_DOCUMENTS_DIR", "")
    monkeypatch.setenv("PRAYER_FILE_PREFIX", PRAYER_PREFIX)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def prayer_dir(tmp_path: Path) -> Path:
    """Directory of uploaded prayer documents"""
    directory = tmp_path / "prayer_documents"
    directory.mkdir()
    return directory


@pytest.fixture
def write_document(prayer_dir: Path):
    """Write a document into prayer_dir with an explicit modification time"""

    def _write(name: str, text: str, mtime: float = 1_700_000_000.0) -> Path:
        path = prayer_dir / name
        path.write_text(text, encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path

    return _write


class FakeUpstream:
    """Records requests and answers from a table keyed by action"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        # action -> (status, JSON payload or raw text)
        self.responses: dict[str, tuple[int, object]] = {
            "missionaries": (
                200,
                {
                    "items": [
                        {
                            "folderId": "folder-kim",
                            "folderName": "김민수",
                            "name": "김민수",
                            "country": "태국",
                            "ministry": "교육",
                        },
                        {
                            "folderId": "folder-lee",
                            "folderName": "이소영",
                            "name": "이소영 선교사",
                            "country": "일본",
                            "ministry": "교회개척",
                        },
                    ]
                },
            ),
            "images": (
                200,
                {
                    "images": [
                        {"fileId": "f1", "name": "2025-01.jpg", "url": "https://img.test/f1"},
                    ]
                },
            ),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        action = request.url.params.get("action", "")
        if action not in self.responses:
            return httpx.Response(200, json={"error": "unknown action"})
        status, payload = self.responses[action]
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    def count(self, action: str) -> int:
        return sum(1 for r in self.requests if r.url.params.get("action") == action)


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
async def upstream_client(fake_upstream):
    """UpstreamClient wired to the fake upstream"""
    from services.upstream import UpstreamClient

    client = UpstreamClient(UPSTREAM_URL, transport=httpx.MockTransport(fake_upstream.handler))
    yield client
    await client.aclose()


@pytest.fixture
async def client(upstream_client, prayer_dir):
    """Create async test client"""
    from asgi_lifespan import LifespanManager
    from httpx import ASGITransport, AsyncClient

    from app.dependencies import get_directory_service, get_prayer_list_service
    from app.main import app
    from services.directory import DirectoryService
    from services.document_source import DirectoryDocumentSource
    from services.prayer_list import PrayerListService

    directory = DirectoryService(upstream_client)
    app.dependency_overrides[get_directory_service] = lambda: directory
    app.dependency_overrides[get_prayer_list_service] = lambda: PrayerListService(
        DirectoryDocumentSource(prayer_dir, PRAYER_PREFIX)
    )

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    """Limit anyio to asyncio backend"""
    return "asyncio"


@pytest.fixture
def sample_document() -> str:
    """Two-block document, first block complete, second without country or date"""
    return SAMPLE_DOCUMENT
