from __future__ import annotations

import logging

import httpx
import pytest

from tools_gallery.core.exceptions import CatalogSourceError
from tools_gallery.core.fallback import FALLBACK_ENTRIES
from tools_gallery.services.catalog_loader import CatalogLoader
from tools_gallery.services.sources import (
    CatalogSource,
    HttpCatalogSource,
    LocalFileCatalogSource,
    StaticCatalogSource,
    source_from_location,
)

DATASET = "\n".join(
    [
        "工具类别,工具名称,简介,官网链接,Logo链接,Logo本地路径",
        "AI创新工具,ChatGPT,对话AI,https://chat.openai.com,,",
        "AI绘画工具,Midjourney,图像生成,https://www.midjourney.com,,",
    ]
)


class _FailingSource(CatalogSource):
    def __init__(self, error: Exception):
        self.error = error

    def describe(self) -> str:
        return "failing"

    async def fetch_text(self) -> str:
        raise self.error


def _assert_fallback(loader: CatalogLoader, entries) -> None:
    assert entries == FALLBACK_ENTRIES
    assert loader.catalog.entries == FALLBACK_ENTRIES
    assert loader.categories == ()
    assert any(e.name.strip() and e.official_url.strip() for e in entries)


@pytest.mark.asyncio
async def test_load_parses_source_text_and_populates_categories():
    loader = CatalogLoader(StaticCatalogSource(DATASET))

    entries = await loader.load()

    assert [e.name for e in entries] == ["ChatGPT", "Midjourney"]
    assert loader.categories == ("AI创新工具", "AI绘画工具")


@pytest.mark.asyncio
async def test_load_logs_counts_on_success(caplog):
    loader = CatalogLoader(StaticCatalogSource(DATASET, label="inline"))

    with caplog.at_level(logging.INFO, logger="tools_gallery.services.catalog_loader"):
        await loader.load()

    record = next(r for r in caplog.records if r.getMessage() == "Catalog loaded")
    assert record.n_entries == 2
    assert record.n_categories == 2
    assert record.source == "inline"


@pytest.mark.asyncio
async def test_load_source_error_installs_fallback_and_logs(caplog):
    loader = CatalogLoader(_FailingSource(CatalogSourceError("unreachable")))

    with caplog.at_level(logging.WARNING, logger="tools_gallery.services.catalog_loader"):
        entries = await loader.load()

    _assert_fallback(loader, entries)
    assert any("fallback" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_load_unexpected_error_installs_fallback():
    loader = CatalogLoader(_FailingSource(RuntimeError("boom")))

    entries = await loader.load()

    _assert_fallback(loader, entries)


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   \n\n", "name,only\n,\n"])
async def test_load_blank_or_unparseable_text_installs_fallback(text):
    loader = CatalogLoader(StaticCatalogSource(text))

    entries = await loader.load()

    _assert_fallback(loader, entries)


@pytest.mark.asyncio
async def test_load_missing_file_installs_fallback(tmp_path):
    loader = CatalogLoader(LocalFileCatalogSource(tmp_path / "missing.csv"))

    entries = await loader.load()

    _assert_fallback(loader, entries)


@pytest.mark.asyncio
async def test_reload_replaces_previous_catalog():
    source = StaticCatalogSource(DATASET)
    loader = CatalogLoader(source)
    await loader.load()

    source.text = ""
    await loader.load()

    assert loader.catalog.entries == FALLBACK_ENTRIES
    assert loader.categories == ()


@pytest.mark.asyncio
async def test_local_file_source_reads_utf8_with_bom(tmp_path):
    path = tmp_path / "tools.csv"
    path.write_text(DATASET, encoding="utf-8-sig")

    text = await LocalFileCatalogSource(path).fetch_text()

    assert text.startswith("工具类别")


@pytest.mark.asyncio
async def test_http_source_returns_body():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/tools.csv"
        return httpx.Response(200, text=DATASET)

    source = HttpCatalogSource(
        "https://example.com/tools.csv",
        transport=httpx.MockTransport(handler),
    )
    loader = CatalogLoader(source)

    entries = await loader.load()

    assert [e.name for e in entries] == ["ChatGPT", "Midjourney"]


@pytest.mark.asyncio
async def test_http_source_raises_on_error_status():
    source = HttpCatalogSource(
        "https://example.com/tools.csv",
        transport=httpx.MockTransport(lambda request: httpx.Response(404)),
    )

    with pytest.raises(CatalogSourceError, match="Could not fetch"):
        await source.fetch_text()


@pytest.mark.asyncio
async def test_http_connection_error_installs_fallback():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    source = HttpCatalogSource(
        "https://example.com/tools.csv",
        transport=httpx.MockTransport(handler),
    )
    loader = CatalogLoader(source)

    entries = await loader.load()

    _assert_fallback(loader, entries)


def test_source_from_location_picks_http_or_file(tmp_path):
    http = source_from_location("https://example.com/tools.csv", timeout=3.0)
    local = source_from_location(str(tmp_path / "tools.csv"))

    assert isinstance(http, HttpCatalogSource)
    assert http.timeout == 3.0
    assert isinstance(local, LocalFileCatalogSource)
    assert local.describe() == str(tmp_path / "tools.csv")
