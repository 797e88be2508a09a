"""Tests for Google Sheets CSV loading."""

import httpx
import pytest

from qwery.infrastructure.agent.tools.sheet_loader import (
    SheetFetcher,
    build_csv_export_url,
    extract_spreadsheet_id,
    parse_csv,
    safe_column_name,
)

SHEET_LINK = "https://docs.google.com/spreadsheets/d/abc-123_XYZ/edit#gid=42"


class TestSheetLinks:
    def test_extract_spreadsheet_id(self):
        assert extract_spreadsheet_id(SHEET_LINK) == "abc-123_XYZ"

    def test_invalid_link(self):
        with pytest.raises(ValueError, match="Invalid Google Sheets link"):
            extract_spreadsheet_id("https://example.com/sheet")

    def test_export_url_keeps_gid(self):
        assert build_csv_export_url(SHEET_LINK) == (
            "https://docs.google.com/spreadsheets/d/abc-123_XYZ/export?format=csv&gid=42"
        )

    def test_export_url_without_gid(self):
        url = build_csv_export_url("https://docs.google.com/spreadsheets/d/abc/edit")
        assert url.endswith("/d/abc/export?format=csv")


class TestSafeColumnName:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Customer Name", "customer_name"),
            ("\ufeffOrder-Id", "order_id"),
            ("2024 Sales", "c_2024_sales"),
            ("$$$", "column_4"),
        ],
    )
    def test_names(self, header, expected):
        assert safe_column_name(header, 3) == expected


class TestParseCsv:
    def test_infers_types_and_converts(self):
        data = parse_csv("id,price,name\n1,9.5,apple\n2,,pear\n")

        assert data.columns == [("id", "INTEGER"), ("price", "REAL"), ("name", "TEXT")]
        assert data.rows == [
            {"id": 1, "price": 9.5, "name": "apple"},
            {"id": 2, "price": None, "name": "pear"},
        ]

    def test_skips_blank_rows_and_dedupes_headers(self):
        data = parse_csv("Name,name\na,b\n,\n")

        assert data.column_names == ["name", "name_1"]
        assert len(data.rows) == 1

    def test_empty_column_defaults_to_text(self):
        data = parse_csv("a,b\n1,\n")
        assert data.columns[1] == ("b", "TEXT")

    def test_missing_header(self):
        with pytest.raises(ValueError, match="no header"):
            parse_csv("")


class TestSheetFetcher:
    @pytest.mark.asyncio
    async def test_fetch_downloads_export_url(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, text="customer_id,total\n1,10\n")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            data = await SheetFetcher(client=client).fetch(SHEET_LINK)

        assert requested == [build_csv_export_url(SHEET_LINK)]
        assert data.rows == [{"customer_id": 1, "total": 10}]

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))
        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await SheetFetcher(client=client).fetch_csv(SHEET_LINK)
