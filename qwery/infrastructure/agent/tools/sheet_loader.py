"""
Google Sheets import.

A shared sheet is downloaded through its CSV export URL, then parsed:

1. Headers are stripped (BOM included) and turned into safe column names
2. Column types are inferred from the first rows (INTEGER, REAL, TEXT)
3. Values are converted to match the inferred type, empty cells become NULL
"""

import csv
import io
import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

SHEET_ID_PATTERN = re.compile(r"https://docs\.google\.com/spreadsheets/d/([a-zA-Z0-9-_]+)")
GID_PATTERN = re.compile(r"[#&?]gid=(\d+)")
SAMPLE_SIZE = 100


@dataclass
class SheetData:
    """Parsed CSV: ordered ``(column, sql_type)`` pairs plus typed rows."""

    columns: list[tuple[str, str]] = field(default_factory=list)
    rows: list[dict[str, Any]] = field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [name for name, _ in self.columns]


def extract_spreadsheet_id(shared_link: str) -> str:
    match = SHEET_ID_PATTERN.search(shared_link or "")
    if not match:
        raise ValueError(f"Invalid Google Sheets link: {shared_link}")
    return match.group(1)


def build_csv_export_url(shared_link: str) -> str:
    url = (
        f"https://docs.google.com/spreadsheets/d/{extract_spreadsheet_id(shared_link)}"
        "/export?format=csv"
    )
    gid = GID_PATTERN.search(shared_link)
    if gid:
        url += f"&gid={gid.group(1)}"
    return url


def safe_column_name(header: str, index: int) -> str:
    name = header.strip().lstrip("\ufeff").lower()
    name = name.replace(" ", "_").replace("-", "_")
    name = re.sub(r"[^a-z0-9_]", "", name)
    if not name:
        return f"column_{index + 1}"
    if name[0].isdigit():
        name = f"c_{name}"
    return name


def _infer_type(values: list[str]) -> str:
    try:
        for v in values:
            int(v)
        return "INTEGER"
    except ValueError:
        pass
    try:
        for v in values:
            float(v)
        return "REAL"
    except ValueError:
        pass
    return "TEXT"


def _convert_value(value: str | None, sql_type: str) -> Any:
    if value is None:
        return None
    value = value.strip()
    if value == "":
        return None
    if sql_type == "INTEGER":
        return int(value)
    if sql_type == "REAL":
        return float(value)
    return value


def parse_csv(content: str) -> SheetData:
    """Parse CSV text into typed columns and rows."""
    reader = csv.DictReader(io.StringIO(content.lstrip("\ufeff")))
    raw_headers = [h for h in (reader.fieldnames or []) if h and h.strip()]
    if not raw_headers:
        raise ValueError("Sheet has no header row")

    names: list[str] = []
    for index, header in enumerate(raw_headers):
        name = safe_column_name(header, index)
        candidate, suffix = name, 1
        while candidate in names:
            candidate = f"{name}_{suffix}"
            suffix += 1
        names.append(candidate)

    raw_rows = [row for row in reader if any((row.get(h) or "").strip() for h in raw_headers)]

    columns: list[tuple[str, str]] = []
    for header, name in zip(raw_headers, names, strict=True):
        sample = [
            (row.get(header) or "").strip()
            for row in raw_rows[:SAMPLE_SIZE]
            if (row.get(header) or "").strip()
        ]
        columns.append((name, _infer_type(sample) if sample else "TEXT"))

    rows = []
    for raw in raw_rows:
        row = {}
        for header, (name, sql_type) in zip(raw_headers, columns, strict=True):
            try:
                row[name] = _convert_value(raw.get(header), sql_type)
            except ValueError:
                # Values past the sample window may not match the inferred type
                row[name] = (raw.get(header) or "").strip()
        rows.append(row)
    return SheetData(columns=columns, rows=rows)


class SheetFetcher:
    """Downloads the CSV export of a shared Google Sheet."""

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        self._timeout = timeout
        self._client = client

    async def fetch_csv(self, shared_link: str) -> str:
        url = build_csv_export_url(shared_link)
        logger.info(f"Fetching sheet CSV: {url}")
        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response.text

    async def fetch(self, shared_link: str) -> SheetData:
        return parse_csv(await self.fetch_csv(shared_link))
