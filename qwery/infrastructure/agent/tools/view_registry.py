"""
Registry of the sheet views imported into a conversation workspace.

Stored as ``views.json`` next to the workspace database, one record per
imported sheet, keyed by the spreadsheet id of its shared link.
"""

import json
import logging
import re
from dataclasses import asdict, dataclass
from pathlib import Path

from qwery.domain.shared_kernel import utcnow
from qwery.infrastructure.agent.tools.sheet_loader import extract_spreadsheet_id

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "views.json"
DEFAULT_VIEW_NAME = "sheet_data"


@dataclass
class ViewRecord:
    view_name: str
    display_name: str
    shared_link: str
    source_id: str
    created_at: str
    updated_at: str
    last_used_at: str | None = None


def sanitize_view_name(name: str) -> str:
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "_", name.strip())
    if not sanitized or not sanitized[0].isalpha():
        sanitized = f"v_{sanitized}"
    return sanitized.lower()


def unique_view_name(base: str, existing: set[str]) -> str:
    if base not in existing:
        return base
    suffix = 1
    while f"{base}_{suffix}" in existing:
        suffix += 1
    return f"{base}_{suffix}"


def generate_semantic_view_name(column_names: list[str], existing: set[str]) -> str:
    """
    Name a view after what it holds.

    The first ``<entity>_id`` column gives the entity ("customer_id" ->
    "customers"); sheets without one fall back to ``sheet_data``.
    """
    base = DEFAULT_VIEW_NAME
    for column in column_names:
        lowered = column.lower()
        if lowered.endswith("_id") and len(lowered) > 3:
            entity = lowered[:-3]
            base = entity if entity.endswith("s") else f"{entity}s"
            break
    return unique_view_name(sanitize_view_name(base), existing)


class ViewRegistry:
    def __init__(self, directory: Path) -> None:
        self.path = Path(directory) / REGISTRY_FILENAME

    def load(self) -> list[ViewRecord]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable view registry {self.path}: {e}")
            return []
        return [ViewRecord(**item) for item in raw]

    def _save(self, records: list[ViewRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([asdict(r) for r in records], indent=2), encoding="utf-8"
        )

    def get_by_name(self, view_name: str) -> ViewRecord | None:
        return next((r for r in self.load() if r.view_name == view_name), None)

    def get_by_source(self, source_id: str) -> ViewRecord | None:
        return next((r for r in self.load() if r.source_id == source_id), None)

    def view_names(self) -> set[str]:
        return {r.view_name for r in self.load()}

    def register(self, shared_link: str, view_name: str, display_name: str | None = None) -> ViewRecord:
        """Add a record, replacing any record for the same spreadsheet."""
        source_id = extract_spreadsheet_id(shared_link)
        now = utcnow().isoformat()
        records = [r for r in self.load() if r.source_id != source_id]
        record = ViewRecord(
            view_name=view_name,
            display_name=display_name or view_name,
            shared_link=shared_link,
            source_id=source_id,
            created_at=now,
            updated_at=now,
            last_used_at=now,
        )
        records.append(record)
        self._save(records)
        logger.info(f"Registered view {view_name} for sheet {source_id}")
        return record

    def update_usage(self, view_name: str) -> None:
        records = self.load()
        for record in records:
            if record.view_name == view_name:
                record.last_used_at = utcnow().isoformat()
                self._save(records)
                return

    def rename(self, source_id: str, new_view_name: str, display_name: str | None = None) -> ViewRecord | None:
        records = self.load()
        for record in records:
            if record.source_id == source_id:
                record.view_name = new_view_name
                record.display_name = display_name or new_view_name
                record.updated_at = utcnow().isoformat()
                self._save(records)
                return record
        return None

    def delete(self, view_name: str) -> bool:
        records = self.load()
        remaining = [r for r in records if r.view_name != view_name]
        if len(remaining) == len(records):
            return False
        self._save(remaining)
        return True
