"""
Workspace data tools used by the read-data agent.

Each method returns plain JSON-serializable values; failures are raised as
``ValueError`` so the agent runner can report them back to the model.
"""

import logging
import re
import time
import uuid
from pathlib import Path
from typing import Any

from qwery.infrastructure.agent.tools.sheet_loader import SheetFetcher, extract_spreadsheet_id
from qwery.infrastructure.agent.tools.view_registry import (
    ViewRecord,
    ViewRegistry,
    generate_semantic_view_name,
    sanitize_view_name,
    unique_view_name,
)
from qwery.infrastructure.agent.tools.workspace import (
    TEMP_TABLE_PREFIX,
    ConversationWorkspace,
    quote_identifier,
)

logger = logging.getLogger(__name__)

DEFAULT_VIEW_LIMIT = 50
TABLE_REFERENCE_PATTERN = re.compile(r"(?:FROM|JOIN)\s+[\"']?(\w+)[\"']?", re.IGNORECASE)


def normalize_links(shared_link: str | list[str] | None) -> tuple[list[str], int]:
    """Split on ``|`` and drop blanks and duplicates; returns (links, original_count)."""
    if isinstance(shared_link, list):
        raw = [str(link).strip() for link in shared_link]
    else:
        raw = [part.strip() for part in (shared_link or "").split("|")]
    raw = [link for link in raw if link]
    return list(dict.fromkeys(raw)), len(raw)


def _name_for(sheet_name: str | list[str] | None, index: int) -> str | None:
    if isinstance(sheet_name, list):
        return sheet_name[index] if index < len(sheet_name) and sheet_name[index] else None
    return sheet_name or None


def _temp_table_name() -> str:
    return f"{TEMP_TABLE_PREFIX}{int(time.time() * 1000)}_{uuid.uuid4().hex[:6]}"


class WorkspaceDataTools:
    """The data tools of one conversation workspace."""

    def __init__(
        self,
        conversation_id: str,
        workspace: str | Path | None = None,
        fetcher: SheetFetcher | None = None,
    ) -> None:
        self.workspace = ConversationWorkspace(conversation_id, workspace)
        self.registry = ViewRegistry(self.workspace.directory)
        self.fetcher = fetcher or SheetFetcher()

    async def test_connection(self) -> str:
        return "true" if await self.workspace.test_connection() else "false"

    # === Sheet import ===

    async def _load_into_new_table(self, shared_link: str, table_name: str) -> None:
        temp_name = _temp_table_name()
        data = await self.fetcher.fetch(shared_link)
        await self.workspace.create_table(temp_name, data.columns, data.rows)
        await self.workspace.rename(temp_name, table_name)

    async def _import_sheet(self, shared_link: str, requested_name: str | None) -> ViewRecord:
        source_id = extract_spreadsheet_id(shared_link)

        existing = self.registry.get_by_source(source_id)
        if existing is not None:
            if await self.workspace.exists(existing.view_name):
                self.registry.update_usage(existing.view_name)
                logger.info(f"Reusing view {existing.view_name} for sheet {source_id}")
                return existing
            try:
                await self._load_into_new_table(shared_link, existing.view_name)
            except Exception as e:
                raise ValueError(f"Failed to recreate existing view: {e}") from e
            return self.registry.register(shared_link, existing.view_name, existing.display_name)

        temp_name = _temp_table_name()
        try:
            data = await self.fetcher.fetch(shared_link)
            await self.workspace.create_table(temp_name, data.columns, data.rows)
        except Exception as e:
            raise ValueError(f"Failed to create database view: {e}") from e

        try:
            schema = await self.workspace.describe(temp_name)
        except Exception as e:
            await self._discard(temp_name)
            raise ValueError(f"Failed to extract schema: {e}") from e

        try:
            taken = self.registry.view_names() | {
                r["name"] for r in await self.workspace.list_relations()
            }
            if requested_name:
                view_name = unique_view_name(sanitize_view_name(requested_name), taken)
            else:
                view_name = generate_semantic_view_name(
                    [c["column_name"] for c in schema], taken
                )
            await self.workspace.rename(temp_name, view_name)
        except Exception as e:
            await self._discard(temp_name)
            raise ValueError(f"Failed to determine or rename view: {e}") from e

        try:
            return self.registry.register(shared_link, view_name, view_name)
        except Exception as e:
            raise ValueError(f"Failed to register view in registry: {e}") from e

    async def _discard(self, table_name: str) -> None:
        try:
            await self.workspace.drop(table_name)
        except Exception as e:
            logger.warning(f"Failed to drop {table_name}: {e}")

    async def create_db_view_from_sheet(
        self,
        shared_link: str | list[str],
        sheet_name: str | list[str] | None = None,
    ) -> dict[str, Any]:
        links, original_count = normalize_links(shared_link)
        if not links:
            raise ValueError("At least one Google Sheet link is required")
        duplicate_count = original_count - len(links)

        await self.workspace.cleanup_temp_tables()

        results: list[dict[str, Any]] = []
        for index, link in enumerate(links):
            try:
                record = await self._import_sheet(link, _name_for(sheet_name, index))
                results.append(
                    {
                        "link": link,
                        "status": "success",
                        "view_name": record.view_name,
                        "display_name": record.display_name,
                        "error": None,
                    }
                )
            except Exception as e:
                logger.warning(f"Sheet import failed for {link}: {e}")
                results.append(
                    {
                        "link": link,
                        "status": "error",
                        "view_name": None,
                        "display_name": None,
                        "error": str(e),
                    }
                )

        successful = [r for r in results if r["status"] == "success"]
        failed = [r for r in results if r["status"] == "error"]
        if not successful:
            status = "failed"
        elif failed:
            status = "partial"
        else:
            status = "success"

        dedup = (
            f" Found {original_count} link(s), processed {len(links)} unique link(s) "
            f"({duplicate_count} duplicate(s) removed), and created {len(successful)} sheet(s)."
            if duplicate_count > 0
            else ""
        )
        errors = "; ".join(r["error"] for r in failed)

        if status == "failed":
            message = f"Failed to create views from all provided Google Sheets.{dedup} Errors: {errors}"
        elif len(successful) == 1:
            message = (
                f'Successfully created view "{successful[0]["view_name"]}" from Google Sheet.'
                f"{dedup} Use this viewName in your queries."
            )
        else:
            view_list = "\n".join(
                f"{r['link']} -> {r['view_name']}"
                + (f" ({r['display_name']})" if r["display_name"] != r["view_name"] else "")
                for r in successful
            )
            message = (
                f"Successfully created {len(successful)} view(s) from Google Sheets.{dedup}"
                f"\n\n{view_list}"
            )
            if failed:
                message += f"\n\nFailed to create {len(failed)} view(s). Errors: {errors}"
            message += "\n\nAll views are now available - you can ask questions about their data."

        return {
            "content": message,
            "status": status,
            "results": results,
            "summary": {
                "total": len(results),
                "successful": len(successful),
                "failed": len(failed),
                "view_names": [r["view_name"] for r in successful],
            },
        }

    # === Inspection ===

    async def list_views(self) -> dict[str, Any]:
        views = [vars(record) for record in self.registry.load()]
        if not views:
            message = (
                "No views are currently registered. "
                "Use createDbViewFromSheet to register a Google Sheet."
            )
        else:
            message = f"Found {len(views)} view(s). Use the viewName in SQL queries."
        return {"views": views, "message": message}

    async def list_available_sheets(self) -> dict[str, Any]:
        sheets = [
            r for r in await self.workspace.list_relations()
            if not r["name"].startswith(TEMP_TABLE_PREFIX)
        ]
        if not sheets:
            message = (
                "No sheets are currently registered. "
                "Use createDbViewFromSheet to register a Google Sheet."
            )
        else:
            lines = "\n".join(f"- {s['name']} ({s['type']})" for s in sheets)
            message = f"Available sheets ({len(sheets)}):\n{lines}"
        return {"sheets": sheets, "message": message}

    async def get_schema(self, sheet_name: str) -> dict[str, Any]:
        if not sheet_name:
            raise ValueError("sheetName is required. Use listViews to see available views.")
        if not await self.workspace.exists(sheet_name):
            raise ValueError(f'View "{sheet_name}" not found. Use listViews to see available views.')
        columns = await self.workspace.describe(sheet_name)
        self.registry.update_usage(sheet_name)
        return {"view_name": sheet_name, "columns": columns}

    async def run_query(self, query: str) -> dict[str, Any]:
        if not query or not query.strip():
            raise ValueError("query is required")
        result = await self.workspace.execute(query)
        registered = self.registry.view_names()
        for name in set(TABLE_REFERENCE_PATTERN.findall(query)):
            if name in registered:
                self.registry.update_usage(name)
        return result

    async def view_sheet(
        self, sheet_name: str | None, limit: int | None = DEFAULT_VIEW_LIMIT
    ) -> dict[str, Any]:
        if not sheet_name:
            raise ValueError("sheetName is required. Use listViews to see available views.")
        if limit is None or limit <= 0:
            limit = DEFAULT_VIEW_LIMIT
        quoted = quote_identifier(sheet_name)
        count = await self.workspace.execute(f"SELECT COUNT(*) as total FROM {quoted}")
        total_rows = int(count["rows"][0]["total"]) if count["rows"] else 0
        data = await self.workspace.execute(f"SELECT * FROM {quoted} LIMIT {int(limit)}")
        displayed = len(data["rows"])
        if total_rows > limit:
            message = (
                f"Showing first {displayed} of {total_rows} rows. "
                "Use runQuery to see more or apply filters."
            )
        else:
            message = f"Showing all {displayed} rows."
        self.registry.update_usage(sheet_name)
        return {
            "sheet_name": sheet_name,
            "total_rows": total_rows,
            "displayed_rows": displayed,
            "columns": data["columns"],
            "rows": data["rows"],
            "message": message,
        }

    # === Management ===

    async def rename_sheet(self, old_sheet_name: str, new_sheet_name: str) -> dict[str, Any]:
        record = self.registry.get_by_name(old_sheet_name)
        if record is None:
            raise ValueError(
                f'View "{old_sheet_name}" not found in registry. Use listViews to see available views.'
            )
        if not await self.workspace.exists(old_sheet_name):
            raise ValueError(f'View "{old_sheet_name}" does not exist. Cannot rename.')
        if await self.workspace.exists(new_sheet_name):
            raise ValueError(
                f'View "{new_sheet_name}" already exists. Cannot rename to an existing name.'
            )

        await self.workspace.rename(old_sheet_name, new_sheet_name)
        self.registry.rename(record.source_id, new_sheet_name)
        return {
            "old_sheet_name": old_sheet_name,
            "new_sheet_name": new_sheet_name,
            "message": f'Successfully renamed view "{old_sheet_name}" to "{new_sheet_name}"',
        }

    async def delete_sheet(self, sheet_names: str | list[str]) -> dict[str, Any]:
        names = [sheet_names] if isinstance(sheet_names, str) else list(sheet_names or [])
        if not names:
            raise ValueError("At least one sheet name is required")

        deleted: list[str] = []
        failed: list[dict[str, str]] = []
        for name in names:
            try:
                await self.workspace.drop(name)
            except Exception as e:
                failed.append({"sheet_name": name, "error": str(e)})
                continue
            deleted.append(name)
            self.registry.delete(name)

        def quoted(items: list[str]) -> str:
            return ", ".join(f'"{n}"' for n in items)

        failures = ", ".join(f'"{f["sheet_name"]}" ({f["error"]})' for f in failed)
        if not failed and len(deleted) == 1:
            message = f'Successfully deleted view "{deleted[0]}"'
        elif not failed:
            message = f"Successfully deleted {len(deleted)} views: {quoted(deleted)}"
        elif deleted:
            message = (
                f"Deleted {len(deleted)} view(s): {quoted(deleted)}. "
                f"Failed to delete {len(failed)} view(s): {failures}"
            )
        else:
            message = f"Failed to delete all views: {failures}"
        return {"deleted_sheets": deleted, "failed_sheets": failed, "message": message}
