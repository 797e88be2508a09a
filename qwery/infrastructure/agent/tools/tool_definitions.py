"""Tool schemas exposed to the model for the workspace data tools."""

from typing import Any

from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.domain.model.agent.tool import Tool
from qwery.infrastructure.agent.tools.data_tools import DEFAULT_VIEW_LIMIT, WorkspaceDataTools

_STRING_OR_LIST = {
    "anyOf": [
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}},
    ]
}


def _schema(properties: dict[str, Any] | None = None, required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = required
    return schema


def build_data_tools(tools: WorkspaceDataTools) -> list[Tool]:
    async def test_connection(**_: Any) -> str:
        return await tools.test_connection()

    async def create_db_view_from_sheet(**kwargs: Any) -> dict[str, Any]:
        return await tools.create_db_view_from_sheet(
            shared_link=kwargs.get("sharedLink") or "",
            sheet_name=kwargs.get("sheetName"),
        )

    async def list_views(**_: Any) -> dict[str, Any]:
        return await tools.list_views()

    async def list_available_sheets(**_: Any) -> dict[str, Any]:
        return await tools.list_available_sheets()

    async def get_schema(**kwargs: Any) -> dict[str, Any]:
        return await tools.get_schema(kwargs.get("viewName") or kwargs.get("sheetName") or "")

    async def run_query(**kwargs: Any) -> dict[str, Any]:
        return await tools.run_query(kwargs.get("query") or "")

    async def view_sheet(**kwargs: Any) -> dict[str, Any]:
        return await tools.view_sheet(
            kwargs.get("sheetName"), int(kwargs.get("limit") or DEFAULT_VIEW_LIMIT)
        )

    async def rename_sheet(**kwargs: Any) -> dict[str, Any]:
        return await tools.rename_sheet(
            kwargs.get("oldSheetName") or "", kwargs.get("newSheetName") or ""
        )

    async def delete_sheet(**kwargs: Any) -> dict[str, Any]:
        return await tools.delete_sheet(kwargs.get("sheetNames") or [])

    create = AgentFactory.create_tool
    return [
        create(
            "testConnection",
            test_connection,
            "Tests whether the workspace database is accessible. Returns true or false.",
            _schema(),
        ),
        create(
            "createDbViewFromSheet",
            create_db_view_from_sheet,
            "Imports one or more Google Sheets into the workspace. Several links may be "
            "passed as a list or separated by '|'. Only use for NEW links from the "
            "current message.",
            _schema(
                {
                    "sharedLink": {**_STRING_OR_LIST, "description": "Google Sheet shared link(s)"},
                    "sheetName": {**_STRING_OR_LIST, "description": "Optional view name(s)"},
                },
                ["sharedLink"],
            ),
        ),
        create(
            "listViews",
            list_views,
            "Lists the registered sheet views with their view_name and shared_link.",
            _schema(),
        ),
        create(
            "listAvailableSheets",
            list_available_sheets,
            "Lists every table and view present in the workspace database.",
            _schema(),
        ),
        create(
            "getSchema",
            get_schema,
            "Returns the column names and types of a view.",
            _schema({"viewName": {"type": "string"}}, ["viewName"]),
        ),
        create(
            "runQuery",
            run_query,
            "Runs a SQLite SQL query against the workspace views and returns columns and rows.",
            _schema({"query": {"type": "string"}}, ["query"]),
        ),
        create(
            "viewSheet",
            view_sheet,
            f"Shows the first rows of a view (default {DEFAULT_VIEW_LIMIT}).",
            _schema(
                {"sheetName": {"type": "string"}, "limit": {"type": "integer"}},
                ["sheetName"],
            ),
        ),
        create(
            "renameSheet",
            rename_sheet,
            "Renames a registered view.",
            _schema(
                {"oldSheetName": {"type": "string"}, "newSheetName": {"type": "string"}},
                ["oldSheetName", "newSheetName"],
            ),
        ),
        create(
            "deleteSheet",
            delete_sheet,
            "Deletes one or more views from the workspace.",
            _schema(
                {"sheetNames": {"type": "array", "items": {"type": "string"}}},
                ["sheetNames"],
            ),
        ),
    ]
