"""
Per-conversation workspace database.

Every conversation owns a directory ``<WORKSPACE>/<conversation_id>`` that
holds ``database.db`` (the SQLite file the sheets are loaded into) and the
``views.json`` registry. The database is reached through SQLAlchemy's async
engine on top of aiosqlite.
"""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import Column, Float, Integer, MetaData, Table, Text, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from qwery.configuration.config import get_settings

logger = logging.getLogger(__name__)

DATABASE_FILENAME = "database.db"
TEMP_TABLE_PREFIX = "temp_"

_SQL_TYPES = {"INTEGER": Integer, "REAL": Float, "TEXT": Text}


class WorkspaceNotConfiguredError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("WORKSPACE environment variable is not set")


def resolve_workspace_root(workspace: str | Path | None = None) -> Path:
    """Return the workspace root, falling back to settings."""
    if workspace:
        return Path(workspace)
    root = get_settings().workspace_path
    if root is None:
        raise WorkspaceNotConfiguredError()
    return root


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class ConversationWorkspace:
    """SQLite database and directory owned by one conversation."""

    def __init__(self, conversation_id: str, workspace: str | Path | None = None) -> None:
        if not conversation_id:
            raise ValueError("conversation_id is required")
        self.conversation_id = conversation_id
        self.root = resolve_workspace_root(workspace)

    @property
    def directory(self) -> Path:
        return self.root / self.conversation_id

    @property
    def db_path(self) -> Path:
        return self.directory / DATABASE_FILENAME

    def _engine(self) -> AsyncEngine:
        self.directory.mkdir(parents=True, exist_ok=True)
        return create_async_engine(f"sqlite+aiosqlite:///{self.db_path}")

    async def test_connection(self) -> bool:
        engine = self._engine()
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Workspace connection test failed for {self.conversation_id}: {e}")
            return False
        finally:
            await engine.dispose()

    async def execute(self, sql: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Run a statement and return ``{"columns": [...], "rows": [...]}``.

        Statements that produce no rows return empty lists.
        """
        engine = self._engine()
        try:
            async with engine.begin() as conn:
                # Model-written SQL goes to the driver untouched (no ":name" binds)
                if params:
                    result = await conn.execute(text(sql), params)
                else:
                    result = await conn.exec_driver_sql(sql)
                if not result.returns_rows:
                    return {"columns": [], "rows": []}
                columns = list(result.keys())
                rows = [dict(row._mapping) for row in result.fetchall()]
                return {"columns": columns, "rows": rows}
        finally:
            await engine.dispose()

    async def list_relations(self) -> list[dict[str, str]]:
        """Tables and views in the workspace, SQLite internals excluded."""
        result = await self.execute(
            "SELECT name, type FROM sqlite_master "
            "WHERE type IN ('table', 'view') AND name NOT LIKE 'sqlite_%' "
            "ORDER BY name"
        )
        return [{"name": row["name"], "type": row["type"]} for row in result["rows"]]

    async def relation_type(self, name: str) -> str | None:
        result = await self.execute(
            "SELECT type FROM sqlite_master WHERE type IN ('table', 'view') AND name = :name",
            {"name": name},
        )
        rows = result["rows"]
        return rows[0]["type"] if rows else None

    async def exists(self, name: str) -> bool:
        return await self.relation_type(name) is not None

    async def describe(self, name: str) -> list[dict[str, str]]:
        result = await self.execute(f"PRAGMA table_info({quote_identifier(name)})")
        return [
            {"column_name": row["name"], "column_type": row["type"] or "TEXT"}
            for row in result["rows"]
        ]

    async def create_table(
        self,
        name: str,
        columns: list[tuple[str, str]],
        rows: list[dict[str, Any]],
    ) -> None:
        """
        Create ``name`` with the given ``(column, sql_type)`` pairs and load rows.

        ``sql_type`` is one of INTEGER, REAL or TEXT.
        """
        metadata = MetaData()
        table = Table(
            name,
            metadata,
            *(Column(col, _SQL_TYPES.get(sql_type, Text)) for col, sql_type in columns),
        )
        engine = self._engine()
        try:
            async with engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
                if rows:
                    await conn.execute(table.insert(), rows)
        finally:
            await engine.dispose()
        logger.debug(f"Created table {name} with {len(rows)} rows in {self.db_path}")

    async def rename(self, old_name: str, new_name: str) -> None:
        await self.execute(
            f"ALTER TABLE {quote_identifier(old_name)} RENAME TO {quote_identifier(new_name)}"
        )

    async def drop(self, name: str) -> None:
        kind = await self.relation_type(name)
        if kind is None:
            raise ValueError(f'View "{name}" does not exist')
        statement = "DROP VIEW" if kind == "view" else "DROP TABLE"
        await self.execute(f"{statement} IF EXISTS {quote_identifier(name)}")

    async def cleanup_temp_tables(self) -> list[str]:
        """Drop leftover ``temp_*`` tables from interrupted imports."""
        dropped = []
        for relation in await self.list_relations():
            if relation["name"].startswith(TEMP_TABLE_PREFIX):
                try:
                    await self.drop(relation["name"])
                    dropped.append(relation["name"])
                except Exception as e:
                    logger.warning(f"Failed to drop temp table {relation['name']}: {e}")
        return dropped
