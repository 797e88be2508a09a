from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from qwery.domain.shared_kernel import AuditedEntity, generate_identity, utcnow


class CellType(str, Enum):
    QUERY = "query"
    PROMPT = "prompt"


class RunMode(str, Enum):
    DEFAULT = "default"
    FIXIT = "fixit"


@dataclass(kw_only=True)
class Cell:
    """One executable cell of a notebook."""

    cell_id: int
    cell_type: CellType = CellType.QUERY
    query: str | None = None
    datasources: list[str] = field(default_factory=list)
    is_active: bool = True
    run_mode: RunMode = RunMode.DEFAULT

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["cell_type"] = CellType(self.cell_type).value
        data["run_mode"] = RunMode(self.run_mode).value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cell":
        return cls(
            cell_id=int(data["cell_id"]),
            cell_type=CellType(data.get("cell_type", CellType.QUERY.value)),
            query=data.get("query"),
            datasources=list(data.get("datasources") or []),
            is_active=bool(data.get("is_active", True)),
            run_mode=RunMode(data.get("run_mode", RunMode.DEFAULT.value)),
        )


@dataclass(kw_only=True, eq=False)
class Notebook(AuditedEntity):
    project_id: str
    title: str
    description: str | None = None
    slug: str = ""
    version: int = 1
    datasources: list[str] = field(default_factory=list)
    cells: list[Cell] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        project_id: str,
        title: str,
        created_by: str,
        description: str | None = None,
        datasources: list[str] | None = None,
        cells: list[Cell] | None = None,
    ) -> "Notebook":
        entity_id, slug = generate_identity()
        now = utcnow()
        return cls(
            id=entity_id,
            project_id=project_id,
            title=title,
            description=description,
            slug=slug,
            version=1,
            datasources=list(datasources or []),
            cells=list(cells or []),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        title: str | None = None,
        description: str | None = None,
        datasources: list[str] | None = None,
        cells: list[Cell] | None = None,
        updated_by: str | None = None,
    ) -> "Notebook":
        """Apply the provided changes and bump the version."""
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if datasources is not None:
            self.datasources = list(datasources)
        if cells is not None:
            self.cells = list(cells)
        self.version += 1
        self.touch(updated_by)
        return self
