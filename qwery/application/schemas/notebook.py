"""Notebook data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.notebook import Cell, CellType, Notebook, RunMode


class CellSchema(BaseModel):
    cell_id: int
    cell_type: CellType = CellType.QUERY
    query: str | None = None
    datasources: list[str] = Field(default_factory=list)
    is_active: bool = True
    run_mode: RunMode = RunMode.DEFAULT

    def to_domain(self) -> Cell:
        return Cell(
            cell_id=self.cell_id,
            cell_type=self.cell_type,
            query=self.query,
            datasources=list(self.datasources),
            is_active=self.is_active,
            run_mode=self.run_mode,
        )

    @classmethod
    def from_domain(cls, cell: Cell) -> "CellSchema":
        return cls(**cell.to_dict())


class NotebookOutput(BaseModel):
    id: str
    project_id: str
    title: str
    description: str | None = None
    slug: str
    version: int
    datasources: list[str]
    cells: list[CellSchema]
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, notebook: Notebook) -> "NotebookOutput":
        return cls(
            id=notebook.id,
            project_id=notebook.project_id,
            title=notebook.title,
            description=notebook.description,
            slug=notebook.slug,
            version=notebook.version,
            datasources=list(notebook.datasources),
            cells=[CellSchema.from_domain(c) for c in notebook.cells],
            created_at=notebook.created_at,
            updated_at=notebook.updated_at,
            created_by=notebook.created_by,
            updated_by=notebook.updated_by,
        )


class CreateNotebookInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_id: str
    title: str
    created_by: str
    description: str | None = None
    datasources: list[str] = Field(default_factory=list)
    cells: list[CellSchema] = Field(default_factory=list)

    @field_validator("project_id", "title", "created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class UpdateNotebookRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    datasources: list[str] | None = None
    cells: list[CellSchema] | None = None
    updated_by: str | None = None

    @field_validator("title")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateNotebookInput(UpdateNotebookRequest):
    id: str
