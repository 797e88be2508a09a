"""Datasource data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.datasource import Datasource, DatasourceKind


class DatasourceOutput(BaseModel):
    id: str
    project_id: str
    name: str
    description: str
    slug: str
    datasource_provider: str
    datasource_driver: str
    datasource_kind: DatasourceKind
    config: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, datasource: Datasource) -> "DatasourceOutput":
        return cls(
            id=datasource.id,
            project_id=datasource.project_id,
            name=datasource.name,
            description=datasource.description,
            slug=datasource.slug,
            datasource_provider=datasource.datasource_provider,
            datasource_driver=datasource.datasource_driver,
            datasource_kind=datasource.datasource_kind,
            config=datasource.config,
            created_at=datasource.created_at,
            updated_at=datasource.updated_at,
            created_by=datasource.created_by,
            updated_by=datasource.updated_by,
        )


class CreateDatasourceInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_id: str
    name: str
    datasource_provider: str
    datasource_driver: str
    datasource_kind: DatasourceKind = DatasourceKind.REMOTE
    created_by: str
    description: str | None = None
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("project_id", "name", "datasource_provider", "datasource_driver", "created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)

    @field_validator("config", mode="before")
    @classmethod
    def coerce_none_config(cls, v: dict[str, Any] | None) -> dict[str, Any]:
        return v if v is not None else {}


class UpdateDatasourceRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    datasource_provider: str | None = None
    datasource_driver: str | None = None
    datasource_kind: DatasourceKind | None = None
    config: dict[str, Any] | None = None
    updated_by: str | None = None

    @field_validator("name", "datasource_provider", "datasource_driver")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateDatasourceInput(UpdateDatasourceRequest):
    id: str
