"""Project data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.project import Project


class ProjectOutput(BaseModel):
    id: str
    org_id: str
    name: str
    slug: str
    description: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectOutput":
        return cls(
            id=project.id,
            org_id=project.org_id,
            name=project.name,
            slug=project.slug,
            description=project.description,
            status=project.status,
            created_at=project.created_at,
            updated_at=project.updated_at,
            created_by=project.created_by,
            updated_by=project.updated_by,
        )


class CreateProjectInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    org_id: str
    name: str
    created_by: str
    description: str | None = None

    @field_validator("org_id", "name", "created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class UpdateProjectRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    status: str | None = None
    updated_by: str | None = None

    @field_validator("name", "status")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateProjectInput(UpdateProjectRequest):
    id: str
