"""Organization data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.organization import Organization


class OrganizationOutput(BaseModel):
    id: str
    name: str
    slug: str
    is_owner: bool
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, organization: Organization) -> "OrganizationOutput":
        return cls(
            id=organization.id,
            name=organization.name,
            slug=organization.slug,
            is_owner=organization.is_owner,
            created_at=organization.created_at,
            updated_at=organization.updated_at,
            created_by=organization.created_by,
            updated_by=organization.updated_by,
        )


class CreateOrganizationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    created_by: str
    is_owner: bool = True

    @field_validator("name", "created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class UpdateOrganizationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    is_owner: bool | None = None
    updated_by: str | None = None

    @field_validator("name")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateOrganizationInput(UpdateOrganizationRequest):
    id: str
