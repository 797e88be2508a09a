"""Conversation data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.agent.conversation import Conversation


class ConversationOutput(BaseModel):
    id: str
    title: str
    seed_message: str | None = None
    task_id: str
    project_id: str
    slug: str
    datasources: list[str]
    is_public: bool
    remixed_from: str | None = None
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, conversation: Conversation) -> "ConversationOutput":
        return cls(
            id=conversation.id,
            title=conversation.title,
            seed_message=conversation.seed_message,
            task_id=conversation.task_id,
            project_id=conversation.project_id,
            slug=conversation.slug,
            datasources=list(conversation.datasources),
            is_public=conversation.is_public,
            remixed_from=conversation.remixed_from,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
            created_by=conversation.created_by,
            updated_by=conversation.updated_by,
        )


class CreateConversationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_id: str
    task_id: str
    created_by: str
    title: str | None = None
    seed_message: str | None = None
    datasources: list[str] = Field(default_factory=list)
    is_public: bool = False
    remixed_from: str | None = None

    @field_validator("project_id", "task_id", "created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class UpdateConversationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    datasources: list[str] | None = None
    is_public: bool | None = None
    updated_by: str | None = None

    @field_validator("title")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateConversationInput(UpdateConversationRequest):
    id: str
