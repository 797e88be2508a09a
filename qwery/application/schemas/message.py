"""Message data models."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.agent.message import Message, MessageRole


class MessageOutput(BaseModel):
    id: str
    conversation_id: str
    content: dict[str, Any]
    role: MessageRole
    metadata: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str

    @classmethod
    def from_domain(cls, message: Message) -> "MessageOutput":
        return cls(
            id=message.id,
            conversation_id=message.conversation_id,
            content=message.content,
            role=message.role,
            metadata=message.metadata,
            created_at=message.created_at,
            updated_at=message.updated_at,
            created_by=message.created_by,
            updated_by=message.updated_by,
        )


class CreateMessageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: dict[str, Any]
    role: MessageRole
    created_by: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    id: str | None = None

    @field_validator("created_by")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class CreateMessageInput(CreateMessageRequest):
    """Either ``conversation_id`` or ``conversation_slug`` identifies the conversation."""

    conversation_id: str | None = None
    conversation_slug: str | None = None

    @model_validator(mode="after")
    def require_conversation(self) -> "CreateMessageInput":
        if not self.conversation_id and not self.conversation_slug:
            raise ValueError("conversation_id or conversation_slug is required")
        return self


class ListMessagesInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    conversation_id: str | None = None
    conversation_slug: str | None = None

    @model_validator(mode="after")
    def require_conversation(self) -> "ListMessagesInput":
        if not self.conversation_id and not self.conversation_slug:
            raise ValueError("conversation_id or conversation_slug is required")
        return self


class UpdateMessageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    updated_by: str | None = None


class UpdateMessageInput(UpdateMessageRequest):
    id: str


class UIMessagePart(BaseModel):
    """One part of a chat UI message; parts other than text pass through untouched."""

    model_config = ConfigDict(extra="allow")

    type: str
    text: str | None = None

    @field_validator("type")
    @classmethod
    def type_not_empty(cls, v: str) -> str:
        return not_empty(v)

    @model_validator(mode="after")
    def text_part_has_text(self) -> "UIMessagePart":
        if self.type == "text" and self.text is None:
            raise ValueError("text parts require a text field")
        return self


class UIMessageInput(BaseModel):
    """A chat message as sent by the UI."""

    id: str
    role: Literal["user", "assistant", "system"]
    parts: list[UIMessagePart]
    metadata: dict[str, Any] | None = None

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        return not_empty(v)

    def to_ui_message(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
