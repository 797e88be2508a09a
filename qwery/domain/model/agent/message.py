from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from qwery.domain.shared_kernel import AuditedEntity, utcnow


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(kw_only=True, eq=False)
class Message(AuditedEntity):
    """
    A persisted chat message.

    ``content`` normally holds the complete UI message
    (``{"id", "role", "metadata", "parts"}``); older rows may hold
    ``{"text": ...}`` instead.
    """

    conversation_id: str
    content: dict[str, Any]
    role: MessageRole
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        conversation_id: str,
        content: dict[str, Any],
        role: MessageRole,
        created_by: str,
        metadata: dict[str, Any] | None = None,
        message_id: str | None = None,
    ) -> "Message":
        now = utcnow()
        return cls(
            id=message_id or cls.generate_id(),
            conversation_id=conversation_id,
            content=content,
            role=MessageRole(role),
            metadata=dict(metadata or {}),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        content: dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
        updated_by: str | None = None,
    ) -> "Message":
        if content is not None:
            self.content = content
        if metadata is not None:
            self.metadata = dict(metadata)
        self.touch(updated_by)
        return self

    @property
    def text(self) -> str:
        """Concatenated text parts, falling back to the legacy ``text`` key."""
        parts = self.content.get("parts")
        if isinstance(parts, list):
            return " ".join(
                str(part.get("text", ""))
                for part in parts
                if isinstance(part, dict) and part.get("type") == "text"
            ).strip()
        return str(self.content.get("text", ""))
