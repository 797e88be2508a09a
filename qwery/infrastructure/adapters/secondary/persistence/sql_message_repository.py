"""SQLAlchemy implementation of MessageRepository."""

import logging

from qwery.domain.model.agent.message import Message, MessageRole
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.message_repository import MessageRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import BaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import Message as DBMessage

logger = logging.getLogger(__name__)


class SqlMessageRepository(BaseRepository[Message, DBMessage], MessageRepository):
    _model_class = DBMessage
    _entity_name = "Message"

    async def find_by_conversation_id(self, conversation_id: str) -> list[Message]:
        """Messages of a conversation in chronological order."""
        return await self.find_many(FindOptions(order="asc"), conversation_id=conversation_id)

    def _to_domain(self, db_message: DBMessage | None) -> Message | None:
        if db_message is None:
            return None
        return Message(
            id=db_message.id,
            conversation_id=db_message.conversation_id,
            content=dict(db_message.content or {}),
            role=MessageRole(db_message.role),
            metadata=dict(db_message.meta or {}),
            created_at=db_message.created_at,
            updated_at=db_message.updated_at,
            created_by=db_message.created_by,
            updated_by=db_message.updated_by,
        )

    def _to_db(self, domain_entity: Message) -> DBMessage:
        return DBMessage(
            id=domain_entity.id,
            conversation_id=domain_entity.conversation_id,
            content=dict(domain_entity.content),
            role=MessageRole(domain_entity.role).value,
            meta=dict(domain_entity.metadata),
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )
