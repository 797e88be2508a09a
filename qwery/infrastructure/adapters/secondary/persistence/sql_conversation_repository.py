"""SQLAlchemy implementation of ConversationRepository."""

import logging

from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import SluggedBaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import (
    Conversation as DBConversation,
)

logger = logging.getLogger(__name__)


class SqlConversationRepository(
    SluggedBaseRepository[Conversation, DBConversation], ConversationRepository
):
    _model_class = DBConversation
    _entity_name = "Conversation"

    async def find_by_project_id(self, project_id: str) -> list[Conversation]:
        return await self.find_many(FindOptions(order="desc"), project_id=project_id)

    async def find_by_task_id(self, task_id: str) -> list[Conversation]:
        return await self.find_many(FindOptions(order="desc"), task_id=task_id)

    def _to_domain(self, db_conv: DBConversation | None) -> Conversation | None:
        if db_conv is None:
            return None
        return Conversation(
            id=db_conv.id,
            project_id=db_conv.project_id,
            task_id=db_conv.task_id,
            title=db_conv.title,
            seed_message=db_conv.seed_message,
            slug=db_conv.slug,
            datasources=list(db_conv.datasources or []),
            is_public=db_conv.is_public,
            remixed_from=db_conv.remixed_from,
            created_at=db_conv.created_at,
            updated_at=db_conv.updated_at,
            created_by=db_conv.created_by,
            updated_by=db_conv.updated_by,
        )

    def _to_db(self, domain_entity: Conversation) -> DBConversation:
        return DBConversation(
            id=domain_entity.id,
            project_id=domain_entity.project_id,
            task_id=domain_entity.task_id,
            title=domain_entity.title,
            seed_message=domain_entity.seed_message,
            slug=domain_entity.slug,
            datasources=list(domain_entity.datasources),
            is_public=domain_entity.is_public,
            remixed_from=domain_entity.remixed_from,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )
