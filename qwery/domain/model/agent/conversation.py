from dataclasses import dataclass, field

from qwery.domain.shared_kernel import AuditedEntity, generate_identity, utcnow

DEFAULT_CONVERSATION_TITLE = "New Conversation"


@dataclass(kw_only=True, eq=False)
class Conversation(AuditedEntity):
    """A chat thread between a user and the agent, scoped to a project."""

    project_id: str
    task_id: str
    title: str = DEFAULT_CONVERSATION_TITLE
    seed_message: str | None = None
    slug: str = ""
    datasources: list[str] = field(default_factory=list)
    is_public: bool = False
    remixed_from: str | None = None

    @classmethod
    def create(
        cls,
        project_id: str,
        task_id: str,
        created_by: str,
        title: str | None = None,
        seed_message: str | None = None,
        datasources: list[str] | None = None,
        is_public: bool = False,
        remixed_from: str | None = None,
    ) -> "Conversation":
        entity_id, slug = generate_identity()
        now = utcnow()
        return cls(
            id=entity_id,
            title=title or DEFAULT_CONVERSATION_TITLE,
            seed_message=seed_message,
            task_id=task_id,
            project_id=project_id,
            slug=slug,
            datasources=list(datasources or []),
            is_public=is_public,
            remixed_from=remixed_from,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        title: str | None = None,
        datasources: list[str] | None = None,
        is_public: bool | None = None,
        updated_by: str | None = None,
    ) -> "Conversation":
        if title is not None:
            self.title = title
        if datasources is not None:
            self.datasources = list(datasources)
        if is_public is not None:
            self.is_public = is_public
        self.touch(updated_by)
        return self

    @property
    def has_default_title(self) -> bool:
        return self.title == DEFAULT_CONVERSATION_TITLE
