from dataclasses import dataclass

from qwery.domain.shared_kernel import AuditedEntity, generate_identity, utcnow


@dataclass(kw_only=True, eq=False)
class Organization(AuditedEntity):
    """A tenant owning projects."""

    name: str
    slug: str = ""
    is_owner: bool = True

    @classmethod
    def create(cls, name: str, created_by: str, is_owner: bool = True) -> "Organization":
        entity_id, slug = generate_identity()
        now = utcnow()
        return cls(
            id=entity_id,
            slug=slug,
            name=name,
            is_owner=is_owner,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        name: str | None = None,
        is_owner: bool | None = None,
        updated_by: str | None = None,
    ) -> "Organization":
        if name is not None:
            self.name = name
        if is_owner is not None:
            self.is_owner = is_owner
        self.touch(updated_by)
        return self
