from dataclasses import dataclass

from qwery.domain.shared_kernel import AuditedEntity, generate_identity, utcnow

DEFAULT_PROJECT_STATUS = "active"


@dataclass(kw_only=True, eq=False)
class Project(AuditedEntity):
    """A workspace inside an organization grouping datasources, notebooks and conversations."""

    org_id: str
    name: str
    slug: str = ""
    description: str | None = None
    status: str = DEFAULT_PROJECT_STATUS

    @classmethod
    def create(
        cls,
        org_id: str,
        name: str,
        created_by: str,
        description: str | None = None,
    ) -> "Project":
        entity_id, slug = generate_identity()
        now = utcnow()
        return cls(
            id=entity_id,
            org_id=org_id,
            name=name,
            slug=slug,
            description=description,
            status=DEFAULT_PROJECT_STATUS,
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        status: str | None = None,
        updated_by: str | None = None,
    ) -> "Project":
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if status is not None:
            self.status = status
        self.touch(updated_by)
        return self
