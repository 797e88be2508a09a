from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from qwery.domain.shared_kernel import AuditedEntity, generate_identity, utcnow


class DatasourceKind(str, Enum):
    """Whether the data lives inside the workspace or behind a remote connection."""

    EMBEDDED = "embedded"
    REMOTE = "remote"


@dataclass(kw_only=True, eq=False)
class Datasource(AuditedEntity):
    project_id: str
    name: str
    datasource_provider: str
    datasource_driver: str
    datasource_kind: DatasourceKind
    description: str = ""
    slug: str = ""
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        project_id: str,
        name: str,
        datasource_provider: str,
        datasource_driver: str,
        datasource_kind: DatasourceKind,
        created_by: str,
        description: str | None = None,
        config: dict[str, Any] | None = None,
    ) -> "Datasource":
        entity_id, slug = generate_identity()
        now = utcnow()
        return cls(
            id=entity_id,
            project_id=project_id,
            name=name,
            description=description or "",
            slug=slug,
            datasource_provider=datasource_provider,
            datasource_driver=datasource_driver,
            datasource_kind=DatasourceKind(datasource_kind),
            config=dict(config or {}),
            created_at=now,
            updated_at=now,
            created_by=created_by,
            updated_by=created_by,
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        datasource_provider: str | None = None,
        datasource_driver: str | None = None,
        datasource_kind: DatasourceKind | None = None,
        config: dict[str, Any] | None = None,
        updated_by: str | None = None,
    ) -> "Datasource":
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if datasource_provider is not None:
            self.datasource_provider = datasource_provider
        if datasource_driver is not None:
            self.datasource_driver = datasource_driver
        if datasource_kind is not None:
            self.datasource_kind = DatasourceKind(datasource_kind)
        if config is not None:
            self.config = dict(config)
        self.touch(updated_by)
        return self
