from qwery.application.schemas.datasource import DatasourceOutput
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository


class ListDatasourcesUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, options: FindOptions | None = None) -> list[DatasourceOutput]:
        datasources = await self._datasource_repo.find_all(options)
        return [DatasourceOutput.from_domain(d) for d in datasources]


class ListDatasourcesByProjectUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, project_id: str) -> list[DatasourceOutput]:
        if not project_id:
            raise ValueError("project_id is required")
        datasources = await self._datasource_repo.find_by_project_id(project_id)
        return [DatasourceOutput.from_domain(d) for d in datasources]
