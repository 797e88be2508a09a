from qwery.application.schemas.datasource import DatasourceOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository


class GetDatasourceUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, datasource_id: str) -> DatasourceOutput:
        datasource = await self._datasource_repo.find_by_id(datasource_id)
        if datasource is None:
            raise not_found(Code.DATASOURCE_NOT_FOUND_ERROR, "Datasource", datasource_id)
        return DatasourceOutput.from_domain(datasource)


class GetDatasourceBySlugUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, slug: str) -> DatasourceOutput:
        datasource = await self._datasource_repo.find_by_slug(slug)
        if datasource is None:
            raise not_found(Code.DATASOURCE_NOT_FOUND_ERROR, "Datasource", slug, key="slug")
        return DatasourceOutput.from_domain(datasource)
