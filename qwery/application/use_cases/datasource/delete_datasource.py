from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository


class DeleteDatasourceUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, datasource_id: str) -> bool:
        if await self._datasource_repo.find_by_id(datasource_id) is None:
            raise not_found(Code.DATASOURCE_NOT_FOUND_ERROR, "Datasource", datasource_id)
        return await self._datasource_repo.delete(datasource_id)
