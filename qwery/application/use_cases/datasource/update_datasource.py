from qwery.application.schemas.datasource import DatasourceOutput, UpdateDatasourceInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository


class UpdateDatasourceUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, command: UpdateDatasourceInput) -> DatasourceOutput:
        datasource = await self._datasource_repo.find_by_id(command.id)
        if datasource is None:
            raise not_found(Code.DATASOURCE_NOT_FOUND_ERROR, "Datasource", command.id)
        datasource.update(
            name=command.name,
            description=command.description,
            datasource_provider=command.datasource_provider,
            datasource_driver=command.datasource_driver,
            datasource_kind=command.datasource_kind,
            config=command.config,
            updated_by=command.updated_by,
        )
        return DatasourceOutput.from_domain(await self._datasource_repo.update(datasource))
