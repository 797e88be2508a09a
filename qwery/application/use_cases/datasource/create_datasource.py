import logging

from qwery.application.schemas.datasource import CreateDatasourceInput, DatasourceOutput
from qwery.domain.model.datasource import Datasource
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository

logger = logging.getLogger(__name__)


class CreateDatasourceUseCase:
    def __init__(self, datasource_repository: DatasourceRepository) -> None:
        self._datasource_repo = datasource_repository

    async def execute(self, command: CreateDatasourceInput) -> DatasourceOutput:
        datasource = Datasource.create(
            project_id=command.project_id,
            name=command.name,
            datasource_provider=command.datasource_provider,
            datasource_driver=command.datasource_driver,
            datasource_kind=command.datasource_kind,
            created_by=command.created_by,
            description=command.description,
            config=command.config,
        )
        datasource = await self._datasource_repo.create(datasource)
        logger.info(
            f"Created datasource {datasource.id} ({datasource.datasource_provider}) "
            f"for project {datasource.project_id}"
        )
        return DatasourceOutput.from_domain(datasource)
