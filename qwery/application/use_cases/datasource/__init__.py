from qwery.application.use_cases.datasource.create_datasource import CreateDatasourceUseCase
from qwery.application.use_cases.datasource.delete_datasource import DeleteDatasourceUseCase
from qwery.application.use_cases.datasource.get_datasource import (
    GetDatasourceBySlugUseCase,
    GetDatasourceUseCase,
)
from qwery.application.use_cases.datasource.list_datasources import (
    ListDatasourcesByProjectUseCase,
    ListDatasourcesUseCase,
)
from qwery.application.use_cases.datasource.update_datasource import UpdateDatasourceUseCase

__all__ = [
    "CreateDatasourceUseCase",
    "DeleteDatasourceUseCase",
    "GetDatasourceBySlugUseCase",
    "GetDatasourceUseCase",
    "ListDatasourcesByProjectUseCase",
    "ListDatasourcesUseCase",
    "UpdateDatasourceUseCase",
]
