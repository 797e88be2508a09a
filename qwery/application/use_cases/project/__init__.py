from qwery.application.use_cases.project.create_project import CreateProjectUseCase
from qwery.application.use_cases.project.delete_project import DeleteProjectUseCase
from qwery.application.use_cases.project.get_project import (
    GetProjectBySlugUseCase,
    GetProjectUseCase,
)
from qwery.application.use_cases.project.list_projects import (
    ListProjectsByOrganizationUseCase,
    ListProjectsUseCase,
)
from qwery.application.use_cases.project.update_project import UpdateProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectBySlugUseCase",
    "GetProjectUseCase",
    "ListProjectsByOrganizationUseCase",
    "ListProjectsUseCase",
    "UpdateProjectUseCase",
]
