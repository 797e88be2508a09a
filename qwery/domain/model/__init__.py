from qwery.domain.model.datasource import Datasource, DatasourceKind
from qwery.domain.model.notebook import Cell, CellType, Notebook, RunMode
from qwery.domain.model.organization import Organization
from qwery.domain.model.project import Project
from qwery.domain.model.user import Roles, User

__all__ = [
    "Cell",
    "CellType",
    "Datasource",
    "DatasourceKind",
    "Notebook",
    "Organization",
    "Project",
    "Roles",
    "RunMode",
    "User",
]
