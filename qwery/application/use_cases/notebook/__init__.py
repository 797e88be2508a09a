from qwery.application.use_cases.notebook.create_notebook import CreateNotebookUseCase
from qwery.application.use_cases.notebook.delete_notebook import DeleteNotebookUseCase
from qwery.application.use_cases.notebook.get_notebook import (
    GetNotebookBySlugUseCase,
    GetNotebookUseCase,
)
from qwery.application.use_cases.notebook.list_notebooks import ListNotebooksByProjectUseCase
from qwery.application.use_cases.notebook.update_notebook import UpdateNotebookUseCase

__all__ = [
    "CreateNotebookUseCase",
    "DeleteNotebookUseCase",
    "GetNotebookBySlugUseCase",
    "GetNotebookUseCase",
    "ListNotebooksByProjectUseCase",
    "UpdateNotebookUseCase",
]
