from qwery.infrastructure.agent.tools.data_tools import WorkspaceDataTools
from qwery.infrastructure.agent.tools.sheet_loader import SheetFetcher, parse_csv
from qwery.infrastructure.agent.tools.tool_definitions import build_data_tools
from qwery.infrastructure.agent.tools.view_registry import ViewRecord, ViewRegistry
from qwery.infrastructure.agent.tools.workspace import (
    ConversationWorkspace,
    WorkspaceNotConfiguredError,
)

__all__ = [
    "ConversationWorkspace",
    "SheetFetcher",
    "ViewRecord",
    "ViewRegistry",
    "WorkspaceDataTools",
    "WorkspaceNotConfiguredError",
    "build_data_tools",
    "parse_csv",
]
