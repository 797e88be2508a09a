"""
Numeric error code catalog.

Codes below 1000 mirror HTTP semantics, 1000-1099 are generic entity errors
and every aggregate owns a block of one hundred codes starting at 2000:

    2000 notebook, 2100 user, 2200 workspace, 2300 organization,
    2400 project, 2500 datasource, 2600 agent, 2700 conversation,
    2800 message
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeDescription:
    code: int
    message: str


class Code:
    # Common
    SUCCESS = CodeDescription(200, "Success.")
    BAD_REQUEST_ERROR = CodeDescription(400, "Bad request.")
    UNAUTHORIZED_ERROR = CodeDescription(401, "Unauthorized error.")
    WRONG_CREDENTIALS_ERROR = CodeDescription(402, "Wrong Credentials.")
    ACCESS_DENIED_ERROR = CodeDescription(403, "Access denied.")
    INTERNAL_ERROR = CodeDescription(500, "Internal error.")

    ENTITY_NOT_FOUND_ERROR = CodeDescription(1000, "Entity not found.")
    ENTITY_VALIDATION_ERROR = CodeDescription(1001, "Entity validation error.")
    USE_CASE_PORT_VALIDATION_ERROR = CodeDescription(1002, "Use-case port validation error.")
    VALUE_OBJECT_VALIDATION_ERROR = CodeDescription(1003, "Value object validation error.")
    ENTITY_ALREADY_EXISTS_ERROR = CodeDescription(1004, "Entity already exists.")

    # Notebook
    NOTEBOOK_NOT_FOUND_ERROR = CodeDescription(2000, "Notebook not found.")
    NOTEBOOK_ALREADY_EXISTS_ERROR = CodeDescription(2001, "Notebook already exists.")
    NOTEBOOK_UPDATE_ERROR = CodeDescription(2002, "Notebook update error.")
    NOTEBOOK_DELETE_ERROR = CodeDescription(2003, "Notebook delete error.")
    NOTEBOOK_GET_ERROR = CodeDescription(2004, "Notebook get error.")
    NOTEBOOK_GET_ALL_ERROR = CodeDescription(2005, "Notebook get all error.")
    NOTEBOOK_CREATE_ERROR = CodeDescription(2006, "Notebook create error.")

    # User
    USER_NOT_FOUND_ERROR = CodeDescription(2100, "User not found.")
    USER_ALREADY_EXISTS_ERROR = CodeDescription(2101, "User already exists.")
    USER_UPDATE_ERROR = CodeDescription(2102, "User update error.")
    USER_DELETE_ERROR = CodeDescription(2103, "User delete error.")
    USER_GET_ERROR = CodeDescription(2104, "User get error.")
    USER_GET_ALL_ERROR = CodeDescription(2105, "User get all error.")
    USER_CREATE_ERROR = CodeDescription(2106, "User create error.")

    # Workspace
    WORKSPACE_NOT_FOUND_ERROR = CodeDescription(2200, "Workspace not found.")
    WORKSPACE_UPDATE_ERROR = CodeDescription(2201, "Workspace update error.")
    WORKSPACE_GET_ERROR = CodeDescription(2203, "Workspace get error.")
    WORKSPACE_CREATE_ERROR = CodeDescription(2205, "Workspace create error.")

    # Organization
    ORGANIZATION_NOT_FOUND_ERROR = CodeDescription(2300, "Organization not found.")
    ORGANIZATION_UPDATE_ERROR = CodeDescription(2301, "Organization update error.")
    ORGANIZATION_DELETE_ERROR = CodeDescription(2302, "Organization delete error.")
    ORGANIZATION_GET_ERROR = CodeDescription(2303, "Organization get error.")
    ORGANIZATION_GET_ALL_ERROR = CodeDescription(2304, "Organization get all error.")
    ORGANIZATION_CREATE_ERROR = CodeDescription(2305, "Organization create error.")

    # Project
    PROJECT_NOT_FOUND_ERROR = CodeDescription(2400, "Project not found.")
    PROJECT_UPDATE_ERROR = CodeDescription(2401, "Project update error.")
    PROJECT_DELETE_ERROR = CodeDescription(2402, "Project delete error.")
    PROJECT_GET_ERROR = CodeDescription(2403, "Project get error.")
    PROJECT_GET_ALL_ERROR = CodeDescription(2404, "Project get all error.")
    PROJECT_CREATE_ERROR = CodeDescription(2405, "Project create error.")

    # Datasource
    DATASOURCE_NOT_FOUND_ERROR = CodeDescription(2500, "Datasource not found.")
    DATASOURCE_ALREADY_EXISTS_ERROR = CodeDescription(2501, "Datasource already exists.")
    DATASOURCE_UPDATE_ERROR = CodeDescription(2502, "Datasource update error.")
    DATASOURCE_DELETE_ERROR = CodeDescription(2503, "Datasource delete error.")
    DATASOURCE_GET_ERROR = CodeDescription(2504, "Datasource get error.")
    DATASOURCE_GET_ALL_ERROR = CodeDescription(2505, "Datasource get all error.")
    DATASOURCE_CREATE_ERROR = CodeDescription(2506, "Datasource create error.")

    # Agent
    AGENT_SESSION_NOT_FOUND_ERROR = CodeDescription(2600, "Agent session not found.")
    STATE_MACHINE_NOT_FOUND_ERROR = CodeDescription(2601, "State machine not found.")
    INVALID_STATE_TRANSITION_ERROR = CodeDescription(2602, "Invalid state transition.")

    # Conversation
    CONVERSATION_NOT_FOUND_ERROR = CodeDescription(2700, "Conversation not found.")
    CONVERSATION_ALREADY_EXISTS_ERROR = CodeDescription(2701, "Conversation already exists.")
    CONVERSATION_UPDATE_ERROR = CodeDescription(2702, "Conversation update error.")
    CONVERSATION_DELETE_ERROR = CodeDescription(2703, "Conversation delete error.")
    CONVERSATION_GET_ERROR = CodeDescription(2704, "Conversation get error.")
    CONVERSATION_CREATE_ERROR = CodeDescription(2705, "Conversation create error.")

    # Message
    MESSAGE_NOT_FOUND_ERROR = CodeDescription(2800, "Message not found.")
    MESSAGE_ALREADY_EXISTS_ERROR = CodeDescription(2801, "Message already exists.")
    MESSAGE_UPDATE_ERROR = CodeDescription(2802, "Message update error.")
    MESSAGE_DELETE_ERROR = CodeDescription(2803, "Message delete error.")
    MESSAGE_GET_ERROR = CodeDescription(2804, "Message get error.")
    MESSAGE_CREATE_ERROR = CodeDescription(2805, "Message create error.")


def http_status_for(code: int) -> int:
    """Translate a domain code into the HTTP status returned to clients."""
    if 2000 <= code < 3000:
        return 404
    if 400 <= code < 500:
        return code
    return 500
