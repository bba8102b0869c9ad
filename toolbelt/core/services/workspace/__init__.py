from toolbelt.core.services.workspace.credentials import load_service_account_credentials, load_service_account_info
from toolbelt.core.services.workspace.schemas import ShareSettings, WorkspaceError, WorkspaceFile, WorkspaceFileType
from toolbelt.core.services.workspace.service import GoogleWorkspaceService, get_workspace

__all__ = [
    'GoogleWorkspaceService',
    'ShareSettings',
    'WorkspaceError',
    'WorkspaceFile',
    'WorkspaceFileType',
    'get_workspace',
    'load_service_account_credentials',
    'load_service_account_info',
]
