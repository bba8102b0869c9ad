"""Create, update and share Google Docs and Sheets files.

Docs content is a plain string inserted at the start of the body; Sheets
content is a list of rows written from `Sheet1!A1`. After writing, read
access goes to `shareEmail` when given, otherwise to anyone with the link
unless `setPublic` is false.
"""

from typing import Any

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.workspace import ShareSettings, WorkspaceFile, WorkspaceFileType, get_workspace
from toolbelt.core.tools.base import StatusOutput, ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.registry import tool_registry

MISSING_FILE_PARAMS = 'Missing required parameters: title, content'
MISSING_PERMISSION_PARAMS = 'Missing required parameters: fileId, emails (should be a non-empty array)'


class GoogleFileInput(ToolInput):
    title: str | None = Field(None, description='File title')
    content: Any = Field(None, description='Document text, or a list of rows for a spreadsheet')
    share_email: str | list[str] | None = Field(None, description='Email(s) granted read access')
    set_public: bool = Field(True, description='Share with anyone when no email is given')

    def share_settings(self) -> ShareSettings:
        emails = self.share_email if isinstance(self.share_email, list) else [self.share_email or '']
        return ShareSettings(emails=[email for email in emails if email], public=self.set_public)


class GoogleFileOutput(StatusOutput):
    file_id: str | None = None
    file_link: str | None = None


class FilePermissionsInput(ToolInput):
    file_id: str | None = Field(None, description='Drive file id')
    emails: Any = Field(None, description='Emails granted edit access')


class GoogleFileToolDefinition(ToolDefinition):
    """Create or update one kind of Workspace file."""

    input_class = GoogleFileInput
    output_class = GoogleFileOutput

    file_type: WorkspaceFileType
    update: bool = False

    async def execute(self, input: GoogleFileInput) -> GoogleFileOutput:  # type: ignore[override]
        if not input.title or not input.content:
            return GoogleFileOutput(status=False, message=MISSING_FILE_PARAMS)
        if self.update:
            return await self._update(input)
        return await self._create(input)

    async def _write_and_share(self, file: WorkspaceFile, input: GoogleFileInput) -> None:
        workspace = get_workspace()
        await workspace.write(file, input.content)
        await workspace.share(file.file_id, input.share_settings())

    async def _create(self, input: GoogleFileInput) -> GoogleFileOutput:
        label = self.file_type.label
        file = None
        try:
            file = await get_workspace().create(self.file_type, input.title or '')
            await self._write_and_share(file, input)
        except Exception as e:
            logger.warning('Failed to create Google file', type=self.file_type.value, error=str(e))
            return GoogleFileOutput(
                status=False,
                file_id=file.file_id if file else None,
                file_link=file.file_link if file else None,
                message=f'Error creating {label} file: {e}',
            )
        return GoogleFileOutput(
            status=True,
            file_id=file.file_id,
            file_link=file.file_link,
            message=f'{label} file created and updated with content successfully.',
        )

    async def _update(self, input: GoogleFileInput) -> GoogleFileOutput:
        label = self.file_type.label
        try:
            file = await get_workspace().find_by_title(self.file_type, input.title or '')
        except Exception as e:
            return GoogleFileOutput(status=False, message=f'Error finding {label} file: {e}')
        if file is None or not file.file_id:
            return GoogleFileOutput(status=False, message=f'No {label} file found with the given title.')

        try:
            await self._write_and_share(file, input)
        except Exception as e:
            logger.warning('Failed to update Google file', file_id=file.file_id, error=str(e))
            return GoogleFileOutput(
                status=False,
                file_id=file.file_id,
                file_link=file.file_link,
                message=f'Error updating {label} file: {e}',
            )
        return GoogleFileOutput(
            status=True,
            file_id=file.file_id,
            file_link=file.file_link,
            message=f'{label} file updated with content successfully.',
        )


class SetGoogleFilePermissionsToolDefinition(ToolDefinition):
    input_class = FilePermissionsInput
    output_class = StatusOutput

    async def execute(self, input: FilePermissionsInput) -> StatusOutput:  # type: ignore[override]
        if not input.file_id or not isinstance(input.emails, list) or not input.emails:
            return StatusOutput(status=False, message=MISSING_PERMISSION_PARAMS)
        try:
            await get_workspace().grant_edit(input.file_id, [str(email) for email in input.emails])
        except Exception as e:
            logger.warning('Failed to set file permissions', file_id=input.file_id, error=str(e))
            return StatusOutput(status=False, message=f'Error setting file permissions: {e}')
        return StatusOutput(status=True, message='Edit permissions granted to specified emails.')


_DOC_DEMO = {'title': 'Meeting notes', 'content': 'Agenda:\n1. Budget\n2. Hiring', 'shareEmail': 'jane@example.com'}
_SHEET_DEMO = {
    'title': 'Quarterly sales',
    'content': [['Quarter', 'Revenue'], ['Q1', '12000'], ['Q2', '15500']],
    'setPublic': False,
}
_FILE_PARAMS = {
    'title': 'File title (required)',
    'content': 'Text for Docs, list of rows for Sheets (required)',
    'shareEmail': 'Email or list of emails granted read access (optional)',
    'setPublic': 'Share with anyone when no email is given (optional, default true)',
}

CreateGoogleDocsFile = GoogleFileToolDefinition(
    id='createGoogleDocsFile',
    name='Create Google Docs File',
    category=ToolCategory.DOCUMENTS,
    description='Creates a Google Docs file with the given text and shares it.',
    file_type=WorkspaceFileType.DOCUMENT,
    required_params=_FILE_PARAMS,
    demo_body=_DOC_DEMO,
)

CreateGoogleSheetsFile = GoogleFileToolDefinition(
    id='createGoogleSheetsFile',
    name='Create Google Sheets File',
    category=ToolCategory.DOCUMENTS,
    description='Creates a Google Sheets file with the given rows and shares it.',
    file_type=WorkspaceFileType.SPREADSHEET,
    required_params=_FILE_PARAMS,
    demo_body=_SHEET_DEMO,
)

UpdateGoogleDocsFile = GoogleFileToolDefinition(
    id='updateGoogleDocsFile',
    name='Update Google Docs File',
    category=ToolCategory.DOCUMENTS,
    description='Finds a Google Docs file by title and inserts text at the top.',
    file_type=WorkspaceFileType.DOCUMENT,
    update=True,
    required_params=_FILE_PARAMS,
    demo_body=_DOC_DEMO,
)

UpdateGoogleSheetsFile = GoogleFileToolDefinition(
    id='updateGoogleSheetsFile',
    name='Update Google Sheets File',
    category=ToolCategory.DOCUMENTS,
    description='Finds a Google Sheets file by title and overwrites rows from A1.',
    file_type=WorkspaceFileType.SPREADSHEET,
    update=True,
    required_params=_FILE_PARAMS,
    demo_body=_SHEET_DEMO,
)

SetGoogleFilePermissions = SetGoogleFilePermissionsToolDefinition(
    id='setGoogleFilePermissions',
    name='Set Google File Permissions',
    category=ToolCategory.DOCUMENTS,
    description='Grants edit access on a Drive file to a list of emails.',
    required_params={'fileId': 'Drive file id (required)', 'emails': 'Non-empty list of emails (required)'},
    demo_body={'fileId': '1AbCdEfGhIjKlMnOpQrStUvWxYz', 'emails': ['jane@example.com', 'li@example.com']},
)

tool_registry.register(CreateGoogleDocsFile)
tool_registry.register(CreateGoogleSheetsFile)
tool_registry.register(UpdateGoogleDocsFile)
tool_registry.register(UpdateGoogleSheetsFile)
tool_registry.register(SetGoogleFilePermissions)
