"""Google Docs, Sheets and Drive operations for the document tools.

The Google API client is synchronous, so every `execute()` runs in a
worker thread.
"""

import asyncio
from typing import Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from toolbelt.core.deps import logger
from toolbelt.core.services.workspace.credentials import load_service_account_credentials
from toolbelt.core.services.workspace.schemas import ShareSettings, WorkspaceError, WorkspaceFile, WorkspaceFileType

DRIVE_SCOPES = ['https://www.googleapis.com/auth/drive']
SHEET_RANGE = 'Sheet1!A1'


async def _execute(request: Any) -> dict[str, Any]:
    try:
        return await asyncio.to_thread(request.execute)
    except HttpError as e:
        raise WorkspaceError(e.reason or str(e)) from e


class GoogleWorkspaceService:
    """Creates, finds, updates and shares Docs and Sheets files."""

    def __init__(self, credentials: Any = None) -> None:
        credentials = credentials or load_service_account_credentials(DRIVE_SCOPES)
        self._drive = build('drive', 'v3', credentials=credentials, cache_discovery=False)
        self._docs = build('docs', 'v1', credentials=credentials, cache_discovery=False)
        self._sheets = build('sheets', 'v4', credentials=credentials, cache_discovery=False)

    async def create(self, file_type: WorkspaceFileType, title: str) -> WorkspaceFile:
        """Create an empty file and return its id and edit link."""
        if file_type == WorkspaceFileType.DOCUMENT:
            result = await _execute(self._docs.documents().create(body={'title': title}))
            file_id = result.get('documentId')
            if not file_id:
                raise WorkspaceError('Document ID is null')
        else:
            result = await _execute(self._sheets.spreadsheets().create(body={'properties': {'title': title}}))
            file_id = result.get('spreadsheetId')
            if not file_id:
                raise WorkspaceError('Spreadsheet ID is null')

        logger.info('Created Google file', type=file_type.value, file_id=file_id)
        return WorkspaceFile(file_id=file_id, file_link=file_type.link(file_id), type=file_type)

    async def find_by_title(self, file_type: WorkspaceFileType, title: str) -> WorkspaceFile | None:
        """First file of the given type whose name is exactly `title`."""
        escaped = title.replace('\\', '\\\\').replace("'", "\\'")
        result = await _execute(
            self._drive.files().list(
                q=f"name='{escaped}' and mimeType='{file_type.mime_type}'",
                fields='files(id, name)',
            )
        )
        files = result.get('files') or []
        if not files:
            return None
        file_id = files[0].get('id') or ''
        return WorkspaceFile(file_id=file_id, file_link=file_type.link(file_id), type=file_type)

    async def write_text(self, file_id: str, content: str) -> None:
        """Insert text at the start of a document body."""
        await _execute(
            self._docs.documents().batchUpdate(
                documentId=file_id,
                body={'requests': [{'insertText': {'location': {'index': 1}, 'text': content}}]},
            )
        )

    async def write_rows(self, file_id: str, rows: list[list[Any]]) -> None:
        """Write rows to the first sheet starting at A1."""
        await _execute(
            self._sheets.spreadsheets()
            .values()
            .update(
                spreadsheetId=file_id,
                range=SHEET_RANGE,
                valueInputOption='RAW',
                body={'values': rows},
            )
        )

    async def write(self, file: WorkspaceFile, content: Any) -> None:
        if file.type == WorkspaceFileType.DOCUMENT:
            await self.write_text(file.file_id, content)
        else:
            await self.write_rows(file.file_id, content)

    async def _grant(self, file_id: str, permission: dict[str, str]) -> None:
        await _execute(self._drive.permissions().create(fileId=file_id, body=permission))

    async def share(self, file_id: str, settings: ShareSettings) -> None:
        """Grant read access to named users, or to anyone when none are named."""
        emails = [email for email in settings.emails if email]
        if emails:
            await asyncio.gather(
                *(self._grant(file_id, {'role': 'reader', 'type': 'user', 'emailAddress': email}) for email in emails)
            )
        elif settings.public:
            await self._grant(file_id, {'role': 'reader', 'type': 'anyone'})

    async def grant_edit(self, file_id: str, emails: list[str]) -> None:
        await asyncio.gather(
            *(self._grant(file_id, {'role': 'writer', 'type': 'user', 'emailAddress': email}) for email in emails)
        )
        logger.info('Granted edit permissions', file_id=file_id, count=len(emails))


class _WorkspaceServiceHolder:
    """Holder for the singleton Google Workspace service."""

    instance: GoogleWorkspaceService | None = None


def get_workspace() -> GoogleWorkspaceService:
    """Get the shared Google Workspace service (singleton)."""
    if _WorkspaceServiceHolder.instance is None:
        _WorkspaceServiceHolder.instance = GoogleWorkspaceService()
    return _WorkspaceServiceHolder.instance
