from enum import Enum

from pydantic import BaseModel, Field


class WorkspaceFileType(str, Enum):
    """Google Workspace file kinds handled by the document tools."""

    DOCUMENT = 'document'
    SPREADSHEET = 'spreadsheet'

    @property
    def mime_type(self) -> str:
        return f'application/vnd.google-apps.{self.value}'

    @property
    def label(self) -> str:
        return 'Google Docs' if self == WorkspaceFileType.DOCUMENT else 'Google Sheets'

    def link(self, file_id: str) -> str:
        path = 'document' if self == WorkspaceFileType.DOCUMENT else 'spreadsheets'
        return f'https://docs.google.com/{path}/d/{file_id}/edit'


class WorkspaceFile(BaseModel):
    """A Docs or Sheets file."""

    file_id: str
    file_link: str
    type: WorkspaceFileType


class ShareSettings(BaseModel):
    """Who gets read access after a file is written.

    Named readers take precedence; public access is granted only when
    no reader emails are given.
    """

    emails: list[str] = Field(default_factory=list)
    public: bool = True


class WorkspaceError(Exception):
    """Google API call failed; the message is the API's reason text."""
