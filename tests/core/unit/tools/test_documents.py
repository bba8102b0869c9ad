"""Tests for the Google Docs and Sheets tools with a mocked workspace."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from toolbelt.core.services.workspace import ShareSettings, WorkspaceError, WorkspaceFile, WorkspaceFileType
from toolbelt.core.tools import tool_registry
from toolbelt.core.tools.documents.google_files import (
    MISSING_FILE_PARAMS,
    MISSING_PERMISSION_PARAMS,
    GoogleFileInput,
)

GET_WORKSPACE = 'toolbelt.core.tools.documents.google_files.get_workspace'


def workspace_file(file_type: WorkspaceFileType, file_id: str = 'file-123') -> WorkspaceFile:
    return WorkspaceFile(file_id=file_id, file_link=file_type.link(file_id), type=file_type)


@pytest.fixture
def workspace():
    service = MagicMock()
    service.create = AsyncMock(side_effect=lambda file_type, title: workspace_file(file_type))
    service.find_by_title = AsyncMock(side_effect=lambda file_type, title: workspace_file(file_type, 'found-1'))
    service.write = AsyncMock()
    service.share = AsyncMock()
    service.grant_edit = AsyncMock()
    return service


class TestShareSettings:
    def test_single_email(self):
        settings = GoogleFileInput(share_email='jane@example.com').share_settings()

        assert settings == ShareSettings(emails=['jane@example.com'], public=True)

    def test_email_list_and_private(self):
        settings = GoogleFileInput.model_validate({'shareEmail': ['a@x.io', 'b@x.io'], 'setPublic': False})

        assert settings.share_settings() == ShareSettings(emails=['a@x.io', 'b@x.io'], public=False)

    def test_no_email(self):
        assert GoogleFileInput().share_settings().emails == []


class TestCreateFile:
    @pytest.mark.asyncio
    async def test_create_docs_file(self, workspace, post_request):
        tool = tool_registry.get_or_raise('createGoogleDocsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Notes', 'content': 'Hello'}))

        workspace.create.assert_awaited_once_with(WorkspaceFileType.DOCUMENT, 'Notes')
        workspace.write.assert_awaited_once()
        assert workspace.share.await_args.args == ('file-123', ShareSettings(emails=[], public=True))
        assert response == {
            'status': True,
            'message': 'Google Docs file created and updated with content successfully.',
            'fileId': 'file-123',
            'fileLink': 'https://docs.google.com/document/d/file-123/edit',
        }

    @pytest.mark.asyncio
    async def test_create_sheets_file_writes_rows(self, workspace, post_request):
        rows = [['Quarter', 'Revenue'], ['Q1', '12000']]
        tool = tool_registry.get_or_raise('createGoogleSheetsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Sales', 'content': rows}))

        assert workspace.write.await_args.args[1] == rows
        assert response['fileLink'] == 'https://docs.google.com/spreadsheets/d/file-123/edit'

    @pytest.mark.asyncio
    async def test_missing_content(self, workspace, post_request):
        tool = tool_registry.get_or_raise('createGoogleDocsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Notes'}))

        workspace.create.assert_not_called()
        assert response == {'status': False, 'message': MISSING_FILE_PARAMS}

    @pytest.mark.asyncio
    async def test_write_failure_keeps_file_id(self, workspace, post_request):
        workspace.write.side_effect = WorkspaceError('Requested entity was not found.')
        tool = tool_registry.get_or_raise('createGoogleDocsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Notes', 'content': 'Hello'}))

        assert response['status'] is False
        assert response['fileId'] == 'file-123'
        assert response['message'] == 'Error creating Google Docs file: Requested entity was not found.'


class TestUpdateFile:
    @pytest.mark.asyncio
    async def test_update_found_file(self, workspace, post_request):
        tool = tool_registry.get_or_raise('updateGoogleSheetsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Sales', 'content': [['a']]}))

        workspace.create.assert_not_called()
        assert response['status'] is True
        assert response['fileId'] == 'found-1'
        assert response['message'] == 'Google Sheets file updated with content successfully.'

    @pytest.mark.asyncio
    async def test_update_missing_file(self, workspace, post_request):
        workspace.find_by_title.side_effect = None
        workspace.find_by_title.return_value = None
        tool = tool_registry.get_or_raise('updateGoogleDocsFile')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'title': 'Nope', 'content': 'x'}))

        workspace.write.assert_not_called()
        assert response == {'status': False, 'message': 'No Google Docs file found with the given title.'}


class TestFilePermissions:
    @pytest.mark.asyncio
    async def test_grants_edit(self, workspace, post_request):
        tool = tool_registry.get_or_raise('setGoogleFilePermissions')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request({'fileId': 'abc', 'emails': ['jane@example.com']}))

        workspace.grant_edit.assert_awaited_once_with('abc', ['jane@example.com'])
        assert response == {'status': True, 'message': 'Edit permissions granted to specified emails.'}

    @pytest.mark.parametrize('body', [{'fileId': 'abc'}, {'fileId': 'abc', 'emails': []}, {'emails': ['a@x.io']}])
    @pytest.mark.asyncio
    async def test_missing_params(self, workspace, post_request, body):
        tool = tool_registry.get_or_raise('setGoogleFilePermissions')

        with patch(GET_WORKSPACE, return_value=workspace):
            response = await tool.handle(post_request(body))

        workspace.grant_edit.assert_not_called()
        assert response == {'status': False, 'message': MISSING_PERMISSION_PARAMS}
