"""Tests for the messaging tools with mocked channels."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from toolbelt.core.services.messaging import MISSING_CONFIGURATION, MessagingError, SentMessage, WhatsAppMedia
from toolbelt.core.services.messaging.providers.twilio.service import TwilioSmsService
from toolbelt.core.services.prompt import PromptProvider, PromptResult
from toolbelt.core.services.storage import StorageFile, StorageProvider
from toolbelt.core.tools import tool_registry
from toolbelt.core.tools.communication.common import MISSING_MESSAGE, MISSING_RECIPIENT_NUMBER
from toolbelt.core.tools.communication.whatsapp_document import DEFAULT_FILENAME, document_filename

SYNTHESIZE = 'toolbelt.core.tools.communication.whatsapp_voice.synthesize_and_upload'
AUDIO_BASE = 'https://res.cloudinary.com/demo/video/upload/v1/abc'
MEDIA = 'toolbelt.core.tools.communication.whatsapp_media'


@pytest.fixture
def whatsapp():
    service = MagicMock()
    service.sender = '+15555550100'
    service.send_text = AsyncMock(return_value=SentMessage(msg_id='wamid.1'))
    service.send_audio = AsyncMock(return_value=SentMessage(msg_id='wamid.2'))
    service.send_location = AsyncMock(return_value=SentMessage(msg_id='wamid.3'))
    service.request_location = AsyncMock(return_value=SentMessage(msg_id='wamid.4'))
    service.send_document = AsyncMock(return_value=SentMessage(msg_id='wamid.5'))
    service.mark_read = AsyncMock()
    return service


def patch_whatsapp(module: str, service):
    return patch(f'toolbelt.core.tools.communication.{module}.get_whatsapp', return_value=service)


class TestWhatsAppMessage:
    @pytest.mark.asyncio
    async def test_success_envelope(self, whatsapp, post_request, faker):
        to = faker.msisdn()
        tool = tool_registry.get_or_raise('sendWhatsAppMessage')

        with patch_whatsapp('whatsapp_message', whatsapp):
            response = await tool.handle(post_request({'to': to, 'body': 'Hello'}))

        whatsapp.send_text.assert_awaited_once_with(to, 'Hello')
        assert response['success'] is True
        assert response['platform'] == 'whatsapp'
        assert response['type'] == 'text'
        assert response['from'] == '+15555550100'
        assert response['msgId'] == 'wamid.1'
        assert response['duration'].endswith(' ms')
        assert 'error' not in response

    @pytest.mark.asyncio
    async def test_upstream_failure_is_reported(self, whatsapp, post_request):
        whatsapp.send_text.side_effect = MessagingError('(#131030) Recipient not in allowed list')
        tool = tool_registry.get_or_raise('sendWhatsAppMessage')

        with patch_whatsapp('whatsapp_message', whatsapp):
            response = await tool.handle(post_request({'to': '15555550123', 'body': 'Hello'}))

        assert response['success'] is False
        assert response['error'] == (
            'Error sending message: (#131030) Recipient not in allowed list. '
            'Please ensure the API URL and token are correct.'
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('body', 'message'),
        [({'body': 'Hello'}, MISSING_RECIPIENT_NUMBER), ({'to': '15555550123', 'body': '  '}, MISSING_MESSAGE)],
    )
    async def test_missing_parameters_raise(self, whatsapp, post_request, body, message):
        tool = tool_registry.get_or_raise('sendWhatsAppMessage')

        with patch_whatsapp('whatsapp_message', whatsapp), pytest.raises(ValueError, match=message):
            await tool.handle(post_request(body))

    @pytest.mark.asyncio
    async def test_missing_configuration(self, post_request):
        tool = tool_registry.get_or_raise('sendWhatsAppMessage')

        with (
            patch(
                'toolbelt.core.tools.communication.whatsapp_message.get_whatsapp',
                side_effect=ValueError(MISSING_CONFIGURATION),
            ),
            pytest.raises(ValueError, match='Missing or invalid configuration'),
        ):
            await tool.handle(post_request({'to': '15555550123', 'body': 'Hello'}))


class TestWhatsAppLocation:
    @pytest.mark.asyncio
    async def test_send_location(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('sendWhatsAppLocation')

        with patch_whatsapp('whatsapp_location', whatsapp):
            response = await tool.handle(
                post_request({'to': '15555550123', 'latitude': 30.2672, 'longitude': -97.7431, 'name': 'Capitol'})
            )

        whatsapp.send_location.assert_awaited_once_with('15555550123', '30.2672', '-97.7431', 'Capitol', None)
        assert response['type'] == 'location'
        assert response['success'] is True

    @pytest.mark.asyncio
    async def test_send_location_requires_coordinates(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('sendWhatsAppLocation')

        with patch_whatsapp('whatsapp_location', whatsapp), pytest.raises(ValueError, match='latitude and longitude'):
            await tool.handle(post_request({'to': '15555550123', 'latitude': '30.2'}))

    @pytest.mark.asyncio
    async def test_request_location(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('requestWhatsAppLocation')

        with patch_whatsapp('whatsapp_location', whatsapp):
            response = await tool.handle(post_request({'to': '15555550123', 'text': 'Where are you?'}))

        whatsapp.request_location.assert_awaited_once_with('15555550123', 'Where are you?')
        assert response['type'] == 'interactive'


class TestMarkRead:
    @pytest.mark.asyncio
    async def test_mark_read(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('markWhatsAppMessageRead')

        with patch_whatsapp('whatsapp_read', whatsapp):
            response = await tool.handle(post_request({'messageId': 'wamid.ABC'}))

        whatsapp.mark_read.assert_awaited_once_with('wamid.ABC')
        assert response['success'] is True
        assert response['messageId'] == 'wamid.ABC'

    @pytest.mark.asyncio
    async def test_mark_read_failure(self, whatsapp, post_request):
        whatsapp.mark_read.side_effect = MessagingError('Invalid message id')
        tool = tool_registry.get_or_raise('markWhatsAppMessageRead')

        with patch_whatsapp('whatsapp_read', whatsapp):
            response = await tool.handle(post_request({'messageId': 'wamid.ABC'}))

        assert response['success'] is False
        assert response['error'].startswith('Error marking message as read: Invalid message id.')


class TestWhatsAppVoice:
    @pytest.mark.asyncio
    async def test_audio_is_sent_as_aac(self, whatsapp, post_request):
        audio = StorageFile(key='abc', url=f'{AUDIO_BASE}.mp3', provider=StorageProvider.CLOUDINARY)
        tool = tool_registry.get_or_raise('sendWhatsAppVoiceMessage')

        with (
            patch_whatsapp('whatsapp_voice', whatsapp),
            patch(SYNTHESIZE, AsyncMock(return_value=audio)),
        ):
            response = await tool.handle(post_request({'to': '15555550123', 'body': 'Hello there'}))

        whatsapp.send_audio.assert_awaited_once_with('15555550123', f'{AUDIO_BASE}.aac')
        assert response['type'] == 'audio'

    @pytest.mark.asyncio
    async def test_speech_failure(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('sendWhatsAppVoiceMessage')

        with (
            patch_whatsapp('whatsapp_voice', whatsapp),
            patch(
                SYNTHESIZE,
                AsyncMock(side_effect=RuntimeError('TTS quota exceeded')),
            ),
            pytest.raises(ValueError, match='Error in text to audio conversion: TTS quota exceeded'),
        ):
            await tool.handle(post_request({'to': '15555550123', 'body': 'Hello there'}))


class TestWhatsAppDocument:
    @pytest.mark.asyncio
    async def test_filename_comes_from_url_path(self, whatsapp, post_request):
        url = 'https://files.example.com/invoices/invoice-1042.pdf?sig=abc'
        tool = tool_registry.get_or_raise('sendWhatsAppDocument')

        with patch_whatsapp('whatsapp_document', whatsapp):
            response = await tool.handle(post_request({'to': '15555550123', 'url': url}))

        whatsapp.send_document.assert_awaited_once_with('15555550123', url, 'invoice-1042.pdf')
        assert response['success'] is True
        assert response['type'] == 'document'
        assert response['msgId'] == 'wamid.5'

    @pytest.mark.parametrize(
        ('url', 'filename'),
        [('https://example.com/', DEFAULT_FILENAME), ('https://example.com/a/report.docx', 'report.docx')],
    )
    def test_document_filename(self, url, filename):
        assert document_filename(url) == filename

    @pytest.mark.asyncio
    async def test_missing_url(self, whatsapp, post_request):
        tool = tool_registry.get_or_raise('sendWhatsAppDocument')

        with patch_whatsapp('whatsapp_document', whatsapp), pytest.raises(ValueError, match='document/file URL'):
            await tool.handle(post_request({'to': '15555550123'}))
        whatsapp.send_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_failure_is_reported(self, whatsapp, post_request):
        whatsapp.send_document.side_effect = MessagingError('(#100) Invalid parameter')
        tool = tool_registry.get_or_raise('sendWhatsAppDocument')

        with patch_whatsapp('whatsapp_document', whatsapp):
            response = await tool.handle(post_request({'to': '15555550123', 'url': 'https://example.com/a.pdf'}))

        assert response['success'] is False
        assert response['error'].startswith('Error sending message: (#100) Invalid parameter.')


class TestWhatsAppMedia:
    @pytest.fixture
    def media_whatsapp(self, whatsapp):
        media = WhatsAppMedia(id='media-1', url='https://lookaside.example/media-1', mime_type='image/jpeg')
        whatsapp.get_media = AsyncMock(return_value=media)
        whatsapp.download_media = AsyncMock(return_value=b'media-bytes')
        return whatsapp

    @pytest.fixture
    def storage(self):
        storage = MagicMock()
        storage.upload = AsyncMock(
            return_value=StorageFile(
                key='ai_temp_images/xyz',
                url='https://res.cloudinary.com/demo/image/upload/v1/ai_temp_images/xyz.jpg',
                format='jpg',
                width=1024,
                height=768,
                size_bytes=20480,
                provider=StorageProvider.CLOUDINARY,
            )
        )
        storage.delete = AsyncMock()
        return storage

    @pytest.mark.asyncio
    async def test_image_is_described_and_removed(self, media_whatsapp, storage, post_request):
        prompt = MagicMock()
        prompt.describe_image = AsyncMock(
            return_value=PromptResult(content='A red bicycle.', model='gpt-4o', provider=PromptProvider.OPENAI)
        )
        tool = tool_registry.get_or_raise('viewAndDescribeWhatsAppImage')

        with (
            patch_whatsapp('whatsapp_media', media_whatsapp),
            patch(f'{MEDIA}.get_storage', return_value=storage),
            patch(f'{MEDIA}.get_prompt', return_value=prompt),
        ):
            response = await tool.handle(post_request({'mediaId': 'media-1', 'quality': 'high'}))

        request = prompt.describe_image.await_args.args[0]
        assert request.image_url == (
            'https://res.cloudinary.com/demo/image/upload/w_500,q_auto:low/v1/ai_temp_images/xyz.jpg'
        )
        assert request.detail == 'high'
        storage.delete.assert_awaited_once_with('ai_temp_images/xyz')
        assert response['success'] is True
        assert response['analysis'] == 'A red bicycle.'
        assert response['width'] == 1024

    @pytest.mark.asyncio
    async def test_image_failure_is_reported(self, media_whatsapp, post_request):
        media_whatsapp.get_media.side_effect = MessagingError('media expired')
        tool = tool_registry.get_or_raise('viewAndDescribeWhatsAppImage')

        with patch_whatsapp('whatsapp_media', media_whatsapp):
            response = await tool.handle(post_request({'mediaId': 'media-1'}))

        assert response['success'] is False
        assert response['error'] == 'media expired'
        assert 'analysis' not in response

    @pytest.mark.asyncio
    async def test_voice_note_becomes_an_instruction(self, media_whatsapp, post_request):
        transcriber = MagicMock()
        transcriber.transcribe = AsyncMock(return_value='What time is it?')
        media_whatsapp.get_media.return_value = WhatsAppMedia(
            id='media-2', url='https://lookaside.example/media-2', mime_type='audio/ogg; codecs=opus'
        )
        tool = tool_registry.get_or_raise('listenToWhatsAppVoiceAudio')

        with (
            patch_whatsapp('whatsapp_media', media_whatsapp),
            patch(f'{MEDIA}.get_transcription_service', return_value=transcriber),
        ):
            response = await tool.handle(post_request({'mediaId': 'media-1'}))

        transcriber.transcribe.assert_awaited_once_with(b'media-bytes', 'audio.ogg')
        assert response == 'Please respond with a WhatsApp Voice message, the user says : "What time is it?"'

    @pytest.mark.asyncio
    async def test_voice_note_missing_media_id(self, post_request):
        tool = tool_registry.get_or_raise('listenToWhatsAppVoiceAudio')

        response = await tool.handle(post_request({}))

        assert response == {'success': False, 'message': 'Missing required parameter: mediaId'}


class TestTwilio:
    @pytest.fixture
    def twilio_config(self):
        with patch('toolbelt.core.services.messaging.providers.twilio.service.app_config') as config:
            config.TWILIO_ACCOUNT_SID = 'AC123'
            config.TWILIO_AUTH_TOKEN = 'token'
            config.TWILIO_ASSISTANT_PHONE_NUMBER = '+15555550100'
            yield config

    def test_requires_configuration(self, twilio_config):
        twilio_config.TWILIO_AUTH_TOKEN = ''

        with pytest.raises(ValueError, match='Missing or invalid configuration'):
            TwilioSmsService(client=MagicMock())

    @pytest.mark.asyncio
    async def test_send_sms(self, twilio_config, post_request):
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(sid='SM123', status='queued')
        tool = tool_registry.get_or_raise('sendTextMessage')

        with patch(
            'toolbelt.core.tools.communication.text_message.get_messenger',
            return_value=TwilioSmsService(client=client),
        ):
            response = await tool.handle(post_request({'to': '+15555550123', 'body': 'Hi'}))

        client.messages.create.assert_called_once_with(body='Hi', from_='+15555550100', to='+15555550123')
        assert response['success'] is True
        assert response['platform'] == 'twilio'
        assert response['msgId'] == 'SM123'

    @pytest.mark.asyncio
    async def test_failed_status_is_not_success(self, twilio_config, post_request):
        client = MagicMock()
        client.messages.create.return_value = SimpleNamespace(sid='SM123', status='failed')
        tool = tool_registry.get_or_raise('sendTextMessage')

        with patch(
            'toolbelt.core.tools.communication.text_message.get_messenger',
            return_value=TwilioSmsService(client=client),
        ):
            response = await tool.handle(post_request({'to': '+15555550123', 'body': 'Hi'}))

        assert response['success'] is False
        assert response['msgId'] == 'SM123'


class TestEmail:
    @pytest.mark.asyncio
    async def test_requires_assistant_name(self, post_request):
        tool = tool_registry.get_or_raise('sendEmail')

        with (
            patch('toolbelt.core.tools.communication.email.app_config') as config,
            pytest.raises(ValueError, match='GMAIL_MAILER_ASSISTANT_NAME'),
        ):
            config.GMAIL_MAILER_ASSISTANT_NAME = None
            await tool.handle(post_request({'to': 'jane@example.com', 'body': 'Hi'}))

    @pytest.mark.asyncio
    async def test_sender_name_override(self, post_request, faker):
        mailer = MagicMock()
        mailer.send_text = AsyncMock(return_value=SentMessage(msg_id='18c1', status='sent'))
        to = faker.email()
        tool = tool_registry.get_or_raise('sendEmail')

        with (
            patch('toolbelt.core.tools.communication.email.app_config') as config,
            patch('toolbelt.core.tools.communication.email.get_messenger', return_value=mailer),
        ):
            config.GMAIL_MAILER_ASSISTANT_NAME = 'Assistant'
            response = await tool.handle(post_request({'to': to, 'subject': 'Hi', 'body': '<p>Hi</p>', 'from': 'Jane'}))

        mailer.send_text.assert_awaited_once_with(to, '<p>Hi</p>', subject='Hi', sender_name='Jane')
        assert response['success'] is True
        assert response['from'] == 'Jane'
        assert response['type'] == 'email'
