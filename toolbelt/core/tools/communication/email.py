from pydantic import Field

from toolbelt.core.configs import app_config
from toolbelt.core.services.messaging import MessagingProvider, get_messenger
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import DeliveryOutput, deliver, require
from toolbelt.core.tools.registry import tool_registry

MISSING_ASSISTANT_NAME = 'Error: Missing or invalid GMAIL_MAILER_ASSISTANT_NAME in environment variables.'


class EmailInput(ToolInput):
    to: str | None = Field(None, description='Recipient email address')
    subject: str | None = Field(None, description='Subject line')
    body: str | None = Field(None, description='HTML body')
    sender_name: str | None = Field(None, alias='from', description='Display name of the sender')


class SendEmailToolDefinition(ToolDefinition):
    input_class = EmailInput
    output_class = DeliveryOutput

    async def execute(self, input: EmailInput) -> DeliveryOutput:  # type: ignore[override]
        default_name = require(app_config.GMAIL_MAILER_ASSISTANT_NAME, MISSING_ASSISTANT_NAME)
        sender_name = input.sender_name or default_name
        to = require(input.to, 'Error: Missing required parameter: to. Please provide the recipient email.')
        body = require(input.body, 'Error: Missing required parameter: body. Please provide the email content.')

        try:
            mailer = get_messenger(MessagingProvider.GMAIL)
        except Exception as e:
            raise ValueError(f'Error initializing mailer client: {e}') from e

        return await deliver(
            lambda: mailer.send_text(to, body, subject=input.subject, sender_name=sender_name),
            platform='gmail',
            type='email',
            to=to,
            sender=sender_name,
            describe_error=lambda e: (
                f'Error sending email: {e}. Please check the Gmail service account credentials and the recipient email.'
            ),
        )


SendEmail = SendEmailToolDefinition(
    id='sendEmail',
    name='Send Email',
    category=ToolCategory.COMMUNICATION,
    description='Sends an HTML email through Gmail.',
    required_params={
        'to': 'Recipient email (required)',
        'subject': 'Subject line (optional)',
        'body': 'HTML body (required)',
        'from': 'Sender display name (optional)',
    },
    demo_body={'to': 'jane@example.com', 'subject': 'Your booking', 'body': '<p>See you on Friday!</p>'},
)

tool_registry.register(SendEmail)
