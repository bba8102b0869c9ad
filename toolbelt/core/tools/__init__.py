"""Tools package - one handler per upstream API, reachable by function name.

Tools are self-contained units that perform specific tasks. Each tool:
- Has typed input/output schemas (Pydantic)
- Is auto-discovered at startup
- Is dispatched by `POST /api/toolsHandler` using its `functionName`

## Adding a New Tool

1. Create a file in the appropriate category directory:
   `toolbelt/core/tools/{category}/{tool_name}.py`

2. Define input/output schemas and tool class:

   ```python
   from pydantic import Field
   from toolbelt.core.tools.base import StatusOutput, ToolCategory, ToolDefinition, ToolInput
   from toolbelt.core.tools.registry import tool_registry


   class EchoInput(ToolInput):
       text: str = Field(..., description='Text to echo')


   class EchoOutput(StatusOutput):
       data: str = Field('', description='Echoed text')


   class EchoToolDefinition(ToolDefinition):
       input_class = EchoInput
       output_class = EchoOutput

       async def execute(self, input: EchoInput) -> EchoOutput:
           return EchoOutput(status=True, message='Echoed.', data=input.text)


   EchoTool = EchoToolDefinition(
       id='echoText',
       name='Echo',
       category=ToolCategory.WEB,
       description='Returns the text it was given',
       requires_api_key=False,
   )

   tool_registry.register(EchoTool)
   ```

3. The tool is automatically discovered - no other changes needed.

## Categories

- location/      - Location resolver, IP lookup, phone numbers, geocoding, current time
- weather/       - Forecasts, sunrise/sunset, prayer timings
- search/        - ScaleSERP web and image search
- web/           - Screenshots and page text
- communication/ - WhatsApp, Twilio SMS, Gmail
- documents/     - Google Docs and Sheets
- media/         - Cloudinary uploads, text to speech, transcription
- conversion/    - Unit converters
"""

from toolbelt.core.tools.base import (
    MAX_BATCH_SIZE,
    StatusOutput,
    SuccessOutput,
    ToolCategory,
    ToolDefinition,
    ToolInput,
    ToolOutput,
    ToolRequest,
)
from toolbelt.core.tools.registry import (
    ToolInfoResponse,
    ToolsListResponse,
    tool_registry,
)

__all__ = [
    # Base classes
    'MAX_BATCH_SIZE',
    'StatusOutput',
    'SuccessOutput',
    'ToolCategory',
    'ToolDefinition',
    'ToolInput',
    'ToolOutput',
    'ToolRequest',
    # Registry
    'tool_registry',
    # Response schemas
    'ToolInfoResponse',
    'ToolsListResponse',
]
