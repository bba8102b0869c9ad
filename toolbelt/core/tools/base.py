"""Base types for tool definitions.

Tools are self-contained handlers that wrap one upstream API:
- Geocoding and location lookups (OpenWeather, Google, ipapi)
- Weather and prayer timings (Visual Crossing, OpenWeather, Aladhan)
- Messaging (WhatsApp, Twilio, Gmail)
- Pure unit conversions

Each tool has:
- Input schema (what one request item accepts)
- Output schema (the JSON envelope it returns)
- An async execute() method, and handle() for whole HTTP requests
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from toolbelt.core.utils import parse_query_params

MAX_BATCH_SIZE = 50


class ToolCategory(str, Enum):
    """Category of the tool."""

    LOCATION = 'location'
    WEATHER = 'weather'
    SEARCH = 'search'
    WEB = 'web'
    COMMUNICATION = 'communication'
    DOCUMENTS = 'documents'
    MEDIA = 'media'
    CONVERSION = 'conversion'
    TIME = 'time'


class ApiModel(BaseModel):
    """Model whose JSON keys are camelCase versions of its fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ToolRequest(BaseModel):
    """HTTP request as seen by a tool."""

    method: str = Field('POST', description='HTTP method')
    body: Any = Field(None, description='Parsed JSON body (object or list)')
    query: dict[str, Any] = Field(default_factory=dict, description='Query string parameters')
    headers: dict[str, str] = Field(default_factory=dict, description='Request headers')

    @property
    def is_batch(self) -> bool:
        return self.method.upper() != 'GET' and isinstance(self.body, list)

    def items(self) -> list[dict[str, Any]]:
        """Request items: parsed query for GET, otherwise the body as a list."""
        if self.method.upper() == 'GET':
            return [parse_query_params(self.query)]
        if isinstance(self.body, list):
            return [item if isinstance(item, dict) else {} for item in self.body]
        if isinstance(self.body, dict):
            return [self.body]
        return [{}]

    def item(self) -> dict[str, Any]:
        """The single request item (first one for list bodies)."""
        items = self.items()
        return items[0] if items else {}


class ToolInput(ApiModel):
    """Base class for tool input schemas.

    Each tool should define its own input class inheriting from this.
    Unknown keys in the request (e.g. `functionName`) are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        coerce_numbers_to_str=True,
    )

    def validate_params(self) -> None:
        """Validate input parameters.

        Override to add custom validation beyond Pydantic field validators.
        Raises ValueError if validation fails.
        """


class ToolOutput(ApiModel):
    """Base class for tool output schemas."""

    def to_response(self) -> dict[str, Any]:
        """Serialize to the JSON shape returned over HTTP."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class StatusOutput(ToolOutput):
    """Envelope with `status` and `message`, used by most tools."""

    status: bool = Field(..., description='Whether the tool executed successfully')
    message: str = Field('', description='Outcome description')

    @classmethod
    def failure(cls, message: str, **kwargs: Any) -> 'StatusOutput':
        """Create a failure output with an error message."""
        return cls(status=False, message=message, **kwargs)


class SuccessOutput(ToolOutput):
    """Envelope with `success` and `error`, used by messaging and media tools."""

    success: bool = Field(..., description='Whether the tool executed successfully')
    error: str | None = Field(None, description='Error message if failed')

    @classmethod
    def failure(cls, error: str, **kwargs: Any) -> 'SuccessOutput':
        """Create a failure output with an error message."""
        return cls(success=False, error=error, **kwargs)


class ToolDefinition(BaseModel):
    """Definition of a tool.

    Contains metadata about a tool and provides the execute() method.
    """

    # Identification
    id: str = Field(description='Function name used by the dispatcher (e.g., "locationResolver")')
    name: str = Field(description='Human-readable tool name')

    # Categorization
    category: ToolCategory = Field(description='Tool category')

    # Metadata
    description: str = Field('', description='Tool description')
    version: str = Field('1.0.0', description='Tool version')

    # Self-description returned for OPTIONS requests
    required_params: dict[str, str] = Field(default_factory=dict, description='Parameter descriptions')
    demo_body: Any = Field(None, description='Example request body')
    demo_response: Any = Field(None, description='Example response body')

    # Execution hints
    requires_api_key: bool = Field(
        True,
        description='Whether this tool requires an upstream API key',
    )
    timeout_seconds: float = Field(
        30.0,
        description='Default timeout for upstream calls',
    )

    # Schema classes (set by subclass)
    input_class: ClassVar[type[ToolInput]]
    output_class: ClassVar[type[ToolOutput]]

    def get_input_schema(self) -> dict[str, Any]:
        """Get the JSON schema for this tool's inputs."""
        return self.input_class.model_json_schema(by_alias=True)

    def validate_input(self, input_data: dict[str, Any]) -> ToolInput:
        """Validate and parse input data against this tool's schema."""
        tool_input = self.input_class.model_validate(input_data)
        tool_input.validate_params()
        return tool_input

    def describe(self) -> dict[str, Any]:
        """Interface description served for OPTIONS requests."""
        return {
            'functionName': self.id,
            'description': self.description,
            'requiredParams': self.required_params,
            'demoBody': self.demo_body,
            'demoResponse': self.demo_response,
        }

    def to_function_spec(self) -> dict[str, Any]:
        """OpenAI function-calling entry for this tool."""
        schema = self.get_input_schema()
        parameters: dict[str, Any] = {
            'type': 'object',
            'properties': schema.get('properties', {}),
        }
        if schema.get('required'):
            parameters['required'] = schema['required']
        if schema.get('$defs'):
            parameters['$defs'] = schema['$defs']
        return {
            'type': 'function',
            'function': {
                'name': self.id,
                'description': self.description,
                'parameters': parameters,
            },
        }

    async def handle(self, request: ToolRequest) -> Any:
        """Run the tool for a whole HTTP request.

        Single-item tools validate the request item and return the serialized
        output. Tools accepting lists override this.
        """
        tool_input = self.validate_input(request.item())
        output = await self.execute(tool_input)
        return output.to_response()

    @abstractmethod
    async def execute(self, input: ToolInput) -> ToolOutput:
        """Execute the tool with the given input.

        Args:
            input: Validated tool input

        Returns:
            Tool output with results or error
        """
        raise NotImplementedError('Subclass must implement execute()')

    model_config = ConfigDict(arbitrary_types_allowed=True)
