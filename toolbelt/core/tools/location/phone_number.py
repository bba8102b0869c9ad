"""Phone number parsing and validation with `phonenumbers`."""

from typing import Any

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat, ValidationResult
from pydantic import Field

from toolbelt.core.tools.base import MAX_BATCH_SIZE, StatusOutput, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'

PARSE_ERRORS = {
    NumberParseException.INVALID_COUNTRY_CODE: 'INVALID_COUNTRY',
    NumberParseException.NOT_A_NUMBER: 'NOT_A_NUMBER',
    NumberParseException.TOO_SHORT_AFTER_IDD: 'TOO_SHORT',
    NumberParseException.TOO_SHORT_NSN: 'TOO_SHORT',
    NumberParseException.TOO_LONG: 'TOO_LONG',
}

LENGTH_ERRORS = {
    ValidationResult.INVALID_COUNTRY_CODE: 'INVALID_COUNTRY',
    ValidationResult.TOO_SHORT: 'TOO_SHORT',
    ValidationResult.TOO_LONG: 'TOO_LONG',
    ValidationResult.INVALID_LENGTH: 'INVALID_LENGTH',
}


class PhoneNumberInput(ToolInput):
    number: str | None = Field(None, description='Phone number in any common format')
    country: str | None = Field(None, description='Default ISO country code for national numbers')


class PhoneNumberOutput(StatusOutput):
    data: list[dict[str, Any]] = Field(default_factory=list, description='One result per number')


def describe_number(number: str | None, country: str | None = None) -> dict[str, Any]:
    """Parse one number. Unparseable input yields `isValid: false` and the reason."""
    try:
        parsed = phonenumbers.parse(number or '', (country or '').upper() or None)
    except NumberParseException as e:
        return {
            'number': number,
            'isValid': False,
            'isPossible': False,
            'validationError': PARSE_ERRORS.get(e.error_type, str(e)),
        }

    e164 = phonenumbers.format_number(parsed, PhoneNumberFormat.E164)
    result: dict[str, Any] = {
        'country': phonenumbers.region_code_for_number(parsed),
        'number': e164,
        'isValid': phonenumbers.is_valid_number(parsed),
        'isPossible': phonenumbers.is_possible_number(parsed),
        'internationalFormat': phonenumbers.format_number(parsed, PhoneNumberFormat.INTERNATIONAL),
        'nationalFormat': phonenumbers.format_number(parsed, PhoneNumberFormat.NATIONAL),
        'uri': f'tel:{e164}',
    }
    length_error = LENGTH_ERRORS.get(phonenumbers.is_possible_number_with_reason(parsed))
    if length_error:
        result['validationError'] = length_error
    return {key: value for key, value in result.items() if value is not None}


def describe_numbers(items: list[dict[str, Any]]) -> PhoneNumberOutput:
    if len(items) > MAX_BATCH_SIZE:
        return PhoneNumberOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    results = []
    for item in items:
        request = PhoneNumberInput.model_validate(item)
        results.append(describe_number(request.number, request.country))
    return PhoneNumberOutput(status=True, message='Phone number information retrieved successfully.', data=results)


class ParsePhoneNumberToolDefinition(ToolDefinition):
    input_class = PhoneNumberInput
    output_class = PhoneNumberOutput

    async def handle(self, request: ToolRequest) -> Any:
        if request.method.upper() not in ('GET', 'POST'):
            return PhoneNumberOutput.failure('Invalid request method').to_response()
        return describe_numbers(request.items()).to_response()

    async def execute(self, input: PhoneNumberInput) -> PhoneNumberOutput:  # type: ignore[override]
        return describe_numbers([input.model_dump(exclude_none=True)])


ParsePhoneNumber = ParsePhoneNumberToolDefinition(
    id='parsePhoneNumber',
    name='Phone Number Parser',
    category=ToolCategory.LOCATION,
    description='Parses, validates and formats phone numbers. Accepts one number or a list of up to 50.',
    requires_api_key=False,
    required_params={
        'number': 'Phone number string (required)',
        'country': 'Country code string (optional)',
    },
    demo_body=[{'number': '8 (800) 555-35-35', 'country': 'RU'}, {'number': '+12133734253'}],
    demo_response={
        'status': True,
        'message': 'Phone number information retrieved successfully.',
        'data': [
            {
                'country': 'US',
                'number': '+12133734253',
                'isValid': True,
                'isPossible': True,
                'internationalFormat': '+1 213-373-4253',
                'nationalFormat': '(213) 373-4253',
                'uri': 'tel:+12133734253',
            }
        ],
    },
)

tool_registry.register(ParsePhoneNumber)
