"""Shared machinery for the unit converters.

Each converter is a fixed table of supported (from, to) pairs. Values
are rounded to two decimals unless the pair says otherwise.
"""

import math
from collections.abc import Callable
from typing import Any, NamedTuple

from pydantic import Field

from toolbelt.core.tools.base import (
    MAX_BATCH_SIZE,
    StatusOutput,
    ToolCategory,
    ToolDefinition,
    ToolInput,
    ToolOutput,
    ToolRequest,
)

TOO_MANY_CONVERSIONS = 'Too many conversions requested. Please provide 50 or fewer conversions in a single request.'
MISSING_UNITS = 'Missing or invalid parameters. Ensure "from" and "to" are provided and valid.'


class Conversion(NamedTuple):
    formula: Callable[[float], float]
    suffix: str
    digits: int = 2


def as_number(value: float) -> int | float:
    """Integral floats become ints so `10.0` serializes as `10`."""
    return int(value) if float(value).is_integer() else value


def parse_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def quote_units(units: tuple[str, ...]) -> str:
    """`"a", "b", or "c"`"""
    quoted = [f'"{unit}"' for unit in units]
    return ', '.join(quoted[:-1]) + f', or {quoted[-1]}'


class ConversionInput(ToolInput):
    """One conversion request."""

    from_unit: str | None = Field(None, alias='from', description='Unit to convert from')
    to_unit: str | None = Field(None, alias='to', description='Unit to convert to')
    value: Any = Field(None, description='Numeric value to convert')


class ConversionOutput(StatusOutput):
    conversions: list[dict[str, Any]] = Field(default_factory=list, description='One result per request item')


class UnitConverter:
    """Converts between the units of one quantity."""

    def __init__(self, quantity: str, units: tuple[str, ...], pairs: dict[tuple[str, str], Conversion]) -> None:
        self.quantity = quantity
        self.units = units
        self.pairs = pairs

    def describe(self, value: Any, from_unit: str, to_unit: str, converted: int | float) -> str:
        return f'Converted {value} {from_unit} to {converted} {to_unit}.'

    def convert(self, from_unit: Any, to_unit: Any, value: Any) -> dict[str, Any]:
        """Convert one value and return its result entry."""
        result: dict[str, Any] = {'from': from_unit, 'to': to_unit, 'originalValue': value}
        if from_unit not in self.units or to_unit not in self.units:
            return {'status': False, 'message': MISSING_UNITS, **result}

        number = parse_number(value)
        if number is None:
            return {
                'status': False,
                'message': f'Invalid value for {self.quantity} conversion. It should be a number.',
                **result,
            }

        conversion = self.pairs.get((from_unit, to_unit))
        if conversion is None:
            return {
                'status': False,
                'message': (
                    f'Invalid conversion parameters. Use {quote_units(self.units)} for from and to parameters.'
                ),
                **result,
            }

        converted = as_number(round(conversion.formula(number), conversion.digits))
        return {
            'status': True,
            'from': from_unit,
            'to': to_unit,
            'originalValue': as_number(number),
            'convertedValue': converted,
            'stringValue': f'{converted} {conversion.suffix}',
            'message': self.describe(value, from_unit, to_unit, converted),
        }


class ConversionToolDefinition(ToolDefinition):
    """Batch converter: object or list body, or query parameters."""

    input_class = ConversionInput
    output_class = ConversionOutput

    converter: UnitConverter
    category: ToolCategory = ToolCategory.CONVERSION
    requires_api_key: bool = False

    async def handle(self, request: ToolRequest) -> Any:
        items = request.items()
        if len(items) > MAX_BATCH_SIZE:
            return ConversionOutput.failure(TOO_MANY_CONVERSIONS, conversions=[]).to_response()

        conversions = []
        for item in items:
            conversion = ConversionInput.model_validate(item)
            conversions.append(self.converter.convert(conversion.from_unit, conversion.to_unit, conversion.value))

        return ConversionOutput(
            status=True,
            message='Conversions processed successfully.',
            conversions=conversions,
        ).to_response()

    async def execute(self, input: ToolInput) -> ToolOutput:
        assert isinstance(input, ConversionInput)
        result = self.converter.convert(input.from_unit, input.to_unit, input.value)
        return ConversionOutput(status=result['status'], message=result['message'], conversions=[result])
