"""Tool registry - stores registered tools.

The registry holds all registered tools. Tools register themselves
by calling `tool_registry.register(MyTool)` at module level.

Lookups ignore case so `functionName` values like `LocationResolver`
and `locationresolver` reach the same tool. Discovery lives in
`toolbelt/core/tools/discovery.py`.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from toolbelt.core.tools.base import ToolCategory, ToolDefinition

logger = logging.getLogger(__name__)

INVALID_FUNCTION_NAME = 'Invalid function name.'


class ToolRegistry:
    """Registry of all available tools."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    @staticmethod
    def _key(tool_id: str) -> str:
        return tool_id.strip().lower()

    def register(self, tool: ToolDefinition) -> None:
        """Register a tool.

        Args:
            tool: Tool definition to register

        Raises:
            ValueError: If a tool with the same ID (ignoring case) is already registered
        """
        key = self._key(tool.id)
        if key in self._tools:
            raise ValueError(f'Tool with ID "{tool.id}" is already registered')
        self._tools[key] = tool
        logger.debug(f'Registered tool: {tool.id}')

    def get(self, tool_id: str | None) -> ToolDefinition | None:
        """Get a tool by ID, ignoring case."""
        if not tool_id:
            return None
        return self._tools.get(self._key(tool_id))

    def get_or_raise(self, tool_id: str | None) -> ToolDefinition:
        """Get a tool by ID or raise an error.

        Raises:
            ValueError: If tool is not found
        """
        tool = self.get(tool_id)
        if tool is None:
            raise ValueError(INVALID_FUNCTION_NAME)
        return tool

    def list_all(self) -> list[ToolDefinition]:
        """List all registered tools."""
        return list(self._tools.values())

    def list_by_category(self, category: ToolCategory) -> list[ToolDefinition]:
        """List tools by category."""
        return [t for t in self._tools.values() if t.category == category]

    def list_ids(self) -> list[str]:
        """List all tool IDs as registered."""
        return [t.id for t in self._tools.values()]

    def __contains__(self, tool_id: str) -> bool:
        return self._key(tool_id) in self._tools

    def __len__(self) -> int:
        return len(self._tools)


# Global registry
tool_registry = ToolRegistry()


# API response schemas
class ToolInfoResponse(BaseModel):
    """Tool information for the OPTIONS catalogue."""

    id: str = Field(description='Function name')
    name: str = Field(description='Human-readable name')
    category: ToolCategory = Field(description='Tool category')
    description: str = Field(description='Tool description')
    version: str = Field(description='Tool version')
    requires_api_key: bool = Field(description='Whether an upstream API key is required')
    required_params: dict[str, str] = Field(default_factory=dict, description='Parameter descriptions')
    demo_body: Any = Field(None, description='Example request body')
    input_schema: dict[str, Any] = Field(description='JSON schema for inputs')

    @classmethod
    def from_tool(cls, tool: ToolDefinition) -> 'ToolInfoResponse':
        """Create from a ToolDefinition."""
        return cls(
            id=tool.id,
            name=tool.name,
            category=tool.category,
            description=tool.description,
            version=tool.version,
            requires_api_key=tool.requires_api_key,
            required_params=tool.required_params,
            demo_body=tool.demo_body,
            input_schema=tool.get_input_schema(),
        )


class ToolsListResponse(BaseModel):
    """Response for listing tools."""

    tools: list[ToolInfoResponse] = Field(description='List of available tools')
    total: int = Field(description='Total number of tools')
