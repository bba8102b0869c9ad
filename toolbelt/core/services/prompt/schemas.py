from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class PromptProvider(str, Enum):
    """Supported LLM providers."""

    OPENAI = 'openai'


class ImageDescriptionRequest(BaseModel):
    """Ask a vision model about one image."""

    image_url: str = Field(description='Publicly reachable image URL')
    prompt: str = Field('What’s in this image?', description='Question to ask about the image')
    detail: Literal['low', 'high'] = Field('low', description='Vision detail level')
    model: str | None = Field(None, description='Model override')


class PromptResult(BaseModel):
    """Result from an LLM call."""

    content: str = Field(description='Generated text')
    prompt_tokens: int | None = Field(None, description='Tokens in the prompt')
    completion_tokens: int | None = Field(None, description='Tokens in the completion')
    total_tokens: int | None = Field(None, description='Total tokens used')
    model: str = Field(description='Model used')
    provider: PromptProvider = Field(description='Provider used')
