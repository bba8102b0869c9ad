from toolbelt.core.services.prompt.base_service import PromptServiceInterface
from toolbelt.core.services.prompt.schemas import ImageDescriptionRequest, PromptProvider, PromptResult
from toolbelt.core.services.prompt.service import get_prompt, get_prompt_service

__all__ = [
    'ImageDescriptionRequest',
    'PromptProvider',
    'PromptResult',
    'PromptServiceInterface',
    'get_prompt',
    'get_prompt_service',
]
