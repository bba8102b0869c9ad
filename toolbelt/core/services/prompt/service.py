from toolbelt.core.services.prompt.base_service import PromptServiceInterface
from toolbelt.core.services.prompt.schemas import PromptProvider


def get_prompt_service(provider: PromptProvider = PromptProvider.OPENAI) -> PromptServiceInterface:
    """Factory function to get an LLM service instance."""
    if provider == PromptProvider.OPENAI:
        from toolbelt.core.services.prompt.providers.openai.service import OpenAIPromptService

        return OpenAIPromptService()
    raise ValueError(f'Unsupported prompt provider: {provider}')


class _PromptServiceHolder:
    """Holder for singleton LLM service instance."""

    instance: PromptServiceInterface | None = None


def get_prompt() -> PromptServiceInterface:
    """Get the shared LLM service (singleton)."""
    if _PromptServiceHolder.instance is None:
        _PromptServiceHolder.instance = get_prompt_service()
    return _PromptServiceHolder.instance
