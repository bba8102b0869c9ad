from abc import ABC, abstractmethod

from toolbelt.core.services.prompt.schemas import ImageDescriptionRequest, PromptResult


class PromptServiceInterface(ABC):
    """Interface for LLM services."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service.

        Override in implementations that need cleanup.
        """

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
    ) -> PromptResult:
        """Plain text completion."""
        raise NotImplementedError

    @abstractmethod
    async def describe_image(self, request: ImageDescriptionRequest) -> PromptResult:
        """Describe an image with a vision-capable model.

        Args:
            request: Image URL, question and detail level

        Returns:
            PromptResult whose content is the description
        """
        raise NotImplementedError
