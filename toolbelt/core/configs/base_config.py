import warnings
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Shared settings behaviour for every config class.

    Values come from the process environment first, then from `.env`.
    Names listed in `_default_secrets` must not keep the `changethis`
    placeholder outside local development.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_ignore_empty=True,
        extra='ignore',
    )

    _default_secrets: list[str] = []

    @staticmethod
    def _parse_list(value: Any) -> Any:
        """Accept comma-separated strings for list fields."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        return value

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        self._check_default_secrets()

    def _check_default_secrets(self) -> None:
        for name in self._default_secrets:
            if getattr(self, name, None) != 'changethis':
                continue
            message = f'The value of {name} is "changethis", for security, please change it.'
            if getattr(self, 'ENVIRONMENT', 'local') == 'local':
                warnings.warn(message, stacklevel=1)
            else:
                raise ValueError(message)
