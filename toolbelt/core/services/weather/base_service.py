from abc import ABC, abstractmethod

from toolbelt.core.services.weather.schemas import Forecast, WeatherLocation


class WeatherServiceInterface(ABC):
    """Interface for daily forecast providers."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service.

        Override in implementations that need cleanup.
        """

    @abstractmethod
    async def get_forecast(self, location: WeatherLocation) -> Forecast:
        """Daily forecast for a location.

        Args:
            location: City/state, zip code or coordinates

        Returns:
            Forecast with one entry per day

        Raises:
            WeatherError: If the provider fails
            ValueError: If the location is unusable
        """
        raise NotImplementedError
