"""
Async Use Case: Update Forecast
Busca a previsão no provider, normaliza e substitui a previsão armazenada
"""
from ddtrace import tracer

from application.ports.output.forecast_repository_port import IForecastRepository
from application.ports.output.preferences_repository_port import IPreferencesRepository
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.weather_forecast import WeatherForecast
from domain.exceptions import UserLocationNotFoundException
from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import (
    WeatherApiDataMapper
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class UpdateForecastUseCase:
    """Async use case: fetch, assemble and store a new forecast"""

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        forecast_repository: IForecastRepository,
        preferences_repository: IPreferencesRepository,
        mapper: WeatherApiDataMapper
    ):
        self.weather_provider = weather_provider
        self.forecast_repository = forecast_repository
        self.preferences_repository = preferences_repository
        self.mapper = mapper

    @tracer.wrap(resource="use_case.update_forecast")
    async def execute(self) -> WeatherForecast:
        """
        Execute use case asynchronously

        Returns:
            Newly assembled WeatherForecast (already stored)

        Raises:
            UserLocationNotFoundException: If no location was stored yet
            WeatherProviderException: If the provider fails (stored forecast untouched)
            InsufficientForecastDataException: If the payload has fewer than 2 days
        """
        location = self.preferences_repository.get_location()
        if location is None:
            logger.error("Forecast update requested without user location")
            raise UserLocationNotFoundException("No user location provided")

        data = await self.weather_provider.get_forecast(location)
        forecast = self.mapper.map_response_to_forecast(data)

        self.forecast_repository.save(forecast)
        logger.info(
            "Forecast updated",
            provider=self.weather_provider.provider_name,
            city=forecast.city,
            days=len(forecast.days)
        )
        return forecast
