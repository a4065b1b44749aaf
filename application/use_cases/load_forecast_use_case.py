"""
Use Case: Load Forecast
Carrega a configuração do usuário e a última previsão armazenada
"""
from ddtrace import tracer

from application.ports.output.forecast_repository_port import IForecastRepository
from application.ports.output.preferences_repository_port import IPreferencesRepository
from domain.entities.weather_forecast import WeatherForecast
from domain.services.temperature_unit_propagator import apply_temperature_unit
from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import (
    WeatherApiDataMapper
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class LoadForecastUseCase:
    """Use case: restore the stored forecast in the preferred temperature unit"""

    def __init__(
        self,
        forecast_repository: IForecastRepository,
        preferences_repository: IPreferencesRepository,
        mapper: WeatherApiDataMapper
    ):
        self.forecast_repository = forecast_repository
        self.preferences_repository = preferences_repository
        self.mapper = mapper

    @tracer.wrap(resource="use_case.load_forecast")
    def execute(self) -> WeatherForecast:
        """
        Execute use case

        Flow:
        1. Read the temperature unit preference and configure the mapper
        2. Load the stored forecast (or the empty placeholder)
        3. Apply the unit to the whole tree and store it back

        Returns:
            WeatherForecast in the preferred unit
        """
        unit = self.preferences_repository.get_temperature_unit()
        self.mapper.use_temperature_unit(unit)

        forecast = self.forecast_repository.get()
        if forecast is None:
            logger.info("No stored forecast, using empty placeholder")
            forecast = WeatherForecast.empty()

        apply_temperature_unit(forecast, unit)
        self.forecast_repository.save(forecast)

        logger.info("Forecast loaded", city=forecast.city, unit=unit.name)
        return forecast
