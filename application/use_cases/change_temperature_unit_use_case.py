"""
Use Case: Change Temperature Unit
Troca a unidade preferida e converte a previsão atual no lugar
"""
from ddtrace import tracer

from application.ports.output.forecast_repository_port import IForecastRepository
from application.ports.output.preferences_repository_port import IPreferencesRepository
from domain.entities.weather_forecast import WeatherForecast
from domain.services.temperature_unit_propagator import apply_temperature_unit
from domain.value_objects.temperature import TemperatureUnit
from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import (
    WeatherApiDataMapper
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ChangeTemperatureUnitUseCase:
    """Use case: switch the temperature unit of the preferences, mapper and forecast"""

    def __init__(
        self,
        forecast_repository: IForecastRepository,
        preferences_repository: IPreferencesRepository,
        mapper: WeatherApiDataMapper
    ):
        self.forecast_repository = forecast_repository
        self.preferences_repository = preferences_repository
        self.mapper = mapper

    @tracer.wrap(resource="use_case.change_temperature_unit")
    def execute(self, forecast: WeatherForecast, unit: TemperatureUnit) -> WeatherForecast:
        """
        Execute use case

        The tree is always brought to the unit (idempotent); the preference
        is only written when the unit actually changes.

        Args:
            forecast: Current forecast tree (mutated in place)
            unit: Target unit

        Returns:
            The same forecast instance
        """
        unit_changed = unit != self.mapper.temperature_unit
        if unit_changed:
            self.preferences_repository.save_temperature_unit(unit)
            self.mapper.use_temperature_unit(unit)

        visited = apply_temperature_unit(forecast, unit)
        self.forecast_repository.save(forecast)

        logger.info(
            "Temperature unit applied",
            unit=unit.name,
            unit_changed=unit_changed,
            temperatures=visited
        )
        return forecast
