"""Application Use Cases"""
from .load_forecast_use_case import LoadForecastUseCase
from .update_forecast_use_case import UpdateForecastUseCase
from .change_temperature_unit_use_case import ChangeTemperatureUnitUseCase
from .update_user_location_use_case import UpdateUserLocationUseCase

__all__ = [
    'LoadForecastUseCase',
    'UpdateForecastUseCase',
    'ChangeTemperatureUnitUseCase',
    'UpdateUserLocationUseCase'
]
