"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherProvider
from .forecast_repository_port import IForecastRepository
from .preferences_repository_port import IPreferencesRepository

__all__ = ['IWeatherProvider', 'IForecastRepository', 'IPreferencesRepository']
