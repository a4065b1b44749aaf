"""WeatherAPI.com Provider Package"""

from infrastructure.adapters.output.providers.weatherapi.weatherapi_provider import WeatherApiProvider
from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import WeatherApiDataMapper

__all__ = ['WeatherApiProvider', 'WeatherApiDataMapper']
