"""
Current Weather Entity - Condições observadas no momento da última atualização
"""
from dataclasses import dataclass
from datetime import datetime

from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_condition import WeatherCondition


@dataclass(eq=False)
class CurrentWeather:
    """Estado atual (current.* do provider)"""
    timestamp: datetime  # last_updated_epoch
    temperature: Temperature
    feels_like: Temperature
    condition: WeatherCondition
    humidity: int  # Umidade relativa % (0-100)

    def to_api_response(self) -> dict:
        return {
            'timestamp': self.timestamp.isoformat(),
            'temperature': round(self.temperature.value, 1),
            'feelsLike': round(self.feels_like.value, 1),
            'unit': self.temperature.unit.name,
            'condition': self.condition.text,
            'iconKey': self.condition.icon_key,
            'humidity': self.humidity
        }
