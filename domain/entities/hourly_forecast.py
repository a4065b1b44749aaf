"""
Hourly Forecast Entity - Entidade de previsão horária canônica
"""
from dataclasses import dataclass
from datetime import datetime

from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_condition import WeatherCondition
from shared.utils.datetime_utils import format_hour, hour_of_day


@dataclass(eq=False)
class HourlyForecast:
    """
    Entidade de Previsão Horária

    Comparação por identidade: a mesma hora pode aparecer em days[*].hours
    e em next_24_hours, e precisa ser reconhecida como a mesma instância.
    """
    timestamp: datetime  # Instante aware (UTC)
    condition: WeatherCondition
    temperature: Temperature
    will_it_rain: bool
    chance_of_rain: int  # Probabilidade de chuva % (0-100)

    @property
    def hour_of_day(self) -> int:
        """Hora local (0-23) no fuso padrão do host"""
        return hour_of_day(self.timestamp)

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Returns:
            Dict com dados formatados para JSON
        """
        return {
            'timestamp': self.timestamp.isoformat(),
            'hour': format_hour(self.timestamp),
            'temperature': round(self.temperature.value, 1),
            'temperatureText': str(self.temperature),
            'unit': self.temperature.unit.name,
            'condition': self.condition.text,
            'iconKey': self.condition.icon_key,
            'willItRain': self.will_it_rain,
            'chanceOfRain': self.chance_of_rain
        }
