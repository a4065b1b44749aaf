"""
Daily Forecast Entity - Entidade de domínio para o resumo de um dia
Fonte: WeatherAPI.com (forecast.forecastday[])
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

from domain.entities.hourly_forecast import HourlyForecast
from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_condition import WeatherCondition
from shared.utils.datetime_utils import format_day, week_day_index


class WeekDay(Enum):
    """Dias da semana na ordem domingo -> sábado"""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, moment: datetime) -> 'WeekDay':
        """
        Dia da semana do instante, interpretado em UTC

        O fuso fixo torna o resultado reprodutível em qualquer host.
        """
        return cls(week_day_index(moment))


@dataclass(eq=False)
class DailyForecast:
    """
    Entidade de Previsão Diária

    Representa o resumo do dia (mín/máx e condição) e suas horas,
    ordenadas pela hora local.
    """
    timestamp: datetime  # Meia-noite do dia no fuso do provider
    week_day: WeekDay
    condition: WeatherCondition
    min_temperature: Temperature
    max_temperature: Temperature
    hours: List[HourlyForecast] = field(default_factory=list)

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API

        Returns:
            Dict com dados formatados para JSON
        """
        return {
            'timestamp': self.timestamp.isoformat(),
            'day': format_day(self.timestamp),
            'weekDay': self.week_day.name,
            'condition': self.condition.text,
            'iconKey': self.condition.icon_key,
            'tempMin': round(self.min_temperature.value, 1),
            'tempMax': round(self.max_temperature.value, 1),
            'unit': self.max_temperature.unit.name,
            'hours': [hour.to_api_response() for hour in self.hours]
        }
