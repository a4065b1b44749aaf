"""
Weather Forecast Entity - Árvore canônica da previsão
Agrega estado atual, dias e a janela das próximas 24 horas
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from domain.constants import App, WeatherCondition as WeatherConditionConstants
from domain.entities.current_weather import CurrentWeather
from domain.entities.daily_forecast import DailyForecast, WeekDay
from domain.entities.hourly_forecast import HourlyForecast
from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_condition import WeatherCondition


@dataclass(eq=False)
class WeatherForecast:
    """
    Árvore canônica da previsão

    Propriedade compartilhada:
    - today é a mesma instância de days[0]
    - cada item de next_24_hours é a mesma instância de uma hora em days[*].hours

    Quem mutar temperaturas deve visitar cada instância uma única vez
    (ver domain.services.temperature_unit_propagator).
    """
    city: str
    country: str
    current: CurrentWeather
    days: List[DailyForecast]
    today: DailyForecast
    next_24_hours: List[HourlyForecast] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True para o placeholder exibido antes da primeira previsão"""
        return not self.days

    @classmethod
    def empty(cls) -> 'WeatherForecast':
        """
        Placeholder usado quando nenhuma previsão foi armazenada ainda

        Returns:
            WeatherForecast sem dias e com temperaturas zeradas
        """
        epoch = datetime.fromtimestamp(0, tz=timezone.utc)
        placeholder = WeatherCondition(App.EMPTY_TEXT, WeatherConditionConstants.NO_ICON)

        return cls(
            city=App.EMPTY_TEXT,
            country=App.EMPTY_TEXT,
            current=CurrentWeather(
                timestamp=epoch,
                temperature=Temperature(0.0),
                feels_like=Temperature(0.0),
                condition=placeholder,
                humidity=App.EMPTY_HUMIDITY
            ),
            days=[],
            today=DailyForecast(
                timestamp=epoch,
                week_day=WeekDay.FRIDAY,
                condition=placeholder,
                min_temperature=Temperature(0.0),
                max_temperature=Temperature(0.0),
                hours=[]
            ),
            next_24_hours=[]
        )

    def to_api_response(self) -> dict:
        """
        Converte para formato de resposta da API (camada de apresentação)

        Returns:
            Dict com dados formatados para JSON
        """
        return {
            'city': self.city,
            'country': self.country,
            'current': self.current.to_api_response(),
            'today': self.today.to_api_response(),
            'days': [day.to_api_response() for day in self.days],
            'next24Hours': [hour.to_api_response() for hour in self.next_24_hours]
        }
