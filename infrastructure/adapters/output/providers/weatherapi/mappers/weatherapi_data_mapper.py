"""
WeatherAPI Data Mapper - Transforma respostas do WeatherAPI.com em entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from typing import Dict, Any, List

from domain.entities.current_weather import CurrentWeather
from domain.entities.daily_forecast import DailyForecast, WeekDay
from domain.entities.hourly_forecast import HourlyForecast
from domain.entities.weather_forecast import WeatherForecast
from domain.services.condition_classifier import classify_condition
from domain.services.next_hours_selector import select_next_24_hours
from domain.value_objects.temperature import Temperature, TemperatureUnit
from shared.config.logger_config import get_logger
from shared.utils.datetime_utils import from_epoch_seconds

logger = get_logger(child=True)


class WeatherApiDataMapper:
    """
    Mapper para transformar respostas do WeatherAPI.com em entities de domínio

    Responsabilidade: Traduzir formato WeatherAPI → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)

    Estado: apenas a unidade de temperatura configurada. Novas temperaturas
    nascem nessa unidade. Sem sincronização interna: chamadas concorrentes
    de use_temperature_unit/map_* devem ser serializadas por quem chama.
    """

    def __init__(self, temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS):
        self._temperature_unit = temperature_unit

    @property
    def temperature_unit(self) -> TemperatureUnit:
        return self._temperature_unit

    def use_temperature_unit(self, unit: TemperatureUnit) -> None:
        """Define a unidade usada nas próximas montagens"""
        self._temperature_unit = unit

    def map_response_to_forecast(self, data: Dict[str, Any]) -> WeatherForecast:
        """
        Monta a árvore completa da previsão a partir da resposta forecast.json

        today é days[0] e next_24_hours reaproveita as instâncias de
        days[*].hours (sem cópia).

        Args:
            data: Resposta raw do WeatherAPI.com

        Returns:
            WeatherForecast

        Raises:
            InsufficientForecastDataException: Se houver menos de 2 dias
            KeyError: Se campos obrigatórios estiverem ausentes
        """
        location = data['location']
        days = [self.map_day(api_day) for api_day in data['forecast']['forecastday']]
        current = self.map_current(data['current'])

        next_24_hours = select_next_24_hours(current.timestamp, days)

        logger.info(
            "Forecast assembled",
            city=location['name'],
            days=len(days),
            next_hours=len(next_24_hours),
            unit=self._temperature_unit.name
        )

        return WeatherForecast(
            city=location['name'],
            country=location['country'],
            current=current,
            days=days,
            today=days[0],
            next_24_hours=next_24_hours
        )

    def map_current(self, api_current: Dict[str, Any]) -> CurrentWeather:
        """
        Mapeia o bloco current (observação mais recente)

        Args:
            api_current: Bloco "current" da resposta

        Returns:
            CurrentWeather entity
        """
        return CurrentWeather(
            timestamp=from_epoch_seconds(api_current['last_updated_epoch']),
            temperature=self._temperature(api_current['temp_c']),
            feels_like=self._temperature(api_current['feelslike_c']),
            condition=classify_condition(
                api_current['condition']['code'],
                api_current['is_day'] == 1
            ),
            humidity=int(api_current['humidity'])
        )

    def map_day(self, api_day: Dict[str, Any]) -> DailyForecast:
        """
        Mapeia um item de forecast.forecastday

        - Dia da semana calculado em UTC
        - Condição do dia sempre classificada como diurna
        - Horas ordenadas pela hora local (ordenação estável)

        Args:
            api_day: Item de forecast.forecastday

        Returns:
            DailyForecast entity
        """
        timestamp = from_epoch_seconds(api_day['date_epoch'])
        summary = api_day['day']
        hours = self.map_hours(api_day.get('hour', []))

        if len(hours) != 24:
            logger.warning(
                "Unexpected hour count for day",
                date_epoch=api_day['date_epoch'],
                hours=len(hours)
            )

        return DailyForecast(
            timestamp=timestamp,
            week_day=WeekDay.from_date(timestamp),
            condition=classify_condition(summary['condition']['code'], is_day=True),
            min_temperature=self._temperature(summary['mintemp_c']),
            max_temperature=self._temperature(summary['maxtemp_c']),
            hours=hours
        )

    def map_hours(self, api_hours: List[Dict[str, Any]]) -> List[HourlyForecast]:
        """
        Mapeia as horas de um dia e ordena pela hora local (0-23)

        Protege contra dados fora de ordem do provider.
        """
        hours = [self.map_hour(api_hour) for api_hour in api_hours]
        hours.sort(key=lambda hour: hour.hour_of_day)
        return hours

    def map_hour(self, api_hour: Dict[str, Any]) -> HourlyForecast:
        """
        Mapeia um item de forecastday[].hour

        Args:
            api_hour: Registro horário do provider

        Returns:
            HourlyForecast entity
        """
        return HourlyForecast(
            timestamp=from_epoch_seconds(api_hour['time_epoch']),
            condition=classify_condition(
                api_hour['condition']['code'],
                api_hour['is_day'] == 1
            ),
            temperature=self._temperature(api_hour['temp_c']),
            will_it_rain=api_hour['will_it_rain'] == 1,
            chance_of_rain=int(api_hour['chance_of_rain'])
        )

    def _temperature(self, celsius: float) -> Temperature:
        return Temperature.from_celsius(celsius, self._temperature_unit)
