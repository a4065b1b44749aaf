"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')

import calendar
import time
from datetime import date, datetime, timedelta

import pytest

# Dias fixos longe de trocas de horário de verão
TODAY = date(2024, 6, 12)
TOMORROW = TODAY + timedelta(days=1)


def local_epoch(day: date, hour: int, minute: int = 0) -> int:
    """Epoch de uma hora local do host (mesmo fuso usado na extração da hora)"""
    return int(datetime(day.year, day.month, day.day, hour, minute).timestamp())


def utc_midnight_epoch(day: date) -> int:
    """date_epoch do WeatherAPI: meia-noite UTC do dia"""
    return calendar.timegm(day.timetuple())


@pytest.fixture
def host_timezone():
    """
    Troca o fuso padrão do processo (TZ + time.tzset) durante o teste

    Usage:
        def test_something(host_timezone):
            host_timezone("America/Sao_Paulo")
    """
    previous = os.environ.get('TZ')

    def _set(name: str) -> None:
        os.environ['TZ'] = name
        time.tzset()

    yield _set

    if previous is None:
        os.environ.pop('TZ', None)
    else:
        os.environ['TZ'] = previous
    time.tzset()


@pytest.fixture
def make_api_hour():
    """
    Factory fixture para registros forecastday[].hour

    Usage:
        def test_something(make_api_hour):
            api_hour = make_api_hour(TODAY, 14, temp_c=21.0)
    """
    def _make(
        day: date = TODAY,
        hour: int = 12,
        temp_c: float = 20.0,
        is_day: int = 1,
        will_it_rain: int = 0,
        chance_of_rain: int = 0,
        code: int = 1000
    ) -> dict:
        return {
            'time_epoch': local_epoch(day, hour),
            'temp_c': temp_c,
            'is_day': is_day,
            'will_it_rain': will_it_rain,
            'chance_of_rain': chance_of_rain,
            'condition': {'code': code}
        }

    return _make


@pytest.fixture
def make_api_day(make_api_hour):
    """Factory fixture para itens de forecast.forecastday com 24 horas"""
    def _make(
        day: date = TODAY,
        maxtemp_c: float = 28.0,
        mintemp_c: float = 15.0,
        code: int = 1003,
        hours=None
    ) -> dict:
        if hours is None:
            hours = [
                make_api_hour(day, hour, temp_c=15.0 + hour / 2, is_day=int(6 <= hour < 18))
                for hour in range(24)
            ]
        return {
            'date_epoch': utc_midnight_epoch(day),
            'day': {
                'maxtemp_c': maxtemp_c,
                'mintemp_c': mintemp_c,
                'condition': {'code': code}
            },
            'hour': hours
        }

    return _make


@pytest.fixture
def make_payload(make_api_day):
    """Factory fixture para a resposta completa de forecast.json"""
    def _make(
        current_hour: int = 14,
        days: int = 3,
        temp_c: float = 22.5,
        feelslike_c: float = 24.0,
        is_day: int = 1,
        code: int = 1183,
        humidity: int = 65
    ) -> dict:
        return {
            'location': {'name': 'Ribeirão do Sul', 'country': 'Brazil'},
            'current': {
                'last_updated_epoch': local_epoch(TODAY, current_hour, 15),
                'temp_c': temp_c,
                'feelslike_c': feelslike_c,
                'is_day': is_day,
                'condition': {'code': code},
                'humidity': humidity
            },
            'forecast': {
                'forecastday': [
                    make_api_day(TODAY + timedelta(days=offset))
                    for offset in range(days)
                ]
            }
        }

    return _make


@pytest.fixture
def mapper():
    from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import (
        WeatherApiDataMapper
    )
    return WeatherApiDataMapper()


@pytest.fixture
def forecast(mapper, make_payload):
    """Previsão montada (Celsius) com 3 dias e hora atual 14h"""
    return mapper.map_response_to_forecast(make_payload())
