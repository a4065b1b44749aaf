"""
Temperature Unit Propagator - Converte todas as temperaturas de uma previsão no lugar
"""
from typing import Iterator

from domain.entities.daily_forecast import DailyForecast
from domain.entities.weather_forecast import WeatherForecast
from domain.value_objects.temperature import Temperature, TemperatureUnit
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _day_temperatures(day: DailyForecast) -> Iterator[Temperature]:
    yield day.min_temperature
    yield day.max_temperature
    for hour in day.hours:
        yield hour.temperature


def iter_temperatures(forecast: WeatherForecast) -> Iterator[Temperature]:
    """
    Percorre todos os caminhos lógicos até uma Temperature

    A mesma instância pode aparecer mais de uma vez (today = days[0],
    next_24_hours aponta para horas de days[*]).
    """
    yield forecast.current.temperature
    yield forecast.current.feels_like
    yield from _day_temperatures(forecast.today)
    for day in forecast.days:
        yield from _day_temperatures(day)
    for hour in forecast.next_24_hours:
        yield hour.temperature


def apply_temperature_unit(forecast: WeatherForecast, unit: TemperatureUnit) -> int:
    """
    Converte todas as temperaturas da árvore para a unidade alvo

    Cada instância distinta é visitada uma única vez (deduplicação por
    identidade), então aliases não causam conversão dupla. Idempotente.

    Args:
        forecast: Árvore da previsão (mutada no lugar)
        unit: Unidade alvo

    Returns:
        Quantidade de instâncias distintas visitadas
    """
    visited = set()
    converted = 0

    for temperature in iter_temperatures(forecast):
        if id(temperature) in visited:
            continue
        visited.add(id(temperature))
        if temperature.use_unit(unit):
            converted += 1

    logger.debug(
        "Temperature unit applied",
        unit=unit.name,
        visited=len(visited),
        converted=converted
    )
    return len(visited)
