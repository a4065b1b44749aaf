"""
Forecast Serializer - Converte a árvore da previsão em bytes e de volta
Formato: JSON compacto UTF-8

O compartilhamento de instâncias é preservado:
- "today" é gravado como índice do dia (0) quando há dias
- "next24Hours" é gravado como pares [índice do dia, índice da hora]
  quando a hora pertence a um dia; cópias avulsas vão inline (dict)
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from domain.entities.current_weather import CurrentWeather
from domain.entities.daily_forecast import DailyForecast, WeekDay
from domain.entities.hourly_forecast import HourlyForecast
from domain.entities.weather_forecast import WeatherForecast
from domain.exceptions import ForecastStorageException
from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_condition import WeatherCondition

FORMAT_VERSION = 1


def _timestamp_to_dict(moment: datetime) -> int:
    return int(moment.timestamp())


def _timestamp_from_dict(value: int) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


def _hour_to_dict(hour: HourlyForecast) -> Dict[str, Any]:
    return {
        'timestamp': _timestamp_to_dict(hour.timestamp),
        'condition': hour.condition.to_dict(),
        'temperature': hour.temperature.to_dict(),
        'willItRain': hour.will_it_rain,
        'chanceOfRain': hour.chance_of_rain
    }


def _hour_from_dict(data: Dict[str, Any]) -> HourlyForecast:
    return HourlyForecast(
        timestamp=_timestamp_from_dict(data['timestamp']),
        condition=WeatherCondition.from_dict(data['condition']),
        temperature=Temperature.from_dict(data['temperature']),
        will_it_rain=data['willItRain'],
        chance_of_rain=data['chanceOfRain']
    )


def _day_to_dict(day: DailyForecast) -> Dict[str, Any]:
    return {
        'timestamp': _timestamp_to_dict(day.timestamp),
        'weekDay': day.week_day.name,
        'condition': day.condition.to_dict(),
        'minTemperature': day.min_temperature.to_dict(),
        'maxTemperature': day.max_temperature.to_dict(),
        'hours': [_hour_to_dict(hour) for hour in day.hours]
    }


def _day_from_dict(data: Dict[str, Any]) -> DailyForecast:
    return DailyForecast(
        timestamp=_timestamp_from_dict(data['timestamp']),
        week_day=WeekDay[data['weekDay']],
        condition=WeatherCondition.from_dict(data['condition']),
        min_temperature=Temperature.from_dict(data['minTemperature']),
        max_temperature=Temperature.from_dict(data['maxTemperature']),
        hours=[_hour_from_dict(hour) for hour in data['hours']]
    )


def _current_to_dict(current: CurrentWeather) -> Dict[str, Any]:
    return {
        'timestamp': _timestamp_to_dict(current.timestamp),
        'temperature': current.temperature.to_dict(),
        'feelsLike': current.feels_like.to_dict(),
        'condition': current.condition.to_dict(),
        'humidity': current.humidity
    }


def _current_from_dict(data: Dict[str, Any]) -> CurrentWeather:
    return CurrentWeather(
        timestamp=_timestamp_from_dict(data['timestamp']),
        temperature=Temperature.from_dict(data['temperature']),
        feels_like=Temperature.from_dict(data['feelsLike']),
        condition=WeatherCondition.from_dict(data['condition']),
        humidity=data['humidity']
    )


def _next_hours_to_list(forecast: WeatherForecast) -> List[Union[List[int], Dict[str, Any]]]:
    """
    Localiza cada hora de next_24_hours dentro de days[*].hours (por identidade)

    Horas que não pertencem a nenhum dia são gravadas inline.
    """
    positions = {
        id(hour): [day_index, hour_index]
        for day_index, day in enumerate(forecast.days)
        for hour_index, hour in enumerate(day.hours)
    }
    return [
        positions[id(hour)] if id(hour) in positions else _hour_to_dict(hour)
        for hour in forecast.next_24_hours
    ]


def _next_hour_from_dict(entry, days: List[DailyForecast]) -> HourlyForecast:
    if isinstance(entry, dict):
        return _hour_from_dict(entry)
    day_index, hour_index = entry
    return days[day_index].hours[hour_index]


def forecast_to_dict(forecast: WeatherForecast) -> Dict[str, Any]:
    """
    Converte a árvore para dict serializável

    Args:
        forecast: Árvore da previsão

    Returns:
        Dict pronto para json.dumps
    """
    data = {
        'version': FORMAT_VERSION,
        'city': forecast.city,
        'country': forecast.country,
        'current': _current_to_dict(forecast.current),
        'days': [_day_to_dict(day) for day in forecast.days],
        'next24Hours': _next_hours_to_list(forecast)
    }

    if forecast.days and forecast.today is forecast.days[0]:
        data['today'] = 0
    else:
        data['today'] = _day_to_dict(forecast.today)

    return data


def forecast_from_dict(data: Dict[str, Any]) -> WeatherForecast:
    """
    Reconstrói a árvore, restaurando as instâncias compartilhadas

    Raises:
        ForecastStorageException: Se o formato não for reconhecido
    """
    if data.get('version') != FORMAT_VERSION:
        raise ForecastStorageException(
            "Unsupported stored forecast version",
            details={"version": data.get('version')}
        )

    try:
        days = [_day_from_dict(day) for day in data['days']]
        today_data = data['today']
        today = days[today_data] if isinstance(today_data, int) else _day_from_dict(today_data)
        next_24_hours = [_next_hour_from_dict(entry, days) for entry in data['next24Hours']]

        return WeatherForecast(
            city=data['city'],
            country=data['country'],
            current=_current_from_dict(data['current']),
            days=days,
            today=today,
            next_24_hours=next_24_hours
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ForecastStorageException(
            "Stored forecast is malformed",
            details={"error": str(e)}
        ) from e


def serialize_forecast(forecast: WeatherForecast) -> bytes:
    """Árvore -> bytes (JSON compacto UTF-8)"""
    return json.dumps(forecast_to_dict(forecast), separators=(',', ':')).encode('utf-8')


def deserialize_forecast(payload: bytes) -> WeatherForecast:
    """
    Bytes -> árvore

    Raises:
        ForecastStorageException: Se os bytes não forem um JSON válido
    """
    try:
        data = json.loads(payload.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ForecastStorageException(
            "Stored forecast is not valid JSON",
            details={"error": str(e)}
        ) from e
    return forecast_from_dict(data)
