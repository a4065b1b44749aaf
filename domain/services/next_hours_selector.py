"""
Next Hours Selector - Janela móvel das próximas 24 horas
Atravessa a meia-noite: horas restantes de hoje + horas iniciais de amanhã
"""
from datetime import datetime
from typing import List

from domain.constants import App
from domain.entities.daily_forecast import DailyForecast
from domain.entities.hourly_forecast import HourlyForecast
from domain.exceptions import InsufficientForecastDataException
from shared.utils.datetime_utils import hour_of_day


def select_next_24_hours(
    current_timestamp: datetime,
    days: List[DailyForecast]
) -> List[HourlyForecast]:
    """
    Seleciona as horas a partir da hora atual, continuando no dia seguinte

    Regras:
    1. Hoje (days[0]): horas com hora local >= hora atual, na ordem de origem
    2. Amanhã (days[1]): horas com hora local < hora atual, na ordem de origem
    3. Concatena 1 + 2

    Com 24 horas por dia (sem lacunas/duplicatas) o resultado tem exatamente
    24 itens; caso contrário o tamanho varia e não é validado aqui.

    Args:
        current_timestamp: Instante da última observação
        days: Dias da previsão já com horas ordenadas

    Returns:
        Lista de HourlyForecast (mesmas instâncias de days[*].hours)

    Raises:
        InsufficientForecastDataException: Se houver menos de 2 dias
    """
    if len(days) < App.MIN_FORECAST_DAYS:
        raise InsufficientForecastDataException(
            "At least today and tomorrow are required to build the next hours window",
            details={"days": len(days), "required": App.MIN_FORECAST_DAYS}
        )

    current_hour = hour_of_day(current_timestamp)
    today, tomorrow = days[0], days[1]

    hours = [hour for hour in today.hours if hour_of_day(hour.timestamp) >= current_hour]
    hours.extend(hour for hour in tomorrow.hours if hour_of_day(hour.timestamp) < current_hour)

    return hours
