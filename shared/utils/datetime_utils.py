"""
DateTime Utilities
Conversão de epochs do provider e extração de hora/dia da semana
"""
from datetime import datetime, timezone, tzinfo
from typing import Optional


def from_epoch_seconds(epoch_seconds: int) -> datetime:
    """
    Converte epoch em segundos para instante com timezone (UTC)

    Args:
        epoch_seconds: Epoch do provider (ex: time_epoch, date_epoch)

    Returns:
        datetime aware em UTC
    """
    return datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc)


def format_hour(moment: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Formata a hora no fuso local do host (ou no tz informado)

    Examples:
        >>> format_hour(datetime(2024, 6, 12, 14, 35, tzinfo=timezone.utc), timezone.utc)
        '14:00'
    """
    return moment.astimezone(tz).strftime("%H:00")


def format_day(moment: datetime) -> str:
    """Formata o dia (MM/dd) sempre em UTC"""
    return moment.astimezone(timezone.utc).strftime("%m/%d")


def hour_of_day(moment: datetime, tz: Optional[tzinfo] = None) -> int:
    """
    Hora local (0-23) do instante

    Usa os dois primeiros dígitos da hora formatada no fuso padrão do host,
    a mesma regra usada na ordenação das horas e na janela das próximas 24h.
    """
    return int(format_hour(moment, tz)[:2])


def week_day_index(moment: datetime) -> int:
    """
    Índice do dia da semana com domingo = 0 ... sábado = 6

    Calculado sempre em UTC, independente do fuso do host.
    """
    return moment.astimezone(timezone.utc).isoweekday() % 7
