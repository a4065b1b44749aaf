"""
Condition Classifier - Converte códigos do WeatherAPI.com em condição canônica
"""
from typing import Optional

from domain.constants import WeatherCondition as WeatherConditionConstants
from domain.value_objects.weather_condition import WeatherCondition


def get_condition_key(code: int) -> Optional[str]:
    """
    Chave canônica do código ("clear", "rain", ...)

    Percorre a tabela em ordem; o primeiro conjunto que contém o código vence.

    Returns:
        Chave da condição ou None para códigos desconhecidos
    """
    for codes, key in WeatherConditionConstants.ICON_CODES:
        if code in codes:
            return key
    return None


def get_icon_key(code: int, is_day: bool) -> str:
    """
    Chave do ícone no formato "<chave>_day" / "<chave>_night"

    Returns:
        Chave do ícone ou "" quando o código não tem ícone mapeado
    """
    key = get_condition_key(code)
    if key is None:
        return WeatherConditionConstants.NO_ICON

    time_of_day = "day" if is_day else "night"
    return f"{key}_{time_of_day}"


def classify_condition(code: int, is_day: bool) -> WeatherCondition:
    """
    Classifica o código do provider em WeatherCondition

    Função pura: códigos desconhecidos não são erro, resultam em
    texto "Unknown" e ícone vazio.

    Args:
        code: Código de condição do WeatherAPI.com (ex: 1000, 1183)
        is_day: True para ícone diurno, False para noturno

    Returns:
        WeatherCondition (texto + chave do ícone)

    Examples:
        >>> classify_condition(1000, True)
        WeatherCondition(text='Sunny', icon_key='clear_day')
        >>> classify_condition(9999, True)
        WeatherCondition(text='Unknown', icon_key='')
    """
    text = WeatherConditionConstants.DESCRIPTIONS.get(code, WeatherConditionConstants.UNKNOWN_DESC)
    return WeatherCondition(text=text, icon_key=get_icon_key(code, is_day))
