"""
Value Object para condição climática canônica
"""
from dataclasses import dataclass

from domain.constants import WeatherCondition as WeatherConditionConstants


@dataclass(frozen=True)
class WeatherCondition:
    """
    Descrição da condição (texto) + chave do ícone ("rain_night", "clear_day", ...)

    A resolução da chave para um asset real fica com a camada de apresentação.
    """
    text: str
    icon_key: str = WeatherConditionConstants.NO_ICON

    @property
    def has_icon(self) -> bool:
        return self.icon_key != WeatherConditionConstants.NO_ICON

    def to_dict(self) -> dict:
        return {'text': self.text, 'iconKey': self.icon_key}

    @classmethod
    def from_dict(cls, data: dict) -> 'WeatherCondition':
        return cls(text=data['text'], icon_key=data.get('iconKey', WeatherConditionConstants.NO_ICON))
