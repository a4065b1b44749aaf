"""
Value Object para temperatura
Encapsula a unidade junto do valor e a conversão Celsius <-> Fahrenheit
"""
from dataclasses import dataclass
from enum import Enum


class TemperatureUnit(Enum):
    """Unidades de temperatura suportadas"""
    CELSIUS = "C"
    FAHRENHEIT = "F"

    @classmethod
    def from_name(cls, name: str) -> 'TemperatureUnit':
        """
        Converte o nome salvo nas preferências ("CELSIUS"/"FAHRENHEIT")

        Raises:
            ValueError: Se o nome não corresponder a nenhuma unidade
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unidade de temperatura inválida: {name}")


def to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) / 1.8


@dataclass
class Temperature:
    """
    Value Object para temperatura com unidade explícita

    Características:
    - Mutável apenas via use_unit (valor e unidade trocam juntos)
    - Uma vez dentro de uma previsão, a instância nunca é recriada
    - Conversão com perda: C -> F -> C é identidade apenas aproximada
    """
    value: float
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @classmethod
    def from_celsius(
        cls,
        celsius: float,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> 'Temperature':
        """
        Cria temperatura a partir de uma leitura em Celsius do provider

        Args:
            celsius: Leitura em °C
            unit: Unidade em que a instância deve nascer

        Returns:
            Temperature já na unidade pedida
        """
        if unit == TemperatureUnit.FAHRENHEIT:
            return cls(value=to_fahrenheit(celsius), unit=TemperatureUnit.FAHRENHEIT)
        return cls(value=float(celsius), unit=TemperatureUnit.CELSIUS)

    def converted(self, unit: TemperatureUnit) -> 'Temperature':
        """
        Retorna uma nova instância na unidade pedida

        Se a unidade já for a mesma, retorna um valor igual (sem conversão)
        """
        result = Temperature(value=self.value, unit=self.unit)
        result.use_unit(unit)
        return result

    def use_unit(self, unit: TemperatureUnit) -> bool:
        """
        Converte a instância no lugar

        Args:
            unit: Unidade alvo

        Returns:
            True se houve conversão, False se já estava na unidade
        """
        if unit == self.unit:
            return False

        if self.unit == TemperatureUnit.FAHRENHEIT:
            self.value = to_celsius(self.value)
        else:
            self.value = to_fahrenheit(self.value)
        self.unit = unit
        return True

    def format(self) -> str:
        """
        Formata com uma casa decimal e símbolo da unidade

        Returns:
            String formatada (ex: "25.5°C")
        """
        return f"{self.value:.1f}°{self.unit.value}"

    def __str__(self) -> str:
        return self.format()

    def __float__(self) -> float:
        return self.value

    def to_dict(self) -> dict:
        return {'value': self.value, 'unit': self.unit.name}

    @classmethod
    def from_dict(cls, data: dict) -> 'Temperature':
        return cls(value=float(data['value']), unit=TemperatureUnit[data['unit']])
