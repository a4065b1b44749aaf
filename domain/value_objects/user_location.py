"""
Value Object para a última localização conhecida do usuário
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class UserLocation:
    """
    Value Object para localização do usuário

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Forma textual "lat,lon" usada como query do provider e nas preferências
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus."
            )

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_string(cls, value: str) -> 'UserLocation':
        """
        Cria a partir da forma textual "lat,lon"

        Raises:
            ValueError: Se o texto não tiver duas partes numéricas
        """
        pieces = value.split(',')
        if len(pieces) != 2:
            raise ValueError(f"Localização inválida: '{value}'. Use o formato 'lat,lon'.")
        return cls(float(pieces[0]), float(pieces[1]))
