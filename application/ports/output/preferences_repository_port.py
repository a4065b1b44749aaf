"""
Output Port: Interface para preferências do usuário (chave-valor)
"""
from typing import Protocol, Optional

from domain.value_objects.temperature import TemperatureUnit
from domain.value_objects.user_location import UserLocation


class IPreferencesRepository(Protocol):
    """Interface para o armazenamento de preferências"""
    
    def get_temperature_unit(self) -> TemperatureUnit:
        """Unidade salva (CELSIUS se nunca definida)"""
        ...
    
    def save_temperature_unit(self, unit: TemperatureUnit) -> bool:
        ...
    
    def get_location(self) -> Optional[UserLocation]:
        """
        Última localização conhecida
        
        Returns:
            UserLocation ou None se nunca definida
        """
        ...
    
    def save_location(self, location: UserLocation) -> bool:
        ...
