"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from domain.value_objects.user_location import UserLocation


class IWeatherProvider(ABC):
    """
    Interface para o transporte que busca a resposta raw da previsão.
    A normalização fica com o mapper; o provider só entrega o payload.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (para logs)"""
        pass

    @abstractmethod
    async def get_forecast(self, location: UserLocation) -> Dict[str, Any]:
        """
        Busca a previsão raw para a localização
        
        Args:
            location: Localização do usuário
        
        Returns:
            Payload raw (current + forecast.forecastday[])
        
        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass
