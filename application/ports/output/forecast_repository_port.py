"""
Output Port: Interface para o repositório da última previsão
Uma única previsão armazenada por vez (slot constante)
"""
from typing import Protocol, Optional

from domain.entities.weather_forecast import WeatherForecast


class IForecastRepository(Protocol):
    """Interface para persistência da previsão"""
    
    def get(self) -> Optional[WeatherForecast]:
        """
        Busca a última previsão armazenada
        
        Returns:
            WeatherForecast ou None se nada foi armazenado
        """
        ...
    
    def save(self, forecast: WeatherForecast) -> bool:
        """
        Substitui a previsão armazenada
        
        Args:
            forecast: Árvore completa da previsão
            
        Returns:
            True se salvo com sucesso, False caso contrário
        """
        ...
