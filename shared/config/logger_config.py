"""
Logging da engine de previsão (AWS Lambda Powertools)
Todos os módulos usam child loggers do mesmo serviço
"""
import os
from typing import Optional
from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = 'weather-forecast-engine'


def _service_name() -> str:
    return os.environ.get('WEATHER_SERVICE_NAME', DEFAULT_SERVICE_NAME)


def get_logger(
    service_name: Optional[str] = None,
    child: bool = False,
    level: Optional[str] = None
) -> Logger:
    """
    Logger estruturado do serviço

    Campos extras vão como kwargs: logger.info("Forecast stored", city=...)

    Args:
        service_name: Nome do serviço (padrão: env WEATHER_SERVICE_NAME)
        child: Se True, herda a configuração do logger principal
        level: Nível explícito; sem ele vale POWERTOOLS_LOG_LEVEL / WEATHER_LOG_LEVEL

    Returns:
        Logger configurado
    """
    service = service_name or _service_name()

    if child:
        return Logger(service=service, child=True)

    return Logger(service=service, level=level or os.environ.get('WEATHER_LOG_LEVEL'))


# Logger principal (módulos usam get_logger(child=True))
logger = get_logger()
