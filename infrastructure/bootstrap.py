"""
Composition root - monta os use cases com os adapters concretos
"""
from dataclasses import dataclass
from typing import Optional

from application.use_cases import (
    ChangeTemperatureUnitUseCase,
    LoadForecastUseCase,
    UpdateForecastUseCase,
    UpdateUserLocationUseCase
)
from infrastructure.adapters.output.providers.weatherapi import WeatherApiDataMapper, WeatherApiProvider
from infrastructure.adapters.output.storage import (
    DynamoDBForecastRepository,
    DynamoDBPreferencesRepository
)
from infrastructure.adapters.output.storage.dynamodb_forecast_repository import create_dynamodb_client


@dataclass
class WeatherUseCases:
    load_forecast: LoadForecastUseCase
    update_forecast: UpdateForecastUseCase
    change_temperature_unit: ChangeTemperatureUnitUseCase
    update_user_location: UpdateUserLocationUseCase


def build_use_cases(
    api_key: Optional[str] = None,
    region_name: Optional[str] = None,
    dynamodb_client=None
) -> WeatherUseCases:
    """
    Cria os use cases compartilhando um único mapper (unidade configurada)

    Args:
        api_key: Chave do WeatherAPI.com (padrão: env WEATHERAPI_KEY)
        region_name: Região AWS das tabelas
        dynamodb_client: Cliente boto3 (cria um se None)
    """
    client = dynamodb_client or create_dynamodb_client(region_name)
    forecast_repository = DynamoDBForecastRepository(dynamodb_client=client)
    preferences_repository = DynamoDBPreferencesRepository(dynamodb_client=client)
    mapper = WeatherApiDataMapper()
    provider = WeatherApiProvider(api_key=api_key)

    return WeatherUseCases(
        load_forecast=LoadForecastUseCase(forecast_repository, preferences_repository, mapper),
        update_forecast=UpdateForecastUseCase(provider, forecast_repository, preferences_repository, mapper),
        change_temperature_unit=ChangeTemperatureUnitUseCase(forecast_repository, preferences_repository, mapper),
        update_user_location=UpdateUserLocationUseCase(preferences_repository)
    )
