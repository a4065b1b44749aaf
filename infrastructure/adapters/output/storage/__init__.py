"""Storage adapters - previsão armazenada e preferências do usuário"""

from infrastructure.adapters.output.storage.dynamodb_forecast_repository import DynamoDBForecastRepository
from infrastructure.adapters.output.storage.dynamodb_preferences_repository import DynamoDBPreferencesRepository
from infrastructure.adapters.output.storage.forecast_serializer import serialize_forecast, deserialize_forecast

__all__ = [
    'DynamoDBForecastRepository',
    'DynamoDBPreferencesRepository',
    'serialize_forecast',
    'deserialize_forecast'
]
