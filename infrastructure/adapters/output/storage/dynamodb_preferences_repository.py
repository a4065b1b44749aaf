"""
Output Adapter: Preferências do usuário em DynamoDB (chave-valor de strings)
"""
from typing import Optional
from botocore.exceptions import ClientError, BotoCoreError

from application.ports.output.preferences_repository_port import IPreferencesRepository
from domain.constants import Preferences, Storage
from domain.value_objects.temperature import TemperatureUnit
from domain.value_objects.user_location import UserLocation
from infrastructure.adapters.output.storage.dynamodb_forecast_repository import create_dynamodb_client
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class DynamoDBPreferencesRepository(IPreferencesRepository):
    """
    Preferências como itens {"prefKey": ..., "value": ...}

    Valores inválidos ou ausentes caem nos padrões (CELSIUS, sem localização).
    """

    def __init__(self, table_name: Optional[str] = None, dynamodb_client=None):
        self.table_name = table_name or Storage.PREFERENCES_TABLE_NAME
        self.dynamodb_client = dynamodb_client or create_dynamodb_client()

    def _get_value(self, key: str, default: str) -> str:
        try:
            response = self.dynamodb_client.get_item(
                TableName=self.table_name,
                Key={'prefKey': {'S': key}}
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Error reading preference", key=key, error=str(e))
            return default

        item = response.get('Item')
        if not item:
            return default
        return item.get('value', {}).get('S', default)

    def _put_value(self, key: str, value: str) -> bool:
        try:
            self.dynamodb_client.put_item(
                TableName=self.table_name,
                Item={
                    'prefKey': {'S': key},
                    'value': {'S': value}
                }
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Error saving preference", key=key, error=str(e))
            return False
        return True

    def get_temperature_unit(self) -> TemperatureUnit:
        value = self._get_value(Preferences.TEMPERATURE_UNIT, Preferences.DEFAULT_TEMPERATURE_UNIT)
        try:
            return TemperatureUnit.from_name(value)
        except ValueError:
            logger.warning("Invalid stored temperature unit, using CELSIUS", value=value)
            return TemperatureUnit.CELSIUS

    def save_temperature_unit(self, unit: TemperatureUnit) -> bool:
        return self._put_value(Preferences.TEMPERATURE_UNIT, unit.name)

    def get_location(self) -> Optional[UserLocation]:
        """
        Última localização conhecida

        Returns:
            UserLocation ou None quando o valor é o padrão "0,0" ou inválido
        """
        value = self._get_value(Preferences.LAST_LOCATION, Preferences.DEFAULT_LAST_LOCATION)
        if value == Preferences.DEFAULT_LAST_LOCATION:
            return None
        try:
            return UserLocation.from_string(value)
        except ValueError:
            logger.warning("Invalid stored location", value=value)
            return None

    def save_location(self, location: UserLocation) -> bool:
        saved = self._put_value(Preferences.LAST_LOCATION, str(location))
        if saved:
            logger.info("User location updated", location=str(location))
        return saved
