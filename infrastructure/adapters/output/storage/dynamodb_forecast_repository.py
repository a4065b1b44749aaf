"""
Output Adapter: Repositório da última previsão usando DynamoDB
Um único item (slot constante) com a árvore serializada em atributo binário
"""
import os
from datetime import datetime, timezone
from typing import Optional
import boto3
from botocore.config import Config
from botocore.exceptions import ClientError, BotoCoreError
from ddtrace import tracer

from application.ports.output.forecast_repository_port import IForecastRepository
from domain.constants import Storage
from domain.entities.weather_forecast import WeatherForecast
from domain.exceptions import ForecastStorageException
from infrastructure.adapters.output.storage.forecast_serializer import (
    deserialize_forecast,
    serialize_forecast
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def create_dynamodb_client(region_name: Optional[str] = None):
    """
    Cria cliente DynamoDB com timeouts curtos e retries adaptativos

    Args:
        region_name: Região AWS (padrão: env AWS_REGION ou sa-east-1)
    """
    config = Config(
        connect_timeout=2,
        read_timeout=3,
        retries={
            'max_attempts': 2,
            'mode': 'adaptive'
        }
    )
    return boto3.client(
        'dynamodb',
        region_name=region_name or os.environ.get('AWS_REGION', 'sa-east-1'),
        config=config
    )


class DynamoDBForecastRepository(IForecastRepository):
    """
    Implementação do repositório da previsão usando DynamoDB

    Estrutura do item:
    {
        "slotId": "0",
        "data": b"...",  # árvore serializada (JSON UTF-8)
        "updatedAt": "2025-11-21T10:00:00+00:00"
    }
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        dynamodb_client=None,
        slot_id: str = Storage.FORECAST_SLOT_ID
    ):
        """
        Args:
            table_name: Nome da tabela (padrão: env FORECAST_TABLE_NAME)
            dynamodb_client: Cliente boto3 (cria um se None)
            slot_id: Chave do slot único
        """
        self.table_name = table_name or Storage.FORECAST_TABLE_NAME
        self.slot_id = slot_id
        self.dynamodb_client = dynamodb_client or create_dynamodb_client()

    @tracer.wrap(resource="forecast_repository.get")
    def get(self) -> Optional[WeatherForecast]:
        """
        Busca a previsão armazenada

        Returns:
            WeatherForecast ou None se não houver item / falha de leitura
        """
        try:
            response = self.dynamodb_client.get_item(
                TableName=self.table_name,
                Key={'slotId': {'S': self.slot_id}},
                ConsistentRead=True
            )
        except ClientError as e:
            logger.error(
                "DynamoDB error reading forecast",
                error_code=e.response['Error']['Code'],
                table=self.table_name
            )
            return None
        except BotoCoreError as e:
            logger.error("DynamoDB unavailable reading forecast", error=str(e))
            return None

        item = response.get('Item')
        if not item:
            logger.info("No stored forecast", table=self.table_name)
            return None

        payload = item.get('data', {}).get('B')
        if payload is None:
            logger.warning("Stored forecast item has no data", table=self.table_name)
            return None

        try:
            return deserialize_forecast(bytes(payload))
        except ForecastStorageException as e:
            logger.warning("Discarding unreadable stored forecast", error=e.message, details=e.details)
            return None

    @tracer.wrap(resource="forecast_repository.save")
    def save(self, forecast: WeatherForecast) -> bool:
        """
        Substitui a previsão armazenada

        Args:
            forecast: Árvore completa

        Returns:
            True se salvo com sucesso
        """
        try:
            payload = serialize_forecast(forecast)
        except (ForecastStorageException, TypeError, ValueError) as e:
            logger.error("Forecast could not be serialized", error=str(e), city=forecast.city)
            return False

        now = datetime.now(timezone.utc)

        try:
            self.dynamodb_client.put_item(
                TableName=self.table_name,
                Item={
                    'slotId': {'S': self.slot_id},
                    'data': {'B': payload},
                    'updatedAt': {'S': now.isoformat()}
                }
            )
        except ClientError as e:
            logger.error(
                "DynamoDB error saving forecast",
                error_code=e.response['Error']['Code'],
                table=self.table_name
            )
            return False
        except BotoCoreError as e:
            logger.error("DynamoDB unavailable saving forecast", error=str(e))
            return False

        logger.info("Forecast stored", city=forecast.city, size=len(payload))
        return True
