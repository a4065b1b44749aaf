"""Testes unitários para DynamoDBForecastRepository"""
import copy
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from domain.exceptions import ForecastStorageException
from infrastructure.adapters.output.storage.dynamodb_forecast_repository import (
    DynamoDBForecastRepository
)
from infrastructure.adapters.output.storage.forecast_serializer import serialize_forecast


def _client_error(operation):
    return ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'slow down'}},
        operation
    )


class TestDynamoDBForecastRepository:
    """Testes para DynamoDBForecastRepository"""

    @pytest.fixture
    def mock_client(self):
        return MagicMock()

    @pytest.fixture
    def repository(self, mock_client):
        return DynamoDBForecastRepository(table_name='forecast-test', dynamodb_client=mock_client)

    def test_save(self, repository, mock_client, forecast):
        """Testa gravação do item no slot único"""
        assert repository.save(forecast) is True

        kwargs = mock_client.put_item.call_args.kwargs
        assert kwargs['TableName'] == 'forecast-test'
        assert kwargs['Item']['slotId'] == {'S': '0'}
        assert kwargs['Item']['data']['B'] == serialize_forecast(forecast)
        assert 'updatedAt' in kwargs['Item']

    def test_save_client_error(self, repository, mock_client, forecast):
        mock_client.put_item.side_effect = _client_error('PutItem')

        assert repository.save(forecast) is False

    def test_save_connection_error(self, repository, mock_client, forecast):
        mock_client.put_item.side_effect = EndpointConnectionError(endpoint_url='http://localhost')

        assert repository.save(forecast) is False

    def test_get_round_trip(self, repository, mock_client, forecast):
        """Testa leitura do que foi gravado"""
        repository.save(forecast)
        stored = mock_client.put_item.call_args.kwargs['Item']
        mock_client.get_item.return_value = {'Item': stored}

        restored = repository.get()

        assert restored.city == forecast.city
        assert restored.today is restored.days[0]
        mock_client.get_item.assert_called_once_with(
            TableName='forecast-test',
            Key={'slotId': {'S': '0'}},
            ConsistentRead=True
        )

    def test_get_missing_item(self, repository, mock_client):
        mock_client.get_item.return_value = {}

        assert repository.get() is None

    def test_get_item_without_data(self, repository, mock_client):
        mock_client.get_item.return_value = {'Item': {'slotId': {'S': '0'}}}

        assert repository.get() is None

    def test_get_corrupted_data(self, repository, mock_client):
        """Item ilegível é descartado em vez de propagar erro"""
        mock_client.get_item.return_value = {'Item': {'slotId': {'S': '0'}, 'data': {'B': b'garbage'}}}

        assert repository.get() is None

    def test_get_client_error(self, repository, mock_client):
        mock_client.get_item.side_effect = _client_error('GetItem')

        assert repository.get() is None

    def test_custom_slot(self, mock_client, forecast):
        repository = DynamoDBForecastRepository(table_name='t', dynamodb_client=mock_client, slot_id='7')

        repository.save(forecast)

        assert mock_client.put_item.call_args.kwargs['Item']['slotId'] == {'S': '7'}

    def test_save_tree_with_copied_next_hours(self, repository, mock_client, forecast):
        """Janela com cópias das horas também é gravada e lida de volta"""
        forecast.next_24_hours = [copy.deepcopy(hour) for hour in forecast.next_24_hours]

        assert repository.save(forecast) is True

        mock_client.get_item.return_value = {'Item': mock_client.put_item.call_args.kwargs['Item']}
        restored = repository.get()
        assert len(restored.next_24_hours) == 24
        assert restored.next_24_hours[0].temperature == forecast.next_24_hours[0].temperature

    def test_save_serialization_error(self, repository, mock_client, forecast):
        """Falha ao serializar é registrada e devolve False sem chamar o DynamoDB"""
        with patch(
            'infrastructure.adapters.output.storage.dynamodb_forecast_repository.serialize_forecast',
            side_effect=ForecastStorageException("boom")
        ):
            assert repository.save(forecast) is False

        mock_client.put_item.assert_not_called()
