"""Testes unitários para WeatherApiProvider (HTTP mockado)"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from tenacity import wait_none

from domain.exceptions import WeatherProviderException
from domain.value_objects.user_location import UserLocation
from infrastructure.adapters.output.providers.weatherapi.weatherapi_provider import WeatherApiProvider

LOCATION = UserLocation(-22.75, -49.94)


def _response(status=200, payload=None, raise_status=None):
    response = MagicMock()
    response.status = status
    response.request_info = MagicMock()
    response.history = ()
    response.json = AsyncMock(return_value=payload or {})
    if raise_status is not None:
        response.raise_for_status.side_effect = aiohttp.ClientResponseError(
            request_info=MagicMock(),
            history=(),
            status=raise_status
        )
    return response


def _context(response):
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def provider(session):
    session_manager = MagicMock()
    session_manager.get_session = AsyncMock(return_value=session)
    return WeatherApiProvider(
        api_key='test-key',
        base_url='https://weather.test/',
        session_manager=session_manager,
        retry_wait=wait_none()
    )


class TestWeatherApiProvider:
    """Testes para WeatherApiProvider"""

    def test_provider_name(self, provider):
        assert provider.provider_name == "WeatherAPI"

    def test_build_params(self, provider):
        """Testa query string do forecast.json"""
        assert provider._build_params(LOCATION) == {
            'key': 'test-key',
            'q': '-22.75,-49.94',
            'days': 7,
            'aqi': 'no',
            'alerts': 'no'
        }

    @pytest.mark.asyncio
    async def test_get_forecast_success(self, provider, session):
        payload = {'location': {'name': 'Ribeirão do Sul'}}
        session.get.return_value = _context(_response(payload=payload))

        result = await provider.get_forecast(LOCATION)

        assert result == payload
        args, kwargs = session.get.call_args
        assert args[0] == 'https://weather.test/v1/forecast.json'
        assert kwargs['params']['q'] == '-22.75,-49.94'

    @pytest.mark.asyncio
    async def test_retry_on_503_then_success(self, provider, session):
        """Testa que 503 é repetido e a segunda tentativa é aceita"""
        session.get.side_effect = [
            _context(_response(status=503)),
            _context(_response(payload={'ok': True}))
        ]

        result = await provider.get_forecast(LOCATION)

        assert result == {'ok': True}
        assert session.get.call_count == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_three_attempts(self, provider, session):
        session.get.side_effect = lambda *args, **kwargs: _context(_response(status=429))

        with pytest.raises(WeatherProviderException) as exc_info:
            await provider.get_forecast(LOCATION)

        assert session.get.call_count == 3
        assert exc_info.value.details['status'] == 429

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self, provider, session):
        """Testa que 4xx comum falha na primeira tentativa"""
        session.get.return_value = _context(_response(status=401, raise_status=401))

        with pytest.raises(WeatherProviderException) as exc_info:
            await provider.get_forecast(LOCATION)

        assert session.get.call_count == 1
        assert exc_info.value.details == {'status': 401, 'location': '-22.75,-49.94'}

    @pytest.mark.asyncio
    async def test_timeout_retried_and_wrapped(self, provider, session):
        session.get.side_effect = asyncio.TimeoutError()

        with pytest.raises(WeatherProviderException, match="unreachable"):
            await provider.get_forecast(LOCATION)

        assert session.get.call_count == 3

    @pytest.mark.asyncio
    async def test_connection_error_wrapped(self, provider, session):
        session.get.side_effect = aiohttp.ClientConnectionError("refused")

        with pytest.raises(WeatherProviderException):
            await provider.get_forecast(LOCATION)

        assert session.get.call_count == 1
