"""WeatherAPI Provider - Busca a previsão raw no WeatherAPI.com (forecast.json)"""

import asyncio
from typing import Any, Dict, Optional
from ddtrace import tracer
import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential
)

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.exceptions import WeatherProviderException
from domain.value_objects.user_location import UserLocation
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

RETRYABLE_STATUS = (429, 503)


def _is_retryable(exception: BaseException) -> bool:
    if isinstance(exception, asyncio.TimeoutError):
        return True
    return isinstance(exception, aiohttp.ClientResponseError) and exception.status in RETRYABLE_STATUS


def _log_retry(retry_state: RetryCallState) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying WeatherAPI request",
        attempt=retry_state.attempt_number,
        error=str(exception)
    )


class WeatherApiProvider(IWeatherProvider):
    """
    Provider para WeatherAPI.com Forecast API

    Características:
    - Uma chamada traz current + forecastday[] com 24 horas por dia
    - Chave da API injetada (construtor ou WEATHERAPI_KEY)
    - Retry com backoff exponencial apenas para 429/503 e timeouts
    - 100% async com aiohttp
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        days: Optional[int] = None,
        session_manager: Optional[AiohttpSessionManager] = None,
        retry_wait=None
    ):
        """
        Inicializa provider

        Args:
            api_key: Chave do WeatherAPI.com (padrão: env WEATHERAPI_KEY)
            base_url: URL base (padrão: env WEATHERAPI_BASE_URL)
            days: Dias de previsão pedidos (padrão: 7)
            session_manager: Gerenciador de sessão HTTP (usa factory se None)
            retry_wait: Estratégia de espera do tenacity entre tentativas
        """
        self.api_key = api_key or API.WEATHERAPI_KEY
        self.base_url = (base_url or API.WEATHERAPI_BASE_URL).rstrip('/')
        self.days = days or API.FORECAST_DAYS
        self.session_manager = session_manager or get_aiohttp_session_manager(
            total_timeout=API.HTTP_TIMEOUT_TOTAL,
            connect_timeout=API.HTTP_TIMEOUT_CONNECT,
            sock_read_timeout=API.HTTP_TIMEOUT_READ,
            limit=API.HTTP_CONNECTION_LIMIT
        )
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=4)

    @property
    def provider_name(self) -> str:
        return "WeatherAPI"

    def _build_params(self, location: UserLocation) -> Dict[str, Any]:
        return {
            'key': self.api_key,
            'q': str(location),
            'days': self.days,
            'aqi': 'no',
            'alerts': 'no'
        }

    @tracer.wrap(resource="weatherapi.get_forecast")
    async def get_forecast(self, location: UserLocation) -> Dict[str, Any]:
        """
        Busca a previsão raw

        Flow:
        1. GET {base_url}/v1/forecast.json?q=lat,lon
        2. Retry (até 3 tentativas) em 429/503/timeout
        3. Falha final vira WeatherProviderException

        Args:
            location: Localização do usuário

        Returns:
            Payload raw do WeatherAPI.com
        """
        url = f"{self.base_url}{API.FORECAST_PATH}"
        params = self._build_params(location)
        session = await self.session_manager.get_session()

        logger.info("Fetching forecast", provider=self.provider_name, location=str(location))

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_retryable),
                stop=stop_after_attempt(API.HTTP_RETRY_ATTEMPTS),
                wait=self.retry_wait,
                before_sleep=_log_retry,
                reraise=True
            ):
                with attempt:
                    data = await self._fetch(session, url, params)
        except aiohttp.ClientResponseError as e:
            logger.error("WeatherAPI request failed", status=e.status, location=str(location))
            raise WeatherProviderException(
                "WeatherAPI request failed",
                details={"status": e.status, "location": str(location)}
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("WeatherAPI unreachable", error=str(e), location=str(location))
            raise WeatherProviderException(
                "WeatherAPI unreachable",
                details={"error": str(e), "location": str(location)}
            ) from e

        return data

    async def _fetch(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Dict[str, Any]
    ) -> Dict[str, Any]:
        async with session.get(url, params=params) as response:
            if response.status in RETRYABLE_STATUS:
                raise aiohttp.ClientResponseError(
                    request_info=response.request_info,
                    history=response.history,
                    status=response.status
                )
            response.raise_for_status()
            return await response.json()
