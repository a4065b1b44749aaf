"""
Aiohttp Session Manager - Sessão HTTP compartilhada pelos providers
Reutiliza a sessão enquanto o event loop for o mesmo
"""
import asyncio
from typing import Optional
import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador de sessão aiohttp

    - Reutiliza a sessão dentro do mesmo event loop
    - Recria quando o loop muda (asyncio.run cria um loop novo a cada chamada)
    - Timeouts e limite de conexões definidos na criação

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: int = 10,
        connect_timeout: int = 3,
        sock_read_timeout: int = 7,
        limit: int = 10
    ):
        """
        Args:
            total_timeout: Timeout total em segundos
            connect_timeout: Timeout de conexão em segundos
            sock_read_timeout: Timeout de leitura em segundos
            limit: Limite total de conexões no pool
        """
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls, **kwargs) -> 'AiohttpSessionManager':
        """
        Retorna a instância compartilhada (kwargs usados só na primeira criação)
        """
        if cls._instance is None:
            cls._instance = cls(**kwargs)
            logger.info("AiohttpSessionManager created", limit=cls._instance.limit)
        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp ligada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self.close()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(limit=self.limit)

        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id
        logger.info("Aiohttp session created", loop_id=current_loop_id)

        return self._session

    async def close(self) -> None:
        """Fecha a sessão atual, se existir"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            except Exception as e:
                logger.warning("Error closing aiohttp session", error=str(e))
        self._session = None
        self._session_loop_id = None

    @classmethod
    def reset_instance(cls) -> None:
        """Descarta a instância compartilhada (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager(**kwargs) -> AiohttpSessionManager:
    """Factory function para obter a instância compartilhada do gerenciador"""
    return AiohttpSessionManager.get_instance(**kwargs)
