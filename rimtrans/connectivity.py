# rimtrans/connectivity.py
"""联网预检：在尝试任何提供商之前，先探测一个已知可达的外部地址。"""

import httpx
import structlog

from rimtrans.config import ConnectivityConfig

logger = structlog.get_logger(__name__)


class ConnectivityChecker:
    def __init__(self, client: httpx.AsyncClient, config: ConnectivityConfig):
        self.client = client
        self.config = config

    async def is_online(self) -> bool:
        """探测成功（2xx）返回 True；预检被禁用时始终视为在线。"""
        if not self.config.enabled:
            return True
        try:
            response = await self.client.get(
                self.config.probe_url, timeout=self.config.timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                "联网预检失败", probe_url=self.config.probe_url, error=str(e)
            )
            return False
        if not response.is_success:
            logger.warning(
                "联网预检返回非成功状态",
                probe_url=self.config.probe_url,
                status_code=response.status_code,
            )
            return False
        return True
