# rimtrans/providers/apicase.py
"""提供默认的免费翻译服务 Apicase 的适配器，会依次尝试多个镜像端点。"""

import httpx
import structlog
from pydantic import Field

from rimtrans.core.types import ProviderError, ProviderName, ProviderResult
from rimtrans.providers.base import BaseProviderConfig, BaseTranslationProvider, success

logger = structlog.get_logger(__name__)


class ApicaseProviderConfig(BaseProviderConfig):
    """Apicase 适配器的配置。"""

    endpoints: list[str] = Field(
        default_factory=lambda: [
            "https://apicase.ru/api/translate",
            "https://api.apicase.ru/translate",
            "http://apicase.ru/api/translate",
        ],
        min_length=1,
    )
    default_token: str = "vcru"


class ApicaseProvider(BaseTranslationProvider[ApicaseProviderConfig]):
    """Apicase 适配器：GET 查询串，响应体 `{"translated": true, "text": ...}`。"""

    CONFIG_MODEL = ApicaseProviderConfig
    NAME = ProviderName.APICASE
    DISPLAY_NAME = "Apicase"

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        params = {"token": api_key or self.config.default_token, "text": text}
        if source_lang:
            params["from"] = source_lang
        if target_lang:
            params["to"] = target_lang

        for endpoint in self.config.endpoints:
            try:
                data = await self._request_json("GET", endpoint, params=params)
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
                # 镜像/CDN 不稳定时换下一个端点
                logger.debug("Apicase 端点不可用", endpoint=endpoint, error=str(e))
                continue
            if (
                isinstance(data, dict)
                and data.get("translated") is True
                and isinstance(data.get("text"), str)
            ):
                return success(data["text"])
            logger.debug("Apicase 端点未返回译文", endpoint=endpoint)

        return ProviderError(error_message="Apicase API failed on all endpoints")
