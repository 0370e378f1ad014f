# rimtrans/providers/libretranslate.py
"""提供 LibreTranslate 的适配器。公共实例无需 key，自建实例可配置 key。"""

from typing import Any

from rimtrans.core.types import ProviderName, ProviderResult
from rimtrans.providers.base import (
    BaseProviderConfig,
    BaseTranslationProvider,
    invalid_response,
    success,
)


class LibreTranslateProviderConfig(BaseProviderConfig):
    endpoint: str = "https://libretranslate.com/translate"


class LibreTranslateProvider(BaseTranslationProvider[LibreTranslateProviderConfig]):
    """LibreTranslate 适配器：JSON POST，响应体 `{"translatedText": ...}`。"""

    CONFIG_MODEL = LibreTranslateProviderConfig
    NAME = ProviderName.LIBRETRANSLATE
    DISPLAY_NAME = "LibreTranslate"

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        payload: dict[str, Any] = {
            "q": text,
            "source": source_lang,
            "target": target_lang,
            "format": "text",
        }
        if api_key:
            payload["api_key"] = api_key
        data = await self._request_json("POST", self.config.endpoint, json=payload)
        if isinstance(data, dict) and "translatedText" in data:
            return success(data["translatedText"])
        return invalid_response(self.display_name)
