# rimtrans/providers/yandex.py
"""提供 Yandex Translate (v1.5) 的适配器。"""

from rimtrans.core.types import ProviderName, ProviderResult
from rimtrans.providers.base import (
    BaseProviderConfig,
    BaseTranslationProvider,
    invalid_response,
    success,
)


class YandexProviderConfig(BaseProviderConfig):
    endpoint: str = "https://translate.yandex.net/api/v1.5/tr.json/translate"


class YandexProvider(BaseTranslationProvider[YandexProviderConfig]):
    """Yandex 适配器：表单 POST，语言对写作 `en-ru`，必须提供 API key。"""

    CONFIG_MODEL = YandexProviderConfig
    NAME = ProviderName.YANDEX
    DISPLAY_NAME = "Yandex"
    REQUIRES_API_KEY = True

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        data = await self._request_json(
            "POST",
            self.config.endpoint,
            data={"key": api_key, "text": text, "lang": f"{source_lang}-{target_lang}"},
        )
        texts = data.get("text") or []
        if texts:
            return success(texts[0])
        return invalid_response(self.display_name)
