# rimtrans/providers/deepl.py
"""提供 DeepL API 的适配器。"""

from rimtrans.core.types import ProviderError, ProviderName, ProviderResult
from rimtrans.providers.base import (
    BaseProviderConfig,
    BaseTranslationProvider,
    invalid_response,
    success,
)

FREE_KEY_SUFFIX = ":fx"


class DeepLProviderConfig(BaseProviderConfig):
    free_endpoint: str = "https://api-free.deepl.com/v2/translate"
    pro_endpoint: str = "https://api.deepl.com/v2/translate"


class DeepLProvider(BaseTranslationProvider[DeepLProviderConfig]):
    """
    DeepL 适配器：表单 POST，必须提供 API key。

    免费版 key 以 `:fx` 结尾，对应 api-free 端点；其余 key 走付费端点。
    """

    CONFIG_MODEL = DeepLProviderConfig
    NAME = ProviderName.DEEPL
    DISPLAY_NAME = "DeepL"
    REQUIRES_API_KEY = True

    def endpoint_for(self, api_key: str) -> str:
        if api_key.endswith(FREE_KEY_SUFFIX):
            return self.config.free_endpoint
        return self.config.pro_endpoint

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        if not api_key:
            return ProviderError(error_message=f"{self.display_name} API key is required")
        data = await self._request_json(
            "POST",
            self.endpoint_for(api_key),
            headers={"Authorization": f"DeepL-Auth-Key {api_key}"},
            data={
                "text": text,
                "source_lang": source_lang.upper(),
                "target_lang": target_lang.upper(),
            },
        )
        translations = data.get("translations") or []
        if translations and "text" in translations[0]:
            return success(translations[0]["text"])
        return invalid_response(self.display_name)
