# rimtrans/providers/google.py
"""提供 Google Cloud Translation (v2) 的适配器。"""

from rimtrans.core.types import ProviderName, ProviderResult
from rimtrans.providers.base import (
    BaseProviderConfig,
    BaseTranslationProvider,
    invalid_response,
    success,
)


class GoogleProviderConfig(BaseProviderConfig):
    endpoint: str = "https://translation.googleapis.com/language/translate/v2"


class GoogleProvider(BaseTranslationProvider[GoogleProviderConfig]):
    """Google 适配器：表单 POST，必须提供 API key。"""

    CONFIG_MODEL = GoogleProviderConfig
    NAME = ProviderName.GOOGLE
    DISPLAY_NAME = "Google Translate"
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
            data={
                "key": api_key,
                "q": text,
                "source": source_lang,
                "target": target_lang,
                "format": "text",
            },
        )
        translations = data.get("data", {}).get("translations") or []
        if translations and "translatedText" in translations[0]:
            return success(translations[0]["translatedText"])
        return invalid_response(self.display_name)
