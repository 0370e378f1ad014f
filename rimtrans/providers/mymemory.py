# rimtrans/providers/mymemory.py
"""提供 MyMemory 的适配器。"""

from rimtrans.core.types import ProviderError, ProviderName, ProviderResult
from rimtrans.providers.base import (
    BaseProviderConfig,
    BaseTranslationProvider,
    invalid_response,
    success,
)


class MyMemoryProviderConfig(BaseProviderConfig):
    endpoint: str = "https://api.mymemory.translated.net/get"
    email: str | None = None


class MyMemoryProvider(BaseTranslationProvider[MyMemoryProviderConfig]):
    """
    MyMemory 适配器：GET 查询串，语言对写作 `en|ru`。

    该服务翻译失败时常把原文原样返回，因此“译文等于原文”按失败处理。
    """

    CONFIG_MODEL = MyMemoryProviderConfig
    NAME = ProviderName.MYMEMORY
    DISPLAY_NAME = "MyMemory"
    REJECTS_UNCHANGED_TEXT = True

    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        if api_key:
            params["key"] = api_key
        if self.config.email:
            params["de"] = self.config.email
        data = await self._request_json("GET", self.config.endpoint, params=params)

        status = data.get("responseStatus", 200)
        if str(status) != "200":
            details = data.get("responseDetails") or status
            return ProviderError(error_message=f"MyMemory returned status {status}: {details}")

        response_data = data.get("responseData") or {}
        if "translatedText" in response_data:
            return success(response_data["translatedText"])
        return invalid_response(self.display_name)
