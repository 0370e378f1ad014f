# rimtrans/orchestrator.py
"""本模块包含多提供商翻译编排器。"""

from typing import Any

import httpx
import structlog

from rimtrans.config import RimTransConfig
from rimtrans.connectivity import ConnectivityChecker
from rimtrans.core.types import ProviderName, ProviderRequest, ProviderResponse
from rimtrans.providers.base import BaseTranslationProvider
from rimtrans.providers.registry import fallback_chain, get_provider_class

logger = structlog.get_logger(__name__)

EMPTY_TEXT_MESSAGE = "Text to translate is empty"
NO_CONNECTION_MESSAGE = "No internet connection"


class TranslationOrchestrator:
    """
    异步翻译编排器。

    对外只有一个契约 `translate(request) -> response`：空文本直接拒绝，
    然后联网预检，再依次尝试请求的提供商与它的静态回退列表，遇到第一个成功即返回。
    每次调用之间不共享可变状态，可以并发调用。
    """

    def __init__(
        self,
        config: RimTransConfig,
        client: httpx.AsyncClient | None = None,
        connectivity: ConnectivityChecker | None = None,
    ):
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=config.request_timeout, follow_redirects=True
        )
        self.connectivity = connectivity or ConnectivityChecker(
            self.client, config.connectivity
        )
        self._provider_instances: dict[ProviderName, BaseTranslationProvider[Any]] = {}
        self.initialized = False

    async def initialize(self) -> None:
        if self.initialized:
            return
        self._get_or_create_provider(self.config.active_provider)
        self.initialized = True
        logger.info("编排器初始化完成。", active_provider=self.config.active_provider.value)

    async def close(self) -> None:
        """关闭编排器。只关闭由自己创建的 HTTP 客户端。"""
        if self._owns_client and not self.client.is_closed:
            await self.client.aclose()
        self._provider_instances.clear()
        self.initialized = False

    async def __aenter__(self) -> "TranslationOrchestrator":
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_or_create_provider(self, name: ProviderName) -> BaseTranslationProvider[Any]:
        if name not in self._provider_instances:
            provider_class = get_provider_class(name)
            provider_config_data = self.config.provider_configs.get(name.value, {})
            provider_config = provider_class.CONFIG_MODEL(**provider_config_data)
            self._provider_instances[name] = provider_class(
                config=provider_config,
                client=self.client,
                api_key=self.config.api_keys.for_provider(name),
            )
            logger.debug("提供商实例已创建", provider=name.value)
        return self._provider_instances[name]

    async def translate(self, request: ProviderRequest) -> ProviderResponse:
        """
        执行一次编排后的翻译。

        Returns:
            成功时 `provider` 为实际给出结果的提供商；全部失败时
            `error_message` 汇总每次尝试的错误，`attempts` 保留明细。

        """
        if not request.text.strip():
            return ProviderResponse.failure(EMPTY_TEXT_MESSAGE)

        if not await self.connectivity.is_online():
            return ProviderResponse.failure(NO_CONNECTION_MESSAGE)

        attempts: list[str] = []
        chain = (request.provider, *fallback_chain(request.provider))
        for index, name in enumerate(chain):
            if index == 1:
                logger.info(
                    "主提供商失败，启用回退链",
                    provider=request.provider.value,
                    fallbacks=[p.value for p in chain[1:]],
                )
            provider = self._get_or_create_provider(name)
            response = await provider.atranslate(request)
            if response.success:
                return response.model_copy(update={"attempts": attempts})
            logger.warning(
                "提供商调用失败", provider=name.value, error=response.error_message
            )
            attempts.append(f"{name.value}: {response.error_message}")

        logger.error(
            "所有提供商均失败", provider=request.provider.value, attempts=len(attempts)
        )
        return ProviderResponse.failure(
            "All translation providers failed: " + "; ".join(attempts),
            attempts=attempts,
        )

    async def translate_text(
        self,
        text: str,
        source_lang: str | None = None,
        target_lang: str | None = None,
        provider: ProviderName | None = None,
    ) -> ProviderResponse:
        """便捷方法：按配置中的语言与活动提供商构造请求。"""
        request = ProviderRequest(
            text=text,
            source_lang=source_lang or self.config.source_lang_code,
            target_lang=target_lang or self.config.target_lang_code,
            provider=provider or self.config.active_provider,
        )
        return await self.translate(request)
