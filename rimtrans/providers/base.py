# rimtrans/providers/base.py
"""
本模块定义了所有翻译提供商适配器必须继承的抽象基类（ABC）。

适配器只负责把统一请求映射为各自的线路协议，并把响应或错误映射回统一结果；
回退、联网预检等编排逻辑全部位于 `rimtrans.orchestrator`。
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import httpx
import structlog
from pydantic import BaseModel, Field, SecretStr

from rimtrans.core.types import (
    ProviderError,
    ProviderName,
    ProviderRequest,
    ProviderResponse,
    ProviderResult,
    ProviderSuccess,
)
from rimtrans.exceptions import APIError

logger = structlog.get_logger(__name__)

_ConfigType = TypeVar("_ConfigType", bound="BaseProviderConfig")


class BaseProviderConfig(BaseModel):
    """所有提供商配置模型的基类。"""

    timeout: float | None = Field(
        default=None, description="单次请求超时（秒），为空时使用客户端默认值", gt=0
    )


class BaseTranslationProvider(ABC, Generic[_ConfigType]):
    """翻译提供商的纯异步抽象基类，每次调用只发起一次请求，不做重试。"""

    CONFIG_MODEL: type[_ConfigType]
    NAME: ProviderName
    DISPLAY_NAME: str = ""
    REQUIRES_API_KEY: bool = False
    # 某些服务在失败时会把原文原样返回，需要识别为失败
    REJECTS_UNCHANGED_TEXT: bool = False

    def __init__(
        self,
        config: _ConfigType,
        client: httpx.AsyncClient,
        api_key: SecretStr | None = None,
    ):
        self.config = config
        self.client = client
        self.api_key = api_key

    @property
    def name(self) -> str:
        return self.NAME.value

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME or self.NAME.value

    @abstractmethod
    async def _execute_translation(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        api_key: str | None,
    ) -> ProviderResult:
        """[子类实现] 真正执行一次翻译调用的逻辑。"""
        ...

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """发送一次请求，校验 HTTP 状态并解析 JSON 响应体。"""
        if self.config.timeout is not None:
            kwargs.setdefault("timeout", self.config.timeout)
        response = await self.client.request(method, url, **kwargs)
        response.raise_for_status()
        return response.json()

    def _resolve_api_key(self, request: ProviderRequest) -> str | None:
        secret = request.api_key if request.provider == self.NAME else None
        secret = secret or self.api_key
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        return value or None

    def _failure(self, message: str) -> ProviderResponse:
        return ProviderResponse.failure(message, provider=self.NAME)

    async def atranslate(self, request: ProviderRequest) -> ProviderResponse:
        """[模板方法] 执行一次翻译，并把所有可预期的错误归一化为失败响应。"""
        api_key = self._resolve_api_key(request)
        if self.REQUIRES_API_KEY and not api_key:
            return self._failure(f"{self.display_name} API key is required")

        try:
            result = await self._execute_translation(
                request.text, request.source_lang, request.target_lang, api_key
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            result = ProviderError(
                error_message=f"{self.display_name} failed: {e.__class__.__name__}: {e}"
            )
        except (APIError, AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            # JSON 解析失败（ValueError）或响应结构与预期不符
            result = ProviderError(
                error_message=f"{self.display_name} returned invalid response: {e}"
            )

        if isinstance(result, ProviderError):
            logger.debug("提供商调用失败", provider=self.name, error=result.error_message)
            return self._failure(result.error_message)

        translated = result.translated_text
        if not translated.strip():
            return self._failure(f"{self.display_name} returned empty translation")
        if self.REJECTS_UNCHANGED_TEXT and translated.strip() == request.text.strip():
            return self._failure(
                f"{self.display_name} returned the source text unchanged"
            )
        return ProviderResponse(
            success=True, translated_text=translated, provider=self.NAME
        )


def invalid_response(display_name: str) -> ProviderError:
    return ProviderError(error_message=f"{display_name} API returned invalid response")


def success(text: Any) -> ProviderResult:
    if not isinstance(text, str):
        raise APIError(f"译文字段类型错误: {type(text).__name__}")
    return ProviderSuccess(translated_text=text)
