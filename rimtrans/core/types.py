# rimtrans/core/types.py
"""
本模块定义了翻译编排层使用的核心数据类型。

ProviderRequest / ProviderResponse 是对外的统一契约；
ProviderSuccess / ProviderError 只在适配器与编排器之间流转。
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ProviderName(str, Enum):
    """封闭的翻译提供商集合，每个成员对应一个适配器。"""

    APICASE = "apicase"
    GOOGLE = "google"
    DEEPL = "deepl"
    YANDEX = "yandex"
    LIBRETRANSLATE = "libretranslate"
    MYMEMORY = "mymemory"


class ProviderSuccess(BaseModel):
    """适配器返回的一次成功翻译。"""

    translated_text: str


class ProviderError(BaseModel):
    """适配器返回的一次失败结果。"""

    error_message: str


ProviderResult = Union[ProviderSuccess, ProviderError]


class ProviderRequest(BaseModel):
    """一次翻译调用的请求值对象。语言字段均为 ISO 639-1 代码。"""

    model_config = ConfigDict(frozen=True)

    text: str
    source_lang: str = "en"
    target_lang: str = "ru"
    provider: ProviderName = ProviderName.APICASE
    api_key: SecretStr | None = None


class ProviderResponse(BaseModel):
    """
    一次翻译调用的响应值对象。

    `provider` 是实际给出结果的提供商，回退发生后可能与请求的不同。
    `attempts` 记录每次失败尝试的错误上下文，仅用于诊断。
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    translated_text: str | None = None
    error_message: str | None = None
    provider: ProviderName | None = None
    attempts: list[str] = Field(default_factory=list)

    @classmethod
    def failure(
        cls,
        message: str,
        provider: ProviderName | None = None,
        attempts: list[str] | None = None,
    ) -> "ProviderResponse":
        return cls(
            success=False,
            error_message=message,
            provider=provider,
            attempts=attempts or [],
        )
