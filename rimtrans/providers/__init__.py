# rimtrans/providers/__init__.py
"""
翻译提供商适配器。

每个适配器封装一个第三方翻译 API（Apicase、Google、DeepL、Yandex、
LibreTranslate、MyMemory），并实现 BaseTranslationProvider 接口。
"""

from rimtrans.providers.apicase import ApicaseProvider
from rimtrans.providers.base import BaseProviderConfig, BaseTranslationProvider
from rimtrans.providers.deepl import DeepLProvider
from rimtrans.providers.google import GoogleProvider
from rimtrans.providers.libretranslate import LibreTranslateProvider
from rimtrans.providers.mymemory import MyMemoryProvider
from rimtrans.providers.registry import (
    FALLBACK_CHAINS,
    PROVIDER_REGISTRY,
    available_providers,
    fallback_chain,
    get_provider_class,
)
from rimtrans.providers.yandex import YandexProvider

__all__ = [
    "ApicaseProvider",
    "BaseProviderConfig",
    "BaseTranslationProvider",
    "DeepLProvider",
    "FALLBACK_CHAINS",
    "GoogleProvider",
    "LibreTranslateProvider",
    "MyMemoryProvider",
    "PROVIDER_REGISTRY",
    "YandexProvider",
    "available_providers",
    "fallback_chain",
    "get_provider_class",
]
