# rimtrans/providers/registry.py
"""
提供商的封闭注册表与静态回退表。

提供商集合是固定的，不做运行期插件发现；回退表按最初请求的提供商给出
有序的备选列表，付费提供商先回退到其他付费提供商，再回退到免费服务。
"""

from typing import Any

from rimtrans.core.types import ProviderName
from rimtrans.exceptions import ProviderNotFoundError
from rimtrans.providers.apicase import ApicaseProvider
from rimtrans.providers.base import BaseTranslationProvider
from rimtrans.providers.deepl import DeepLProvider
from rimtrans.providers.google import GoogleProvider
from rimtrans.providers.libretranslate import LibreTranslateProvider
from rimtrans.providers.mymemory import MyMemoryProvider
from rimtrans.providers.yandex import YandexProvider

PROVIDER_REGISTRY: dict[ProviderName, type[BaseTranslationProvider[Any]]] = {
    ProviderName.APICASE: ApicaseProvider,
    ProviderName.GOOGLE: GoogleProvider,
    ProviderName.DEEPL: DeepLProvider,
    ProviderName.YANDEX: YandexProvider,
    ProviderName.LIBRETRANSLATE: LibreTranslateProvider,
    ProviderName.MYMEMORY: MyMemoryProvider,
}

FALLBACK_CHAINS: dict[ProviderName, tuple[ProviderName, ...]] = {
    ProviderName.APICASE: (ProviderName.LIBRETRANSLATE, ProviderName.MYMEMORY),
    ProviderName.GOOGLE: (
        ProviderName.DEEPL,
        ProviderName.LIBRETRANSLATE,
        ProviderName.MYMEMORY,
    ),
    ProviderName.DEEPL: (
        ProviderName.GOOGLE,
        ProviderName.LIBRETRANSLATE,
        ProviderName.MYMEMORY,
    ),
    ProviderName.YANDEX: (ProviderName.LIBRETRANSLATE, ProviderName.MYMEMORY),
    ProviderName.LIBRETRANSLATE: (ProviderName.APICASE, ProviderName.MYMEMORY),
    ProviderName.MYMEMORY: (ProviderName.APICASE, ProviderName.LIBRETRANSLATE),
}


def get_provider_class(name: ProviderName | str) -> type[BaseTranslationProvider[Any]]:
    try:
        return PROVIDER_REGISTRY[ProviderName(name)]
    except (KeyError, ValueError) as e:
        raise ProviderNotFoundError(f"提供商 '{name}' 未在注册表中找到。") from e


def fallback_chain(name: ProviderName) -> tuple[ProviderName, ...]:
    return FALLBACK_CHAINS.get(name, ())


def available_providers() -> list[ProviderName]:
    return list(PROVIDER_REGISTRY)
