# rimtrans/core/__init__.py
"""对外暴露核心数据类型与异常。"""

from rimtrans.core.types import (
    ProviderError,
    ProviderName,
    ProviderRequest,
    ProviderResponse,
    ProviderResult,
    ProviderSuccess,
)
from rimtrans.exceptions import (
    APIError,
    ConfigurationError,
    DocumentLoadError,
    ExportError,
    ProviderNotFoundError,
    RimTransError,
)

__all__ = [
    "APIError",
    "ConfigurationError",
    "DocumentLoadError",
    "ExportError",
    "ProviderError",
    "ProviderName",
    "ProviderNotFoundError",
    "ProviderRequest",
    "ProviderResponse",
    "ProviderResult",
    "ProviderSuccess",
    "RimTransError",
]
