# rimtrans/__init__.py
"""
RimTrans: RimWorld 模组本地化翻译工具。

从模组目录中抽取可翻译文本，合并既有译文，通过多个机器翻译提供商
（带回退链）补全译文，最后导出一个并列的译文模组目录。
"""

__version__ = "1.0.0"

from rimtrans.config import RimTransConfig
from rimtrans.core.types import ProviderName, ProviderRequest, ProviderResponse
from rimtrans.documents import (
    Document,
    ExportReport,
    PathKey,
    TranslationNode,
    TranslationSession,
    export_session,
)
from rimtrans.exceptions import RimTransError
from rimtrans.orchestrator import TranslationOrchestrator

__all__ = [
    "Document",
    "ExportReport",
    "PathKey",
    "ProviderName",
    "ProviderRequest",
    "ProviderResponse",
    "RimTransConfig",
    "RimTransError",
    "TranslationNode",
    "TranslationOrchestrator",
    "TranslationSession",
    "__version__",
    "export_session",
]
