# rimtrans/cli/_utils.py
"""CLI 内部共享的辅助工具。"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from rimtrans.config import RimTransConfig
from rimtrans.orchestrator import TranslationOrchestrator


@asynccontextmanager
async def get_orchestrator(
    config: RimTransConfig,
) -> AsyncGenerator[TranslationOrchestrator, None]:
    """安全地初始化和关闭编排器及其 HTTP 客户端。"""
    orchestrator = TranslationOrchestrator(config)
    try:
        await orchestrator.initialize()
        yield orchestrator
    finally:
        await orchestrator.close()
