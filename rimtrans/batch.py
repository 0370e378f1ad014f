# rimtrans/batch.py
"""
负责把会话中尚未翻译的叶子批量提交给编排器，并把成功的结果回填到节点上。

每个叶子是一次独立的翻译调用：要么完整写入译文，要么保持原样，
不存在部分写入的情况。
"""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from rimtrans.core.types import ProviderName, ProviderRequest
from rimtrans.documents.models import TranslationNode
from rimtrans.documents.session import TranslationSession
from rimtrans.orchestrator import TranslationOrchestrator

log = structlog.get_logger(__name__)


@dataclass
class BatchReport:
    """一次批量机器翻译的统计结果。"""

    translated: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return self.translated + self.failed


async def translate_leaves(
    orchestrator: TranslationOrchestrator,
    leaves: Iterable[TranslationNode],
    *,
    source_lang: str,
    target_lang: str,
    provider: ProviderName,
    max_concurrency: int = 4,
) -> BatchReport:
    """并发翻译一组叶子；已有提交译文的叶子会被跳过。"""
    report = BatchReport()
    pending: list[TranslationNode] = []
    for leaf in leaves:
        if leaf.is_translated:
            report.skipped += 1
        else:
            pending.append(leaf)

    if not pending:
        return report

    semaphore = asyncio.Semaphore(max_concurrency)

    async def translate_one(leaf: TranslationNode) -> None:
        request = ProviderRequest(
            text=leaf.original_text,
            source_lang=source_lang,
            target_lang=target_lang,
            provider=provider,
        )
        async with semaphore:
            response = await orchestrator.translate(request)
        if response.success and response.translated_text:
            leaf.submit(response.translated_text)
            report.translated += 1
        else:
            report.failed += 1
            report.errors.append(f"{leaf.def_name}/{leaf.element_name}: {response.error_message}")

    log.info("开始批量机器翻译", count=len(pending), provider=provider.value)
    await asyncio.gather(*(translate_one(leaf) for leaf in pending))
    log.info(
        "批量机器翻译完成",
        translated=report.translated,
        failed=report.failed,
        skipped=report.skipped,
    )
    return report


async def translate_session(
    orchestrator: TranslationOrchestrator,
    session: TranslationSession,
    provider: ProviderName | None = None,
) -> BatchReport:
    """按编排器配置中的语言与并发上限，翻译会话中所有未翻译的叶子。"""
    config = orchestrator.config
    return await translate_leaves(
        orchestrator,
        session.iter_leaves(),
        source_lang=config.source_lang_code,
        target_lang=config.target_lang_code,
        provider=provider or config.active_provider,
        max_concurrency=config.max_concurrency,
    )
