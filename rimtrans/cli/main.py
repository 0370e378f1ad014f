# rimtrans/cli/main.py
import asyncio
from pathlib import Path
from typing import Annotated, Optional

import structlog
import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rimtrans import __version__
from rimtrans.batch import translate_session
from rimtrans.config import load_config
from rimtrans.core.types import ProviderName, ProviderRequest
from rimtrans.documents import TranslationSession, export_session
from rimtrans.exceptions import ConfigurationError, ExportError
from rimtrans.languages import resolve_language_code
from rimtrans.logging_config import setup_logging

from ._utils import get_orchestrator
from .state import CLISharedState

log = structlog.get_logger("rimtrans.cli")
console = Console()

app = typer.Typer(
    name="rimtrans",
    help="RimWorld 模组本地化翻译工具。",
    add_completion=False,
    no_args_is_help=True,
)

LANG_OPTION = Annotated[
    Optional[str],
    typer.Option("--lang", "-l", help="目标语言名称（如 Russian），默认取配置。"),
]
PROVIDER_OPTION = Annotated[
    Optional[ProviderName],
    typer.Option("--provider", "-p", help="翻译提供商，默认取配置。"),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"RimTrans Version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="显示版本号并退出。",
        ),
    ] = False,
) -> None:
    """加载配置、初始化日志，并把共享状态挂到上下文上。"""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[bold red]❌ {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    setup_logging(log_level=config.logging.level, log_format=config.logging.format)
    ctx.obj = CLISharedState(config)


def _load_session(folder: Path, target_language: str) -> TranslationSession:
    session = TranslationSession()
    session.load_folder(folder)
    session.load_existing_translations(target_language)
    return session


@app.command("scan")
def scan(
    ctx: typer.Context,
    folder: Annotated[
        Path, typer.Argument(help="模组根目录。", exists=True, file_okay=False)
    ],
    lang: LANG_OPTION = None,
) -> None:
    """扫描模组目录，列出每个文件的可翻译条目数与已翻译数。"""
    state: CLISharedState = ctx.obj
    target_language = lang or state.config.target_language
    session = _load_session(folder, target_language)

    if not session.documents:
        console.print("[yellow]⚠️ 没有找到任何可翻译的 XML 文件。[/yellow]")
        return

    table = Table(
        title=f"{session.folder.name} → {target_language}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("File", no_wrap=True)
    table.add_column("Translated", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Error", style="red")
    for document in session.documents:
        table.add_row(
            escape(document.relative_path.as_posix()),
            str(document.translated_count),
            str(document.total_count),
            escape(document.load_error or ""),
        )
    console.print(table)
    console.print(
        f"合计: [bold]{session.translated_count}[/bold] / {session.total_count} 已翻译"
    )


@app.command("translate")
def translate(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="要翻译的文本。")],
    provider: PROVIDER_OPTION = None,
    source: Annotated[
        Optional[str], typer.Option("--from", "-f", help="源语言名称或代码。")
    ] = None,
    target: Annotated[
        Optional[str], typer.Option("--to", "-t", help="目标语言名称或代码。")
    ] = None,
    api_key: Annotated[
        Optional[str], typer.Option("--api-key", "-k", help="仅对所选提供商生效的凭据。")
    ] = None,
) -> None:
    """通过编排器（含回退链）翻译一段文本。"""
    state: CLISharedState = ctx.obj
    config = state.config
    request = ProviderRequest(
        text=text,
        source_lang=resolve_language_code(source) if source else config.source_lang_code,
        target_lang=resolve_language_code(target) if target else config.target_lang_code,
        provider=provider or config.active_provider,
        api_key=SecretStr(api_key) if api_key else None,
    )

    async def _run():
        async with get_orchestrator(config) as orchestrator:
            return await orchestrator.translate(request)

    response = asyncio.run(_run())
    if not response.success:
        console.print(f"[bold red]❌ 翻译失败: {response.error_message}[/bold red]")
        raise typer.Exit(code=1)

    console.print(response.translated_text)
    served_by = response.provider.value if response.provider else "?"
    console.print(f"[dim]provider: {served_by}[/dim]")


@app.command("export")
def export(
    ctx: typer.Context,
    folder: Annotated[
        Path, typer.Argument(help="模组根目录。", exists=True, file_okay=False)
    ],
    lang: LANG_OPTION = None,
    machine_translate: Annotated[
        bool,
        typer.Option("--machine-translate", "-m", help="导出前对未翻译条目执行机器翻译。"),
    ] = False,
    provider: PROVIDER_OPTION = None,
) -> None:
    """导出译文模组到 `<目录> (<目标语言>)`。"""
    state: CLISharedState = ctx.obj
    config = state.config
    if lang:
        config = config.model_copy(update={"target_language": lang.strip()})
    target_language = config.target_language
    session = _load_session(folder, target_language)

    if machine_translate:

        async def _run():
            async with get_orchestrator(config) as orchestrator:
                return await translate_session(orchestrator, session, provider=provider)

        batch = asyncio.run(_run())
        console.print(
            f"[cyan]机器翻译: {batch.translated} 成功, {batch.failed} 失败, "
            f"{batch.skipped} 已有译文[/cyan]"
        )

    try:
        report = export_session(session, target_language)
    except ExportError as e:
        console.print(f"[bold red]❌ 导出失败: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    if report.degraded:
        console.print(f"[yellow]⚠️ {report.summary}[/yellow]")
        for error in report.errors:
            console.print(f"  - [dim]{error}[/dim]")
    else:
        console.print(f"[bold green]✅ {report.summary}[/bold green]")
