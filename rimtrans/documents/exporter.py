# rimtrans/documents/exporter.py
"""
负责把会话中的译文导出为一个并列的译文模组目录 `<目录> (<目标语言>)`。

单个文件写入失败只记入错误列表，不会中断其余文件；
整体结果以“带 N 个错误保存”的降级状态报告，而不是直接失败。
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from lxml import etree

from rimtrans.documents.applier import apply_translations
from rimtrans.documents.merger import SOURCE_LOCALE_DIR, translated_relative_path
from rimtrans.documents.models import Document
from rimtrans.documents.session import TranslationSession, translated_folder_for
from rimtrans.documents.xmlutil import (
    element_value,
    find_child,
    parse_file,
    set_element_value,
    write_file,
)
from rimtrans.exceptions import ExportError

log = structlog.get_logger(__name__)

ABOUT_RELATIVE_PATH = Path("About") / "About.xml"


@dataclass
class ExportReport:
    """一次导出的结果。"""

    translated_folder: Path
    saved: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.errors)

    @property
    def summary(self) -> str:
        if self.degraded:
            return f"Saved with {len(self.errors)} errors"
        return f"Translated mod saved to: {self.translated_folder}"


def save_document(document: Document, destination: Path) -> Path:
    """把节点树的译文写回文档后保存到任意路径。"""
    if document.tree is None:
        raise ExportError(f"文档未加载，无法保存: {document.relative_path}")
    apply_translations(document.root_nodes)
    write_file(document.tree, destination)
    return destination


def export_session(session: TranslationSession, target_language: str) -> ExportReport:
    """
    导出整个会话。

    Raises:
        ExportError: 会话尚未加载目录、没有可导出的文档，或目标语言为空。

    """
    target_language = target_language.strip()
    if not target_language:
        raise ExportError("请先指定目标语言。")
    if session.folder is None or not session.loaded_documents:
        raise ExportError("尚未加载任何可导出的文档。")

    translated_folder = translated_folder_for(session.folder, target_language)
    try:
        translated_folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"无法创建译文目录 {translated_folder}: {e}") from e

    report = ExportReport(translated_folder=translated_folder)
    _save_translated_files(session.loaded_documents, report, target_language)
    if target_language.lower() != SOURCE_LOCALE_DIR:
        _remove_leftover_source_folders(translated_folder, report)
    _update_about_xml(translated_folder, report, target_language)

    if report.degraded:
        log.warning("译文模组已保存，但存在错误。", folder=str(translated_folder), errors=report.errors)
    else:
        log.info("译文模组已保存", folder=str(translated_folder), files=len(report.saved))
    return report


def _save_translated_files(
    documents: list[Document], report: ExportReport, target_language: str
) -> None:
    destinations: dict[Path, Path] = {}
    for document in documents:
        destination = report.translated_folder / translated_relative_path(
            document.relative_path, target_language
        )
        previous = destinations.get(destination)
        if previous is not None:
            log.warning(
                "多个源文件映射到同一个导出路径，后者将覆盖前者。",
                destination=str(destination),
                first=str(previous),
                second=str(document.relative_path),
            )
        destinations[destination] = document.relative_path
        try:
            save_document(document, destination)
            report.saved.append(destination)
        except (OSError, ExportError) as e:
            log.warning("文件保存失败", path=str(document.relative_path), error=str(e))
            report.errors.append(f"{document.relative_path}: {e}")


def _remove_leftover_source_folders(translated_folder: Path, report: ExportReport) -> None:
    try:
        leftovers = sorted(
            (
                p
                for p in translated_folder.rglob("*")
                if p.is_dir() and p.name.lower() == SOURCE_LOCALE_DIR
            ),
            key=lambda p: len(p.parts),
        )
        for folder in leftovers:
            if folder.exists():
                shutil.rmtree(folder)
                log.debug("已删除残留的源语言目录", folder=str(folder))
    except OSError as e:
        report.errors.append(f"Failed to delete leftover English folder: {e}")


def _update_about_xml(
    translated_folder: Path, report: ExportReport, target_language: str
) -> None:
    about_path = translated_folder / ABOUT_RELATIVE_PATH
    if not about_path.is_file():
        return
    suffix = f"({target_language})"
    try:
        tree = parse_file(about_path)
        name_element = find_child(tree.getroot(), "name")
        if name_element is None:
            return
        name = element_value(name_element)
        if not name.endswith(suffix):
            set_element_value(name_element, f"{name} {suffix}")
            write_file(tree, about_path)
    except (OSError, etree.XMLSyntaxError) as e:
        report.errors.append(f"About.xml update failed: {e}")
