# rimtrans/documents/__init__.py
"""XML 本地化文档的抽取、合并、回写与导出。"""

from rimtrans.documents.applier import apply_translations
from rimtrans.documents.exporter import ExportReport, export_session, save_document
from rimtrans.documents.extractor import extract_document, extract_nodes
from rimtrans.documents.merger import (
    merge_from_file,
    merge_translated_folder,
    merge_translated_root,
    translated_relative_path,
)
from rimtrans.documents.models import (
    Document,
    PathKey,
    TranslationLookup,
    TranslationNode,
    count_leaves,
    count_translated,
    iter_leaves,
)
from rimtrans.documents.pathkey import TRANSLATABLE_TAGS, build_path_key, build_structural_path
from rimtrans.documents.scanner import ModScanner, load_document
from rimtrans.documents.session import TranslationSession, translated_folder_for

__all__ = [
    "Document",
    "ExportReport",
    "ModScanner",
    "PathKey",
    "TRANSLATABLE_TAGS",
    "TranslationLookup",
    "TranslationNode",
    "TranslationSession",
    "apply_translations",
    "build_path_key",
    "build_structural_path",
    "count_leaves",
    "count_translated",
    "export_session",
    "extract_document",
    "extract_nodes",
    "iter_leaves",
    "load_document",
    "merge_from_file",
    "merge_translated_folder",
    "merge_translated_root",
    "save_document",
    "translated_folder_for",
    "translated_relative_path",
]
