# rimtrans/documents/session.py
"""
一次“加载模组目录”的会话状态。

会话在 load_folder 时创建全部 Document 与查找表，在下一次 load_folder 时整体丢弃；
加载、抽取与合并都是同步完成的，完成前不会对外暴露部分结果。
"""

from collections.abc import Iterator
from pathlib import Path

import structlog

from rimtrans.documents.merger import merge_translated_folder
from rimtrans.documents.models import Document, TranslationNode, iter_leaves
from rimtrans.documents.scanner import ModScanner

log = structlog.get_logger(__name__)


def translated_folder_for(folder: Path, target_language: str) -> Path:
    """
    计算译文模组目录：`<目录> (<目标语言>)`。

    如果当前目录本身已经是译文目录（名称以该后缀结尾），直接返回它。
    """
    suffix = f" ({target_language})"
    if folder.name.lower().endswith(suffix.lower()):
        return folder
    return folder.with_name(f"{folder.name}{suffix}")


class TranslationSession:
    """持有一个已加载模组目录的全部文档。"""

    def __init__(self) -> None:
        self.folder: Path | None = None
        self.documents: list[Document] = []

    def load_folder(self, folder: Path | str) -> list[Document]:
        """扫描并加载目录，替换之前的会话内容。"""
        folder = Path(folder).resolve()
        documents = list(ModScanner(folder).scan())
        self.folder = folder
        self.documents = documents
        log.info(
            "模组目录加载完成",
            folder=str(folder),
            documents=len(self.loaded_documents),
            errors=len(self.failed_documents),
        )
        return self.documents

    def load_existing_translations(self, target_language: str) -> int:
        """
        如果同级存在 `<目录> (<目标语言>)`，把其中的既有译文合并进当前节点树。

        Returns:
            命中的叶子总数；译文目录不存在时返回 0。

        """
        if self.folder is None or not target_language.strip():
            return 0
        translated_folder = translated_folder_for(self.folder, target_language)
        if translated_folder == self.folder or not translated_folder.is_dir():
            log.debug("未找到既有译文目录", folder=str(translated_folder))
            return 0
        log.info("正在加载既有译文...", folder=translated_folder.name)
        return merge_translated_folder(
            self.loaded_documents, translated_folder, target_language
        )

    @property
    def loaded_documents(self) -> list[Document]:
        return [d for d in self.documents if d.is_loaded]

    @property
    def failed_documents(self) -> list[Document]:
        return [d for d in self.documents if d.load_error is not None]

    def find_document(self, relative_path: Path | str) -> Document | None:
        wanted = str(Path(relative_path)).lower()
        for document in self.documents:
            if str(document.relative_path).lower() == wanted:
                return document
        return None

    def iter_leaves(self) -> Iterator[TranslationNode]:
        for document in self.loaded_documents:
            yield from iter_leaves(document.root_nodes)

    @property
    def total_count(self) -> int:
        return sum(d.total_count for d in self.loaded_documents)

    @property
    def translated_count(self) -> int:
        return sum(d.translated_count for d in self.loaded_documents)
