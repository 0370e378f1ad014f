# rimtrans/documents/models.py
"""定义 XML 本地化文档翻译所需的核心数据模型。"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from lxml import etree


class PathKey(NamedTuple):
    """
    一个叶子节点在其文档中的稳定结构地址。

    两次独立解析同一结构的文档，会得到完全相同的 PathKey；
    这是把原文树中的叶子与译文文档中的对应元素匹配起来的唯一手段。
    """

    document_path: str
    structural_path: str

    def __str__(self) -> str:
        return f"{self.document_path}::{self.structural_path}"


@dataclass(eq=False)
class TranslationNode:
    """
    可寻址的翻译工作单元。

    叶子节点绑定到恰好一个 XML 元素且没有子节点；分组节点没有绑定，
    只用于按定义名或按文件组织子节点。`element` 只是指向文档内部的引用，
    文档结构的所有权属于 Document。
    """

    element_name: str
    original_text: str
    def_name: str
    translation: str | None = None
    submitted_translation: str | None = None
    children: list[TranslationNode] = field(default_factory=list)
    element: etree._Element | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.element is not None

    @property
    def is_group(self) -> bool:
        return self.element is None

    @property
    def effective_translation(self) -> str | None:
        """导出时使用的值：优先取已提交的译文，其次取编辑缓冲区。"""
        for value in (self.submitted_translation, self.translation):
            if value is not None and value.strip():
                return value
        return None

    @property
    def is_translated(self) -> bool:
        return bool(self.submitted_translation and self.submitted_translation.strip())

    @property
    def display_text(self) -> str:
        if self.is_translated:
            return f"{self.element_name}: {self.original_text} → {self.submitted_translation}"
        return f"{self.element_name}: {self.original_text}"

    def submit(self, value: str | None) -> None:
        """确认一次编辑：去除首尾空白后写入已提交译文，空白值则清除。"""
        self.translation = value
        cleaned = value.strip() if value else ""
        self.submitted_translation = cleaned or None

    def set_prior_translation(self, value: str) -> None:
        """从既有译文载入时，编辑缓冲区与已提交值同时更新。"""
        self.translation = value
        self.submitted_translation = value


TranslationLookup = dict[PathKey, TranslationNode]


@dataclass
class Document:
    """代表一个已解析（或解析失败）的 XML 文件。"""

    source_path: Path
    relative_path: Path
    tree: etree._ElementTree | None = field(default=None, repr=False)
    root_nodes: list[TranslationNode] = field(default_factory=list)
    lookup: TranslationLookup = field(default_factory=dict, repr=False)
    load_error: str | None = None

    @property
    def key(self) -> str:
        """PathKey 的文档部分。"""
        return str(self.source_path)

    @property
    def root(self) -> etree._Element | None:
        return self.tree.getroot() if self.tree is not None else None

    @property
    def is_loaded(self) -> bool:
        return self.tree is not None and self.load_error is None

    @property
    def total_count(self) -> int:
        return count_leaves(self.root_nodes)

    @property
    def translated_count(self) -> int:
        return count_translated(self.root_nodes)


def iter_leaves(nodes: Iterable[TranslationNode]) -> Iterator[TranslationNode]:
    """按文档顺序深度优先地产出所有叶子节点。"""
    for node in nodes:
        if node.is_leaf:
            yield node
        yield from iter_leaves(node.children)


def count_leaves(nodes: Iterable[TranslationNode]) -> int:
    return sum(1 for _ in iter_leaves(nodes))


def count_translated(nodes: Iterable[TranslationNode]) -> int:
    return sum(1 for leaf in iter_leaves(nodes) if leaf.is_translated)
