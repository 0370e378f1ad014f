# rimtrans/documents/extractor.py
"""负责从已解析的 XML 文档中抽取可翻译节点树与扁平查找表。"""

import structlog
from lxml import etree

from rimtrans.documents.models import Document, PathKey, TranslationLookup, TranslationNode
from rimtrans.documents.pathkey import (
    is_flat_dictionary,
    resolve_def_name,
    walk_definition,
    walk_flat,
)
from rimtrans.documents.xmlutil import child_elements, element_value, local_name

log = structlog.get_logger(__name__)

KEYED_GROUP_LABEL = "Key/Value Pairs"


def extract_nodes(
    root: etree._Element, document_key: str, file_name: str
) -> tuple[list[TranslationNode], TranslationLookup]:
    """
    把一个文档根元素转换为节点树和查找表。

    Returns:
        (顶层节点列表, 查找表)。顶层节点的顺序与文档顺序一致；
        查找表中同一个 PathKey 只保留第一次出现的节点。

    """
    lookup: TranslationLookup = {}
    if is_flat_dictionary(root):
        return _extract_flat(root, document_key, file_name, lookup), lookup
    return _extract_definitions(root, document_key, lookup), lookup


def _register(
    lookup: TranslationLookup, key: PathKey, node: TranslationNode
) -> None:
    if key in lookup:
        log.debug("结构路径重复，仅保留首次出现的节点。", path_key=str(key))
        return
    lookup[key] = node


def _make_leaf(element: etree._Element, def_name: str) -> TranslationNode:
    return TranslationNode(
        element_name=local_name(element),
        original_text=element_value(element).strip(),
        def_name=def_name,
        element=element,
    )


def _extract_flat(
    root: etree._Element,
    document_key: str,
    file_name: str,
    lookup: TranslationLookup,
) -> list[TranslationNode]:
    leaves: list[TranslationNode] = []
    for structural_path, element in walk_flat(root):
        leaf = _make_leaf(element, file_name)
        leaves.append(leaf)
        _register(lookup, PathKey(document_key, structural_path), leaf)

    if not leaves:
        return []
    return [
        TranslationNode(
            element_name=file_name,
            original_text=KEYED_GROUP_LABEL,
            def_name=file_name,
            children=leaves,
        )
    ]


def _extract_definitions(
    root: etree._Element, document_key: str, lookup: TranslationLookup
) -> list[TranslationNode]:
    groups: list[TranslationNode] = []
    for definition in child_elements(root):
        def_name = resolve_def_name(definition)
        leaves: list[TranslationNode] = []
        for structural_path, element in walk_definition(definition, def_name):
            leaf = _make_leaf(element, def_name)
            leaves.append(leaf)
            _register(lookup, PathKey(document_key, structural_path), leaf)

        # 没有任何叶子的定义不出现在输出树中
        if leaves:
            groups.append(
                TranslationNode(
                    element_name=local_name(definition),
                    original_text=def_name,
                    def_name=def_name,
                    children=leaves,
                )
            )
    return groups


def extract_document(document: Document) -> Document:
    """为一个已加载的 Document 填充 root_nodes 与 lookup，并原样返回。"""
    root = document.root
    if root is None:
        return document
    document.root_nodes, document.lookup = extract_nodes(
        root, document.key, document.source_path.name
    )
    log.debug(
        "文档抽取完成",
        path=str(document.relative_path),
        groups=len(document.root_nodes),
        leaves=document.total_count,
    )
    return document
