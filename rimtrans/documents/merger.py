# rimtrans/documents/merger.py
"""
负责把一份既有译文文档中的字符串回填到原文节点树中，
以及计算原文文件在译文目录中的对应路径。
"""

from pathlib import Path, PurePath

import structlog
from lxml import etree

from rimtrans.documents.models import Document, PathKey, TranslationLookup
from rimtrans.documents.pathkey import is_flat_dictionary, walk_definition, walk_flat
from rimtrans.documents.xmlutil import child_elements, element_value, parse_file

log = structlog.get_logger(__name__)

LANGUAGES_DIR = "languages"
SOURCE_LOCALE_DIR = "english"
KEYED_DIR = "keyed"


def merge_translated_root(
    root: etree._Element, document_key: str, lookup: TranslationLookup
) -> int:
    """
    以与抽取器相同的规则遍历候选译文文档，把命中的值写入原文节点。

    只存在于一侧的键会被静默忽略。

    Returns:
        命中的叶子数量。

    """
    if is_flat_dictionary(root):
        candidates = walk_flat(root)
    else:
        candidates = (
            pair for definition in child_elements(root) for pair in walk_definition(definition)
        )

    hits = 0
    for structural_path, element in candidates:
        node = lookup.get(PathKey(document_key, structural_path))
        if node is None:
            continue
        node.set_prior_translation(element_value(element).strip())
        hits += 1
    return hits


def translated_relative_path(relative_path: PurePath, target_language: str) -> PurePath:
    """
    计算原文相对路径在译文目录中的对应路径。

    - `Languages/English` 段（不区分大小写）替换为 `Languages/<目标语言>`；
    - 替换后若所在目录名为 `Keyed`，文件名改为 `<目标语言>.xml`。
    """
    parts = list(relative_path.parts)
    replaced = False
    for index in range(len(parts) - 1):
        if (
            parts[index].lower() == LANGUAGES_DIR
            and parts[index + 1].lower() == SOURCE_LOCALE_DIR
        ):
            parts[index + 1] = target_language
            replaced = True
    mapped = type(relative_path)(*parts)
    if replaced and mapped.parent.name.lower() == KEYED_DIR:
        mapped = mapped.with_name(f"{target_language}.xml")
    return mapped


def merge_from_file(document: Document, candidate_path: Path) -> int:
    """
    从磁盘上的候选译文文件合并；文件缺失或无法解析时不算错误，返回 0。
    """
    if not document.is_loaded:
        return 0
    if not candidate_path.is_file():
        log.debug("未找到既有译文文件", path=str(candidate_path))
        return 0
    try:
        candidate = parse_file(candidate_path)
    except (OSError, etree.XMLSyntaxError) as e:
        log.warning("既有译文文件无法解析，已跳过。", path=str(candidate_path), error=str(e))
        return 0

    hits = merge_translated_root(candidate.getroot(), document.key, document.lookup)
    log.debug("既有译文已合并", path=str(candidate_path), hits=hits)
    return hits


def merge_translated_folder(
    documents: list[Document], translated_folder: Path, target_language: str
) -> int:
    """为一组文档逐个定位并合并既有译文，返回命中的叶子总数。"""
    total = 0
    for document in documents:
        candidate = translated_folder / translated_relative_path(
            document.relative_path, target_language
        )
        total += merge_from_file(document, candidate)
    log.info(
        "既有译文加载完成",
        folder=str(translated_folder),
        documents=len(documents),
        hits=total,
    )
    return total
