# rimtrans/documents/pathkey.py
"""
本模块负责为可翻译元素生成稳定、确定的结构地址 (PathKey)，
并提供抽取器与合并器共用的文档遍历规则。

地址规则：
- 键值文档（根标签为 LanguageData，不区分大小写）：结构路径就是元素自身的标签名。
- 定义文档：`定义标签[defName=<id>]/子标签/孙标签/...`，从定义根向下拼接祖先链。
  `<id>` 取定义根下名为 `defName` 的子元素的值，缺失时退化为定义根的标签名。
"""

from collections.abc import Iterator, Sequence

from lxml import etree

from rimtrans.documents.models import PathKey
from rimtrans.documents.xmlutil import child_elements, element_value, find_child, local_name

KEYED_ROOT_TAG = "languagedata"
DEF_NAME_TAG = "defName"

TRANSLATABLE_TAGS: frozenset[str] = frozenset(
    {
        "label",
        "description",
        "labelShortAdj",
        "jobString",
        "reportString",
        "instruction",
        "helpText",
        "inspectString",
        "rejectInputMessage",
        "menuText",
        "confirmMessage",
        "text",
        "title",
    }
)


def is_flat_dictionary(root: etree._Element) -> bool:
    return local_name(root).lower() == KEYED_ROOT_TAG


def resolve_def_name(definition: etree._Element) -> str:
    def_name_element = find_child(definition, DEF_NAME_TAG)
    if def_name_element is not None:
        value = element_value(def_name_element).strip()
        if value:
            return value
    return local_name(definition)


def build_structural_path(
    tag_name: str,
    def_name: str | None = None,
    ancestors: Sequence[str] = (),
) -> str:
    """
    生成结构路径。

    Args:
        tag_name: 当前元素的标签名。
        def_name: 所属定义的标识；为 None 表示键值文档。
        ancestors: 从定义根（含）到父元素（含）的标签名链；为空表示当前元素就是定义根。

    """
    if def_name is None:
        return tag_name
    if not ancestors:
        return f"{tag_name}[defName={def_name}]"
    head, *rest = ancestors
    return "/".join([f"{head}[defName={def_name}]", *rest, tag_name])


def build_path_key(
    document_key: str,
    tag_name: str,
    def_name: str | None = None,
    ancestors: Sequence[str] = (),
) -> PathKey:
    return PathKey(document_key, build_structural_path(tag_name, def_name, ancestors))


def is_translatable(element: etree._Element) -> bool:
    return local_name(element) in TRANSLATABLE_TAGS and bool(element_value(element).strip())


def walk_flat(root: etree._Element) -> Iterator[tuple[str, etree._Element]]:
    """按文档顺序产出键值文档中文本非空的 (结构路径, 元素)。"""
    for element in child_elements(root):
        if element_value(element).strip():
            yield build_structural_path(local_name(element)), element


def walk_definition(
    definition: etree._Element, def_name: str | None = None
) -> Iterator[tuple[str, etree._Element]]:
    """深度优先遍历一个定义，产出其中可翻译元素的 (结构路径, 元素)。"""
    resolved = def_name if def_name is not None else resolve_def_name(definition)
    yield from _walk(definition, resolved, [])


def _walk(
    element: etree._Element, def_name: str, ancestors: list[str]
) -> Iterator[tuple[str, etree._Element]]:
    tag = local_name(element)
    if is_translatable(element):
        yield build_structural_path(tag, def_name, ancestors), element
    # 可翻译标签同时也可能是容器，继续向下遍历
    ancestors.append(tag)
    try:
        for child in child_elements(element):
            yield from _walk(child, def_name, ancestors)
    finally:
        ancestors.pop()
