# rimtrans/documents/xmlutil.py
"""lxml 之上的几个小工具：读取元素文本值、替换元素内容、读写文件。"""

from pathlib import Path

from lxml import etree

# 保留注释与原始空白，保证回写时除被翻译的文本外其余字节结构不变。
_PARSER = etree.XMLParser(remove_blank_text=False, remove_comments=False, resolve_entities=False)


def parse_file(path: Path) -> etree._ElementTree:
    return etree.parse(str(path), _PARSER)


def write_file(tree: etree._ElementTree, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tree.write(str(path), encoding="utf-8", xml_declaration=True)


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def child_elements(element: etree._Element) -> list[etree._Element]:
    """只返回子元素，跳过注释与处理指令。"""
    return list(element.iterchildren(tag=etree.Element))


def element_value(element: etree._Element) -> str:
    """拼接元素及其所有后代元素的文本内容（不含注释）。"""
    parts = [element.text or ""]
    for child in element:
        if isinstance(child.tag, str):
            parts.append(element_value(child))
        parts.append(child.tail or "")
    return "".join(parts)


def set_element_value(element: etree._Element, value: str) -> None:
    """用纯文本替换元素的全部内容，元素自身的 tail 与属性保持不变。"""
    for child in list(element):
        element.remove(child)
    element.text = value


def find_child(element: etree._Element, name: str) -> etree._Element | None:
    for child in child_elements(element):
        if local_name(child) == name:
            return child
    return None
