# rimtrans/documents/applier.py
"""负责把节点树中的译文写回各叶子绑定的 XML 元素。"""

from collections.abc import Iterable

from rimtrans.documents.models import TranslationNode
from rimtrans.documents.xmlutil import set_element_value


def apply_translations(nodes: Iterable[TranslationNode]) -> int:
    """
    就地覆盖每个有效译文非空的叶子所绑定元素的文本。

    分组节点只递归、从不写入；没有有效译文的元素保持原文不变。

    Returns:
        实际写入的元素数量。

    """
    written = 0
    for node in nodes:
        if node.children:
            written += apply_translations(node.children)
            continue
        if node.element is None:
            continue
        value = node.effective_translation
        if value is not None:
            set_element_value(node.element, value)
            written += 1
    return written
