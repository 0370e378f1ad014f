# rimtrans/documents/scanner.py
"""负责扫描模组目录，发现 XML 文件并把每个文件加载为 Document 对象。"""

from collections.abc import Iterator
from pathlib import Path

import structlog
from lxml import etree

from rimtrans.documents.extractor import extract_document
from rimtrans.documents.models import Document
from rimtrans.documents.xmlutil import parse_file
from rimtrans.exceptions import DocumentLoadError

log = structlog.get_logger(__name__)


def load_document(path: Path, folder: Path) -> Document:
    """
    解析单个 XML 文件并抽取节点树。

    Raises:
        DocumentLoadError: 文件无法读取、不是合法 XML 或没有根元素。

    """
    try:
        tree = parse_file(path)
    except (OSError, etree.XMLSyntaxError) as e:
        raise DocumentLoadError(str(path), str(e)) from e
    if tree.getroot() is None:
        raise DocumentLoadError(str(path), "文档没有根元素")

    document = Document(
        source_path=path,
        relative_path=path.relative_to(folder),
        tree=tree,
    )
    return extract_document(document)


class ModScanner:
    """模组目录扫描器，递归查找所有 *.xml 文件。"""

    def __init__(self, folder: Path):
        self.folder = folder

    def iter_xml_files(self) -> list[Path]:
        """按路径（不区分大小写）排序，保证文件顺序在不同平台上一致。"""
        return sorted(
            (p for p in self.folder.rglob("*") if p.is_file() and p.suffix.lower() == ".xml"),
            key=lambda p: str(p.relative_to(self.folder)).lower(),
        )

    def scan(self) -> Iterator[Document]:
        """
        逐个加载文件并以迭代器方式返回 Document。

        解析失败的文件会带着 load_error 返回，不会中断其余文件的处理；
        没有任何可翻译内容的文件不会返回。
        """
        log.info("开始扫描模组目录...", folder=str(self.folder))
        if not self.folder.is_dir():
            log.error("模组目录不存在，无法继续扫描。", folder=str(self.folder))
            return

        for path in self.iter_xml_files():
            try:
                document = load_document(path, self.folder)
            except DocumentLoadError as e:
                log.warning("文件解析失败", path=str(path), error=e.reason)
                yield Document(
                    source_path=path,
                    relative_path=path.relative_to(self.folder),
                    load_error=e.reason,
                )
                continue

            if not document.root_nodes:
                log.debug("文件中没有可翻译内容，跳过", path=str(document.relative_path))
                continue
            yield document
