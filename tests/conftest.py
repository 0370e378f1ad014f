# tests/conftest.py
"""项目全局共享的测试 Fixtures。"""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from tests.helpers.factories import ABOUT_XML, DEFS_XML, KEYED_XML

XmlWriter = Callable[[Path, str], Path]


@pytest.fixture(scope="session", autouse=True)
def disable_rich_colors_for_tests(
    session_mocker: MockerFixture,
) -> Generator[None, None, None]:
    """全局禁用 rich 库的颜色输出，以确保测试结果的确定性。"""
    original_init = Console.__init__

    def new_init(self: Console, *args: Any, **kwargs: Any) -> None:
        kwargs["force_terminal"] = False
        kwargs["color_system"] = None
        original_init(self, *args, **kwargs)

    session_mocker.patch("rich.console.Console.__init__", new=new_init)
    yield


@pytest.fixture
def write_xml() -> XmlWriter:
    """写入一个 XML 文件（自动创建父目录）并返回其路径。"""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def mod_folder(tmp_path: Path, write_xml: XmlWriter) -> Path:
    """一个最小的模组目录：定义文件、键值文件、About.xml 和一个损坏的文件。"""
    folder = tmp_path / "Mods" / "Foo"
    write_xml(folder / "About" / "About.xml", ABOUT_XML)
    write_xml(folder / "Defs" / "ThingDefs" / "Items.xml", DEFS_XML)
    write_xml(folder / "Languages" / "English" / "Keyed" / "Bar.xml", KEYED_XML)
    write_xml(folder / "Defs" / "Broken.xml", "<Defs><ThingDef>")
    return folder
