# tests/unit/documents/test_session.py
"""测试模组目录会话：扫描、逐文件错误隔离与既有译文加载。"""

from pathlib import Path

from rimtrans.documents.models import iter_leaves
from rimtrans.documents.scanner import ModScanner
from rimtrans.documents.session import TranslationSession, translated_folder_for

from tests.helpers.factories import KEYED_XML


def test_scan_orders_files_and_isolates_parse_failures(mod_folder: Path) -> None:
    session = TranslationSession()
    documents = session.load_folder(mod_folder)

    assert [d.relative_path.as_posix() for d in documents] == [
        "About/About.xml",
        "Defs/Broken.xml",
        "Defs/ThingDefs/Items.xml",
        "Languages/English/Keyed/Bar.xml",
    ]
    assert [d.relative_path.name for d in session.failed_documents] == ["Broken.xml"]
    assert session.failed_documents[0].load_error
    assert len(session.loaded_documents) == 3
    assert session.total_count == 6
    assert session.translated_count == 0


def test_files_without_translatable_content_are_not_exposed(
    tmp_path: Path, write_xml
) -> None:
    write_xml(tmp_path / "Defs" / "Stats.xml", "<Defs><StatDef><defName>S</defName></StatDef></Defs>")
    assert list(ModScanner(tmp_path).scan()) == []


def test_scan_missing_folder_yields_nothing(tmp_path: Path) -> None:
    assert list(ModScanner(tmp_path / "nope").scan()) == []


def test_translated_folder_for() -> None:
    assert translated_folder_for(Path("/mods/Foo"), "Russian") == Path("/mods/Foo (Russian)")
    # 已经是译文目录时不再追加后缀
    assert translated_folder_for(Path("/mods/Foo (Russian)"), "russian") == Path(
        "/mods/Foo (Russian)"
    )


def test_load_existing_translations_overlays_prior_work(
    mod_folder: Path, write_xml
) -> None:
    translated = mod_folder.with_name("Foo (Russian)")
    write_xml(
        translated / "Languages" / "Russian" / "Keyed" / "Russian.xml",
        KEYED_XML.replace(">Hello<", ">Привет<").replace(">Bye<", ">Пока<"),
    )
    session = TranslationSession()
    session.load_folder(mod_folder)

    assert session.load_existing_translations("Russian") == 2
    assert session.translated_count == 2
    keyed = session.find_document("Languages/English/Keyed/Bar.xml")
    assert keyed is not None
    assert [leaf.submitted_translation for leaf in iter_leaves(keyed.root_nodes)] == [
        "Привет",
        "Пока",
    ]


def test_load_existing_translations_without_translated_folder(mod_folder: Path) -> None:
    session = TranslationSession()
    session.load_folder(mod_folder)
    assert session.load_existing_translations("German") == 0


def test_reloading_discards_previous_session(mod_folder: Path, tmp_path: Path) -> None:
    session = TranslationSession()
    session.load_folder(mod_folder)
    empty = tmp_path / "Empty"
    empty.mkdir()

    session.load_folder(empty)

    assert session.documents == []
    assert session.folder == empty.resolve()
