# tests/unit/documents/test_extractor.py
"""测试可翻译节点树的抽取。"""

from lxml import etree

from rimtrans.documents.extractor import KEYED_GROUP_LABEL, extract_nodes
from rimtrans.documents.models import PathKey, iter_leaves

from tests.helpers.factories import DEFS_XML, KEYED_XML

DOC_KEY = "/mods/Foo/file.xml"


def _parse(source: str) -> etree._Element:
    return etree.fromstring(source.encode("utf-8"))


def test_flat_document_produces_single_group_named_after_file() -> None:
    nodes, lookup = extract_nodes(_parse(KEYED_XML), DOC_KEY, "Bar.xml")

    assert len(nodes) == 1
    group = nodes[0]
    assert group.is_group
    assert group.element_name == "Bar.xml"
    assert group.original_text == KEYED_GROUP_LABEL
    assert [leaf.element_name for leaf in group.children] == ["Greeting", "Farewell"]
    assert set(lookup) == {PathKey(DOC_KEY, "Greeting"), PathKey(DOC_KEY, "Farewell")}


def test_flat_document_without_text_yields_no_nodes() -> None:
    nodes, lookup = extract_nodes(
        _parse("<LanguageData><A> </A></LanguageData>"), DOC_KEY, "A.xml"
    )
    assert nodes == []
    assert lookup == {}


def test_definition_document_groups_by_def_name_and_drops_empty_definitions() -> None:
    nodes, lookup = extract_nodes(_parse(DEFS_XML), DOC_KEY, "Items.xml")

    assert [group.def_name for group in nodes] == ["Gun_Revolver"]
    leaves = nodes[0].children
    assert [(leaf.element_name, leaf.original_text) for leaf in leaves] == [
        ("label", "revolver"),
        ("description", "A simple six-shooter."),
        ("label", "grip"),
    ]
    assert PathKey(DOC_KEY, "ThingDef[defName=Gun_Revolver]/tools/li/label") in lookup


def test_leaves_are_bound_and_never_empty() -> None:
    nodes, _ = extract_nodes(_parse(DEFS_XML), DOC_KEY, "Items.xml")
    for leaf in iter_leaves(nodes):
        assert leaf.is_leaf
        assert leaf.children == []
        assert leaf.original_text.strip()


def test_duplicate_keys_keep_first_occurrence() -> None:
    root = _parse(
        "<Defs>"
        "<ThingDef><defName>Dup</defName><label>first</label></ThingDef>"
        "<ThingDef><defName>Dup</defName><label>second</label></ThingDef>"
        "</Defs>"
    )
    nodes, lookup = extract_nodes(root, DOC_KEY, "Dup.xml")

    # 两个定义都出现在树中，但查找表只保留第一个
    assert len(nodes) == 2
    assert len(lookup) == 1
    assert lookup[PathKey(DOC_KEY, "ThingDef[defName=Dup]/label")].original_text == "first"


def test_original_text_concatenates_descendant_text() -> None:
    root = _parse(
        "<Defs><ThingDef><defName>X</defName>"
        "<description>  Line <b>bold</b> end <!-- c --> </description>"
        "</ThingDef></Defs>"
    )
    nodes, _ = extract_nodes(root, DOC_KEY, "X.xml")
    assert nodes[0].children[0].original_text == "Line bold end"
