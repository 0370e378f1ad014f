# tests/unit/documents/test_applier.py
"""测试译文回写到 XML 元素。"""

from lxml import etree

from rimtrans.documents.applier import apply_translations
from rimtrans.documents.extractor import extract_nodes
from rimtrans.documents.models import iter_leaves
from rimtrans.documents.xmlutil import element_value

from tests.helpers.factories import DEFS_XML, KEYED_XML

DOC_KEY = "/mods/Foo/file.xml"


def _extract(source: str, file_name: str = "file.xml"):
    root = etree.fromstring(source.encode("utf-8"))
    nodes, lookup = extract_nodes(root, DOC_KEY, file_name)
    return root, nodes, lookup


def test_submitted_translation_wins_over_draft() -> None:
    root, nodes, _ = _extract(KEYED_XML)
    greeting, farewell = list(iter_leaves(nodes))
    greeting.translation = "черновик"
    greeting.submitted_translation = "Привет"
    farewell.translation = "Пока"

    assert apply_translations(nodes) == 2
    assert root.findtext("Greeting") == "Привет"
    assert root.findtext("Farewell") == "Пока"


def test_untranslated_elements_keep_original_text() -> None:
    root, nodes, _ = _extract(KEYED_XML)
    first = next(iter_leaves(nodes))
    first.translation = "   "

    assert apply_translations(nodes) == 0
    assert root.findtext("Greeting") == "Hello"
    assert root.findtext("Empty") == "   "


def test_groups_never_write() -> None:
    root, nodes, _ = _extract(DEFS_XML, "Items.xml")
    group = nodes[0]
    group.translation = "should not be written"

    apply_translations(nodes)

    assert root.find("ThingDef/label").text == "revolver"


def test_apply_then_extract_round_trip_preserves_keys() -> None:
    root, nodes, lookup = _extract(DEFS_XML, "Items.xml")
    for leaf in iter_leaves(nodes):
        leaf.submit(f"[{leaf.original_text}]")
    apply_translations(nodes)

    reparsed = etree.fromstring(etree.tostring(root))
    new_nodes, new_lookup = extract_nodes(reparsed, DOC_KEY, "Items.xml")

    assert set(new_lookup) == set(lookup)
    assert [leaf.original_text for leaf in iter_leaves(new_nodes)] == [
        "[revolver]",
        "[A simple six-shooter.]",
        "[grip]",
    ]


def test_apply_replaces_mixed_content_and_preserves_comments_elsewhere() -> None:
    root, nodes, _ = _extract(
        "<Defs><!-- keep --><ThingDef><defName>X</defName>"
        "<description>a <b>b</b></description></ThingDef></Defs>"
    )
    next(iter_leaves(nodes)).submit("новый")

    apply_translations(nodes)

    description = root.find("ThingDef/description")
    assert len(description) == 0
    assert element_value(description) == "новый"
    assert b"<!-- keep -->" in etree.tostring(root)
