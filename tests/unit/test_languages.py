# tests/unit/test_languages.py
"""测试语言名称到 ISO 代码的映射。"""

import pytest

from rimtrans.languages import (
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    is_known_language,
    resolve_language_code,
)


@pytest.mark.parametrize(
    ("language", "expected"),
    [
        ("Russian", "ru"),
        ("  german ", "de"),
        ("Chinese Simplified", "zh"),
        ("PortugueseBrazilian", "pt"),
        ("ja", "ja"),
        ("pt-BR", "pt"),
        ("fil", "fil"),
    ],
)
def test_resolve_language_code(language: str, expected: str) -> None:
    assert resolve_language_code(language) == expected


@pytest.mark.parametrize("language", ["", "   ", None, "Notalanguage"])
def test_unknown_languages_fall_back_to_english(language) -> None:
    assert resolve_language_code(language) == "en"


def test_every_supported_language_has_a_code() -> None:
    assert len(SUPPORTED_LANGUAGES) == 37
    for name in SUPPORTED_LANGUAGES:
        assert name.lower() in LANGUAGE_NAMES
        assert is_known_language(name)


@pytest.mark.parametrize(
    ("language", "expected"),
    [("Greek", "el"), ("Persian", "fa"), ("Catalan", "ca"), ("Icelandic", "is")],
)
def test_names_outside_the_table_are_resolved_by_langcodes(
    language: str, expected: str
) -> None:
    assert not is_known_language(language)
    assert resolve_language_code(language) == expected
