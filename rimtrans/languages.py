# rimtrans/languages.py
"""
本模块负责把用户可读的语言名称（如 'Russian'）映射为语言代码。

内置名称表之外的输入交给 `langcodes`：合法的语言代码原样透传，
其余按英文语言名称查找（需要 `language_data` 数据包）。
"""

import re

import structlog
from langcodes import Language
from langcodes.tag_parser import LanguageTagError

log = structlog.get_logger(__name__)

DEFAULT_LANGUAGE_CODE = "en"

# 语言子标签应该由 2-3 个字母组成 (BCP 47)
LANGUAGE_SUBTAG_PATTERN = re.compile(r"^[a-zA-Z]{2,3}$")

# 设置界面中可选的语言，以及游戏语言目录的几个常见别名。
LANGUAGE_NAMES: dict[str, str] = {
    "english": "en",
    "french": "fr",
    "german": "de",
    "spanish": "es",
    "russian": "ru",
    "chinese": "zh",
    "chinesesimplified": "zh",
    "chinesetraditional": "zh",
    "japanese": "ja",
    "korean": "ko",
    "portuguese": "pt",
    "portuguesebrazilian": "pt",
    "italian": "it",
    "dutch": "nl",
    "polish": "pl",
    "czech": "cs",
    "hungarian": "hu",
    "romanian": "ro",
    "bulgarian": "bg",
    "croatian": "hr",
    "slovak": "sk",
    "slovenian": "sl",
    "estonian": "et",
    "latvian": "lv",
    "lithuanian": "lt",
    "finnish": "fi",
    "swedish": "sv",
    "norwegian": "no",
    "danish": "da",
    "ukrainian": "uk",
    "belarusian": "be",
    "turkish": "tr",
    "arabic": "ar",
    "hebrew": "he",
    "hindi": "hi",
    "thai": "th",
    "vietnamese": "vi",
    "indonesian": "id",
    "malay": "ms",
    "tagalog": "tl",
}

SUPPORTED_LANGUAGES: list[str] = [
    "English", "French", "German", "Spanish", "Russian", "Chinese", "Japanese",
    "Korean", "Portuguese", "Italian", "Dutch", "Polish", "Czech", "Hungarian",
    "Romanian", "Bulgarian", "Croatian", "Slovak", "Slovenian", "Estonian",
    "Latvian", "Lithuanian", "Finnish", "Swedish", "Norwegian", "Danish",
    "Ukrainian", "Belarusian", "Turkish", "Arabic", "Hebrew", "Hindi", "Thai",
    "Vietnamese", "Indonesian", "Malay", "Tagalog",
]


def resolve_language_code(language: str | None) -> str:
    """
    将语言名称或语言代码解析为语言代码。

    解析顺序：名称表 -> 合法的 BCP 47 代码 -> langcodes 名称查找 -> 默认 'en'。
    语言有 ISO 639-1 代码时返回两字母代码，否则返回 ISO 639-2/3 的三字母代码（如 'fil'）。
    """
    if not language or not language.strip():
        return DEFAULT_LANGUAGE_CODE

    key = language.strip().replace(" ", "").lower()
    if key in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[key]

    stripped = language.strip()
    try:
        tag = Language.get(stripped)
    except LanguageTagError:
        tag = None
    if tag is not None and tag.is_valid() and _has_language_subtag(tag):
        return tag.language.lower()

    try:
        found = Language.find(stripped)
    except LookupError:
        found = None
    if found is not None and _has_language_subtag(found):
        log.debug("语言名称已通过 langcodes 解析", language=language, code=found.language)
        return found.language.lower()

    log.warning("无法识别的语言，回退到默认语言。", language=language)
    return DEFAULT_LANGUAGE_CODE


def is_known_language(language: str) -> bool:
    """判断语言名称是否在名称表中。"""
    return language.strip().replace(" ", "").lower() in LANGUAGE_NAMES


def _has_language_subtag(tag: Language) -> bool:
    return bool(tag.language and LANGUAGE_SUBTAG_PATTERN.match(tag.language))
