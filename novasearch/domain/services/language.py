"""Script-based language detection for queries"""

import re

_SCRIPT_PATTERNS = (
    ("ar", re.compile(r"[؀-ۿ]")),
    ("ja", re.compile(r"[぀-ゟ゠-ヿ]")),
    ("zh", re.compile(r"[一-鿿]")),
    ("ko", re.compile(r"[가-힯]")),
    ("ru", re.compile(r"[Ѐ-ӿ]")),
    ("he", re.compile(r"[֐-׿]")),
    ("th", re.compile(r"[฀-๿]")),
    ("hi", re.compile(r"[ऀ-ॿ]")),
    ("el", re.compile(r"[Ͱ-Ͽ]")),
)

DEFAULT_LANGUAGE = "en"


def detect_script_language(text: str) -> str:
    """Guess a language code from the first non-Latin script found in ``text``.

    Kana is checked before Han, so Japanese text mixing kana and kanji reports ``ja``.
    """
    for language, pattern in _SCRIPT_PATTERNS:
        if pattern.search(text or ""):
            return language
    return DEFAULT_LANGUAGE
