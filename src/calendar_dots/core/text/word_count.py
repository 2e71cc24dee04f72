"""Language-agnostic word counting."""

import re

# Scripts written without spaces between words: every character counts as a word.
_NON_SPACE_DELIMITED = (
    "ぁ-ゖ"  # hiragana
    "ァ-ヺ"  # katakana
    "ㄅ-ㄯ"  # bopomofo
    "㐀-䶿"  # CJK extension A
    "一-鿿"  # CJK unified ideographs
)

# Combining marks (vowel signs, viramas, diacritics) continue the current word.
_COMBINING_MARKS = (
    r"\u0300-\u036f"  # combining diacritical marks
    r"\u0483-\u0489"  # cyrillic
    r"\u0591-\u05bd\u05bf\u05c1\u05c2\u05c4\u05c5\u05c7"  # hebrew points
    r"\u0610-\u061a\u064b-\u065f\u0670"  # arabic
    r"\u06d6-\u06dc\u06df-\u06e4\u06e7\u06e8\u06ea-\u06ed"
    r"\u0900-\u0903\u093a-\u094f\u0951-\u0957\u0962\u0963"  # devanagari
    r"\u0981-\u0983\u09bc-\u09d7\u09e2\u09e3"  # bengali
    r"\u0a01-\u0a03\u0a3c-\u0a51\u0a70\u0a71\u0a75"  # gurmukhi
    r"\u0a81-\u0a83\u0abc-\u0acd\u0ae2\u0ae3"  # gujarati
    r"\u0b01-\u0b03\u0b3c-\u0b57\u0b62\u0b63"  # oriya
    r"\u0b82\u0bbe-\u0bd7"  # tamil
    r"\u0c00-\u0c04\u0c3c-\u0c56\u0c62\u0c63"  # telugu
    r"\u0c81-\u0c83\u0cbc-\u0cd6\u0ce2\u0ce3"  # kannada
    r"\u0d00-\u0d03\u0d3b-\u0d57\u0d62\u0d63"  # malayalam
    r"\u0d81-\u0d83\u0dca-\u0df3"  # sinhala
    r"\u0e31\u0e34-\u0e3a\u0e47-\u0e4e"  # thai
    r"\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"  # combining supplements
)

_LETTERS = rf"(?:[^\W\d_{_NON_SPACE_DELIMITED}]|[{_COMBINING_MARKS}])+"
_NUMBER = r"\d+(?:[.,]\d+)*"
_WORD_PART = rf"(?:{_NUMBER}|{_LETTERS})+"

_WORD_PATTERN = re.compile(
    rf"{_WORD_PART}(?:['’\-]{_WORD_PART})*|[{_NON_SPACE_DELIMITED}]"
)


def get_word_count(text: str) -> int:
    """Count words in natural-language text.

    Space-delimited words are runs of letters, combining marks and digits,
    optionally joined by apostrophes or hyphens ("don't", "well-known");
    numbers may carry decimal or thousands separators. Each CJK ideograph,
    kana or bopomofo character is one word. Punctuation on its own (list
    bullets, ``#``, ``**``) is not a word.
    """
    return sum(1 for _ in _WORD_PATTERN.finditer(text))
