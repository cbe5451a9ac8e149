from typing import Protocol

THAI_CONSONANTS = "กขฃคฅฆงจฉชซฌญฎฏฐฑฒณดตถทธนบปผฝพฟภมยรลวศษสหฬอฮ"
THAI_VOWELS = (
    "\u0e24\u0e26\u0e30\u0e31\u0e32\u0e33\u0e34\u0e35\u0e36\u0e37"
    "\u0e38\u0e39\u0e40\u0e41\u0e42\u0e43\u0e44\u0e45\u0e4d\u0e47"
)
THAI_TONEMARKS = "\u0e48\u0e49\u0e4a\u0e4b"
THAI_SIGNS = "\u0e2f\u0e3a\u0e46\u0e4c\u0e4d\u0e4e"
THAI_DIGITS = "๐๑๒๓๔๕๖๗๘๙"
DIGITS = "0123456789"

# NIKHAHIT (U+0E4D) is listed both as a vowel and as a sign; keep its first position.
THAI_LETTERS: tuple[str, ...] = tuple(
    dict.fromkeys(THAI_CONSONANTS + THAI_VOWELS + THAI_TONEMARKS + THAI_SIGNS)
)

_THAI_LETTER_SET = frozenset(THAI_LETTERS)
_THAI_DIGIT_SET = frozenset(THAI_DIGITS)
_DIGIT_SET = frozenset(DIGITS)


def is_thai_char(char: str) -> bool:
    return char in _THAI_LETTER_SET


def is_thai_digit(char: str) -> bool:
    return char in _THAI_DIGIT_SET


def is_digit(char: str) -> bool:
    return char in _DIGIT_SET


def is_thai_and_not_num(word: str) -> bool:
    """True when every codepoint is a Thai letter (or '.') and none is a numeral."""
    for char in word:
        if char != "." and not is_thai_char(char):
            return False
        if is_thai_digit(char) or is_digit(char):
            return False
    return True


class WordPredicate(Protocol):
    def accepts(self, word: str) -> bool:
        ...


class ThaiWordFilter:
    def accepts(self, word: str) -> bool:
        return is_thai_and_not_num(word)


THAI_WORD_FILTER = ThaiWordFilter()
