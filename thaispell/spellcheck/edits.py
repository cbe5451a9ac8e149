from typing import Sequence

from .alphabet import THAI_LETTERS


def _splits(word: str) -> list[tuple[str, str]]:
    return [(word[:idx], word[idx:]) for idx in range(len(word) + 1)]


def edits1(word: str, alphabet: Sequence[str] = THAI_LETTERS) -> set[str]:
    """All strings one delete, adjacent transpose, replace or insert away from `word`.

    Edits work on single codepoints: Thai stores vowels, tone marks and signs
    as their own codepoints, so each one can be dropped, swapped or added on
    its own.
    """
    splits = _splits(word)
    deletes = [left + right[1:] for left, right in splits if right]
    transposes = [left + right[1] + right[0] + right[2:] for left, right in splits if len(right) > 1]
    replaces = [left + char + right[1:] for left, right in splits if right for char in alphabet]
    inserts = [left + char + right for left, right in splits for char in alphabet]
    return set(deletes + transposes + replaces + inserts)


def edits2(word: str, alphabet: Sequence[str] = THAI_LETTERS) -> set[str]:
    edits: set[str] = set()
    for edit in edits1(word, alphabet):
        edits.update(edits1(edit, alphabet))
    return edits
