import logging
from typing import Iterable, Mapping, Sequence

from thaispell.common.config import settings
from thaispell.corpus import load_word_freqs

from .alphabet import THAI_LETTERS, THAI_WORD_FILTER, WordPredicate
from .dictionary import FilterConfig, FrequencyTable, build_frequency_table
from .edits import edits1, edits2
from .timing import LoggingTimingHook, TimingHook, timed_stage

logger = logging.getLogger(__name__)

DEFAULT_MIN_FREQ = 2
DEFAULT_MIN_LEN = 2
DEFAULT_MAX_LEN = 40


def is_number(word: str) -> bool:
    # float() also takes surrounding whitespace and digit-group underscores; literals do not.
    if word != word.strip() or "_" in word:
        return False
    try:
        float(word)
    except ValueError:
        return False
    return True


class NorvigSpellChecker:
    """Frequency-ranked spelling correction over a fixed Thai alphabet.

    Candidates are searched in tiers: the word itself, then every known word
    one edit away, then two edits away. The first tier with any known word
    wins, so suggestions are always at the smallest edit distance that has a
    dictionary match.
    """

    def __init__(
        self,
        table: FrequencyTable,
        *,
        alphabet: Sequence[str] = THAI_LETTERS,
        timing_hook: TimingHook | None = None,
    ) -> None:
        self.table = table
        self.alphabet = tuple(alphabet)
        self.timing_hook = timing_hook

    @classmethod
    def create(
        cls,
        custom_dict: Mapping[str, int] | None = None,
        min_freq: int = DEFAULT_MIN_FREQ,
        min_len: int = DEFAULT_MIN_LEN,
        max_len: int = DEFAULT_MAX_LEN,
        predicate: WordPredicate | None = THAI_WORD_FILTER,
        *,
        alphabet: Sequence[str] = THAI_LETTERS,
        timing_hook: TimingHook | None = None,
    ) -> "NorvigSpellChecker":
        if custom_dict is None:
            custom_dict = load_word_freqs()

        config = FilterConfig(min_freq=min_freq, min_len=min_len, max_len=max_len, predicate=predicate)
        table = build_frequency_table(custom_dict, config)
        logger.info("spell checker ready: words=%s total=%s", len(table), table.total)
        return cls(table, alphabet=alphabet, timing_hook=timing_hook)

    @classmethod
    def default(cls) -> "NorvigSpellChecker":
        return cls.create(
            min_freq=settings.min_freq,
            min_len=settings.min_len,
            max_len=settings.max_len,
            timing_hook=LoggingTimingHook() if settings.timing else None,
        )

    @property
    def total(self) -> int:
        return self.table.total

    def known(self, words: Iterable[str]) -> set[str]:
        return {word for word in words if word in self.table}

    def prob(self, word: str) -> float:
        return self.table.prob(word)

    def freq(self, word: str) -> int:
        return self.table.freq(word)

    def rank(self, candidates: Iterable[str]) -> list[str]:
        # Word order last so equal-frequency candidates rank the same on every run.
        return sorted(candidates, key=lambda word: (-self.freq(word), -self.prob(word), word))

    def spell(self, word: str) -> list[str]:
        with timed_stage(self.timing_hook, "known", word) as stage:
            candidates = self.known([word])
            stage.candidates = len(candidates)
        if candidates:
            return self.rank(candidates)

        # Each edit changes the length by at most one, so a tier can only
        # match when the word is within that many units of the longest entry.
        if len(word) - 1 <= self.table.longest:
            with timed_stage(self.timing_hook, "edits1", word) as stage:
                candidates = self.known(edits1(word, self.alphabet))
                stage.candidates = len(candidates)
            if candidates:
                return self.rank(candidates)

        if len(word) - 2 <= self.table.longest:
            with timed_stage(self.timing_hook, "edits2", word) as stage:
                candidates = self.known(edits2(word, self.alphabet))
                stage.candidates = len(candidates)
            if candidates:
                return self.rank(candidates)

        return [word]

    def correct(self, word: str) -> str:
        if is_number(word):
            return word

        candidates = self.spell(word)
        if candidates:
            return candidates[0]
        return word

    def entries(self) -> list[tuple[str, int]]:
        return self.table.entries()

    def dictionary(self) -> list[tuple[str, int]]:
        return self.entries()


def create(
    custom_dict: Mapping[str, int] | None = None,
    min_freq: int = DEFAULT_MIN_FREQ,
    min_len: int = DEFAULT_MIN_LEN,
    max_len: int = DEFAULT_MAX_LEN,
    predicate: WordPredicate | None = THAI_WORD_FILTER,
    *,
    timing_hook: TimingHook | None = None,
) -> NorvigSpellChecker:
    return NorvigSpellChecker.create(
        custom_dict,
        min_freq,
        min_len,
        max_len,
        predicate,
        timing_hook=timing_hook,
    )


_default_checker: NorvigSpellChecker | None = None


def get_default_checker() -> NorvigSpellChecker:
    global _default_checker
    if _default_checker is None:
        _default_checker = NorvigSpellChecker.default()
    return _default_checker


def known(words: Iterable[str]) -> set[str]:
    return get_default_checker().known(words)


def prob(word: str) -> float:
    return get_default_checker().prob(word)


def freq(word: str) -> int:
    return get_default_checker().freq(word)


def spell(word: str) -> list[str]:
    return get_default_checker().spell(word)


def correct(word: str) -> str:
    return get_default_checker().correct(word)
