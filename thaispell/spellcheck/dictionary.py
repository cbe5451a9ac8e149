import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .alphabet import WordPredicate

logger = logging.getLogger(__name__)

SENTENCE_TERMINATOR = "."


@dataclass(frozen=True)
class FilterConfig:
    min_freq: int = 2
    min_len: int = 2
    max_len: int = 40
    predicate: WordPredicate | None = None

    def keep(self, word: str, freq: int) -> bool:
        if freq < self.min_freq:
            return False

        # Length counts codepoints; Thai letters are three UTF-8 bytes each.
        if (
            not word
            or len(word) < self.min_len
            or len(word) > self.max_len
            or word.startswith(SENTENCE_TERMINATOR)
        ):
            return False

        if self.predicate is not None:
            return self.predicate.accepts(word)

        return True


@dataclass(frozen=True)
class FrequencyTable:
    """Filtered word frequencies; read-only once built.

    `total` and `longest` are derived from `words` and cannot be passed in.
    """

    words: Mapping[str, int] = field(default_factory=dict)
    total: int = field(init=False, default=0)
    longest: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        words = MappingProxyType(dict(self.words))
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "total", sum(words.values()))
        object.__setattr__(self, "longest", max((len(word) for word in words), default=0))

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def freq(self, word: str) -> int:
        return self.words.get(word, 0)

    def prob(self, word: str) -> float:
        if self.total <= 0:
            return 0.0
        return self.freq(word) / self.total

    def entries(self) -> list[tuple[str, int]]:
        return list(self.words.items())


def build_frequency_table(
    pairs: Mapping[str, int] | Iterable[tuple[str, int]],
    config: FilterConfig | None = None,
) -> FrequencyTable:
    config = config or FilterConfig()
    items = pairs.items() if isinstance(pairs, Mapping) else pairs

    kept: dict[str, int] = {}
    skipped = 0
    for word, freq in items:
        if config.keep(word, freq):
            kept[word] = freq
        else:
            skipped += 1

    table = FrequencyTable(words=kept)
    logger.debug("built frequency table: kept=%s skipped=%s total=%s", len(table), skipped, table.total)
    return table
