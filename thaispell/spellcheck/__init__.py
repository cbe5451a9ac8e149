from .alphabet import (
    THAI_LETTERS,
    THAI_WORD_FILTER,
    ThaiWordFilter,
    WordPredicate,
    is_thai_and_not_num,
)
from .dictionary import FilterConfig, FrequencyTable, build_frequency_table
from .edits import edits1, edits2
from .engine import (
    NorvigSpellChecker,
    correct,
    create,
    freq,
    get_default_checker,
    known,
    prob,
    spell,
)
from .timing import LoggingTimingHook, StageTiming, TimingHook

__all__ = [
    "THAI_LETTERS",
    "THAI_WORD_FILTER",
    "FilterConfig",
    "FrequencyTable",
    "LoggingTimingHook",
    "NorvigSpellChecker",
    "StageTiming",
    "ThaiWordFilter",
    "TimingHook",
    "WordPredicate",
    "build_frequency_table",
    "correct",
    "create",
    "edits1",
    "edits2",
    "freq",
    "get_default_checker",
    "is_thai_and_not_num",
    "known",
    "prob",
    "spell",
]
