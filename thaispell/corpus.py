import logging
from pathlib import Path
from typing import Iterable

from thaispell.common.config import settings

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
FIELD_SEPARATOR = "\t"


def default_corpus_path() -> Path:
    return Path(settings.corpus_path)


def read_corpus_lines(path: str | Path, comments: bool = False) -> list[str]:
    """Distinct non-blank lines of a UTF-8 corpus file, in file order.

    Text after `#` is dropped unless `comments` is true. A missing or
    unreadable file yields an empty list.
    """
    lines: dict[str, None] = {}
    try:
        with open(path, encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line
                if not comments and COMMENT_MARKER in line:
                    line = line[: line.index(COMMENT_MARKER)]
                line = line.strip()
                if line:
                    lines[line] = None
    except (OSError, UnicodeDecodeError):
        logger.warning("could not read corpus %s; continuing with an empty dictionary", path)
        return []

    return list(lines)


def _parse_line(line: str) -> tuple[str, int] | None:
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < 2:
        return None

    try:
        freq = int(fields[1].strip())
    except ValueError:
        return None
    if freq < 0:
        return None

    return fields[0], freq


def parse_word_freqs(lines: Iterable[str]) -> list[tuple[str, int]]:
    word_freqs: list[tuple[str, int]] = []
    skipped = 0
    for line in lines:
        parsed = _parse_line(line)
        if parsed is None:
            skipped += 1
            continue
        word_freqs.append(parsed)

    if skipped:
        logger.debug("skipped %s malformed corpus lines", skipped)
    return word_freqs


def load_word_freqs(path: str | Path | None = None) -> dict[str, int]:
    corpus_path = path or default_corpus_path()
    word_freqs = dict(parse_word_freqs(read_corpus_lines(corpus_path, comments=False)))
    logger.info("loaded %s corpus words from %s", len(word_freqs), corpus_path)
    return word_freqs
