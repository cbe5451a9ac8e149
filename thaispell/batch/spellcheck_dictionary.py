import logging
from pathlib import Path

from thaispell.common.config import settings
from thaispell.corpus import default_corpus_path, load_word_freqs
from thaispell.spellcheck.alphabet import THAI_WORD_FILTER
from thaispell.spellcheck.dictionary import FilterConfig, FrequencyTable, build_frequency_table

logger = logging.getLogger(__name__)


def _default_filter() -> FilterConfig:
    return FilterConfig(
        min_freq=settings.min_freq,
        min_len=settings.min_len,
        max_len=settings.max_len,
        predicate=THAI_WORD_FILTER,
    )


def _write_dictionary_file(table: FrequencyTable, path: Path) -> None:
    rows = sorted(table.entries(), key=lambda row: (-row[1], row[0]))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{word}\t{freq}\n" for word, freq in rows), encoding="utf-8")


def run(
    corpus_path: str | Path | None = None,
    export_path: str | Path | None = None,
    config: FilterConfig | None = None,
) -> FrequencyTable:
    corpus_path = Path(corpus_path or default_corpus_path())
    export_path = Path(export_path or settings.export_path)

    table = build_frequency_table(load_word_freqs(corpus_path), config or _default_filter())
    if not len(table):
        logger.warning("spellcheck dictionary export skipped: no words survived filtering of %s", corpus_path)
        return table

    try:
        _write_dictionary_file(table, export_path)
    except OSError:
        logger.exception("failed to write spellcheck dictionary to %s", export_path)
        return table

    logger.info(
        "exported spellcheck dictionary: words=%s total=%s path=%s",
        len(table),
        table.total,
        export_path,
    )
    return table


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
