from types import MappingProxyType

import pytest

from thaispell.spellcheck.alphabet import THAI_WORD_FILTER, is_thai_and_not_num
from thaispell.spellcheck.dictionary import FilterConfig, FrequencyTable, build_frequency_table


def test_filter_measures_length_in_codepoints() -> None:
    config = FilterConfig(min_freq=1, min_len=2, max_len=3)

    # "คำ" is two codepoints but six UTF-8 bytes.
    assert config.keep("คำ", 5)
    assert not config.keep("ก", 5)
    assert not config.keep("ภาษา", 5)


def test_filter_rejects_low_frequency_empty_and_dotted_words() -> None:
    config = FilterConfig(min_freq=2, min_len=1, max_len=40)

    assert not config.keep("ภาษา", 1)
    assert not config.keep("", 10)
    assert not config.keep(".ภาษา", 10)
    assert config.keep("ภาษา", 2)


def test_filter_applies_predicate() -> None:
    config = FilterConfig(min_freq=1, predicate=THAI_WORD_FILTER)

    assert config.keep("ฯลฯ", 3)
    assert config.keep("พ.ศ.", 3)
    assert not config.keep("ทด๑", 3)
    assert not config.keep("ok", 3)


def test_build_frequency_table_from_mapping_and_pairs() -> None:
    config = FilterConfig(min_freq=2)

    from_mapping = build_frequency_table({"ภาษา": 3, "คำ": 1, "ประโยค": 7}, config)
    from_pairs = build_frequency_table([("ภาษา", 3), ("คำ", 1), ("ประโยค", 7)], config)

    assert dict(from_mapping.words) == dict(from_pairs.words) == {"ภาษา": 3, "ประโยค": 7}
    assert from_mapping.total == 10


def test_frequency_table_is_read_only() -> None:
    table = build_frequency_table({"ภาษา": 3})

    assert isinstance(table.words, MappingProxyType)
    with pytest.raises(TypeError):
        table.words["คำ"] = 4  # type: ignore[index]


def test_empty_table_probability_is_zero() -> None:
    table = FrequencyTable()

    assert len(table) == 0
    assert table.total == 0
    assert table.prob("ภาษา") == 0.0
    assert table.entries() == []


def test_is_thai_and_not_num() -> None:
    assert is_thai_and_not_num("เหตุการณ์")
    assert is_thai_and_not_num("")
    assert not is_thai_and_not_num("ปี2550")
    assert not is_thai_and_not_num("ปี๒๕๕๐")
    assert not is_thai_and_not_num("thai")


def test_frequency_table_derives_total_and_longest() -> None:
    source = {"ภาษา": 3, "ประโยค": 7}
    table = FrequencyTable(words=source)
    source["คำ"] = 100

    assert table.total == 10
    assert table.longest == 6
    assert "คำ" not in table
    assert isinstance(table.words, MappingProxyType)
    with pytest.raises(TypeError):
        FrequencyTable(words={"ภาษา": 3}, total=99)  # type: ignore[call-arg]
