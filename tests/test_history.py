import pytest

from wotd.history import DateNotFound, get_words, list_dates
from wotd.schema import WordRecord


def day(*words):
    return [WordRecord(word=w) for w in words]


def test_list_dates_newest_first(stores):
    stores.history.save({"2024-01-01": day("a1", "a2", "a3"), "2024-01-02": day("b1", "b2", "b3")})
    assert list_dates(stores.history) == ["2024-01-02", "2024-01-01"]


def test_list_dates_empty(stores):
    assert list_dates(stores.history) == []


def test_get_words_for_date(stores):
    stores.history.save({"2024-01-01": day("a1", "a2", "a3")})
    assert [r.word for r in get_words(stores.history, "2024-01-01")] == ["a1", "a2", "a3"]


def test_missing_date_is_not_found(stores):
    stores.history.save({"2024-01-01": day("a1", "a2", "a3")})
    with pytest.raises(DateNotFound) as exc:
        get_words(stores.history, "2099-01-01")
    assert exc.value.date == "2099-01-01"
