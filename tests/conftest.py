import pytest

from wotd.schema import WordRecord
from wotd.store import Stores


class FakeLookup:
    """Stands in for DictionaryClient; words in `missing` come back as None."""

    def __init__(self, missing=()):
        self.missing = set(missing)
        self.calls = []

    async def get_word_details(self, word):
        self.calls.append(word)
        if word in self.missing:
            return None
        return WordRecord(word=word, meaning=f"meaning of {word}")


def record(word):
    return {
        "word": word,
        "pronunciation": "",
        "audioUrl": "",
        "meaning": f"meaning of {word}",
        "example": "No example sentence available.",
        "synonyms": [],
        "antonyms": [],
    }


@pytest.fixture
def stores(tmp_path):
    return Stores.at(tmp_path / "wordlist.json", tmp_path / "used_words.json", tmp_path / "history.json")


@pytest.fixture
def lookup():
    return FakeLookup()
