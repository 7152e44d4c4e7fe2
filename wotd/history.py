# wotd/history.py
from __future__ import annotations

from typing import List

from .schema import History, WordRecord
from .store import JsonStore


class DateNotFound(LookupError):
    def __init__(self, date: str):
        super().__init__(date)
        self.date = date


def list_dates(store: JsonStore[History]) -> List[str]:
    return sorted(store.load().keys(), reverse=True)


def get_words(store: JsonStore[History], date: str) -> List[WordRecord]:
    history = store.load()
    if date not in history:
        raise DateNotFound(date)
    return history[date]
