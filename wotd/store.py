# wotd/store.py
from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, List, TypeVar

from pydantic import TypeAdapter, ValidationError

from .schema import History

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreError(Exception):
    """An artifact exists but cannot be read as the expected shape."""


class JsonStore(Generic[T]):
    """One JSON document on disk. Callers load, mutate in memory and save the whole value."""

    def __init__(self, path: Path | str, shape: Any, default: Callable[[], T]):
        self.path = Path(path)
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)
        self._default = default

    def load(self) -> T:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return self._default()
        try:
            return self._adapter.validate_json(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise StoreError(f"{self.path}: not valid UTF-8") from e
        except ValidationError as e:
            raise StoreError(f"{self.path}: unexpected content ({e.error_count()} errors)") from e

    def save(self, value: T) -> None:
        data = self._adapter.dump_python(value, mode="json", by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("saved %s", self.path)


@dataclass
class Stores:
    corpus: JsonStore[List[str]]
    ledger: JsonStore[List[str]]
    history: JsonStore[History]

    @classmethod
    def at(cls, wordlist_path: Path | str, used_words_path: Path | str, history_path: Path | str) -> "Stores":
        return cls(
            corpus=JsonStore(wordlist_path, List[str], list),
            ledger=JsonStore(used_words_path, List[str], list),
            history=JsonStore(history_path, History, dict),
        )
