# wotd/schema.py
from __future__ import annotations

from datetime import date
from typing import Annotated, Dict, List, Literal

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field

NO_DEFINITION = "No definition available."
NO_EXAMPLE = "No example sentence available."

WORDS_PER_DAY = 3


def _calendar_date(value: str) -> str:
    date.fromisoformat(value)  # ValueError becomes a validation error
    return value


DateKey = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$"), AfterValidator(_calendar_date)]


class WordRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word: str
    pronunciation: str = ""
    # older history files stored this as "audio"
    audio_url: str = Field(
        "",
        validation_alias=AliasChoices("audioUrl", "audio"),
        serialization_alias="audioUrl",
    )
    meaning: str = NO_DEFINITION
    example: str = NO_EXAMPLE
    synonyms: List[str] = []
    antonyms: List[str] = []


DayWords = Annotated[List[WordRecord], Field(min_length=WORDS_PER_DAY, max_length=WORDS_PER_DAY)]
History = Dict[DateKey, DayWords]

RunStatus = Literal["exists", "committed", "insufficient", "shortfall"]


class DailyRun(BaseModel):
    date: str
    status: RunStatus
    words: List[WordRecord] = []
