# models to keep data shapes explicit: one forecast day and the three screen states

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union
from .codes import pictogram


@dataclass(frozen=True)
class ForecastDay:
    # immutable value object for a single day, rebuilt on every fetch
    date: str  # YYYY-MM-DD
    weather_code: int
    description: str

    @property
    def pictogram(self) -> str:
        return pictogram(self.description)


# chronological, same order as the provider arrays
ForecastCollection = List[ForecastDay]


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Loaded:
    days: Tuple[ForecastDay, ...] = ()


# exactly one of these at a time, so "loading with an error" cannot be represented
DisplayState = Union[Loading, Failed, Loaded]
