# maps Open-Meteo (WMO) weather codes to a short label with a trailing pictogram
# pure and total: every input gets a label, nothing raises

from __future__ import annotations
from typing import Dict, Tuple

UNKNOWN = "Unknown weather ❓"

# several codes share one label (intensity variants are collapsed)
_GROUPS: Tuple[Tuple[Tuple[int, ...], str], ...] = (
    ((0,), "Clear sky ☀️"),
    ((1, 2, 3), "Partly cloudy ⛅"),
    ((45, 48), "Fog 🌫️"),
    ((51, 53, 55), "Drizzle 🌦️"),
    ((61, 63, 65), "Rain 🌧️"),
    ((71, 73, 75), "Snow ❄️"),
    ((80, 81, 82), "Rain showers 🌦️"),
    ((95, 96, 99), "Thunderstorm ⛈️"),
)

WEATHER_CODES: Dict[int, str] = {code: label for codes, label in _GROUPS for code in codes}


def classify(code) -> str:
    # bool is an int subclass, but True is not weather code 1
    if isinstance(code, bool) or not isinstance(code, int):
        return UNKNOWN
    return WEATHER_CODES.get(code, UNKNOWN)


def pictogram(description: str) -> str:
    # the glyph is always the last word of a label
    parts = description.split()
    return parts[-1] if parts else ""
