# the classifier is pure and total, so it is tested exhaustively over the table

import pytest
from utepforecast.codes import classify, pictogram, UNKNOWN, WEATHER_CODES


@pytest.mark.parametrize(
    "codes, label",
    [
        ((0,), "Clear sky ☀️"),
        ((1, 2, 3), "Partly cloudy ⛅"),
        ((45, 48), "Fog 🌫️"),
        ((51, 53, 55), "Drizzle 🌦️"),
        ((61, 63, 65), "Rain 🌧️"),
        ((71, 73, 75), "Snow ❄️"),
        ((80, 81, 82), "Rain showers 🌦️"),
        ((95, 96, 99), "Thunderstorm ⛈️"),
    ],
)
def test_known_codes(codes, label):
    for code in codes:
        assert classify(code) == label


def test_table_has_only_documented_codes():
    assert sorted(WEATHER_CODES) == [
        0, 1, 2, 3, 45, 48, 51, 53, 55, 61, 63, 65, 71, 73, 75, 80, 81, 82, 95, 96, 99,
    ]


@pytest.mark.parametrize("code", [999, -1, 4, 56, 77, 86, 100])
def test_unknown_codes_fall_back(code):
    assert classify(code) == "Unknown weather ❓"


@pytest.mark.parametrize("value", [None, "61", 61.5, True, False, [61]])
def test_non_integers_never_raise(value):
    assert classify(value) == UNKNOWN


def test_pictogram_is_last_word():
    assert pictogram("Rain showers 🌦️") == "🌦️"
    assert pictogram(classify(0)) == "☀️"
    assert pictogram("") == ""
