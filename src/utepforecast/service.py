# orchestration and business rules.
# parse_forecast is pure; fetch wires client -> parse; fetch_async runs fetch on a worker thread
# load_display_state is the only place errors are caught and turned into a user message

from __future__ import annotations
import logging
import re
from datetime import date as _date
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union
from .client import OpenMeteoClient, ForecastError, ForecastParseError
from .codes import classify
from .models import ForecastDay, ForecastCollection, Failed, Loaded

logger = logging.getLogger(__name__)

USER_ERROR_MESSAGE = "Failed to load weather data. Please try again later."

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _is_iso_date(value: str) -> bool:
    # the regex pins the layout, fromisoformat rejects impossible days like 2025-02-30
    if not _ISO_DATE.fullmatch(value):
        return False
    try:
        _date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_forecast(data) -> ForecastCollection:
    # open-meteo shape: data["daily"]["time"][i] pairs with data["daily"]["weather_code"][i]
    try:
        daily = data["daily"]
        dates = daily["time"]
        codes = daily["weather_code"]
    except (KeyError, TypeError) as exc:
        raise ForecastParseError("Unexpected API shape: missing daily.time or daily.weather_code") from exc

    if not isinstance(dates, list) or not isinstance(codes, list):
        raise ForecastParseError("Unexpected API shape: daily.time and daily.weather_code must be lists")
    # arrays are positional pairs; a mismatch is an error, never truncated
    if len(dates) != len(codes):
        raise ForecastParseError(
            f"Length mismatch: {len(dates)} dates vs {len(codes)} weather codes"
        )

    days = []
    for date, code in zip(dates, codes):
        if not isinstance(date, str) or not _is_iso_date(date):
            raise ForecastParseError(f"Expected YYYY-MM-DD date string, got {date!r}")
        if isinstance(code, bool) or not isinstance(code, int):
            raise ForecastParseError(f"Expected integer weather code for {date}, got {code!r}")
        days.append(ForecastDay(date=date, weather_code=code, description=classify(code)))
    return days


def fetch(client: Optional[OpenMeteoClient] = None) -> ForecastCollection:
    # single path: request -> parse; any ForecastError propagates to the caller
    client = client or OpenMeteoClient()
    return parse_forecast(client.get_daily_forecast())


def fetch_async(
    client: Optional[OpenMeteoClient] = None,
    executor: Optional[ThreadPoolExecutor] = None,
) -> "Future[ForecastCollection]":
    # one request in flight; the future carries either the days or the ForecastError
    if executor is not None:
        return executor.submit(fetch, client)
    pool = ThreadPoolExecutor(max_workers=1)
    try:
        return pool.submit(fetch, client)
    finally:
        # lets the worker finish the submitted call, then release the thread
        pool.shutdown(wait=False)


def to_display_state(future: "Future[ForecastCollection]") -> Union[Failed, Loaded]:
    # no distinction between error kinds is shown to the user, only logged
    try:
        days = future.result()
    except ForecastError as exc:
        logger.error("Error fetching weather: %s", exc)
        return Failed(USER_ERROR_MESSAGE)
    logger.info("Weather data loaded successfully (%d days)", len(days))
    return Loaded(tuple(days))


def load_display_state(client: Optional[OpenMeteoClient] = None) -> Union[Failed, Loaded]:
    return to_display_state(fetch_async(client))
