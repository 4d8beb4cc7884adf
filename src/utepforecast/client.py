# OOP boundary for external i/o
# url, query params, transport errors and optional retries live here, the rest stays pure
# one GET per call; nothing is cached

from __future__ import annotations
import logging
import math
import os
from typing import Dict, Any, Optional
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from dotenv import load_dotenv

load_dotenv()  # lets a local .env override the defaults below

logger = logging.getLogger(__name__)

# UTEP campus, El Paso
LATITUDE = 31.77
LONGITUDE = -106.50


class ForecastError(RuntimeError):
    # base type callers catch; subclasses tell the failure kinds apart
    pass


class ForecastHTTPError(ForecastError):
    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class ForecastTransportError(ForecastError):
    pass


class ForecastParseError(ForecastError):
    pass


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ForecastError(f"{name} must be a positive number, got {raw!r}") from None
    if not (math.isfinite(value) and value > 0):
        # urllib3 rejects zero, negative and nan timeouts; inf overflows the socket timeout
        raise ForecastError(f"{name} must be a positive number, got {raw!r}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ForecastError(f"{name} must be a non-negative integer, got {raw!r}") from None
    if value < 0:
        raise ForecastError(f"{name} must be a non-negative integer, got {raw!r}")
    return value


class OpenMeteoClient:
    # this class encapsulates provider details like base URL, query params and retries
    BASE_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        latitude: float = LATITUDE,
        longitude: float = LONGITUDE,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        session: requests.Session | None = None,
        user_agent: str = "utep-forecast/0.1",
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.base_url = base_url or os.getenv("OPEN_METEO_URL") or self.BASE_URL
        # None means the transport default (requests waits indefinitely)
        self.timeout = timeout if timeout is not None else _env_float("FORECAST_TIMEOUT")
        self.user_agent = user_agent

        # no retries unless configured: a failed attempt surfaces right away
        retries = max_retries if max_retries is not None else _env_int("FORECAST_MAX_RETRIES", 0)
        self._retry = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        self._session = session or self._build_session()

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        adapter = HTTPAdapter(max_retries=self._retry)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    @property
    def params(self) -> Dict[str, Any]:
        return {
            "latitude": f"{self.latitude:.2f}",
            "longitude": f"{self.longitude:.2f}",
            "daily": "weather_code",
            "timezone": "auto",
        }

    def get_daily_forecast(self) -> Dict[str, Any]:
        # fetch forecast JSON; shape checks beyond "is a JSON object" belong to the service
        logger.debug("GET %s params=%s", self.base_url, self.params)
        try:
            resp = self._session.get(self.base_url, params=self.params, timeout=self.timeout)
        except (requests.RequestException, ValueError, OverflowError) as exc:
            # ValueError and OverflowError cover timeouts the socket layer refuses
            raise ForecastTransportError(f"Request error for {self.base_url}: {exc}") from exc

        if resp.status_code != 200:
            snippet = (resp.text or "")[:300]
            raise ForecastHTTPError(
                resp.status_code, f"HTTP {resp.status_code} from {self.base_url}. Body: {snippet}"
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise ForecastParseError(f"Invalid JSON from {self.base_url}: {exc}") from exc

        if not isinstance(data, dict):
            raise ForecastParseError(f"Unexpected API shape: top level is {type(data).__name__}")
        return data
