from __future__ import annotations
from typing import Callable, Dict, List, Any, Optional, TypeVar
import logging
from dataclasses import replace
import httpx
from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type

from .config import NWSSettings
from .models import Forecast, HourlyForecast, Office, Point, Station

T = TypeVar("T")


class NWSError(Exception):
    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class NotFoundError(NWSError):
    """Location or office code the service does not recognise (404, or 400 on a lookup).

    A 400 on a forecast request, such as an unrecognised units value, is an
    NWSError instead.
    """


class NWSClient:
    """
    Client for the National Weather Service API (api.weather.gov).

    The unit preference is held per client ('us' by default) and can be
    overridden on each forecast call.
    """

    def __init__(self, settings: NWSSettings | None = None):
        # copied so set_units() never leaks into settings shared with another client
        self.settings = replace(settings) if settings else NWSSettings()
        headers = {
            'User-Agent': self.settings.user_agent,
            'Accept': 'application/geo+json',
        }
        # points redirect to a rounded form when given more than 4 decimals
        self._client = httpx.Client(timeout=self.settings.timeout, headers=headers, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    def __enter__(self) -> 'NWSClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ---------------- Internal Helpers -----------------
    def _url(self, path_or_url: str) -> str:
        if path_or_url.startswith('http://') or path_or_url.startswith('https://'):
            return path_or_url
        return f"{self.settings.base_url}{path_or_url}"

    def _send(self, url: str, params: Dict[str, Any] | None) -> httpx.Response:
        retrying = Retrying(
            reraise=True,
            stop=stop_after_attempt(self.settings.max_retries + 1),
            wait=wait_exponential(multiplier=0.5, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=lambda state: self._log.warning(
                "Request to %s failed (%s), retrying (attempt %s)",
                url, state.outcome.exception(), state.attempt_number,
            ),
        )
        for attempt in retrying:
            with attempt:
                return self._client.get(url, params=params)

    def _get(self, path_or_url: str, params: Dict[str, Any] | None = None, lookup: bool = True) -> Dict[str, Any]:
        """GET and decode a JSON body.

        lookup marks requests keyed by a location or office code; only those
        turn a 400 into NotFoundError. A 400 on a forecast request means a
        rejected query parameter (e.g. units) and is raised as NWSError.
        """
        url = self._url(path_or_url)
        self._log.debug("GET %s params=%s", url, params)
        resp = self._send(url, params)
        if resp.status_code >= 400:
            detail = self._problem_detail(resp)
            msg = f"Error {resp.status_code} for {url}: {detail or resp.text[:200]}"
            if resp.status_code == 404 or (resp.status_code == 400 and lookup):
                raise NotFoundError(msg, resp.status_code, detail)
            raise NWSError(msg, resp.status_code, detail)
        if not resp.content:
            raise NWSError(f"Empty response body for {url}", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:  # JSON decode error
            raise NWSError(f"Non-JSON response for {url}: {resp.text[:200]}", resp.status_code) from e

    @staticmethod
    def _decode(url: str, build: Callable[[], T]) -> T:
        """Run a model constructor, turning a malformed body into NWSError."""
        try:
            return build()
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise NWSError(f"Unexpected response shape for {url}: {e!r}") from e

    @staticmethod
    def _problem_detail(resp: httpx.Response) -> Optional[str]:
        """Pull 'detail' out of an application/problem+json body, if any."""
        try:
            body = resp.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get('detail') or body.get('title')
        return None

    # ---------------- Units -----------------
    def set_units(self, mode: str) -> None:
        """Set the unit preference for subsequent forecasts ('us' or 'si').

        Unknown values are not rejected here; the service decides.
        """
        self.settings.units = mode

    @property
    def units(self) -> str:
        return self.settings.units

    # ---------------- Endpoints -----------------
    def points(self, lat: str, lon: str) -> Point:
        """Look up forecast metadata for a coordinate pair.

        Blank, zero and non-U.S. coordinates are sent as-is and come back
        from the service as 404, raised here as NotFoundError.
        """
        path = f"/points/{lat},{lon}"
        data = self._get(path)
        return self._decode(path, lambda: Point.from_json(data))

    def forecast(self, lat: str, lon: str, units: str | None = None) -> Forecast:
        """Twelve-hour period forecast for a coordinate pair."""
        units = units or self.settings.units
        point = self.points(lat, lon)
        data = self._get(point.forecast_url, {'units': units}, lookup=False)
        return self._decode(point.forecast_url, lambda: Forecast.from_json(data, units))

    def hourly_forecast(self, lat: str, lon: str, units: str | None = None) -> HourlyForecast:
        units = units or self.settings.units
        point = self.points(lat, lon)
        data = self._get(point.forecast_hourly_url, {'units': units}, lookup=False)
        return self._decode(point.forecast_hourly_url, lambda: HourlyForecast.from_json(data, units))

    def office(self, code: str) -> Office:
        path = f"/offices/{code}"
        data = self._get(path)
        return self._decode(path, lambda: Office.from_json(data))

    def stations(self, lat: str, lon: str) -> List[Station]:
        """Observation stations serving a coordinate pair, nearest first."""
        point = self.points(lat, lon)
        url = point.observation_stations_url or f"/gridpoints/{point.grid_id}/{point.grid_x},{point.grid_y}/stations"
        data = self._get(url)
        return self._decode(url, lambda: Station.list_from_json(data))
