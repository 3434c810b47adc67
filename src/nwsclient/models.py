"""Immutable result types for api.weather.gov responses.

Each type is built from the decoded JSON body of one response via its
``from_json`` constructor. Fields the service omits are left as ``None``
rather than raising, since the API drops keys freely between releases.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


def _value(quantity: Dict[str, Any] | None) -> Optional[float]:
    """Unwrap a QuantitativeValue ({'unitCode': ..., 'value': ...})."""
    if not quantity:
        return None
    return quantity.get('value')


def _required(props: Dict[str, Any], key: str) -> Any:
    # present-but-null counts as missing
    value = props[key]
    if value is None:
        raise KeyError(key)
    return value


def _last_segment(url: str | None) -> Optional[str]:
    # e.g. https://api.weather.gov/zones/forecast/AKZ222 -> AKZ222
    if not url:
        return None
    return url.rstrip('/').rsplit('/', 1)[-1]


@dataclass(frozen=True)
class Point:
    """Forecast metadata for a geocoded location."""
    cwa: str  # forecast office code, e.g. 'LOT'
    grid_id: str
    grid_x: int
    grid_y: int
    forecast_url: str
    forecast_hourly_url: str
    forecast_grid_data_url: Optional[str] = None
    observation_stations_url: Optional[str] = None
    forecast_office_url: Optional[str] = None
    forecast_zone_url: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    time_zone: Optional[str] = None
    radar_station: Optional[str] = None

    @property
    def forecast_zone(self) -> Optional[str]:
        return _last_segment(self.forecast_zone_url)

    @staticmethod
    def from_json(data: Dict[str, Any]) -> 'Point':
        props = data['properties']
        relative = (props.get('relativeLocation') or {}).get('properties') or {}
        return Point(
            cwa=props['cwa'],
            grid_id=props['gridId'],
            grid_x=int(props['gridX']),
            grid_y=int(props['gridY']),
            forecast_url=_required(props, 'forecast'),
            forecast_hourly_url=_required(props, 'forecastHourly'),
            forecast_grid_data_url=props.get('forecastGridData'),
            observation_stations_url=props.get('observationStations'),
            forecast_office_url=props.get('forecastOffice'),
            forecast_zone_url=props.get('forecastZone'),
            city=relative.get('city'),
            state=relative.get('state'),
            time_zone=props.get('timeZone'),
            radar_station=props.get('radarStation'),
        )


@dataclass(frozen=True)
class Period:
    number: int
    name: str
    start_time: str
    end_time: str
    is_daytime: bool
    temperature: Optional[float]
    temperature_unit: str
    wind_speed: str
    wind_direction: str
    short_forecast: str
    detailed_forecast: str = ''
    temperature_trend: Optional[str] = None
    probability_of_precipitation: Optional[float] = None
    dewpoint: Optional[float] = None  # hourly only
    relative_humidity: Optional[float] = None  # hourly only
    icon: Optional[str] = None

    @staticmethod
    def from_json(p: Dict[str, Any]) -> 'Period':
        temperature = p.get('temperature')
        # si responses may wrap temperature in a QuantitativeValue
        if isinstance(temperature, dict):
            temperature = _value(temperature)
        return Period(
            number=int(p.get('number', 0)),
            name=p.get('name') or '',
            start_time=p.get('startTime', ''),
            end_time=p.get('endTime', ''),
            is_daytime=bool(p.get('isDaytime', False)),
            temperature=temperature,
            temperature_unit=p.get('temperatureUnit') or '',
            wind_speed=p.get('windSpeed') or '',
            wind_direction=p.get('windDirection') or '',
            short_forecast=p.get('shortForecast') or '',
            detailed_forecast=p.get('detailedForecast') or '',
            temperature_trend=p.get('temperatureTrend'),
            probability_of_precipitation=_value(p.get('probabilityOfPrecipitation')),
            dewpoint=_value(p.get('dewpoint')),
            relative_humidity=_value(p.get('relativeHumidity')),
            icon=p.get('icon'),
        )


@dataclass(frozen=True)
class Forecast:
    """Ordered forecast periods tagged with the units they were requested in."""
    units: str
    periods: Tuple[Period, ...]
    updated: Optional[str] = None
    generated_at: Optional[str] = None
    update_time: Optional[str] = None
    elevation: Optional[float] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], units: str):
        # units is the preference the request was made with, not the echoed value
        props = data['properties']
        return cls(
            units=units,
            periods=tuple(Period.from_json(p) for p in props.get('periods', [])),
            updated=props.get('updated'),
            generated_at=props.get('generatedAt'),
            update_time=props.get('updateTime'),
            elevation=_value(props.get('elevation')),
        )


@dataclass(frozen=True)
class HourlyForecast(Forecast):
    pass


@dataclass(frozen=True)
class Address:
    street: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class Office:
    """Static metadata for a forecast office."""
    id: str
    name: str
    address: Address
    telephone: Optional[str] = None
    fax_number: Optional[str] = None
    email: Optional[str] = None
    nws_region: Optional[str] = None
    parent_organization: Optional[str] = None
    responsible_counties: Tuple[str, ...] = ()
    responsible_forecast_zones: Tuple[str, ...] = ()
    responsible_fire_zones: Tuple[str, ...] = ()
    approved_observation_stations: Tuple[str, ...] = ()

    @staticmethod
    def from_json(data: Dict[str, Any]) -> 'Office':
        addr = data.get('address') or {}

        def ids(key: str) -> Tuple[str, ...]:
            return tuple(_last_segment(u) for u in data.get(key, []) if u)

        return Office(
            id=data['id'],
            name=data['name'],
            address=Address(
                street=addr.get('streetAddress'),
                locality=addr.get('addressLocality'),
                region=addr.get('addressRegion'),
                postal_code=addr.get('postalCode'),
            ),
            telephone=data.get('telephone'),
            fax_number=data.get('faxNumber'),
            email=data.get('email'),
            nws_region=data.get('nwsRegion'),
            parent_organization=_last_segment(data.get('parentOrganization')),
            responsible_counties=ids('responsibleCounties'),
            responsible_forecast_zones=ids('responsibleForecastZones'),
            responsible_fire_zones=ids('responsibleFireZones'),
            approved_observation_stations=ids('approvedObservationStations'),
        )


@dataclass(frozen=True)
class Station:
    """Observation station near a point."""
    identifier: str
    name: str
    time_zone: Optional[str] = None
    elevation: Optional[float] = None  # metres
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @staticmethod
    def from_feature(feature: Dict[str, Any]) -> 'Station':
        props = feature['properties']
        coords = (feature.get('geometry') or {}).get('coordinates') or [None, None]
        # GeoJSON order is lon, lat
        return Station(
            identifier=props['stationIdentifier'],
            name=props.get('name', ''),
            time_zone=props.get('timeZone'),
            elevation=_value(props.get('elevation')),
            latitude=coords[1],
            longitude=coords[0],
        )

    @staticmethod
    def list_from_json(data: Dict[str, Any]) -> List['Station']:
        return [Station.from_feature(f) for f in data.get('features', [])]
