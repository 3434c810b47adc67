from __future__ import annotations
import pandas as pd

from .models import Forecast

COLUMNS = [
    'number', 'name', 'start_time', 'end_time', 'is_daytime', 'temperature',
    'temperature_unit', 'probability_of_precipitation', 'dewpoint', 'relative_humidity',
    'wind_speed', 'wind_direction', 'short_forecast',
]


def periods_frame(forecast: Forecast) -> pd.DataFrame:
    """Return forecast periods as a DataFrame ordered by start_time.

    start_time/end_time are parsed to UTC (NWS times carry the office's local
    offset, e.g. 2026-02-11T06:00:00-05:00). A 'units' column records the
    unit preference the forecast was requested with.
    """
    if not forecast.periods:
        return pd.DataFrame(columns=COLUMNS + ['units'])
    df = pd.DataFrame([{c: getattr(p, c) for c in COLUMNS} for p in forecast.periods])
    df['start_time'] = pd.to_datetime(df['start_time'], utc=True)
    df['end_time'] = pd.to_datetime(df['end_time'], utc=True)
    df['units'] = forecast.units
    return df.sort_values('start_time').reset_index(drop=True)
