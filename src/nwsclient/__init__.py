"""
National Weather Service (api.weather.gov) client.
Provides typed access to point metadata, forecasts, hourly forecasts,
forecast offices and observation stations.
"""

__all__ = [
    'NWSClient', 'NWSError', 'NotFoundError', 'NWSSettings',
    'Point', 'Period', 'Forecast', 'HourlyForecast', 'Office', 'Address', 'Station',
    'periods_frame', 'UNITS_US', 'UNITS_SI',
]

from .client import NWSClient, NWSError, NotFoundError
from .config import NWSSettings, UNITS_US, UNITS_SI
from .models import Address, Forecast, HourlyForecast, Office, Period, Point, Station
from .frame import periods_frame
