from __future__ import annotations

import os
from dataclasses import dataclass

BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "nwsclient/0.1.0"

# Unit preference values accepted by the forecast endpoints
UNITS_US = 'us'
UNITS_SI = 'si'


@dataclass
class NWSSettings:
    """Configuration for the National Weather Service API client."""
    user_agent: str = DEFAULT_USER_AGENT  # api.weather.gov rejects requests without one
    units: str = UNITS_US  # 'us' or 'si'; other values are passed through to the service
    base_url: str = BASE_URL
    timeout: float = 30.0
    max_retries: int = 0  # transport errors only; 0 means a single attempt

    @staticmethod
    def from_env() -> 'NWSSettings':
        """Create NWS settings from environment variables."""
        user_agent = os.environ.get('NWS_USER_AGENT', DEFAULT_USER_AGENT)
        units = os.environ.get('NWS_UNITS', UNITS_US)
        base_url = os.environ.get('NWS_BASE_URL', BASE_URL)
        try:
            timeout = float(os.environ.get('NWS_TIMEOUT', '30'))
            max_retries = int(os.environ.get('NWS_MAX_RETRIES', '0'))
        except ValueError as e:
            raise ValueError(f"Malformed NWS_TIMEOUT or NWS_MAX_RETRIES: {e}") from e

        return NWSSettings(
            user_agent=user_agent,
            units=units,
            base_url=base_url.rstrip('/'),
            timeout=timeout,
            max_retries=max_retries,
        )
