"""Services subpackage.

Holds the in-memory reading store, the startup seed, and the upstream
weather provider client.
"""

from .provider import OpenWeatherClient, ProviderError, WeatherProvider
from .store import WeatherStore

__all__ = ["OpenWeatherClient", "ProviderError", "WeatherProvider", "WeatherStore"]
