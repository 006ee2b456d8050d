"""HTTP API over a session dataset snapshot."""

from .rest import SkiWeatherAPI

__all__ = [
    "SkiWeatherAPI",
]
