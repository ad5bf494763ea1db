"""
circapi - typed client for the monitoring API (dashboards and metric clusters)
"""

from .api import API
from .config import APIConfig, configure_logging
from .errors import (
    APIError,
    ConfigError,
    DeserializationError,
    InvalidCIDError,
    InvalidConfigError,
    SerializationError,
    TransportError,
)
from .http_client import APIHttpClient
from .schemas import Dashboard, DashboardWidget, DashboardWidgetSettings, MetricCluster, MetricQuery
from .tools import track_http_latency

__version__ = "0.1.0"

__all__ = [
    "API",
    "APIConfig",
    "APIError",
    "APIHttpClient",
    "ConfigError",
    "Dashboard",
    "DashboardWidget",
    "DashboardWidgetSettings",
    "DeserializationError",
    "InvalidCIDError",
    "InvalidConfigError",
    "MetricCluster",
    "MetricQuery",
    "SerializationError",
    "TransportError",
    "configure_logging",
    "track_http_latency",
]
