"""API resource schemas - pydantic models mirroring the JSON wire format"""

from .base import APIModel
from .dashboard import (
    ChartTextWidgetDatapoint,
    ChartWidgetDefinition,
    ChartWidgetDefinitionLegend,
    ChartWidgetWedgeLabels,
    ChartWidgetWedgeValues,
    Dashboard,
    DashboardAccessConfig,
    DashboardGridLayout,
    DashboardOptions,
    DashboardWidget,
    DashboardWidgetSettings,
    ForecastGaugeWidgetThresholds,
    Period,
    StatusWidgetAgentStatusSettings,
    StatusWidgetHostStatusSettings,
)
from .metric_cluster import MetricCluster, MetricQuery

__all__ = [
    "APIModel",
    "ChartTextWidgetDatapoint",
    "ChartWidgetDefinition",
    "ChartWidgetDefinitionLegend",
    "ChartWidgetWedgeLabels",
    "ChartWidgetWedgeValues",
    "Dashboard",
    "DashboardAccessConfig",
    "DashboardGridLayout",
    "DashboardOptions",
    "DashboardWidget",
    "DashboardWidgetSettings",
    "ForecastGaugeWidgetThresholds",
    "MetricCluster",
    "MetricQuery",
    "Period",
    "StatusWidgetAgentStatusSettings",
    "StatusWidgetHostStatusSettings",
]
