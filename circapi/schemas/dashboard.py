#!/usr/bin/env python3
"""
Dashboard schemas - visualization layouts composed of widgets.

Widget settings are one flat bag shared by every widget type; the comment on
each field lists the widget types that use it.
"""

from typing import ClassVar, FrozenSet, List, Optional, Union

from pydantic import Field, StrictBool

from .base import APIModel

# Wire type of the polymorphic "period" setting:
# numeric for gauges and text widgets, string for graphs.
# StrictBool comes first so a stray JSON boolean is kept rather than read as 1.
Period = Union[StrictBool, int, float, str]


def _names(*names: str) -> FrozenSet[str]:
    return frozenset(names)


class DashboardGridLayout(APIModel):
    height: int = 0
    width: int = 0


class DashboardAccessConfig(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "black_dash", "enabled", "fullscreen", "fullscreen_hide_title",
        "nickname", "scale_text", "shared_id", "text_size",
    )

    black_dash: bool = False
    enabled: bool = False
    fullscreen: bool = False
    fullscreen_hide_title: bool = False
    nickname: str = ""
    scale_text: bool = False
    shared_id: str = ""
    text_size: int = 0


class DashboardOptions(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "access_configs", "fullscreen_hide_title", "hide_grid",
        "linkages", "scale_text", "text_size",
    )

    access_configs: List[DashboardAccessConfig] = Field(default_factory=list)
    fullscreen_hide_title: bool = False
    hide_grid: bool = False
    linkages: List[List[str]] = Field(default_factory=list)  # pairs of linked widget ids
    scale_text: bool = False
    text_size: int = 0


class ChartTextWidgetDatapoint(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "cluster_title", "label2", "numeric_only", "cluster_id", "account_id",
        "label", "metric", "metric_type", "check_id",
    )

    cluster_title: str = Field("", alias="_cluster_title")  # metric cluster
    label2: str = Field("", alias="_label")                 # metric cluster
    numeric_only: bool = False                              # metric cluster
    cluster_id: int = 0                                     # metric cluster
    account_id: str = ""                                    # metric cluster, metric
    label: str = ""                                         # metric
    metric: str = ""                                        # metric
    metric_type: str = Field("", alias="_metric_type")      # metric
    check_id: int = Field(0, alias="_check_id")             # metric


class ChartWidgetDefinitionLegend(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names("show", "type")

    show: bool = False
    type: str = ""


class ChartWidgetWedgeLabels(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names("on_chart", "tooltips")

    on_chart: bool = False
    tooltips: bool = False


class ChartWidgetWedgeValues(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names("angle", "color", "show")

    angle: str = ""
    color: str = ""
    show: bool = False


class ChartWidgetDefinition(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "datasource", "derive", "disable_autoformat", "formula", "period", "pop_onhover",
    )

    datasource: str = ""
    derive: str = ""
    disable_autoformat: bool = False
    formula: str = ""
    legend: Optional[ChartWidgetDefinitionLegend] = None
    period: int = 0
    pop_onhover: bool = False
    wedge_labels: Optional[ChartWidgetWedgeLabels] = None
    wedge_values: Optional[ChartWidgetWedgeValues] = None


class ForecastGaugeWidgetThresholds(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names("colors", "values", "flip")

    colors: List[str] = Field(default_factory=list)  # forecasts, gauges
    values: List[str] = Field(default_factory=list)  # forecasts, gauges
    flip: bool = False                               # gauges


class StatusWidgetAgentStatusSettings(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "search", "show_agent_types", "show_contact", "show_feeds",
        "show_setup", "show_skew", "show_updates",
    )

    search: str = ""
    show_agent_types: str = ""
    show_contact: bool = False
    show_feeds: bool = False
    show_setup: bool = False
    show_skew: bool = False
    show_updates: bool = False


class StatusWidgetHostStatusSettings(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "layout_style", "search", "sort_by", "tag_filter_set",
    )

    layout_style: str = ""
    search: str = ""
    sort_by: str = ""
    tag_filter_set: List[str] = Field(default_factory=list)


class DashboardWidgetSettings(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "account_id", "acknowledged", "algorithm", "autoformat", "body_format",
        "chart_type", "check_uuid", "cleared", "cluster_id", "cluster_name",
        "contact_groups", "content_type", "datapoints", "date_window", "dependents",
        "disable_autoformat", "display", "format", "formula", "graph_uuid",
        "hide_xaxis", "hide_yaxis", "key_inline", "key_loc", "key_size", "key_wrap",
        "label", "layout", "limit", "maintenance", "markup", "metric_display_name",
        "metric_name", "min_age", "off_hours", "overlay_set_id", "range_high",
        "range_low", "realtime", "resource_limit", "resource_usage", "search",
        "severity", "show_flags", "size", "tag_filter_set", "threshold",
        "time_window", "title", "title_format", "trend", "type", "use_default",
        "value_type", "week_days",
    )

    account_id: str = ""                 # alerts, clusters, gauges, graphs, lists, status
    acknowledged: str = ""               # alerts
    agent_status_settings: Optional[StatusWidgetAgentStatusSettings] = None  # status
    algorithm: str = ""                  # clusters
    autoformat: bool = False             # text
    body_format: str = ""                # text
    chart_type: str = ""                 # charts
    check_uuid: str = ""                 # gauges
    cleared: str = ""                    # alerts
    cluster_id: int = 0                  # clusters
    cluster_name: str = ""               # clusters
    contact_groups: List[int] = Field(default_factory=list)  # alerts
    content_type: str = ""               # status
    datapoints: List[ChartTextWidgetDatapoint] = Field(default_factory=list)  # charts, text
    date_window: str = ""                # graphs
    definition: Optional[ChartWidgetDefinition] = None  # charts
    dependents: str = ""                 # alerts
    disable_autoformat: bool = False     # gauges
    display: str = ""                    # alerts
    format: str = ""                     # forecasts
    formula: str = ""                    # gauges
    graph_uuid: str = Field("", alias="graph_id")  # graphs
    hide_xaxis: bool = False             # graphs
    hide_yaxis: bool = False             # graphs
    host_status_settings: Optional[StatusWidgetHostStatusSettings] = None  # status
    key_inline: bool = False             # graphs
    key_loc: str = ""                    # graphs
    key_size: str = ""                   # graphs
    key_wrap: bool = False               # graphs
    label: str = ""                      # graphs
    layout: str = ""                     # clusters
    limit: str = ""                      # lists
    maintenance: str = ""                # alerts
    markup: str = ""                     # html
    metric_display_name: str = ""        # gauges
    metric_name: str = ""                # gauges
    min_age: str = ""                    # alerts
    off_hours: List[int] = Field(default_factory=list)  # alerts
    overlay_set_id: str = ""             # graphs
    period: Optional[Period] = None      # gauges, text (numeric); graphs (string)
    range_high: int = 0                  # gauges
    range_low: int = 0                   # gauges
    realtime: bool = False               # graphs
    resource_limit: str = ""             # forecasts
    resource_usage: str = ""             # forecasts
    search: str = ""                     # alerts, lists
    severity: str = ""                   # alerts
    show_flags: bool = False             # graphs
    size: str = ""                       # clusters
    tag_filter_set: List[str] = Field(default_factory=list)  # alerts
    threshold: float = 0.0               # clusters
    thresholds: Optional[ForecastGaugeWidgetThresholds] = None  # forecasts, gauges
    time_window: str = ""                # alerts
    title: str = ""                      # alerts, charts, forecasts, gauges, html
    title_format: str = ""               # text
    trend: str = ""                      # forecasts
    type: str = ""                       # gauges, lists
    use_default: bool = False            # text
    value_type: str = ""                 # gauges, text
    week_days: List[str] = Field(default_factory=list, alias="weekdays")  # alerts

    @property
    def period_kind(self) -> Optional[str]:
        """'numeric', 'string' or 'boolean' depending on how period arrived; None when unset."""
        if self.period is None:
            return None
        if isinstance(self.period, bool):
            return "boolean"
        if isinstance(self.period, str):
            return "string"
        return "numeric"


class DashboardWidget(APIModel):
    active: bool = False
    height: int = 0
    name: str = ""
    origin: str = ""
    settings: DashboardWidgetSettings = Field(default_factory=DashboardWidgetSettings)
    type: str = ""
    widget_id: str = ""
    width: int = 0


class Dashboard(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = _names(
        "cid", "active", "created", "created_by", "uuid", "last_modified",
    )
    READ_ONLY: ClassVar[FrozenSet[str]] = _names(
        "active", "created", "created_by", "uuid", "last_modified",
    )

    cid: str = Field("", alias="_cid")
    active: bool = Field(False, alias="_active")
    created: int = Field(0, alias="_created")
    created_by: str = Field("", alias="_created_by")
    uuid: str = Field("", alias="_dashboard_uuid")
    last_modified: int = Field(0, alias="_last_modified")
    account_default: bool = False
    grid_layout: DashboardGridLayout = Field(default_factory=DashboardGridLayout)
    options: DashboardOptions = Field(default_factory=DashboardOptions)
    shared: bool = False
    title: str = ""
    widgets: List[DashboardWidget] = Field(default_factory=list)
