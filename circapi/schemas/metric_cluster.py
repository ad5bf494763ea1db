"""Metric cluster schemas - named, tagged groups of metric queries."""

from typing import ClassVar, Dict, FrozenSet, List

from pydantic import Field

from .base import APIModel


class MetricQuery(APIModel):
    query: str = ""   # metric name pattern, e.g. "*Req*"
    type: str = ""    # aggregation: average, sum, ...


class MetricCluster(APIModel):
    OMIT_EMPTY: ClassVar[FrozenSet[str]] = frozenset(
        {"cid", "matching_metrics", "matching_uuid_metrics"}
    )
    READ_ONLY: ClassVar[FrozenSet[str]] = frozenset(
        {"matching_metrics", "matching_uuid_metrics"}
    )

    cid: str = Field("", alias="_cid")
    matching_metrics: List[str] = Field(default_factory=list, alias="_matching_metrics")
    matching_uuid_metrics: Dict[str, List[str]] = Field(
        default_factory=dict, alias="_matching_uuid_metrics"
    )
    description: str = ""
    name: str = ""
    queries: List[MetricQuery] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
