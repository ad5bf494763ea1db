#!/usr/bin/env python3
"""
circapi API handle

    api = API(APIConfig(token_key="..."))
    dash = api.fetch_dashboard("/dashboard/1234")
    clusters = api.search_metric_clusters("web servers", {"f_tags_has": ["dc:sfo1"]})

The handle owns one HTTP client and exposes each collection both as a
resource object (api.dashboards, api.metric_clusters) and as flat methods.
"""

import logging
from typing import List, Optional

from .config import APIConfig
from .http_client import APIHttpClient
from .resources import DashboardResource, MetricClusterResource
from .schemas import Dashboard, MetricCluster
from .search import SearchFilter

logger = logging.getLogger(__name__)


class API:
    """Entry point for the monitoring API."""

    def __init__(self, config: APIConfig, http: Optional[APIHttpClient] = None):
        """
        Args:
            config: API configuration
            http: Pre-built HTTP client (tests pass a fake transport here)

        Raises:
            ConfigError: If no http client is given and config is unusable
        """
        self.config = config
        self.http = http if http is not None else APIHttpClient(config)
        self.dashboards = DashboardResource(self.http)
        self.metric_clusters = MetricClusterResource(self.http)
        logger.debug("API handle ready for %s", config.url)

    @classmethod
    def from_env(cls) -> "API":
        """Build a handle from CIRCONUS_* environment variables (.env honoured)."""
        return cls(APIConfig.from_env())

    # ---------------- Dashboards ----------------

    def fetch_dashboard(self, cid: Optional[str]) -> Dashboard:
        return self.dashboards.fetch(cid)

    def fetch_dashboards(self) -> List[Dashboard]:
        return self.dashboards.fetch_all()

    def create_dashboard(self, config: Optional[Dashboard]) -> Dashboard:
        return self.dashboards.create(config)

    def update_dashboard(self, config: Optional[Dashboard]) -> Dashboard:
        return self.dashboards.update(config)

    def delete_dashboard(self, config: Optional[Dashboard]) -> bool:
        return self.dashboards.delete(config)

    def delete_dashboard_by_cid(self, cid: Optional[str]) -> bool:
        return self.dashboards.delete_by_cid(cid)

    def search_dashboards(
        self, query: Optional[str] = None, filters: Optional[SearchFilter] = None
    ) -> List[Dashboard]:
        return self.dashboards.search(query, filters)

    # ---------------- Metric clusters ----------------

    def fetch_metric_cluster(self, cid: Optional[str], extras: str = "") -> MetricCluster:
        return self.metric_clusters.fetch(cid, extras)

    def fetch_metric_clusters(self) -> List[MetricCluster]:
        return self.metric_clusters.fetch_all()

    def create_metric_cluster(self, config: Optional[MetricCluster]) -> MetricCluster:
        return self.metric_clusters.create(config)

    def update_metric_cluster(self, config: Optional[MetricCluster]) -> MetricCluster:
        return self.metric_clusters.update(config)

    def delete_metric_cluster(self, config: Optional[MetricCluster]) -> bool:
        return self.metric_clusters.delete(config)

    def delete_metric_cluster_by_cid(self, cid: Optional[str]) -> bool:
        return self.metric_clusters.delete_by_cid(cid)

    def search_metric_clusters(
        self, query: Optional[str] = None, filters: Optional[SearchFilter] = None
    ) -> List[MetricCluster]:
        return self.metric_clusters.search(query, filters)
