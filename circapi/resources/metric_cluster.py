"""
Metric cluster API support - fetch, create, update, delete and search
/metric_cluster.

A single cluster can be fetched with extra server-computed data:
- "metrics": the metric names currently matching the cluster queries
- "uuids":   the same, keyed by check UUID
"""

from typing import Optional
from urllib.parse import urlencode

from ..cid import validate_cid
from ..schemas.metric_cluster import MetricCluster
from .base import Resource

# extras argument -> value of the _extra query parameter
FETCH_EXTRAS = {
    "metrics": "_matching_metrics",
    "uuids": "_matching_uuid_metrics",
}


class MetricClusterResource(Resource[MetricCluster]):
    """Metric clusters."""

    base_path = "/metric_cluster"
    label = "metric cluster"
    model = MetricCluster

    def fetch(self, cid: Optional[str], extras: str = "") -> MetricCluster:
        """
        Retrieve a metric cluster by CID.

        Args:
            cid: Cluster CID, e.g. /metric_cluster/1234
            extras: "metrics" or "uuids" to include matching metrics; anything
                else fetches the plain definition

        Raises:
            InvalidCIDError: CID absent or malformed (no request is made)
        """
        cid = validate_cid(cid, self.base_path, self.label)

        path = cid
        extra = FETCH_EXTRAS.get(extras)
        if extra:
            path = f"{cid}?{urlencode({'_extra': extra})}"
        return self._get_one(path)
