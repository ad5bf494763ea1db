"""API resources - typed CRUD and search per collection"""

from .base import Resource
from .dashboard import DashboardResource
from .metric_cluster import MetricClusterResource

__all__ = [
    'Resource',
    'DashboardResource',
    'MetricClusterResource',
]
