"""Dashboard API support - fetch, create, update, delete and search /dashboard."""

from ..schemas.dashboard import Dashboard
from .base import Resource


class DashboardResource(Resource[Dashboard]):
    """Dashboards."""

    base_path = "/dashboard"
    label = "dashboard"
    model = Dashboard
