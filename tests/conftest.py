"""Pytest configuration and shared fixtures"""
import json
from pathlib import Path

import pytest

from circapi.api import API
from circapi.config import APIConfig
from circapi.errors import TransportError
from circapi.schemas import Dashboard, MetricCluster, MetricQuery

FIXTURES = Path(__file__).parent / "fixtures"


class FakeTransport:
    """In-process stand-in for APIHttpClient.

    Routes map (method, path) to either response bytes or a callable taking
    the request body and returning response bytes. Unknown routes fail like
    a 404 from the service. Every call is recorded in `calls`.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def _call(self, method, path, body=None):
        self.calls.append((method, path, body))
        handler = self.routes.get((method, path))
        if handler is None:
            raise TransportError(
                f"API response code 404: not found: {method} {path}", status=404
            )
        if isinstance(handler, Exception):
            raise handler
        return handler(body) if callable(handler) else handler

    def get(self, path):
        return self._call("GET", path)

    def put(self, path, body):
        return self._call("PUT", path, body)

    def post(self, path, body):
        return self._call("POST", path, body)

    def delete(self, path):
        return self._call("DELETE", path)


@pytest.fixture
def api_config():
    return APIConfig(token_key="abc123", token_app="test", url="http://127.0.0.1:8080")


@pytest.fixture
def dashboard_json():
    """Raw example dashboard as returned by the service"""
    return (FIXTURES / "dashboard-example.json").read_bytes()


@pytest.fixture
def test_dashboard(dashboard_json):
    return Dashboard.from_json(dashboard_json)


@pytest.fixture
def dashboard_transport(dashboard_json):
    """Transport serving /dashboard the way the service does"""
    collection = json.dumps([json.loads(dashboard_json)]).encode()
    return FakeTransport({
        ("GET", "/dashboard/1234"): dashboard_json,
        ("PUT", "/dashboard/1234"): lambda body: body,  # PUT echoes the stored object
        ("DELETE", "/dashboard/1234"): b"",
        ("GET", "/dashboard"): collection,
        ("POST", "/dashboard"): dashboard_json,
    })


@pytest.fixture
def dashboard_api(api_config, dashboard_transport):
    return API(api_config, http=dashboard_transport)


@pytest.fixture
def test_metric_cluster():
    return MetricCluster(
        name="test",
        cid="/metric_cluster/1234",
        queries=[MetricQuery(query="*Req*", type="average")],
        description="",
        tags=[],
    )


@pytest.fixture
def metric_cluster_transport(test_metric_cluster):
    """Transport serving /metric_cluster, including search and filter URLs"""
    one = test_metric_cluster.to_json().encode()
    many = json.dumps([json.loads(one)]).encode()

    with_metrics = test_metric_cluster.model_copy(
        update={"matching_metrics": ["web01`http`Requests", "web02`http`Requests"]}
    ).to_json().encode()
    with_uuids = test_metric_cluster.model_copy(
        update={"matching_uuid_metrics": {"0123-4567": ["http`Requests"]}}
    ).to_json().encode()

    return FakeTransport({
        ("GET", "/metric_cluster/1234"): one,
        ("GET", "/metric_cluster/1234?_extra=_matching_metrics"): with_metrics,
        ("GET", "/metric_cluster/1234?_extra=_matching_uuid_metrics"): with_uuids,
        ("PUT", "/metric_cluster/1234"): lambda body: body,
        ("DELETE", "/metric_cluster/1234"): b"\n",
        ("GET", "/metric_cluster"): many,
        ("GET", "/metric_cluster?search=web+servers"): many,
        ("GET", "/metric_cluster?f_tags_has=dc%3Asfo1"): many,
        ("GET", "/metric_cluster?search=web+servers&f_tags_has=dc%3Asfo1"): many,
        ("POST", "/metric_cluster"): lambda body: body,
    })


@pytest.fixture
def metric_cluster_api(api_config, metric_cluster_transport):
    return API(api_config, http=metric_cluster_transport)
