"""Unit tests for the dashboard resource

Tests CRUD and search against an in-process transport, including:
- CID validation before any request is made
- Create/update payload contents
- Delete and search request paths
"""
import json

import pytest

from circapi.errors import (
    DeserializationError,
    InvalidCIDError,
    InvalidConfigError,
    SerializationError,
    TransportError,
)
from circapi.schemas import Dashboard, DashboardWidget, DashboardWidgetSettings


class TestFetchDashboard:
    """Fetch a single dashboard by CID"""

    def test_without_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"^Invalid dashboard CID \[none\]$"):
            dashboard_api.fetch_dashboard("")
        assert dashboard_transport.calls == []

    def test_with_none_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"\[none\]"):
            dashboard_api.fetch_dashboard(None)
        assert dashboard_transport.calls == []

    def test_with_valid_cid(self, dashboard_api, test_dashboard):
        dashboard = dashboard_api.fetch_dashboard("/dashboard/1234")

        assert isinstance(dashboard, Dashboard)
        assert dashboard.cid == "/dashboard/1234"
        assert dashboard.cid == test_dashboard.cid
        assert dashboard.title == "foo bar baz"
        assert len(dashboard.widgets) == 8

    def test_with_invalid_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"^Invalid dashboard CID \[/invalid\]$"):
            dashboard_api.fetch_dashboard("/invalid")
        assert dashboard_transport.calls == []

    def test_issues_get_to_cid_path(self, dashboard_api, dashboard_transport):
        dashboard_api.fetch_dashboard("/dashboard/1234")
        assert dashboard_transport.calls == [("GET", "/dashboard/1234", None)]

    def test_transport_error_propagates(self, dashboard_api):
        with pytest.raises(TransportError) as exc_info:
            dashboard_api.fetch_dashboard("/dashboard/9999")
        assert exc_info.value.status == 404

    def test_malformed_body_raises_deserialization_error(self, dashboard_api, dashboard_transport):
        dashboard_transport.routes[("GET", "/dashboard/1234")] = b"not valid json {{"
        with pytest.raises(DeserializationError):
            dashboard_api.fetch_dashboard("/dashboard/1234")

    def test_wrong_shape_raises_deserialization_error(self, dashboard_api, dashboard_transport):
        dashboard_transport.routes[("GET", "/dashboard/1234")] = b'{"widgets": "nope"}'
        with pytest.raises(DeserializationError):
            dashboard_api.fetch_dashboard("/dashboard/1234")


class TestFetchDashboards:
    """Fetch the whole collection"""

    def test_fetch_dashboards(self, dashboard_api, dashboard_transport):
        dashboards = dashboard_api.fetch_dashboards()

        assert isinstance(dashboards, list)
        assert len(dashboards) == 1
        assert isinstance(dashboards[0], Dashboard)
        assert dashboard_transport.calls == [("GET", "/dashboard", None)]

    def test_non_list_body_raises_deserialization_error(self, dashboard_api, dashboard_transport, dashboard_json):
        dashboard_transport.routes[("GET", "/dashboard")] = dashboard_json
        with pytest.raises(DeserializationError):
            dashboard_api.fetch_dashboards()


class TestCreateDashboard:
    """Create a dashboard"""

    def test_create_dashboard(self, dashboard_api, test_dashboard):
        dashboard = dashboard_api.create_dashboard(test_dashboard)
        assert isinstance(dashboard, Dashboard)

    def test_none_config_rejected(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidConfigError, match=r"Invalid dashboard config \[nil\]"):
            dashboard_api.create_dashboard(None)
        assert dashboard_transport.calls == []

    def test_caller_cid_not_sent_and_server_cid_returned(self, dashboard_api, dashboard_transport):
        new = Dashboard(cid="/dashboard/5555", title="new board")

        created = dashboard_api.create_dashboard(new)

        method, path, body = dashboard_transport.calls[0]
        assert (method, path) == ("POST", "/dashboard")
        sent = json.loads(body)
        assert "_cid" not in sent
        assert sent["title"] == "new board"
        assert created.cid == "/dashboard/1234"

    def test_read_only_fields_not_sent(self, dashboard_api, dashboard_transport, test_dashboard):
        dashboard_api.create_dashboard(test_dashboard)

        sent = json.loads(dashboard_transport.calls[0][2])
        for key in ("_active", "_created", "_created_by", "_dashboard_uuid", "_last_modified"):
            assert key not in sent


class TestUpdateDashboard:
    """Update (full replace) a dashboard"""

    def test_valid_dashboard(self, dashboard_api, test_dashboard):
        dashboard = dashboard_api.update_dashboard(test_dashboard)

        assert isinstance(dashboard, Dashboard)
        assert dashboard.cid == "/dashboard/1234"
        assert dashboard.widgets == test_dashboard.widgets

    def test_puts_full_object_to_cid_path(self, dashboard_api, dashboard_transport, test_dashboard):
        dashboard_api.update_dashboard(test_dashboard)

        method, path, body = dashboard_transport.calls[0]
        assert (method, path) == ("PUT", "/dashboard/1234")
        sent = json.loads(body)
        assert sent["_cid"] == "/dashboard/1234"
        assert sent["title"] == test_dashboard.title
        assert len(sent["widgets"]) == len(test_dashboard.widgets)
        assert sent["grid_layout"] == {"height": 4, "width": 4}
        assert "_created" not in sent

    def test_invalid_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"^Invalid dashboard CID \[/invalid\]$"):
            dashboard_api.update_dashboard(Dashboard(cid="/invalid"))
        assert dashboard_transport.calls == []

    def test_missing_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"\[none\]"):
            dashboard_api.update_dashboard(Dashboard(title="never created"))
        assert dashboard_transport.calls == []

    @pytest.mark.parametrize("cid", [
        "/dashboard/",
        "/dashboard/abc",
        "/dashboard/12/34",
        "dashboard/1234",
        "/metric_cluster/1234",
        "/dashboard/1234 ",
        "/dashboard/1234\n",
    ])
    def test_malformed_cids(self, dashboard_api, dashboard_transport, cid):
        with pytest.raises(InvalidCIDError):
            dashboard_api.update_dashboard(Dashboard(cid=cid))
        assert dashboard_transport.calls == []

    def test_none_config_rejected(self, dashboard_api):
        with pytest.raises(InvalidConfigError):
            dashboard_api.update_dashboard(None)

    def test_unencodable_value_not_sent(self, dashboard_api, dashboard_transport):
        settings = DashboardWidgetSettings(threshold=float("nan"), period=float("inf"))
        dashboard = Dashboard(cid="/dashboard/1234", widgets=[DashboardWidget(settings=settings)])

        with pytest.raises(SerializationError):
            dashboard_api.update_dashboard(dashboard)
        assert dashboard_transport.calls == []

    def test_unencodable_value_not_created(self, dashboard_api, dashboard_transport):
        settings = DashboardWidgetSettings(threshold=float("inf"))

        with pytest.raises(SerializationError):
            dashboard_api.create_dashboard(Dashboard(widgets=[DashboardWidget(settings=settings)]))
        assert dashboard_transport.calls == []


class TestDeleteDashboard:
    """Delete by value and by CID"""

    def test_valid_dashboard(self, dashboard_api, dashboard_transport, test_dashboard):
        assert dashboard_api.delete_dashboard(test_dashboard) is True
        assert dashboard_transport.calls == [("DELETE", "/dashboard/1234", None)]

    def test_by_cid(self, dashboard_api):
        assert dashboard_api.delete_dashboard_by_cid("/dashboard/1234") is True

    def test_invalid_cid(self, dashboard_api, dashboard_transport):
        with pytest.raises(InvalidCIDError, match=r"^Invalid dashboard CID \[/invalid\]$"):
            dashboard_api.delete_dashboard(Dashboard(cid="/invalid"))
        assert dashboard_transport.calls == []

    def test_empty_cid(self, dashboard_api):
        with pytest.raises(InvalidCIDError, match=r"\[none\]"):
            dashboard_api.delete_dashboard_by_cid("")

    def test_none_config_rejected(self, dashboard_api):
        with pytest.raises(InvalidConfigError, match=r"Invalid dashboard config \[none\]"):
            dashboard_api.delete_dashboard(None)

    def test_transport_error_propagates(self, dashboard_api, dashboard_transport):
        dashboard_transport.routes[("DELETE", "/dashboard/1234")] = TransportError(
            "API response code 500: boom", status=500
        )
        with pytest.raises(TransportError, match="500"):
            dashboard_api.delete_dashboard_by_cid("/dashboard/1234")

    def test_response_body_ignored(self, dashboard_api, dashboard_transport):
        dashboard_transport.routes[("DELETE", "/dashboard/1234")] = b'{"status": "failed"}'
        assert dashboard_api.delete_dashboard_by_cid("/dashboard/1234") is True


class TestSearchDashboards:
    """Search with query and/or filter"""

    def test_no_search_no_filter_is_fetch_all(self, dashboard_api, dashboard_transport):
        searched = dashboard_api.search_dashboards()
        fetched = dashboard_api.fetch_dashboards()

        assert searched == fetched
        assert dashboard_transport.calls[0] == dashboard_transport.calls[1]

    def test_empty_values_are_fetch_all(self, dashboard_api, dashboard_transport):
        dashboard_api.search_dashboards("", {})
        assert dashboard_transport.calls == [("GET", "/dashboard", None)]

    def test_search_and_filter_path(self, dashboard_api, dashboard_transport):
        path = "/dashboard?search=web+servers&f_tags_has=dc%3Asfo1"
        dashboard_transport.routes[("GET", path)] = b"[]"

        result = dashboard_api.search_dashboards("web servers", {"f_tags_has": ["dc:sfo1"]})

        assert result == []
        assert dashboard_transport.calls == [("GET", path, None)]

    def test_search_transport_error_is_wrapped(self, dashboard_api):
        with pytest.raises(TransportError, match=r"^\[ERROR\] API call error") as exc_info:
            dashboard_api.search_dashboards("nothing here")
        assert exc_info.value.status == 404
        assert isinstance(exc_info.value.__cause__, TransportError)
