from __future__ import annotations

import json

import pytest
from django.test import RequestFactory

from apps.tracker.views import DeviceStatsView, LatestLocationView, LocationListView, LocationReceiverView

LOCATION_URL = "/api/tracker/location"
IMEI = "123456789012345"


@pytest.mark.asyncio
async def test_store_failure_on_ingest_is_500(broken_store) -> None:
    request = RequestFactory().post(LOCATION_URL, data="1&2&3&4", content_type="text/plain")

    response = await LocationReceiverView.as_view(store=broken_store)(request)

    assert response.status_code == 500
    body = json.loads(response.content)
    assert body["success"] is False
    assert body["error"] == "database is locked"


@pytest.mark.asyncio
async def test_store_failure_on_reads_is_500(broken_store) -> None:
    factory = RequestFactory()

    responses = [
        await LocationListView.as_view(store=broken_store)(factory.get("/api/tracker/locations")),
        await LatestLocationView.as_view(store=broken_store)(factory.get("/"), imei=IMEI),
        await DeviceStatsView.as_view(store=broken_store)(factory.get("/"), imei=IMEI),
    ]

    for response in responses:
        assert response.status_code == 500
        assert json.loads(response.content)["error"] == "connection refused"


@pytest.mark.asyncio
async def test_injected_store_receives_the_report(memory_store) -> None:
    request = RequestFactory().post(LOCATION_URL, data={"data": f"{IMEI}&1&2&3"}, content_type="application/json")

    response = await LocationReceiverView.as_view(store=memory_store)(request)

    assert response.status_code == 200
    assert [r.imei for r in memory_store.reports] == [IMEI]


def test_view_without_store_refuses_to_run() -> None:
    view = LocationListView.as_view()

    with pytest.raises(TypeError, match="requires a store"):
        view(RequestFactory().get("/api/tracker/locations"))


def test_admin_is_read_only() -> None:
    from django.contrib import admin

    from apps.tracker.models import LocationReport

    model_admin = admin.site._registry[LocationReport]
    request = RequestFactory().get("/admin/")

    assert not model_admin.has_add_permission(request)
    assert not model_admin.has_change_permission(request)
    assert not model_admin.has_delete_permission(request)
