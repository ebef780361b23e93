from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.tracker.exceptions import MalformedReport, StoreError
from apps.tracker.ingestion import build_report, ingest
from apps.tracker.queries import device_stats, latest_location, list_locations


def test_build_report_stamps_server_time() -> None:
    before = timezone.now()
    report = build_report("860000000000001&21.01&110&52.23")

    assert report.pk is None
    assert report.imei == "860000000000001"
    assert before <= report.timestamp <= timezone.now()


def test_build_report_keeps_given_timestamp() -> None:
    at = timezone.now() - timedelta(days=3)

    assert build_report("1&2&3&4", timestamp=at).timestamp == at


@pytest.mark.asyncio
async def test_ingest_raw_body_appends_once(memory_store) -> None:
    report = await ingest(memory_store, "text/plain", b"123456789012345&12.34&56.7&89.01")

    assert report.id == 1
    assert memory_store.reports == [report]
    assert (report.longitude, report.height, report.latitude) == (12.34, 56.7, 89.01)


@pytest.mark.asyncio
async def test_ingest_json_body(memory_store) -> None:
    report = await ingest(memory_store, "application/json", '{"data": "abc&1&2&3"}')

    assert report.imei == "abc"
    assert len(memory_store.reports) == 1


@pytest.mark.asyncio
async def test_ingest_rejects_without_writing(memory_store) -> None:
    with pytest.raises(MalformedReport):
        await ingest(memory_store, "text/plain", "123&45.6")
    with pytest.raises(MalformedReport):
        await ingest(memory_store, "text/plain", "123&abc&10&20")

    assert memory_store.reports == []


@pytest.mark.asyncio
async def test_ingest_propagates_store_failure(broken_store) -> None:
    with pytest.raises(StoreError, match="database is locked"):
        await ingest(broken_store, None, "1&2&3&4")


@pytest.mark.asyncio
async def test_queries_order_and_stats(memory_store) -> None:
    base = timezone.now()
    for minutes, imei in [(1, "a"), (3, "a"), (2, "a"), (4, "b")]:
        await memory_store.append(build_report(f"{imei}&{minutes}&0&0", timestamp=base + timedelta(minutes=minutes)))

    reports = await list_locations(memory_store, imei="a")
    assert [r.longitude for r in reports] == [3.0, 2.0, 1.0]
    assert len(await list_locations(memory_store, limit=2)) == 2
    assert (await latest_location(memory_store, "b")).longitude == 4.0
    assert await latest_location(memory_store, "zzz") is None

    stats = await device_stats(memory_store, "a")
    assert stats["totalLocations"] == 3
    assert stats["latestLocation"]["longitude"] == 3.0
    assert stats["oldestLocation"]["longitude"] == 1.0
    assert stats["firstRecordTime"] == (base + timedelta(minutes=1)).isoformat()
    assert stats["lastRecordTime"] == (base + timedelta(minutes=3)).isoformat()


@pytest.mark.asyncio
async def test_stats_for_unknown_device_are_zeroed(memory_store) -> None:
    assert await device_stats(memory_store, "nobody") == {
        "imei": "nobody",
        "totalLocations": 0,
        "latestLocation": None,
        "oldestLocation": None,
        "firstRecordTime": None,
        "lastRecordTime": None,
    }
