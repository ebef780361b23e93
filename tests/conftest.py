from __future__ import annotations

import pytest

from apps.tracker.exceptions import StoreError


class MemoryStore:
    """In-memory stand-in for LocationStore."""

    def __init__(self) -> None:
        self.reports = []

    def _for(self, imei):
        return [r for r in self.reports if not imei or r.imei == imei]

    async def append(self, report):
        report.id = len(self.reports) + 1
        self.reports.append(report)
        return report

    async def recent(self, imei=None, limit=100):
        return sorted(self._for(imei), key=lambda r: (r.timestamp, r.id), reverse=True)[:limit]

    async def latest(self, imei):
        reports = await self.recent(imei, limit=1)
        return reports[0] if reports else None

    async def oldest(self, imei):
        reports = sorted(self._for(imei), key=lambda r: (r.timestamp, r.id))
        return reports[0] if reports else None

    async def count(self, imei=None):
        return len(self._for(imei))


class BrokenStore:
    """Store whose every call fails like an unreachable database."""

    async def append(self, report):
        raise StoreError("database is locked")

    async def recent(self, imei=None, limit=100):
        raise RuntimeError("connection refused")

    async def latest(self, imei):
        raise RuntimeError("connection refused")

    async def oldest(self, imei):
        raise RuntimeError("connection refused")

    async def count(self, imei=None):
        raise RuntimeError("connection refused")


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()
