"""
Location Store
Async access to the locations table for a single database alias.

A store is built once (see urls.py) and handed to every view and
management command that needs it, so tests can swap in their own.
"""
import logging
from datetime import timedelta

from django.db import DatabaseError

from .exceptions import StoreError
from .models import LocationReport

logger = logging.getLogger(__name__)

DUPLICATE_WINDOW = timedelta(seconds=1)


class LocationStore:
    """
    Append and query location reports

    Connections are taken from Django's per-alias connection handler
    and released at the end of each request.
    """

    def __init__(self, using='default'):
        self.using = using

    def __repr__(self):
        return f"LocationStore(using={self.using!r})"

    def _reports(self, imei=None):
        query = LocationReport.objects.using(self.using)
        if imei:
            query = query.filter(imei=imei)
        return query

    async def append(self, report):
        """Insert one report and return it with its id set"""
        try:
            await report.asave(using=self.using, force_insert=True)
        except DatabaseError as e:
            logger.error(f"[ERROR] Insert failed for IMEI {report.imei}: {e}")
            raise StoreError(str(e)) from e
        logger.debug(f"[INSERT] id={report.id} IMEI {report.imei} @ {report.timestamp.isoformat()}")
        return report

    async def exists(self, report, window=DUPLICATE_WINDOW):
        """
        True when a report with the same device and coordinates was stored
        within `window` after report.timestamp

        Log lines are written just before the live report is timestamped,
        so a replayed line lands slightly earlier than its stored row.
        """
        return await self._reports(report.imei).filter(
            longitude=report.longitude,
            height=report.height,
            latitude=report.latitude,
            timestamp__gte=report.timestamp,
            timestamp__lt=report.timestamp + window,
        ).aexists()

    async def recent(self, imei=None, limit=100):
        """Newest reports first, optionally for one device"""
        query = self._reports(imei).order_by('-timestamp', '-id')[:limit]
        return [report async for report in query]

    async def latest(self, imei):
        return await self._reports(imei).order_by('-timestamp', '-id').afirst()

    async def oldest(self, imei):
        return await self._reports(imei).order_by('timestamp', 'id').afirst()

    async def count(self, imei=None):
        return await self._reports(imei).acount()

    async def devices(self):
        """Distinct IMEIs that have at least one report"""
        query = self._reports().order_by('imei').values_list('imei', flat=True).distinct()
        return [imei async for imei in query]
