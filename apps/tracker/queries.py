"""
Tracker Queries
Read-only accessors over a LocationStore.
"""
import logging

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
# Largest LIMIT a 64-bit SQL integer can carry
MAX_LIMIT = 2**63 - 1


async def list_locations(store, imei=None, limit=DEFAULT_LIMIT):
    """
    Reports newest first, optionally for a single device

    There is no cursor: only the `limit` newest rows are reachable.
    """
    logger.debug(f"[QUERY] list imei={imei or '*'} limit={limit}")
    return await store.recent(imei=imei, limit=limit)


async def latest_location(store, imei):
    """Most recent report for a device, or None"""
    logger.debug(f"[QUERY] latest imei={imei}")
    return await store.latest(imei)


async def device_stats(store, imei):
    """
    Aggregate stats for one device

    Built from three separate reads (count, newest, oldest). A write
    landing between them can make the fields disagree, e.g. a count
    that already includes a report the latest row does not show yet.

    Returns:
        dict with imei, totalLocations, latestLocation, oldestLocation,
        firstRecordTime and lastRecordTime
    """
    logger.debug(f"[QUERY] stats imei={imei}")
    total = await store.count(imei)
    latest = await store.latest(imei)
    oldest = await store.oldest(imei)

    return {
        'imei': imei,
        'totalLocations': total,
        'latestLocation': latest.to_dict() if latest else None,
        'oldestLocation': oldest.to_dict() if oldest else None,
        'firstRecordTime': oldest.timestamp.isoformat() if oldest else None,
        'lastRecordTime': latest.timestamp.isoformat() if latest else None,
    }
