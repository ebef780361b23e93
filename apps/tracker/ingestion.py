"""
Location Ingestion
Turns a request body into a stored LocationReport.
"""
import logging

from django.utils import timezone

from .functions import decode_body, parse_report
from .models import LocationReport

logger = logging.getLogger(__name__)


def build_report(data_string, timestamp=None):
    """
    Parse a delimited string into an unsaved LocationReport

    The timestamp defaults to the current server time, taken once
    parsing has succeeded.
    """
    fields = parse_report(data_string)
    return LocationReport(timestamp=timestamp or timezone.now(), **fields)


async def ingest(store, content_type, body):
    """
    Decode, parse, validate and store one location report

    Args:
        store: LocationStore (or anything with an async append)
        content_type: Content-Type header of the request
        body: Raw request body

    Returns:
        The stored LocationReport

    Raises:
        MalformedReport: payload rejected, nothing was written
        StoreError: the store failed the insert
    """
    payload = decode_body(content_type, body)
    logger.info(f"[INCOMING] Processing {type(payload).__name__}")

    data_string = payload.delimited()
    logger.info(f"[INCOMING] RAW DATA: {data_string}")

    report = build_report(data_string)
    logger.info(
        f"[PROCESS] IMEI {report.imei}: lon={report.longitude} "
        f"height={report.height} lat={report.latitude}"
    )

    return await store.append(report)
