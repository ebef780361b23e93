"""
Tracker History API

Read endpoints over stored location reports:
- GET /api/tracker/locations?imei=&limit=   newest first, default 100 rows
- GET /api/tracker/latest/<imei>            most recent report or 404
"""
import logging

from django.http import JsonResponse

from ...queries import DEFAULT_LIMIT, MAX_LIMIT, latest_location, list_locations
from .base import StoreView, error_response

logger = logging.getLogger(__name__)


def parse_limit(value):
    """
    Parse the `limit` query parameter

    Returns:
        Int in 1..MAX_LIMIT, DEFAULT_LIMIT when missing, None when invalid
    """
    if value is None or value == '':
        return DEFAULT_LIMIT
    try:
        limit = int(value)
    except ValueError:
        return None
    return limit if 0 < limit <= MAX_LIMIT else None


class LocationListView(StoreView):
    """
    List location reports

    Query parameters:
        imei: Only reports from this device (optional)
        limit: Maximum number of rows (default: 100)
    """

    async def get(self, request):
        imei = request.GET.get('imei') or None
        limit = parse_limit(request.GET.get('limit'))

        if limit is None:
            return error_response('Invalid limit', 400, received=request.GET.get('limit'))

        try:
            reports = await list_locations(self.store, imei=imei, limit=limit)
        except Exception as e:
            logger.exception(f"[ERROR] Error fetching locations: {e}")
            return error_response('Error fetching locations', 500, error=str(e))

        return JsonResponse({
            'success': True,
            'count': len(reports),
            'data': [report.to_dict() for report in reports],
        })


class LatestLocationView(StoreView):
    """Most recent location report for one device"""

    async def get(self, request, imei):
        try:
            report = await latest_location(self.store, imei)
        except Exception as e:
            logger.exception(f"[ERROR] Error fetching latest location for {imei}: {e}")
            return error_response('Error fetching latest location', 500, error=str(e))

        if report is None:
            return error_response('No location found for this device', 404, imei=imei)

        return JsonResponse({'success': True, 'data': report.to_dict()})
