"""
Tracker Device Stats API
"""
import logging

from django.http import JsonResponse

from ...queries import device_stats
from .base import StoreView, error_response

logger = logging.getLogger(__name__)


class DeviceStatsView(StoreView):
    """
    GET /api/tracker/stats/<imei>

    Unknown devices get zeroed stats, not a 404.
    """

    async def get(self, request, imei):
        try:
            stats = await device_stats(self.store, imei)
        except Exception as e:
            logger.exception(f"[ERROR] Error fetching stats for {imei}: {e}")
            return error_response('Error fetching device stats', 500, error=str(e))

        return JsonResponse({'success': True, 'data': stats})
