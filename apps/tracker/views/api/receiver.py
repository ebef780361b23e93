"""
Tracker Location Receiver API

Receives location reports from tracker devices. Embedded trackers post the
delimited string as text/plain (or with no useful content type); other
clients may send JSON {"data": "IMEI&longitude&height&latitude"}.
"""
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from ...exceptions import MalformedReport
from ...ingestion import ingest
from .base import StoreView, error_response

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class LocationReceiverView(StoreView):
    """
    POST /api/tracker/location

    Returns:
        200 with the stored report, 400 for a malformed payload,
        500 when storing fails
    """

    async def post(self, request):
        content_type = request.META.get('CONTENT_TYPE', '')
        logger.info(f"[INCOMING] Content-Type: {content_type or 'NONE'}")
        logger.debug(f"[INCOMING] Body length: {len(request.body)} bytes")

        try:
            report = await ingest(self.store, content_type, request.body)
        except MalformedReport as e:
            logger.warning(f"[SKIP] {e}: {e.received!r}")
            extra = {'received': e.received}
            if e.data is not None:
                extra['data'] = e.data
            return error_response(str(e), 400, **extra)
        except Exception as e:
            logger.exception(f"[ERROR] Error processing location data: {e}")
            return error_response('Error processing location data', 500, error=str(e))

        logger.info(f"[RESULT] IMEI {report.imei}: stored report {report.id}")
        return JsonResponse({
            'success': True,
            'message': 'Location data received successfully',
            'data': report.to_dict(),
        })
