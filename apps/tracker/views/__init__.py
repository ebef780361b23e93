"""
Tracker Views Package
Provides the tracker API views and the health probe
"""
from .api import LocationReceiverView, LocationListView, LatestLocationView, DeviceStatsView
from .health import health_check

__all__ = [
    # API endpoints
    'LocationReceiverView',
    'LocationListView',
    'LatestLocationView',
    'DeviceStatsView',

    # Probes
    'health_check',
]
