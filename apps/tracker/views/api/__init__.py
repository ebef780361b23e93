"""
Tracker API Views Package
"""
from .receiver import LocationReceiverView
from .history import LocationListView, LatestLocationView
from .stats import DeviceStatsView

__all__ = ['LocationReceiverView', 'LocationListView', 'LatestLocationView', 'DeviceStatsView']
