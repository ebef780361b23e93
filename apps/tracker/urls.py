"""
URL Configuration for the Tracker API
Mounted under /api/tracker/ by core.urls
"""
from django.urls import path

from .store import LocationStore
from .views import LocationReceiverView, LocationListView, LatestLocationView, DeviceStatsView

app_name = 'tracker'

store = LocationStore()

urlpatterns = [
    # Location receiver endpoint (POST)
    # Usage: POST body "IMEI&longitude&height&latitude" (text) or {"data": "..."} (JSON)
    path('location', LocationReceiverView.as_view(store=store), name='location'),

    # Location history (GET)
    # Usage: GET /locations or /locations?imei=123456789012345&limit=50
    path('locations', LocationListView.as_view(store=store), name='locations'),

    # Most recent location of a device (GET)
    path('latest/<str:imei>', LatestLocationView.as_view(store=store), name='latest'),

    # Per-device stats (GET)
    path('stats/<str:imei>', DeviceStatsView.as_view(store=store), name='stats'),
]
