"""
Main URL Configuration
Routes to the tracker API, the health probe and Django admin
"""
from django.contrib import admin
from django.urls import path, include

from apps.tracker.views import health_check

urlpatterns = [
    # Django admin panel (read-only browsing of stored reports)
    path('admin/', admin.site.urls),

    # Tracker API: /api/tracker/location, /locations, /latest/<imei>, /stats/<imei>
    path('api/tracker/', include('apps.tracker.urls')),

    # Liveness probe
    path('health', health_check, name='health'),
]
