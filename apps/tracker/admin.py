"""
Django Admin Configuration for the Tracker Application
"""
from django.contrib import admin
from .models import LocationReport


@admin.register(LocationReport)
class LocationReportAdmin(admin.ModelAdmin):
    """
    Read-only browser for stored reports (reports are immutable)
    """
    list_display = ['id', 'timestamp', 'imei', 'longitude', 'latitude', 'height']
    list_filter = ['timestamp']
    search_fields = ['imei']
    date_hierarchy = 'timestamp'
    readonly_fields = ['imei', 'longitude', 'height', 'latitude', 'timestamp']

    fieldsets = (
        ('Device', {
            'fields': ('imei', 'timestamp')
        }),
        ('Location', {
            'fields': ('longitude', 'latitude', 'height')
        }),
    )

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
