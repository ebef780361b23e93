"""
Tracker Data Models
Append-only store of location reports sent by GPS tracker devices
"""
from django.db import models

from .functions import IMEI_MAX_LENGTH


class LocationReport(models.Model):
    """
    One parsed and validated position report from a tracker
    Rows are only ever inserted, never updated or deleted
    """
    id = models.BigAutoField(primary_key=True)
    imei = models.CharField(max_length=IMEI_MAX_LENGTH, db_index=True, help_text="Device IMEI (free-form)")

    # GPS coordinates
    longitude = models.FloatField()
    height = models.FloatField(help_text="Altitude, unit defined by the device")
    latitude = models.FloatField()

    timestamp = models.DateTimeField(db_index=True, help_text="Time the report was received")

    class Meta:
        db_table = 'locations'
        indexes = [
            models.Index(fields=['imei', '-timestamp'], name='locations_imei_ts_idx'),
        ]
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.imei} @ {self.timestamp} ({self.latitude}, {self.longitude})"

    def to_dict(self):
        return {
            'id': self.id,
            'imei': self.imei,
            'longitude': self.longitude,
            'height': self.height,
            'latitude': self.latitude,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
        }
