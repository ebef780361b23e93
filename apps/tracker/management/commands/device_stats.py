"""
Management command to print per-device location stats
"""
from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from apps.tracker.queries import device_stats
from apps.tracker.store import LocationStore


class Command(BaseCommand):
    help = 'Show location stats for one device or for every device'

    def add_arguments(self, parser):
        parser.add_argument(
            '--imei',
            type=str,
            help='Show stats for this IMEI only',
        )
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to read from (default: "default")',
        )

    def handle(self, *args, **options):
        store = LocationStore(using=options['database'])

        if options['imei']:
            imeis = [options['imei']]
        else:
            imeis = async_to_sync(store.devices)()

        if not imeis:
            self.stdout.write(self.style.WARNING('No location data found'))
            return

        self.stdout.write(self.style.SUCCESS('\n=== Device Location Stats ===\n'))

        for i, imei in enumerate(imeis, 1):
            stats = async_to_sync(device_stats)(store, imei)
            latest = stats['latestLocation']

            self.stdout.write(f"{i}. IMEI: {imei}")
            self.stdout.write(f"   Reports: {stats['totalLocations']}")
            if latest is None:
                self.stdout.write("   No reports stored")
            else:
                self.stdout.write(f"   First record: {stats['firstRecordTime']}")
                self.stdout.write(f"   Last record:  {stats['lastRecordTime']}")
                self.stdout.write(
                    f"   Latest position: ({latest['latitude']:.6f}, {latest['longitude']:.6f}) "
                    f"height {latest['height']}"
                )
            self.stdout.write("")
