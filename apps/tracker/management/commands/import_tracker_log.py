"""
Management command to replay location reports from log files.
Parses the receiver log format: [2026-01-09 17:23:54,551] INFO [INCOMING] RAW DATA: 860000000000001&21.01&110&52.23
"""
import re
from datetime import datetime

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.tracker.exceptions import MalformedReport, StoreError
from apps.tracker.ingestion import build_report
from apps.tracker.store import LocationStore

# Milliseconds are optional so logs written before they were added still parse
LOG_LINE_PATTERN = re.compile(
    r'\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})(?:,(\d{3}))?\] INFO \[INCOMING\] RAW DATA: (.*)$'
)


class Command(BaseCommand):
    help = 'Import location reports from receiver log files'

    def add_arguments(self, parser):
        parser.add_argument('logfile', type=str, help='Path to the log file')
        parser.add_argument(
            '--raw',
            action='store_true',
            help='Treat every non-empty line as a bare IMEI&longitude&height&latitude report',
        )
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to import into (default: "default")',
        )

    def handle(self, *args, **options):
        store = LocationStore(using=options['database'])
        try:
            with open(options['logfile'], 'r', encoding='utf-8', errors='replace') as f:
                self.process_logfile(f, store, raw=options['raw'])
        except FileNotFoundError:
            raise CommandError(f"Log file not found: {options['logfile']}")

    def parse_line(self, line, raw):
        """
        Extract (data_string, timestamp) from one line

        Returns None for lines that carry no report.
        """
        match = LOG_LINE_PATTERN.search(line)
        if match:
            logged_at = datetime.strptime(match.group(1), '%Y-%m-%d %H:%M:%S')
            millisecond = int(match.group(2) or 0)
            logged_at = logged_at.replace(microsecond=millisecond * 1000)
            return match.group(3).strip(), timezone.make_aware(logged_at)
        if raw and line.strip():
            return line.strip(), timezone.now()
        return None

    def process_logfile(self, logfile, store, raw=False):
        """Parse the log file and store every valid report"""
        imported = 0
        skipped = 0
        errors = 0

        append = async_to_sync(store.append)
        exists = async_to_sync(store.exists)

        for line_num, line in enumerate(logfile, 1):
            entry = self.parse_line(line, raw)
            if entry is None:
                continue

            data_string, timestamp = entry
            try:
                report = build_report(data_string, timestamp=timestamp)
            except MalformedReport as e:
                self.stdout.write(self.style.WARNING(f'Line {line_num}: {e} ({data_string!r})'))
                errors += 1
                continue

            if exists(report):
                skipped += 1
                continue

            try:
                append(report)
            except StoreError as e:
                self.stdout.write(self.style.WARNING(f'Line {line_num} (IMEI {report.imei}): {e}'))
                errors += 1
                continue
            imported += 1

        self.stdout.write(
            self.style.SUCCESS(
                f'Import complete: {imported} imported, {skipped} skipped, '
                f'{errors} errors'
            )
        )
