"""
Management command to run the tracker backend on uvicorn (ASGI)
"""
import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Serve the tracker API over ASGI'

    def add_arguments(self, parser):
        parser.add_argument('--host', type=str, default=settings.HOST, help='Interface to bind')
        parser.add_argument('--port', type=int, default=settings.PORT, help='Port to listen on')

    def handle(self, *args, **options):
        host = options['host']
        port = options['port']

        self.stdout.write(self.style.SUCCESS(f'Server is running on port {port}'))
        self.stdout.write(f'API endpoint: http://localhost:{port}/api/tracker/location')

        uvicorn.run('core.asgi:application', host=host, port=port, log_config=None)
