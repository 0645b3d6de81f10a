from django.conf import settings
from django.db import connection
from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.response import Response
import logging

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    authentication_classes = []
    permission_classes = []

    def get(self, request):
        checks = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'shortening_service': settings.SHORTLINKS_API_URL,
        }

        # Database
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            checks['database'] = 'ok'
        except Exception as e:
            logger.error(f"Health check database error: {e}")
            checks['database'] = f'error: {str(e)}'
            checks['status'] = 'degraded'

        return Response(checks)
