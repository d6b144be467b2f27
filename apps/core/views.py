"""
Core Views

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from django.db import connection, DatabaseError
from drf_spectacular.utils import extend_schema
import logging

from .responses import success_response, error_response

logger = logging.getLogger(__name__)


@extend_schema(
    tags=['Health'],
    summary='Health check',
    description='System health monitoring endpoint to check database connectivity'
)
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for monitoring.
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"Health check failed: {str(e)}")
        return error_response(
            message="Health check failed",
            code='SERVICE_UNAVAILABLE',
            details={'database': 'disconnected'},
            status_code=503
        )

    return success_response({
        'status': 'healthy',
        'database': 'connected',
        'version': '1.0.0'
    })
