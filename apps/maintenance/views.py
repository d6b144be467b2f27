"""
Maintenance Views

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema

from .serializers import MaintenanceLogSerializer, MaintenanceRequestSerializer
from .services import MaintenanceService
from apps.core.responses import success_response, error_response


@extend_schema(
    tags=['Maintenance'],
    summary='Log maintenance',
    description='Record a maintenance event; the equipment becomes Active with its last cleaned date set to the maintenance date',
    request=MaintenanceRequestSerializer,
    responses={
        201: MaintenanceLogSerializer,
        404: {'description': 'Equipment not found'},
    }
)
@api_view(['POST'])
@permission_classes([AllowAny])
def maintenance_create(request):
    """
    Log a maintenance event.
    """
    serializer = MaintenanceRequestSerializer(data=request.data)

    if not serializer.is_valid():
        return error_response(
            message='Invalid maintenance data',
            code='VALIDATION_ERROR',
            details=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )

    log = MaintenanceService().log_maintenance(**serializer.to_service_kwargs())

    return success_response(
        data=MaintenanceLogSerializer(log).data,
        message='Maintenance logged successfully',
        status_code=status.HTTP_201_CREATED
    )


@extend_schema(
    tags=['Maintenance'],
    summary='Get maintenance history',
    description='Get maintenance logs for one equipment, newest first',
    responses={
        200: MaintenanceLogSerializer(many=True),
        404: {'description': 'Equipment not found'},
    }
)
@api_view(['GET'])
@permission_classes([AllowAny])
def equipment_maintenance_history(request, equipment_id):
    """
    Get maintenance history for equipment.
    """
    logs = MaintenanceService().get_history(equipment_id)
    return success_response(
        data=MaintenanceLogSerializer(logs, many=True).data,
        message='Maintenance history retrieved successfully'
    )
