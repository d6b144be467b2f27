"""
Equipment Views

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    EquipmentSerializer, EquipmentRequestSerializer, EquipmentListQuerySerializer,
    EquipmentTypeSerializer
)
from .services import EquipmentService, EquipmentTypeService
from apps.core.responses import success_response, error_response, page_response, no_content_response


@extend_schema(
    tags=['Equipment'],
    summary='List and create equipment',
    description='Get a paginated list of equipment with search, status filter and sorting, or create new equipment',
    parameters=[
        OpenApiParameter('search', str, description='Case-insensitive substring of the equipment name'),
        OpenApiParameter('status', str, description='Filter by exact status',
                         enum=['Active', 'Inactive', 'Under Maintenance']),
        OpenApiParameter('page', int, description='Zero-based page index (default 0)'),
        OpenApiParameter('size', int, description='Items per page (default 10)'),
        OpenApiParameter('sortBy', str, description='Sort field (default createdAt)',
                         enum=['id', 'name', 'status', 'typeId', 'lastCleanedDate', 'createdAt', 'updatedAt']),
        OpenApiParameter('sortDir', str, description='Sort direction (default desc)', enum=['asc', 'desc']),
    ],
    request=EquipmentRequestSerializer,
    responses={
        200: EquipmentSerializer(many=True),
        201: EquipmentSerializer,
    }
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def equipment_list_create(request):
    """
    List equipment with pagination and filtering, or create new equipment.
    """
    service = EquipmentService()

    if request.method == 'GET':
        query = EquipmentListQuerySerializer(data=request.query_params)

        if not query.is_valid():
            return error_response(
                message='Invalid list parameters',
                code='VALIDATION_ERROR',
                details=query.errors,
                status_code=status.HTTP_400_BAD_REQUEST
            )

        page = service.list(**query.to_service_kwargs())
        return page_response(page, EquipmentSerializer, message='Equipment retrieved successfully')

    serializer = EquipmentRequestSerializer(data=request.data)

    if not serializer.is_valid():
        return error_response(
            message='Invalid equipment data',
            code='VALIDATION_ERROR',
            details=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )

    equipment = service.create(**serializer.to_service_kwargs())

    return success_response(
        data=EquipmentSerializer(equipment).data,
        message='Equipment created successfully',
        status_code=status.HTTP_201_CREATED
    )


@extend_schema(
    tags=['Equipment'],
    summary='Get, update, or delete equipment',
    description='Retrieve equipment details, replace equipment fields, or delete equipment and its maintenance history',
    request=EquipmentRequestSerializer,
    responses={
        200: EquipmentSerializer,
        204: None,
        404: {'description': 'Equipment not found'},
        422: {'description': 'Activation rule violated'},
    }
)
@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def equipment_detail(request, equipment_id):
    """
    Retrieve, update, or delete equipment.
    """
    service = EquipmentService()

    if request.method == 'GET':
        equipment = service.get_by_id(equipment_id)
        return success_response(
            data=EquipmentSerializer(equipment).data,
            message='Equipment retrieved successfully'
        )

    if request.method == 'PUT':
        serializer = EquipmentRequestSerializer(data=request.data)

        if not serializer.is_valid():
            return error_response(
                message='Invalid equipment data',
                code='VALIDATION_ERROR',
                details=serializer.errors,
                status_code=status.HTTP_400_BAD_REQUEST
            )

        equipment = service.update(equipment_id, **serializer.to_service_kwargs())
        return success_response(
            data=EquipmentSerializer(equipment).data,
            message='Equipment updated successfully'
        )

    service.delete(equipment_id)
    return no_content_response()


@extend_schema(
    tags=['Equipment'],
    summary='List equipment types',
    description='Get every equipment type in the catalogue',
    responses={200: EquipmentTypeSerializer(many=True)}
)
@api_view(['GET'])
@permission_classes([AllowAny])
def equipment_type_list(request):
    """
    List all equipment types.
    """
    types = EquipmentTypeService().list()
    return success_response(
        data=EquipmentTypeSerializer(types, many=True).data,
        message='Equipment types retrieved successfully'
    )
