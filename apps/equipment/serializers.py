"""
Equipment Serializers

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework import serializers
from .models import Equipment, EquipmentType, EquipmentStatus
from .services import SORT_FIELDS, SORT_DIRECTIONS


STATUS_ERROR = f"Status must be one of: {', '.join(EquipmentStatus.values)}"


class EquipmentTypeSerializer(serializers.ModelSerializer):
    """
    Serializer for the equipment type catalogue.
    """

    class Meta:
        model = EquipmentType
        fields = ['id', 'name']
        read_only_fields = fields


class EquipmentSerializer(serializers.ModelSerializer):
    """
    Serializer for Equipment with the denormalized type name.
    """
    typeId = serializers.IntegerField(source='type_id', read_only=True)
    typeName = serializers.CharField(source='type_name', read_only=True)
    lastCleanedDate = serializers.DateField(source='last_cleaned_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Equipment
        fields = [
            'id', 'name', 'typeId', 'typeName', 'status',
            'lastCleanedDate', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class EquipmentRequestSerializer(serializers.Serializer):
    """
    Serializer for create and full-replace update requests.
    Type existence and the activation rule are checked by EquipmentService.
    """
    name = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Equipment name is required',
            'blank': 'Equipment name is required',
            'null': 'Equipment name is required',
        }
    )
    typeId = serializers.IntegerField(
        error_messages={
            'required': 'Equipment type is required',
            'null': 'Equipment type is required',
        }
    )
    status = serializers.ChoiceField(
        choices=EquipmentStatus.choices,
        error_messages={
            'required': 'Status is required',
            'null': 'Status is required',
            'invalid_choice': STATUS_ERROR,
        }
    )
    lastCleanedDate = serializers.DateField(required=False, allow_null=True)

    def to_service_kwargs(self):
        """Map validated request fields to EquipmentService arguments."""
        data = self.validated_data
        return {
            'name': data['name'],
            'type_id': data['typeId'],
            'status': data['status'],
            'last_cleaned_date': data.get('lastCleanedDate'),
        }


class EquipmentListQuerySerializer(serializers.Serializer):
    """
    Serializer for list query parameters.
    """
    search = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(
        choices=EquipmentStatus.choices,
        required=False,
        allow_blank=True,
        default='',
        error_messages={'invalid_choice': STATUS_ERROR}
    )
    page = serializers.IntegerField(required=False, default=0, min_value=0)
    size = serializers.IntegerField(
        required=False,
        default=10,
        min_value=1
    )
    sortBy = serializers.ChoiceField(
        choices=list(SORT_FIELDS),
        required=False,
        default='createdAt',
        error_messages={'invalid_choice': f"Sort field must be one of: {', '.join(SORT_FIELDS)}"}
    )
    sortDir = serializers.CharField(required=False, default='desc')

    def validate_sortDir(self, value):
        value = value.lower()
        if value not in SORT_DIRECTIONS:
            raise serializers.ValidationError(
                f"Sort direction must be one of: {', '.join(SORT_DIRECTIONS)}"
            )
        return value

    def to_service_kwargs(self):
        data = self.validated_data
        return {
            'search': data['search'],
            'status': data['status'],
            'page': data['page'],
            'size': data['size'],
            'sort_by': data['sortBy'],
            'sort_dir': data['sortDir'],
        }
