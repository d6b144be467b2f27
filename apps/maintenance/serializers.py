"""
Maintenance Serializers

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from rest_framework import serializers
from .models import MaintenanceLog


class MaintenanceLogSerializer(serializers.ModelSerializer):
    """
    Serializer for MaintenanceLog with the denormalized equipment name.
    """
    equipmentId = serializers.IntegerField(source='equipment_id', read_only=True)
    equipmentName = serializers.CharField(source='equipment.name', read_only=True)
    maintenanceDate = serializers.DateField(source='maintenance_date', read_only=True)
    performedBy = serializers.CharField(source='performed_by', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = MaintenanceLog
        fields = [
            'id', 'equipmentId', 'equipmentName', 'maintenanceDate',
            'notes', 'performedBy', 'createdAt'
        ]
        read_only_fields = fields


class MaintenanceRequestSerializer(serializers.Serializer):
    """
    Serializer for logging a maintenance event.
    """
    equipmentId = serializers.IntegerField(
        error_messages={
            'required': 'Equipment ID is required',
            'null': 'Equipment ID is required',
        }
    )
    maintenanceDate = serializers.DateField(
        error_messages={
            'required': 'Maintenance date is required',
            'null': 'Maintenance date is required',
        }
    )
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    performedBy = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Performed by is required',
            'blank': 'Performed by is required',
            'null': 'Performed by is required',
        }
    )

    def to_service_kwargs(self):
        data = self.validated_data
        return {
            'equipment_id': data['equipmentId'],
            'maintenance_date': data['maintenanceDate'],
            'notes': data.get('notes') or None,
            'performed_by': data['performedBy'],
        }
