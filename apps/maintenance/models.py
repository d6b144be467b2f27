"""
Maintenance Models

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.db import models
from apps.core.models import CreatedAtMixin


class MaintenanceLog(CreatedAtMixin):
    """
    Immutable record of a cleaning/maintenance event on one equipment.
    Rows are only removed together with their equipment (cascade).
    """
    equipment = models.ForeignKey(
        'equipment.Equipment',
        on_delete=models.CASCADE,
        related_name='maintenance_logs',
        db_column='equipment_id',
        help_text="Equipment the maintenance was performed on"
    )
    maintenance_date = models.DateField(help_text="Date the maintenance was performed")
    notes = models.TextField(null=True, blank=True, help_text="Free-text notes")
    performed_by = models.CharField(max_length=255, help_text="Name of the person who performed the maintenance")

    class Meta:
        db_table = 'maintenance_logs'
        verbose_name = 'Maintenance Log'
        verbose_name_plural = 'Maintenance Logs'
        ordering = ['-maintenance_date', '-created_at', '-id']
        indexes = [
            models.Index(fields=['equipment', 'maintenance_date'], name='maintenance_equip_date_idx'),
        ]

    def __str__(self):
        return f"Maintenance on {self.equipment_id} at {self.maintenance_date} by {self.performed_by}"
