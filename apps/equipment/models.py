"""
Equipment Models

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.db import models
from apps.core.models import CreatedAtMixin, TimestampMixin


class EquipmentType(CreatedAtMixin):
    """
    Named category an Equipment belongs to.
    Read-only catalogue: rows are seeded, never edited through the API.
    """
    name = models.CharField(max_length=100, unique=True, help_text="Display name of the type")

    class Meta:
        db_table = 'equipment_types'
        verbose_name = 'Equipment Type'
        verbose_name_plural = 'Equipment Types'
        ordering = ['id']

    def __str__(self):
        return self.name


class EquipmentStatus(models.TextChoices):
    ACTIVE = 'Active', 'Active'
    INACTIVE = 'Inactive', 'Inactive'
    UNDER_MAINTENANCE = 'Under Maintenance', 'Under Maintenance'


class Equipment(TimestampMixin):
    """
    Equipment model - a physical asset tracked in the facility.
    Status is limited to EquipmentStatus both here and by a database check constraint.
    """

    name = models.CharField(max_length=255, help_text="Equipment name")

    type = models.ForeignKey(
        EquipmentType,
        on_delete=models.PROTECT,
        related_name='equipment_items',
        db_column='type_id',
        help_text="Equipment type"
    )

    status = models.CharField(
        max_length=20,
        choices=EquipmentStatus.choices,
        db_index=True,
        help_text="Current lifecycle status"
    )

    last_cleaned_date = models.DateField(null=True, blank=True, help_text="Date of the most recent cleaning")

    class Meta:
        db_table = 'equipment'
        verbose_name = 'Equipment'
        verbose_name_plural = 'Equipment'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=EquipmentStatus.values),
                name='equipment_status_check',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.status})"

    @property
    def type_name(self):
        return self.type.name if self.type_id else None
