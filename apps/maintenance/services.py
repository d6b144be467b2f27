"""
Maintenance Service

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.

Logging maintenance is the only path that sets equipment active without the
activation rule. That write is held by the module-private _EquipmentGateway,
which MaintenanceService builds for itself; EquipmentService offers no
equivalent.
"""
from django.db import transaction
import logging

from apps.equipment.services import EquipmentService
from .models import MaintenanceLog

logger = logging.getLogger(__name__)

__all__ = ['MaintenanceService']


class _EquipmentGateway:
    """
    Equipment operations reserved for the maintenance workflow.
    """

    def __init__(self, equipment_service=None):
        self.equipment_service = equipment_service or EquipmentService()

    def find_or_throw(self, equipment_id):
        return self.equipment_service.find_or_throw(equipment_id)

    def apply_maintenance_update(self, equipment, maintenance_date):
        """
        Mark equipment freshly cleaned: status becomes active and the
        cleaning date becomes the maintenance date. The activation rule is
        not evaluated because the maintenance date is the new cleaning date.

        Args:
            equipment: Equipment instance
            maintenance_date: date of the maintenance just logged
        """
        with transaction.atomic():
            equipment.status = self.equipment_service.active_status
            equipment.last_cleaned_date = maintenance_date
            equipment.save(update_fields=['status', 'last_cleaned_date', 'updated_at'])

        logger.info(
            f"Equipment {equipment.pk} marked {equipment.status} after maintenance on {maintenance_date}"
        )
        return equipment


class MaintenanceService:
    """
    Records maintenance events and keeps the owning equipment in step.
    """

    def __init__(self, equipment_service=None):
        """
        Args:
            equipment_service: EquipmentService used to resolve equipment and read the active status
        """
        self._gateway = _EquipmentGateway(equipment_service)

    def log_maintenance(self, equipment_id, maintenance_date, performed_by, notes=None):
        """
        Log a maintenance event and mark the equipment freshly cleaned.

        The log insert and the equipment update run in one transaction:
        if the equipment update fails the log row is rolled back too.

        Args:
            equipment_id: Id of the equipment maintained
            maintenance_date: Date the maintenance was performed
            performed_by: Name of the person who performed it
            notes: Optional free-text notes

        Returns:
            MaintenanceLog instance (with equipment loaded)

        Raises:
            ResourceNotFoundError: If equipment_id does not resolve
        """
        with transaction.atomic():
            equipment = self._gateway.find_or_throw(equipment_id)

            log = MaintenanceLog.objects.create(
                equipment=equipment,
                maintenance_date=maintenance_date,
                notes=notes,
                performed_by=performed_by
            )

            self._gateway.apply_maintenance_update(equipment, maintenance_date)

        logger.info(
            f"Maintenance logged: log={log.pk} equipment={equipment.pk} "
            f"date={maintenance_date} by {performed_by}"
        )
        return log

    def get_history(self, equipment_id):
        """
        Get maintenance history for one equipment, newest first.

        Ordered by maintenance date descending, then creation time descending.

        Raises:
            ResourceNotFoundError: If equipment_id does not resolve
        """
        equipment = self._gateway.find_or_throw(equipment_id)

        return list(
            MaintenanceLog.objects
            .filter(equipment=equipment)
            .select_related('equipment')
            .order_by('-maintenance_date', '-created_at', '-id')
        )
