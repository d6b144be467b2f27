"""
Equipment Services

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.

EquipmentService is the surface used by the HTTP views. Every status write
it performs goes through the activation rule; the post-maintenance
reactivation lives in apps.maintenance.services.
"""
from django.db import transaction
from rest_framework.exceptions import ValidationError
import logging

from apps.core.exceptions import ResourceNotFoundError
from apps.core.pagination import paginate_queryset
from .models import Equipment, EquipmentType, EquipmentStatus
from .utils import ActivationRule

logger = logging.getLogger(__name__)

__all__ = ['EquipmentTypeService', 'EquipmentService', 'SORT_FIELDS', 'SORT_DIRECTIONS']


# Logical sort keys accepted at the API boundary -> ORM field names
SORT_FIELDS = {
    'id': 'id',
    'name': 'name',
    'status': 'status',
    'typeId': 'type_id',
    'lastCleanedDate': 'last_cleaned_date',
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
}

SORT_DIRECTIONS = ('asc', 'desc')


class EquipmentTypeService:
    """
    Read-only lookup over the equipment type catalogue.
    """

    def list(self):
        """
        Get all equipment types in id order.

        Returns:
            QuerySet of EquipmentType
        """
        return EquipmentType.objects.order_by('id')

    def resolve_or_throw(self, type_id):
        """
        Resolve an equipment type by id.

        Raises:
            ResourceNotFoundError: If no type has this id
        """
        try:
            return EquipmentType.objects.get(pk=type_id)
        except EquipmentType.DoesNotExist:
            raise ResourceNotFoundError('EquipmentType', type_id)


class EquipmentService:
    """
    Owns the create/read/update/delete contract for equipment and
    enforces the activation rule on every explicit write.
    """

    def __init__(self, type_service=None, activation_rule=None):
        """
        Args:
            type_service: EquipmentTypeService used for type validation
            activation_rule: ActivationRule instance; built from settings when omitted
        """
        self.type_service = type_service or EquipmentTypeService()
        self.activation_rule = activation_rule or ActivationRule()

    @property
    def active_status(self):
        return self.activation_rule.active_status

    def list(self, search=None, status=None, page=0, size=10, sort_by='createdAt', sort_dir='desc'):
        """
        Get one page of equipment filtered by name and status.

        Args:
            search: Case-insensitive substring of the name; blank means no filter
            status: Exact status to match; blank means no filter
            page: Zero-based page index
            size: Page size
            sort_by: One of SORT_FIELDS
            sort_dir: 'asc' or 'desc' (case-insensitive)

        Returns:
            Page of Equipment
        """
        errors = {}
        if page is None or page < 0:
            errors['page'] = ['Page index must be greater than or equal to 0.']
        if size is None or size < 1:
            errors['size'] = ['Page size must be greater than 0.']
        if errors:
            raise ValidationError(errors)

        if sort_by not in SORT_FIELDS:
            raise ValidationError({'sortBy': [f"Unsupported sort field '{sort_by}'."]})

        direction = (sort_dir or '').lower()
        if direction not in SORT_DIRECTIONS:
            raise ValidationError({'sortDir': [f"Sort direction must be one of: {', '.join(SORT_DIRECTIONS)}."]})

        queryset = Equipment.objects.select_related('type')

        search = (search or '').strip()
        if search:
            queryset = queryset.filter(name__icontains=search)

        status = (status or '').strip()
        if status:
            queryset = queryset.filter(status=status)

        prefix = '-' if direction == 'desc' else ''
        ordering = [f"{prefix}{SORT_FIELDS[sort_by]}"]
        if sort_by != 'id':
            # Stable paging across equal sort keys
            ordering.append(f"{prefix}id")
        queryset = queryset.order_by(*ordering)

        return paginate_queryset(queryset, page, size)

    def get_by_id(self, equipment_id):
        """Get equipment detail including its type."""
        return self.find_or_throw(equipment_id)

    def find_or_throw(self, equipment_id):
        """
        Resolve equipment by id.

        Raises:
            ResourceNotFoundError: If no equipment has this id
        """
        try:
            return Equipment.objects.select_related('type').get(pk=equipment_id)
        except Equipment.DoesNotExist:
            raise ResourceNotFoundError('Equipment', equipment_id)

    def _validate_status(self, status):
        if status not in EquipmentStatus.values:
            raise ValidationError({
                'status': [f"Status must be one of: {', '.join(EquipmentStatus.values)}"]
            })

    def create(self, name, type_id, status, last_cleaned_date=None):
        """
        Create equipment after validating its type and the activation rule.

        Raises:
            ResourceNotFoundError: If type_id does not resolve
            BusinessRuleViolation: If status is active and the cleaning date is missing or stale
        """
        self._validate_status(status)

        with transaction.atomic():
            equipment_type = self.type_service.resolve_or_throw(type_id)
            self.activation_rule.enforce(status, last_cleaned_date)

            equipment = Equipment.objects.create(
                name=name,
                type=equipment_type,
                status=status,
                last_cleaned_date=last_cleaned_date
            )

        logger.info(f"Equipment created: {equipment.name} (id={equipment.pk}, status={equipment.status})")
        return equipment

    def update(self, equipment_id, name, type_id, status, last_cleaned_date=None):
        """
        Replace the mutable fields of an existing equipment.

        Raises:
            ResourceNotFoundError: If equipment_id or type_id does not resolve
            BusinessRuleViolation: If status is active and the cleaning date is missing or stale
        """
        self._validate_status(status)

        with transaction.atomic():
            equipment = self.find_or_throw(equipment_id)
            equipment_type = self.type_service.resolve_or_throw(type_id)
            self.activation_rule.enforce(status, last_cleaned_date)

            equipment.name = name
            equipment.type = equipment_type
            equipment.status = status
            equipment.last_cleaned_date = last_cleaned_date
            equipment.save()

        logger.info(f"Equipment updated: {equipment.name} (id={equipment.pk}, status={equipment.status})")
        return equipment

    def delete(self, equipment_id):
        """
        Delete equipment together with its maintenance logs.

        Raises:
            ResourceNotFoundError: If equipment_id does not resolve
        """
        with transaction.atomic():
            equipment = self.find_or_throw(equipment_id)
            _, deleted = equipment.delete()

        log_count = sum(count for label, count in deleted.items() if label != Equipment._meta.label)
        logger.info(f"Equipment deleted: {equipment.name} (id={equipment_id}), {log_count} maintenance log(s) removed")
