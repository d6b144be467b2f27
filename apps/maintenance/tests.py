"""
Maintenance Tests

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from datetime import date, datetime, timedelta, timezone as dt_timezone
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.core.exceptions import ResourceNotFoundError
from apps.equipment.models import Equipment, EquipmentType, EquipmentStatus
from apps.equipment import services as equipment_services
from apps.equipment.services import EquipmentService
from .models import MaintenanceLog
from . import services as maintenance_services
from .services import MaintenanceService


class MaintenanceServiceTest(TestCase):
    """Test maintenance logging and its effect on equipment."""

    def setUp(self):
        self.pump = EquipmentType.objects.create(name='Pump')
        self.equipment = Equipment.objects.create(
            name='Pump A',
            type=self.pump,
            status=EquipmentStatus.INACTIVE
        )
        self.service = MaintenanceService()

    def test_log_maintenance_activates_equipment(self):
        maintenance_date = date(2024, 3, 14)

        log = self.service.log_maintenance(
            self.equipment.id, maintenance_date, 'Sam Rivera', notes='Replaced seals'
        )

        self.assertEqual(log.equipment_id, self.equipment.id)
        self.assertEqual(log.notes, 'Replaced seals')
        self.assertEqual(log.performed_by, 'Sam Rivera')

        self.equipment.refresh_from_db()
        self.assertEqual(self.equipment.status, 'Active')
        self.assertEqual(self.equipment.last_cleaned_date, maintenance_date)

    def test_log_maintenance_skips_activation_rule(self):
        # Older than the 30-day threshold, still accepted as the fresh cleaning date
        maintenance_date = timezone.localdate() - timedelta(days=90)

        self.service.log_maintenance(self.equipment.id, maintenance_date, 'Sam Rivera')

        self.equipment.refresh_from_db()
        self.assertEqual(self.equipment.status, 'Active')
        self.assertEqual(self.equipment.last_cleaned_date, maintenance_date)

    def test_log_maintenance_refreshes_updated_at(self):
        before = datetime(2020, 1, 1, tzinfo=dt_timezone.utc)
        Equipment.objects.filter(pk=self.equipment.pk).update(updated_at=before)

        self.service.log_maintenance(self.equipment.id, date(2024, 3, 14), 'Sam Rivera')

        self.equipment.refresh_from_db()
        self.assertGreater(self.equipment.updated_at, before)

    def test_log_maintenance_unknown_equipment(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.log_maintenance(999, date(2024, 3, 14), 'Sam Rivera')

        self.assertFalse(MaintenanceLog.objects.exists())

    def test_failed_equipment_update_rolls_back_log(self):
        with mock.patch.object(
            maintenance_services._EquipmentGateway, 'apply_maintenance_update', side_effect=DatabaseError('write failed')
        ):
            with self.assertRaises(DatabaseError):
                self.service.log_maintenance(self.equipment.id, date(2024, 3, 14), 'Sam Rivera')

        self.assertFalse(MaintenanceLog.objects.exists())
        self.equipment.refresh_from_db()
        self.assertEqual(self.equipment.status, 'Inactive')
        self.assertIsNone(self.equipment.last_cleaned_date)

    def test_rule_free_activation_only_in_maintenance_module(self):
        self.assertEqual(maintenance_services.__all__, ['MaintenanceService'])
        self.assertNotIn('apply_maintenance_update', dir(EquipmentService))
        self.assertEqual([name for name in dir(equipment_services) if 'Gateway' in name], [])

    def test_history_newest_first(self):
        self.service.log_maintenance(self.equipment.id, date(2024, 1, 1), 'A')
        self.service.log_maintenance(self.equipment.id, date(2024, 3, 1), 'B')
        self.service.log_maintenance(self.equipment.id, date(2024, 2, 1), 'C')

        history = self.service.get_history(self.equipment.id)

        self.assertEqual([log.performed_by for log in history], ['B', 'C', 'A'])

    def test_history_ties_broken_by_creation_time(self):
        first = self.service.log_maintenance(self.equipment.id, date(2024, 1, 1), 'First')
        second = self.service.log_maintenance(self.equipment.id, date(2024, 1, 1), 'Second')
        t1 = datetime(2024, 1, 1, 8, 0, tzinfo=dt_timezone.utc)
        # Give the earlier row the later timestamp: creation time wins over id
        MaintenanceLog.objects.filter(pk=first.pk).update(created_at=t1 + timedelta(hours=1))
        MaintenanceLog.objects.filter(pk=second.pk).update(created_at=t1)

        history = self.service.get_history(self.equipment.id)

        self.assertEqual([log.pk for log in history], [first.pk, second.pk])

    def test_history_only_for_requested_equipment(self):
        other = Equipment.objects.create(name='Fan B', type=self.pump, status=EquipmentStatus.INACTIVE)
        self.service.log_maintenance(self.equipment.id, date(2024, 1, 1), 'A')
        self.service.log_maintenance(other.id, date(2024, 1, 2), 'B')

        history = self.service.get_history(self.equipment.id)

        self.assertEqual([log.performed_by for log in history], ['A'])

    def test_history_empty(self):
        self.assertEqual(self.service.get_history(self.equipment.id), [])

    def test_history_after_equipment_deleted(self):
        self.service.log_maintenance(self.equipment.id, date(2024, 1, 1), 'A')
        EquipmentService().delete(self.equipment.id)

        self.assertFalse(MaintenanceLog.objects.exists())
        with self.assertRaises(ResourceNotFoundError):
            self.service.get_history(self.equipment.id)


class MaintenanceAPITest(APITestCase):
    """Test the maintenance HTTP endpoints."""

    url = '/api/v1/maintenance/'

    def setUp(self):
        self.pump = EquipmentType.objects.create(name='Pump')
        self.equipment = Equipment.objects.create(
            name='Pump A',
            type=self.pump,
            status=EquipmentStatus.UNDER_MAINTENANCE
        )

    def history_url(self, equipment_id):
        return f'/api/v1/equipment/{equipment_id}/maintenance/'

    def test_log_maintenance(self):
        response = self.client.post(self.url, {
            'equipmentId': self.equipment.id,
            'maintenanceDate': '2024-05-02',
            'notes': 'Filter swap',
            'performedBy': 'Jordan Lee',
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertEqual(data['equipmentId'], self.equipment.id)
        self.assertEqual(data['equipmentName'], 'Pump A')
        self.assertEqual(data['maintenanceDate'], '2024-05-02')
        self.assertEqual(data['notes'], 'Filter swap')
        self.assertEqual(data['performedBy'], 'Jordan Lee')
        self.assertIn('createdAt', data)

        equipment = self.client.get(f'/api/v1/equipment/{self.equipment.id}/').data['data']
        self.assertEqual(equipment['status'], 'Active')
        self.assertEqual(equipment['lastCleanedDate'], '2024-05-02')

    def test_log_maintenance_without_notes(self):
        response = self.client.post(self.url, {
            'equipmentId': self.equipment.id,
            'maintenanceDate': '2024-05-02',
            'performedBy': 'Jordan Lee',
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(response.data['data']['notes'])

    def test_log_maintenance_requires_fields(self):
        response = self.client.post(self.url, {'equipmentId': self.equipment.id, 'performedBy': ''})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        details = response.data['error']['details']
        self.assertEqual([str(m) for m in details['maintenanceDate']], ['Maintenance date is required'])
        self.assertEqual([str(m) for m in details['performedBy']], ['Performed by is required'])
        self.assertFalse(MaintenanceLog.objects.exists())

    def test_log_maintenance_unknown_equipment(self):
        response = self.client.post(self.url, {
            'equipmentId': 999,
            'maintenanceDate': '2024-05-02',
            'performedBy': 'Jordan Lee',
        })

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['message'], 'Equipment not found with id: 999')

    def test_history(self):
        MaintenanceLog.objects.create(equipment=self.equipment, maintenance_date=date(2024, 1, 1), performed_by='A')
        MaintenanceLog.objects.create(equipment=self.equipment, maintenance_date=date(2024, 2, 1), performed_by='B')

        response = self.client.get(self.history_url(self.equipment.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['performedBy'] for item in response.data['data']], ['B', 'A'])
        self.assertEqual(response.data['data'][0]['equipmentName'], 'Pump A')

    def test_history_unknown_equipment(self):
        response = self.client.get(self.history_url(999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['code'], 'NOT_FOUND')

    def test_delete_equipment_then_history(self):
        MaintenanceLog.objects.create(equipment=self.equipment, maintenance_date=date(2024, 1, 1), performed_by='A')

        self.client.delete(f'/api/v1/equipment/{self.equipment.id}/')
        response = self.client.get(self.history_url(self.equipment.id))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(MaintenanceLog.objects.exists())
