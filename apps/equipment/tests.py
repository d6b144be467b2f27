"""
Equipment Tests

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from datetime import date, timedelta

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from django.test import SimpleTestCase, TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APITestCase

from apps.core.exceptions import BusinessRuleViolation, ResourceNotFoundError
from apps.maintenance.models import MaintenanceLog
from .models import Equipment, EquipmentType, EquipmentStatus
from .services import EquipmentService
from .utils import ActivationRule


TODAY = date(2024, 6, 30)


def fixed_rule():
    return ActivationRule(today=lambda: TODAY)


class ActivationRuleTest(SimpleTestCase):
    """Test the activation rule in isolation."""

    def setUp(self):
        self.rule = fixed_rule()

    def test_defaults_come_from_settings(self):
        self.assertEqual(self.rule.active_status, 'Active')
        self.assertEqual(self.rule.max_days_since_cleaning, 30)

    def test_non_active_status_is_unconstrained(self):
        for status_value in (EquipmentStatus.INACTIVE, EquipmentStatus.UNDER_MAINTENANCE):
            self.assertEqual(self.rule.check(status_value, None), (True, None))
            self.assertEqual(self.rule.check(status_value, TODAY - timedelta(days=400)), (True, None))

    def test_active_requires_cleaning_date(self):
        allowed, message = self.rule.check(EquipmentStatus.ACTIVE, None)

        self.assertFalse(allowed)
        self.assertIn('Last Cleaned Date is required', message)

    def test_boundary_thirty_days_allowed(self):
        self.assertEqual(self.rule.check(EquipmentStatus.ACTIVE, TODAY - timedelta(days=29)), (True, None))
        self.assertEqual(self.rule.check(EquipmentStatus.ACTIVE, TODAY - timedelta(days=30)), (True, None))

    def test_thirty_one_days_rejected_with_day_count(self):
        with self.assertRaises(BusinessRuleViolation) as ctx:
            self.rule.enforce(EquipmentStatus.ACTIVE, TODAY - timedelta(days=31))

        self.assertIn('31 days ago', ctx.exception.message)
        self.assertEqual(ctx.exception.code, 'BUSINESS_RULE_VIOLATION')

    def test_threshold_is_configurable(self):
        rule = ActivationRule(max_days_since_cleaning=7, today=lambda: TODAY)

        self.assertTrue(rule.check(EquipmentStatus.ACTIVE, TODAY - timedelta(days=7))[0])
        self.assertFalse(rule.check(EquipmentStatus.ACTIVE, TODAY - timedelta(days=8))[0])


class EquipmentModelTest(TestCase):
    """Test storage-level guarantees."""

    def test_status_check_constraint(self):
        pump = EquipmentType.objects.create(name='Pump')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Equipment.objects.create(name='Pump A', type=pump, status='Broken')

    def test_type_in_use_cannot_be_deleted(self):
        pump = EquipmentType.objects.create(name='Pump')
        Equipment.objects.create(name='Pump A', type=pump, status=EquipmentStatus.INACTIVE)

        with self.assertRaises(ProtectedError):
            pump.delete()


class EquipmentServiceTest(TestCase):
    """Test the equipment lifecycle operations."""

    def setUp(self):
        self.pump = EquipmentType.objects.create(name='Pump')
        self.fan = EquipmentType.objects.create(name='Fan')
        self.service = EquipmentService(activation_rule=fixed_rule())

    def test_create_inactive_without_date(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)

        self.assertIsNotNone(equipment.pk)
        self.assertEqual(equipment.status, 'Inactive')
        self.assertIsNone(equipment.last_cleaned_date)
        self.assertIsNotNone(equipment.created_at)
        self.assertIsNotNone(equipment.updated_at)

    def test_create_active_with_fresh_date(self):
        equipment = self.service.create(
            'Pump A', self.pump.id, EquipmentStatus.ACTIVE, TODAY - timedelta(days=30)
        )

        self.assertEqual(equipment.status, 'Active')

    def test_create_active_with_stale_date_writes_nothing(self):
        with self.assertRaises(BusinessRuleViolation):
            self.service.create('Pump A', self.pump.id, EquipmentStatus.ACTIVE, TODAY - timedelta(days=31))

        self.assertFalse(Equipment.objects.exists())

    def test_create_active_without_date_rejected(self):
        with self.assertRaises(BusinessRuleViolation):
            self.service.create('Pump A', self.pump.id, EquipmentStatus.ACTIVE)

    def test_create_with_unknown_status(self):
        with self.assertRaises(ValidationError):
            self.service.create('Pump A', self.pump.id, 'Retired')

        self.assertFalse(Equipment.objects.exists())

    def test_create_with_unknown_type(self):
        with self.assertRaises(ResourceNotFoundError) as ctx:
            self.service.create('Pump A', 999, EquipmentStatus.INACTIVE)

        self.assertEqual(ctx.exception.message, 'EquipmentType not found with id: 999')

    def test_update_replaces_fields(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)

        updated = self.service.update(
            equipment.id, 'Fan B', self.fan.id, EquipmentStatus.ACTIVE, TODAY - timedelta(days=1)
        )

        updated.refresh_from_db()
        self.assertEqual(updated.name, 'Fan B')
        self.assertEqual(updated.type_id, self.fan.id)
        self.assertEqual(updated.status, 'Active')
        self.assertEqual(updated.last_cleaned_date, TODAY - timedelta(days=1))

    def test_update_clears_cleaning_date(self):
        equipment = self.service.create(
            'Pump A', self.pump.id, EquipmentStatus.INACTIVE, TODAY - timedelta(days=3)
        )

        updated = self.service.update(equipment.id, 'Pump A', self.pump.id, EquipmentStatus.UNDER_MAINTENANCE)

        self.assertIsNone(updated.last_cleaned_date)

    def test_update_with_unknown_type_leaves_record_unchanged(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)

        with self.assertRaises(ResourceNotFoundError):
            self.service.update(equipment.id, 'Renamed', 999, EquipmentStatus.UNDER_MAINTENANCE)

        equipment.refresh_from_db()
        self.assertEqual(equipment.name, 'Pump A')
        self.assertEqual(equipment.type_id, self.pump.id)
        self.assertEqual(equipment.status, 'Inactive')

    def test_update_to_active_with_stale_date_leaves_record_unchanged(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)

        with self.assertRaises(BusinessRuleViolation):
            self.service.update(
                equipment.id, 'Pump A', self.pump.id, EquipmentStatus.ACTIVE, TODAY - timedelta(days=45)
            )

        equipment.refresh_from_db()
        self.assertEqual(equipment.status, 'Inactive')
        self.assertIsNone(equipment.last_cleaned_date)

    def test_update_unknown_equipment(self):
        with self.assertRaises(ResourceNotFoundError):
            self.service.update(999, 'Pump A', self.pump.id, EquipmentStatus.INACTIVE)

    def test_delete_removes_maintenance_logs(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)
        MaintenanceLog.objects.create(equipment=equipment, maintenance_date=TODAY, performed_by='Sam')
        MaintenanceLog.objects.create(equipment=equipment, maintenance_date=TODAY, performed_by='Alex')

        self.service.delete(equipment.id)

        self.assertFalse(Equipment.objects.filter(pk=equipment.id).exists())
        self.assertFalse(MaintenanceLog.objects.filter(equipment_id=equipment.id).exists())

    def test_second_delete_fails_not_found(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)
        self.service.delete(equipment.id)

        with self.assertRaises(ResourceNotFoundError):
            self.service.delete(equipment.id)

    def test_get_by_id_includes_type(self):
        equipment = self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)

        found = self.service.get_by_id(equipment.id)

        self.assertEqual(found.type_name, 'Pump')

    def test_get_by_id_unknown(self):
        with self.assertRaises(ResourceNotFoundError) as ctx:
            self.service.get_by_id(42)

        self.assertEqual(ctx.exception.message, 'Equipment not found with id: 42')


class EquipmentListTest(TestCase):
    """Test searching, filtering, sorting and paging."""

    def setUp(self):
        self.pump = EquipmentType.objects.create(name='Pump')
        self.fan = EquipmentType.objects.create(name='Fan')
        self.service = EquipmentService(activation_rule=fixed_rule())
        self.service.create('Pump A', self.pump.id, EquipmentStatus.INACTIVE)
        self.service.create('Water Pump', self.pump.id, EquipmentStatus.UNDER_MAINTENANCE)
        self.service.create('Fan B', self.fan.id, EquipmentStatus.INACTIVE)

    def names(self, page):
        return [equipment.name for equipment in page.content]

    def test_search_is_case_insensitive_substring(self):
        page = self.service.list(search='pump', sort_by='name', sort_dir='asc')

        self.assertEqual(self.names(page), ['Pump A', 'Water Pump'])
        self.assertEqual(page.total_elements, 2)

    def test_blank_search_means_no_filter(self):
        page = self.service.list(search='   ')

        self.assertEqual(page.total_elements, 3)

    def test_status_filter(self):
        page = self.service.list(status='Inactive', sort_by='name', sort_dir='asc')

        self.assertEqual(self.names(page), ['Fan B', 'Pump A'])

    def test_search_and_status_combined(self):
        page = self.service.list(search='PUMP', status='Under Maintenance')

        self.assertEqual(self.names(page), ['Water Pump'])

    def test_default_order_is_newest_first(self):
        page = self.service.list()

        self.assertEqual(self.names(page), ['Fan B', 'Water Pump', 'Pump A'])

    def test_sort_by_type_id(self):
        page = self.service.list(sort_by='typeId', sort_dir='DESC')

        self.assertEqual(page.content[0].type_id, self.fan.id)

    def test_paging_metadata(self):
        page = self.service.list(page=1, size=2, sort_by='name', sort_dir='asc')

        self.assertEqual(self.names(page), ['Water Pump'])
        self.assertEqual(page.metadata(), {
            'page': 1,
            'size': 2,
            'totalElements': 3,
            'totalPages': 2,
            'last': True,
        })

    def test_out_of_range_page_is_empty_and_last(self):
        page = self.service.list(page=5, size=2)

        self.assertEqual(page.content, [])
        self.assertTrue(page.is_last)
        self.assertEqual(page.total_elements, 3)
        self.assertEqual(page.total_pages, 2)

    def test_unknown_sort_field_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.list(sort_by='name; DROP TABLE equipment')

    def test_unknown_sort_direction_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.list(sort_dir='sideways')

    def test_invalid_paging_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.list(page=-1, size=0)

        self.assertIn('page', ctx.exception.detail)
        self.assertIn('size', ctx.exception.detail)

    def test_large_page_size_returns_everything(self):
        page = self.service.list(size=500)

        self.assertEqual(len(page.content), 3)
        self.assertEqual(page.size, 500)
        self.assertEqual(page.total_pages, 1)
        self.assertTrue(page.is_last)


class EquipmentAPITest(APITestCase):
    """Test the equipment HTTP endpoints."""

    list_url = '/api/v1/equipment/'

    def setUp(self):
        self.pump = EquipmentType.objects.create(name='Pump')
        self.today = timezone.localdate()

    def detail_url(self, equipment_id):
        return f'/api/v1/equipment/{equipment_id}/'

    def payload(self, **overrides):
        data = {
            'name': 'Pump A',
            'typeId': self.pump.id,
            'status': 'Inactive',
            'lastCleanedDate': None,
        }
        data.update(overrides)
        return data

    def test_create(self):
        response = self.client.post(
            self.list_url,
            self.payload(status='Active', lastCleanedDate=str(self.today - timedelta(days=2)))
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertTrue(response.data['success'])
        self.assertEqual(data['name'], 'Pump A')
        self.assertEqual(data['typeId'], self.pump.id)
        self.assertEqual(data['typeName'], 'Pump')
        self.assertEqual(data['status'], 'Active')
        self.assertEqual(data['lastCleanedDate'], str(self.today - timedelta(days=2)))
        self.assertIn('createdAt', data)
        self.assertIn('updatedAt', data)

    def test_create_rejects_unknown_status(self):
        response = self.client.post(self.list_url, self.payload(status='Retired'))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')
        self.assertIn('status', response.data['error']['details'])

    def test_create_rejects_blank_name(self):
        response = self.client.post(self.list_url, self.payload(name=''))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            [str(message) for message in response.data['error']['details']['name']],
            ['Equipment name is required']
        )

    def test_create_active_without_date_is_business_rule_violation(self):
        response = self.client.post(self.list_url, self.payload(status='Active'))

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error']['code'], 'BUSINESS_RULE_VIOLATION')
        self.assertIn('timestamp', response.data['meta'])
        self.assertFalse(Equipment.objects.exists())

    def test_create_active_with_stale_date_reports_day_count(self):
        response = self.client.post(
            self.list_url,
            self.payload(status='Active', lastCleanedDate=str(self.today - timedelta(days=31)))
        )

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertIn('31 days ago', response.data['error']['message'])

    def test_create_with_unknown_type(self):
        response = self.client.post(self.list_url, self.payload(typeId=999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['code'], 'NOT_FOUND')
        self.assertEqual(response.data['error']['message'], 'EquipmentType not found with id: 999')

    def test_get(self):
        equipment = Equipment.objects.create(name='Pump A', type=self.pump, status='Inactive')

        response = self.client.get(self.detail_url(equipment.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['id'], equipment.id)
        self.assertEqual(response.data['data']['typeName'], 'Pump')

    def test_get_unknown(self):
        response = self.client.get(self.detail_url(999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['message'], 'Equipment not found with id: 999')

    def test_update(self):
        equipment = Equipment.objects.create(name='Pump A', type=self.pump, status='Inactive')

        response = self.client.put(
            self.detail_url(equipment.id),
            self.payload(name='Pump A2', status='Under Maintenance')
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['name'], 'Pump A2')
        self.assertEqual(response.data['data']['status'], 'Under Maintenance')

    def test_update_with_unknown_type_leaves_record(self):
        equipment = Equipment.objects.create(name='Pump A', type=self.pump, status='Inactive')

        response = self.client.put(self.detail_url(equipment.id), self.payload(name='Other', typeId=999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        equipment.refresh_from_db()
        self.assertEqual(equipment.name, 'Pump A')

    def test_delete(self):
        equipment = Equipment.objects.create(name='Pump A', type=self.pump, status='Inactive')

        response = self.client.delete(self.detail_url(equipment.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        response = self.client.delete(self.detail_url(equipment.id))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_with_defaults(self):
        for name in ('Pump A', 'Water Pump', 'Fan B'):
            Equipment.objects.create(name=name, type=self.pump, status='Inactive')

        response = self.client.get(self.list_url, {'search': 'pump'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual([item['name'] for item in data['content']], ['Water Pump', 'Pump A'])
        self.assertEqual(data['page'], 0)
        self.assertEqual(data['size'], 10)
        self.assertEqual(data['totalElements'], 2)
        self.assertEqual(data['totalPages'], 1)
        self.assertTrue(data['last'])

    def test_list_out_of_range_page(self):
        Equipment.objects.create(name='Pump A', type=self.pump, status='Inactive')

        response = self.client.get(self.list_url, {'page': 3, 'size': 5})

        data = response.data['data']
        self.assertEqual(data['content'], [])
        self.assertTrue(data['last'])
        self.assertEqual(data['totalElements'], 1)
        self.assertEqual(data['totalPages'], 1)

    def test_list_accepts_large_page_size(self):
        for name in ('Pump A', 'Water Pump', 'Fan B'):
            Equipment.objects.create(name=name, type=self.pump, status='Inactive')

        response = self.client.get(self.list_url, {'size': 500})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(len(data['content']), 3)
        self.assertEqual(data['size'], 500)
        self.assertEqual(data['totalPages'], 1)
        self.assertTrue(data['last'])

    def test_list_rejects_unknown_sort_field(self):
        response = self.client.get(self.list_url, {'sortBy': 'created_at'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('sortBy', response.data['error']['details'])

    def test_list_rejects_invalid_paging(self):
        response = self.client.get(self.list_url, {'page': -1, 'size': 0})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('page', response.data['error']['details'])
        self.assertIn('size', response.data['error']['details'])

    def test_equipment_types(self):
        fan = EquipmentType.objects.create(name='Fan')

        response = self.client.get('/api/v1/equipment-types/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data['data'],
            [{'id': self.pump.id, 'name': 'Pump'}, {'id': fan.id, 'name': 'Fan'}]
        )


class SeedEquipmentTypesCommandTest(TestCase):
    """Test the seed_equipment_types management command."""

    def test_seed_is_idempotent(self):
        from io import StringIO
        from django.core.management import call_command

        call_command('seed_equipment_types', stdout=StringIO())
        count = EquipmentType.objects.count()
        call_command('seed_equipment_types', '--name', 'Pump', '--name', 'Scrubber', stdout=StringIO())

        self.assertGreater(count, 0)
        self.assertEqual(EquipmentType.objects.count(), count + 1)
        self.assertTrue(EquipmentType.objects.filter(name='Scrubber').exists())
