"""
Core Tests

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.core.paginator import Paginator
from django.db import IntegrityError
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory, APITestCase

from .exceptions import custom_exception_handler, BusinessRuleViolation, ResourceNotFoundError
from .pagination import Page, paginate_queryset


class PageTest(SimpleTestCase):
    """Test page metadata."""

    def test_empty_result(self):
        page = paginate_queryset([], 0, 10)

        self.assertEqual(page.content, [])
        self.assertEqual(page.total_pages, 0)
        self.assertTrue(page.is_last)

    def test_middle_page_is_not_last(self):
        page = Page(Paginator([1, 2, 3, 4, 5], 2), 0)

        self.assertEqual(page.content, [1, 2])
        self.assertEqual(page.total_pages, 3)
        self.assertFalse(page.is_last)

    def test_zero_based_index_maps_to_paginator_page(self):
        page = paginate_queryset([1, 2, 3, 4, 5], 2, 2)

        self.assertEqual(page.content, [5])
        self.assertTrue(page.is_last)

    def test_page_past_the_end_is_empty(self):
        page = paginate_queryset([1, 2, 3], 4, 2)

        self.assertEqual(page.content, [])
        self.assertEqual(page.total_elements, 3)
        self.assertEqual(page.total_pages, 2)
        self.assertTrue(page.is_last)

    def test_rejects_invalid_arguments(self):
        with self.assertRaises(ValueError):
            paginate_queryset([], -1, 10)
        with self.assertRaises(ValueError):
            paginate_queryset([], 0, 0)


class ExceptionHandlerTest(SimpleTestCase):
    """Test mapping of exceptions to error responses."""

    def setUp(self):
        request = APIRequestFactory().get('/api/v1/equipment/')
        self.context = {'request': request}

    def test_not_found(self):
        response = custom_exception_handler(ResourceNotFoundError('Equipment', 7), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(response.data['success'])
        self.assertEqual(response.data['error']['code'], 'NOT_FOUND')
        self.assertEqual(response.data['error']['message'], 'Equipment not found with id: 7')
        self.assertEqual(response.data['error']['details'], {'resource': 'Equipment', 'id': 7})
        self.assertEqual(response.data['meta']['path'], '/api/v1/equipment/')
        self.assertIn('timestamp', response.data['meta'])

    def test_business_rule_violation(self):
        response = custom_exception_handler(BusinessRuleViolation('too old'), self.context)

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error']['code'], 'BUSINESS_RULE_VIOLATION')
        self.assertEqual(response.data['error']['message'], 'too old')

    def test_validation_error(self):
        exc = ValidationError({'sortBy': ['Unsupported sort field.']})

        response = custom_exception_handler(exc, self.context)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')
        self.assertEqual(response.data['error']['message'], 'sortBy: Unsupported sort field.')

    def test_integrity_error_is_generic_conflict(self):
        response = custom_exception_handler(IntegrityError('UNIQUE constraint failed: equipment_types.name'), self.context)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error']['code'], 'CONFLICT')
        self.assertNotIn('equipment_types', response.data['error']['message'])

    def test_unexpected_error_is_opaque(self):
        with self.assertLogs('apps.core.exceptions', level='ERROR'):
            response = custom_exception_handler(KeyError('secret_column'), self.context)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error']['code'], 'INTERNAL_SERVER_ERROR')
        self.assertNotIn('secret_column', response.data['error']['message'])


class HealthCheckTest(APITestCase):
    """Test the health endpoint."""

    def test_healthy(self):
        response = self.client.get('/health/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['database'], 'connected')
