"""
Maintenance URLs

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.urls import path
from . import views

app_name = 'maintenance'

urlpatterns = [
    path('maintenance/', views.maintenance_create, name='maintenance-create'),
    path('equipment/<int:equipment_id>/maintenance/', views.equipment_maintenance_history, name='equipment-maintenance-history'),
]
