"""
Equipment URLs

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.urls import path
from . import views

app_name = 'equipment'

urlpatterns = [
    # Equipment endpoints
    path('equipment/', views.equipment_list_create, name='equipment-list-create'),
    path('equipment/<int:equipment_id>/', views.equipment_detail, name='equipment-detail'),

    # Equipment type catalogue
    path('equipment-types/', views.equipment_type_list, name='equipment-type-list'),
]
