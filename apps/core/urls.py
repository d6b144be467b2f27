"""
Core URLs

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # Database liveness probe, mounted at /health/
    path('', views.health_check, name='health'),
]
