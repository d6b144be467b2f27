"""
Maintenance Admin Configuration

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.contrib import admin
from .models import MaintenanceLog


@admin.register(MaintenanceLog)
class MaintenanceLogAdmin(admin.ModelAdmin):
    """Maintenance logs are append-only; the admin only displays them."""
    list_display = ['id', 'equipment', 'maintenance_date', 'performed_by', 'created_at']
    list_filter = ['maintenance_date']
    search_fields = ['equipment__name', 'performed_by', 'notes']
    date_hierarchy = 'maintenance_date'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
