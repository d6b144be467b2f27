"""
Core Models - Base classes and mixins

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.db import models


class CreatedAtMixin(models.Model):
    """
    Abstract mixin for append-only records that are never updated.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        abstract = True


class TimestampMixin(CreatedAtMixin):
    """
    Abstract mixin that provides creation and last-update timestamps.
    updated_at is refreshed on every save().
    """
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
