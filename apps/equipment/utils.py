"""
Equipment Utilities - Business Rule Validators

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.conf import settings
from django.utils import timezone

from apps.core.exceptions import BusinessRuleViolation


class ActivationRule:
    """
    Validates that equipment may only be set to the active status when it
    was cleaned recently enough.

    The rule is checked at write time only. An active record whose cleaning
    date ages past the threshold is not flagged; only new writes that target
    the active status are rejected.
    """

    def __init__(self, active_status=None, max_days_since_cleaning=None, today=None):
        """
        Args:
            active_status: Status value the rule guards (defaults to settings.EQUIPMENT_ACTIVE_STATUS)
            max_days_since_cleaning: Largest allowed age of the cleaning date in whole days
                (defaults to settings.EQUIPMENT_MAX_DAYS_SINCE_CLEANING)
            today: Callable returning the current local date (defaults to timezone.localdate)
        """
        self.active_status = active_status or settings.EQUIPMENT_ACTIVE_STATUS
        if max_days_since_cleaning is None:
            max_days_since_cleaning = settings.EQUIPMENT_MAX_DAYS_SINCE_CLEANING
        self.max_days_since_cleaning = max_days_since_cleaning
        self.today = today or timezone.localdate

    def days_since(self, last_cleaned_date):
        """Whole days between the cleaning date and today."""
        return (self.today() - last_cleaned_date).days

    def check(self, status, last_cleaned_date):
        """
        Check whether a write of (status, last_cleaned_date) is allowed.

        Returns:
            tuple: (allowed: bool, error_message: str or None)
        """
        if status != self.active_status:
            return True, None

        if last_cleaned_date is None:
            return False, (
                f"Cannot set status to '{self.active_status}': Last Cleaned Date is required "
                f"when activating equipment."
            )

        days_since = self.days_since(last_cleaned_date)
        if days_since > self.max_days_since_cleaning:
            return False, (
                f"Cannot set status to '{self.active_status}': Last Cleaned Date is {days_since} "
                f"days ago. Equipment must have been cleaned within the last "
                f"{self.max_days_since_cleaning} days to be marked {self.active_status}."
            )

        return True, None

    def enforce(self, status, last_cleaned_date):
        """
        Enforce the rule (raises BusinessRuleViolation if the write is not allowed).

        Raises:
            BusinessRuleViolation: If status targets active with a missing or stale date
        """
        allowed, error_message = self.check(status, last_cleaned_date)
        if not allowed:
            raise BusinessRuleViolation(error_message)
