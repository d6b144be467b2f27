#!/usr/bin/env python
"""
FieldRino Equipment Django Management Script

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
import os
import sys

from decouple import config


def main():
    """Run administrative tasks."""
    # Settings module may come from the environment or a .env file
    os.environ['DJANGO_SETTINGS_MODULE'] = config('DJANGO_SETTINGS_MODULE', default='config.settings_dev')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
