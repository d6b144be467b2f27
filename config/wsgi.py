"""
WSGI config for the FieldRino Equipment project.

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
