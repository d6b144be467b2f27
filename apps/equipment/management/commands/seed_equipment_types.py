"""
Seed the equipment type catalogue

Copyright (c) 2025 FieldRino. All rights reserved.
This source code is proprietary and confidential.
"""
from django.core.management.base import BaseCommand
from django.db import transaction
from apps.equipment.models import EquipmentType


DEFAULT_TYPES = [
    'Pump',
    'Fan',
    'Compressor',
    'Boiler',
    'Chiller',
    'Conveyor',
    'Generator',
    'Air Handler',
]


class Command(BaseCommand):
    help = 'Seed equipment types (existing names are left untouched)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--name',
            action='append',
            dest='names',
            default=[],
            help='Additional type name to create (repeatable)'
        )
        parser.add_argument(
            '--no-defaults',
            action='store_true',
            help='Only create the names passed with --name'
        )

    def handle(self, *args, **options):
        names = [] if options['no_defaults'] else list(DEFAULT_TYPES)
        names += [name.strip() for name in options['names'] if name.strip()]
        names = list(dict.fromkeys(names))

        created_count = 0
        with transaction.atomic():
            for name in names:
                _, created = EquipmentType.objects.get_or_create(name=name)
                if created:
                    created_count += 1
                    self.stdout.write(f"  Created type: {name}")

        self.stdout.write(self.style.SUCCESS(
            f"Equipment types seeded: {created_count} created, {len(names) - created_count} already present"
        ))
