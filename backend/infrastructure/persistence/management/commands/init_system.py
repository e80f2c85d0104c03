"""
Initialize System Command.

Creates default groups with their permissions and the admin user.
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from domain.shared.exceptions import DomainException
from domain.users.entities import Group
from domain.users.resolver import PermissionResolver


STRUCTURE_PERMISSIONS = [
    'parts',
    'categories',
    'storelocations',
    'footprints',
    'manufacturers',
    'suppliers',
]

GROUPS_CONFIG = [
    {
        'name': 'admins',
        'comment': 'Users of this group can do everything',
        'allow': {'*': '*'},
    },
    {
        'name': 'readonly',
        'comment': 'Users of this group can only read data',
        'allow': {
            **{permission: ['read'] for permission in STRUCTURE_PERMISSIONS},
            'self': ['show_permissions'],
        },
    },
    {
        'name': 'users',
        'comment': 'Users of this group can edit parts and master data',
        'allow': {
            **{permission: ['read', 'edit', 'create', 'move'] for permission in STRUCTURE_PERMISSIONS},
            'self': ['edit_infos', 'show_permissions'],
            'tools': ['labels', 'statistics'],
        },
    },
]


class Command(BaseCommand):
    help = 'Initialize system with default data (groups, admin user)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin-password',
            type=str,
            default='admin123',
            help='Password for admin user'
        )
        parser.add_argument(
            '--skip-groups',
            action='store_true',
            help='Skip creating default groups'
        )
        parser.add_argument(
            '--skip-admin',
            action='store_true',
            help='Skip creating admin user'
        )

    def handle(self, *args, **options):
        try:
            with transaction.atomic():
                if not options['skip_groups']:
                    self._create_default_groups()

                if not options['skip_admin']:
                    self._create_admin_user(options['admin_password'])
        except DomainException as exc:
            raise CommandError(exc.message)

        self.stdout.write(
            self.style.SUCCESS('System initialization completed!')
        )

    def _create_default_groups(self):
        """Create default groups."""
        from infrastructure.persistence.repositories import DjangoStructuralElementRepository

        groups = DjangoStructuralElementRepository(Group)
        resolver = PermissionResolver()

        for group_data in GROUPS_CONFIG:
            if groups.find_by_name(group_data['name']):
                self.stdout.write(f"  - Group already exists: {group_data['name']}")
                continue

            group = Group(name=group_data['name'], comment=group_data['comment'])
            for permission, operations in group_data['allow'].items():
                if permission == '*':
                    resolver.set_all_operations(group, True)
                    continue
                for operation in operations:
                    resolver.set(group, permission, operation, True)
            groups.save(group)
            self.stdout.write(f"  ✓ Created group: {group.name}")

    def _create_admin_user(self, password):
        """Create admin user in the admins group."""
        from application.services.accounts import UserAccountService
        from infrastructure.persistence.repositories import (
            DjangoStructuralElementRepository,
            DjangoUserRepository,
        )

        users = DjangoUserRepository()
        if users.exists('admin'):
            self.stdout.write('  - Admin user already exists')
            return

        admins = DjangoStructuralElementRepository(Group).find_by_name('admins')
        accounts = UserAccountService(users)
        accounts.create_user(
            'admin',
            password=password,
            group=admins[0] if admins else None,
        )
        self.stdout.write(self.style.SUCCESS('  ✓ Created admin user'))
