"""
Show Tree Command.

Prints the tree of one kind of structural element.
"""

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from domain.structure import entities as structure
from domain.trees import TraversalMode
from domain.users.entities import Group


KINDS = {
    'categories': structure.Category,
    'storelocations': structure.Storelocation,
    'footprints': structure.Footprint,
    'manufacturers': structure.Manufacturer,
    'suppliers': structure.Supplier,
    'groups': Group,
}


class Command(BaseCommand):
    help = 'Print the tree of categories, storage locations, footprints, ...'

    def add_arguments(self, parser):
        parser.add_argument(
            'kind',
            choices=sorted(KINDS),
            help='Kind of element to show'
        )
        parser.add_argument(
            '--mode',
            choices=[mode.value for mode in TraversalMode],
            default=TraversalMode.SELF_FIRST.value,
            help='Traversal order'
        )
        parser.add_argument(
            '--max-depth',
            type=int,
            default=None,
            help='Do not descend deeper than this level (0 = roots only)'
        )
        parser.add_argument(
            '--flat',
            action='store_true',
            help='Print the full path of every element instead of indenting'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print the tree view nodes as JSON'
        )

    def handle(self, *args, **options):
        from application.services.trees import StructureTreeService
        from infrastructure.persistence.repositories import DjangoStructuralElementRepository

        if options['max_depth'] is not None and options['max_depth'] < 0:
            raise CommandError('--max-depth must not be negative')

        service = StructureTreeService(
            DjangoStructuralElementRepository(KINDS[options['kind']])
        )

        if options['json']:
            from presentation.api.v1.serializers import TreeViewNodeSerializer

            nodes = TreeViewNodeSerializer(service.tree_view(), many=True).data
            self.stdout.write(json.dumps(nodes, indent=2, ensure_ascii=False))
            return

        count = 0
        for depth, element in service.walk(
            mode=TraversalMode(options['mode']),
            max_depth=options['max_depth'],
        ):
            if options['flat']:
                self.stdout.write(f"{element.id_string}  {element.full_path()}")
            else:
                self.stdout.write(f"{settings.PARTDB_TREE_INDENT * depth}{element.name}")
            count += 1

        if not count:
            self.stdout.write(self.style.WARNING(f"No {options['kind']} found"))
