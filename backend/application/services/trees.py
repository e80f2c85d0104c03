"""
Tree Services.

Representations of structural element trees for the outside world.
"""

from typing import Iterator, List, Optional, Tuple

from django.conf import settings

from domain.structure.entities import StructuralDBElement
from domain.structure.repositories import StructuralElementRepository
from domain.trees import (
    RecursiveTreeWalker,
    StructuralElementIterator,
    TreeViewNode,
    build_tree_view,
    flatten_choices,
    SELF_FIRST,
    TraversalMode,
)


class StructureTreeService:
    """Build trees, flat lists and select choices for one kind of element."""

    def __init__(self, repository: StructuralElementRepository):
        self.repository = repository

    def iterator(self, root: Optional[StructuralDBElement] = None) -> StructuralElementIterator:
        """Iterator over the roots, or over the children of root."""
        if root is None:
            return StructuralElementIterator(self.repository.get_roots())
        return StructuralElementIterator(root.subelements)

    def walk(
        self,
        mode: TraversalMode = SELF_FIRST,
        max_depth: Optional[int] = None,
        root: Optional[StructuralDBElement] = None,
    ) -> Iterator[Tuple[int, StructuralDBElement]]:
        return RecursiveTreeWalker(self.iterator(root), mode, max_depth).walk()

    def tree_view(self, root: Optional[StructuralDBElement] = None) -> List[TreeViewNode]:
        if root is None:
            return build_tree_view(self.repository.get_roots())
        return build_tree_view(root.subelements)

    def choices(self, max_depth: Optional[int] = None) -> List[Tuple[Optional[int], str]]:
        return flatten_choices(
            self.repository.get_roots(),
            indent=settings.PARTDB_TREE_INDENT,
            max_depth=max_depth,
        )
