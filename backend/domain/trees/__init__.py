"""
Tree helpers for structural elements.

- StructuralElementIterator: recursive iterator over pre-loaded children
- RecursiveTreeWalker: flattens a recursive iterator depth-first
- TreeViewNode / build_tree_view / flatten_choices: ready-made representations
"""

from .iterator import (
    StructuralElementIterator,
    RecursiveTreeWalker,
    TraversalMode,
    LEAVES_ONLY,
    SELF_FIRST,
    CHILD_FIRST,
)
from .builder import (
    TreeViewNode,
    build_tree_view,
    flatten_choices,
)


__all__ = [
    'StructuralElementIterator',
    'RecursiveTreeWalker',
    'TraversalMode',
    'LEAVES_ONLY',
    'SELF_FIRST',
    'CHILD_FIRST',
    'TreeViewNode',
    'build_tree_view',
    'flatten_choices',
]
