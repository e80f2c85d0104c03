"""
Recursive iteration over structural elements.

StructuralElementIterator behaves like a cursor over a list of nodes and
additionally knows how to descend into the (pre-loaded) children of the
current node. RecursiveTreeWalker uses that contract to flatten a whole
forest depth-first.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from domain.shared.exceptions import InvalidOperationException
from domain.structure.entities import StructuralDBElement


class TraversalMode(str, Enum):
    """Order in which RecursiveTreeWalker emits elements."""

    LEAVES_ONLY = "leaves_only"    # only elements that are not descended into
    SELF_FIRST = "self_first"      # parent before its children (pre-order)
    CHILD_FIRST = "child_first"    # children before their parent (post-order)


LEAVES_ONLY = TraversalMode.LEAVES_ONLY
SELF_FIRST = TraversalMode.SELF_FIRST
CHILD_FIRST = TraversalMode.CHILD_FIRST


class StructuralElementIterator:
    """
    Array iterator over structural elements that can return an iterator
    over the children of the current element.
    """

    def __init__(self, nodes: Iterable[StructuralDBElement]):
        self._nodes: List[StructuralDBElement] = list(nodes)
        self._position = 0

    def __iter__(self) -> Iterator[StructuralDBElement]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} nodes={len(self._nodes)} position={self._position}>"

    # =========================================================================
    # CURSOR
    # =========================================================================

    def rewind(self) -> None:
        self._position = 0

    def valid(self) -> bool:
        return self._position < len(self._nodes)

    def current(self) -> Optional[StructuralDBElement]:
        if not self.valid():
            return None
        return self._nodes[self._position]

    def key(self) -> Optional[int]:
        if not self.valid():
            return None
        return self._position

    def next(self) -> None:
        self._position += 1

    # =========================================================================
    # RECURSION
    # =========================================================================

    def has_children(self) -> bool:
        """Check if the current element has any subelements."""
        element = self.current()
        if element is None:
            return False
        return bool(element.subelements)

    def get_children(self) -> StructuralElementIterator:
        """Get an iterator over the subelements of the current element."""
        element = self.current()
        if element is None:
            raise InvalidOperationException(
                "Iterator is exhausted, there is no current element",
                current_state=f"position {self._position}"
            )
        return self.__class__(element.subelements)


class RecursiveTreeWalker:
    """
    Depth-first traversal of a recursive iterator.

    max_depth limits how deep the walker descends (0 = top level only).
    In LEAVES_ONLY mode every element that is not descended into is emitted,
    which includes elements cut off by max_depth.
    """

    def __init__(
        self,
        iterator: StructuralElementIterator,
        mode: TraversalMode = SELF_FIRST,
        max_depth: Optional[int] = None,
    ):
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must not be negative")
        self.iterator = iterator
        self.mode = TraversalMode(mode)
        self.max_depth = max_depth

    def __iter__(self) -> Iterator[StructuralDBElement]:
        for _, element in self.walk():
            yield element

    def walk(self) -> Iterator[Tuple[int, StructuralDBElement]]:
        """Iterate (depth, element) pairs."""
        # Each walk gets its own cursor over the top level
        yield from self._walk(StructuralElementIterator(self.iterator), 0)

    def _walk(
        self,
        iterator: StructuralElementIterator,
        depth: int
    ) -> Iterator[Tuple[int, StructuralDBElement]]:
        iterator.rewind()
        while iterator.valid():
            element = iterator.current()
            descend = iterator.has_children() and (
                self.max_depth is None or depth < self.max_depth
            )

            if self.mode is SELF_FIRST or (self.mode is LEAVES_ONLY and not descend):
                yield depth, element
            if descend:
                yield from self._walk(iterator.get_children(), depth + 1)
            if self.mode is CHILD_FIRST:
                yield depth, element

            iterator.next()
