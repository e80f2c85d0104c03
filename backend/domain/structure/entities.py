"""
Structure Domain - Entities.

StructuralDBElement is the base for every element that can be organized
in a tree (categories, storage locations, footprints, ...).
Children are held in memory in collection order, so a whole tree can be
loaded at once and traversed without further database access.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.base_entity import NamedDBElement
from domain.shared.events import ElementMoved
from domain.shared.exceptions import CircularReferenceException


PATH_DELIMITER_ARROW = " → "


@dataclass(eq=False, repr=False)
class StructuralDBElement(AggregateRoot, NamedDBElement):
    """
    Named element with a parent of the same class.

    The parent/children relation is kept consistent in both directions:
    changing the parent detaches the element from the old parent's children
    and appends it to the new parent's children.
    """

    parent: Optional[StructuralDBElement] = None
    _children: List[StructuralDBElement] = field(default_factory=list, init=False)

    def __post_init__(self):
        super().__post_init__()
        parent = self.parent
        self.parent = None
        if parent is not None:
            self._attach(parent)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def subelements(self) -> List[StructuralDBElement]:
        """Get the direct children in collection order."""
        return self._children.copy()

    @property
    def has_subelements(self) -> bool:
        return bool(self._children)

    @property
    def level(self) -> int:
        """Get the depth of this element in its tree (root = 0)."""
        level = 0
        element = self.parent
        while element is not None:
            level += 1
            element = element.parent
        return level

    @property
    def path_array(self) -> List[StructuralDBElement]:
        """Get all elements from the root down to this element."""
        path = []
        element = self
        while element is not None:
            path.append(element)
            element = element.parent
        path.reverse()
        return path

    def full_path(self, delimiter: str = PATH_DELIMITER_ARROW) -> str:
        """Get the names of all elements from the root to this one, joined by delimiter."""
        return delimiter.join(element.name for element in self.path_array)

    def is_root(self) -> bool:
        return self.parent is None

    def is_child_of(self, other: StructuralDBElement) -> bool:
        """
        Check if this element is a (direct or indirect) child of other.

        Raises TypeError if other is not of the same class.
        """
        self._check_same_class(other)
        element = self.parent
        while element is not None:
            if element == other:
                return True
            element = element.parent
        return False

    def descendants(self) -> Iterator[StructuralDBElement]:
        """Iterate all descendants depth-first (pre-order)."""
        for child in self._children:
            yield child
            yield from child.descendants()

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def set_parent(self, new_parent: Optional[StructuralDBElement]) -> StructuralDBElement:
        """Move this element below new_parent (None makes it a root)."""
        if new_parent is self.parent:
            return self
        if new_parent is not None:
            self._check_same_class(new_parent)
            if new_parent == self or new_parent.is_child_of(self):
                raise CircularReferenceException(
                    self.__class__.__name__,
                    [self.id, new_parent.id]
                )

        old_parent = self.parent
        if old_parent is not None:
            old_parent._children = [c for c in old_parent._children if c is not self]
            self.parent = None
        if new_parent is not None:
            self._attach(new_parent)

        self.touch()
        self.add_domain_event(ElementMoved(
            element_id=self.id,
            element_type=self.__class__.__name__,
            old_parent_id=old_parent.id if old_parent is not None else None,
            new_parent_id=new_parent.id if new_parent is not None else None,
        ))
        return self

    def add_subelement(self, child: StructuralDBElement) -> StructuralDBElement:
        """Append child to the children of this element."""
        child.set_parent(self)
        return self

    def _attach(self, parent: StructuralDBElement) -> None:
        self._check_same_class(parent)
        self.parent = parent
        parent._children.append(self)

    def _check_same_class(self, other: StructuralDBElement) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Can not compare {type(self).__name__} with {type(other).__name__}"
            )


@dataclass(eq=False, repr=False)
class Category(StructuralDBElement):
    """Category of parts."""

    ID_PREFIX = "C"


@dataclass(eq=False, repr=False)
class Storelocation(StructuralDBElement):
    """Place where parts are stored."""

    ID_PREFIX = "L"

    is_full: bool = False


@dataclass(eq=False, repr=False)
class Footprint(StructuralDBElement):
    """Package/footprint of a part."""

    ID_PREFIX = "F"


@dataclass(eq=False, repr=False)
class Manufacturer(StructuralDBElement):
    """Company that manufactures parts."""

    ID_PREFIX = "M"

    website: str = ""


@dataclass(eq=False, repr=False)
class Supplier(StructuralDBElement):
    """Company that sells parts."""

    ID_PREFIX = "S"

    website: str = ""
