"""
Ready-made representations of structural trees.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.structure.entities import StructuralDBElement

from .iterator import RecursiveTreeWalker, StructuralElementIterator, SELF_FIRST


@dataclass
class TreeViewNode:
    """Node of a tree view widget."""

    text: str
    id: Optional[int] = None
    nodes: List[TreeViewNode] = field(default_factory=list)

    def add_node(self, node: TreeViewNode) -> TreeViewNode:
        self.nodes.append(node)
        return self

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text, "id": self.id}
        if self.nodes:
            data["nodes"] = [node.to_dict() for node in self.nodes]
        return data


def build_tree_view(nodes: Iterable[StructuralDBElement]) -> List[TreeViewNode]:
    """Convert a forest of structural elements into tree view nodes."""
    return _build(StructuralElementIterator(nodes))


def _build(iterator: StructuralElementIterator) -> List[TreeViewNode]:
    result = []
    iterator.rewind()
    while iterator.valid():
        element = iterator.current()
        node = TreeViewNode(text=element.name, id=element.id)
        if iterator.has_children():
            node.nodes = _build(iterator.get_children())
        result.append(node)
        iterator.next()
    return result


def flatten_choices(
    nodes: Iterable[StructuralDBElement],
    indent: str = "   ",
    max_depth: Optional[int] = None,
) -> List[Tuple[Optional[int], str]]:
    """
    Flatten a forest into (id, label) pairs for a select box.

    The label is the element name, indented once per level of the
    element in its tree, also when nodes are not roots.
    """
    walker = RecursiveTreeWalker(
        StructuralElementIterator(nodes),
        mode=SELF_FIRST,
        max_depth=max_depth,
    )
    return [
        (element.id, f"{indent * element.level}{element.name}")
        for element in walker
    ]
