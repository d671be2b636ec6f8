"""Candidate selection during scene traversal."""

from __future__ import annotations

from typing import Any, List

from ..models import DEFAULT_TYPE_PREFIX, SelectionStats
from .traversal import attribute_type_name, traverse


class NodeSelector:
    """Visitor that collects nodes whose attribute type tag matches a prefix.

    Instances are callables with the ``visit(node, depth)`` signature expected
    by :func:`traverse`. Collected nodes are plain references into the source
    scene and stay valid only while that scene is alive.
    """

    def __init__(self, type_prefix: str = DEFAULT_TYPE_PREFIX) -> None:
        self.type_prefix = type_prefix
        self.candidates: List[Any] = []
        self.total_nodes = 0
        self.max_depth = 0

    def __call__(self, node, depth: int) -> None:
        self.total_nodes += 1
        if not self.matches(node):
            return
        self.candidates.append(node)
        self.max_depth = max(self.max_depth, depth)

    visit = __call__

    def matches(self, node) -> bool:
        return attribute_type_name(node).startswith(self.type_prefix)

    @property
    def stats(self) -> SelectionStats:
        return SelectionStats(
            total_nodes=self.total_nodes,
            selected_nodes=len(self.candidates),
            max_depth=self.max_depth,
        )


def select_nodes(root, type_prefix: str = DEFAULT_TYPE_PREFIX) -> NodeSelector:
    """Walk the tree under `root` and return the filled selector."""

    selector = NodeSelector(type_prefix)
    traverse(root, selector)
    return selector
