"""Utilities for traversing FBX scene graphs."""

from __future__ import annotations

from typing import Callable, Iterator, Tuple

Visitor = Callable[..., None]


def walk(root) -> Iterator[Tuple[object, int]]:
    """Yield ``(node, depth)`` pairs depth-first, pre-order, starting at `root`.

    The root has depth 0 and every child sits one level below its parent.
    Children are produced in child-index order. An explicit stack is used so
    arbitrarily deep hierarchies do not hit the recursion limit.
    """

    if root is None:
        return

    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for idx in range(node.GetChildCount() - 1, -1, -1):
            child = node.GetChild(idx)
            if child is None:
                continue
            stack.append((child, depth + 1))


def traverse(root, visit: Visitor) -> None:
    """Call ``visit(node, depth)`` for every node reachable from `root`."""

    for node, depth in walk(root):
        visit(node, depth)


def iter_nodes(root) -> Iterator:
    """Yield nodes depth-first starting at `root` (inclusive)."""

    for node, _ in walk(root):
        yield node


def attribute_type_name(node) -> str:
    """Return the type tag of the node's attribute, or ``""`` when it has none."""

    attr = node.GetNodeAttribute()
    if attr is None:
        return ""
    return attr.GetTypeName() or ""

