# scalar_aad/aad/core/engine.py
from __future__ import annotations
from typing import Iterable, List

from .scalar import Scalar


def topological_order(root: Scalar) -> List[Scalar]:
    """
    Depth-first post-order of the DAG reachable from `root` through `children`.

    Every node appears exactly once (visited set keyed by identity) and only
    after all of its operands, so the list runs leaves first, root last.

    Uses an explicit stack, not recursion, so graph depth is not bounded by
    the interpreter recursion limit. The order matches recursive DFS.

    Precondition: the graph is acyclic. Graphs built through the operations
    always are; see `graph_utils.has_cycle` for an explicit check.
    """
    order: List[Scalar] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            order.append(v)
            continue
        if id(v) in visited:
            continue
        visited.add(id(v))
        stack.append((v, True))
        # reversed so the first operand is explored first
        for child in reversed(v.children):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: Scalar, validate: bool = False):
    """
    Run a single reverse pass from `root`.

    Steps:
        1) topologically order every node reachable from root
        2) seed root.grad = 1 (d root / d root)
        3) call each node's backward rule once, root first, leaves last

    Reverse topological order guarantees that a node's `grad` has received
    the contributions of all of its consumers before its own rule reads it.
    Gradients accumulate (+=) into whatever is already stored; call
    `zero_grad` on the leaves you care about before reusing them.

    Args:
        root: the Scalar to differentiate.
        validate: if True, check the graph for cycles first and raise
            ValueError when one is found.
    """
    if validate:
        from .graph_utils import has_cycle
        if has_cycle(root):
            raise ValueError("backward() requires an acyclic computation graph")

    topo = topological_order(root)

    root.grad = 1.0
    for node in reversed(topo):
        node._backward()


def zero_grad(nodes: Iterable[Scalar]):
    """Set `grad` to zero on every given node."""
    for v in nodes:
        v.grad = 0.0
