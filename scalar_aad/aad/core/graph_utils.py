"""
Graph utilities.
Print and analyse the structure of a Scalar computation graph.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .engine import topological_order


def has_cycle(root) -> bool:
    """
    Return True if a cycle is reachable from `root`.

    Graphs built through the operations never contain one; this only matters
    when `children` has been rewired by hand.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    color = {}
    stack = [(root, iter(root.children))]
    color[id(root)] = GREY
    while stack:
        v, it = stack[-1]
        child = next(it, None)
        if child is None:
            color[id(v)] = BLACK
            stack.pop()
            continue
        state = color.get(id(child), WHITE)
        if state == GREY:
            return True
        if state == WHITE:
            color[id(child)] = GREY
            stack.append((child, iter(child.children)))
    return False


def get_graph_stats(root) -> Dict:
    """
    Collect graph statistics (without printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out and the operation breakdown
    """
    nodes = topological_order(root)
    n_nodes = len(nodes)
    n_edges = sum(len(v.children) for v in nodes)

    # fan-in: number of operands
    fan_ins = [len(v.children) for v in nodes]

    # fan-out: number of consumers inside this graph
    fan_out = Counter()
    for v in nodes:
        for child in v.children:
            fan_out[id(child)] += 1
    fan_outs = [fan_out[id(v)] for v in nodes]

    op_counter = Counter(v.op.name for v in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for v in nodes if not v.children),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: output Scalar
        detailed: also list up to 100 nodes in topological order

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_name, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_name:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        nodes = topological_order(root)
        index = {id(v): i for i, v in enumerate(nodes)}
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, v in enumerate(nodes):
            if v.children:
                parent_info = ", ".join(f"Node{index[id(c)]}" for c in v.children)
                print(f"Node {i:3d}: {v.op.name:12s} ({float(v.val):10.6f}) <- [{parent_info}]")
            else:
                print(f"Node {i:3d}: {'leaf':12s} ({float(v.val):10.6f})")

    print("="*70 + "\n")

    return stats
