"""
Tape inspection helpers.

Summaries of a recorded tape: sizes, fan-in/fan-out and which primitives
dominate. Used for debugging user functions, never by the engine itself.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from .node import Op
from .tape import Tape


def _fan_outs(tape: Tape) -> List[int]:
    fan_outs = [0] * len(tape)
    for node in tape.nodes:
        for parent in node.operands:
            fan_outs[parent] += 1
    return fan_outs


def get_graph_stats(tape: Tape) -> Dict:
    """
    Collect tape statistics (without printing).

    Returns:
        dict with nodes, seeds, edges, max/avg fan-in over recorded
        operations, max/avg fan-out over all nodes, and a per-op count.
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'seeds': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    ops = tape.nodes[tape.seed_count:]
    fan_ins = [len(node.operands) for node in ops]
    fan_outs = _fan_outs(tape)
    op_counter = Counter(node.op.value for node in ops)

    return {
        'nodes': len(tape),
        'seeds': tape.seed_count,
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins) if fan_ins else 0,
        'avg_fan_in': float(np.mean(fan_ins)) if fan_ins else 0.0,
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(tape: Tape) -> Dict:
    """Print a tape summary and return the same statistics as get_graph_stats."""
    stats = get_graph_stats(tape)
    if stats['nodes'] == 0:
        print("Empty tape")
        return stats

    print("\n" + "=" * 70)
    print("TAPE SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Seed nodes:         {stats['seeds']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    n_ops = stats['nodes'] - stats['seeds']
    for op, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_ops
        print(f"  {op:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")
    return stats


def print_computation_graph(tape: Tape, max_nodes: int = 20) -> None:
    """Print one line per node: index, op, stored operands."""
    print("\n" + "=" * 70)
    print("TAPE NODES")
    print("=" * 70)

    if not tape.nodes:
        print("Empty tape")
        return

    for i, node in enumerate(tape.nodes[:max_nodes]):
        if node.op is Op.VAR:
            print(f"Node {i:4d}: {node.op.value:12s} [seed/input]")
            continue
        parents = ", ".join(f"Node{p}" for p in node.operands) or "constant"
        print(f"Node {i:4d}: {node.op.value:12s} ({node.val1:.6g}, {node.val2:.6g}) <- [{parents}]")

    if len(tape) > max_nodes:
        print(f"... ({len(tape) - max_nodes} more nodes)")

    print("=" * 70 + "\n")
