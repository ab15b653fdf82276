"""
Read-only graph inspection.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from scalargrad import Node, backward
from scalargrad.core.graph_utils import (
    trace,
    get_graph_stats,
    print_graph_summary,
    print_computation_graph,
)


def build():
    a = Node(2.0, label="a")
    b = Node(-3.0, label="b")
    c = Node(10.0, label="c")
    f = Node(-2.0, label="f")
    e = a * b
    e.label = "e"
    d = e + c
    d.label = "d"
    L = d * f
    L.label = "L"
    return a, L


def test_trace_nodes_and_edges():
    _, L = build()
    nodes, edges = trace(L)
    assert len(nodes) == 7
    assert len(edges) == 6
    assert nodes[-1] is L
    labels = {(x.label, y.label) for x, y in edges}
    assert ("a", "e") in labels
    assert ("d", "L") in labels


def test_trace_lists_repeated_operand_once():
    x = Node(3.0)
    y = x * x
    nodes, edges = trace(y)
    assert len(nodes) == 2
    assert edges == [(x, y)]


def test_stats():
    _, L = build()
    stats = get_graph_stats(L)
    assert stats["nodes"] == 7
    assert stats["edges"] == 6
    assert stats["leaves"] == 4
    assert stats["depth"] == 3
    assert stats["max_fan_in"] == 2
    assert stats["max_fan_out"] == 1
    assert stats["operations"] == {"leaf": 4, "mul": 2, "add": 1}


def test_stats_fan_out_on_shared_node():
    x = Node(1.0)
    root = x.tanh() + x.exp()
    assert get_graph_stats(root)["max_fan_out"] == 2


def test_printing_does_not_mutate(capsys):
    a, L = build()
    backward(L)
    before = [(n.value, n.grad, n.label) for n in trace(L)[0]]

    stats = print_graph_summary(L, detailed=True)
    print_computation_graph(L, max_nodes=3)

    after = [(n.value, n.grad, n.label) for n in trace(L)[0]]
    assert before == after
    assert stats["nodes"] == 7

    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "COMPUTATION GRAPH STRUCTURE" in out
    assert "more nodes" in out
    assert "L" in out
