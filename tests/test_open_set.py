# tests/test_open_set.py
"""
Unit tests for pathing.open_set.OpenSet.

Covers:
- cheapest-first extraction and insertion-order tie breaking
- lazy removal of closed and superseded heap entries
- membership bookkeeping
"""

from __future__ import annotations

import pytest

from pathing.node import NodeTable
from pathing.open_set import OpenSet
from spec.types import Position

P = Position


def costed(table: NodeTable, position: Position, cost: float):
    node = table.get_or_create(position)
    node.relax(cost, P(0, 0))
    return node


def test_pop_cheapest_orders_by_priority() -> None:
    table = NodeTable()
    open_set = OpenSet()
    for x, priority in [(1, 5.0), (2, 1.0), (3, 3.0)]:
        open_set.push(costed(table, P(x, 0), priority), priority)

    order = []
    while True:
        node = open_set.pop_cheapest(table)
        if node is None:
            break
        open_set.discard(node)
        node.close()
        order.append(node.position.x)

    assert order == [2, 3, 1]


def test_ties_break_by_insertion_order() -> None:
    table = NodeTable()
    open_set = OpenSet()
    for x in (7, 3, 5):
        open_set.push(costed(table, P(x, 0), 1.0), 2.0)

    first = open_set.pop_cheapest(table)
    assert first is not None and first.position == P(7, 0)
    first.close()
    open_set.discard(first)

    second = open_set.pop_cheapest(table)
    assert second is not None and second.position == P(3, 0)


def test_superseded_entry_is_skipped() -> None:
    table = NodeTable()
    open_set = OpenSet()
    node = costed(table, P(1, 1), 5.0)
    open_set.push(node, 5.0)

    node.relax(2.0, P(0, 1))
    open_set.push(node, 2.0)

    assert len(open_set) == 1
    assert open_set.queued == 2

    popped = open_set.pop_cheapest(table)
    assert popped is node
    node.close()
    open_set.discard(node)

    assert open_set.pop_cheapest(table) is None
    assert open_set.stale_discarded == 1


def test_closed_entries_are_discarded() -> None:
    table = NodeTable()
    open_set = OpenSet()
    a = costed(table, P(1, 0), 1.0)
    b = costed(table, P(2, 0), 2.0)
    open_set.push(a, 1.0)
    open_set.push(b, 2.0)

    a.close()
    open_set.discard(a)

    assert open_set.pop_cheapest(table) is b
    assert open_set.stale_discarded == 1


def test_membership_and_truthiness() -> None:
    table = NodeTable()
    open_set = OpenSet()
    node = costed(table, P(4, 4), 1.0)

    assert not open_set
    assert node not in open_set

    open_set.push(node, 1.0)
    assert open_set
    assert node in open_set
    assert node.is_open

    open_set.discard(node)
    assert node not in open_set
    assert len(open_set) == 0


def test_push_uncosted_node_rejected() -> None:
    table = NodeTable()
    open_set = OpenSet()

    with pytest.raises(ValueError):
        open_set.push(table.get_or_create(P(0, 0)), 0.0)
