"""Leaves-first topological ordering of a filtered dependency graph."""
from __future__ import annotations

from collections.abc import Callable, Hashable
from graphlib import CycleError, TopologicalSorter
from typing import TypeVar

from rich.markup import escape

from .exceptions import CycleDetectedError
from .graph import DependencyGraph
from .logger import logger

__all__ = ["topo_sort"]

T = TypeVar("T", bound=Hashable)


def _excluded_frontiers(
    graph: DependencyGraph[T], included: set[T]
) -> dict[T, dict[T, None]]:
    """Map each excluded node to the included nodes it reaches via excluded nodes.

    Excluded nodes are grouped into strongly connected components (iterative
    Tarjan), which complete sinks first, so every component's frontier is
    built once from frontiers that are already known. Components that only
    forward a single child frontier share that dict instead of copying it.
    """
    index: dict[T, int] = {}
    low: dict[T, int] = {}
    on_stack: set[T] = set()
    stack: list[T] = []
    frontier: dict[T, dict[T, None]] = {}

    for start in graph:
        if start in included or start in index:
            continue
        index[start] = low[start] = len(index)
        stack.append(start)
        on_stack.add(start)
        work = [(start, iter(graph.outgoing(start)))]
        while work:
            node, deps = work[-1]
            for dep in deps:
                if dep in included:
                    continue
                if dep not in index:
                    index[dep] = low[dep] = len(index)
                    stack.append(dep)
                    on_stack.add(dep)
                    work.append((dep, iter(graph.outgoing(dep))))
                    break
                if dep in on_stack:
                    low[node] = min(low[node], index[dep])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] != index[node]:
                    continue
                members: list[T] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    members.append(member)
                    if member == node:
                        break
                members.reverse()
                component = set(members)
                direct: dict[T, None] = {}
                children: dict[int, dict[T, None]] = {}
                for member in members:
                    for dep in graph.outgoing(member):
                        if dep in included:
                            direct[dep] = None
                        elif dep not in component:
                            child = frontier[dep]
                            children.setdefault(id(child), child)
                if not direct and len(children) == 1:
                    reached = next(iter(children.values()))
                else:
                    reached = direct
                    for child in children.values():
                        reached.update(child)
                for member in members:
                    frontier[member] = reached
    return frontier


def topo_sort(graph: DependencyGraph[T], include: Callable[[T], bool]) -> list[T]:
    """Return the nodes accepted by ``include`` in leaves-first order.

    A node comes after every node it depends on, directly or through a path
    of excluded nodes. Ties keep the graph's insertion order. Runs in time
    linear in the graph size plus the size of the excluded frontiers.

    Raises
    ------
    CycleDetectedError
        If the included nodes depend on each other cyclically, counting
        paths through excluded nodes. An included node that reaches itself
        only through excluded nodes (``a -> x -> a``) is such a cycle.
        Cycles made only of excluded nodes are ignored.
    """
    included = {node for node in graph if include(node)}
    frontier = _excluded_frontiers(graph, included)
    deps: dict[T, list[T]] = {}
    for node in graph:
        if node not in included:
            continue
        reached: dict[T, None] = {}
        for dep in graph.outgoing(node):
            if dep in included:
                reached[dep] = None
            else:
                reached.update(frontier[dep])
        deps[node] = list(reached)
    try:
        order = list(TopologicalSorter(deps).static_order())
    except CycleError as e:
        cycle = list(e.args[1])
        chain = " -> ".join(repr(n) for n in cycle)
        logger.error("cannot order {} rules: cycle {}", len(deps), escape(chain))
        raise CycleDetectedError(cycle) from e
    return order
