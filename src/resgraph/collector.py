"""Collect resource-bearing rules reachable through traversable rule types."""
from __future__ import annotations

from collections.abc import Container, Iterable, Iterator

from .graph import DependencyGraph
from .logger import logger
from .rules import TRAVERSABLE_TYPES, BuildTarget, RuleType, resource_capability

__all__ = ["collect", "collect_unsorted"]


def _walk(
    roots: Iterable[BuildTarget], traversable: Container[RuleType]
) -> Iterator[tuple[BuildTarget, tuple[BuildTarget, ...]]]:
    """Yield each reachable rule once, with the deps chosen for visiting.

    Rules whose type is not in ``traversable`` are yielded with no deps: they
    are inspected but the search does not continue past them.
    """
    stack = list(dict.fromkeys(roots))
    stack.reverse()
    seen: set[BuildTarget] = set()
    while stack:
        rule = stack.pop()
        if rule in seen:
            continue
        seen.add(rule)
        deps = tuple(rule.deps) if rule.type in traversable else ()
        yield rule, deps
        stack.extend(d for d in reversed(deps) if d not in seen)


def collect(
    roots: Iterable[BuildTarget],
    *,
    traversable: Container[RuleType] = TRAVERSABLE_TYPES,
) -> tuple[DependencyGraph[BuildTarget], set[BuildTarget]]:
    """Return the traversed graph and the resource-bearing rules found in it.

    Parameters
    ----------
    roots : Iterable[BuildTarget]
        Rules to start from. May be empty.
    traversable : Container[RuleType], optional
        Rule types whose dependencies are explored.

    Returns
    -------
    tuple[DependencyGraph, set[BuildTarget]]
        The frozen graph of visited rules and walked edges, and the visited
        rules exposing a non-empty resource directory.
    """
    graph: DependencyGraph[BuildTarget] = DependencyGraph()
    found: set[BuildTarget] = set()
    for rule, deps in _walk(roots, traversable):
        if resource_capability(rule) is not None:
            found.add(rule)
        graph.add_node(rule)
        for dep in deps:
            graph.add_edge(rule, dep)
    graph.freeze()
    logger.debug(
        "visited {} rules ({} edges), {} with resources",
        len(graph),
        graph.edge_count,
        len(found),
    )
    return graph, found


def collect_unsorted(
    roots: Iterable[BuildTarget],
    *,
    traversable: Container[RuleType] = TRAVERSABLE_TYPES,
) -> set[BuildTarget]:
    """Like :func:`collect` but without building the graph."""
    found = {
        rule
        for rule, _ in _walk(roots, traversable)
        if resource_capability(rule) is not None
    }
    logger.debug("{} rules with resources", len(found))
    return found
