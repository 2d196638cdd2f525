"""Ordered transitive closure of a rule set's Android resource dependencies."""

from __future__ import annotations

from collections.abc import Container, Iterable

from .collector import collect, collect_unsorted
from .details import AndroidResourceDetails, aggregate
from .rules import TRAVERSABLE_TYPES, BuildTarget, RuleType
from .toposort import topo_sort

__all__ = [
    "get_android_resource_deps",
    "get_android_resource_deps_unsorted",
    "get_android_resource_details",
]


def _as_roots(rules: BuildTarget | Iterable[BuildTarget]) -> Iterable[BuildTarget]:
    if isinstance(rules, BuildTarget):
        return (rules,)
    return rules


def get_android_resource_deps(
    rules: BuildTarget | Iterable[BuildTarget],
    *,
    traversable: Container[RuleType] = TRAVERSABLE_TYPES,
) -> list[BuildTarget]:
    """Return the resource rules reachable from ``rules``, topologically sorted.

    The result may include any of ``rules`` themselves. Rules are ordered
    from least dependent to most dependent, which is the order resource
    directories must be handed to the packager.

    Parameters
    ----------
    rules : BuildTarget | Iterable[BuildTarget]
        A single rule or the rules to start from.
    traversable : Container[RuleType], optional
        Rule types the search continues through.

    Raises
    ------
    CycleDetectedError
        If the resource rules depend on each other cyclically.
    """
    graph, found = collect(_as_roots(rules), traversable=traversable)
    # topo_sort is leaves-first; the packager wants the reverse.
    order = topo_sort(graph, found.__contains__)
    order.reverse()
    return order


def get_android_resource_deps_unsorted(
    rules: BuildTarget | Iterable[BuildTarget],
    *,
    traversable: Container[RuleType] = TRAVERSABLE_TYPES,
) -> set[BuildTarget]:
    """Return the resource rules reachable from ``rules`` in no particular order."""
    return collect_unsorted(_as_roots(rules), traversable=traversable)


def get_android_resource_details(
    rules: BuildTarget | Iterable[BuildTarget],
    *,
    traversable: Container[RuleType] = TRAVERSABLE_TYPES,
) -> AndroidResourceDetails:
    return aggregate(get_android_resource_deps(rules, traversable=traversable))
