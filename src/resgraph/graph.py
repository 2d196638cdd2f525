"""Directed graph of the dependency edges walked during traversal."""
from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from .exceptions import GraphFrozenError

__all__ = ["DependencyGraph"]

T = TypeVar("T", bound=Hashable)


class DependencyGraph(Generic[T]):
    """Insertion-ordered directed graph.

    An edge ``src -> dst`` means ``src`` depends on ``dst``. Nodes and edges
    iterate in the order they were first added, which keeps any ordering
    derived from the graph reproducible.
    """

    def __init__(self) -> None:
        self._out: dict[T, dict[T, None]] = {}
        self._in: dict[T, dict[T, None]] = {}
        self._frozen = False

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("graph is frozen and can no longer be modified")

    def add_node(self, node: T) -> None:
        self._check_mutable()
        if node not in self._out:
            self._out[node] = {}
            self._in[node] = {}

    def add_edge(self, src: T, dst: T) -> None:
        """Record ``src -> dst``, adding either endpoint that is not yet a node."""
        self.add_node(src)
        self.add_node(dst)
        self._out[src][dst] = None
        self._in[dst][src] = None

    def freeze(self) -> "DependencyGraph[T]":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def nodes(self) -> list[T]:
        return list(self._out)

    @property
    def edges(self) -> list[tuple[T, T]]:
        return [(src, dst) for src, out in self._out.items() for dst in out]

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self._out.values())

    def outgoing(self, node: T) -> list[T]:
        """Direct dependencies of ``node``."""
        return list(self._out[node])

    def incoming(self, node: T) -> list[T]:
        """Direct dependents of ``node``."""
        return list(self._in[node])

    def nodes_without_outgoing_edges(self) -> list[T]:
        return [n for n, out in self._out.items() if not out]

    def __contains__(self, node: object) -> bool:
        return node in self._out

    def __iter__(self) -> Iterator[T]:
        return iter(self._out)

    def __len__(self) -> int:
        return len(self._out)

    def __repr__(self) -> str:
        return f"DependencyGraph(nodes={len(self)}, edges={self.edge_count})"
