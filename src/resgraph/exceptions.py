"""Custom exception hierarchy for resgraph."""

from __future__ import annotations

from typing import Any


class ResGraphError(Exception):
    """Base class for all resgraph exceptions."""
    pass


class ConfigurationError(ResGraphError):
    """Raised when there is an issue with configuration parsing or structure."""
    pass


class GraphFrozenError(ResGraphError):
    """Raised when a frozen dependency graph is mutated."""
    pass


class CycleDetectedError(ResGraphError):
    """Raised when the included rules of a graph cannot be totally ordered."""

    def __init__(self, cycle: list[Any]):
        self.cycle = cycle
        chain = " -> ".join(repr(n) for n in cycle)
        super().__init__(f"dependency cycle detected: {chain}")
