from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console  # type: ignore[import]
from rich.markup import escape  # type: ignore[import]
from rich.table import Table  # type: ignore[import]

from .logger import console as _console
from .rules import BuildTarget

__all__ = ["resource_table", "print_resource_order"]


def resource_table(rules: Iterable[BuildTarget], *, title: str | None = "Resource order") -> Table:
    """Render ordered resource rules as a Rich table, one row per rule."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", style="bold")
    table.add_column("Package")
    table.add_column("res")
    table.add_column("Whitelisted", justify="center")
    for idx, rule in enumerate(rules):
        resources = rule.resources
        if resources is None:
            table.add_row(str(idx), escape(repr(rule)), "", "", "")
            continue
        table.add_row(
            str(idx),
            escape(repr(rule)),
            escape(resources.r_dot_java_package),
            escape(resources.res or ""),
            "✔" if resources.has_whitelisted_strings else "",
        )
    return table


def print_resource_order(rules: Iterable[BuildTarget], console: Console | None = None) -> None:
    (console or _console).print(resource_table(rules))
