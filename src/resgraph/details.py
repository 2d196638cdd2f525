"""Aggregate information about an ordered list of resource rules."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .rules import BuildTarget, resource_capability

__all__ = ["AndroidResourceDetails", "aggregate"]


@dataclass(frozen=True)
class AndroidResourceDetails:
    """Ordered, duplicate-free views over a sorted list of resource rules.

    Each tuple keeps the order in which its values first appear in the list
    the details were built from.
    """

    res_directories: tuple[str, ...] = ()
    r_dot_java_packages: tuple[str, ...] = ()
    whitelisted_string_dirs: tuple[str, ...] = ()


def aggregate(sorted_rules: Iterable[BuildTarget]) -> AndroidResourceDetails:
    """Build :class:`AndroidResourceDetails` in a single pass over ``sorted_rules``.

    Rules without a resource directory contribute nothing.
    """
    res_dirs: dict[str, None] = {}
    packages: dict[str, None] = {}
    whitelisted: dict[str, None] = {}
    for rule in sorted_rules:
        resources = resource_capability(rule)
        if resources is None:
            continue
        res_dirs.setdefault(resources.res, None)
        packages.setdefault(resources.r_dot_java_package, None)
        if resources.has_whitelisted_strings:
            whitelisted.setdefault(resources.res, None)
    return AndroidResourceDetails(
        res_directories=tuple(res_dirs),
        r_dot_java_packages=tuple(packages),
        whitelisted_string_dirs=tuple(whitelisted),
    )
