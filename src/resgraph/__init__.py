from .collector import collect, collect_unsorted
from .config import Config
from .details import AndroidResourceDetails, aggregate
from .exceptions import (
    ConfigurationError,
    CycleDetectedError,
    GraphFrozenError,
    ResGraphError,
)
from .graph import DependencyGraph
from .logger import console, logger, set_level
from .reporters import print_resource_order, resource_table
from .resources import (
    get_android_resource_deps,
    get_android_resource_deps_unsorted,
    get_android_resource_details,
)
from .rules import (
    TRAVERSABLE_TYPES,
    AndroidResources,
    BuildRule,
    BuildTarget,
    RuleType,
    resource_capability,
)
from .toposort import topo_sort

__all__ = [
    "AndroidResourceDetails",
    "AndroidResources",
    "BuildRule",
    "BuildTarget",
    "Config",
    "ConfigurationError",
    "CycleDetectedError",
    "DependencyGraph",
    "GraphFrozenError",
    "ResGraphError",
    "RuleType",
    "TRAVERSABLE_TYPES",
    "aggregate",
    "collect",
    "collect_unsorted",
    "console",
    "get_android_resource_deps",
    "get_android_resource_deps_unsorted",
    "get_android_resource_details",
    "logger",
    "print_resource_order",
    "resource_capability",
    "resource_table",
    "set_level",
    "topo_sort",
]
