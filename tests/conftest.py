# ruff: noqa: E402
import sys
from pathlib import Path

# ensure src is on PYTHONPATH
src_path = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(src_path))

import pytest
from resgraph.rules import AndroidResources, BuildRule


@pytest.fixture
def rule_factory():
    def _make(name, type="android_library", deps=(), *, res=None, package=None, whitelisted=False):
        resources = None
        if res is not None or package is not None:
            resources = AndroidResources(
                res=res,
                r_dot_java_package=package or f"com.example.{name}",
                has_whitelisted_strings=whitelisted,
            )
        return BuildRule(f"//{name}:{name}", type, deps, resources=resources)

    return _make


@pytest.fixture
def diamond(rule_factory):
    """A -> B, A -> C, B -> D, C -> D; all resource rules."""
    d = rule_factory("d", "android_resource", res="d/res")
    b = rule_factory("b", "android_resource", [d], res="b/res")
    c = rule_factory("c", "android_resource", [d], res="c/res")
    a = rule_factory("a", "android_binary", [b, c], res="a/res")
    return a, b, c, d
