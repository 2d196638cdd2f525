import time

import pytest

from resgraph.exceptions import CycleDetectedError
from resgraph.resources import (
    get_android_resource_deps,
    get_android_resource_deps_unsorted,
    get_android_resource_details,
)


def test_diamond_most_dependent_last(diamond):
    a, b, c, d = diamond
    order = get_android_resource_deps({a})
    assert order[0] == a
    assert order[-1] == d
    assert set(order[1:3]) == {b, c}


def test_single_rule_matches_iterable(diamond):
    a = diamond[0]
    assert get_android_resource_deps(a) == get_android_resource_deps([a])
    assert get_android_resource_deps_unsorted(a) == set(diamond)


def test_chain_order(rule_factory):
    c = rule_factory("c", "android_resource", res="c/res")
    b = rule_factory("b", "android_library", [c], res="b/res")
    a = rule_factory("a", "android_binary", [b])
    assert get_android_resource_deps(a) == [b, c]


def test_order_through_rules_without_resources(rule_factory):
    base = rule_factory("base", "android_resource", res="base/res")
    lib = rule_factory("lib", "java_library", [base])
    app_res = rule_factory("app_res", "android_resource", [lib], res="app/res")
    binary = rule_factory("app", "android_binary", [base, app_res])
    assert get_android_resource_deps(binary) == [app_res, base]


def test_cycle_rejected(rule_factory):
    a = rule_factory("a", "android_resource", res="a/res")
    b = rule_factory("b", "android_resource", [a], res="b/res")
    a.add_dep(b)
    with pytest.raises(CycleDetectedError):
        get_android_resource_deps(a)
    # the unsorted variant tolerates the cycle
    assert get_android_resource_deps_unsorted(a) == {a, b}


def test_cycle_without_resources_is_tolerated(rule_factory):
    res = rule_factory("res", "android_resource", res="res")
    x = rule_factory("x", "java_library", [res])
    y = rule_factory("y", "java_library", [x])
    x.add_dep(y)
    root = rule_factory("root", "android_binary", [x])
    assert get_android_resource_deps(root) == [res]


def test_empty_input():
    assert get_android_resource_deps([]) == []
    assert get_android_resource_details([]).res_directories == ()


def test_details(diamond):
    a = diamond[0]
    details = get_android_resource_details(a)
    assert details.res_directories[0] == "a/res"
    assert details.res_directories[-1] == "d/res"
    assert len(details.r_dot_java_packages) == 4


def test_many_resources_over_large_library_graph(rule_factory):
    libs = [rule_factory("lib0", "java_library")]
    for i in range(1, 3000):
        libs.append(rule_factory(f"lib{i}", "java_library", [libs[-1]]))
    resources = [
        rule_factory(f"res{i}", "android_resource", [libs[-1]], res=f"res{i}/res")
        for i in range(1500)
    ]
    root = rule_factory("app", "android_binary", resources)

    start = time.perf_counter()
    order = get_android_resource_deps(root)
    duration = time.perf_counter() - start

    assert duration < 2.0
    assert set(order) == set(resources)
