from resgraph.details import AndroidResourceDetails, aggregate


def test_aggregate_empty():
    details = aggregate([])
    assert details == AndroidResourceDetails()
    assert details.res_directories == ()
    assert details.r_dot_java_packages == ()
    assert details.whitelisted_string_dirs == ()


def test_aggregate_preserves_order(rule_factory):
    u1 = rule_factory("u1", res="res1")
    u2 = rule_factory("u2", res="res2")
    assert aggregate([u1, u2]).res_directories == ("res1", "res2")
    assert aggregate([u2, u1]).res_directories == ("res2", "res1")


def test_aggregate_first_occurrence_wins(rule_factory):
    u1 = rule_factory("u1", res="shared", package="com.example.a")
    u2 = rule_factory("u2", res="other", package="com.example.b")
    u3 = rule_factory("u3", res="shared", package="com.example.a")
    details = aggregate([u1, u2, u3])
    assert details.res_directories == ("shared", "other")
    assert details.r_dot_java_packages == ("com.example.a", "com.example.b")


def test_aggregate_whitelisted_subset(rule_factory):
    u1 = rule_factory("u1", res="res1", whitelisted=True)
    u2 = rule_factory("u2", res="res2")
    details = aggregate([u1, u2])
    assert details.whitelisted_string_dirs == ("res1",)
    assert set(details.whitelisted_string_dirs) <= set(details.res_directories)


def test_aggregate_skips_rules_without_res(rule_factory):
    plain = rule_factory("plain", "java_library")
    pkg_only = rule_factory("pkg", package="com.example.pkg", whitelisted=True)
    u1 = rule_factory("u1", res="res1", package="com.example.u1")
    details = aggregate([plain, pkg_only, u1])
    assert details.res_directories == ("res1",)
    assert details.r_dot_java_packages == ("com.example.u1",)
    assert details.whitelisted_string_dirs == ()
