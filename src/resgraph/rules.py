"""Build rule model: rule types, resource capability and a concrete rule."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

__all__ = [
    "RuleType",
    "TRAVERSABLE_TYPES",
    "AndroidResources",
    "BuildTarget",
    "BuildRule",
    "resource_capability",
]


class RuleType(str, Enum):
    """Closed set of build rule types."""

    ANDROID_BINARY = "android_binary"
    ANDROID_INSTRUMENTATION_APK = "android_instrumentation_apk"
    ANDROID_LIBRARY = "android_library"
    ANDROID_MANIFEST = "android_manifest"
    ANDROID_RESOURCE = "android_resource"
    APK_GENRULE = "apk_genrule"
    EXPORT_FILE = "export_file"
    GENRULE = "genrule"
    GEN_AIDL = "gen_aidl"
    JAVA_LIBRARY = "java_library"
    JAVA_TEST = "java_test"
    NDK_LIBRARY = "ndk_library"
    PREBUILT_JAR = "prebuilt_jar"
    PREBUILT_NATIVE_LIBRARY = "prebuilt_native_library"
    PROJECT_CONFIG = "project_config"
    PYTHON_LIBRARY = "python_library"
    ROBOLECTRIC_TEST = "robolectric_test"

    def __str__(self) -> str:
        return self.value


# Rule types the resource search may continue through.
TRAVERSABLE_TYPES: frozenset[RuleType] = frozenset(
    {
        RuleType.ANDROID_BINARY,
        RuleType.ANDROID_INSTRUMENTATION_APK,
        RuleType.ANDROID_LIBRARY,
        RuleType.ANDROID_RESOURCE,
        RuleType.APK_GENRULE,
        RuleType.JAVA_LIBRARY,
        RuleType.JAVA_TEST,
        RuleType.ROBOLECTRIC_TEST,
    }
)


@dataclass(frozen=True)
class AndroidResources:
    """Resource capability exposed by some build rules.

    Parameters
    ----------
    res : str | None
        Resource directory, or ``None`` when the rule only carries a package.
    r_dot_java_package : str
        Java package the generated ``R`` class lives in.
    has_whitelisted_strings : bool
        Whether the rule's string resources are whitelisted.
    """

    res: str | None = None
    r_dot_java_package: str = ""
    has_whitelisted_strings: bool = False

    @property
    def has_res(self) -> bool:
        return bool(self.res)


@runtime_checkable
class BuildTarget(Protocol):
    """What the collector needs from a node of the build graph."""

    @property
    def type(self) -> RuleType: ...

    @property
    def deps(self) -> Iterable["BuildTarget"]: ...

    @property
    def resources(self) -> AndroidResources | None: ...


def resource_capability(rule: BuildTarget) -> AndroidResources | None:
    """Return ``rule``'s resources when it exposes a non-empty ``res`` directory."""
    resources = rule.resources
    if resources is None or not resources.has_res:
        return None
    return resources


class BuildRule:
    """A node of the build graph identified by its fully-qualified target."""
    __slots__ = ("target", "type", "_deps", "resources")

    def __init__(
        self,
        target: str,
        type: RuleType | str,
        deps: Iterable["BuildRule"] = (),
        *,
        resources: AndroidResources | None = None,
    ):
        """Initialize a BuildRule.

        Parameters
        ----------
        target : str
            Fully-qualified target name, e.g. ``//app:res``. Defines identity.
        type : RuleType | str
            Rule type, given as a member or its string value.
        deps : Iterable[BuildRule], optional
            Direct dependencies. Order is kept.
        resources : AndroidResources, optional
            Resource capability, if the rule has one.
        """
        self.target = target
        self.type = RuleType(type)
        self._deps: list[BuildRule] = list(dict.fromkeys(deps))
        self.resources = resources

    @property
    def deps(self) -> tuple["BuildRule", ...]:
        return tuple(self._deps)

    def add_dep(self, dep: "BuildRule") -> None:
        """Append a direct dependency, ignoring duplicates."""
        if dep not in self._deps:
            self._deps.append(dep)

    @property
    def res(self) -> str | None:
        return self.resources.res if self.resources is not None else None

    def __repr__(self) -> str:
        return self.target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuildRule):
            return False
        return self.target == other.target

    def __hash__(self) -> int:
        return hash(self.target)
