"""Configuration management for resource collection."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf
from pydantic import ValidationError, validate_call

from .exceptions import ConfigurationError
from .logger import set_level
from .rules import TRAVERSABLE_TYPES, RuleType

__all__ = ["Config"]

_DEFAULTS: dict[str, Any] = {
    "traversable_types": sorted(t.value for t in TRAVERSABLE_TYPES),
    "log_level": "INFO",
}


@validate_call
def _rule_types(names: list[RuleType]) -> frozenset[RuleType]:
    return frozenset(names)


class Config:
    """Store collection settings using OmegaConf.

    Recognised keys are ``traversable_types``, a list of rule type names the
    dependency search continues through, and ``log_level``. Missing keys fall
    back to the package defaults.
    """

    def __init__(self, mapping: Mapping[str, Any] | DictConfig | str | Path | None = None) -> None:
        """Create a configuration.

        Parameters
        ----------
        mapping:
            Initial configuration data, or the path of a YAML file.
        """
        if isinstance(mapping, (str, Path)):
            try:
                loaded = OmegaConf.load(str(mapping))
            except Exception as e:
                raise ConfigurationError(f"Failed to load config from {mapping}: {e}") from e
        else:
            loaded = OmegaConf.create(mapping or {})
        if not isinstance(loaded, DictConfig):
            raise ConfigurationError(f"config root must be a mapping, got {type(loaded).__name__}")
        object.__setattr__(self, "_conf", OmegaConf.merge(OmegaConf.create(_DEFAULTS), loaded))

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to config values."""
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        try:
            return self._conf[name]
        except (KeyError, TypeError):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        """Allow attribute-style setting of config values."""
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        if name == "traversable_types" and not isinstance(value, str):
            value = [str(v) for v in value]
        self._conf[name] = value

    @property
    def traversable_types(self) -> frozenset[RuleType]:
        """Validated set of rule types the search continues through."""
        names = self._conf.traversable_types
        if OmegaConf.is_list(names):
            names = OmegaConf.to_container(names, resolve=True)
        try:
            return _rule_types(names)
        except ValidationError as e:
            raise ConfigurationError(f"invalid traversable_types {names!r}: {e}") from e

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the package logger."""
        set_level(str(self._conf.log_level).upper())

    def to_dict(self) -> dict[str, Any]:
        return OmegaConf.to_container(self._conf, resolve=True)  # type: ignore[return-value]
