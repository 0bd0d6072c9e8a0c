import copy
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError, LinterNotFoundError
from .linter import Linter, LinterConfig
from .registry import LinterRegistry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".erb-lint.toml"
EXCLUDE_KEY = "exclude"

DEFAULT_LINTERS = [
    "FinalNewline",
    "RightTrim",
    "SpaceAroundErbTag",
    "SpaceIndentation",
    "TrailingWhitespace",
    "ExtraNewline",
    "NoJavascriptTagHelper",
]


def deep_stringify_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): deep_stringify_keys(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [deep_stringify_keys(item) for item in value]
    return value


def deep_merge_in_place(base: dict, override: Mapping) -> dict:
    """Merge `override` into `base`.

    Nested mappings merge key-wise and `exclude` lists accumulate; any other
    value in `override` replaces the one in `base`.
    """
    for key, value in override.items():
        current = base.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            if not isinstance(current, dict):
                base[key] = dict(current)
            deep_merge_in_place(base[key], value)
        elif key == EXCLUDE_KEY and isinstance(value, list) and isinstance(current, list):
            base[key] = current + [item for item in value if item not in current]
        else:
            base[key] = copy.deepcopy(value)
    return base


def deep_merge(base: Mapping, override: Mapping) -> dict:
    return deep_merge_in_place(copy.deepcopy(dict(base)), override)


class RunnerConfig:
    """Resolved configuration for a run: global options plus one section per linter."""

    def __init__(self, config: Mapping | None = None, registry: LinterRegistry | None = None):
        self._config: dict = deep_stringify_keys(copy.deepcopy(dict(config or {})))
        self.registry = registry if registry is not None else LinterRegistry()

    def to_dict(self) -> dict:
        return copy.deepcopy(self._config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunnerConfig):
            return NotImplemented
        return self._config == other._config

    def __repr__(self) -> str:
        return f"RunnerConfig({self._config!r})"

    @property
    def global_exclude(self) -> list[str]:
        return list(self._config.get("exclude") or [])

    @property
    def glob(self) -> str | None:
        return self._config.get("glob")

    @property
    def linters_config(self) -> dict:
        return self._config.get("linters") or {}

    def for_linter(self, klass: str | type[Linter]) -> LinterConfig:
        if isinstance(klass, str):
            name = klass
        elif isinstance(klass, type) and issubclass(klass, Linter):
            name = klass.simple_name()
        else:
            raise TypeError("expected str or Linter subclass")

        linter_klass = self.registry.find_by_name(name)
        if linter_klass is None:
            raise LinterNotFoundError(name)

        config_hash = self._config_hash_for_linter(linter_klass.simple_name())
        try:
            return linter_klass.config_schema(**config_hash)
        except ValidationError as exc:
            error = exc.errors()[0]
            key = ".".join(str(part) for part in error["loc"]) or "?"
            raise ConfigValidationError(linter_klass.simple_name(), key, error["msg"]) from exc

    def _config_hash_for_linter(self, simple_name: str) -> dict:
        config_hash = copy.deepcopy(self.linters_config.get(simple_name) or {})
        exclude = config_hash.get("exclude") or []
        if isinstance(exclude, list):
            config_hash["exclude"] = exclude + self.global_exclude
        return config_hash

    def merge(self, other: "RunnerConfig") -> "RunnerConfig":
        return RunnerConfig(deep_merge(self._config, other.to_dict()), self.registry)

    def merge_in_place(self, other: "RunnerConfig") -> "RunnerConfig":
        deep_merge_in_place(self._config, other.to_dict())
        return self

    @classmethod
    def default(cls, registry: LinterRegistry | None = None) -> "RunnerConfig":
        return cls({"linters": {name: {"enabled": True} for name in DEFAULT_LINTERS}}, registry)

    @classmethod
    def default_for(cls, config: "RunnerConfig") -> "RunnerConfig":
        """Layer `config` over the defaults when it asks for them with `EnableDefaultLinters`."""
        if config.to_dict().get("EnableDefaultLinters"):
            return cls.default(config.registry).merge(config)
        return config


def load_config_file(path: Path | str, registry: LinterRegistry | None = None) -> RunnerConfig:
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(path, str(exc)) from exc

    logger.debug("Loaded configuration from %s", path)
    return RunnerConfig(data, registry)
