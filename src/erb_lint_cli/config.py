from collections.abc import Callable
from pathlib import Path

from erb_lint.config import DEFAULT_CONFIG_FILENAME, RunnerConfig, load_config_file
from erb_lint.exceptions import ConfigNotFoundError, ConfigParseError
from erb_lint.linter import Linter
from erb_lint.registry import LinterRegistry

from .outcome import ErrorKind, Failure


def load_runner_config(
    config_path: Path | None,
    registry: LinterRegistry,
    warn: Callable[[str], None],
) -> RunnerConfig | Failure:
    """Load the user's config file, falling back to the defaults when none exists.

    An explicitly requested file that is missing is a failure; a missing
    default file only produces a warning.
    """
    explicit = config_path is not None
    path = config_path if explicit else Path(DEFAULT_CONFIG_FILENAME)

    try:
        config = load_config_file(path, registry)
    except ConfigNotFoundError as exc:
        if explicit:
            return Failure(ErrorKind.CONFIG_NOT_FOUND, str(exc))
        warn(f"{DEFAULT_CONFIG_FILENAME} not found: using default config")
        return RunnerConfig.default(registry)
    except ConfigParseError as exc:
        return Failure(ErrorKind.CONFIG_PARSE, str(exc))

    return RunnerConfig.default_for(config)


def enabled_override(registry: LinterRegistry, enabled: list[type[Linter]]) -> RunnerConfig:
    """Per-invocation config that switches exactly `enabled` on and every other linter off."""
    return RunnerConfig(
        {"linters": {klass.simple_name(): {"enabled": klass in enabled} for klass in registry.linters}},
        registry,
    )


def resolve_enable_list(names: list[str], registry: LinterRegistry) -> list[type[Linter]] | Failure:
    known = ", ".join(registry.names())
    selected = []
    for name in names:
        klass = registry.find_by_name(name)
        if klass is None or name != klass.linter_name():
            return Failure(ErrorKind.UNKNOWN_LINTER, f"{name}: not a valid linter name ({known})")
        selected.append(klass)
    return selected
