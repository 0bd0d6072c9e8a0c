"""
erb-lint - Lint orchestration for ERB templates

This package provides:
- Layered configuration resolved per linter
- A registry of pluggable linters
- A run engine with non-overlapping auto-correction
- Fail-level decisions and several report formats
"""

from .config import RunnerConfig, load_config_file
from .corrector import Corrector
from .engine import LinterEngine
from .exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ErbLintError,
    LinterExecutionError,
    LinterNotFoundError,
    PathNotFoundError,
)
from .linter import CorrectableLinter, Linter, LinterConfig
from .models import Correction, FileResult, Offense, Severity, SourceRange, Stats
from .policy import DEFAULT_FAIL_LEVEL, Decision, decide
from .registry import LinterRegistry
from .source import ProcessedSource
from .version import __version__

__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "CorrectableLinter",
    "Correction",
    "Corrector",
    "DEFAULT_FAIL_LEVEL",
    "Decision",
    "ErbLintError",
    "FileResult",
    "Linter",
    "LinterConfig",
    "LinterEngine",
    "LinterExecutionError",
    "LinterNotFoundError",
    "LinterRegistry",
    "Offense",
    "PathNotFoundError",
    "ProcessedSource",
    "RunnerConfig",
    "Severity",
    "SourceRange",
    "Stats",
    "__version__",
    "decide",
    "load_config_file",
]
