from dataclasses import dataclass, field
from enum import Enum

from erb_lint.models import Stats
from erb_lint.policy import Decision


class ErrorKind(str, Enum):
    CONFIG_NOT_FOUND = "config_not_found"
    CONFIG_PARSE = "config_parse"
    INVALID_CONFIG = "invalid_config"
    INVALID_FAIL_LEVEL = "invalid_fail_level"
    UNKNOWN_FORMAT = "unknown_format"
    UNKNOWN_LINTER = "unknown_linter"
    PATH_NOT_FOUND = "path_not_found"
    READ_ERROR = "read_error"
    NO_FILES = "no_files"
    LINTER_CRASHED = "linter_crashed"


@dataclass(frozen=True)
class Failure:
    """A terminal condition that ends the run before (or instead of) a report."""

    kind: ErrorKind
    message: str


@dataclass
class Outcome:
    stats: Stats = field(default_factory=Stats)
    decision: Decision | None = None
    failure: Failure | None = None

    @property
    def success(self) -> bool:
        if self.failure is not None:
            return False
        return self.decision is None or self.decision.success
