from collections.abc import Iterable
from dataclasses import dataclass

from .models import Offense, Severity

DEFAULT_FAIL_LEVEL = Severity.REFACTOR


def parse_fail_level(value: str | None) -> Severity:
    """Parse a `--fail-level` value; raises ValueError for unknown levels."""
    if value is None:
        return DEFAULT_FAIL_LEVEL
    return Severity.parse(value)


def counts_toward_failure(offense: Offense, fail_level: Severity) -> bool:
    return offense.effective_severity >= fail_level


def partition(offenses: Iterable[Offense], fail_level: Severity) -> tuple[list[Offense], list[Offense]]:
    """Split offenses into (found, ignored) around `fail_level`."""
    found, ignored = [], []
    for offense in offenses:
        (found if counts_toward_failure(offense, fail_level) else ignored).append(offense)
    return found, ignored


@dataclass(frozen=True)
class Decision:
    found: int
    ignored: int

    @property
    def success(self) -> bool:
        return self.found == 0


def decide(offenses: Iterable[Offense], fail_level: Severity = DEFAULT_FAIL_LEVEL) -> Decision:
    found, ignored = partition(offenses, fail_level)
    return Decision(found=len(found), ignored=len(ignored))
