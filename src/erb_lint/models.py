from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Severity(IntEnum):
    """Offense severity levels, ordered from least to most severe."""

    INFO = 1
    REFACTOR = 2
    CONVENTION = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6

    @property
    def code(self) -> str:
        return self.name[0]

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def names(cls) -> list[str]:
        return [member.label for member in cls]

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Accept a single-letter code (I, R, C, W, E, F) or a full name."""
        text = value.strip()
        for member in cls:
            if text.upper() == member.code or text.lower() == member.label:
                return member
        raise ValueError(f"{value}: not a valid failure level ({', '.join(cls.names())})")


@dataclass(frozen=True)
class SourceRange:
    """A half-open character range [begin_pos, end_pos) inside one file."""

    begin_pos: int
    end_pos: int
    line: int
    column: int
    last_line: int
    last_column: int

    @property
    def length(self) -> int:
        return self.end_pos - self.begin_pos


@dataclass(frozen=True)
class Correction:
    """Replace the text in [begin_pos, end_pos) with `replacement`."""

    begin_pos: int
    end_pos: int
    replacement: str

    def overlaps(self, other: "Correction") -> bool:
        # Two insertions at the same point conflict as well, since their order is ambiguous.
        if self.begin_pos == other.begin_pos:
            return True
        return self.begin_pos < other.end_pos and other.begin_pos < self.end_pos


@dataclass(frozen=True)
class Offense:
    """A single finding emitted by a linter"""

    linter_name: str
    source_range: SourceRange
    message: str
    severity: Severity | None = None
    context: Any = None
    correction: Correction | None = None

    @property
    def effective_severity(self) -> Severity:
        # Offenses without an explicit severity count as errors
        return self.severity if self.severity is not None else Severity.ERROR

    @property
    def line_number(self) -> int:
        return self.source_range.line

    @property
    def column(self) -> int:
        return self.source_range.column

    @property
    def last_line(self) -> int:
        return self.source_range.last_line

    @property
    def last_column(self) -> int:
        return self.source_range.last_column

    @property
    def length(self) -> int:
        return self.source_range.length


@dataclass
class FileResult:
    """Outcome of linting (and possibly correcting) one file."""

    filename: str
    offenses: list[Offense] = field(default_factory=list)
    corrected_content: str | None = None
    corrected: int = 0
    dropped_corrections: list[Offense] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return self.corrected_content is not None


@dataclass
class Stats:
    """Aggregated results handed to reporters."""

    found: int = 0
    ignored: int = 0
    corrected: int = 0
    linters: int = 0
    autocorrectable_linters: int = 0
    files: int = 0
    processed_files: dict[str, list[Offense]] = field(default_factory=dict)

    @property
    def total_offenses(self) -> int:
        return sum(len(offenses) for offenses in self.processed_files.values())
