import platform

from pydantic import BaseModel

from ..models import Offense
from ..version import __version__
from .base import Reporter


class Location(BaseModel):
    start_line: int
    start_column: int
    last_line: int
    last_column: int
    length: int


class OffenseReport(BaseModel):
    linter: str
    message: str
    severity: str
    location: Location


class FileReport(BaseModel):
    path: str
    offenses: list[OffenseReport]


class Metadata(BaseModel):
    erb_lint_version: str
    python_implementation: str
    python_version: str
    platform: str


class Summary(BaseModel):
    offenses: int
    found: int
    ignored: int
    inspected_files: int
    corrected: int


class JsonReport(BaseModel):
    metadata: Metadata
    files: list[FileReport]
    summary: Summary


def offense_to_report(offense: Offense) -> OffenseReport:
    return OffenseReport(
        linter=offense.linter_name,
        message=offense.message,
        severity=offense.effective_severity.label,
        location=Location(
            start_line=offense.line_number,
            start_column=offense.column,
            last_line=offense.last_line,
            last_column=offense.last_column,
            length=offense.length,
        ),
    )


class JsonReporter(Reporter):
    """Machine-readable report; writes no preview or summary lines."""

    def preview(self) -> None:
        return None

    def summary(self) -> None:
        return None

    def build(self) -> JsonReport:
        stats = self.stats
        return JsonReport(
            metadata=Metadata(
                erb_lint_version=__version__,
                python_implementation=platform.python_implementation(),
                python_version=platform.python_version(),
                platform=platform.platform(),
            ),
            files=[
                FileReport(path=filename, offenses=[offense_to_report(o) for o in offenses])
                for filename, offenses in stats.processed_files.items()
            ],
            summary=Summary(
                offenses=stats.total_offenses,
                found=stats.found,
                ignored=stats.ignored,
                inspected_files=len(stats.processed_files),
                corrected=stats.corrected,
            ),
        )

    def render(self) -> str:
        return self.build().model_dump_json(indent=2)
