from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..models import Offense, Stats


class Reporter(ABC):
    """Renders the results of a run. Every method returns text and writes nothing."""

    def __init__(self, stats: Stats, autocorrect: bool = False, show_linter_names: bool = False):
        self.stats = stats
        self.autocorrect = autocorrect
        self.show_linter_names = show_linter_names

    def preview(self) -> str | None:
        """Line announcing what is about to be linted."""
        stats = self.stats
        if self.autocorrect:
            return (
                f"Linting and autocorrecting {stats.files} files with {stats.linters} linters "
                f"({stats.autocorrectable_linters} autocorrectable)..."
            )
        return f"Linting {stats.files} files with {stats.linters} linters..."

    @abstractmethod
    def render(self) -> str:
        """The report itself."""

    def summary(self) -> str | None:
        stats = self.stats
        lines = []
        if stats.corrected > 0:
            if stats.found > 0:
                lines.append(
                    f"{stats.corrected} error(s) corrected and {stats.found} error(s) remaining in ERB files"
                )
            else:
                lines.append(f"{stats.corrected} error(s) corrected in ERB files")
        elif stats.ignored > 0 or stats.found > 0:
            if stats.ignored > 0:
                lines.append(f"{stats.ignored} error(s) were ignored in ERB files")
            if stats.found > 0:
                lines.append(f"{stats.found} error(s) were found in ERB files")
        else:
            lines.append("No errors were found in ERB files")
        return "\n".join(lines)

    def format_message(self, offense: Offense) -> str:
        if self.show_linter_names:
            return f"[{offense.linter_name}] {offense.message}"
        return offense.message

    def each_offense(self) -> Iterator[tuple[str, Offense]]:
        for filename, offenses in self.stats.processed_files.items():
            for offense in offenses:
                yield filename, offense
