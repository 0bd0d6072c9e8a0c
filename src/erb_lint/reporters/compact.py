from .base import Reporter


class CompactReporter(Reporter):
    """One `path:line:column: message` line per offense."""

    def render(self) -> str:
        return "\n".join(
            f"{filename}:{offense.line_number}:{offense.column}: {self.format_message(offense)}"
            for filename, offense in self.each_offense()
        )
