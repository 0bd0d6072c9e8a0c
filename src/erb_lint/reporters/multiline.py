from .base import Reporter


class MultilineReporter(Reporter):
    """Default reporter: each message followed by the file and line it was found in."""

    def render(self) -> str:
        lines = []
        for filename, offense in self.each_offense():
            lines.append("")
            lines.append(self.format_message(offense))
            lines.append(f"In file: {filename}:{offense.line_number}")
        if lines:
            lines.append("")
        return "\n".join(lines)
