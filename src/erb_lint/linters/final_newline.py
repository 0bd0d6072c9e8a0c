import re

from ..linter import CorrectableLinter, LinterConfig
from ..models import Correction
from ..source import ProcessedSource

TRAILING_NEWLINES = re.compile(r"\n+\Z")


class FinalNewlineConfig(LinterConfig):
    present: bool = True


class FinalNewline(CorrectableLinter):
    """Checks that a file ends with exactly one newline (or none, with `present = false`)."""

    config_schema = FinalNewlineConfig

    def run(self, processed_source: ProcessedSource) -> None:
        content = processed_source.file_content
        if not content:
            return

        match = TRAILING_NEWLINES.search(content)
        final_newline = match.group(0) if match else ""
        size = len(content)

        if self.config.present and len(final_newline) != 1:
            if not final_newline:
                self.add_offense(
                    processed_source.to_source_range(size, size),
                    "Missing a trailing newline at the end of the file.",
                    correction=Correction(size, size, "\n"),
                )
            else:
                begin = size - len(final_newline) + 1
                self.add_offense(
                    processed_source.to_source_range(begin, size),
                    "Remove multiple trailing newline at the end of the file.",
                    correction=Correction(begin, size, ""),
                )
        elif not self.config.present and final_newline:
            self.add_offense(
                processed_source.to_source_range(match.start(), match.end()),
                f"Remove {len(final_newline)} trailing newline at the end of the file.",
                correction=Correction(match.start(), match.end(), ""),
            )
