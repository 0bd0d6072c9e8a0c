import re

from ..linter import CorrectableLinter
from ..models import Correction
from ..source import ProcessedSource

EXTRA_BLANK_LINES = re.compile(r"(?<=\n\n)\n+")


class ExtraNewline(CorrectableLinter):
    """Allows at most one consecutive blank line."""

    def run(self, processed_source: ProcessedSource) -> None:
        for match in EXTRA_BLANK_LINES.finditer(processed_source.file_content):
            # Trailing newlines at the end of the file belong to FinalNewline
            if match.end() == len(processed_source.file_content):
                continue
            self.add_offense(
                processed_source.to_source_range(match.start(), match.end()),
                "Extra blank line detected.",
                correction=Correction(match.start(), match.end(), ""),
            )
