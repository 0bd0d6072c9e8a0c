import re

from ..linter import CorrectableLinter
from ..models import Correction
from ..source import ProcessedSource

TRAILING_WHITESPACE = re.compile(r"[ \t]+(?=\r?$)", re.MULTILINE)


class TrailingWhitespace(CorrectableLinter):
    def run(self, processed_source: ProcessedSource) -> None:
        for match in TRAILING_WHITESPACE.finditer(processed_source.file_content):
            self.add_offense(
                processed_source.to_source_range(match.start(), match.end()),
                "Extra whitespace detected at end of line.",
                correction=Correction(match.start(), match.end(), ""),
            )
