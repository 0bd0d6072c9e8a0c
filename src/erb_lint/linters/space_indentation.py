import re

from pydantic import Field

from ..linter import CorrectableLinter, LinterConfig
from ..models import Correction
from ..source import ProcessedSource

LEADING_INDENT = re.compile(r"^[ \t]*\t[ \t]*", re.MULTILINE)


class SpaceIndentationConfig(LinterConfig):
    tab_width: int = Field(default=2, ge=1)


class SpaceIndentation(CorrectableLinter):
    """Flags indentation that contains tab characters."""

    config_schema = SpaceIndentationConfig

    def run(self, processed_source: ProcessedSource) -> None:
        for match in LEADING_INDENT.finditer(processed_source.file_content):
            indent = match.group(0)
            self.add_offense(
                processed_source.to_source_range(match.start(), match.end()),
                "Indent with spaces instead of tabs.",
                correction=Correction(match.start(), match.end(), indent.expandtabs(self.config.tab_width)),
            )
