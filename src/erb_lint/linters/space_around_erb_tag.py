import re

from ..linter import CorrectableLinter
from ..models import Correction
from ..source import ErbTag, ProcessedSource

START_SPACES = re.compile(r"\A\s*")
END_SPACES = re.compile(r"\s*\Z")


def _spaces(count: int) -> str:
    return f"{count} space{'s' if count > 1 else ''}"


class SpaceAroundErbTag(CorrectableLinter):
    """Requires exactly one space (or a newline) inside the `<%` and `%>` delimiters."""

    def run(self, processed_source: ProcessedSource) -> None:
        for tag in processed_source.erb_tags():
            if tag.is_comment or not tag.code.strip():
                continue
            self._check_start(processed_source, tag)
            self._check_end(processed_source, tag)

    def _check_start(self, processed_source: ProcessedSource, tag: ErbTag) -> None:
        start_spaces = START_SPACES.match(tag.code).group(0)
        if len(start_spaces) == 1 or "\n" in start_spaces:
            return
        begin = tag.code_begin
        end = begin + len(start_spaces)
        self.add_offense(
            processed_source.to_source_range(begin, end),
            f"Use 1 space after `<%{tag.indicator}` instead of {_spaces(len(start_spaces))}.",
            correction=Correction(begin, end, " "),
        )

    def _check_end(self, processed_source: ProcessedSource, tag: ErbTag) -> None:
        end_spaces = END_SPACES.search(tag.code).group(0)
        if len(end_spaces) == 1 or "\n" in end_spaces:
            return
        end = tag.code_end
        begin = end - len(end_spaces)
        self.add_offense(
            processed_source.to_source_range(begin, end),
            f"Use 1 space before `{tag.trim}%>` instead of {_spaces(len(end_spaces))}.",
            correction=Correction(begin, end, " "),
        )
