import re
from dataclasses import dataclass
from functools import cached_property

from .models import SourceRange

ERB_TAG_PATTERN = re.compile(
    r"<%(?P<indicator>==|=|-|\#|%)?(?P<code>.*?)(?P<trim>[-=])?%>",
    re.DOTALL,
)


@dataclass(frozen=True)
class ErbTag:
    """One `<% ... %>` tag located in a template."""

    begin_pos: int
    end_pos: int
    indicator: str
    code: str
    code_begin: int
    trim: str

    @property
    def code_end(self) -> int:
        return self.code_begin + len(self.code)

    @property
    def is_comment(self) -> bool:
        return self.indicator == "#"

    @property
    def is_escape(self) -> bool:
        # `<%%` produces a literal `<%` and is not a tag at all
        return self.indicator == "%"


class ProcessedSource:
    """Addressable view over the text of one file."""

    def __init__(self, filename: str, file_content: str):
        self.filename = filename
        self.file_content = file_content

    @cached_property
    def lines(self) -> list[str]:
        return self.file_content.split("\n")

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        for match in re.finditer("\n", self.file_content):
            starts.append(match.end())
        return starts

    def line_and_column(self, pos: int) -> tuple[int, int]:
        """Return the 1-based line and 0-based column of a character offset."""
        starts = self._line_starts
        lo, hi = 0, len(starts) - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if starts[mid] <= pos:
                lo = mid
            else:
                hi = mid - 1
        return lo + 1, pos - starts[lo]

    def to_source_range(self, begin_pos: int, end_pos: int) -> SourceRange:
        if not 0 <= begin_pos <= end_pos <= len(self.file_content):
            raise ValueError(
                f"range {begin_pos}...{end_pos} is outside of {self.filename} "
                f"({len(self.file_content)} characters)"
            )
        line, column = self.line_and_column(begin_pos)
        last_line, last_column = self.line_and_column(end_pos)
        return SourceRange(begin_pos, end_pos, line, column, last_line, last_column)

    def line_range(self, line_number: int) -> tuple[int, int]:
        """Character offsets of a 1-based line, excluding its newline."""
        start = self._line_starts[line_number - 1]
        return start, start + len(self.lines[line_number - 1])

    def erb_tags(self) -> list[ErbTag]:
        tags = []
        for match in ERB_TAG_PATTERN.finditer(self.file_content):
            tag = ErbTag(
                begin_pos=match.start(),
                end_pos=match.end(),
                indicator=match.group("indicator") or "",
                code=match.group("code"),
                code_begin=match.start("code"),
                trim=match.group("trim") or "",
            )
            if not tag.is_escape:
                tags.append(tag)
        return tags
