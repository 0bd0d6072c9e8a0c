"""Built-in linters, in the order they run."""

from .extra_newline import ExtraNewline
from .final_newline import FinalNewline
from .no_javascript_tag_helper import NoJavascriptTagHelper
from .right_trim import RightTrim
from .space_around_erb_tag import SpaceAroundErbTag
from .space_indentation import SpaceIndentation
from .trailing_whitespace import TrailingWhitespace

BUILTIN_LINTERS = [
    FinalNewline,
    RightTrim,
    SpaceAroundErbTag,
    SpaceIndentation,
    TrailingWhitespace,
    ExtraNewline,
    NoJavascriptTagHelper,
]

__all__ = [
    "BUILTIN_LINTERS",
    "ExtraNewline",
    "FinalNewline",
    "NoJavascriptTagHelper",
    "RightTrim",
    "SpaceAroundErbTag",
    "SpaceIndentation",
    "TrailingWhitespace",
]
