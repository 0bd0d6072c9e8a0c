from typing import Literal

from ..linter import CorrectableLinter, LinterConfig
from ..models import Correction
from ..source import ProcessedSource


class RightTrimConfig(LinterConfig):
    enforced_style: Literal["-", "="] = "-"


class RightTrim(CorrectableLinter):
    """Enforces one style of right trim marker (`-%>` or `=%>`)."""

    config_schema = RightTrimConfig

    def run(self, processed_source: ProcessedSource) -> None:
        expected = self.config.enforced_style
        for tag in processed_source.erb_tags():
            if not tag.trim or tag.trim == expected:
                continue
            # The trim marker sits right before the closing `%>`
            trim_pos = tag.end_pos - 3
            self.add_offense(
                processed_source.to_source_range(trim_pos, trim_pos + 1),
                f"Prefer `{expected}%>` instead of `{tag.trim}%>` for trimming on the right.",
                correction=Correction(trim_pos, trim_pos + 1, expected),
            )
