import re

from ..linter import Linter
from ..source import ProcessedSource

JAVASCRIPT_TAG = re.compile(r"\bjavascript_tag\b")


class NoJavascriptTagHelper(Linter):
    def run(self, processed_source: ProcessedSource) -> None:
        for tag in processed_source.erb_tags():
            if tag.is_comment:
                continue
            match = JAVASCRIPT_TAG.search(tag.code)
            if match is None:
                continue
            self.add_offense(
                processed_source.to_source_range(tag.begin_pos, tag.end_pos),
                "Avoid using 'javascript_tag do' as it confuses tests "
                "that validate html, use inline <script> instead",
            )
