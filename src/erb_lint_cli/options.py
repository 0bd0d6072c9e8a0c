from pathlib import Path

from erb_lint.reporters import DEFAULT_FORMAT
from pydantic import BaseModel, Field


class LintOptions(BaseModel):
    """Everything a single invocation was asked to do"""

    files: list[Path] = Field(default_factory=list)
    config: Path | None = None
    lint_all: bool = False
    enable_linters: list[str] | None = None
    enable_all_linters: bool = False
    fail_level: str | None = None
    format: str = DEFAULT_FORMAT
    autocorrect: bool = False
    stdin: Path | None = None
    allow_no_files: bool = False
    show_linter_names: bool = False

    @property
    def has_targets(self) -> bool:
        return bool(self.files) or self.lint_all or self.stdin is not None


def split_linter_names(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]
