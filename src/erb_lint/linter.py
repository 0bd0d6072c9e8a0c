import os
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .discovery import matches_any
from .models import Correction, Offense, Severity, SourceRange
from .source import ProcessedSource


def underscore(name: str) -> str:
    """Convert a class name such as `FinalNewline` to `final_newline`."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


class LinterConfig(BaseModel):
    """Options shared by every linter. Subclasses add linter-specific options."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = False
    exclude: list[str] = Field(default_factory=list)

    def excludes_file(self, absolute_filename: str, base_path: str) -> bool:
        return matches_any(absolute_filename, base_path, self.exclude)


class Linter(ABC):
    """Abstract base class for all linters.

    A linter is constructed once per file with its resolved configuration and
    reports findings through `add_offense` while `run` walks the source.
    """

    config_schema: ClassVar[type[LinterConfig]] = LinterConfig

    def __init__(self, config: LinterConfig, base_path: str | None = None):
        self.config = config
        self.base_path = base_path or os.getcwd()
        self.offenses: list[Offense] = []

    @classmethod
    def simple_name(cls) -> str:
        return cls.__name__

    @classmethod
    def linter_name(cls) -> str:
        return underscore(cls.__name__)

    @classmethod
    def supports_autocorrect(cls) -> bool:
        return False

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def excludes_file(self, absolute_filename: str) -> bool:
        return self.config.excludes_file(absolute_filename, self.base_path)

    @abstractmethod
    def run(self, processed_source: ProcessedSource) -> None:
        """Inspect the source and add offenses."""

    def add_offense(
        self,
        source_range: SourceRange,
        message: str,
        context: Any = None,
        severity: Severity | None = None,
        correction: Correction | None = None,
    ) -> Offense:
        offense = Offense(
            linter_name=self.simple_name(),
            source_range=source_range,
            message=message,
            severity=severity,
            context=context,
            correction=correction,
        )
        self.offenses.append(offense)
        return offense

    def clear_offenses(self) -> None:
        self.offenses = []


class CorrectableLinter(Linter):
    """A linter that can propose text replacements for its offenses."""

    @classmethod
    def supports_autocorrect(cls) -> bool:
        return True

    def autocorrect(self, processed_source: ProcessedSource, offense: Offense) -> Correction | None:
        """Return the replacement that fixes `offense`, if there is one."""
        return offense.correction
