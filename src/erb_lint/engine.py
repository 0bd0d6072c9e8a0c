import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .config import RunnerConfig
from .corrector import Corrector
from .exceptions import LinterExecutionError
from .linter import Linter
from .models import FileResult, Offense
from .source import ProcessedSource

logger = logging.getLogger(__name__)

MAX_AUTOCORRECT_PASSES = 7


class LinterEngine:
    """Runs a fixed, ordered set of linters over files."""

    def __init__(
        self,
        config: RunnerConfig,
        linter_classes: Iterable[type[Linter]],
        base_path: str | None = None,
    ):
        self.config = config
        self.base_path = base_path or os.getcwd()
        self.linter_classes = list(linter_classes)
        # Resolve every linter config up front so a bad option fails before any file is read
        self.linter_configs = {klass: config.for_linter(klass) for klass in self.linter_classes}
        self.linters: list[Linter] = []

    @property
    def autocorrectable_count(self) -> int:
        return sum(1 for klass in self.linter_classes if klass.supports_autocorrect())

    def applicable_linters(self, filename: str) -> list[type[Linter]]:
        absolute = str(Path(filename).absolute())
        return [
            klass
            for klass in self.linter_classes
            if not self.linter_configs[klass].excludes_file(absolute, self.base_path)
        ]

    def run(self, processed_source: ProcessedSource) -> list[Offense]:
        """Run every applicable linter once and return offenses in registration order."""
        self.linters = [
            klass(self.linter_configs[klass], self.base_path)
            for klass in self.applicable_linters(processed_source.filename)
        ]

        offenses: list[Offense] = []
        for linter in self.linters:
            try:
                linter.run(processed_source)
            except Exception as exc:
                raise LinterExecutionError(linter.simple_name(), processed_source.filename, exc) from exc
            offenses.extend(linter.offenses)
        return offenses

    def run_file(self, filename: str, file_content: str, autocorrect: bool = False) -> FileResult:
        """Lint one file, correcting it first when `autocorrect` is set.

        Correction is repeated on the corrected text until nothing changes,
        and the offenses reported are those of the final text.
        """
        result = FileResult(filename=filename)
        content = file_content

        for _ in range(MAX_AUTOCORRECT_PASSES):
            processed_source = ProcessedSource(filename, content)
            result.offenses = self.run(processed_source)
            if not autocorrect or not result.offenses:
                break

            corrector = Corrector(processed_source, self.linters)
            result.dropped_corrections = corrector.dropped
            if not corrector.corrections or corrector.corrected_content == content:
                break

            logger.debug("Applied %d corrections to %s", len(corrector.corrections), filename)
            result.corrected += len(corrector.corrections)
            content = corrector.corrected_content
        else:
            # Out of passes right after correcting: report what is left in the corrected text
            result.offenses = self.run(ProcessedSource(filename, content))

        if content != file_content:
            result.corrected_content = content
        return result
