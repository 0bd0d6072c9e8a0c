import logging
from collections.abc import Iterable

from .linter import Linter
from .models import Correction, Offense
from .source import ProcessedSource

logger = logging.getLogger(__name__)


class Corrector:
    """Applies the corrections proposed for one file's offenses.

    Candidates are considered in offense order, so when two corrections
    overlap the one from the earlier registered linter is kept. Accepted
    corrections are applied from the end of the file backwards so earlier
    offsets stay valid.
    """

    def __init__(self, processed_source: ProcessedSource, linters: Iterable[Linter]):
        self.processed_source = processed_source
        self.corrections: list[tuple[Offense, Correction]] = []
        self.dropped: list[Offense] = []

        for linter in linters:
            if not linter.supports_autocorrect():
                continue
            for offense in linter.offenses:
                correction = linter.autocorrect(processed_source, offense)
                if correction is not None:
                    self._accept(offense, correction)

        self.corrected_content = self.apply(processed_source.file_content, self.accepted)

    @property
    def accepted(self) -> list[Correction]:
        return [correction for _, correction in self.corrections]

    def _accept(self, offense: Offense, correction: Correction) -> None:
        for _, kept in self.corrections:
            if correction.overlaps(kept):
                logger.debug(
                    "Dropping %s correction at %d...%d in %s: overlaps an earlier correction",
                    offense.linter_name,
                    correction.begin_pos,
                    correction.end_pos,
                    self.processed_source.filename,
                )
                self.dropped.append(offense)
                return
        self.corrections.append((offense, correction))

    @staticmethod
    def apply(content: str, corrections: Iterable[Correction]) -> str:
        ordered = sorted(corrections, key=lambda c: (c.begin_pos, c.end_pos), reverse=True)
        for correction in ordered:
            content = content[: correction.begin_pos] + correction.replacement + content[correction.end_pos :]
        return content
