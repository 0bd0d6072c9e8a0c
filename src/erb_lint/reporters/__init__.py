from .base import Reporter
from .compact import CompactReporter
from .json import JsonReporter
from .junit import JunitReporter
from .multiline import MultilineReporter

DEFAULT_FORMAT = "multiline"

REPORTERS: dict[str, type[Reporter]] = {
    "compact": CompactReporter,
    "json": JsonReporter,
    "junit": JunitReporter,
    "multiline": MultilineReporter,
}


def available_formats() -> list[str]:
    return sorted(REPORTERS)


def reporter_for(format_name: str) -> type[Reporter] | None:
    return REPORTERS.get(format_name)


__all__ = [
    "DEFAULT_FORMAT",
    "REPORTERS",
    "CompactReporter",
    "JsonReporter",
    "JunitReporter",
    "MultilineReporter",
    "Reporter",
    "available_formats",
    "reporter_for",
]
