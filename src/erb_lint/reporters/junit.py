import platform
import xml.etree.ElementTree as ET

from ..version import __version__
from .base import Reporter


class JunitReporter(Reporter):
    """JUnit XML: one test case per file, one failure per offense."""

    def preview(self) -> None:
        return None

    def summary(self) -> None:
        return None

    def render(self) -> str:
        stats = self.stats
        failures = stats.total_offenses
        suite = ET.Element(
            "testsuite",
            name="erblint",
            tests=str(len(stats.processed_files)),
            failures=str(failures),
        )

        properties = ET.SubElement(suite, "properties")
        for name, value in (
            ("erb_lint_version", __version__),
            ("python_implementation", platform.python_implementation()),
            ("python_version", platform.python_version()),
            ("platform", platform.platform()),
            ("found", str(stats.found)),
            ("ignored", str(stats.ignored)),
        ):
            ET.SubElement(properties, "property", name=name, value=value)

        for filename, offenses in stats.processed_files.items():
            testcase = ET.SubElement(suite, "testcase", name=filename, file=filename)
            for offense in offenses:
                type_ = offense.linter_name
                message = f"{type_}: {offense.message}"
                failure = ET.SubElement(
                    testcase,
                    "failure",
                    message=message,
                    type=type_,
                    severity=offense.effective_severity.label,
                    line=str(offense.line_number),
                    column=str(offense.column),
                    length=str(offense.length),
                )
                failure.text = f"{message} at {filename}:{offense.line_number}:{offense.column}"

        ET.indent(suite, space="  ")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(suite, encoding="unicode")
