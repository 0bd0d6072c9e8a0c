import json
import xml.etree.ElementTree as ET

import pytest

from erb_lint.models import Offense, Severity, SourceRange, Stats
from erb_lint.reporters import (
    CompactReporter,
    JsonReporter,
    JunitReporter,
    MultilineReporter,
    available_formats,
    reporter_for,
)


def offense(message, line=1, column=0, length=1, linter_name="FinalNewline", severity=None):
    begin = column
    source_range = SourceRange(begin, begin + length, line, column, line, column + length)
    return Offense(linter_name=linter_name, source_range=source_range, message=message, severity=severity)


@pytest.fixture
def stats():
    stats = Stats(linters=2, autocorrectable_linters=1, files=2)
    stats.processed_files["app/views/a.html.erb"] = [
        offense("Extra blank line detected.", line=3, column=0),
        offense("Missing a trailing newline at the end of the file.", line=5, column=12, length=0),
    ]
    stats.processed_files["app/views/b.html.erb"] = []
    stats.found = 2
    return stats


def test_available_formats():
    assert available_formats() == ["compact", "json", "junit", "multiline"]
    assert reporter_for("compact") is CompactReporter
    assert reporter_for("xml") is None


class TestPreviewAndSummary:
    def test_preview(self, stats):
        assert MultilineReporter(stats).preview() == "Linting 2 files with 2 linters..."
        assert MultilineReporter(stats, autocorrect=True).preview() == (
            "Linting and autocorrecting 2 files with 2 linters (1 autocorrectable)..."
        )

    def test_found(self, stats):
        assert MultilineReporter(stats).summary() == "2 error(s) were found in ERB files"

    def test_ignored_and_found(self, stats):
        stats.ignored = 3
        assert MultilineReporter(stats).summary() == (
            "3 error(s) were ignored in ERB files\n2 error(s) were found in ERB files"
        )

    def test_nothing_found(self):
        assert CompactReporter(Stats()).summary() == "No errors were found in ERB files"

    def test_corrected(self):
        stats = Stats(corrected=4)
        assert CompactReporter(stats).summary() == "4 error(s) corrected in ERB files"
        stats.found = 1
        assert CompactReporter(stats).summary() == "4 error(s) corrected and 1 error(s) remaining in ERB files"


def test_multiline(stats):
    assert MultilineReporter(stats).render() == (
        "\n"
        "Extra blank line detected.\n"
        "In file: app/views/a.html.erb:3\n"
        "\n"
        "Missing a trailing newline at the end of the file.\n"
        "In file: app/views/a.html.erb:5\n"
    )


def test_multiline_without_offenses():
    assert MultilineReporter(Stats()).render() == ""


def test_compact_lines_can_be_parsed_back(stats):
    lines = CompactReporter(stats).render().split("\n")
    parsed = [line.split(":", 3) for line in lines]
    assert parsed == [
        ["app/views/a.html.erb", "3", "0", " Extra blank line detected."],
        ["app/views/a.html.erb", "5", "12", " Missing a trailing newline at the end of the file."],
    ]


def test_show_linter_names(stats):
    rendered = CompactReporter(stats, show_linter_names=True).render()
    assert rendered.split("\n")[0] == "app/views/a.html.erb:3:0: [FinalNewline] Extra blank line detected."


def test_json(stats):
    reporter = JsonReporter(stats)
    assert reporter.preview() is None
    assert reporter.summary() is None

    report = json.loads(reporter.render())
    assert report["summary"] == {"offenses": 2, "found": 2, "ignored": 0, "inspected_files": 2, "corrected": 0}
    assert [f["path"] for f in report["files"]] == ["app/views/a.html.erb", "app/views/b.html.erb"]
    assert report["files"][1]["offenses"] == []
    assert report["files"][0]["offenses"][1] == {
        "linter": "FinalNewline",
        "message": "Missing a trailing newline at the end of the file.",
        "severity": "error",
        "location": {"start_line": 5, "start_column": 12, "last_line": 5, "last_column": 12, "length": 0},
    }
    assert set(report["metadata"]) == {"erb_lint_version", "python_implementation", "python_version", "platform"}


def test_junit(stats):
    rendered = JunitReporter(stats).render()
    assert rendered.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')

    suite = ET.fromstring(rendered.split("\n", 1)[1])
    assert suite.tag == "testsuite"
    assert suite.get("name") == "erblint"
    assert suite.get("tests") == "2"
    assert suite.get("failures") == "2"

    testcases = suite.findall("testcase")
    assert [t.get("name") for t in testcases] == ["app/views/a.html.erb", "app/views/b.html.erb"]
    assert testcases[1].findall("failure") == []

    failure = testcases[0].findall("failure")[1]
    assert failure.get("type") == "FinalNewline"
    assert failure.get("message") == "FinalNewline: Missing a trailing newline at the end of the file."
    assert (failure.get("line"), failure.get("column"), failure.get("length")) == ("5", "12", "0")
    assert failure.text.endswith("at app/views/a.html.erb:5:12")


@pytest.fixture
def mixed_stats():
    stats = Stats(linters=2, files=1)
    stats.processed_files["app/views/a.html.erb"] = [
        offense("fake info message", linter_name="LinterWithInfoErrors", severity=Severity.INFO),
        offense("fake message", line=2, linter_name="LinterWithErrors"),
    ]
    stats.found, stats.ignored = 1, 1
    return stats


def test_json_labels_severity_and_splits_found_from_ignored(mixed_stats):
    report = json.loads(JsonReporter(mixed_stats).render())
    assert [o["severity"] for o in report["files"][0]["offenses"]] == ["info", "error"]
    assert report["summary"]["found"] == 1
    assert report["summary"]["ignored"] == 1
    assert report["summary"]["offenses"] == 2


def test_junit_labels_severity_and_splits_found_from_ignored(mixed_stats):
    suite = ET.fromstring(JunitReporter(mixed_stats).render().split("\n", 1)[1])
    failures = suite.find("testcase").findall("failure")
    assert [f.get("severity") for f in failures] == ["info", "error"]

    properties = {p.get("name"): p.get("value") for p in suite.find("properties")}
    assert properties["found"] == "1"
    assert properties["ignored"] == "1"
