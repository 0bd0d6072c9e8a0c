import pytest
from typer.testing import CliRunner

from erb_lint.linter import Linter
from erb_lint.linters import FinalNewline
from erb_lint.models import Severity
from erb_lint.registry import LinterRegistry
from erb_lint_cli.main import create_app


class LinterWithErrors(Linter):
    def run(self, processed_source):
        self.add_offense(processed_source.to_source_range(1, 2), "fake message from a fake linter")


class LinterWithInfoErrors(Linter):
    def run(self, processed_source):
        self.add_offense(
            processed_source.to_source_range(1, 2),
            "fake info message from a fake linter",
            severity=Severity.INFO,
        )


class LinterWithoutErrors(Linter):
    def run(self, processed_source):
        pass


class CrashingLinter(Linter):
    def run(self, processed_source):
        raise RuntimeError("boom")


FAKE_LINTERS = [LinterWithErrors, LinterWithInfoErrors, LinterWithoutErrors, FinalNewline]


@pytest.fixture
def registry():
    return LinterRegistry(FAKE_LINTERS)


@pytest.fixture
def app(registry):
    return create_app(lambda: registry)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty working directory for the duration of the test"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def template(workdir):
    path = workdir / "app" / "views" / "template.html.erb"
    path.parent.mkdir(parents=True)
    path.write_text("this is a fine file", encoding="utf-8")
    return path
