import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from erb_lint.config import RunnerConfig
from erb_lint.discovery import DEFAULT_LINT_ALL_GLOB, discover_files, exclude_files
from erb_lint.engine import LinterEngine
from erb_lint.exceptions import ConfigValidationError, LinterExecutionError, PathNotFoundError
from erb_lint.linter import Linter
from erb_lint.models import FileResult, Severity, Stats
from erb_lint.policy import decide, parse_fail_level
from erb_lint.registry import LinterRegistry
from erb_lint.reporters import Reporter, available_formats, reporter_for

from .config import enabled_override, load_runner_config, resolve_enable_list
from .options import LintOptions
from .outcome import ErrorKind, Failure, Outcome

logger = logging.getLogger(__name__)

# Same call signature as typer.echo
Writer = Callable[..., None]

NO_FILES_MESSAGE = "no files found..."


def read_file(path: str) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class LintSession:
    """One invocation: resolve config, find files, pick linters, run, decide, report.

    Any terminal condition is returned as a Failure in the Outcome instead of
    being raised, and nothing is reported once one occurs.
    """

    def __init__(
        self,
        options: LintOptions,
        registry: LinterRegistry,
        out: Writer,
        err: Writer,
        read_stdin: Callable[[], str] = lambda: sys.stdin.read(),
        base_path: str | None = None,
    ):
        self.options = options
        self.registry = registry
        self.out = out
        self.err = err
        self.read_stdin = read_stdin
        self.base_path = base_path or os.getcwd()

    def run(self) -> Outcome:
        prepared = self._prepare()
        if isinstance(prepared, Failure):
            return Outcome(failure=prepared)
        config, fail_level, reporter_class = prepared

        linters = self._select_linters(config)
        if isinstance(linters, Failure):
            return Outcome(failure=linters)

        files = self._discover(config)
        if isinstance(files, Failure):
            return Outcome(failure=files)
        if not files:
            if self.options.allow_no_files:
                self.err(NO_FILES_MESSAGE)
                return Outcome()
            return Outcome(failure=Failure(ErrorKind.NO_FILES, NO_FILES_MESSAGE))

        try:
            engine = LinterEngine(config, linters, self.base_path)
        except ConfigValidationError as exc:
            return Outcome(failure=Failure(ErrorKind.INVALID_CONFIG, str(exc)))

        return self._lint(engine, files, fail_level, reporter_class)

    def _prepare(self) -> tuple[RunnerConfig, Severity, type[Reporter]] | Failure:
        options = self.options

        try:
            fail_level = parse_fail_level(options.fail_level)
        except ValueError as exc:
            return Failure(ErrorKind.INVALID_FAIL_LEVEL, str(exc))

        reporter_class = reporter_for(options.format)
        if reporter_class is None:
            formats = "\n".join(f"  - {name}" for name in available_formats())
            return Failure(
                ErrorKind.UNKNOWN_FORMAT,
                f"{options.format}: is not a valid format. Available formats:\n{formats}",
            )

        config = load_runner_config(options.config, self.registry, self.err)
        if isinstance(config, Failure):
            return config

        if options.enable_all_linters:
            config = config.merge(enabled_override(self.registry, self.registry.linters))
        elif options.enable_linters is not None:
            enabled = resolve_enable_list(options.enable_linters, self.registry)
            if isinstance(enabled, Failure):
                return enabled
            config = config.merge(enabled_override(self.registry, enabled))

        return config, fail_level, reporter_class

    def _select_linters(self, config: RunnerConfig) -> list[type[Linter]] | Failure:
        try:
            return [klass for klass in self.registry.linters if config.for_linter(klass).enabled]
        except ConfigValidationError as exc:
            return Failure(ErrorKind.INVALID_CONFIG, str(exc))

    def _discover(self, config: RunnerConfig) -> list[str] | Failure:
        options = self.options
        try:
            if options.stdin is not None:
                if (Path(self.base_path) / options.stdin).is_dir():
                    return Failure(ErrorKind.PATH_NOT_FOUND, f"{options.stdin}: is not a file")
                files = discover_files([options.stdin], base_path=self.base_path)
            else:
                files = discover_files(
                    options.files,
                    glob=config.glob or DEFAULT_LINT_ALL_GLOB,
                    lint_all=options.lint_all,
                    base_path=self.base_path,
                )
        except PathNotFoundError as exc:
            return Failure(ErrorKind.PATH_NOT_FOUND, str(exc))
        return exclude_files(files, config.global_exclude, self.base_path)

    def _lint(
        self,
        engine: LinterEngine,
        files: list[str],
        fail_level: Severity,
        reporter_class: type[Reporter],
    ) -> Outcome:
        options = self.options
        stats = Stats(
            linters=len(engine.linter_classes),
            autocorrectable_linters=engine.autocorrectable_count,
            files=len(files),
        )
        reporter = reporter_class(stats, options.autocorrect, options.show_linter_names)

        preview = reporter.preview()
        if preview:
            self.err(preview)

        corrected_output = None
        # Nothing is written back until every file has been linted
        pending_writes: list[FileResult] = []
        for filename in files:
            try:
                content = self.read_stdin() if options.stdin is not None else read_file(filename)
            except (OSError, UnicodeDecodeError) as exc:
                return Outcome(stats=stats, failure=Failure(ErrorKind.READ_ERROR, f"{filename}: {exc}"))

            try:
                result = engine.run_file(filename, content, autocorrect=options.autocorrect)
            except LinterExecutionError as exc:
                return Outcome(stats=stats, failure=Failure(ErrorKind.LINTER_CRASHED, f"Error: {exc}"))

            if result.modified:
                stats.corrected += result.corrected
                if options.stdin is not None:
                    corrected_output = result.corrected_content
                else:
                    pending_writes.append(result)
            elif options.stdin is not None and options.autocorrect:
                corrected_output = content

            stats.processed_files[filename] = result.offenses

        for result in pending_writes:
            write_file(result.filename, result.corrected_content)
            logger.debug("Wrote %d corrections to %s", result.corrected, result.filename)

        decision = decide(
            (o for offenses in stats.processed_files.values() for o in offenses),
            fail_level,
        )
        stats.found, stats.ignored = decision.found, decision.ignored

        report = reporter.render()
        if report:
            self.out(report)
        summary = reporter.summary()
        if summary:
            self.err(summary)
        if corrected_output is not None:
            self.out(corrected_output, nl=False)

        return Outcome(stats=stats, decision=decision)
