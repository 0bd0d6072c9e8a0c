import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import typer
from erb_lint.registry import CUSTOM_LINTERS_DIR, LinterRegistry
from erb_lint.reporters import DEFAULT_FORMAT, available_formats
from erb_lint.version import __version__

from .options import LintOptions, split_linter_names
from .session import LintSession


def default_registry() -> LinterRegistry:
    """Built-in linters followed by any project linters found in `.erb-linters/`"""
    registry = LinterRegistry.with_builtin_linters()
    registry.load_custom_linters(CUSTOM_LINTERS_DIR)
    return registry


def _echo_err(message: str, **kwargs) -> None:
    typer.echo(message, err=True, **kwargs)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def create_app(registry_factory: Callable[[], LinterRegistry] = default_registry) -> typer.Typer:
    app = typer.Typer(help="erb-lint - Lint ERB templates", add_completion=False, rich_markup_mode=None)

    @app.command(options_metavar="[options]")
    def lint(
        ctx: typer.Context,
        files: Optional[list[Path]] = typer.Argument(
            None, metavar="[file1, file2, ...]", help="Files or directories to lint"
        ),
        config: Optional[Path] = typer.Option(None, "--config", help="Config file [default: .erb-lint.toml]"),
        lint_all: bool = typer.Option(False, "--lint-all", help="Lint all files matching the configured glob"),
        enable_linter: Optional[str] = typer.Option(
            None, "--enable-linter", help="Only use the given linters (comma separated)"
        ),
        enable_all_linters: bool = typer.Option(False, "--enable-all-linters", help="Enable all known linters"),
        fail_level: Optional[str] = typer.Option(
            None, "--fail-level", help="Minimum severity for exit with error code: I, R, C, W, E or F"
        ),
        format: str = typer.Option(
            DEFAULT_FORMAT,
            "--format",
            help=f"Report offenses in the given format: ({', '.join(available_formats())})",
        ),
        autocorrect: bool = typer.Option(False, "--autocorrect", "-a", help="Correct offenses automatically"),
        stdin: Optional[Path] = typer.Option(
            None, "--stdin", help="Lint an input stream (not a file) using the given path for configuration"
        ),
        allow_no_files: bool = typer.Option(False, "--allow-no-files", help="Succeed when no files are found"),
        show_linter_names: bool = typer.Option(False, "--show-linter-names", help="Show linter names"),
        verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ):
        """Lint ERB templates"""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

        registry = registry_factory()
        options = LintOptions(
            files=files or [],
            config=config,
            lint_all=lint_all,
            enable_linters=split_linter_names(enable_linter),
            enable_all_linters=enable_all_linters,
            fail_level=fail_level,
            format=format,
            autocorrect=autocorrect,
            stdin=stdin,
            allow_no_files=allow_no_files,
            show_linter_names=show_linter_names,
        )

        if not options.has_targets:
            _echo_err(ctx.get_help())
            _echo_err(f"Known linters are: {', '.join(registry.names())}")
            raise typer.Exit(code=1)

        outcome = LintSession(options, registry, out=typer.echo, err=_echo_err).run()
        if outcome.failure is not None:
            _echo_err(typer.style(outcome.failure.message, fg=typer.colors.RED))
        raise typer.Exit(code=0 if outcome.success else 1)

    return app


app = create_app()


if __name__ == "__main__":
    app()
