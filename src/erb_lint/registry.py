import importlib.util
import inspect
import logging
from collections.abc import Iterable
from pathlib import Path

from .linter import CorrectableLinter, Linter

logger = logging.getLogger(__name__)

CUSTOM_LINTERS_DIR = ".erb-linters"


class LinterRegistry:
    """Registry of linter classes, in registration order.

    Built once before a run and passed to whoever needs to look linters up.
    """

    def __init__(self, linters: Iterable[type[Linter]] = ()):
        self._linters: list[type[Linter]] = []
        for klass in linters:
            self.register(klass)

    @classmethod
    def with_builtin_linters(cls) -> "LinterRegistry":
        from .linters import BUILTIN_LINTERS

        return cls(BUILTIN_LINTERS)

    def register(self, klass: type[Linter]) -> None:
        if not (inspect.isclass(klass) and issubclass(klass, Linter)):
            raise TypeError(f"{klass!r} is not a Linter subclass")
        if self.find_by_name(klass.simple_name()) is not None:
            raise ValueError(f"{klass.simple_name()}: linter already registered")
        self._linters.append(klass)

    @property
    def linters(self) -> list[type[Linter]]:
        return list(self._linters)

    def names(self) -> list[str]:
        return [klass.linter_name() for klass in self._linters]

    def find_by_name(self, name: str) -> type[Linter] | None:
        """Exact, case-sensitive lookup by class name (`FinalNewline`) or linter name (`final_newline`)."""
        for klass in self._linters:
            if name in (klass.simple_name(), klass.linter_name()):
                return klass
        return None

    def __contains__(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def __len__(self) -> int:
        return len(self._linters)

    def load_custom_linters(self, directory: Path | str = CUSTOM_LINTERS_DIR) -> list[type[Linter]]:
        """Import every Python file in `directory` and register the linters it defines."""
        directory = Path(directory)
        if not directory.is_dir():
            return []

        loaded = []
        for path in sorted(directory.glob("*.py")):
            spec = importlib.util.spec_from_file_location(f"erb_lint_custom.{path.stem}", path)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)

            for klass in list(vars(module).values()):
                if not inspect.isclass(klass) or not issubclass(klass, Linter):
                    continue
                if klass in (Linter, CorrectableLinter):
                    continue
                if klass.__module__ != module.__name__ or inspect.isabstract(klass):
                    continue
                self.register(klass)
                loaded.append(klass)
                logger.debug("Loaded custom linter %s from %s", klass.simple_name(), path)
        return loaded
