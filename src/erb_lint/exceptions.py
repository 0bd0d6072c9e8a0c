class ErbLintError(Exception):
    """Base class for all erb-lint errors."""


class ConfigError(ErbLintError):
    """Raised when configuration cannot be loaded or resolved."""


class ConfigNotFoundError(ConfigError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"{path}: does not exist")


class ConfigParseError(ConfigError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"error parsing config: {reason}")


class ConfigValidationError(ConfigError):
    """An option in a linter's configuration is unknown or has the wrong type."""

    def __init__(self, linter_name: str, key: str, reason: str):
        self.linter_name = linter_name
        self.key = key
        self.reason = reason
        super().__init__(f"{linter_name}: invalid option '{key}' ({reason})")


class LinterNotFoundError(ErbLintError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name}: linter not found (is it loaded?)")


class LinterExecutionError(ErbLintError):
    """A linter raised while running; aborts the whole invocation."""

    def __init__(self, linter_name: str, filename: str, cause: BaseException):
        self.linter_name = linter_name
        self.filename = filename
        self.cause = cause
        super().__init__(
            f"{linter_name} raised {type(cause).__name__} while linting {filename}: {cause}"
        )


class PathNotFoundError(ErbLintError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"{path}: does not exist")
