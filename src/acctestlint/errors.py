"""Custom exceptions for acctestlint."""


class AcctestlintError(Exception):
    """Base exception for all acctestlint errors."""

    pass


class ConfigNotFoundError(AcctestlintError):
    """Raised when an explicitly requested config file doesn't exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Config not found at {path}")


class InvalidConfigError(AcctestlintError):
    """Raised when a config file can't be parsed or has bad values."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class InvalidSchemaVersionError(AcctestlintError):
    """Raised when config has an unsupported schema version."""

    def __init__(self, found: int, supported: int):
        self.found = found
        self.supported = supported
        super().__init__(
            f"Unsupported schema version {found}. This tool supports version {supported}."
        )


class SourceNotFoundError(AcctestlintError):
    """Raised when a path given for checking doesn't exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No such file or directory: {path}")


class UnsupportedLanguageError(AcctestlintError):
    """Raised when a file has no registered front end."""

    def __init__(self, path: str, supported: list[str]):
        self.path = path
        self.supported = supported
        super().__init__(
            f"Unsupported source file '{path}'. Supported extensions: {', '.join(supported)}"
        )


class AnalyzerNotFoundError(AcctestlintError):
    """Raised when an analyzer name isn't registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        msg = f"Unknown analyzer: {name}"
        if available:
            msg = f"{msg}. Available: {', '.join(available)}"
        super().__init__(msg)


class InvariantViolationError(RuntimeError):
    """Raised when an analyzer finds a node in a shape it already ruled out.

    Signals a programming error, not a lint result. Not an AcctestlintError.
    """

    def __init__(self, node_kind: str, expected: str):
        self.node_kind = node_kind
        self.expected = expected
        super().__init__(f"expected {expected}, got {node_kind}")
