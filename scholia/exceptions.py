"""Custom exceptions for Scholia."""

from typing import Optional


class ScholiaError(Exception):
    """Base exception for all Scholia errors."""

    pass


class ScholiaConfigError(ScholiaError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class ScholiaParseError(ScholiaError):
    """Raised when a source file cannot be read."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.file_path = file_path
        self.position = position


class ScholiaSyntaxError(ScholiaParseError):
    """Raised on unterminated literals or unbalanced nesting.

    Fatal for the file being parsed: the reader does not try to recover.
    """

    def __init__(
        self,
        message: str,
        line: int,
        file_path: Optional[str] = None,
    ):
        super().__init__(message, file_path=file_path)
        self.message = message
        self.line = line

    def with_file(self, file_path: str) -> "ScholiaSyntaxError":
        """Return a copy of this error that names the offending file."""
        return ScholiaSyntaxError(self.message, self.line, file_path=file_path)

    def __str__(self) -> str:
        location = f"line {self.line}"
        if self.file_path:
            location = f"{self.file_path}:{self.line}"
        return f"{location}: {self.message}"


class UnsupportedFormError(ScholiaError):
    """Raised when a definition's docstring position cannot be determined.

    Never surfaced to callers; the docstring extractor falls back to no
    docstring.
    """

    def __init__(self, message: str, head: Optional[str] = None):
        super().__init__(message)
        self.head = head


class UnsupportedFileTypeError(ScholiaError):
    """Raised when file type is not supported."""

    def __init__(self, file_type: str, supported_types: Optional[list] = None):
        message = f"Unsupported file type: {file_type}"
        if supported_types:
            message += f". Supported types: {', '.join(supported_types)}"
        super().__init__(message)
        self.file_type = file_type
        self.supported_types = supported_types or []


class ScholiaPipelineError(ScholiaError):
    """Raised when pipeline execution fails."""

    def __init__(self, message: str, stage_name: Optional[str] = None):
        super().__init__(message)
        self.stage_name = stage_name
