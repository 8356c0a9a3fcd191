"""Error kinds and the exception carried through the build pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    SOURCE_NOT_FOUND = "source_not_found"
    READ_ERROR = "read_error"
    PARSE_ERROR = "parse_error"
    THEME_NOT_FOUND = "theme_not_found"
    THEME_LOAD_FAILURE = "theme_load_failure"
    INVALID_OUTPUT_FORMAT = "invalid_output_format"
    MIXED_DIALECT_MERGE = "mixed_dialect_merge"
    CONVERSION_FAILURE = "conversion_failure"
    GENERATION_FAILURE = "generation_failure"
    PDF_GENERATION = "pdf_generation"


_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.SOURCE_NOT_FOUND: "No source resume was specified",
    ErrorKind.READ_ERROR: "Could not read source resume",
    ErrorKind.PARSE_ERROR: "Source resume is not a valid JSON object",
    ErrorKind.THEME_NOT_FOUND: "Theme not found",
    ErrorKind.THEME_LOAD_FAILURE: "Theme could not be loaded",
    ErrorKind.INVALID_OUTPUT_FORMAT: "The theme does not support the requested output format(s)",
    ErrorKind.MIXED_DIALECT_MERGE: "Cannot merge FRESH and JSON Resume sources together",
    ErrorKind.CONVERSION_FAILURE: "Resume conversion failed",
    ErrorKind.GENERATION_FAILURE: "Output generation failed",
    ErrorKind.PDF_GENERATION: "PDF generation failed",
}


class BuildError(Exception):
    """
    Exception raised when a build step fails.

    Attributes:
        kind: One of the ErrorKind values
        attempted: The value that was being processed (theme name, file path, ...)
        data: Structured context for the caller (e.g. the invalid outputs)
        inner: The underlying exception, if any
        fatal: Whether the error aborts the whole build
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        *,
        attempted: Any = None,
        data: Any = None,
        inner: BaseException | None = None,
        fatal: bool = True,
    ):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        self.attempted = attempted
        self.data = data
        self.inner = inner
        self.fatal = fatal

        parts = [self.message]
        if attempted is not None:
            parts.append(f": {attempted}")
        if inner is not None:
            parts.append(f"\nCaused by: {type(inner).__name__}: {inner}")

        super().__init__("".join(parts))

    def __repr__(self) -> str:
        return f"BuildError(kind={self.kind.value!r}, attempted={self.attempted!r})"
