"""
Error types raised by the consolidation pipeline.

Every failure the pipeline reports is one of these, so callers can present
a message without inspecting the stage that produced it.
"""


class ReportError(Exception):
    """Base class for all pipeline errors."""


class SourceError(ReportError):
    """A source could not be read, was empty, or had only a header row."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class ValidationError(ReportError):
    """
    Sources disagree on their header shape, or no sources were given.

    Attributes:
        source: Identifier of the offending source, if any.
        column: 1-based column index of the mismatch, if any.
        expected: Header value (or count) of the reference source.
        actual: Header value (or count) of the offending source.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        column: int | None = None,
        expected: str | int | None = None,
        actual: str | int | None = None,
    ) -> None:
        self.source = source
        self.column = column
        self.expected = expected
        self.actual = actual
        super().__init__(message)
