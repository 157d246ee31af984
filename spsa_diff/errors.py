"""
Error types raised by the spsa_diff pipeline.

Every error aborts the run; ``main()`` turns them into a one-line message
on stderr and a non-zero exit status.
"""

from __future__ import annotations


class SpsaDiffError(RuntimeError):
    """Base class for all fatal spsa_diff errors."""


class NetworkError(SpsaDiffError):
    """Transport-level failure while fetching the page."""


class BadStatus(SpsaDiffError):
    """The page was fetched but the server did not answer 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Response status was {status_code}, expected 200 OK")
        self.status_code = status_code


class MalformedPage(SpsaDiffError):
    """The page is truncated or lacks one of the expected markers."""

    def __init__(self, message: str, marker: str) -> None:
        super().__init__(message)
        self.marker = marker


class RecordParseError(SpsaDiffError, ValueError):
    """A line of a record block could not be parsed.

    Attributes:
        line_index: Zero-based index of the offending line in its block.
        line: The raw line text.
        block: Name of the block being parsed ("input" or "output"), if known.
    """

    reason = "Could not parse"

    def __init__(
        self,
        line_index: int,
        line: str,
        detail: str | None = None,
        block: str | None = None,
    ) -> None:
        where = f"{block} line" if block else "line"
        message = f'{self.reason} in {where} {line_index}: "{line}"'
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.line_index = line_index
        self.line = line
        self.block = block


class MissingName(RecordParseError):
    reason = "No name part"


class MissingValue(RecordParseError):
    reason = "No value part"


class InvalidNumber(RecordParseError):
    reason = "Invalid number"


class PairingMismatch(SpsaDiffError):
    """The before and after blocks do not describe the same options."""
