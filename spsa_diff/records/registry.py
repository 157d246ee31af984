"""
Lookup from mode name to record format, and the block parsing entry point.
"""

from __future__ import annotations

from spsa_diff.records.base import OptionRecord, RecordFormat
from spsa_diff.records.input_format import InputFormat
from spsa_diff.records.output_format import OutputFormat

# Supported mode names
SUPPORTED_MODES = frozenset(["input", "output"])


def get_record_format(mode: str) -> RecordFormat:
    """Get the record format for a mode name.

    Args:
        mode: The mode name ("input" or "output").

    Returns:
        A RecordFormat instance for the mode.

    Raises:
        ValueError: If the mode name is not supported.

    Examples:
        >>> get_record_format("output").value_index
        1
    """
    if mode not in SUPPORTED_MODES:
        raise ValueError(
            f"Unsupported mode '{mode}'. "
            f"Supported modes: {', '.join(sorted(SUPPORTED_MODES))}"
        )

    formats: dict[str, RecordFormat] = {
        "input": InputFormat(),
        "output": OutputFormat(),
    }

    return formats[mode]


def parse_records(text: str, mode: str) -> list[OptionRecord]:
    """Parse a record block in the given mode.

    Args:
        text: Raw block text, one record per line.
        mode: "input" for the starting configuration, "output" for the result.

    Returns:
        Records in the order they appear in ``text``.
    """
    return get_record_format(mode).parse(text)
