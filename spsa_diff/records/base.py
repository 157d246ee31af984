"""
Option record type and the abstract base class for record formats.

A record block is plain text with one option per line, fields separated by
``", "``. Field 0 is always the option name; the remaining fields depend on
the block (see InputFormat and OutputFormat).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from spsa_diff.errors import InvalidNumber, MissingName, MissingValue

# Literal separator between fields. Fields containing it are not supported.
FIELD_SEPARATOR = ", "


@dataclass(frozen=True)
class OptionRecord:
    """One named tuning parameter at a point in time.

    ``min``, ``max`` and ``step`` are only present on records from the input
    block; None means "no bound", never zero.
    """

    name: str
    value: float
    min: float | None = None
    max: float | None = None
    step: float | None = None

    @property
    def has_bounds(self) -> bool:
        """True when both ends of the tuning range are known."""
        return self.min is not None and self.max is not None


def parse_number(text: str) -> float | None:
    """Parse a finite float, returning None for anything else.

    Digit separators and surrounding whitespace are rejected.
    """
    if "_" in text or text != text.strip():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


class RecordFormat(ABC):
    """Abstract base class for the line grammars of the two record blocks.

    Subclasses pick which field carries the value and whether the fields
    after it are read as bounds.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the mode name (e.g., 'input', 'output')."""
        pass

    @property
    @abstractmethod
    def value_index(self) -> int:
        """Return the index of the value field in the split line."""
        pass

    @property
    def reads_bounds(self) -> bool:
        """Whether min/max/step follow the value field."""
        return False

    def parse(self, text: str) -> list[OptionRecord]:
        """Parse a whole block into records, preserving line order.

        Whitespace-only lines are skipped. Line indices in errors refer to
        the original position of the line in ``text``.

        Args:
            text: The raw block text.

        Returns:
            One OptionRecord per non-blank line.

        Raises:
            MissingName: If a line has an empty name field.
            MissingValue: If a line has no value field.
            InvalidNumber: If the value field is not a finite number.
        """
        records: list[OptionRecord] = []
        for index, raw_line in enumerate(text.splitlines()):
            if raw_line.strip():
                records.append(self.parse_line(index, raw_line))
        return records

    def parse_line(self, index: int, line: str) -> OptionRecord:
        """Parse a single line into an OptionRecord."""
        parts = line.split(FIELD_SEPARATOR)
        name = parts[0]
        if not name.strip():
            raise MissingName(index, line, block=self.format_name)

        if len(parts) <= self.value_index:
            raise MissingValue(index, line, block=self.format_name)
        value = parse_number(parts[self.value_index])
        if value is None:
            raise InvalidNumber(
                index, line, f"value {parts[self.value_index]!r}", block=self.format_name
            )

        if not self.reads_bounds:
            return OptionRecord(name=name, value=value)

        # Optional trailing fields; anything missing or unparsable is None.
        extra = parts[self.value_index + 1:self.value_index + 4]
        extra += [""] * (3 - len(extra))
        lo, hi, step = (parse_number(field) for field in extra)
        return OptionRecord(name=name, value=value, min=lo, max=hi, step=step)
