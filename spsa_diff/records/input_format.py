"""
Input block format.

Each line carries the starting configuration of one option:

    RFP_MARGIN, int, 73.0, 40.0, 200.0, 10.0, 0.002

name, type tag, value, min, max, step, and a learning-rate field that is
ignored.
"""

from __future__ import annotations

from spsa_diff.records.base import RecordFormat


class InputFormat(RecordFormat):
    """Record format for the ``spsa-input`` block.

    The field after the name is a type tag (``int``, ``float``) and is
    skipped. min/max/step are optional.
    """

    @property
    def format_name(self) -> str:
        return "input"

    @property
    def value_index(self) -> int:
        return 2

    @property
    def reads_bounds(self) -> bool:
        return True
