"""
Output block format.

Each line carries the tuned value of one option:

    RFP_MARGIN, 73
"""

from __future__ import annotations

from spsa_diff.records.base import RecordFormat


class OutputFormat(RecordFormat):
    """Record format for the ``spsa-output`` block. No bounds are read."""

    @property
    def format_name(self) -> str:
        return "output"

    @property
    def value_index(self) -> int:
        return 1
