"""
Record parsing for the two SPSA text blocks.

Usage:
    from spsa_diff.records import parse_records

    before = parse_records(input_text, "input")
    after = parse_records(output_text, "output")
"""

from spsa_diff.records.base import FIELD_SEPARATOR, OptionRecord, RecordFormat, parse_number
from spsa_diff.records.input_format import InputFormat
from spsa_diff.records.output_format import OutputFormat
from spsa_diff.records.registry import SUPPORTED_MODES, get_record_format, parse_records

__all__ = [
    # Types
    "OptionRecord",
    "RecordFormat",
    # Parsing
    "parse_records",
    "parse_number",
    "get_record_format",
    "FIELD_SEPARATOR",
    "SUPPORTED_MODES",
    # Formats
    "InputFormat",
    "OutputFormat",
]
