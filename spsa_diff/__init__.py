"""
SPSA diff - report how a tuning run moved each option.

Fetches a tuning page, extracts the ``spsa-input`` and ``spsa-output``
blocks, and prints the options ranked by how far they moved.
"""

__version__ = "0.1.0"
