"""
TCG Title Models

Exports for parsed and display title records.
"""

from tcgtitle.models.parsed_title import (
    ParsedTitle,
    DisplayTitle,
)

__all__ = [
    "ParsedTitle",
    "DisplayTitle",
]
