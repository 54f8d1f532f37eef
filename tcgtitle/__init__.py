"""
TCG Title Parser

Turns loosely formatted marketplace card titles into structured fields and
bilingual display strings.

Usage:
    from tcgtitle import parse_title, localize_title

    parsed = parse_title("PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo")
    parsed.grader        # "PSA"
    parsed.to_dict()     # {"grader": "PSA", "grade": "10", "gradeText": "Gem Mint", ...}

    display = localize_title(parsed.raw)
    display.rows()       # [("评级机构", "PSA"), ("等级", "10"), ...]
"""

from tcgtitle.models import ParsedTitle, DisplayTitle
from tcgtitle.normalize import normalize_spaces
from tcgtitle.parser import TitleParser, TokenPool, get_parser, parse_title
from tcgtitle.localization import format_display, format_grade_text, localize_title

__version__ = "0.1.0"

__all__ = [
    # Models
    "ParsedTitle",
    "DisplayTitle",
    # Parsing
    "TitleParser",
    "TokenPool",
    "get_parser",
    "parse_title",
    "normalize_spaces",
    # Display
    "format_display",
    "format_grade_text",
    "localize_title",
]
