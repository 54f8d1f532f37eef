"""
Text normalization helpers shared by the parser and the display formatter.
"""
import re
from typing import Optional


_WHITESPACE_RE = re.compile(r"\s+")
_LONG_DASH_RE = re.compile(r"[–—]")
_SPACED_HYPHEN_RE = re.compile(r"\s*-\s*")


def normalize_spaces(text: Optional[str]) -> str:
    """
    Collapse every whitespace run (spaces, tabs, newlines) to a single space
    and strip the ends.

    Examples:
        normalize_spaces("  PSA\\t10\\n Gem  Mint ")  # "PSA 10 Gem Mint"
        normalize_spaces(None)                     # ""
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_grade_key(text: Optional[str]) -> str:
    """
    Canonical lookup key for a grade description.

    En/em dashes become "-" and spacing around hyphens is dropped, so
    "NM – MT", "NM - MT" and "NM-MT" share one key.
    """
    if not text:
        return ""
    key = _LONG_DASH_RE.sub("-", text.strip())
    key = _WHITESPACE_RE.sub(" ", key)
    return _SPACED_HYPHEN_RE.sub("-", key)
