"""
Token matchers - one small predicate per token class.

Every extractor in tcgtitle.parser decides what a token is through these
functions, never through inline regexes, so each class can be checked
against the vocabulary tables on its own.
"""
import re
from typing import Optional, Tuple

from tcgtitle.vocabulary import (
    FINISH_LABELS_CASEFOLD,
    FINISH_WORDS,
    GAME_NAMES,
    GRADERS,
    LANGUAGES,
    PROMO_CODES,
)


CARD_NUMBER_MARKER = "#"

# ASCII digits only; full-width "１９９９" is not a year or card number
_NUMERIC_GRADE_RE = re.compile(r"^\d+(?:\.\d+)?$", re.ASCII)
_YEAR_RE = re.compile(r"^\d{4}$", re.ASCII)
_MARKED_CARD_NUMBER_RE = re.compile(r"^#\d+[A-Za-z0-9/-]*$", re.ASCII)
_BARE_CARD_NUMBER_RE = re.compile(r"^\d+[A-Za-z0-9/-]*$", re.ASCII)

# Longest alternatives first so "Non-Holo" wins over "Holo"
_FINISH_SUFFIX_RE = re.compile(
    r"-?("
    + "|".join(re.escape(w) for w in sorted(FINISH_WORDS, key=len, reverse=True))
    + r")\s*$",
    re.IGNORECASE,
)
_PROMO_CODE_RE = re.compile(
    r"\b(" + "|".join(re.escape(code) for code in PROMO_CODES) + r")\b"
)


def is_grader_code(token: str) -> bool:
    return token in GRADERS


def is_numeric_grade(token: str) -> bool:
    """Integer or decimal grade, e.g. "10" or "9.5"."""
    return bool(_NUMERIC_GRADE_RE.match(token))


def is_year(token: str) -> bool:
    return bool(_YEAR_RE.match(token))


def is_marked_card_number(token: str) -> bool:
    """Card number carrying the "#" marker, e.g. "#6", "#025/165", "#SWSH-1"."""
    return bool(_MARKED_CARD_NUMBER_RE.match(token))


def is_bare_card_number(token: str) -> bool:
    """Digits with an optional alphanumeric / slash / dash tail, e.g. "4", "165/165"."""
    return bool(_BARE_CARD_NUMBER_RE.match(token))


def is_finish_word(token: str) -> bool:
    return token in FINISH_WORDS


def is_game_name(token: str) -> bool:
    return token.lower() in GAME_NAMES


def is_language(token: str) -> bool:
    return token in LANGUAGES


def strip_card_marker(token: str) -> str:
    if token.startswith(CARD_NUMBER_MARKER):
        return token[len(CARD_NUMBER_MARKER):]
    return token


def match_finish_suffix(name: str) -> Optional[Tuple[str, str]]:
    """
    Find a finish word at the end of a card name.

    The word may be hyphen-attached ("Pikachu-Holo"), space-separated
    ("Pikachu non-holo") or glued on ("CharizardHolo"). Case-insensitive.

    Returns:
        (matched suffix text, canonical finish label), or None
    """
    match = _FINISH_SUFFIX_RE.search(name)
    if not match:
        return None
    word = match.group(1)
    return match.group(0), FINISH_LABELS_CASEFOLD.get(word.casefold(), word)


def find_promo_code(text: str) -> Optional[str]:
    """First whole-word promo code in a series string ("SV-P", "SM-P", ...)."""
    match = _PROMO_CODE_RE.search(text)
    return match.group(1) if match else None
