"""
Localization - renders a ParsedTitle as bilingual display strings.

Known values get a Chinese annotation in full-width parentheses, unknown
values pass through unchanged and empty values become the placeholder "-".
Every formatter is total: it returns a string for any input.

Usage:
    from tcgtitle.localization import localize_title

    display = localize_title("PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo")
    display.grade_text   # "Gem Mint（完美）"
    display.finish       # "Holographic（全息）"
"""
from typing import Mapping, Optional

from tcgtitle.matchers import find_promo_code
from tcgtitle.models import DisplayTitle, ParsedTitle
from tcgtitle.normalize import normalize_grade_key
from tcgtitle.parser import parse_title
from tcgtitle.vocabulary import (
    DEFAULT_LANGUAGE_LABEL,
    FINISH_ZH,
    GAME_LABELS,
    GRADE_TEXT_ZH,
    PLACEHOLDER,
    PROMO_CODES,
    PROMO_SERIES,
    PROMO_SERIES_LABEL,
)


def annotate(text: str, translation: Optional[str]) -> str:
    """Append a translation in full-width parentheses, e.g. Gem Mint（完美）."""
    if not translation:
        return text
    return f"{text}（{translation}）"


def _lookup_or_placeholder(value: str, table: Mapping[str, str]) -> str:
    if not value:
        return PLACEHOLDER
    return annotate(value, table.get(value))


def format_grade_text(text: Optional[str]) -> str:
    """
    Normalize a grade description and annotate it when it is a known grade.

    Returns "" for empty input; unknown descriptions come back normalized
    but otherwise unchanged.
    """
    key = normalize_grade_key(text)
    if not key:
        return ""
    return annotate(key, GRADE_TEXT_ZH.get(key))


def format_game(game: str) -> str:
    return GAME_LABELS.get(game) or game or PLACEHOLDER


def format_language(language: str) -> str:
    return language or DEFAULT_LANGUAGE_LABEL


def format_series(series: str) -> str:
    """Promo series get the promo label; a promo code inside the series gets its generation."""
    if not series:
        return PLACEHOLDER
    if series.casefold() == PROMO_SERIES.casefold():
        return PROMO_SERIES_LABEL
    code = find_promo_code(series)
    if code:
        return annotate(series, PROMO_CODES[code])
    return series


def format_finish(finish: str) -> str:
    # Only an exact joined label is annotated ("Holographic Reverse Holo" is not)
    return _lookup_or_placeholder(finish, FINISH_ZH)


def format_plain(value: str) -> str:
    return value or PLACEHOLDER


def format_display(parsed: ParsedTitle) -> DisplayTitle:
    """Build the display record for a parsed title."""
    return DisplayTitle(
        grader=format_plain(parsed.grader),
        grade=format_plain(parsed.grade),
        grade_text=format_grade_text(parsed.grade_text) or PLACEHOLDER,
        year=format_plain(parsed.year),
        game=format_game(parsed.game),
        language=format_language(parsed.language),
        series=format_series(parsed.series),
        card_no=format_plain(parsed.card_no),
        card_name=format_plain(parsed.card_name),
        finish=format_finish(parsed.finish),
        raw=parsed.raw,
    )


def localize_title(title: Optional[str]) -> DisplayTitle:
    """Parse a title and format it for display in one step."""
    return format_display(parse_title(title))
