"""
TCG Title Parser - Splits a marketplace card title into display fields.

A title is tokenized on whitespace once. The tokens never change; instead a
TokenPool keeps a claim table (token index -> field name). Extractors run in
a fixed order and each one only sees tokens nobody has claimed yet:

    1. grading prefix   PSA 10 Gem Mint 1999   -> grader, grade, grade_text, year
    2. year             first 4-digit token    -> year (if still unset)
    3. game             "Pokemon"              -> game
    4. language         "Japanese"             -> language
    5. finish           every finish word      -> finish
    6. card number      "#6" (or bare "6")     -> series | card_no | card_name

Narrow, high-confidence classes go first so the permissive card-number guess
in step 6 only sees what is left. No step raises: a missing match leaves its
field empty and the pool untouched.

Usage:
    from tcgtitle.parser import parse_title

    parsed = parse_title("PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo")
    parsed.card_name   # "Charizard"
    parsed.finish      # "Holographic"
"""
import logging
import re
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from tcgtitle.logging import get_logger
from tcgtitle.matchers import (
    is_bare_card_number,
    is_finish_word,
    is_game_name,
    is_grader_code,
    is_language,
    is_marked_card_number,
    is_numeric_grade,
    is_year,
    match_finish_suffix,
    strip_card_marker,
)
from tcgtitle.models import ParsedTitle
from tcgtitle.normalize import normalize_spaces
from tcgtitle.vocabulary import FINISH_LABELS

logger = get_logger("title_parser")

_PERIODS_RE = re.compile(r"\.+")

# Number of trailing tokens taken as the card name when no card number exists
FALLBACK_NAME_TOKENS = 2


# ============================================================================
# TOKEN POOL
# ============================================================================


class TokenPool:
    """
    Immutable token sequence plus a record of which field claimed each token.

    A token can be claimed once; claiming it again is a programming error in
    an extractor and raises ValueError.
    """

    def __init__(self, tokens: Sequence[str]):
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self._owners: Dict[int, str] = {}

    @classmethod
    def from_title(cls, title: str) -> "TokenPool":
        return cls(title.split())

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def owners(self) -> Mapping[int, str]:
        """Read-only view of the claim table."""
        return MappingProxyType(self._owners)

    def is_claimed(self, index: int) -> bool:
        return index in self._owners

    def unclaimed(self) -> List[int]:
        """Indices of unclaimed tokens, in title order."""
        return [i for i in range(len(self.tokens)) if i not in self._owners]

    def find(self, predicate: Callable[[str], bool]) -> Optional[int]:
        """Index of the first unclaimed token matching predicate."""
        for index in self.unclaimed():
            if predicate(self.tokens[index]):
                return index
        return None

    def claim(self, index: int, field_name: str) -> str:
        """Mark a token as owned by field_name and return its text."""
        if index in self._owners:
            raise ValueError(
                f"token {index} ({self.tokens[index]!r}) already claimed by {self._owners[index]}"
            )
        self._owners[index] = field_name
        return self.tokens[index]

    def claim_all(self, indices: Sequence[int], field_name: str) -> str:
        """Claim several tokens for one field and return them space-joined."""
        return " ".join(self.claim(i, field_name) for i in indices)


# ============================================================================
# EXTRACTORS
# ============================================================================

Extractor = Callable[[TokenPool, ParsedTitle], None]


def extract_grading_prefix(pool: TokenPool, result: ParsedTitle) -> None:
    """
    "PSA 10 Gem Mint 1999 ..." -> grader, grade, grade_text, year.

    Only fires when the first token is a grader code and the second a numeric
    grade. Grade text and year are taken together: without a year after the
    grade, only grader and grade are claimed.
    """
    tokens = pool.tokens
    if len(tokens) < 2 or pool.is_claimed(0) or pool.is_claimed(1):
        return
    if not (is_grader_code(tokens[0]) and is_numeric_grade(tokens[1])):
        return

    result.grader = pool.claim(0, "grader")
    result.grade = pool.claim(1, "grade")

    year_index = next((i for i in range(2, len(tokens)) if is_year(tokens[i])), None)
    if year_index is None:
        return

    result.grade_text = pool.claim_all(range(2, year_index), "grade_text")
    result.year = pool.claim(year_index, "year")


def extract_year(pool: TokenPool, result: ParsedTitle) -> None:
    if result.year:
        return
    index = pool.find(is_year)
    if index is not None:
        result.year = pool.claim(index, "year")


def extract_game(pool: TokenPool, result: ParsedTitle) -> None:
    index = pool.find(is_game_name)
    if index is not None:
        result.game = pool.claim(index, "game")


def extract_language(pool: TokenPool, result: ParsedTitle) -> None:
    index = pool.find(is_language)
    if index is not None:
        result.language = pool.claim(index, "language")


def extract_finish(pool: TokenPool, result: ParsedTitle) -> None:
    """Every standalone finish word, mapped to its label ("Holo" -> "Holographic")."""
    indices = [i for i in pool.unclaimed() if is_finish_word(pool.tokens[i])]
    if not indices:
        return
    labels = [FINISH_LABELS.get(pool.tokens[i], pool.tokens[i]) for i in indices]
    for index in indices:
        pool.claim(index, "finish")
    result.finish = " ".join(labels)


def _find_card_number(pool: TokenPool, remaining: List[int]) -> Optional[int]:
    """Position in `remaining` of the card number, "#" form preferred."""
    for predicate in (is_marked_card_number, is_bare_card_number):
        for position, index in enumerate(remaining):
            if predicate(pool.tokens[index]):
                return position
    return None


def _clean_card_name(name: str) -> str:
    # "Pikachu...Non-Holo" -> "Pikachu Non-Holo", "Mr. Mime" -> "Mr  Mime"
    return _PERIODS_RE.sub(" ", name).strip()


def extract_card_fields(pool: TokenPool, result: ParsedTitle) -> None:
    """
    Split what is left around the card number: series | card_no | card_name.

    A finish word stuck to the end of the name ("Charizard-Holo") is stripped
    and used as the finish when no standalone finish word was found.

    Without any card number the last two tokens are taken as the name and
    everything before them as the series.
    """
    remaining = pool.unclaimed()
    if not remaining:
        return

    position = _find_card_number(pool, remaining)
    if position is None:
        split = max(0, len(remaining) - FALLBACK_NAME_TOKENS)
        result.series = pool.claim_all(remaining[:split], "series")
        result.card_name = pool.claim_all(remaining[split:], "card_name")
        return

    result.series = pool.claim_all(remaining[:position], "series")
    result.card_no = strip_card_marker(pool.claim(remaining[position], "card_no"))
    card_name = _clean_card_name(pool.claim_all(remaining[position + 1:], "card_name"))

    suffix = match_finish_suffix(card_name)
    if suffix:
        text, label = suffix
        if not result.finish:
            result.finish = label
        card_name = card_name[: len(card_name) - len(text)].strip()
    result.card_name = card_name


# Order matters: see module docstring
EXTRACTORS: Tuple[Extractor, ...] = (
    extract_grading_prefix,
    extract_year,
    extract_game,
    extract_language,
    extract_finish,
    extract_card_fields,
)


# ============================================================================
# PARSER
# ============================================================================


class TitleParser:
    """
    Runs the extractor chain over a title.

    The parser holds no per-call state, so one instance can be shared by any
    number of callers.

    Example:
        parser = TitleParser()
        parsed = parser.parse("2002 Pokemon English Base Set 2 4 Charizard Holo")
        # ParsedTitle(year="2002", game="Pokemon", language="English",
        #             series="Base Set", card_no="2", card_name="4 Charizard",
        #             finish="Holographic", ...)
    """

    def __init__(self, extractors: Sequence[Extractor] = EXTRACTORS):
        self.extractors: Tuple[Extractor, ...] = tuple(extractors)

    def parse_with_pool(self, title: Optional[str]) -> Tuple[ParsedTitle, TokenPool]:
        """Parse a title and also return the token pool with its claim table."""
        raw = normalize_spaces(title)
        result = ParsedTitle(raw=raw)
        pool = TokenPool.from_title(raw)

        for extractor in self.extractors:
            extractor(pool, result)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Parsed title",
                extra={"title": raw, "fields": result.to_dict(), "tokens": len(pool)},
            )
        return result, pool

    def parse(self, title: Optional[str]) -> ParsedTitle:
        """
        Parse a card title.

        Args:
            title: Card title as found on the page (any whitespace, may be empty)

        Returns:
            ParsedTitle with `raw` set to the normalized title
        """
        return self.parse_with_pool(title)[0]


# ============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ============================================================================

# Singleton parser instance
_parser: Optional[TitleParser] = None


def get_parser() -> TitleParser:
    """Get or create singleton TitleParser instance."""
    global _parser
    if _parser is None:
        _parser = TitleParser()
    return _parser


def parse_title(title: Optional[str]) -> ParsedTitle:
    """
    Convenience function to parse a card title.

    Args:
        title: Card title

    Returns:
        ParsedTitle (all fields "" except `raw` when nothing is recognised)
    """
    return get_parser().parse(title)
