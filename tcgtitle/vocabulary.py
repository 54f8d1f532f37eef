"""
TCG Title Vocabulary - Static lookup tables for card-title parsing and display.

Card titles on the marketplace follow a semi-fixed grammar:

    PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo
    ^^^ ^^ ^^^^^^^^ ^^^^ ^^^^^^^ ^^^^^^^^ ^^^^^^^^ ^^ ^^^^^^^^^ ^^^^
    grader/grade    year game    language series  no name      finish

This module holds the closed vocabularies the parser recognises and the
bilingual (English / Chinese) labels used when rendering a parsed title.
All tables are built once at import time and exposed read-only
(frozenset / MappingProxyType).

Usage:
    from tcgtitle.vocabulary import GRADERS, FINISH_LABELS, GradingCompany

    "PSA" in GRADERS                # True
    FINISH_LABELS["Holo"]           # "Holographic"
    GradingCompany("BGS").value     # "BGS"
"""
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


# ============================================================================
# GRADING COMPANIES
# ============================================================================


class GradingCompany(str, Enum):
    """
    Grading agencies recognised as a title prefix (e.g. "PSA 10 ...").

    String enum allows direct comparison with title tokens and JSON output.
    Codes are matched case-sensitively, exactly as the marketplace prints them.
    """
    PSA = "PSA"   # Professional Sports Authenticator
    BGS = "BGS"   # Beckett Grading Services
    CGC = "CGC"   # Certified Guaranty Company
    SGC = "SGC"   # Sportscard Guaranty Corporation
    ACE = "ACE"   # Ace Grading
    AGS = "AGS"   # Automated Grading Services
    CSG = "CSG"   # Certified Sports Guaranty


GRADERS: FrozenSet[str] = frozenset(company.value for company in GradingCompany)


# ============================================================================
# GAMES
# ============================================================================

# Lowercased names matched against title tokens
GAME_NAMES: FrozenSet[str] = frozenset({"pokemon", "pokémon"})

GAME_LABELS: Mapping[str, str] = MappingProxyType({
    "Pokemon": "Pokemon（宝可梦）",
    "Pokémon": "Pokémon（宝可梦）",
})


# ============================================================================
# LANGUAGES
# ============================================================================

LANGUAGES: FrozenSet[str] = frozenset({
    "Japanese",
    "English",
    "Chinese",
    "Korean",
    "Thai",
    "Indonesian",
    "Spanish",
    "German",
    "French",
    "Italian",
    "Portuguese",
})

# Titles without a language token are English printings
DEFAULT_LANGUAGE_LABEL = "English（英文版）"


# ============================================================================
# FINISHES
# ============================================================================

FINISH_WORDS: FrozenSet[str] = frozenset({"Holo", "Reverse", "Non-Holo", "NonHolo", "Foil"})

FINISH_LABELS: Mapping[str, str] = MappingProxyType({
    "Holo": "Holographic",
    "Non-Holo": "Non-Holo",
    "NonHolo": "Non-Holo",
    "Reverse": "Reverse Holo",
    "Foil": "Foil",
})

# Case-insensitive view used for finish words glued to the end of a card name
FINISH_LABELS_CASEFOLD: Mapping[str, str] = MappingProxyType({
    word.casefold(): label for word, label in FINISH_LABELS.items()
})

FINISH_ZH: Mapping[str, str] = MappingProxyType({
    "Holographic": "全息",
    "Reverse Holo": "反向闪",
    "Non-Holo": "非闪",
    "Foil": "闪",
})


# ============================================================================
# GRADE DESCRIPTIONS
# ============================================================================

# Keys are in normalized form (see tcgtitle.normalize.normalize_grade_key)
GRADE_TEXT_ZH: Mapping[str, str] = MappingProxyType({
    "Gem Mint": "完美",
    "Mint": "近乎完美",
    "NM-MT": "很好（轻微瑕疵）",
    "Near Mint": "近全新",
    "Excellent-Mint": "明显使用痕迹",
    "Excellent": "明显旧卡",
})


# ============================================================================
# SERIES / PROMO CODES
# ============================================================================

PROMO_SERIES = "Promo"
PROMO_SERIES_LABEL = "Promo（特典卡）"

# Pokemon promo generations, in the order they are tried
PROMO_CODES: Mapping[str, str] = MappingProxyType({
    "DP-P": "钻石珍珠世代特典卡",
    "Pt-P": "白金世代特典卡",
    "L-P": "传说世代特典卡",
    "BW-P": "黑白世代特典卡",
    "XY-P": "XY 世代特典卡",
    "SM-P": "太阳月亮特典卡",
    "S-P": "剑盾特典卡",
    "SV-P": "朱紫特典卡",
})


# ============================================================================
# DISPLAY
# ============================================================================

PLACEHOLDER = "-"

# (field name, caption) in panel order
FIELD_CAPTIONS: Tuple[Tuple[str, str], ...] = (
    ("grader", "评级机构"),
    ("grade", "等级"),
    ("grade_text", "等级描述"),
    ("year", "年份"),
    ("game", "IP"),
    ("language", "语言/地区"),
    ("series", "系列/类型"),
    ("card_no", "卡号"),
    ("card_name", "卡名"),
    ("finish", "工艺/版本"),
)
