"""
Parsed Title Schema - Output records of the title parser.

Architecture: two flat records sharing one field layout
- ParsedTitle holds the raw extracted values (empty string when absent)
- DisplayTitle holds the localized display strings (placeholder when absent)

Attributes are snake_case in Python; serialized names are the camelCase keys
the presentation layer consumes (gradeText, cardNo, cardName).
"""
from typing import Dict, List, Tuple
from pydantic import BaseModel, Field, ConfigDict

from tcgtitle.vocabulary import FIELD_CAPTIONS


# ============================================================================
# PARSED TITLE
# ============================================================================

class ParsedTitle(BaseModel):
    """
    Fields extracted from one card title.

    Every field is a string; "" means "not detected". `raw` is the normalized
    input title and is frozen once the record is created.

    Examples:
        ParsedTitle(
            raw="PSA 10 Gem Mint 1999 Pokemon Japanese Base Set #6 Charizard Holo",
            grader="PSA",
            grade="10",
            grade_text="Gem Mint",
            year="1999",
            game="Pokemon",
            language="Japanese",
            series="Base Set",
            card_no="6",
            card_name="Charizard",
            finish="Holographic",
        )
    """
    model_config = ConfigDict(populate_by_name=True)

    grader: str = Field(default="", description="Grading agency code (e.g. 'PSA')")
    grade: str = Field(default="", description="Numeric grade as printed (e.g. '10', '9.5')")
    grade_text: str = Field(default="", alias="gradeText", description="Grade qualifier (e.g. 'Gem Mint')")
    year: str = Field(default="", description="4-digit release year")
    game: str = Field(default="", description="Game name as printed in the title")
    language: str = Field(default="", description="Card language / region")
    series: str = Field(default="", description="Set, series or promo designation")
    card_no: str = Field(default="", alias="cardNo", description="Card number without the '#' marker")
    card_name: str = Field(default="", alias="cardName", description="Card name")
    finish: str = Field(default="", description="Canonical finish label(s), space-joined")
    raw: str = Field(default="", frozen=True, description="Normalized input title")

    def is_empty(self) -> bool:
        """True when nothing besides `raw` was detected ("no confident parse")."""
        return not any(
            getattr(self, name) for name, _ in FIELD_CAPTIONS
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary with camelCase keys for JSON serialization."""
        return self.model_dump(by_alias=True)


# ============================================================================
# DISPLAY TITLE
# ============================================================================

class DisplayTitle(BaseModel):
    """Localized, display-ready version of a ParsedTitle."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    grader: str
    grade: str
    grade_text: str = Field(alias="gradeText")
    year: str
    game: str
    language: str
    series: str
    card_no: str = Field(alias="cardNo")
    card_name: str = Field(alias="cardName")
    finish: str
    raw: str = ""

    def rows(self) -> List[Tuple[str, str]]:
        """(caption, value) pairs in panel order."""
        return [(caption, getattr(self, name)) for name, caption in FIELD_CAPTIONS]

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary with camelCase keys for JSON serialization."""
        return self.model_dump(by_alias=True)
