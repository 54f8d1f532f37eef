#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test suite for text normalization helpers.
"""
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tcgtitle.normalize import normalize_grade_key, normalize_spaces


SAMPLES = [
    "",
    " ",
    "PSA 10",
    "  PSA\t10\n\nGem   Mint  ",
    "　Pokemon　Japanese",
    "Base Set #6 Charizard Holo",
    "\r\n",
]


def test_normalize_spaces_collapses_whitespace():
    """Test that whitespace runs collapse and ends are trimmed."""
    print("\n=== Test 1: Collapse Whitespace ===")

    assert normalize_spaces("  PSA\t10\n\nGem   Mint  ") == "PSA 10 Gem Mint"
    assert normalize_spaces("　Pokemon　Japanese") == "Pokemon Japanese"
    assert normalize_spaces("") == ""
    assert normalize_spaces(None) == ""
    assert normalize_spaces(" \n\t ") == ""

    print("✓ Whitespace collapsed")


def test_normalize_spaces_is_idempotent():
    """Test normalize(normalize(s)) == normalize(s)."""
    print("\n=== Test 2: Idempotence ===")

    for sample in SAMPLES:
        once = normalize_spaces(sample)
        assert normalize_spaces(once) == once, f"Not idempotent for {sample!r}"

    print("✓ Idempotent")


def test_normalize_grade_key():
    """Test dash and spacing normalization of grade descriptions."""
    print("\n=== Test 3: Grade Keys ===")

    assert normalize_grade_key("NM - MT") == "NM-MT"
    assert normalize_grade_key("NM – MT") == "NM-MT"
    assert normalize_grade_key("Excellent—Mint") == "Excellent-Mint"
    assert normalize_grade_key("  Gem   Mint ") == "Gem Mint"
    assert normalize_grade_key("") == ""
    assert normalize_grade_key(None) == ""

    print("✓ Grade keys normalized")
