"""Tests for comment line classification."""

from as400_catalog.core.extraction import classify
from as400_catalog.core.extraction.comments import is_blank, is_comment


def test_free_form_comment():
    result = classify("   // Retrieves the header  ")
    assert result.is_comment
    assert result.content == "Retrieves the header"


def test_double_star_comment():
    result = classify("**FREE")
    assert result.is_comment
    assert result.content == "FREE"


def test_fixed_form_comment_in_column_seven():
    result = classify("00010C* Computes the premium")
    assert result.is_comment
    assert result.content == "Computes the premium"


def test_star_outside_column_seven_is_code():
    assert not classify("  x = a * b;").is_comment


def test_code_line():
    result = classify("dcl-proc SPVSPO_getCabecera export;")
    assert not result.is_comment
    assert result.content == ""


def test_blank_and_short_lines():
    assert not classify("").is_comment
    assert not classify("     ").is_comment
    assert not classify("abc").is_comment
    assert is_blank("   \t")
    assert not is_blank("x")


def test_is_comment_helper():
    assert is_comment("// yes")
    assert not is_comment("eval x = 1;")
