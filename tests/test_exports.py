"""Tests for reading export symbols from db2 output."""

from as400_catalog.core.exports import parse_export_symbols

DB2_OUTPUT = """
SYMBOL_NAME
--------------------------------
SPVSPO_GETCABECERA
SPVSPO_UPDCABECERA
SPVSPO_GETCABECERA
OTHER_GETX
SPVSPOX_NOPE

  3 RECORD(S) SELECTED.
"""


def test_symbols_sorted_and_unique():
    assert parse_export_symbols("SPVSPO", DB2_OUTPUT) == [
        "SPVSPO_GETCABECERA",
        "SPVSPO_UPDCABECERA",
    ]


def test_windows_line_endings():
    assert parse_export_symbols("SPVSPO", "SPVSPO_A1\r\nSPVSPO_B2\r\n") == ["SPVSPO_A1", "SPVSPO_B2"]


def test_empty_input():
    assert parse_export_symbols("SPVSPO", "") == []
    assert parse_export_symbols("", DB2_OUTPUT) == []


def test_symbols_with_rpg_special_characters():
    text = "SPVSPO_GET$X\nSPVSPO_#CALC\nSPVSPO_GET\n"
    assert parse_export_symbols("SPVSPO", text) == ["SPVSPO_#CALC", "SPVSPO_GET", "SPVSPO_GET$X"]
