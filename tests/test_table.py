"""Tests for table separator repair."""

from mdmend.repair.pipeline import preprocess
from mdmend.repair.table import count_columns, fix_table, generate_separator


def test_generate_separator():
    """Test one --- cell per column."""
    assert generate_separator(3) == "| --- | --- | --- |"


def test_fix_table_adds_separator_after_header():
    """Test a lone header row gets its separator."""
    assert fix_table("| a | b |\n") == "| a | b |\n| --- | --- |"


def test_fix_table_completes_open_header():
    """Test a header missing its closing pipe is completed."""
    assert fix_table("| a | b") == "| a | b |\n| --- | --- |"


def test_fix_table_replaces_partial_separator():
    """Test a half-typed separator is replaced."""
    assert fix_table("| a | b |\n| ---") == "| a | b |\n| --- | --- |"


def test_fix_table_inserts_separator_before_data_row():
    """Test a data row typed before the separator gets one inserted."""
    assert fix_table("| a | b |\n| 1 | 2 |") == "| a | b |\n| --- | --- |\n| 1 | 2 |"


def test_fix_table_complete_unchanged():
    """Test a complete table is left alone."""
    text = "| a | b |\n| :--- | ---: |\n| 1 | 2 |"
    assert fix_table(text) == text


def test_fix_table_ignores_code_block():
    """Test a table row inside fenced code is left alone."""
    text = "```\n| a | b |\n```"
    assert fix_table(text) == text


def test_fix_table_plain_text_unchanged():
    """Test text without pipes is left alone."""
    assert fix_table("no table here") == "no table here"


def test_fix_table_data_row_repeating_header():
    """Test the separator goes right after the header, not after a copy of it."""
    assert fix_table("| a | b |\n| a | b |") == "| a | b |\n| --- | --- |\n| a | b |"


def test_fix_table_header_after_text_line():
    """Test the header is found by its own line in the paragraph."""
    assert fix_table("Intro\n| a | b |") == "Intro\n| a | b |\n| --- | --- |"


def test_count_columns_skips_escaped_and_code_pipes():
    """Test escaped pipes and pipes in code spans are cell text."""
    assert count_columns("| a | b |") == 2
    assert count_columns("| a \\| b | c |") == 2
    assert count_columns("| `x|y` | c |") == 2


def test_escaped_pipe_table_is_complete():
    """Test a finished table with an escaped pipe is left alone."""
    text = "| a \\| b | c |\n| --- | --- |\n| 1 | 2 |"
    assert fix_table(text) == text
    assert preprocess(text) == text
