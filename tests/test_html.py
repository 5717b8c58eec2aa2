"""Tests for trailing HTML fragment repair."""

from mdmend.repair.html import fix_html, is_unclosed_html_fragment


def test_fix_html_strips_open_tag():
    """Test an opening tag still being typed is removed."""
    assert fix_html('Hello <span class="x') == "Hello"


def test_fix_html_strips_comment_and_closing_tag():
    """Test unterminated comments and closing tags are removed."""
    assert fix_html("Text <!-- note") == "Text"
    assert fix_html("Done </di") == "Done"


def test_fix_html_strips_lone_angle_bracket():
    """Test a bare < at the end is removed."""
    assert fix_html("Hi <") == "Hi"


def test_fix_html_keeps_trailing_whitespace():
    """Test whitespace after the fragment is preserved."""
    assert fix_html("Hi <b\n") == "Hi\n"


def test_fix_html_comparison_unchanged():
    """Test a less-than sign in prose is not a tag."""
    assert fix_html("a < b") == "a < b"


def test_fix_html_escaped_unchanged():
    """Test an escaped < is literal."""
    assert fix_html("\\<div") == "\\<div"


def test_fix_html_code_block_unchanged():
    """Test a fragment inside fenced code is left alone."""
    text = "```\n<div\n```"
    assert fix_html(text) == text


def test_is_unclosed_html_fragment():
    """Test fragment classification."""
    assert is_unclosed_html_fragment("<!DOCTYPE html")
    assert is_unclosed_html_fragment("<?xml version")
    assert not is_unclosed_html_fragment("<div>")
    assert not is_unclosed_html_fragment("< b")
