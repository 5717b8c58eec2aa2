"""Tests for strong emphasis repair."""

from mdmend.repair.emphasis import fix_emphasis
from mdmend.repair.strong import fix_strong


def test_fix_strong_closes_open_marker():
    """Test an open ** is closed."""
    assert fix_strong("Hello **world") == "Hello **world**"


def test_fix_strong_closes_underscore_marker():
    """Test an open __ is closed."""
    assert fix_strong("Hello __world") == "Hello __world__"


def test_fix_strong_with_nested_emphasis():
    """Test an open single * inside open strong is closed along with it."""
    result = fix_emphasis(fix_strong("**bold and *mixed"))
    assert result == "**bold and *mixed***"


def test_fix_strong_completes_half_typed_closer():
    """Test a single trailing * becomes the full closing pair."""
    assert fix_strong("**bold** and **more*") == "**bold** and **more**"


def test_fix_strong_strips_marker_with_nothing_after():
    """Test a trailing ** with no text yet is removed."""
    assert fix_strong("List item\n\n**") == "List item"


def test_fix_strong_collapses_dangling_list_marker():
    """Test stripping ** does not leave an empty list item."""
    assert fix_strong("- **") == ""
    assert fix_strong("Intro\n- **") == "Intro\n"


def test_fix_strong_both_markers_open():
    """Test the later opener is closed first."""
    assert fix_strong("**a and __b") == "**a and __b__**"
    assert fix_strong("__a and **b") == "__a and **b**__"


def test_fix_strong_ignores_inline_code():
    """Test markers inside code spans are not counted."""
    text = "Use `**kwargs` here"
    assert fix_strong(text) == text


def test_fix_strong_ignores_math():
    """Test markers inside math are not counted."""
    text = "Price $$a**b$$ ok"
    assert fix_strong(text) == text


def test_fix_strong_lone_marker_character():
    """Test a document of a single * or _ becomes empty."""
    assert fix_strong("*") == ""
    assert fix_strong("_") == ""


def test_fix_strong_balanced_unchanged():
    """Test balanced strong text is left alone."""
    text = "**one** and __two__"
    assert fix_strong(text) == text


def test_fix_strong_closes_marker_before_code_or_math():
    """Test a code span or math after ** is content, so the marker is closed."""
    assert fix_strong("Hello **`code`") == "Hello **`code`**"
    assert fix_strong("Hello **$$x$$") == "Hello **$$x$$**"
