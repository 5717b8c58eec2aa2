"""Tests for link and image repair."""

from mdmend.repair.link import fix_link


def test_fix_link_closes_url():
    """Test a partial URL gets its closing parenthesis."""
    assert fix_link("[Google](https://www.goo") == "[Google](https://www.goo)"


def test_fix_link_adds_empty_url():
    """Test link text without a URL gets an empty one."""
    assert fix_link("[text]") == "[text]()"


def test_fix_link_closes_open_text():
    """Test open link and image text is closed."""
    assert fix_link("Click [here") == "Click [here]()"
    assert fix_link("![alt") == "![alt]()"


def test_fix_link_strips_empty_bracket():
    """Test a bare [ or ![ at the end is removed."""
    assert fix_link("Text [") == "Text"
    assert fix_link("See ![") == "See"


def test_fix_link_complete_unchanged():
    """Test complete links are left alone."""
    text = "[done](http://x.com) and ![img](a.png)"
    assert fix_link(text) == text


def test_fix_link_ignores_task_checkbox():
    """Test a task list checkbox is not link text."""
    assert fix_link("- [ ]") == "- [ ]"
    assert fix_link("- [x]") == "- [x]"


def test_fix_link_ignores_footnote_reference():
    """Test an open footnote reference is not a link."""
    assert fix_link("Footnote [^1") == "Footnote [^1"


def test_fix_link_ignores_code():
    """Test brackets in inline code are literal."""
    assert fix_link("Use `[x` here") == "Use `[x` here"
