"""Tests for task list marker repair."""

from mdmend.repair.task_list import fix_task_list


def test_fix_task_list_drops_standalone_dash():
    """Test a lone dash on the last line is dropped."""
    assert fix_task_list("- [ ] Task 1\n-") == "- [ ] Task 1\n"


def test_fix_task_list_drops_incomplete_checkbox():
    """Test an unclosed [ on the last line is dropped."""
    assert fix_task_list("- [ ] Task 1\n  - [") == "- [ ] Task 1\n"


def test_fix_task_list_drops_bare_list_item():
    """Test an empty "- " item is dropped."""
    assert fix_task_list("- ") == ""
    assert fix_task_list("-") == ""


def test_fix_task_list_quoted_markers():
    """Test quoted incomplete markers are dropped."""
    assert fix_task_list("> - [") == ""
    assert fix_task_list("Item\n> -") == "Item\n"


def test_fix_task_list_complete_items_unchanged():
    """Test finished task items are left alone."""
    text = "- [ ] todo\n- [x] done"
    assert fix_task_list(text) == text


def test_fix_task_list_dash_in_prose_unchanged():
    """Test a dash inside a sentence is not a marker."""
    assert fix_task_list("a - b") == "a - b"


def test_fix_task_list_unclosed_fence_unchanged():
    """Test a dash inside an open fence is code."""
    assert fix_task_list("```\n-") == "```\n-"
