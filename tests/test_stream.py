"""Tests for the stream session."""

import pytest
from markdown_it.tree import SyntaxTreeNode

from mdmend.adapters.markdown_parser import MarkdownParser, find_last_leaf
from mdmend.core.model import PreprocessOptions
from mdmend.stream import StreamSession


def test_append_repairs_accumulated_text():
    """Test chunks accumulate and the view is repaired."""
    session = StreamSession()
    session.append("Hello ")
    state = session.append("**wor")
    assert state.raw == "Hello **wor"
    assert state.content == "Hello **wor**"
    assert state.mode == "streaming"
    assert state.loading is True


def test_complete_text_is_not_loading():
    """Test loading is false when nothing needed repair."""
    state = StreamSession().update("Hello **world**")
    assert state.content == "Hello **world**"
    assert state.loading is False


def test_static_mode_skips_repair():
    """Test static mode parses the normalized text as-is."""
    state = StreamSession(mode="static").append("Hello **wor\r\n")
    assert state.content == "Hello **wor"
    assert state.loading is False


def test_set_mode_rerenders():
    """Test switching mode re-renders the current text."""
    session = StreamSession()
    session.append("Hello **wor")
    state = session.set_mode("static")
    assert state.content == "Hello **wor"
    state = session.set_mode("streaming")
    assert state.content == "Hello **wor**"


def test_invalid_mode_raises():
    """Test unknown modes are rejected."""
    with pytest.raises(ValueError):
        StreamSession(mode="bogus")
    with pytest.raises(ValueError):
        StreamSession().set_mode("bogus")


def test_update_and_reset():
    """Test update replaces the text and reset clears it."""
    session = StreamSession()
    session.append("first")
    state = session.update("second")
    assert state.raw == "second"
    session.reset()
    assert session.raw == ""
    assert session.state is None


def test_options_are_applied():
    """Test preprocess options reach the chain."""
    session = StreamSession(options=PreprocessOptions(fix_html=True))
    assert session.append("Hello <span").content == "Hello"


def test_frontmatter_meta():
    """Test a closed YAML header is decoded."""
    state = StreamSession().update("---\ntitle: Demo\n---\n\nBody")
    assert state.meta == {"title": "Demo"}


def test_frontmatter_open_or_invalid_while_streaming():
    """Test an unfinished header gives no meta instead of failing."""
    assert StreamSession().update("---\ntitle: Dem").meta is None
    assert StreamSession().update("---\ntitle: [a\n---\n\nBody").meta is None


def test_parser_output_and_loading_annotation():
    """Test the last leaf is flagged while streaming."""
    session = StreamSession(parser=MarkdownParser())
    state = session.append("Hello **wor")
    assert isinstance(state.tree, SyntaxTreeNode)
    leaf = find_last_leaf(state.tokens)
    assert leaf.content == "wor"
    assert leaf.meta["loading"] is True


def test_parser_no_annotation_when_complete():
    """Test nothing is flagged once the text is complete."""
    state = StreamSession(parser=MarkdownParser()).update("Hello **world**")
    for token in state.tokens:
        assert "loading" not in token.meta
        for child in token.children or []:
            assert "loading" not in child.meta


def test_trailing_dollar_trimmed_from_tokens_while_streaming():
    """Test a half-typed $ is hidden from the parsed leaf, not from content."""
    state = StreamSession(parser=MarkdownParser()).update("Price: 5 $")
    assert state.content == "Price: 5 $"
    assert find_last_leaf(state.tokens).content == "Price: 5 "

    state = StreamSession(mode="static", parser=MarkdownParser()).update("Price: 5 $")
    assert find_last_leaf(state.tokens).content == "Price: 5 $"
