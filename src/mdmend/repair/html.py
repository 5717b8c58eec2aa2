"""Trailing raw HTML fragment repair.

Not part of the default chain; enable with ``PreprocessOptions(fix_html=True)``
or call :func:`fix_html` directly.
"""

from ..core.patterns import (
    HTML_CLOSING_TAG_RE,
    HTML_COMMENT_START_RE,
    HTML_DOCTYPE_RE,
    HTML_OPENING_TAG_RE,
    HTML_PROCESSING_INSTRUCTION_RE,
    TRAILING_LINE_WHITESPACE_RE,
)
from ..core.scan import (
    find_closed_code_block_ranges,
    find_inline_code_ranges,
    is_inside_unclosed_code_block,
    is_position_in_ranges,
)


def is_unclosed_html_fragment(fragment: str) -> bool:
    if not fragment.startswith("<") or ">" in fragment:
        return False
    if fragment == "<":
        return True
    return bool(
        HTML_COMMENT_START_RE.match(fragment)
        or HTML_DOCTYPE_RE.match(fragment)
        or HTML_PROCESSING_INSTRUCTION_RE.match(fragment)
        or HTML_CLOSING_TAG_RE.match(fragment)
        or HTML_OPENING_TAG_RE.match(fragment)
    )


def fix_html(content: str) -> str:
    """Remove an unclosed tag, comment, doctype or PI ending the visible text.

    Examples:
        >>> fix_html('Hello <span class="x')
        'Hello'
        >>> fix_html('a < b')
        'a < b'
    """
    if not content or is_inside_unclosed_code_block(content):
        return content

    visible = content.rstrip()
    if not visible:
        return content
    trailing = content[len(visible):]

    start = visible.rfind("<")
    if start == -1:
        return content
    if start > 0 and visible[start - 1] == "\\":
        return content
    if not is_unclosed_html_fragment(visible[start:]):
        return content

    blocks = find_closed_code_block_ranges(content)
    if is_position_in_ranges(start, blocks):
        return content
    if is_position_in_ranges(start, find_inline_code_ranges(content, blocks)):
        return content

    before = TRAILING_LINE_WHITESPACE_RE.sub("", content[:start])
    return before + trailing
