"""Inline math (``$$...$$`` within a line) repair."""

from ..core.patterns import CODE_BLOCK_RE, SIMPLE_INLINE_CODE_RE, TRIPLE_BACKTICK
from ..core.scan import (
    append_before_trailing_whitespace,
    is_inside_unclosed_code_block,
    last_paragraph,
)


def _blank(m) -> str:
    return " " * len(m.group(0))


def find_last_dollar_pair(text: str) -> int:
    """Offset of the last ``$$`` outside fences and inline code, or -1."""
    last = -1
    in_fence = False
    in_code = False
    i = 0
    while i < len(text):
        if text.startswith(TRIPLE_BACKTICK, i):
            in_fence = not in_fence
            in_code = False
            i += 3
            continue
        if not in_fence and text[i] == "`":
            in_code = not in_code
            i += 1
            continue
        if not in_fence and not in_code and text.startswith("$$", i):
            last = i
            i += 2
            continue
        i += 1
    return last


def fix_inline_math(content: str) -> str:
    """Close or strip a trailing unclosed ``$$`` used inline.

    A ``$$`` followed by a line break reads as block math and is left for
    :func:`mdmend.repair.block_math.fix_math`.

    Examples:
        >>> fix_inline_math('The formula is $$x = 1')
        'The formula is $$x = 1$$'
        >>> fix_inline_math('$$\\nE = mc^2')
        '$$\\nE = mc^2'
    """
    if content == "$":
        return ""

    if is_inside_unclosed_code_block(content):
        return content

    paragraph = last_paragraph(content)
    text = paragraph.text
    counted = SIMPLE_INLINE_CODE_RE.sub(_blank, CODE_BLOCK_RE.sub(_blank, text))
    if counted.count("$$") % 2 == 0:
        return content

    last = find_last_dollar_pair(text)
    if last == -1:
        return content

    after = text[last + 2:]
    if "\n" in after:
        return content
    if after.strip() == "$":
        # $$$: too ambiguous to guess
        return content

    trailing_dollar = after.endswith("$") and not after.endswith("$$")
    if trailing_dollar:
        after = after[:-1]

    if after.strip():
        if trailing_dollar:
            return content[:-1] + "$$"
        return append_before_trailing_whitespace(content, "$$")

    return content[: paragraph.start + last].rstrip()
