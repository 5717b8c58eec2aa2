"""Link and image repair."""

from ..core.patterns import (
    INCOMPLETE_BRACKET_RE,
    INCOMPLETE_LINK_TEXT_RE,
    INCOMPLETE_URL_RE,
    TASK_MARKER_LINE_RE,
    TRAILING_STANDALONE_BRACKET_RE,
)
from ..core.scan import (
    blank_ranges,
    find_code_ranges,
    is_inside_unclosed_code_block,
    last_paragraph,
)


def _remove_standalone_bracket(content: str) -> str:
    """Strip an empty ``[`` / ``![`` ending the last non-empty line, with one blank line after it."""
    lines = content.split("\n")
    index = next((i for i in range(len(lines) - 1, -1, -1) if lines[i].strip()), -1)
    if index == -1:
        return content

    line = lines[index]
    m = TRAILING_STANDALONE_BRACKET_RE.search(line)
    if not m:
        return content

    lines[index] = line[: m.start(1)].rstrip()
    if index + 1 < len(lines) and not lines[index + 1].strip():
        del lines[index + 1]
    return "\n".join(lines)


def fix_link(content: str) -> str:
    """Complete ``[text``, ``[text]`` and ``[text](url`` (and image forms).

    Examples:
        >>> fix_link('[Google](https://www.goo')
        '[Google](https://www.goo)'
        >>> fix_link('[text]')
        '[text]()'
        >>> fix_link('Text [')
        'Text'
    """
    if is_inside_unclosed_code_block(content):
        return content

    stripped = _remove_standalone_bracket(content)
    if stripped != content:
        return stripped

    paragraph = last_paragraph(content)
    text = blank_ranges(content, find_code_ranges(content))[paragraph.start:]

    if INCOMPLETE_BRACKET_RE.search(text):
        return f"{content}]()"

    m = INCOMPLETE_LINK_TEXT_RE.search(text)
    if m:
        line_start = text.rfind("\n", 0, m.start()) + 1
        # A bare checkbox is a task item, not link text
        if TASK_MARKER_LINE_RE.match(text[line_start:]):
            return content
        return f"{content}()"

    if INCOMPLETE_URL_RE.search(text):
        return f"{content})"

    return content
