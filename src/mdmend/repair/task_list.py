"""Task list marker repair."""

from ..core.patterns import (
    BARE_LIST_ITEM_RE,
    INCOMPLETE_TASK_LIST_RE,
    QUOTE_INCOMPLETE_TASK_LIST_RE,
    QUOTE_STANDALONE_DASH_RE,
    QUOTE_TASK_LIST_RE,
    STANDALONE_DASH_RE,
    TASK_LIST_RE,
)
from ..core.scan import (
    find_closed_code_block_ranges,
    is_inside_unclosed_code_block,
    is_position_in_ranges,
)


def _is_incomplete_marker(line: str) -> bool:
    if QUOTE_INCOMPLETE_TASK_LIST_RE.match(line):
        return True
    if QUOTE_STANDALONE_DASH_RE.match(line) and not QUOTE_TASK_LIST_RE.match(line):
        return True
    if INCOMPLETE_TASK_LIST_RE.match(line):
        return True
    if STANDALONE_DASH_RE.match(line) and not TASK_LIST_RE.match(line):
        return True
    return bool(BARE_LIST_ITEM_RE.match(line))


def fix_task_list(content: str) -> str:
    """Drop a last line that is a task checkbox still being typed.

    ``-``, ``- ``, ``- [`` and their ``>`` quoted forms would otherwise
    flash as an empty bullet (or turn the line above into a setext
    heading) before ``[ ]``/``[x]`` arrives.

    Examples:
        >>> fix_task_list('- [ ] Task 1\\n-')
        '- [ ] Task 1\\n'
        >>> fix_task_list('- [ ] Task 1\\n  - [')
        '- [ ] Task 1\\n'
    """
    if is_inside_unclosed_code_block(content):
        return content

    lines = content.split("\n")
    last = lines[-1]
    if not _is_incomplete_marker(last):
        return content

    line_start = len(content) - len(last)
    if is_position_in_ranges(line_start, find_closed_code_block_ranges(content)):
        return content

    if len(lines) > 1:
        return "\n".join(lines[:-1]) + "\n"
    return ""
