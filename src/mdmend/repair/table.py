"""Table header separator repair."""

from ..core.patterns import ESCAPED_PIPE_RE, SEPARATOR_RE, SIMPLE_INLINE_CODE_RE, TABLE_ROW_RE
from ..core.scan import (
    find_closed_code_block_ranges,
    is_inside_unclosed_code_block,
    is_position_in_ranges,
    last_paragraph,
)


def generate_separator(columns: int) -> str:
    """Separator row ``| --- | --- |`` with one cell per column."""
    return "|" + "|".join([" --- "] * columns) + "|"


def count_columns(row: str) -> int:
    """Cells in a ``|``-bordered row. Escaped pipes and pipes in code spans are text."""
    row = SIMPLE_INLINE_CODE_RE.sub("", ESCAPED_PIPE_RE.sub("", row))
    return row.count("|") - 1


def _rows(paragraph_text: str) -> list[tuple[int, str]]:
    """Non-blank lines with the offset of their first visible character."""
    rows = []
    offset = 0
    for line in paragraph_text.split("\n"):
        if line.strip():
            rows.append((offset + len(line) - len(line.lstrip()), line.strip()))
        offset += len(line) + 1
    return rows


def fix_table(content: str) -> str:
    """Give a table header in the last paragraph the separator row it needs.

    Examples:
        >>> fix_table('| a | b |\\n')
        '| a | b |\\n| --- | --- |'
        >>> fix_table('| a | b |\\n| ---')
        '| a | b |\\n| --- | --- |'
    """
    if is_inside_unclosed_code_block(content):
        return content

    paragraph = last_paragraph(content, skip_trailing_empty=True)
    rows = _rows(paragraph.text)
    if not rows:
        return content

    header_index = -1
    header = ""
    header_pos = -1
    for i, (offset, line) in enumerate(rows):
        if TABLE_ROW_RE.match(line) or (line.startswith("|") and len(line) > 1):
            header_index = i
            header = line
            header_pos = paragraph.start + offset
            break
    if header_index == -1:
        return content

    if is_position_in_ranges(header_pos, find_closed_code_block_ranges(content)):
        return content

    header_complete = header.endswith("|") and not header.endswith("\\|")
    new_header = header if header_complete else f"{header} |"
    columns = count_columns(new_header)
    if columns < 1:
        return content

    separator = generate_separator(columns)
    before = content[:header_pos]
    after = content[header_pos + len(header):]

    if header_index == len(rows) - 1:
        completed = content if header_complete else before + new_header + after
        if completed.endswith("\n"):
            return completed + separator
        return f"{completed}\n{separator}"

    next_row = rows[header_index + 1][1]
    if SEPARATOR_RE.match(next_row) and count_columns(next_row) == columns:
        if header_complete:
            return content
        return before + new_header + after

    after_lines = after.split("\n")
    if len(after_lines) == 1:
        return f"{before}{new_header}\n{separator}"

    following = after_lines[1]
    if following.startswith("|") and "-" in following:
        # Partial separator: replace it
        rest = "\n".join(after_lines[2:])
        if rest:
            return f"{before}{new_header}\n{separator}\n{rest}"
        return f"{before}{new_header}\n{separator}"

    # Data row typed before the separator
    rest = "\n".join(after_lines[1:])
    return f"{before}{new_header}\n{separator}\n{rest}"
