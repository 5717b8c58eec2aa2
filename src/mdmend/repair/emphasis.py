"""Emphasis (single ``*`` / ``_``) repair."""

from ..core.delimiters import delimiter_region, single_markers, strip_marker
from ..core.scan import append_before_trailing_whitespace, is_inside_unclosed_code_block


def fix_emphasis(content: str, *, single_dollar_text_math: bool = False) -> str:
    """Close or strip a trailing unclosed ``*``/``_`` in the last paragraph.

    When both are open the later opener is closed first, so
    ``*a and _b`` becomes ``*a and _b_*``.
    """
    if is_inside_unclosed_code_block(content):
        return content

    paragraph, region = delimiter_region(content, single_dollar_text_math)

    pending = {}
    for char in "*_":
        markers = single_markers(region, char)
        if len(markers) % 2 == 0:
            continue
        last = markers[-1]
        action = "complete" if region[last + 1:].strip() else "remove"
        pending[char] = (action, markers[0], last)

    for char in "*_":
        if char in pending and pending[char][0] == "remove":
            return strip_marker(content, paragraph.start + pending[char][2], 1)

    if "*" in pending and "_" in pending:
        if pending["*"][1] < pending["_"][1]:
            return append_before_trailing_whitespace(content, "_*")
        return append_before_trailing_whitespace(content, "*_")

    if pending:
        return append_before_trailing_whitespace(content, next(iter(pending)))

    return content
