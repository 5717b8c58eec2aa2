"""Strong emphasis (``**`` / ``__``) repair."""

from ..core.delimiters import delimiter_region, single_markers, strip_marker, unclosed_state
from ..core.scan import append_before_trailing_whitespace, is_inside_unclosed_code_block


def _states(content: str, single_dollar_text_math: bool):
    paragraph, region = delimiter_region(content, single_dollar_text_math)
    return paragraph, region, unclosed_state(region, "**"), unclosed_state(region, "__")


def fix_strong(content: str, *, single_dollar_text_math: bool = False) -> str:
    """Close or strip a trailing unclosed ``**``/``__`` in the last paragraph.

    Examples:
        >>> fix_strong('Hello **world')
        'Hello **world**'
        >>> fix_strong('**bold and *mixed')
        '**bold and *mixed***'
        >>> fix_strong('List item\\n\\n**')
        'List item'
    """
    if content in ("*", "_"):
        return ""

    if is_inside_unclosed_code_block(content):
        return content

    paragraph, region, star, under = _states(content, single_dollar_text_math)

    # A single trailing marker is the first half of the closing pair
    removed_single = False
    if star and content.endswith("*") and not content.endswith("**"):
        content = content[:-1]
        removed_single = True
        paragraph, region, star, _ = _states(content, single_dollar_text_math)
    if under and content.endswith("_") and not content.endswith("__"):
        content = content[:-1]
        removed_single = True
        paragraph, region, _, under = _states(content, single_dollar_text_math)

    if star == "remove":
        return strip_marker(content, paragraph.start + region.rfind("**"), 2)
    if under == "remove":
        return strip_marker(content, paragraph.start + region.rfind("__"), 2)

    if star and under:
        # Close the later opener first
        if region.find("**") < region.find("__"):
            return append_before_trailing_whitespace(content, "__**")
        return append_before_trailing_whitespace(content, "**__")

    for state, marker in ((star, "**"), (under, "__")):
        if state != "complete":
            continue
        char = marker[0]
        if not removed_single and len(single_markers(region, char)) % 2 == 1:
            return append_before_trailing_whitespace(content, marker + char)
        return append_before_trailing_whitespace(content, marker)

    return content
