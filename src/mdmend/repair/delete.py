"""Strikethrough (``~~``) repair."""

from ..core.delimiters import delimiter_region
from ..core.scan import append_before_trailing_whitespace, is_inside_unclosed_code_block


def fix_delete(content: str, *, single_dollar_text_math: bool = False) -> str:
    """Close or strip a trailing unclosed ``~~`` in the last paragraph.

    Examples:
        >>> fix_delete('Hello ~~world')
        'Hello ~~world~~'
        >>> fix_delete('Hello ~~world~')
        'Hello ~~world~~'
        >>> fix_delete('List item\\n\\n~~')
        'List item'
    """
    if is_inside_unclosed_code_block(content):
        return content

    if content.endswith("~") and not content.endswith("~~"):
        # Either half of a closing ~~ or a stray tilde
        trimmed = content[:-1]
        _, region = delimiter_region(trimmed, single_dollar_text_math)
        if region.count("~~") % 2 == 0:
            return trimmed
        if region[region.rfind("~~") + 2:]:
            return content + "~"

    paragraph, region = delimiter_region(content, single_dollar_text_math)
    if region.count("~~") % 2 == 0:
        return content

    last = region.rfind("~~")
    if region[last + 2:].strip():
        return append_before_trailing_whitespace(content, "~~")
    return content[: paragraph.start + last].rstrip()
