"""Inline code and fenced code block repair."""

from ..core.patterns import CODE_BLOCK_RE, TRAILING_BACKTICKS_RE, TRIPLE_BACKTICK
from ..core.scan import is_inside_unclosed_code_block, last_paragraph


def fix_code(content: str) -> str:
    """Resolve trailing incomplete backtick syntax.

    A trailing backtick run that is still being typed is stripped first.
    Only if nothing was stripped is an open fence closed and an open
    inline code span closed (or its lone backtick dropped).

    Examples:
        >>> fix_code('Hello `world')
        'Hello `world`'
        >>> fix_code('```javascript\\nconst x = 1')
        '```javascript\\nconst x = 1\\n```'
        >>> fix_code('`')
        ''
    """
    cleaned = _remove_trailing_incomplete_backticks(content)
    if cleaned != content:
        return cleaned

    content = _fix_code_block(content)
    return _fix_inline_code(content)


def _count_inline_backticks(paragraph: str) -> int:
    return CODE_BLOCK_RE.sub("", paragraph).count("`")


def _remove_trailing_incomplete_backticks(content: str) -> str:
    m = TRAILING_BACKTICKS_RE.search(content)
    if not m:
        return content

    run = m.group(1)
    before = content[: m.start(1)]
    after = content[m.end(1):]
    strip = before.rstrip() + after

    if len(run) == 1:
        # Keep a backtick that closes an open inline span
        count = _count_inline_backticks(last_paragraph(before).text)
        if count % 2 == 1 and before.count(TRIPLE_BACKTICK) % 2 == 0:
            return content
        return strip

    if len(run) == 2:
        return strip

    if len(run) == 3 and before.count(TRIPLE_BACKTICK) % 2 == 1:
        # Closing fence of an open block
        return content

    return strip


def _fix_code_block(content: str) -> str:
    if not is_inside_unclosed_code_block(content):
        return content

    after_fence = content[content.rfind(TRIPLE_BACKTICK) + 3:]
    has_newline = "\n" in after_fence
    info = after_fence.split("\n", 1)[0]

    if info.strip() or has_newline:
        if not content.endswith("\n"):
            return f"{content}\n```"
        return f"{content}```"

    # Bare opening fence: nothing to show yet
    return content[:-3]


def _fix_inline_code(content: str) -> str:
    if is_inside_unclosed_code_block(content):
        return content

    paragraph = last_paragraph(content)
    text = paragraph.text
    if _count_inline_backticks(text) % 2 == 0:
        return content

    last_tick = -1
    i = 0
    while i < len(text):
        if text.startswith(TRIPLE_BACKTICK, i):
            close = text.find(TRIPLE_BACKTICK, i + 3)
            if close != -1:
                i = close + 3
                continue
        if text[i] == "`" and not _is_part_of_triple(text, i):
            last_tick = i
        i += 1

    if last_tick == -1:
        return content

    pos = paragraph.start + last_tick
    if content[pos + 1:].strip():
        return f"{content}`"
    return content[:pos] + content[pos + 1:]


def _is_part_of_triple(text: str, i: int) -> bool:
    def at(k: int) -> str:
        return text[k] if 0 <= k < len(text) else ""

    return (
        (at(i - 1) == "`" and at(i - 2) == "`")
        or (at(i - 1) == "`" and at(i + 1) == "`")
        or (at(i + 1) == "`" and at(i + 2) == "`")
    )
