"""Scanning primitives shared by the repair fixers.

Everything here is recomputed from the text on each call. Ranges are
half-open ``[start, end)`` character offsets into the scanned string.
"""

import re
from collections.abc import Iterable

from .model import Paragraph, TextRange
from .patterns import (
    HTML_TAG_RE,
    LINK_IMAGE_URL_RE,
    STANDALONE_URL_RE,
    TRAILING_WHITESPACE_RE,
    TRIPLE_BACKTICK,
)

_NOT_NEWLINE_RE = re.compile(r"[^\n]")


def last_paragraph(content: str, skip_trailing_empty: bool = False) -> Paragraph:
    """
    Return the lines after the final blank line.

    With ``skip_trailing_empty`` a whitespace-only final line (a trailing
    newline, typically) does not count as the blank line that ends the
    document, so the real last paragraph is still found.
    """
    lines = content.split("\n")
    start_index = 0
    for i in range(len(lines) - 1, -1, -1):
        if skip_trailing_empty and i == len(lines) - 1 and not lines[i].strip():
            continue
        if not lines[i].strip():
            start_index = i + 1
            break

    offset = sum(len(line) + 1 for line in lines[:start_index])
    return Paragraph(
        text="\n".join(lines[start_index:]),
        start=offset,
        line_index=start_index,
    )


def fence_positions(content: str) -> list[int]:
    """Offsets of non-overlapping ``` runs, left to right."""
    positions = []
    i = content.find(TRIPLE_BACKTICK)
    while i != -1:
        positions.append(i)
        i = content.find(TRIPLE_BACKTICK, i + 3)
    return positions


def is_inside_unclosed_code_block(content: str) -> bool:
    return content.count(TRIPLE_BACKTICK) % 2 == 1


def find_closed_code_block_ranges(content: str) -> list[TextRange]:
    """Pair fences 1st with 2nd, 3rd with 4th, ...; a dangling last fence is ignored."""
    positions = fence_positions(content)
    return [
        TextRange(positions[k], positions[k + 1] + 3)
        for k in range(0, len(positions) - 1, 2)
    ]


def find_inline_code_ranges(
    content: str,
    code_block_ranges: list[TextRange] | None = None,
) -> list[TextRange]:
    """Pair single backticks found outside code blocks and not part of a ``` run."""
    if code_block_ranges is None:
        code_block_ranges = find_closed_code_block_ranges(content)

    ticks = []
    blocks = iter(code_block_ranges)
    block = next(blocks, None)
    i = 0
    n = len(content)
    while i < n:
        while block is not None and block.end <= i:
            block = next(blocks, None)
        if block is not None and i in block:
            i = block.end
            continue
        if content.startswith(TRIPLE_BACKTICK, i):
            i += 3
            continue
        if content[i] == "`":
            ticks.append(i)
        i += 1

    return [TextRange(ticks[k], ticks[k + 1] + 1) for k in range(0, len(ticks) - 1, 2)]


def find_code_ranges(content: str) -> list[TextRange]:
    """Closed code blocks plus inline code spans, sorted by start."""
    blocks = find_closed_code_block_ranges(content)
    inline = find_inline_code_ranges(content, blocks)
    return sorted(blocks + inline, key=lambda r: r.start)


def is_position_in_ranges(pos: int, ranges: Iterable[TextRange]) -> bool:
    return any(pos in r for r in ranges)


def find_math_ranges(
    content: str,
    single_dollar_text_math: bool = False,
    code_ranges: list[TextRange] | None = None,
) -> list[TextRange]:
    """
    Locate math spans outside code.

    ``$$`` tokens pair sequentially whether inline or on their own lines;
    an unpaired last ``$$`` opens a span running to the end of the text.
    With ``single_dollar_text_math`` single ``$...$`` pairs on one line
    count too; an unpaired single ``$`` is treated as plain text.
    """
    if code_ranges is None:
        code_ranges = find_code_ranges(content)

    def scan(step):
        ranges = iter(code_ranges)
        current = next(ranges, None)
        i = 0
        n = len(content)
        while i < n:
            while current is not None and current.end <= i:
                current = next(ranges, None)
            if current is not None and i in current:
                i = current.end
                continue
            if content[i] == "\\":
                i += 2
                continue
            i = step(i)

    doubles: list[int] = []

    def double_step(i: int) -> int:
        if content.startswith("$$", i):
            doubles.append(i)
            return i + 2
        return i + 1

    scan(double_step)
    math = [TextRange(doubles[k], doubles[k + 1] + 2) for k in range(0, len(doubles) - 1, 2)]
    if len(doubles) % 2 == 1:
        math.append(TextRange(doubles[-1], len(content)))

    if single_dollar_text_math:
        singles: list[TextRange] = []
        opened: list[int] = []

        def single_step(i: int) -> int:
            if content.startswith("$$", i):
                return i + 2
            ch = content[i]
            if ch == "\n":
                opened.clear()
            elif ch == "$" and not is_position_in_ranges(i, math):
                if opened:
                    singles.append(TextRange(opened.pop(), i + 1))
                else:
                    opened.append(i)
            return i + 1

        scan(single_step)
        math = sorted(math + singles, key=lambda r: r.start)

    return math


def is_within_math_block(
    content: str, pos: int, single_dollar_text_math: bool = False
) -> bool:
    return is_position_in_ranges(pos, find_math_ranges(content, single_dollar_text_math))


def find_url_ranges(content: str) -> list[TextRange]:
    """Bodies of ``[text](url`` / ``![alt](url`` plus bare http(s) URLs."""
    ranges = [TextRange(m.start(1), m.end(1)) for m in LINK_IMAGE_URL_RE.finditer(content)]
    ranges.extend(TextRange(m.start(), m.end()) for m in STANDALONE_URL_RE.finditer(content))
    return ranges


def find_html_tag_ranges(content: str) -> list[TextRange]:
    return [TextRange(m.start(), m.end()) for m in HTML_TAG_RE.finditer(content)]


def is_within_link_or_image_url(content: str, pos: int) -> bool:
    return is_position_in_ranges(pos, find_url_ranges(content))


def is_within_html_tag(content: str, pos: int) -> bool:
    return is_position_in_ranges(pos, find_html_tag_ranges(content))


def blank_ranges(text: str, ranges: Iterable[TextRange], fill: str = " ") -> str:
    """Replace every non-newline character inside ``ranges`` with ``fill``.

    Offsets and line structure survive, so positions found in the result
    are valid positions in ``text``.
    """
    chars = list(text)
    for r in ranges:
        start = max(r.start, 0)
        end = min(r.end, len(chars))
        if start >= end:
            continue
        chars[start:end] = _NOT_NEWLINE_RE.sub(fill, text[start:end])
    return "".join(chars)


def remove_urls_from_text(text: str, fill: str = " ") -> str:
    """Blank URL bodies and HTML tags so `_`, `*`, `~` inside them are never counted."""
    return blank_ranges(text, find_url_ranges(text) + find_html_tag_ranges(text), fill)


def remove_math_blocks_from_text(text: str, single_dollar_text_math: bool = False) -> str:
    return blank_ranges(text, find_math_ranges(text, single_dollar_text_math))


def mask_protected(content: str, single_dollar_text_math: bool = False, fill: str = " ") -> str:
    """Blank code, URLs, HTML tags and math: everything markup counting must skip.

    ``fill`` other than a space keeps the masked spans visible as text,
    which matters when asking whether anything follows a marker.
    """
    code = find_code_ranges(content)
    masked = blank_ranges(content, code, fill)
    masked = remove_urls_from_text(masked, fill)
    return blank_ranges(masked, find_math_ranges(content, single_dollar_text_math, code), fill)


def append_before_trailing_whitespace(content: str, suffix: str) -> str:
    m = TRAILING_WHITESPACE_RE.search(content)
    if not m:
        return content + suffix
    return content[: m.start()] + suffix + content[m.start():]
