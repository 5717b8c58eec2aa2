"""Footnote reference repair."""

from dataclasses import dataclass

from ..core.model import TextRange
from ..core.patterns import (
    CODE_BLOCK_RE,
    FOOTNOTE_DEF_LINE_RE,
    FOOTNOTE_DEF_RE,
    FOOTNOTE_REF_RE,
    INCOMPLETE_FOOTNOTE_REF_RE,
)
from ..core.scan import (
    find_closed_code_block_ranges,
    find_inline_code_ranges,
    is_inside_unclosed_code_block,
    is_position_in_ranges,
    last_paragraph,
)


@dataclass
class FootnoteReference:
    start: int
    end: int
    label: str


@dataclass
class _ScanContext:
    code_block_ranges: list[TextRange]
    inline_code_ranges: list[TextRange]
    definition_ranges: list[TextRange]

    def in_code(self, pos: int) -> bool:
        return is_position_in_ranges(pos, self.code_block_ranges) or is_position_in_ranges(
            pos, self.inline_code_ranges
        )


def _build_context(content: str) -> _ScanContext:
    blocks = find_closed_code_block_ranges(content)
    return _ScanContext(
        code_block_ranges=blocks,
        inline_code_ranges=find_inline_code_ranges(content, blocks),
        definition_ranges=_definition_line_ranges(content),
    )


def _definition_line_ranges(content: str) -> list[TextRange]:
    ranges = []
    offset = 0
    for line in content.split("\n"):
        if FOOTNOTE_DEF_LINE_RE.match(line):
            ranges.append(TextRange(offset, offset + len(line)))
        offset += len(line) + 1
    return ranges


def defined_labels(content: str) -> set[str]:
    """Labels of every ``[^label]:`` definition outside fenced code."""
    return set(FOOTNOTE_DEF_RE.findall(CODE_BLOCK_RE.sub("", content)))


def _cut(content: str, start: int, end: int) -> str:
    # Take one separating space with the reference
    if start > 0 and content[start - 1] == " ":
        start -= 1
    return content[:start] + content[end:]


def _remove_incomplete_reference(content: str, ctx: _ScanContext) -> str:
    paragraph = last_paragraph(content)
    text = paragraph.text
    if not INCOMPLETE_FOOTNOTE_REF_RE.search(text):
        return content

    ref_pos = text.rfind("[^")
    if ctx.in_code(paragraph.start + ref_pos):
        return content

    line_end = text.find("\n", ref_pos)
    ref_end = line_end if line_end != -1 else len(text)
    return _cut(content, paragraph.start + ref_pos, paragraph.start + ref_end)


def collect_references(content: str, ctx: _ScanContext) -> list[FootnoteReference]:
    refs = []
    for m in FOOTNOTE_REF_RE.finditer(content):
        pos = m.start()
        if ctx.in_code(pos) or is_position_in_ranges(pos, ctx.definition_ranges):
            continue
        refs.append(FootnoteReference(start=pos, end=m.end(), label=m.group(1)))
    return refs


def fix_footnote(content: str) -> str:
    """Drop footnote references that cannot resolve.

    An in-progress ``[^label`` in the last paragraph is removed up to the
    end of its line, then every complete ``[^label]`` whose label has no
    ``[^label]:`` definition anywhere is removed. Code is never touched.

    Example:
        >>> fix_footnote('Text [^1] and [^2]\\n\\n[^1]: First')
        'Text [^1] and\\n\\n[^1]: First'
    """
    if is_inside_unclosed_code_block(content):
        return content

    labels = defined_labels(content)
    ctx = _build_context(content)

    trimmed = _remove_incomplete_reference(content, ctx)
    if trimmed != content:
        content = trimmed
        ctx = _build_context(content)

    # Back to front so earlier offsets stay valid
    for ref in reversed(collect_references(content, ctx)):
        if ref.label not in labels:
            content = _cut(content, ref.start, ref.end)

    return content
