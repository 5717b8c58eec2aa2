"""Delimiter-run scanning for the paired emphasis-style fixers."""

import re

from .model import Paragraph
from .patterns import ESCAPED_PUNCTUATION_RE, THEMATIC_BREAK_RE, TRAILING_STANDALONE_DASH_RE
from .scan import last_paragraph, mask_protected

# Stands in for code, math, URLs, tags and escapes: punctuation, never a marker
OPAQUE = "."


def _blank(m: re.Match) -> str:
    return " " * len(m.group(0))


def _opaque(m: re.Match) -> str:
    return OPAQUE * len(m.group(0))


def delimiter_region(
    content: str, single_dollar_text_math: bool = False
) -> tuple[Paragraph, str]:
    """
    Return the last paragraph and a same-length copy of it in which code,
    URLs, HTML tags, math and escapes are replaced by ``OPAQUE`` and
    thematic breaks are blanked.

    Protected spans stay non-blank, so a marker followed only by a code
    span or math still has something after it and flanks like text.
    Offsets in the region map to ``paragraph.start + offset`` in content.
    """
    masked = mask_protected(content, single_dollar_text_math, fill=OPAQUE)
    paragraph = last_paragraph(content, skip_trailing_empty=True)
    region = masked[paragraph.start:]
    region = ESCAPED_PUNCTUATION_RE.sub(_opaque, region)
    region = THEMATIC_BREAK_RE.sub(_blank, region)
    return paragraph, region


def single_markers(region: str, char: str) -> list[int]:
    """
    Offsets of lone ``*``/``_`` delimiters once ``**``/``__`` pairs are taken out.

    A run of odd length leaves one single marker (its last character).
    Runs that cannot open or close emphasis are skipped: whitespace on
    both sides (list bullets, ``2 * 3``) and, for ``_``, intraword use as
    in ``snake_case``. The end of the region is not whitespace: a marker
    typed last may still be followed by text.
    """
    positions = []
    for m in re.finditer(re.escape(char) + "+", region):
        if len(m.group(0)) % 2 == 0:
            continue
        before = region[m.start() - 1] if m.start() > 0 else ""
        after = region[m.end()] if m.end() < len(region) else ""
        if after.isspace() and (not before or before.isspace()):
            continue
        if char == "_" and before.isalnum() and after.isalnum():
            continue
        positions.append(m.end() - 1)
    return positions


def unclosed_state(region: str, marker: str) -> str | None:
    """
    Classify a double marker in the region.

    Returns ``None`` when balanced, ``"complete"`` when text follows the
    last occurrence, ``"remove"`` when nothing does.
    """
    if region.count(marker) % 2 == 0:
        return None
    after = region[region.rfind(marker) + len(marker):]
    return "complete" if after.strip() else "remove"


def strip_marker(content: str, pos: int, width: int) -> str:
    """Delete ``width`` marker characters at ``pos``; collapse what is left dangling."""
    tail = content[pos + width:]
    if tail.strip():
        return content[:pos] + tail
    result = content[:pos].rstrip()
    return TRAILING_STANDALONE_DASH_RE.sub(r"\1", result)
