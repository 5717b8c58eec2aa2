from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TextRange:
    start: int  # char offset, inclusive
    end: int  # char offset, exclusive

    def __contains__(self, pos: int) -> bool:
        return self.start <= pos < self.end


@dataclass(frozen=True)
class Paragraph:
    text: str
    start: int  # char offset of the paragraph in the document
    line_index: int  # index of its first line in content.split("\n")


@dataclass
class PreprocessOptions:
    """Options for the streaming-repair chain."""

    single_dollar_text_math: bool = False
    fix_html: bool = False


@dataclass
class RepairResult:
    """Result of running the repair chain over one document."""

    changed: bool
    changes: list[str]  # names of fixers that modified the text, in chain order
    original_text: str
    repaired_text: str


@dataclass
class RenderState:
    raw: str
    content: str  # text handed to the parser
    mode: str  # "streaming" | "static"
    loading: bool = False
    meta: dict[str, Any] | None = None
    tree: Any = None  # parser output, if a parser is wired in
    tokens: list[Any] = field(default_factory=list)
