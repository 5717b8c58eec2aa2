"""Streaming repair fixers for partial Markdown."""

from .block_math import fix_math
from .code import fix_code
from .delete import fix_delete
from .emphasis import fix_emphasis
from .footnote import fix_footnote
from .html import fix_html
from .inline_math import fix_inline_math
from .link import fix_link
from .normalize import normalize, preprocess_latex
from .pipeline import FIXERS, build_chain, flow, preprocess, repair
from .strong import fix_strong
from .table import fix_table
from .task_list import fix_task_list

__all__ = [
    "fix_code",
    "fix_footnote",
    "fix_strong",
    "fix_emphasis",
    "fix_delete",
    "fix_task_list",
    "fix_link",
    "fix_table",
    "fix_inline_math",
    "fix_math",
    "fix_html",
    "normalize",
    "preprocess_latex",
    "preprocess",
    "repair",
    "flow",
    "build_chain",
    "FIXERS",
]
