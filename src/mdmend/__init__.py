"""Repair partial Markdown arriving as a text stream so every prefix renders cleanly."""

__version__ = "0.1.0"

from .core.model import PreprocessOptions, RenderState, RepairResult
from .repair import (
    fix_code,
    fix_delete,
    fix_emphasis,
    fix_footnote,
    fix_html,
    fix_inline_math,
    fix_link,
    fix_math,
    fix_strong,
    fix_table,
    fix_task_list,
    flow,
    normalize,
    preprocess,
    preprocess_latex,
    repair,
)
from .stream import StreamSession

__all__ = [
    "__version__",
    "PreprocessOptions",
    "RenderState",
    "RepairResult",
    "StreamSession",
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
    "preprocess",
    "preprocess_latex",
    "repair",
    "flow",
]
