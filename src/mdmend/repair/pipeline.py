"""Repair chain driver."""

from collections.abc import Callable, Iterable
from functools import partial

from ..core.model import PreprocessOptions, RepairResult
from ..core.ports import Fixer
from ..logging import get_logger
from .block_math import fix_math
from .code import fix_code
from .delete import fix_delete
from .emphasis import fix_emphasis
from .footnote import fix_footnote
from .html import fix_html
from .inline_math import fix_inline_math
from .link import fix_link
from .strong import fix_strong
from .table import fix_table
from .task_list import fix_task_list

logger = get_logger("pipeline")

# Fixers by public name, in chain order. "html" is opt-in.
FIXERS: dict[str, Callable[..., str]] = {
    "code": fix_code,
    "footnote": fix_footnote,
    "strong": fix_strong,
    "emphasis": fix_emphasis,
    "delete": fix_delete,
    "task-list": fix_task_list,
    "link": fix_link,
    "table": fix_table,
    "inline-math": fix_inline_math,
    "math": fix_math,
    "html": fix_html,
}

# These read single_dollar_text_math when masking math spans
_MATH_AWARE = {"strong", "emphasis", "delete"}


def flow(functions: Iterable[Fixer]) -> Fixer:
    """Compose ``functions`` left to right into one ``str -> str`` callable."""
    chain = list(functions)

    def run(content: str) -> str:
        for fn in chain:
            content = fn(content)
        return content

    return run


def _resolve_options(
    options: PreprocessOptions | None, single_dollar_text_math: bool | None
) -> PreprocessOptions:
    if options is None:
        options = PreprocessOptions()
    if single_dollar_text_math is not None:
        options = PreprocessOptions(
            single_dollar_text_math=single_dollar_text_math,
            fix_html=options.fix_html,
        )
    return options


def build_chain(options: PreprocessOptions | None = None) -> list[tuple[str, Fixer]]:
    """Named fixers for ``options``, in the order they must run."""
    if options is None:
        options = PreprocessOptions()

    chain = []
    for name, fixer in FIXERS.items():
        if name == "html" and not options.fix_html:
            continue
        if name in _MATH_AWARE:
            fixer = partial(fixer, single_dollar_text_math=options.single_dollar_text_math)
        chain.append((name, fixer))
    return chain


def repair(
    content: str,
    options: PreprocessOptions | None = None,
    *,
    single_dollar_text_math: bool | None = None,
) -> RepairResult:
    """Run the repair chain and report which fixers changed the text.

    Args:
        content: Normalized document text
        options: Chain options
        single_dollar_text_math: Overrides ``options.single_dollar_text_math``

    Returns:
        RepairResult with the repaired text and the names of fixers that acted
    """
    options = _resolve_options(options, single_dollar_text_math)

    result = content
    changes = []
    for name, fixer in build_chain(options):
        fixed = fixer(result)
        if fixed != result:
            logger.debug("%s changed content (%+d chars)", name, len(fixed) - len(result))
            changes.append(name)
            result = fixed

    return RepairResult(
        changed=result != content,
        changes=changes,
        original_text=content,
        repaired_text=result,
    )


def preprocess(
    content: str,
    options: PreprocessOptions | None = None,
    *,
    single_dollar_text_math: bool | None = None,
) -> str:
    """Repair trailing streaming incompleteness in ``content``.

    Examples:
        >>> preprocess('The premium plan costs $7,000 and includes **priority support')
        'The premium plan costs $7,000 and includes **priority support**'
    """
    return repair(content, options, single_dollar_text_math=single_dollar_text_math).repaired_text
