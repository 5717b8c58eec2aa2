"""Text hygiene applied before the repair chain."""

import re

from ..core.patterns import (
    CRLF_RE,
    DISPLAY_LATEX_RE,
    INLINE_LATEX_RE,
    SINGLE_DOLLAR_MATH_RE,
)

# Fenced blocks first so a ``` run is never read as inline code
_PROTECTED_RE = re.compile(r"```.*?```|`[^`\n]+`", re.DOTALL)


def normalize(content: str) -> str:
    """Prepare raw stream text for repair.

    Line endings become ``\\n``, trailing whitespace at the end of the
    document is dropped, and LaTeX delimiters are rewritten to ``$$``.

    Args:
        content: Raw accumulated text

    Returns:
        Normalized text (non-``str`` input is returned unchanged)
    """
    if not isinstance(content, str):
        return content
    result = CRLF_RE.sub("\n", content).rstrip()
    return preprocess_latex(result)


def _rewrite_latex(text: str) -> str:
    text = DISPLAY_LATEX_RE.sub(lambda m: f"$${m.group(1)}$$", text)
    text = INLINE_LATEX_RE.sub(lambda m: f"$${m.group(1)}$$", text)
    return SINGLE_DOLLAR_MATH_RE.sub(lambda m: f"$${m.group(1)}$$", text)


def preprocess_latex(content: str) -> str:
    """Rewrite ``\\[..\\]``, ``\\(..\\)`` and bare ``$..$`` as ``$$..$$``.

    Fenced code blocks and inline code spans are copied through untouched.
    A ``$`` is only taken as an opener when a non-space follows it, and a
    closer must follow a non-space and not precede a digit, so prices such
    as ``$5 and $10`` survive.

    Examples:
        >>> preprocess_latex(r'where \\(x^2\\) holds')
        'where $$x^2$$ holds'
        >>> preprocess_latex('costs $5 and $10')
        'costs $5 and $10'
    """
    if not isinstance(content, str):
        return content

    parts = []
    last = 0
    for m in _PROTECTED_RE.finditer(content):
        parts.append(_rewrite_latex(content[last:m.start()]))
        parts.append(m.group(0))
        last = m.end()
    parts.append(_rewrite_latex(content[last:]))
    return "".join(parts)
