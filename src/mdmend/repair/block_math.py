"""Block math (``$$`` on its own line) repair."""

from ..core.scan import is_inside_unclosed_code_block


def block_math_delimiters(lines: list[str]) -> list[int]:
    """Indices of lines that are exactly ``$$`` once trimmed, outside fences."""
    delimiters = []
    in_fence = False
    for i, line in enumerate(lines):
        trimmed = line.strip()
        if trimmed.startswith("```"):
            in_fence = not in_fence
            continue
        if not in_fence and trimmed == "$$":
            delimiters.append(i)
    return delimiters


def fix_math(content: str) -> str:
    """Close an open ``$$`` block, or drop an opener with nothing after it yet.

    Example:
        >>> fix_math('$$\\nE = mc^2')
        '$$\\nE = mc^2\\n$$'
    """
    if is_inside_unclosed_code_block(content):
        return content

    lines = content.split("\n")
    delimiters = block_math_delimiters(lines)
    if len(delimiters) % 2 == 0:
        return content

    opener = delimiters[-1]
    has_body = any(line.strip() and line.strip() != "$$" for line in lines[opener + 1:])
    if has_body:
        if not content.endswith("\n"):
            return f"{content}\n$$"
        return f"{content}$$"

    return "\n".join(lines[:opener])
