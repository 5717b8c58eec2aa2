from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from ..core.ports import ParserStrategy


def find_last_leaf(tokens: list[Token]) -> Token | None:
    """Last rendered leaf: the final inline child, or a self-contained block token."""
    for token in reversed(tokens):
        if token.type == "inline":
            if token.children:
                # Skip closing tags such as strong_close and the empty text after them
                leaves = [child for child in token.children if child.nesting == 0]
                visible = [child for child in leaves if child.content]
                if visible:
                    return visible[-1]
                return leaves[-1] if leaves else token.children[-1]
            continue
        if token.nesting == 0 and not token.hidden:
            return token
    return None


def post_fix_text(tokens: list[Token]) -> Token | None:
    """
    Trim a ``$`` or ``$$`` left at the end of the last text leaf.

    A dollar sign still being typed renders as literal text until its math
    closes, so while streaming it is hidden. Returns the token trimmed, if any.
    """
    leaf = find_last_leaf(tokens)
    if leaf is None or leaf.type != "text" or not leaf.content.endswith("$"):
        return None
    width = 2 if leaf.content.endswith("$$") else 1
    leaf.content = leaf.content[:-width]
    return leaf


def annotate_loading(tokens: list[Token], loading: bool) -> Token | None:
    """Flag the last leaf as still streaming. Returns the token flagged, if any."""
    if not loading:
        return None
    leaf = find_last_leaf(tokens)
    if leaf is not None:
        leaf.meta["loading"] = True
    return leaf


class MarkdownParser(ParserStrategy):
    """
    CommonMark parser with GFM tables and strikethrough, ``$``/``$$`` math,
    footnotes, YAML front matter and task lists.

    Built per instance: callers that want sharing pass the same parser
    around explicitly.
    """

    def __init__(self, preset: str = "commonmark", single_dollar_text_math: bool = False):
        self.preset = preset
        self.single_dollar_text_math = single_dollar_text_math
        md = MarkdownIt(preset).enable("table").enable("strikethrough")
        # Strict single-dollar rules unless text math is wanted: "$5 and $10" stays text
        md.use(
            dollarmath_plugin,
            allow_space=single_dollar_text_math,
            allow_digits=single_dollar_text_math,
            double_inline=True,
        )
        md.use(footnote_plugin)
        md.use(front_matter_plugin)
        md.use(tasklists_plugin)
        self.md = md

    def parse(self, text: str) -> list[Token]:
        return self.md.parse(text)

    def render(self, text: str) -> str:
        return self.md.render(text)

    def tree(self, tokens: list[Token]) -> SyntaxTreeNode:
        return SyntaxTreeNode(tokens)

    def annotate_loading(self, tokens: list[Token], loading: bool) -> Any:
        return annotate_loading(tokens, loading)

    def post_fix(self, tokens: list[Token]) -> Any:
        return post_fix_text(tokens)
