"""Regular expressions shared by the repair fixers.

End-of-text anchors use ``\\Z`` so a trailing newline is never silently skipped.
"""

import re

CRLF_RE = re.compile(r"\r\n?")

TRAILING_BACKTICKS_RE = re.compile(r"(`+)\s*\Z")
CODE_BLOCK_RE = re.compile(r"```.*?```", re.DOTALL)
TRIPLE_BACKTICK = "```"
SIMPLE_INLINE_CODE_RE = re.compile(r"`[^`\n]+`")
TRAILING_WHITESPACE_RE = re.compile(r"\s+\Z")

# Thematic breaks built from * or _ are not emphasis delimiters
THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE)
# Collapses a `- ` list marker left dangling once a trailing marker is stripped
TRAILING_STANDALONE_DASH_RE = re.compile(r"(\A|\n\n?)-[ \t]*\Z")

# Links and images
INCOMPLETE_BRACKET_RE = re.compile(r"!?\[(?!\^)[^\]]*\Z")
INCOMPLETE_LINK_TEXT_RE = re.compile(r"!?\[(?!\^)[^\]]*\]\s*\Z")
INCOMPLETE_URL_RE = re.compile(r"!?\[[^\]]*\]\([^)]*\Z")
TRAILING_STANDALONE_BRACKET_RE = re.compile(r"(!?\[)\s*\Z")
TASK_MARKER_LINE_RE = re.compile(r"^\s*(?:>\s*)*[-*+]\s+\[[ xX]\]\s*\Z")

# URL bodies and tags, blanked before counting markup characters
LINK_IMAGE_URL_RE = re.compile(r"!?\[[^\]]*\]\(([^)\n]*)")
STANDALONE_URL_RE = re.compile(r"https?://[^\s<>)]+", re.IGNORECASE)
HTML_TAG_RE = re.compile(r"</?[A-Za-z][^<>]*>")

# Footnotes
INCOMPLETE_FOOTNOTE_REF_RE = re.compile(r"\[\^[^\]]*\Z")
FOOTNOTE_DEF_RE = re.compile(r"\[\^([^\]]+)\]:")
FOOTNOTE_REF_RE = re.compile(r"\[\^([^\]]+)\]")
FOOTNOTE_DEF_LINE_RE = re.compile(r"^\s*\[\^[^\]]+\]:")

# Tables
TABLE_ROW_RE = re.compile(r"^\|.*\|.*\|")
SEPARATOR_RE = re.compile(r"^\|[\s:]*-{3,}[\s:]*(?:\|[\s:]*-{3,}[\s:]*)+\|?\Z")
# Pipes that are cell text rather than column borders
ESCAPED_PIPE_RE = re.compile(r"\\\|")

# Task lists, matched against the last line only
TASK_LIST_RE = re.compile(r"^\s*- \[[x ]\]", re.IGNORECASE)
STANDALONE_DASH_RE = re.compile(r"^\s*-\Z")
BARE_LIST_ITEM_RE = re.compile(r"^\s*-[ \t]+\Z")
INCOMPLETE_TASK_LIST_RE = re.compile(r"^\s*-\s*\[\s*\Z")
QUOTE_TASK_LIST_RE = re.compile(r"^>\s*- \[[x ]\]", re.IGNORECASE)
QUOTE_STANDALONE_DASH_RE = re.compile(r"^>\s*-\s*\Z")
QUOTE_INCOMPLETE_TASK_LIST_RE = re.compile(r"^>\s*-\s*\[\s*\Z")

# HTML fragments, matched from the last `<` to the end of visible content
HTML_COMMENT_START_RE = re.compile(r"^<!--.*\Z", re.DOTALL)
HTML_DOCTYPE_RE = re.compile(r"^<![A-Z][^>]*\Z", re.IGNORECASE)
HTML_PROCESSING_INSTRUCTION_RE = re.compile(r"^<\?.*\Z", re.DOTALL)
HTML_CLOSING_TAG_RE = re.compile(r"^</[A-Z][\w-]*\s*\Z", re.IGNORECASE)
HTML_OPENING_TAG_RE = re.compile(r"^<[A-Z][\w-]*(?:\s[^<>]*)?\Z", re.IGNORECASE)
TRAILING_LINE_WHITESPACE_RE = re.compile(r"[ \t]+\Z")

# LaTeX delimiters rewritten by normalize()
DISPLAY_LATEX_RE = re.compile(r"\\\[(.*?)\\\]", re.DOTALL)
INLINE_LATEX_RE = re.compile(r"\\\((.*?)\\\)")
# Bare $...$ on one line: opener followed by non-space, closer preceded by
# non-space and not followed by a digit (so "$5 and $10" stays currency)
SINGLE_DOLLAR_MATH_RE = re.compile(
    r"(?<![\\$])\$(?![\s$])([^$\n]*?[^\s\\$])\$(?![$\d])"
)

# Backslash-escaped ASCII punctuation is literal text, never a delimiter
ESCAPED_PUNCTUATION_RE = re.compile(r"\\[!-/:-@\[-`{-~]")
