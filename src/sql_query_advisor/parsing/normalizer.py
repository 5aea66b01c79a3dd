"""Comment stripping and string-literal neutralization."""

import re
from dataclasses import dataclass

_LINE_COMMENT = re.compile(r"--[^\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
_STRING_LITERAL = re.compile(r"'[^']*(?:'|\Z)|\"[^\"]*(?:\"|\Z)")

QUOTE_CHARS = ("'", '"')


def remove_comments(sql: str) -> str:
    """Strip ``--`` line comments and ``/* */`` block comments.

    Block comments are replaced by a single space so tokens on either side
    stay separated. An unterminated block comment runs to the end of input.
    """
    without_lines = _LINE_COMMENT.sub("", sql)
    return _BLOCK_COMMENT.sub(" ", without_lines)


def _blank_literal(match: re.Match[str]) -> str:
    literal = match.group(0)
    quote = literal[0]
    closed = len(literal) > 1 and literal.endswith(quote)
    body_length = len(literal) - (2 if closed else 1)
    return quote + " " * body_length + (quote if closed else "")


def neutralize_string_literals(sql: str) -> str:
    """Blank out the contents of quoted spans, keeping quotes and total length."""
    return _STRING_LITERAL.sub(_blank_literal, sql)


@dataclass(slots=True)
class LiteralTracker:
    """Tracks whether a forward scan is inside a quoted string.

    A quote preceded by a backslash does not open or close a literal.
    """

    quote: str | None = None

    def step(self, text: str, index: int) -> bool:
        """Advance over ``text[index]``; return True if it is ordinary SQL text."""
        char = text[index]
        if char in QUOTE_CHARS and (index == 0 or text[index - 1] != "\\"):
            if self.quote is None:
                self.quote = char
            elif char == self.quote:
                self.quote = None
            return False
        return self.quote is None
