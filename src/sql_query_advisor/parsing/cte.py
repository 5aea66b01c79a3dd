"""Separation of a ``WITH`` prologue from the main query."""

import re
from dataclasses import dataclass, field
from enum import Enum, auto

from sql_query_advisor.parsing.normalizer import LiteralTracker, neutralize_string_literals

_LEADING_WITH = re.compile(r"^\s*WITH\s+", re.IGNORECASE)
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SELECT_KEYWORD = re.compile(r"SELECT\b", re.IGNORECASE)
_SKIPPED_WORDS = frozenset({"WITH", "RECURSIVE"})


class CteScanMode(Enum):
    SEEKING_NAME = auto()
    AWAITING_BODY = auto()
    IN_BODY = auto()


@dataclass(slots=True)
class CteNameScanner:
    """State machine over the top level of a ``WITH`` prologue.

    ``name AS (`` commits ``name`` when the opening parenthesis takes the
    depth from 0 to 1. Closing back to depth 0 or a top-level comma starts
    the search for the next binding.
    """

    depth: int = 0
    mode: CteScanMode = CteScanMode.SEEKING_NAME
    current_name: str = ""
    names: set[str] = field(default_factory=set)

    def open_paren(self) -> None:
        self.depth += 1
        if self.mode is CteScanMode.AWAITING_BODY and self.depth == 1:
            if self.current_name:
                self.names.add(self.current_name.lower())
            self.mode = CteScanMode.IN_BODY

    def close_paren(self) -> None:
        if self.depth == 0:
            return
        self.depth -= 1
        if self.depth == 0:
            self._reset()

    def comma(self) -> None:
        self._reset()

    def word(self, word: str) -> bool:
        """Consume a top-level identifier; return False once the main query starts."""
        upper = word.upper()
        if upper == "SELECT":
            return False
        if upper == "AS":
            self.mode = CteScanMode.AWAITING_BODY
        elif upper not in _SKIPPED_WORDS:
            self.current_name = word
        return True

    def _reset(self) -> None:
        self.mode = CteScanMode.SEEKING_NAME
        self.current_name = ""


def extract_cte_names(sql: str) -> frozenset[str]:
    """Return the lower-cased names bound by a leading ``WITH`` clause."""
    text = neutralize_string_literals(sql)
    match = _LEADING_WITH.match(text)
    if match is None:
        return frozenset()

    scanner = CteNameScanner()
    index = match.end()
    while index < len(text):
        char = text[index]
        if char == "(":
            scanner.open_paren()
        elif char == ")":
            scanner.close_paren()
        elif scanner.depth == 0:
            if scanner.mode is CteScanMode.SEEKING_NAME:
                identifier = _IDENTIFIER.match(text, index)
                if identifier is not None:
                    if not scanner.word(identifier.group(0)):
                        break
                    index = identifier.end()
                    continue
            if char == ",":
                scanner.comma()
        index += 1

    return frozenset(scanner.names)


def _starts_word(text: str, index: int) -> bool:
    return index == 0 or not (text[index - 1].isalnum() or text[index - 1] == "_")


def extract_main_query(sql: str) -> str:
    """Return the text from the first top-level ``SELECT`` after a ``WITH`` prologue.

    Queries without a prologue, and prologues with no top-level ``SELECT``,
    are returned unchanged.
    """
    match = _LEADING_WITH.match(sql)
    if match is None:
        return sql

    tracker = LiteralTracker()
    depth = 0
    for index in range(match.end(), len(sql)):
        if not tracker.step(sql, index):
            continue
        char = sql[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif depth == 0 and _starts_word(sql, index) and _SELECT_KEYWORD.match(sql, index):
            return sql[index:]

    return sql
