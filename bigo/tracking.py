"""
Loop nesting trackers.

Two strategies share the ``NestingTracker`` interface: ``BraceTracker`` for
C-like text and ``IndentationTracker`` for Python-like text. Both are fed one
line at a time, skip blank lines and never raise.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from .rules import PatternRule, first_match


LOOP_HEADER_RULES: tuple[PatternRule, ...] = (
    PatternRule("for-parens", re.compile(r"\bfor\s*\(")),
    PatternRule("for-in", re.compile(r"\bfor\s+[A-Za-z_]\w*\s+in\s+")),
    PatternRule("for-of", re.compile(r"\bfor\s+[A-Za-z_]\w*\s+of\s+")),
    PatternRule("for-short-decl", re.compile(r"\bfor\s+[A-Za-z_]\w*(?:\s*,\s*[A-Za-z_]\w*)*\s*:=")),
    PatternRule("while-parens", re.compile(r"\bwhile\s*\(")),
    PatternRule("while-in", re.compile(r"\bwhile\s+[A-Za-z_]\w*\s+in\s+")),
    PatternRule("do-block", re.compile(r"\bdo\s*\{")),
)

# "} while (cond);" closes a do-block, it does not open a loop.
DO_WHILE_TAIL = re.compile(r"^\}\s*while\s*\(.*\)\s*;?\s*$")

INDENT_LOOP_PREFIXES = ("for ", "while ")

# Another loop header chained after a colon on the same line.
CHAINED_LOOP_HEADER = re.compile(r":\s*(?=(?:for|while)\s)")

STRING_LITERAL = re.compile(r"'(?:\\.|[^'\\])*'|\"(?:\\.|[^\"\\])*\"")


def _mask_strings(line: str) -> str:
    """Blank out string literal contents, keeping column offsets."""
    return STRING_LITERAL.sub(lambda m: m.group(0)[0] + " " * (len(m.group(0)) - 2) + m.group(0)[-1], line)


def loop_header_rule(line: str) -> str | None:
    """Name of the first loop-header rule matching a brace-mode line, if any."""
    stripped = line.strip()
    if DO_WHILE_TAIL.match(stripped):
        return None
    hit = first_match(LOOP_HEADER_RULES, stripped)
    return hit[0].name if hit else None


class NestingTracker(ABC):
    """Line-fed loop nesting tracker."""

    def __init__(self):
        self._loop_count = 0
        self._max_depth = 0

    @abstractmethod
    def feed_line(self, line: str) -> None:
        """Consume one line of the snippet."""

    @property
    @abstractmethod
    def current_depth(self) -> int:
        """Number of loops open around the last line fed."""

    @property
    def max_depth_seen(self) -> int:
        return self._max_depth

    @property
    def loop_count(self) -> int:
        return self._loop_count

    def feed(self, text: str) -> "NestingTracker":
        for line in text.splitlines():
            self.feed_line(line)
        return self

    def _charge_loop(self) -> None:
        self._loop_count += 1
        self._max_depth = max(self._max_depth, self.current_depth)


class BraceTracker(NestingTracker):
    """
    Nesting tracker for brace-delimited languages.

    A loop is charged when its header keyword is seen, before its opening
    brace, so ``for (...) {`` and ``for (...)\\n{`` behave the same. The loop
    stays open until the brace it opened is closed. A header without a brace
    covers only its own statement or the following line.
    """

    def __init__(self):
        super().__init__()
        self._depth = 0
        self._open_loops: list[int] = []  # brace depth of each open loop body
        self._pending = 0  # headers still waiting for their "{"
        self._header_parens = 0  # open "(" of a header split over lines

    @property
    def current_depth(self) -> int:
        return len(self._open_loops) + self._pending

    @property
    def brace_depth(self) -> int:
        return self._depth

    def feed_line(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            return

        awaiting_body = self._pending > 0 and self._header_parens == 0
        is_loop = loop_header_rule(stripped) is not None
        if is_loop:
            self._pending += 1
            self._charge_loop()

        for char in stripped:
            if char == "{":
                self._depth += 1
                if self._pending:
                    self._pending -= 1
                    self._header_parens = 0
                    self._open_loops.append(self._depth)
            elif char == "}":
                while self._open_loops and self._open_loops[-1] >= self._depth:
                    self._open_loops.pop()
                self._depth = max(0, self._depth - 1)
            elif self._pending and char == "(":
                self._header_parens += 1
            elif self._pending and char == ")":
                self._header_parens = max(0, self._header_parens - 1)

        # Header still inside its parentheses: "for (int i = 0;" continues below.
        if self._header_parens:
            return

        # Brace-less body: "for (...) x++;" or a single statement on the next line.
        if self._pending and (stripped.endswith(";") or (awaiting_body and not is_loop)):
            self._pending = 0


class IndentationTracker(NestingTracker):
    """
    Nesting tracker for indentation-delimited languages.

    Keeps the header column of every open loop. A loop block ends at the
    first later line indented at or left of its header.
    """

    def __init__(self):
        super().__init__()
        self._stack: list[int] = []

    @property
    def current_depth(self) -> int:
        return len(self._stack)

    def feed_line(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            return

        indent = len(line) - len(line.lstrip())
        while self._stack and self._stack[-1] >= indent:
            self._stack.pop()

        if not stripped.startswith(INDENT_LOOP_PREFIXES):
            return

        self._stack.append(indent)
        self._charge_loop()
        for match in CHAINED_LOOP_HEADER.finditer(_mask_strings(stripped)):
            self._stack.append(indent + match.end())
            self._charge_loop()


def tracker_for(indentation_based: bool) -> NestingTracker:
    """Pick the tracking strategy for a snippet's block style."""
    if indentation_based:
        return IndentationTracker()
    return BraceTracker()
