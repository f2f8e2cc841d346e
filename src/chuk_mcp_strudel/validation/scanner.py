"""
Delimiter and quote scanning.

Both scans are single left-to-right passes over the raw text. They do not
know anything about the pattern language beyond bracket pairs and the three
string delimiters.
"""

from __future__ import annotations

import re

from chuk_mcp_strudel.constants import BRACKET_PAIRS, QUOTE_CHARS, ErrorMessages, QuoteMode
from chuk_mcp_strudel.models.validation import BalanceCheck

_CLOSERS = frozenset(BRACKET_PAIRS.values())


def check_balance(text: str) -> BalanceCheck:
    """
    Check that (), [] and {} nest correctly.

    Fails at the first unexpected or mismatched closer (reporting its 0-based
    offset), or at end of input naming the innermost unclosed opener.

    Args:
        text: Pattern text

    Returns:
        BalanceCheck with a message describing the first failure
    """
    stack: list[str] = []

    for position, char in enumerate(text):
        if char in BRACKET_PAIRS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack:
                return BalanceCheck(
                    valid=False,
                    message=ErrorMessages.UNEXPECTED_CLOSER.format(char=char, position=position),
                )
            opener = stack.pop()
            if BRACKET_PAIRS[opener] != char:
                return BalanceCheck(
                    valid=False,
                    message=ErrorMessages.MISMATCHED_CLOSER.format(
                        opener=opener, closer=char, position=position
                    ),
                )

    if stack:
        return BalanceCheck(
            valid=False, message=ErrorMessages.UNCLOSED_BRACKET.format(char=stack[-1])
        )

    return BalanceCheck(valid=True)


def _quote_spans(text: str) -> tuple[list[tuple[int, int]], QuoteMode | None]:
    """
    Find quoted regions.

    Returns:
        (spans, open_mode): spans are (start, end) offsets of string contents
        (delimiters excluded); open_mode is the mode still open at end of input
    """
    spans: list[tuple[int, int]] = []
    mode: QuoteMode | None = None
    delimiter = ""
    start = 0
    escaped = False

    for position, char in enumerate(text):
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if char not in QUOTE_CHARS:
            continue

        if mode is None:
            mode = QUOTE_CHARS[char]
            delimiter = char
            start = position + 1
        elif char == delimiter:
            spans.append((start, position))
            mode = None

    if mode is not None:
        spans.append((start, len(text)))
    return spans, mode


def check_quotes(text: str) -> BalanceCheck:
    """
    Check that single, double and backtick strings are all closed.

    Quote modes are mutually exclusive: inside a double-quoted string a
    single quote is just a character. A backslash escapes the next character.

    Args:
        text: Pattern text

    Returns:
        BalanceCheck naming the mode left open, if any
    """
    _, open_mode = _quote_spans(text)
    if open_mode is not None:
        return BalanceCheck(
            valid=False, message=ErrorMessages.UNCLOSED_QUOTE.format(mode=open_mode.value)
        )
    return BalanceCheck(valid=True)


def mask_strings(text: str, fill: str = " ") -> str:
    """
    Blank out the contents of string literals, keeping offsets intact.

    Call-style scanning runs on the masked text so mini-notation such as
    "bd(3,8)" is not mistaken for a function call.
    """
    spans, _ = _quote_spans(text)
    if not spans:
        return text

    chars = list(text)
    for start, end in spans:
        for i in range(start, end):
            if chars[i] != "\n":
                chars[i] = fill
    return "".join(chars)


# identifier immediately followed by "(" (whitespace allowed)
CALL_TOKEN = re.compile(r"(?<![\w$])([A-Za-z_$][\w$]*)\s*\(")


def call_names(text: str) -> list[str]:
    """
    Get call-style identifiers outside string literals, in order of appearance.

    Duplicates are kept; callers decide whether they care.
    """
    return [m.group(1) for m in CALL_TOKEN.finditer(mask_strings(text))]
