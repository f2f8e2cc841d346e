"""
Mini-notation tokenizing - just enough to count slots and collect values.

Mini-notation is the quoted sequence language inside s("...") and
note("..."): whitespace separates steps, [] and <> group sub-sequences,
commas at the top level stack layers, a top-level | picks one alternative
per cycle, and suffixes such as *4, /2, !, ?, @3 or (3,8) modify a step.

All scans are iterative so arbitrarily deep nesting cannot exhaust the
stack.
"""

from __future__ import annotations

from chuk_mcp_strudel.constants import REST_TOKENS

_OPENERS = frozenset("[<{(")
_CLOSERS = frozenset("]>})")
_STEP_OPERATORS = frozenset("*/!?@%:")
_LEAF_SEPARATORS = frozenset("[]<>{},|")

# Steps that continue or group the previous step rather than adding one
_NON_STEPS = frozenset({".", "_"})


def top_level_steps(sequence: str) -> list[list[str]]:
    """
    Split a sequence into layers of top-level steps.

    A bracketed or alternated group is one step, however much it contains;
    rests are steps like any other. A top-level | separates random
    alternatives; only one plays per cycle, so the layer keeps the longest.

    Args:
        sequence: Mini-notation text (string contents, no quotes)

    Returns:
        One list of step strings per comma-separated layer
    """
    layers: list[list[str]] = []
    alternatives: list[list[str]] = [[]]
    current: list[str] = []
    depth = 0

    def flush() -> None:
        step = "".join(current)
        current.clear()
        if step and step not in _NON_STEPS:
            alternatives[-1].append(step)

    def close_layer() -> None:
        flush()
        layers.append(max(alternatives, key=len))
        alternatives[:] = [[]]

    for char in sequence:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)
        elif depth == 0:
            if char.isspace():
                flush()
                continue
            if char == ",":
                close_layer()
                continue
            if char == "|":
                flush()
                alternatives.append([])
                continue
        current.append(char)

    close_layer()
    return [layer for layer in layers if layer]


def count_steps(sequence: str) -> int:
    """Count top-level steps across all layers of a sequence."""
    return sum(len(layer) for layer in top_level_steps(sequence))


def _leaf_of(word: str) -> str:
    """Strip step operators (bd*4 -> bd); sample indices (sd:3) are kept."""
    for i, char in enumerate(word):
        if char in _STEP_OPERATORS and char != ":":
            return word[:i]
    return word


def leaf_values(sequence: str) -> list[str]:
    """
    Collect leaf values at any depth, in order, rests excluded.

    Euclid arguments in parentheses and operator arguments (the 4 in bd*4)
    are not values.

    Args:
        sequence: Mini-notation text

    Returns:
        Leaf values, duplicates kept
    """
    values: list[str] = []
    current: list[str] = []
    paren_depth = 0

    def flush() -> None:
        word = "".join(current)
        current.clear()
        leaf = _leaf_of(word)
        if leaf and leaf not in REST_TOKENS and leaf not in _NON_STEPS:
            values.append(leaf)

    for char in sequence:
        if char == "(":
            flush()
            paren_depth += 1
        elif char == ")":
            paren_depth = max(0, paren_depth - 1)
        elif paren_depth:
            continue
        elif char.isspace() or char in _LEAF_SEPARATORS:
            flush()
        else:
            current.append(char)

    flush()
    return values
