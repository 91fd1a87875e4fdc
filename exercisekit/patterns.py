"""Text patterns and recursive sequences: triangles, rule 30 and the towers of Hanoi."""

from __future__ import annotations

RULE_30 = {
    "   ": " ",
    "  X": "X",
    " X ": "X",
    " XX": "X",
    "X  ": "X",
    "X X": " ",
    "XX ": " ",
    "XXX": " ",
}


def floyd_triangle(rows: int) -> list[list[int]]:
    """Floyd's triangle: row ``k`` holds the next ``k`` consecutive numbers from 1 on."""
    triangle: list[list[int]] = []
    start = 1
    for length in range(1, rows + 1):
        triangle.append(list(range(start, start + length)))
        start += length
    return triangle


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for i in range(rows):
        row = [1]
        for j in range(1, i + 1):
            row.append(row[-1] * (i - j + 1) // j)
        triangle.append(row)
    return triangle


def star_pattern(rows: int) -> list[str]:
    """Lines of stars, ``rows`` on the first line and one fewer on each line after."""
    return [" ".join("*" * count) for count in range(rows, 0, -1)]


def rule30_step(level: str) -> str:
    """The next generation of a rule 30 automaton drawn with ``X`` and spaces."""
    if any(ch not in " X" for ch in level):
        raise ValueError(f"cells must be 'X' or ' ': {level!r}")
    padded = f"  {level}  "
    windows = (padded[i : i + 3] for i in range(len(padded) - 2))
    return "".join(RULE_30[window] for window in windows)


def rule30(levels: int = 20) -> list[str]:
    """``levels`` generations of rule 30 from a single cell, centred by left padding."""
    lines: list[str] = []
    level = "X"
    for i in range(levels):
        lines.append(" " * (levels - i) + level)
        level = rule30_step(level)
    return lines


def hanoi_moves(
    n: int,
    source: str = "Source",
    auxiliary: str = "Intermediate",
    target: str = "Destination",
) -> list[tuple[str, str]]:
    """The ``(from, to)`` moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of disks must be non-negative")
    if n == 0:
        return []
    if n == 1:
        return [(source, target)]
    return (
        hanoi_moves(n - 1, source, target, auxiliary)
        + [(source, target)]
        + hanoi_moves(n - 1, auxiliary, source, target)
    )