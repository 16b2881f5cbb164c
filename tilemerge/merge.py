"""Single-line slide and merge.

Lines are normalized so tiles move toward index 0. ``merge_line`` produces the
values; ``trace_line`` works out where each original tile ended up so the
renderer can animate it.
"""

from __future__ import annotations

from typing import NamedTuple


class LineMove(NamedTuple):
    source: int
    target: int
    value: int
    merged: bool


def _compact(values, length):
    tiles = [v for v in values if v != 0]
    return tiles + [0] * (length - len(tiles))


def merge_line(line):
    """
    Slide and merge one line toward index 0.

    Compacts the non-zero values, merges each adjacent equal pair once
    (left tile doubles, right tile empties) and compacts again. A merged tile
    never merges a second time in the same pass, so ``[2, 2, 2, 0]`` becomes
    ``(4, 2, 0, 0)``.
    """
    size = len(line)
    result = _compact(line, size)
    i = 0
    while i < size - 1:
        if result[i] != 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
            i += 2
        else:
            i += 1
    return tuple(_compact(result, size))


def trace_line(line, merged=None):
    """
    Match each tile in ``line`` to its slot in the merged line.

    Returns one ``LineMove`` per non-zero source, in source order. Sources
    claim destination slots in positional order: a tile whose value sits
    unchanged in the next unclaimed slot slides there, and two consecutive
    tiles of value v facing a slot holding 2v both land in that slot as a
    merge.
    """
    if merged is None:
        merged = merge_line(line)
    tiles = [(i, v) for i, v in enumerate(line) if v != 0]

    moves = []
    target = 0
    k = 0
    while k < len(tiles):
        source, value = tiles[k]
        pair = k + 1 < len(tiles) and tiles[k + 1][1] == value
        if pair and merged[target] == value * 2:
            moves.append(LineMove(source, target, value, True))
            moves.append(LineMove(tiles[k + 1][0], target, value, True))
            k += 2
        else:
            if merged[target] != value:
                raise ValueError(f"Line {tuple(line)} does not merge into {tuple(merged)}")
            moves.append(LineMove(source, target, value, False))
            k += 1
        target += 1
    return moves
