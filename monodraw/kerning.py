"""Kerning lookups for pairs of glyph encodings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["KerningTable", "kerning_by_table", "TABLE_END"]

TABLE_END = 0xFFFF


@dataclass(frozen=True)
class KerningTable:
    """Two-level kerning table.

    ``first_encoding_table`` ends with the ``0xFFFF`` sentinel. For the first
    encoding at index ``i``, the matching second encodings and their values
    sit in ``second_encoding_table[index_to_second_table[i]:index_to_second_table[i + 1]]``
    and the same slice of ``kerning_values``.
    """

    first_encoding_table: Sequence[int]
    index_to_second_table: Sequence[int]
    second_encoding_table: Sequence[int]
    kerning_values: Sequence[int]

    def __post_init__(self) -> None:
        if not self.first_encoding_table or self.first_encoding_table[-1] != TABLE_END:
            raise ValueError("first encoding table must end with 0xFFFF")
        if len(self.index_to_second_table) < len(self.first_encoding_table):
            raise ValueError("index table is shorter than the first encoding table")
        if len(self.kerning_values) < len(self.second_encoding_table):
            raise ValueError("fewer kerning values than second encodings")

    def lookup(self, e1: int, e2: int) -> int:
        """Return the kerning for the pair ``(e1, e2)``, or 0 if there is none."""
        firsts = self.first_encoding_table[:-1]
        try:
            i1 = list(firsts).index(e1)
        except ValueError:
            return 0
        begin = self.index_to_second_table[i1]
        end = self.index_to_second_table[i1 + 1]
        for second, value in zip(
            self.second_encoding_table[begin:end], self.kerning_values[begin:end]
        ):
            if second == e2:
                return value
        return 0


def kerning_by_table(table: Iterable[int] | None, e1: int, e2: int) -> int:
    """Look up a pair in a flat table of ``(first, second, value)`` triples.

    The table ends at a ``0xFFFF`` entry. ``None`` means no kerning.
    """
    if table is None:
        return 0
    items = iter(table)
    for first in items:
        if first == TABLE_END:
            break
        second = next(items, None)
        value = next(items, None)
        if second is None or value is None:
            break
        if first == e1 and second == e2:
            return value
    return 0