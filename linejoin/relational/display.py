"""
Tabular text rendering of a relation.

    A |B |C
    --------
    1 |2 |4
    4 |5 |2

Every column but the last is padded to one more character than its widest
cell (header included) and followed by '|'.
"""
from typing import List, Sequence

from .model.relation import Relation


def _row_to_string(cells: Sequence[str], widths: Sequence[int]) -> str:
    if not cells:
        return ""
    padded = [cell.ljust(w) for cell, w in zip(cells[:-1], widths[:-1])]
    return "|".join(padded + [cells[-1]])


def column_widths(relation: Relation) -> List[int]:
    widths = [len(attr) + 1 for attr in relation.attribute_names()]
    for row in relation:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(str(value)) + 1)
    return widths


def format_relation(relation: Relation) -> str:
    attrs = relation.attribute_names()
    widths = column_widths(relation)
    lines = [_row_to_string(attrs, widths)]
    lines.append("-" * (sum(widths) + len(widths) - 1) if widths else "")
    for row in relation:
        lines.append(_row_to_string([str(v) for v in row], widths))
    return "\n".join(lines) + "\n"
