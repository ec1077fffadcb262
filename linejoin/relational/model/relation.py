"""
In-memory relation of fixed-arity integer tuples.

A Relation owns its Schema and its row list. Rows are stored as Python
tuples of int; the only operations that touch stored rows after insertion
are the column-extension methods, which rewrite each row with the configured
fill value appended. Projection and the join operators always build and
return a new Relation.
"""
import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

from .schema import Schema
from ..engine.config import config

logger = logging.getLogger(__name__)

Row = Tuple[int, ...]


class Relation:
    """
    A named schema plus an ordered list of integer tuples.

    Duplicate rows are kept; only project() removes duplicates.
    """
    __slots__ = ("_name", "_schema", "_rows")

    def __init__(self, attributes: Optional[Iterable[str]] = None, name: str = "") -> None:
        self._name = name
        self._schema = Schema(attributes)
        self._rows: List[Row] = []

    @classmethod
    def from_rows(cls, attributes: Iterable[str], rows: Iterable[Iterable[Any]], name: str = "") -> 'Relation':
        """Build a relation and insert every row, dropping wrong-arity ones."""
        rel = cls(attributes, name=name)
        for row in rows:
            rel.insert_tuple(row)
        return rel

    @classmethod
    def from_frame(cls, frame, name: str = "") -> 'Relation':
        from ..engine.frame import from_frame
        return from_frame(frame, name=name)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def schema(self) -> Schema:
        """A copy; columns are added through add_attribute(s) so rows stay in step."""
        return self._schema.copy()

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(self._schema)

    def column_index(self, attr: str) -> Optional[int]:
        """Column position of attr, or None when the attribute is unknown."""
        return self._schema.column_index(attr)

    def attribute_names(self) -> List[str]:
        return self._schema.attribute_names()

    def rows(self) -> List[Row]:
        return list(self._rows)

    def tuple_set(self) -> Set[Row]:
        return set(self._rows)

    def get_tuple(self, index: int) -> Row:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"Row index {index} out of range for relation with {len(self._rows)} rows")
        return self._rows[index]

    # ------------------------------------------------------------------
    # Mutation (population phase only)
    # ------------------------------------------------------------------
    def add_attribute(self, attr: str) -> bool:
        """
        Append a column. Existing rows are extended with the configured
        fill value. Returns False and changes nothing if attr exists.
        """
        if not self._schema.add_attribute(attr):
            return False
        self._extend_rows(1)
        return True

    def add_attributes(self, attrs: Iterable[str]) -> bool:
        attrs = list(attrs)
        if not self._schema.add_attributes(attrs):
            return False
        self._extend_rows(len(attrs))
        return True

    def _extend_rows(self, count: int) -> None:
        if count == 0 or not self._rows:
            return
        filler = (config.get_fill_value(),) * count
        for i, row in enumerate(self._rows):
            self._rows[i] = row + filler

    def insert_tuple(self, values: Iterable[Any]) -> bool:
        """
        Append one row. Rows whose length differs from the column count are
        dropped and False is returned; nothing is raised.
        """
        values = tuple(values)
        if len(values) != len(self._schema):
            logger.debug(f"[INSERT] Dropping tuple {values} of arity {len(values)} "
                         f"for relation '{self._name}' with {len(self._schema)} columns")
            return False
        self._rows.append(tuple(int(v) for v in values))
        return True

    # ------------------------------------------------------------------
    # Relational operators
    # ------------------------------------------------------------------
    def project(self, attrs: Union[str, Sequence[str]]) -> 'Relation':
        """
        Project onto one attribute name or a sequence of names.

        Unknown names are skipped; if none are known the result is the empty
        relation with no columns. Duplicate result tuples are removed,
        keeping first-seen order.
        """
        if isinstance(attrs, str):
            attrs = [attrs]
        valid = [a for a in attrs if a in self._schema]
        # repeated names would break schema uniqueness
        valid = list(dict.fromkeys(valid))
        if not valid:
            return Relation()

        idxs = [self._schema.column_index(a) for a in valid]
        res = Relation(valid)
        seen: Set[Row] = set()
        for row in self._rows:
            tup = tuple(row[i] for i in idxs)
            if tup not in seen:
                seen.add(tup)
                res._rows.append(tup)
        return res

    def natural_join(self, other: 'Relation', stats=None) -> 'Relation':
        from ..engine.join_engine import JoinEngine
        return JoinEngine.natural_join(self, other, stats=stats)

    def semi_join(self, other: 'Relation', stats=None) -> 'Relation':
        from ..engine.join_engine import JoinEngine
        return JoinEngine.semi_join(self, other, stats=stats)

    # ------------------------------------------------------------------
    # Conversion / display
    # ------------------------------------------------------------------
    def copy(self) -> 'Relation':
        res = Relation(name=self._name)
        res._schema = self._schema.copy()
        res._rows = list(self._rows)
        return res

    def to_frame(self):
        from ..engine.frame import to_frame
        return to_frame(self)

    def to_string(self) -> str:
        from ..display import format_relation
        return format_relation(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (f"Relation(name={self._name!r}, attributes={self.attribute_names()}, "
                f"rows={len(self._rows)})")

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)
