from typing import Iterable, Iterator, Optional


class SchemaError(ValueError):
    """Raised when a schema cannot be built with unique attribute names."""


class Schema:
    """
    Ordered mapping from attribute name to column position.

    Positions are assigned in insertion order and always form the dense
    range [0, n). Iteration and attribute_names() follow column order.
    """
    __slots__ = ("_positions",)

    def __init__(self, attributes: Optional[Iterable[str]] = None) -> None:
        self._positions: dict[str, int] = {}
        for attr in attributes or ():
            if attr in self._positions:
                raise SchemaError(f"Schema: duplicate attribute name '{attr}'")
            self._positions[attr] = len(self._positions)

    def column_index(self, attr: str) -> Optional[int]:
        return self._positions.get(attr)

    def attribute_names(self) -> list[str]:
        return list(self._positions)

    def add_attribute(self, attr: str) -> bool:
        if attr in self._positions:
            return False
        self._positions[attr] = len(self._positions)
        return True

    def add_attributes(self, attrs: Iterable[str]) -> bool:
        """Append every name in attrs, or none of them if any is already taken."""
        attrs = list(attrs)
        if len(set(attrs)) != len(attrs):
            return False
        if any(attr in self._positions for attr in attrs):
            return False
        for attr in attrs:
            self._positions[attr] = len(self._positions)
        return True

    def copy(self) -> "Schema":
        return Schema(self._positions)

    def __contains__(self, attr: object) -> bool:
        return attr in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return list(self._positions) == list(other._positions)

    def __repr__(self) -> str:
        return f"Schema({', '.join(self._positions)})"
