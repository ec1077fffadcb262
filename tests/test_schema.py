"""Tests for Schema and the Relation data model."""

import pytest

from linejoin import Relation, Schema, SchemaError
from linejoin.relational.engine.config import config


class TestSchema:

    def test_positions_follow_insertion_order(self) -> None:
        s = Schema(["C", "A", "B"])
        assert s.attribute_names() == ["C", "A", "B"]
        assert [s.column_index(a) for a in ("C", "A", "B")] == [0, 1, 2]

    def test_unknown_attribute_is_none(self) -> None:
        assert Schema(["A"]).column_index("Z") is None

    def test_duplicate_in_constructor_raises(self) -> None:
        with pytest.raises(SchemaError):
            Schema(["A", "B", "A"])

    def test_add_attribute(self) -> None:
        s = Schema(["A"])
        assert s.add_attribute("B") is True
        assert s.add_attribute("A") is False
        assert s.attribute_names() == ["A", "B"]

    def test_add_attributes_is_all_or_nothing(self) -> None:
        s = Schema(["A", "B"])
        assert s.add_attributes(["C", "B"]) is False
        assert s.attribute_names() == ["A", "B"]
        assert s.add_attributes(["D", "D"]) is False
        assert s.add_attributes(["C", "D"]) is True
        assert s.attribute_names() == ["A", "B", "C", "D"]

    def test_copy_is_independent(self) -> None:
        s = Schema(["A"])
        c = s.copy()
        c.add_attribute("B")
        assert s.attribute_names() == ["A"]
        assert c == Schema(["A", "B"])


class TestRelationBasics:

    def test_counts(self, abc_relation) -> None:
        assert abc_relation.row_count() == 3
        assert abc_relation.column_count() == 2
        assert len(abc_relation) == 3

    def test_wrong_arity_is_dropped(self) -> None:
        r = Relation(["A", "B"])
        r.insert_tuple((1, 2))
        assert r.insert_tuple((1, 2, 3)) is False
        assert r.insert_tuple((1,)) is False
        assert r.row_count() == 1

    def test_every_row_matches_arity(self) -> None:
        r = Relation(["A", "B", "C"])
        for values in [(1, 2, 3), (1, 2), (), (4, 5, 6, 7), (7, 8, 9)]:
            r.insert_tuple(values)
        assert all(len(row) == r.column_count() for row in r)
        assert r.row_count() == 2

    def test_duplicates_are_kept(self) -> None:
        r = Relation.from_rows(["A"], [(1,), (1,), (2,)])
        assert r.row_count() == 3
        assert r.tuple_set() == {(1,), (2,)}

    def test_values_are_normalized_to_int(self) -> None:
        r = Relation(["A", "B"])
        r.insert_tuple(["3", 4.0])
        assert r.get_tuple(0) == (3, 4)
        assert all(type(v) is int for v in r.get_tuple(0))

    def test_get_tuple_out_of_range(self, abc_relation) -> None:
        assert abc_relation.get_tuple(2) == (1, 3)
        with pytest.raises(IndexError):
            abc_relation.get_tuple(3)
        with pytest.raises(IndexError):
            abc_relation.get_tuple(-1)

    def test_column_index(self, abc_relation) -> None:
        assert abc_relation.column_index("B") == 1
        assert abc_relation.column_index("Q") is None

    def test_rows_returns_a_copy(self, abc_relation) -> None:
        rows = abc_relation.rows()
        rows.clear()
        assert abc_relation.row_count() == 3

    def test_copy_does_not_share_rows(self, abc_relation) -> None:
        c = abc_relation.copy()
        c.insert_tuple((9, 9))
        c.add_attribute("Z")
        assert abc_relation.row_count() == 3
        assert abc_relation.attribute_names() == ["A", "B"]
        assert c.name == abc_relation.name


class TestColumnExtension:

    def test_add_attribute_extends_rows_with_zero(self, abc_relation) -> None:
        assert abc_relation.add_attribute("C") is True
        assert abc_relation.attribute_names() == ["A", "B", "C"]
        assert abc_relation.rows() == [(1, 2, 0), (2, 2, 0), (1, 3, 0)]

    def test_add_existing_attribute_changes_nothing(self, abc_relation) -> None:
        assert abc_relation.add_attribute("A") is False
        assert abc_relation.rows() == [(1, 2), (2, 2), (1, 3)]

    def test_add_attributes_extends_rows(self, abc_relation) -> None:
        assert abc_relation.add_attributes(["C", "D"]) is True
        assert abc_relation.get_tuple(1) == (2, 2, 0, 0)

    def test_add_attributes_rejects_whole_batch(self, abc_relation) -> None:
        assert abc_relation.add_attributes(["C", "A"]) is False
        assert abc_relation.attribute_names() == ["A", "B"]
        assert abc_relation.get_tuple(0) == (1, 2)

    def test_configured_fill_value(self, abc_relation) -> None:
        config.set("schema.fill_value", -1)
        abc_relation.add_attribute("C")
        assert abc_relation.get_tuple(0) == (1, 2, -1)

    def test_inserts_after_extension_need_new_arity(self, abc_relation) -> None:
        abc_relation.add_attribute("C")
        assert abc_relation.insert_tuple((5, 6)) is False
        assert abc_relation.insert_tuple((5, 6, 7)) is True

    def test_extended_column_joins(self) -> None:
        r = Relation.from_rows(["A"], [(1,), (2,)])
        r.add_attribute("B")
        s = Relation.from_rows(["B", "C"], [(0, 9), (1, 8)])
        assert r.natural_join(s).tuple_set() == {(1, 0, 9), (2, 0, 9)}

    def test_schema_accessor_cannot_break_arity(self) -> None:
        r = Relation.from_rows(["A", "B"], [(1, 2)])
        r.schema.add_attribute("C")
        assert r.column_count() == 2
        assert r.attribute_names() == ["A", "B"]
        assert all(len(row) == r.column_count() for row in r)
