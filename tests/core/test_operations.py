"""Tests for the operation model and its element/structure transforms."""

import pytest

from listdelta.core.changesets import ChangeKind, ChangeSet, IndexSpace
from listdelta.core.operations import (
    Batch,
    Insert,
    Remove,
    Reset,
    Update,
    VectorEvent,
    map_operation,
)
from listdelta.errors import InvalidOperationError, UnsupportedChangeSetError


class TestConstruction:
    def test_elements_are_stored_as_tuples(self):
        op = Insert(["a", "b"], 1)
        assert op.elements == ("a", "b")

    def test_operations_compare_by_value(self):
        assert Update(["x"], 2) == Update(("x",), 2)
        assert Remove(range(1, 3)) == Remove.span(1, 3)

    def test_negative_index_rejected(self):
        with pytest.raises(InvalidOperationError):
            Insert(["a"], -1)

    def test_remove_requires_unit_step(self):
        with pytest.raises(InvalidOperationError):
            Remove(range(0, 10, 2))

    def test_remove_requires_range(self):
        with pytest.raises(InvalidOperationError):
            Remove((0, 1))

    def test_reversed_remove_range_is_empty(self):
        op = Remove(range(3, 1))
        assert op.range == range(3, 3)
        assert op.change_set() == ChangeSet.deletes(set())

    def test_invalid_operation_is_value_error(self):
        with pytest.raises(ValueError):
            Update([], -5)

    def test_non_integer_index_rejected(self):
        with pytest.raises(InvalidOperationError, match="integer"):
            Insert(["a"], 1.5)

    def test_bool_index_rejected(self):
        with pytest.raises(InvalidOperationError):
            Update(["a"], True)


class TestChangeSetConversion:
    def test_insert(self):
        assert Insert(["a", "b", "c"], 4).change_set() == ChangeSet.inserts({4, 5, 6})

    def test_update(self):
        assert Update(["a"], 0).change_set() == ChangeSet.updates({0})

    def test_remove(self):
        assert Remove(range(2, 5)).change_set() == ChangeSet.deletes({2, 3, 4})

    def test_empty_insert_gives_empty_set(self):
        change_set = Insert([], 3).change_set()
        assert change_set.kind is ChangeKind.INSERTS
        assert not change_set

    @pytest.mark.parametrize("op", [Reset(["a"]), Batch([Insert(["a"], 0)])])
    def test_reset_and_batch_have_no_direct_change_set(self, op):
        with pytest.raises(UnsupportedChangeSetError):
            op.change_set()


class TestMapping:
    def test_insert_maps_elements(self):
        assert Insert([1, 2], 3).map(str) == Insert(["1", "2"], 3)

    def test_update_maps_elements(self):
        assert Update([1], 0).map(lambda v: v * 10) == Update([10], 0)

    def test_remove_passes_through(self):
        op = Remove(range(0, 2))
        assert op.map(str) is op

    def test_reset_maps_array(self):
        assert Reset([1, 2]).map(str) == Reset(["1", "2"])

    def test_batch_maps_children(self):
        batch = Batch([Insert([1], 0), Remove(range(0, 1)), Update([2], 0)])
        assert batch.map(str) == Batch([Insert(["1"], 0), Remove(range(0, 1)), Update(["2"], 0)])

    def test_map_operation_function(self):
        assert map_operation(Insert(["a"], 0), str.upper) == Insert(["A"], 0)

    @pytest.mark.parametrize(
        "op",
        [Insert([1, 2, 3], 2), Update([4, 5], 0), Remove(range(1, 4)), Insert([], 7)],
    )
    def test_structure_is_invariant_under_mapping(self, op):
        assert op.map(lambda v: ("wrapped", v)).change_set() == op.change_set()


class TestChangeSet:
    def test_index_spaces(self):
        assert ChangeSet.inserts({0}).index_space is IndexSpace.FINAL
        assert ChangeSet.updates({0}).index_space is IndexSpace.FINAL
        assert ChangeSet.deletes({0}).index_space is IndexSpace.ORIGINAL

    def test_kinds_are_not_interchangeable(self):
        assert ChangeSet.inserts({1}) != ChangeSet.deletes({1})

    def test_repr(self):
        assert repr(ChangeSet.updates({3, 1})) == "Updates([1, 3])"


class TestVectorEvent:
    def test_holds_array_and_operation(self):
        event = VectorEvent.of(["a", "b"], Insert(["b"], 1))
        assert event.array == ("a", "b")
        assert event.operation == Insert(["b"], 1)

    def test_map_transforms_array_and_operation(self):
        event = VectorEvent.of([1, 2], Update([2], 1))
        assert event.map(str) == VectorEvent.of(["1", "2"], Update(["2"], 1))
