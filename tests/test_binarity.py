# ==============================================
# Tests for the Binarity Tracker
# ==============================================

import pytest

from featrank.analysis import BinarityTracker
from featrank.encoding import SENTINEL
from featrank.errors import ColumnFrozenError
from featrank.storage import BinaryColumnStore


@pytest.fixture
def store():
    return BinaryColumnStore(num_attributes=3)


@pytest.fixture
def tracker(store):
    return BinarityTracker(store)


def _feed(tracker, store, rows):
    for row in rows:
        tracker.observe(row)
        store.append_target(row[-1] == 1)


class TestBinarityTracker:
    """Latching attributes on their first non-binary value."""

    def test_binary_values_are_appended(self, tracker, store):
        _feed(tracker, store, [(0, 1, 1, 0), (1, 0, 1, 1)])
        assert store.binary_columns() == [0, 1, 2]
        assert store.column(0).to_bools().tolist() == [False, True]
        assert store.column(1).to_bools().tolist() == [True, False]

    def test_sentinel_latches(self, tracker, store):
        latched = tracker.observe((0, SENTINEL, 1, 0))
        assert latched == [1]
        assert not tracker.is_binary(1)
        assert tracker.is_binary(0)
        assert len(store.column(1)) == 0

    def test_latch_is_irrevocable(self, tracker, store):
        _feed(tracker, store, [
            (0, 1, 1, 0),
            (1, SENTINEL, 0, 1),
            (1, 0, 1, 0),
            (0, 1, 0, 1),
        ])
        assert not tracker.is_binary(1)
        # Only the bit written before the latch remains
        assert len(store.column(1)) == 1
        assert store.binary_columns() == [0, 2]

    def test_latched_column_stays_untouched(self, tracker, store):
        tracker.observe((SENTINEL, 0, 0, 0))
        # A second SENTINEL must not re-record the disqualification
        assert tracker.observe((SENTINEL, 0, 0, 0)) == []
        with pytest.raises(ColumnFrozenError):
            store.append(0, True)

    def test_row_count_invariant(self, tracker, store):
        rows = [(i % 2, (i // 2) % 2, SENTINEL if i == 5 else 1, i % 3 == 0) for i in range(20)]
        _feed(tracker, store, rows)
        for column_id in store.binary_columns():
            assert len(store.column(column_id)) == store.num_rows == 20
        assert len(store.column(2)) == 5

    def test_disqualification_details(self, tracker, store):
        _feed(tracker, store, [(0, 0, 0, 0), (0, 0, 0, 1)])
        tracker.observe((0, SENTINEL, 0, 1), raw_fields=["0", "7", "0", "smurf"])
        details = tracker.get_disqualifications()
        assert list(details) == [1]
        assert details[1].attribute_id == 2
        assert details[1].row_index == 2
        assert details[1].raw_value == "7"
        assert details[1].to_dict() == {"attribute_id": 2, "row_index": 2, "raw_value": "7"}
