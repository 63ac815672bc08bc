"""Tests for HistoryStore."""

import pytest
from originscan.resolution import HistoryStore, ScanRecord


def _record(n: int) -> ScanRecord:
    return ScanRecord(raw_payload=f"{n:013d}", symbology="EAN_13", captured_at_epoch_millis=n)


class TestHistoryStore:
    def test_newest_first(self, history: HistoryStore) -> None:
        records = [_record(i) for i in range(3)]
        for record in records:
            history.insert(record)

        assert history.list() == list(reversed(records))

    def test_fifty_one_inserts_keep_fifty_most_recent(self, history: HistoryStore) -> None:
        records = [_record(i) for i in range(51)]
        for record in records:
            history.insert(record)

        listed = history.list()
        assert len(listed) == 50
        assert listed[0] is records[50]
        assert listed[-1] is records[1]
        assert records[0] not in listed

    def test_bound_holds_for_long_sequences(self, history: HistoryStore) -> None:
        records = [_record(i) for i in range(175)]
        for i, record in enumerate(records):
            history.insert(record)
            assert len(history) <= 50
            assert history.list()[0] is record
            assert len(history) == min(i + 1, 50)

        assert history.list() == list(reversed(records))[:50]

    def test_same_record_replaced_in_place(self, history: HistoryStore) -> None:
        first, second, third = _record(1), _record(2), _record(3)
        for record in (first, second, third):
            history.insert(record)

        history.insert(second)

        assert len(history) == 3
        assert history.list() == [third, second, first]

    def test_same_scan_id_replaced_in_place(self, history: HistoryStore) -> None:
        original = _record(1)
        history.insert(original)
        history.insert(_record(2))

        replacement = ScanRecord(
            raw_payload=original.raw_payload,
            symbology=original.symbology,
            captured_at_epoch_millis=original.captured_at_epoch_millis,
            scan_id=original.scan_id,
        )
        history.insert(replacement)

        assert len(history) == 2
        assert history.list()[1] is replacement

    def test_replace_never_grows_full_history(self, history: HistoryStore) -> None:
        records = [_record(i) for i in range(50)]
        for record in records:
            history.insert(record)

        history.insert(records[10])

        assert len(history) == 50
        assert records[0] in history.list()

    def test_list_is_a_snapshot(self, history: HistoryStore) -> None:
        history.insert(_record(1))
        snapshot = history.list()
        history.insert(_record(2))

        assert len(snapshot) == 1
        assert len(history.list()) == 2

    def test_find(self, history: HistoryStore) -> None:
        record = _record(1)
        history.insert(record)

        assert history.find(record.scan_id) is record
        assert history.find(_record(2).scan_id) is None

    def test_clear(self, history: HistoryStore) -> None:
        history.insert(_record(1))
        history.clear()
        assert history.list() == []

    def test_custom_size(self) -> None:
        history = HistoryStore(max_size=2)
        for i in range(5):
            history.insert(_record(i))

        assert history.max_size == 2
        assert [r.captured_at_epoch_millis for r in history.list()] == [4, 3]

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            HistoryStore(max_size=0)

    def test_replace_updates_held_record(self, history: HistoryStore) -> None:
        first, second = _record(1), _record(2)
        history.insert(first)
        history.insert(second)

        assert history.replace(first) is True
        assert history.list() == [second, first]

    def test_replace_does_not_revive_evicted_record(self) -> None:
        history = HistoryStore(max_size=2)
        evicted = _record(0)
        history.insert(evicted)
        history.insert(_record(1))
        history.insert(_record(2))

        assert history.replace(evicted) is False
        assert evicted not in history.list()
        assert [r.captured_at_epoch_millis for r in history.list()] == [2, 1]
