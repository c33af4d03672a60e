"""Tests for the id-keyed floor collection."""

from __future__ import annotations

import pytest

from conftest import make_floor
from parceltax.assessment.floors import FloorTable
from parceltax.assessment.models import FloorInput


@pytest.fixture
def table():
    return FloorTable([make_floor(built_up_area=100), make_floor(built_up_area=200)])


class TestFloorTable:
    def test_initial_order(self, table):
        assert [f.built_up_area for f in table] == [100.0, 200.0]
        assert len(table) == 2

    def test_add_default_floor(self, table):
        added = table.add()
        assert isinstance(added, FloorInput)
        assert len(table) == 3
        assert list(table)[-1].row_id == added.row_id

    def test_add_given_floor(self, table):
        floor = make_floor(built_up_area=300)
        assert table.add(floor) is floor
        assert table.get(floor.row_id) is floor

    def test_add_duplicate_row_id_rejected(self, table):
        existing = table.snapshot()[0]
        with pytest.raises(ValueError, match="Duplicate"):
            table.add(existing)
        assert len(table) == 2
        assert table.get(existing.row_id).built_up_area == 100.0

    def test_remove(self, table):
        first = list(table)[0]
        assert table.remove(first.row_id) is True
        assert table.remove(first.row_id) is False
        assert [f.built_up_area for f in table] == [200.0]

    def test_clear(self, table):
        table.clear()
        assert len(table) == 0

    def test_replace(self, table):
        table.replace([make_floor(built_up_area=999)])
        assert [f.built_up_area for f in table] == [999.0]

    def test_update_keeps_position_and_id(self, table):
        first = list(table)[0]
        updated = table.update(first.row_id, built_up_area=150)
        assert updated.row_id == first.row_id
        assert [f.built_up_area for f in table] == [150.0, 200.0]

    def test_update_type_resets_market_rate(self, table):
        first = list(table)[0]
        assert first.market_rate == 1576.0
        updated = table.update(first.row_id, construction_type="MOSAIC")
        assert updated.construction_type == "MOSAIC"
        assert updated.market_rate is None

    def test_update_type_with_explicit_rate(self, table):
        first = list(table)[0]
        updated = table.update(first.row_id, construction_type="MOSAIC", market_rate=900)
        assert updated.market_rate == 900.0

    def test_update_coerces_values(self, table):
        first = list(table)[0]
        updated = table.update(first.row_id, built_up_area="abc")
        assert updated.built_up_area == 0.0

    def test_update_unknown_row(self, table):
        with pytest.raises(KeyError):
            table.update("missing", built_up_area=1)

    def test_snapshot_is_a_copy(self, table):
        snapshot = table.snapshot()
        snapshot[0].built_up_area = 1.0
        snapshot.pop()
        assert [f.built_up_area for f in table] == [100.0, 200.0]


class TestLockedFloorTable:
    def test_lock_empties_table(self, table):
        table.lock()
        assert table.locked is True
        assert len(table) == 0

    def test_locked_add_ignored(self):
        table = FloorTable(locked=True)
        assert table.add() is None
        assert len(table) == 0

    def test_locked_replace_ignored(self):
        table = FloorTable([make_floor()], locked=True)
        assert len(table) == 0

    def test_unlock(self):
        table = FloorTable(locked=True)
        table.unlock()
        assert table.add() is not None
        assert len(table) == 1
