"""Ordered, id-keyed floor collection edited by the presentation layer."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from parceltax.assessment.models import FloorInput

logger = logging.getLogger(__name__)


class FloorTable:
    """Floors of one site in display order, keyed by ``row_id``.

    A locked table belongs to a vacant site: it stays empty and silently
    ignores additions.
    """

    def __init__(self, floors: Iterable[FloorInput] = (), locked: bool = False) -> None:
        self._floors: dict[str, FloorInput] = {}
        self._locked = locked
        self.replace(floors)

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._floors.clear()
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def add(self, floor: FloorInput | None = None) -> FloorInput | None:
        if self._locked:
            logger.debug("Floor table is locked; ignoring add")
            return None
        floor = floor if floor is not None else FloorInput()
        if floor.row_id in self._floors:
            raise ValueError(f"Duplicate floor row id {floor.row_id!r}")
        self._floors[floor.row_id] = floor
        return floor

    def get(self, row_id: str) -> FloorInput | None:
        return self._floors.get(row_id)

    def update(self, row_id: str, **changes: Any) -> FloorInput:
        """Replace a floor with an edited copy.

        Switching the construction type without an explicit market rate
        drops the old rate so the floor picks up the new type's default.
        """
        current = self._floors.get(row_id)
        if current is None:
            raise KeyError(f"No floor with row id {row_id!r}")
        changes.pop("row_id", None)
        if "construction_type" in changes and "market_rate" not in changes:
            changes["market_rate"] = None
        data = current.model_dump()
        data.update(changes)
        updated = FloorInput.model_validate(data)
        self._floors[row_id] = updated
        return updated

    def remove(self, row_id: str) -> bool:
        return self._floors.pop(row_id, None) is not None

    def clear(self) -> None:
        self._floors.clear()

    def replace(self, floors: Iterable[FloorInput]) -> None:
        self._floors.clear()
        for floor in floors:
            self.add(floor)

    def snapshot(self) -> list[FloorInput]:
        """Copy of the floors in display order, for handing to the engine."""
        return [floor.model_copy() for floor in self._floors.values()]

    def __len__(self) -> int:
        return len(self._floors)

    def __iter__(self) -> Iterator[FloorInput]:
        return iter(list(self._floors.values()))
