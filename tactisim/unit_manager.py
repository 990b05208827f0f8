"""Ownership and bulk operations over all units."""

from __future__ import annotations

from typing import Iterator

import pygame

from tactisim.geometry import Vec2
from tactisim.unit import Faction, Unit, UnitType


class UnitManager:
    """Creates units with unique ids and updates and draws them in order."""

    def __init__(self) -> None:
        self._units: list[Unit] = []
        self._next_id = 0

    def add_unit(self, unit_type: UnitType, faction: Faction, position: Vec2) -> int:
        """Create a unit; returns the id that the next unit will receive."""
        self._units.append(Unit(self._next_id, unit_type, faction, position))
        self._next_id += 1
        return self._next_id

    def get_unit_by_id(self, unit_id: int) -> Unit | None:
        return next((unit for unit in self._units if unit.id == unit_id), None)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def update_all(self, delta_time: float) -> None:
        for unit in self._units:
            unit.update(delta_time)

    def draw_all(self, surface: pygame.Surface) -> None:
        for unit in self._units:
            unit.draw(surface)