"""Orders that a unit carries out over several frames."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tactisim.geometry import Vec2

if TYPE_CHECKING:
    from tactisim.unit import Unit


class Command(ABC):
    """An order given to a unit."""

    @abstractmethod
    def start(self, unit: Unit) -> None:
        """Called once when the command is assigned to a unit."""

    @abstractmethod
    def update(self, unit: Unit, delta_time: float) -> None:
        """Advance the command by `delta_time` seconds."""

    @property
    @abstractmethod
    def finished(self) -> bool:
        """True once the command has completed."""


class MoveCommand(Command):
    """Move a unit in a straight line to a target position."""

    def __init__(self, target: Vec2) -> None:
        self.target = target
        self._finished = False

    def start(self, unit: Unit) -> None:
        self._finished = False

    def update(self, unit: Unit, delta_time: float) -> None:
        if self._finished:
            return

        current = unit.position
        direction = self.target - current
        distance = direction.length()

        threshold = unit.speed * delta_time * 0.5
        if distance < threshold or distance < 1.0:
            unit.position = self.target
            self._finished = True
            return

        unit.position = current + direction * (unit.speed * delta_time / distance)

    @property
    def finished(self) -> bool:
        return self._finished