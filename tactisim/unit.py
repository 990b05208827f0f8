"""Units placed on the map."""

from __future__ import annotations

import enum

import pygame

from tactisim.command import Command
from tactisim.geometry import Rect, Vec2

Color = tuple[int, int, int]

UNIT_RADIUS = 10.0
DEFAULT_SPEED = 100.0
HIGHLIGHT_SCALE = 1.05
HIGHLIGHT_THICKNESS = 2
HIGHLIGHT_COLOR: Color = (0, 0, 0)


class UnitType(enum.Enum):
    NONE = enum.auto()
    INFANTRY = enum.auto()
    TANK = enum.auto()


class Faction(enum.Enum):
    NONE = enum.auto()
    FRIENDLY = enum.auto()
    ENEMY = enum.auto()
    NEUTRAL = enum.auto()


_FACTION_COLORS: dict[Faction, Color] = {
    Faction.FRIENDLY: (0, 255, 0),
    Faction.ENEMY: (255, 0, 0),
    Faction.NEUTRAL: (255, 255, 0),
}
_ERROR_COLOR: Color = (255, 0, 255)


def faction_color(faction: Faction) -> Color:
    """Colour a unit of the faction is drawn in; magenta for no faction."""
    return _FACTION_COLORS.get(faction, _ERROR_COLOR)


class Unit:
    """A single unit: a coloured disc that can carry out one command at a time."""

    def __init__(
        self, unit_id: int, unit_type: UnitType, faction: Faction, position: Vec2
    ) -> None:
        self.id = unit_id
        self.unit_type = unit_type
        self.faction = faction
        self._position = position
        self.selected = False
        self.speed = DEFAULT_SPEED
        self.radius = UNIT_RADIUS
        self._command: Command | None = None

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = value

    @property
    def bounds(self) -> Rect:
        """Bounding box of the unit's disc."""
        return Rect(
            self._position.x - self.radius,
            self._position.y - self.radius,
            2 * self.radius,
            2 * self.radius,
        )

    @property
    def color(self) -> Color:
        return faction_color(self.faction)

    @property
    def command(self) -> Command | None:
        """The command in progress, if any."""
        return self._command

    def set_command(self, command: Command | None) -> None:
        """Replace the current command and start the new one."""
        self._command = command
        if command is not None:
            command.start(self)

    def update(self, delta_time: float) -> None:
        command = self._command
        if command is None:
            return
        command.update(self, delta_time)
        if command.finished:
            self._command = None

    def draw(self, surface: pygame.Surface) -> None:
        center = (round(self._position.x), round(self._position.y))
        pygame.draw.circle(surface, self.color, center, round(self.radius))

        if self.selected:
            box = self.bounds
            width = box.width * HIGHLIGHT_SCALE + 2 * HIGHLIGHT_THICKNESS
            height = box.height * HIGHLIGHT_SCALE + 2 * HIGHLIGHT_THICKNESS
            outline = pygame.Rect(0, 0, round(width), round(height))
            outline.center = center
            pygame.draw.rect(surface, HIGHLIGHT_COLOR, outline, HIGHLIGHT_THICKNESS)