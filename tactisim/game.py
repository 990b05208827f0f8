"""The game: map, units, input handling and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from tactisim.command import MoveCommand
from tactisim.config import (
    BACKGROUND_COLOR,
    MAP_TILES_X,
    MAP_TILES_Y,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from tactisim.geometry import Vec2
from tactisim.tilemap import TileMap
from tactisim.unit import Faction, Unit, UnitType
from tactisim.unit_manager import UnitManager

LEFT_BUTTON = 1
RIGHT_BUTTON = 3

_INITIAL_UNITS = (
    ((3, 3), UnitType.INFANTRY, Faction.FRIENDLY, "FRIENDLY INFANTRY"),
    ((10, 7), UnitType.TANK, Faction.ENEMY, "ENEMY TANK"),
    ((5, 11), UnitType.INFANTRY, Faction.ENEMY, "FRIENDLY INFANTRY"),
)


class Game:
    """Holds the world state and drives it from input events and elapsed time."""

    def __init__(self) -> None:
        self.surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.game_map = TileMap(MAP_TILES_X, MAP_TILES_Y, TILE_SIZE)
        self.units = UnitManager()
        self.selected_unit: Unit | None = None
        self.running = True

        tiles_x, tiles_y = self.game_map.map_size_in_tiles
        width, height = self.surface.get_size()
        print("Game initialized.")
        print(f"Map created: {tiles_x}x{tiles_y} tiles, {TILE_SIZE}px per tile.")
        print(f"Window size: {width}x{height} pixels.")

        self._setup_initial_units()

    def _setup_initial_units(self) -> None:
        for (tile_x, tile_y), unit_type, faction, label in _INITIAL_UNITS:
            position = self.game_map.tile_to_pixel_center(tile_x, tile_y)
            if self.game_map.is_walkable(tile_x, tile_y):
                self.units.add_unit(unit_type, faction, position)
                print(
                    f"Added {label} at tile ({tile_x},{tile_y}) -> pixel "
                    f"{position.x:g},{position.y:g}"
                )
            else:
                print(f"Could not place unit at tile ({tile_x},{tile_y}) - not walkable.")

    def select_at(self, point: Vec2) -> Unit | None:
        """Select the first unit under the point, or clear the selection if none."""
        clicked = next((unit for unit in self.units if unit.bounds.contains(point)), None)
        if clicked is not None:
            if self.selected_unit is not None:
                self.selected_unit.selected = False
            self.selected_unit = clicked
            clicked.selected = True
        elif self.selected_unit is not None:
            self.selected_unit.selected = False
            self.selected_unit = None
        return self.selected_unit

    def command_move(self, point: Vec2) -> None:
        """Order the selected unit, if any, to move to the point."""
        if self.selected_unit is not None:
            self.selected_unit.set_command(MoveCommand(point))

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""
        if event.type == pygame.QUIT or (
            event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
        ):
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            size = tuple(event.size)
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                self.surface = pygame.display.set_mode(size)
            else:
                self.surface = pygame.Surface(size)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            point = Vec2(float(x), float(y))
            if event.button == LEFT_BUTTON:
                self.select_at(point)
            elif event.button == RIGHT_BUTTON:
                self.command_move(point)

    def update(self, delta_time: float) -> None:
        """Advance every unit by `delta_time` seconds."""
        self.units.update_all(delta_time)

    def render(self) -> None:
        """Draw the background, the map and the units onto the game surface."""
        self.surface.fill(BACKGROUND_COLOR)
        self.game_map.draw(self.surface)
        self.units.draw_all(self.surface)

    def run(self) -> None:
        """Open the window and run the frame loop until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                delta_time = clock.tick() / 1000.0
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(delta_time)
                self.render()
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tactisim", description=WINDOW_TITLE)
    parser.parse_args(argv)
    Game().run()
    return 0