"""Tile grid holding the terrain of the battlefield."""

from __future__ import annotations

import enum

import pygame

from tactisim.geometry import Vec2

Color = tuple[int, int, int]

GRID_LINE_COLOR: Color = (30, 30, 30)


class TileType(enum.Enum):
    UNKNOWN = enum.auto()
    GRASS = enum.auto()
    WATER = enum.auto()
    OBSTACLE = enum.auto()


_TILE_COLORS: dict[TileType, Color] = {
    TileType.GRASS: (50, 150, 50),
    TileType.WATER: (50, 50, 180),
    TileType.OBSTACLE: (100, 100, 100),
}
_ERROR_COLOR: Color = (255, 0, 255)


def tile_color(tile_type: TileType) -> Color:
    """Colour used to draw a tile of the given type; magenta for unknown."""
    return _TILE_COLORS.get(tile_type, _ERROR_COLOR)


class TileMap:
    """A rectangular grid of tiles, each `tile_size` pixels square."""

    def __init__(self, num_tiles_x: int, num_tiles_y: int, tile_size: int) -> None:
        if num_tiles_x <= 0 or num_tiles_y <= 0 or tile_size <= 0:
            raise ValueError("map dimensions and tile size must be positive")
        self._width = num_tiles_x
        self._height = num_tiles_y
        self.tile_size = tile_size
        self._grid = [
            [self._initial_tile(x, y) for x in range(num_tiles_x)]
            for y in range(num_tiles_y)
        ]

    def _initial_tile(self, x: int, y: int) -> TileType:
        if x in (0, self._width - 1) or y in (0, self._height - 1):
            return TileType.OBSTACLE
        if x % 5 == 0 and y % 4 == 0:
            return TileType.WATER
        return TileType.GRASS

    @property
    def map_size_in_tiles(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def map_size_in_pixels(self) -> tuple[int, int]:
        return (self._width * self.tile_size, self._height * self.tile_size)

    def is_valid_coordinate(self, tile_x: int, tile_y: int) -> bool:
        return 0 <= tile_x < self._width and 0 <= tile_y < self._height

    def tile_type(self, tile_x: int, tile_y: int) -> TileType:
        """Type of the tile, or UNKNOWN when the coordinate is off the map."""
        if not self.is_valid_coordinate(tile_x, tile_y):
            return TileType.UNKNOWN
        return self._grid[tile_y][tile_x]

    def set_tile(self, tile_x: int, tile_y: int, new_type: TileType) -> None:
        """Change a tile's type; coordinates off the map are ignored."""
        if self.is_valid_coordinate(tile_x, tile_y):
            self._grid[tile_y][tile_x] = new_type

    def is_walkable(self, tile_x: int, tile_y: int) -> bool:
        return self.tile_type(tile_x, tile_y) is TileType.GRASS

    def tile_to_pixel_center(self, tile_x: int, tile_y: int) -> Vec2:
        """Pixel position of the tile's centre, or the origin for an invalid tile."""
        if not self.is_valid_coordinate(tile_x, tile_y):
            return Vec2(0.0, 0.0)
        half = self.tile_size / 2.0
        return Vec2(tile_x * self.tile_size + half, tile_y * self.tile_size + half)

    def pixel_to_tile(self, pixel: Vec2) -> tuple[int, int]:
        """Tile containing the pixel; division truncates toward zero and may leave the map."""
        return (int(pixel.x / self.tile_size), int(pixel.y / self.tile_size))

    def draw(self, surface: pygame.Surface) -> None:
        size = self.tile_size
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                surface.fill(tile_color(tile), rect)
                pygame.draw.rect(surface, GRID_LINE_COLOR, rect, 1)