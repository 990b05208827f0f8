"""Window and map settings."""

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
WINDOW_TITLE = "TactiSim - Mini Tactical Simulator"

MAP_TILES_X = 32
MAP_TILES_Y = 24
TILE_SIZE = 32

BACKGROUND_COLOR = (20, 20, 20)