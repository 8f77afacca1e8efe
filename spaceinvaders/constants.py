"""Fixed dimensions and limits of the playing field."""

VIEW_WIDTH = 600
VIEW_HEIGHT = 600
FRAME_RATE = 60

CENTER_X = VIEW_WIDTH // 2
CENTER_Y = VIEW_HEIGHT // 2

FIELD_EDGE_LEFT = 60
FIELD_EDGE_RIGHT = 540