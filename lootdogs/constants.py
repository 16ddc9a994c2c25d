"""Shared constants of the game model and the HTTP layer."""

from enum import Enum

X = "x"
Y = "y"
W = "w"
H = "h"
X0 = "x0"
Y0 = "y0"
X1 = "x1"
Y1 = "y1"
OFFSET_X = "offsetX"
OFFSET_Y = "offsetY"
ID = "id"
MAPS = "maps"
NAME = "name"
ROADS = "roads"
BUILDINGS = "buildings"
OFFICES = "offices"
CODE = "code"
MESSAGE = "message"

LOOT_TYPES = "lootTypes"
FILE = "file"
TYPE = "type"
ROTATION = "rotation"
COLOR = "color"
SCALE = "scale"
VALUE = "value"

MIME_TYPES: dict[str, str] = {
    ".htm": "text/html",
    ".html": "text/html",
    ".css": "text/css",
    ".txt": "text/plain",
    ".js": "text/javascript",
    ".json": "application/json",
    ".xml": "application/xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpe": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".ico": "image/vnd.microsoft.icon",
    ".tiff": "image/tiff",
    ".tif": "image/tiff",
    ".svg": "image/svg+xml",
    ".svgz": "image/svg+xml",
    ".mp3": "audio/mpeg",
}

DEFAULT_MIME_TYPE = "application/octet-stream"

MAX_PLAYERS_IN_MAP = 20
MAX_DISTANCE_FROM_CENTER = 0.4

WIDTH_ITEM = 0.0
WIDTH_PLAYER = 0.6
WIDTH_BASE = 0.5

MAX_TABLE_ITEMS = 100


class Direction(Enum):
    """Direction a dog faces; the value is the move code used by the API."""

    NORTH = "U"
    SOUTH = "D"
    WEST = "L"
    EAST = "R"
    STOP = ""