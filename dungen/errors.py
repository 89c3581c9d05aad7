"""
Exceptions raised by dungeon generation and rasterization.
"""


class DungenError(Exception):
    """Base class for every error raised by this package."""


class GenerationError(DungenError):
    """A generation request was rejected before the layout was touched."""


class InvalidRoomCount(GenerationError):
    """The requested number of rooms is zero."""


class RoomTooLargeForDungeon(GenerationError):
    """The maximum room size leaves no margin inside the dungeon."""


class RoomTooSmall(GenerationError):
    """The maximum room size is below three units on some axis."""


class SingleRoomLayout(GenerationError):
    """Doors were requested for a layout that has only one room."""


class LayoutError(DungenError):
    """A layout cannot be rasterized onto the requested grid."""
