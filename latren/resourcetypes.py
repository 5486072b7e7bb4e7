"""Bit flags naming the kinds of resources the engine can load."""

from __future__ import annotations

import enum


class ResourceType(enum.IntFlag):
    """Kinds of resources; values combine with ``|`` into a mask."""

    NONE = 0
    TEXTURE = 1 << 0
    SHADER = 1 << 1
    FONT = 1 << 2
    MODEL = 1 << 3
    STAGE = 1 << 4
    AUDIO = 1 << 5
    DATA = 1 << 6
    TEXT = 1 << 7
    BINARY = 1 << 8
    JSON = 1 << 9
    CFG = 1 << 10

    MATERIAL = 1 << 31
    OBJECT = 1 << 30
    BLUEPRINT = 1 << 29

    ALL = (
        TEXTURE | SHADER | FONT | MODEL | STAGE | AUDIO | DATA | TEXT
        | BINARY | JSON | CFG | MATERIAL | OBJECT | BLUEPRINT
    )

    def has(self, other: ResourceType) -> bool:
        """Return True if this mask shares any bit with ``other``."""
        return (int(self) & int(other)) != 0