"""Packing sprites into a square texture atlas."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterable, Sequence

DEFAULT_ATLAS_SIZES = (128, 256, 512, 1024, 2048, 4096)


@dataclass
class Sprite:
    """An image of ``w`` by ``h`` pixels, rows stored top to bottom."""

    w: int
    h: int
    buffer: bytes


@dataclass(frozen=True)
class SpriteData:
    """Where sprite ``id`` was placed in the atlas."""

    id: int
    position: tuple[int, int]


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in."""

    id: int
    w: int
    h: int
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass
class TextureAtlas:
    """The packed image; an empty atlas has zero size."""

    w: int = 0
    h: int = 0
    buffer: bytearray = field(default_factory=bytearray)
    sprite_data: list[SpriteData] = field(default_factory=list)


_Segment = tuple[int, int, int]  # x, y, width


def _find_position(
    skyline: list[_Segment], w: int, h: int, width: int, height: int
) -> tuple[int, int] | None:
    best: tuple[int, int] | None = None
    for start, (x, _, _) in enumerate(skyline):
        if x + w > width:
            break
        top = 0
        for sx, sy, sw in skyline[start:]:
            if sx >= x + w:
                break
            top = max(top, sy)
        if top + h <= height and (best is None or (top, x) < best):
            best = (top, x)
    return None if best is None else (best[1], best[0])


def _place(skyline: list[_Segment], x: int, top: int, w: int) -> list[_Segment]:
    end = x + w
    parts: list[_Segment] = [(x, top, w)]
    for sx, sy, sw in skyline:
        s_end = sx + sw
        if s_end <= x or sx >= end:
            parts.append((sx, sy, sw))
            continue
        if sx < x:
            parts.append((sx, sy, x - sx))
        if s_end > end:
            parts.append((end, sy, s_end - end))
    parts.sort()
    merged: list[_Segment] = []
    for seg in parts:
        if merged and merged[-1][1] == seg[1]:
            px, py, pw = merged[-1]
            merged[-1] = (px, py, pw + seg[2])
        else:
            merged.append(seg)
    return merged


def pack_rects(rects: Sequence[Rect], width: int, height: int) -> bool:
    """Pack rectangles in place into a ``width`` x ``height`` area.

    Uses a bottom-left skyline, taller rectangles first. Returns True if all fit.
    """
    if width <= 0 or height <= 0:
        raise ValueError("packing area must have a positive size")
    if any(r.w < 0 or r.h < 0 for r in rects):
        raise ValueError("rectangles cannot have a negative size")
    skyline: list[_Segment] = [(0, 0, width)]
    all_packed = True
    for rect in sorted(rects, key=lambda r: (-r.h, -r.w)):
        if rect.w == 0 or rect.h == 0:
            rect.x, rect.y, rect.was_packed = 0, 0, True
            continue
        position = _find_position(skyline, rect.w, rect.h, width, height)
        if position is None:
            rect.x, rect.y, rect.was_packed = 0, 0, False
            all_packed = False
            continue
        rect.x, rect.y = position
        rect.was_packed = True
        skyline = _place(skyline, rect.x, rect.y + rect.h, rect.w)
    return all_packed


def find_optimal_size_and_pack(
    rects: list[Rect], sizes: Iterable[int] = DEFAULT_ATLAS_SIZES
) -> int:
    """Pack into the smallest square size that fits, largest tried first.

    On success ``rects`` holds the packing for the returned size; 0 means
    not even the largest size fits.
    """
    final_size = 0
    for size in sorted(set(sizes), reverse=True):
        trial = [dataclasses.replace(r) for r in rects]
        if not pack_rects(trial, size, size):
            return final_size
        rects[:] = trial
        final_size = size
    return final_size


def create_atlas(
    sprites: Sequence[Sprite], channels: int = 4, padding: int = 0
) -> TextureAtlas:
    """Copy every sprite into one square atlas with ``padding`` pixels around each."""
    if channels <= 0:
        raise ValueError("channels must be positive")
    if padding < 0:
        raise ValueError("padding cannot be negative")
    for index, sprite in enumerate(sprites):
        if len(sprite.buffer) != sprite.w * sprite.h * channels:
            raise ValueError(f"sprite {index} buffer does not match its size")

    rects = [
        Rect(index, s.w + padding * 2, s.h + padding * 2)
        for index, s in enumerate(sprites)
    ]
    size = find_optimal_size_and_pack(rects)
    if size == 0:
        return TextureAtlas()

    atlas = TextureAtlas(size, size, bytearray(size * size * channels))
    for rect in rects:
        sprite = sprites[rect.id]
        x, y = rect.x + padding, rect.y + padding
        atlas.sprite_data.append(SpriteData(rect.id, (x, y)))
        row = sprite.w * channels
        for line in range(sprite.h):
            src = sprite.buffer[line * row:(line + 1) * row]
            dst = ((y + line) * size + x) * channels
            atlas.buffer[dst:dst + row] = src
    return atlas