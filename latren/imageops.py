"""Image helpers used when loading cubemap faces."""

from __future__ import annotations

from os import PathLike
from pathlib import PurePath
from typing import Sequence, Union

DEFAULT_FACES = (
    "RIGHT.png",
    "LEFT.png",
    "TOP.png",
    "BOTTOM.png",
    "FRONT.png",
    "BACK.png",
)


def flip_horizontally(image: bytes, width: int, height: int, channels: int) -> bytes:
    """Mirror every row of a packed image left to right."""
    row = width * channels
    if len(image) != row * height:
        raise ValueError("image buffer does not match its size")
    rows = []
    for start in range(0, len(image), row):
        line = image[start:start + row]
        pixels = [line[p:p + channels] for p in range(0, row, channels)]
        rows.append(b"".join(reversed(pixels)))
    return b"".join(rows)


def cubemap_face_paths(
    directory: Union[str, PathLike], faces: Sequence[str] = DEFAULT_FACES
) -> list[str]:
    """The six face image paths of a cubemap directory, in GL face order."""
    if len(faces) != 6:
        raise ValueError("a cubemap needs exactly six faces")
    base = directory if isinstance(directory, str) else PurePath(directory).as_posix()
    return [f"{base}/{face}" for face in faces]