import unicodedata
import urllib.parse as _url
from enum import Enum
from typing import NamedTuple

import regex

from .string_hash import string_hash
from .colors import DEFAULT_HEX

PROTOCOL = "facehash://"
DEFAULT_PALETTE_SIZE = len(DEFAULT_HEX)

class FaceType(str, Enum):
    ROUND = "round"
    CROSS = "cross"
    LINE = "line"
    CURVED = "curved"

class Rotation(NamedTuple):
    x: int
    y: int

# order is part of the output contract
FACE_TYPES = (FaceType.ROUND, FaceType.CROSS, FaceType.LINE, FaceType.CURVED)

SPHERE_POSITIONS = (
    Rotation(-1, 1),   # down-right
    Rotation(1, 1),    # up-right
    Rotation(1, 0),    # up
    Rotation(0, 1),    # right
    Rotation(-1, 0),   # down
    Rotation(0, 0),    # center
    Rotation(0, -1),   # left
    Rotation(-1, -1),  # down-left
    Rotation(1, -1),   # up-left
)

class FaceDescriptor(NamedTuple):
    """
    Deterministic face for a name.
    facehash://{face}:{color}:{x}:{y}:{initial}
    """
    face_type: FaceType
    color_index: int
    rotation: Rotation
    initial: str

    def to_dict(self) -> dict:
        return {
            "faceType": self.face_type.value,
            "colorIndex": self.color_index,
            "rotation": {"x": self.rotation.x, "y": self.rotation.y},
            "initial": self.initial,
        }

    def descriptor(self) -> str:
        initial = _url.quote(self.initial, safe="")
        return f"{PROTOCOL}{self.face_type.value}:{self.color_index}:{self.rotation.x}:{self.rotation.y}:{initial}"

    @staticmethod
    def from_descriptor(desc: str) -> "FaceDescriptor":
        if not desc.startswith(PROTOCOL):
            raise ValueError(f"not a facehash descriptor: {desc!r}")
        parts = desc[len(PROTOCOL):].split(":")
        if len(parts) != 5:
            raise ValueError(f"expected 5 fields, got {len(parts)}")
        face, color, x, y, initial = parts
        rotation = Rotation(int(x), int(y))
        if rotation not in SPHERE_POSITIONS:
            raise ValueError(f"rotation out of range: {rotation}")
        color_index = int(color)
        if color_index < 0:
            raise ValueError(f"negative color index: {color_index}")
        return FaceDescriptor(FaceType(face), color_index, rotation, _url.unquote(initial))

def check_palette_size(palette_size) -> int:
    if isinstance(palette_size, bool) or not isinstance(palette_size, int):
        raise ValueError(f"palette size must be an int, got {type(palette_size).__name__}")
    if palette_size <= 0:
        raise ValueError(f"palette size must be positive, got {palette_size}")
    return palette_size

def first_grapheme(name: str) -> str:
    """Uppercased first extended grapheme cluster, NFC-composed. "" for "".
    """
    m = regex.match(r"\X", name or "")
    if not m:
        return ""
    return unicodedata.normalize("NFC", m.group().upper())

def derive(name: str, palette_size: int = DEFAULT_PALETTE_SIZE) -> FaceDescriptor:
    palette_size = check_palette_size(palette_size)
    h = string_hash(name)
    return FaceDescriptor(
        face_type=FACE_TYPES[h % len(FACE_TYPES)],
        color_index=h % palette_size,
        rotation=SPHERE_POSITIONS[h % len(SPHERE_POSITIONS)],
        initial=first_grapheme(name),
    )
