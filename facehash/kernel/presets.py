"""
Numbers renderers need on top of a FaceDescriptor: 3D tilt presets,
eye viewBox sizes and blink timings. Nothing here feeds back into derive().
"""

from enum import Enum
from typing import NamedTuple, Optional

from .string_hash import string_hash
from .face_deriver import FaceType

class Variant(str, Enum):
    GRADIENT = "gradient"
    SOLID = "solid"

class Intensity3D(str, Enum):
    NONE = "none"
    SUBTLE = "subtle"
    MEDIUM = "medium"
    DRAMATIC = "dramatic"

class Intensity3DPreset(NamedTuple):
    rotate_range: float
    translate_z: float
    # None disables the 3D effect
    perspective: Optional[float]

INTENSITY_PRESETS = {
    Intensity3D.NONE: Intensity3DPreset(0, 0, None),
    Intensity3D.SUBTLE: Intensity3DPreset(5, 4, 800),
    Intensity3D.MEDIUM: Intensity3DPreset(10, 8, 500),
    Intensity3D.DRAMATIC: Intensity3DPreset(15, 12, 300),
}

FACE_VIEWBOX = {
    FaceType.ROUND: (63, 15),
    FaceType.CROSS: (71, 23),
    FaceType.LINE: (82, 8),
    FaceType.CURVED: (63, 9),
}

def preset_for(intensity) -> Intensity3DPreset:
    try:
        return INTENSITY_PRESETS[Intensity3D(intensity)]
    except ValueError:
        raise ValueError(f"unknown intensity {intensity!r}") from None

def tilt(rotation, intensity=Intensity3D.DRAMATIC):
    """(x, y) in {-1,0,1} -> (rotate_x, rotate_y) in degrees."""
    rng = preset_for(intensity).rotate_range
    return rotation[0] * rng, rotation[1] * rng

def aspect_ratio(face_type) -> float:
    w, h = FACE_VIEWBOX[FaceType(face_type)]
    return w / h

def blink_timings(name: str):
    # plain int multiply, no 32-bit wrap here
    seed = string_hash(name) * 31
    delay = (seed % 40) / 10.0
    duration = 2.0 + (seed % 40) / 10.0
    return delay, duration
