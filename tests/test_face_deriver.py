import pytest

from facehash.kernel.face_deriver import (
    derive, FaceDescriptor, FaceType, Rotation, FACE_TYPES, SPHERE_POSITIONS,
)
from facehash.kernel.string_hash import string_hash

NAMES = ["", "a", "John", "Alice", "hello", "test", "日本語", "\U0001F389 party", "ßeta", "x" * 500]

@pytest.mark.parametrize("name,face,color,rot,initial", [
    ("John", FaceType.CURVED, 4, (-1, 1), "J"),
    ("Alice", FaceType.ROUND, 3, (-1, -1), "A"),
    ("hello", FaceType.LINE, 2, (-1, -1), "H"),
    ("test", FaceType.LINE, 3, (-1, 0), "T"),
    ("", FaceType.ROUND, 0, (-1, 1), ""),
])
def test_known_faces(name, face, color, rot, initial):
    d = derive(name, 5)
    assert d.face_type == face
    assert d.color_index == color
    assert d.rotation == rot
    assert d.initial == initial

def test_default_palette_size_is_five():
    assert derive("John") == derive("John", 5)

def test_custom_palette_size():
    assert derive("John", 3).color_index == 2314539 % 3

def test_deterministic():
    assert derive("deterministic") == derive("deterministic")

def test_palette_size_only_moves_color():
    for name in NAMES:
        base = derive(name, 5)
        for p in (1, 2, 3, 7, 10, 256):
            d = derive(name, p)
            assert (d.face_type, d.rotation, d.initial) == (base.face_type, base.rotation, base.initial)
            assert 0 <= d.color_index < p

def test_ranges():
    for name in NAMES:
        d = derive(name)
        assert d.face_type in FACE_TYPES
        assert d.rotation in SPHERE_POSITIONS
        assert d.rotation.x in (-1, 0, 1) and d.rotation.y in (-1, 0, 1)

def test_rotation_is_single_lookup():
    h = string_hash("hello")
    assert derive("hello").rotation == SPHERE_POSITIONS[h % 9]

def test_initial_uppercases_first_char():
    assert derive("éclair").initial == "É"
    assert derive("\U0001F389").initial == "\U0001F389"
    # full unicode uppercasing may widen
    assert derive("ßeta").initial == "SS"

@pytest.mark.parametrize("bad", [0, -1, -5, 2.5, "5", True, None])
def test_bad_palette_size(bad):
    with pytest.raises(ValueError):
        derive("John", bad)

def test_descriptor_roundtrip():
    for name in NAMES + ["a:b", "%"]:
        d = derive(name)
        assert FaceDescriptor.from_descriptor(d.descriptor()) == d

def test_descriptor_format():
    assert derive("John").descriptor() == "facehash://curved:4:-1:1:J"

@pytest.mark.parametrize("desc", [
    "frsig://1:2:3",
    "facehash://curved:4:-1:1",
    "facehash://oval:4:-1:1:J",
    "facehash://curved:x:-1:1:J",
    "facehash://curved:4:2:2:J",
    "facehash://curved:-4:-1:1:J",
])
def test_bad_descriptor(desc):
    with pytest.raises(ValueError):
        FaceDescriptor.from_descriptor(desc)

def test_to_dict():
    assert derive("Alice").to_dict() == {
        "faceType": "round",
        "colorIndex": 3,
        "rotation": {"x": -1, "y": -1},
        "initial": "A",
    }

def test_rotation_table_order():
    assert SPHERE_POSITIONS[0] == Rotation(-1, 1)
    assert SPHERE_POSITIONS[5] == Rotation(0, 0)
    assert SPHERE_POSITIONS[8] == Rotation(1, -1)
    assert len(set(SPHERE_POSITIONS)) == 9

def test_initial_is_first_grapheme():
    # e + combining acute is one user-perceived character
    assert derive("e\u0301mile").initial == "\u00c9"
    # a flag is two regional indicators
    assert derive("\U0001F1FA\U0001F1F8x").initial == "\U0001F1FA\U0001F1F8"
    assert derive("👍🏽 ok").initial == "👍🏽"
