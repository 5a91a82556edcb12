"""
StringHash: deterministic non-negative hash over UTF-16 code units
"""

MASK32 = 0xFFFFFFFF
SIGN32 = 0x80000000

def utf16_units(s: str):
    data = (s or "").encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)

def string_hash(name: str) -> int:
    """
    acc = (acc << 5) - acc + unit, wrapped to int32 after every step.
    Negative results are negated as plain ints, so int32 min gives 2**31.
    """
    acc = 0
    for c in utf16_units(name):
        acc = ((acc << 5) - acc + c) & MASK32
    if acc & SIGN32:
        acc -= 1 << 32
    return -acc if acc < 0 else acc
