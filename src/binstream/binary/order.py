from __future__ import annotations
import struct
from enum import Enum
from typing import Dict, Tuple, Union

Number = Union[int, float]

# kind -> struct format code; width follows from the code
FORMATS: Dict[str, str] = {
    "u8": "B", "s8": "b",
    "u16": "H", "s16": "h",
    "u32": "I", "s32": "i",
    "u64": "Q", "s64": "q",
    "f32": "f", "f64": "d",
}

TRIAD_SIZE = 3
TRIAD_MAX = (1 << 24) - 1

# built once, read-only afterwards
_STRUCTS: Dict[Tuple[str, str], struct.Struct] = {
    (prefix, kind): struct.Struct(prefix + code)
    for prefix in (">", "<")
    for kind, code in FORMATS.items()
}


def width(kind: str) -> int:
    """Byte width of a primitive kind ("u16", "f64", ...)."""
    if kind == "u24":
        return TRIAD_SIZE
    return struct.calcsize(FORMATS[kind])


class Order(Enum):
    """
    Byte order strategy. Values are the struct prefixes, so Order.BIG.value + "H"
    is a valid format string. Members are stateless and shareable.
    """
    BIG = ">"
    LITTLE = "<"

    def _struct(self, kind: str) -> struct.Struct:
        try:
            return _STRUCTS[(self.value, kind)]
        except KeyError:
            raise ValueError(f"unknown kind {kind!r}") from None

    def decode(self, kind: str, data: bytes | bytearray | memoryview) -> Number:
        st = self._struct(kind)
        if len(data) != st.size:
            raise ValueError(f"{kind} needs exactly {st.size} bytes, got {len(data)}")
        return st.unpack(data)[0]

    def encode(self, kind: str, value: Number) -> bytes:
        st = self._struct(kind)
        try:
            return st.pack(value)
        except (struct.error, OverflowError) as e:
            # floats too large for f32 overflow instead of failing struct's range check
            raise ValueError(f"{kind}: cannot encode {value!r}: {e}") from e

    # 24-bit unsigned, no struct code for it
    def decode_triad(self, data: bytes | bytearray | memoryview) -> int:
        if len(data) != TRIAD_SIZE:
            raise ValueError(f"u24 needs exactly {TRIAD_SIZE} bytes, got {len(data)}")
        return int.from_bytes(data, self.byteorder, signed=False)

    def encode_triad(self, value: int) -> bytes:
        if not isinstance(value, int):
            raise ValueError(f"u24: expected int, got {type(value).__name__}")
        if not (0 <= value <= TRIAD_MAX):
            raise ValueError(f"u24: {value!r} out of range 0..{TRIAD_MAX}")
        return int(value).to_bytes(TRIAD_SIZE, self.byteorder, signed=False)

    @property
    def byteorder(self) -> str:
        """Name accepted by int.to_bytes / int.from_bytes."""
        return "big" if self is Order.BIG else "little"
