from __future__ import annotations
from ..order import Order

# Pure value <-> bytes codecs. Inputs to decode_* must be exactly the kind's
# width; Stream.take guarantees that for its callers.

BytesLike = bytes | bytearray | memoryview
BIG = Order.BIG
LITTLE = Order.LITTLE


# single byte: order is irrelevant
def decode_u8(data: BytesLike, order: Order = BIG) -> int: return order.decode("u8", data)
def decode_s8(data: BytesLike, order: Order = BIG) -> int: return order.decode("s8", data)
def encode_u8(value: int, order: Order = BIG) -> bytes: return order.encode("u8", value)
def encode_s8(value: int, order: Order = BIG) -> bytes: return order.encode("s8", value)

def decode_u16(data: BytesLike, order: Order = BIG) -> int: return order.decode("u16", data)
def decode_s16(data: BytesLike, order: Order = BIG) -> int: return order.decode("s16", data)
def encode_u16(value: int, order: Order = BIG) -> bytes: return order.encode("u16", value)
def encode_s16(value: int, order: Order = BIG) -> bytes: return order.encode("s16", value)

def decode_u32(data: BytesLike, order: Order = BIG) -> int: return order.decode("u32", data)
def decode_s32(data: BytesLike, order: Order = BIG) -> int: return order.decode("s32", data)
def encode_u32(value: int, order: Order = BIG) -> bytes: return order.encode("u32", value)
def encode_s32(value: int, order: Order = BIG) -> bytes: return order.encode("s32", value)

def decode_u64(data: BytesLike, order: Order = BIG) -> int: return order.decode("u64", data)
def decode_s64(data: BytesLike, order: Order = BIG) -> int: return order.decode("s64", data)
def encode_u64(value: int, order: Order = BIG) -> bytes: return order.encode("u64", value)
def encode_s64(value: int, order: Order = BIG) -> bytes: return order.encode("s64", value)

def decode_f32(data: BytesLike, order: Order = BIG) -> float: return order.decode("f32", data)
def decode_f64(data: BytesLike, order: Order = BIG) -> float: return order.decode("f64", data)
def encode_f32(value: float, order: Order = BIG) -> bytes: return order.encode("f32", value)
def encode_f64(value: float, order: Order = BIG) -> bytes: return order.encode("f64", value)


def decode_triad(data: BytesLike, order: Order = LITTLE) -> int:
    """3-byte unsigned int, little-endian unless told otherwise."""
    return order.decode_triad(data)


def encode_triad(value: int, order: Order = LITTLE) -> bytes:
    return order.encode_triad(value)


def decode_bool(data: BytesLike) -> bool:
    """Only 0x00 is false."""
    return decode_u8(data) != 0


def encode_bool(value: bool) -> bytes:
    return b"\x01" if value else b"\x00"
