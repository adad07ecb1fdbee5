from __future__ import annotations
import logging
from typing import Optional, Union

from .errors import BufferUnderflowError
from .order import Order, TRIAD_SIZE, width
from .codecs import primitives as p
from binstream.models.options import StreamOptions, DEFAULT_OPTIONS
from binstream.models.address import Address

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Stream:
    """
    Growable byte buffer with a read cursor.

    Raw reads (get, skip) clamp to what is left. Typed reads go through take(),
    which raises BufferUnderflowError instead of handing back a short slice.
    Writes always append at the end; the cursor only moves on reads.
    Multi-byte values default to big-endian; pass order= per call or use
    OrderedStream to bind another order.
    """
    __slots__ = ("buf", "pos", "valid", "options")

    def __init__(
        self,
        data: BytesLike | str | None = None,
        *,
        options: Optional[StreamOptions] = None,
    ):
        self.options = options or DEFAULT_OPTIONS
        self.buf = bytearray()
        self.pos = 0
        self.valid = True
        if data is not None:
            self.set_bytes(data)

    @property
    def order(self) -> Order:
        return Order.BIG

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos={self.pos}, len={len(self.buf)}, order={self.order.name})"

    # -----------------------------
    # Buffer / cursor
    # -----------------------------

    def tell(self) -> int: return self.pos
    def length(self) -> int: return len(self.buf)
    def remaining_length(self) -> int: return len(self.buf) - self.pos

    def get(self, n: int) -> bytes:
        """Next n bytes, or fewer if the buffer runs out. Never raises on short data."""
        if n < 0: raise ValueError("negative count")
        end = min(self.pos + n, len(self.buf))
        out = bytes(self.buf[self.pos:end])
        self.pos = end
        return out

    def take(self, n: int) -> bytes:
        """Exactly n bytes or BufferUnderflowError (cursor left at end of buffer)."""
        start = self.pos
        out = self.get(n)
        if len(out) < n:
            self.valid = False
            logger.debug("underflow at %d: need %d, have %d", start, n, len(out))
            raise BufferUnderflowError(n, len(out), start)
        return out

    def peek(self, n: int) -> bytes:
        if n < 0: raise ValueError("negative count")
        end = self.pos + n
        if end > len(self.buf):
            raise BufferUnderflowError(n, len(self.buf) - self.pos, self.pos)
        return bytes(self.buf[self.pos:end])

    def skip(self, n: int) -> None:
        if n < 0: raise ValueError("negative count")
        self.pos = min(self.pos + n, len(self.buf))

    def put(self, data: BytesLike) -> None:
        self.buf += data

    def pad(self, n: int) -> None:
        """Append n zero bytes."""
        if n < 0: raise ValueError("negative count")
        self.buf += bytes(n)

    def bytes_remaining(self) -> bytes:
        return bytes(self.buf[self.pos:])

    def all_bytes(self) -> bytes:
        return bytes(self.buf)

    def set_bytes(self, data: BytesLike | str) -> None:
        """Replace the whole buffer and rewind. str is encoded per options."""
        if isinstance(data, str):
            data = data.encode(self.options.encoding, self.options.errors)
        self.reset()
        self.buf = bytearray(data)

    def reset(self) -> None:
        # buffer and cursor always go together
        self.buf = bytearray()
        self.pos = 0
        self.valid = True
        logger.debug("stream reset")

    # file-like adapters
    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            size = self.remaining_length()
        return self.get(size)

    def readinto(self, b: bytearray | memoryview) -> int:
        chunk = self.get(len(b))
        b[:len(chunk)] = chunk
        return len(chunk)

    def write(self, data: BytesLike) -> int:
        self.put(data)
        return len(data)

    # -----------------------------
    # Typed reads
    # -----------------------------

    def _ord(self, order: Optional[Order]) -> Order:
        return self.order if order is None else order

    def _decode(self, kind: str, order: Optional[Order]):
        return self._ord(order).decode(kind, self.take(width(kind)))

    def u8(self) -> int: return p.decode_u8(self.take(1))
    def s8(self) -> int: return p.decode_s8(self.take(1))
    def u16(self, order: Optional[Order] = None) -> int: return self._decode("u16", order)
    def s16(self, order: Optional[Order] = None) -> int: return self._decode("s16", order)
    def u32(self, order: Optional[Order] = None) -> int: return self._decode("u32", order)
    def s32(self, order: Optional[Order] = None) -> int: return self._decode("s32", order)
    def u64(self, order: Optional[Order] = None) -> int: return self._decode("u64", order)
    def s64(self, order: Optional[Order] = None) -> int: return self._decode("s64", order)
    def f32(self, order: Optional[Order] = None) -> float: return self._decode("f32", order)
    def f64(self, order: Optional[Order] = None) -> float: return self._decode("f64", order)

    def triad(self, order: Order = Order.LITTLE) -> int:
        return p.decode_triad(self.take(TRIAD_SIZE), order)

    def bool(self) -> bool:
        return p.decode_bool(self.take(1))

    # -----------------------------
    # Typed writes
    # -----------------------------

    def _encode(self, kind: str, value, order: Optional[Order]) -> None:
        self.put(self._ord(order).encode(kind, value))

    def put_u8(self, value: int) -> None: self.put(p.encode_u8(value))
    def put_s8(self, value: int) -> None: self.put(p.encode_s8(value))
    def put_u16(self, value: int, order: Optional[Order] = None) -> None: self._encode("u16", value, order)
    def put_s16(self, value: int, order: Optional[Order] = None) -> None: self._encode("s16", value, order)
    def put_u32(self, value: int, order: Optional[Order] = None) -> None: self._encode("u32", value, order)
    def put_s32(self, value: int, order: Optional[Order] = None) -> None: self._encode("s32", value, order)
    def put_u64(self, value: int, order: Optional[Order] = None) -> None: self._encode("u64", value, order)
    def put_s64(self, value: int, order: Optional[Order] = None) -> None: self._encode("s64", value, order)
    def put_f32(self, value: float, order: Optional[Order] = None) -> None: self._encode("f32", value, order)
    def put_f64(self, value: float, order: Optional[Order] = None) -> None: self._encode("f64", value, order)

    def put_triad(self, value: int, order: Order = Order.LITTLE) -> None:
        self.put(p.encode_triad(value, order))

    def put_bool(self, value: bool) -> None:
        self.put(p.encode_bool(value))

    # -----------------------------
    # Composite fields (see codecs.composite)
    # -----------------------------

    def string(self) -> str:
        from .codecs.composite import decode_string
        return decode_string(self)

    def raw_string(self) -> bytes:
        from .codecs.composite import decode_raw_string
        return decode_raw_string(self)

    def put_string(self, value: str | bytes) -> None:
        from .codecs.composite import encode_string
        encode_string(self, value)

    def hex_string(self, n: Optional[int] = None) -> str:
        from .codecs.composite import decode_hex
        return decode_hex(self, n)

    def put_hex_string(self, text: str) -> None:
        from .codecs.composite import encode_hex
        encode_hex(self, text)

    def address(self) -> Address:
        from .codecs.composite import decode_address
        return decode_address(self)

    def put_address(self, addr: Address | tuple[str, int], version: Optional[int] = None) -> None:
        from .codecs.composite import encode_address
        encode_address(self, addr, version=version)


class OrderedStream(Stream):
    """Stream whose default byte order is fixed at construction."""
    __slots__ = ("_order",)

    def __init__(
        self,
        order: Order,
        data: BytesLike | str | None = None,
        *,
        options: Optional[StreamOptions] = None,
    ):
        self._order = Order(order)
        super().__init__(data, options=options)

    @property
    def order(self) -> Order:
        return self._order
