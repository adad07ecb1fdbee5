from __future__ import annotations
import logging
import re
from typing import TYPE_CHECKING, Optional, Tuple, Union

from ..errors import InvalidHexError, TextDecodeError, UnsupportedError
from binstream.models.address import Address

if TYPE_CHECKING:
    from ..stream import Stream

logger = logging.getLogger(__name__)

STRING_MAX = 0xFFFF
_HEX_RE = re.compile(r"[0-9A-Fa-f]*")

IPV4 = 4
IPV6 = 6
IPV4_SIZE = 4


# -----------------------------
# String: [u16 length][payload]
# -----------------------------

def decode_raw_string(st: Stream) -> bytes:
    n = st.u16()
    return st.take(n)


def decode_string(st: Stream) -> str:
    """Payload is consumed even when it fails to decode (TextDecodeError)."""
    raw = decode_raw_string(st)
    try:
        return raw.decode(st.options.encoding, st.options.errors)
    except UnicodeDecodeError as e:
        raise TextDecodeError(f"string payload is not valid {st.options.encoding}: {e.reason}") from e


def encode_string(st: Stream, value: str | bytes) -> None:
    """Length prefix counts encoded bytes, not characters."""
    raw = value.encode(st.options.encoding, st.options.errors) if isinstance(value, str) else bytes(value)
    if len(raw) > STRING_MAX:
        raise ValueError(f"string payload {len(raw)} bytes exceeds {STRING_MAX}")
    st.put_u16(len(raw))
    st.put(raw)


# -----------------------------
# Hex: raw bytes, no prefix (magic numbers and the like)
# -----------------------------

def decode_hex(st: Stream, n: Optional[int] = None) -> str:
    """Render n bytes (default: everything left) as lowercase hex."""
    raw = st.get(st.remaining_length()) if n is None else st.take(n)
    return raw.hex()


def encode_hex(st: Stream, text: str) -> None:
    if not _HEX_RE.fullmatch(text):
        raise InvalidHexError(f"non-hex digit in {text!r}")
    if len(text) % 2:
        raise InvalidHexError(f"odd number of hex digits ({len(text)})")
    st.put(bytes.fromhex(text))


# -----------------------------
# Address: [u8 version][~octets][u16 port]
# Octets are stored bitwise-inverted. That is how peers of this wire format
# expect them; keep it bit-exact.
# -----------------------------

def _invert(raw: bytes) -> bytes:
    return bytes(b ^ 0xFF for b in raw)


def decode_address(st: Stream) -> Address:
    version = st.u8()
    if version != IPV4:
        logger.debug("address version %d not supported", version)
        raise UnsupportedError(f"IP version {version} address not supported")
    host = ".".join(str(b) for b in _invert(st.take(IPV4_SIZE)))
    port = st.u16()
    return Address(host=host, port=port)


def encode_address(
    st: Stream,
    addr: Union[Address, Tuple[str, int]],
    *,
    version: Optional[int] = None,
) -> None:
    if not isinstance(addr, Address):
        host, port = addr
        addr = Address(host=host, port=port)
    ver = version if version is not None else addr.ip_version
    if ver != IPV4:
        logger.debug("address version %d not supported", ver)
        raise UnsupportedError(f"IP version {ver} address not supported")
    packed = addr.packed
    if len(packed) != IPV4_SIZE:
        raise ValueError(f"version 4 given for {len(packed)}-byte address {addr.host}")
    st.put_u8(ver)
    st.put(_invert(packed))
    st.put_u16(addr.port)
