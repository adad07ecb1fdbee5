import random
import struct
import sys
import pytest

from binstream.binary.order import Order
from binstream.binary.codecs import primitives as p

F32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
F64_MAX = sys.float_info.max

PAIRS = [
    (p.encode_u8, p.decode_u8, 0, 255),
    (p.encode_s8, p.decode_s8, -128, 127),
    (p.encode_u16, p.decode_u16, 0, 2**16 - 1),
    (p.encode_s16, p.decode_s16, -2**15, 2**15 - 1),
    (p.encode_u32, p.decode_u32, 0, 2**32 - 1),
    (p.encode_s32, p.decode_s32, -2**31, 2**31 - 1),
    (p.encode_u64, p.decode_u64, 0, 2**64 - 1),
    (p.encode_s64, p.decode_s64, -2**63, 2**63 - 1),
]


@pytest.mark.parametrize("order", list(Order))
@pytest.mark.parametrize("enc,dec,lo,hi", PAIRS, ids=lambda x: getattr(x, "__name__", str(x)))
def test_random_values_round_trip(order, enc, dec, lo, hi):
    rng = random.Random(4607)
    for v in [rng.randint(lo, hi) for _ in range(8)] + [lo, hi, 0]:
        assert dec(enc(v, order), order) == v


@pytest.mark.parametrize("order", list(Order))
def test_floats_round_trip(order):
    rng = random.Random(4607)
    # round through f32 first so every value is exact at that width
    f32s = [struct.unpack("f", struct.pack("f", rng.uniform(-1e6, 1e6)))[0] for _ in range(8)]
    for v in [0.0, -0.0, 1.5, -2.25, F32_MAX, -F32_MAX] + f32s:
        assert p.decode_f32(p.encode_f32(v, order), order) == v
    f64s = [rng.uniform(-1e300, 1e300) for _ in range(8)]
    for v in [0.0, 1e-300, -123456.789, F64_MAX, -F64_MAX] + f64s:
        assert p.decode_f64(p.encode_f64(v, order), order) == v


@pytest.mark.parametrize("order", list(Order))
def test_triad_random_values_round_trip(order):
    rng = random.Random(24)
    for v in [rng.randint(0, 2**24 - 1) for _ in range(8)] + [0, 2**24 - 1]:
        assert p.decode_triad(p.encode_triad(v, order), order) == v


def test_default_order_is_big():
    assert p.encode_u16(0x0102) == b"\x01\x02"
    assert p.decode_s32(b"\xff\xff\xff\xfe") == -2


def test_triad_defaults_little():
    assert p.encode_triad(1) == b"\x01\x00\x00"
    assert p.decode_triad(b"\x00\x00\x01") == 0x010000
    assert p.decode_triad(p.encode_triad(0xABCDEF, Order.BIG), Order.BIG) == 0xABCDEF


def test_bool():
    assert p.encode_bool(True) == b"\x01"
    assert p.encode_bool(False) == b"\x00"
    assert p.decode_bool(b"\x00") is False
    assert p.decode_bool(b"\x01") is True
    assert p.decode_bool(b"\x7f") is True
