from pcapng_decoder.utils import align4, unpack_le_uint, unpack_timestamp_resolution


def test_align4():
    assert align4(0) == 0
    assert align4(1) == 4
    assert align4(2) == 4
    assert align4(3) == 4
    assert align4(4) == 4
    assert align4(5) == 8
    assert align4(0xFFFF) == 0x10000


def test_align4_properties():
    for n in range(0, 200):
        aligned = align4(n)
        if n % 4 == 0:
            assert aligned == n
        else:
            assert n < aligned < n + 4
        assert aligned % 4 == 0
        assert align4(aligned) == aligned


def test_unpack_le_uint():
    assert unpack_le_uint(b"") == 0
    assert unpack_le_uint(b"\x01") == 1
    assert unpack_le_uint(b"\x00\x11\x22\x33\x44\x55") == 0x554433221100
    assert unpack_le_uint(b"\xff" * 8) == 0xFFFFFFFFFFFFFFFF


def test_unpack_tsresol():
    assert unpack_timestamp_resolution(bytes((0,))) == 1
    assert unpack_timestamp_resolution(bytes((1,))) == 1e-1
    assert unpack_timestamp_resolution(bytes((6,))) == 1e-6
    assert unpack_timestamp_resolution(bytes((100,))) == 1e-100

    assert unpack_timestamp_resolution(bytes((0 | 0b10000000,))) == 1
    assert unpack_timestamp_resolution(bytes((1 | 0b10000000,))) == 2**-1
    assert unpack_timestamp_resolution(bytes((6 | 0b10000000,))) == 2**-6
    assert unpack_timestamp_resolution(bytes((100 | 0b10000000,))) == 2**-100
