import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    original = b"abcdefgh"
    buf = bytearray(original)
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf[:3] == bytes([ord("z")]) * 3
    assert buf[3:] == original[3:]


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("q"), 4)
    assert buf == bytearray(b"qqqq")


def test_memset_zero_count_changes_nothing():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"42Tokyo")
    assert bzero(buf, 2) is None
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"Tokyo"


def test_memcpy_copies_prefix():
    src = b"42Tokyo"
    dest = bytearray(10)
    result = memcpy(dest, src, 5)
    assert result is dest
    assert dest[:5] == src[:5]
    assert dest[5:] == bytes(5)


def test_memcpy_both_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_none_rejected():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 3)


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456")
    view = memoryview(buf)
    dest = view[2:]
    result = memmove(dest, view, 3)
    assert result is dest
    assert bytes(result[:3]) == b"123"
    assert buf[2:5] == b"123"
    assert buf[:2] == b"12"


def test_memmove_backward_overlap():
    buf = bytearray(b"123456")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result[:4]) == b"3456"
    assert buf[:4] == b"3456"
    assert buf[4:] == b"56"


def test_memmove_distinct_buffers():
    dest = bytearray(b"123456")
    result = memmove(dest, b"42Tokyo", 3)
    assert result is dest
    assert dest[:3] == b"42T"
    assert dest[3:] == b"456"


def test_memchr_finds_first_match():
    buf = b"123456123"
    index = memchr(buf, ord("3"), len(buf))
    assert index is not None
    assert buf[index] == ord("3")
    assert ord("3") not in buf[:index]


def test_memchr_respects_count():
    assert memchr(b"123456", ord("3"), 2) is None


def test_memchr_zero_byte():
    buf = b"ab\x00cd"
    assert memchr(buf, 0, len(buf)) == buf.index(0)


def test_memcmp_equal_buffers():
    assert memcmp(b"123456", b"123456", 6) == 0


def test_memcmp_sign_and_antisymmetry():
    a, b = b"123458", b"123457"
    assert memcmp(a, b, 6) > 0
    assert memcmp(b, a, 6) == -memcmp(a, b, 6)


def test_memcmp_ignores_bytes_past_count():
    assert memcmp(b"12345x", b"12345y", 5) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_is_zeroed():
    buf = calloc(5, 4)
    assert len(buf) == 5 * 4
    assert not any(buf)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)