import pytest

from ftkit.memory import (
    BUFFER_SIZE,
    Arena,
    GrowableBuffer,
    memchr,
    memchrset,
    memcmp,
)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    index = memchr(data, ord("o"))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_memchr_accepts_str_and_bytes():
    data = b"abcabc"
    assert memchr(data, "c") == memchr(data, b"c") == memchr(data, ord("c"))


def test_memchr_wraps_int_to_byte():
    assert memchr(b"\x00\x01", 0x101) == memchr(b"\x00\x01", 1)


def test_memchr_missing_is_none():
    assert memchr(b"abc", "z") is None


def test_memchr_rejects_long_needle():
    with pytest.raises(ValueError):
        memchr(b"abc", "ab")


def test_memchrset_first_byte_in_set():
    data = b"path/to:file"
    index = memchrset(data, b":/")
    assert data[index:index + 1] in (b":", b"/")
    assert not set(data[:index]) & set(b":/")


def test_memchrset_none_when_absent():
    assert memchrset(b"abc", b"xyz") is None
    assert memchrset(b"abc", b"") is None


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_only_first_n_bytes():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_zero_length():
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\x10", b"\x00\xf0"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_short_operand_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_arena_allocations_do_not_overlap():
    arena = Arena(16)
    first = arena.malloc(4)
    second = arena.malloc(4)
    first[:] = b"\xaa" * 4
    assert bytes(second) == bytes(4)
    assert len(first) == 4


def test_arena_adds_block_when_full():
    arena = Arena(8)
    arena.malloc(6)
    assert arena.block_count == 1
    arena.malloc(6)
    assert arena.block_count == 2
    assert arena.free_size == 8 - 6


def test_arena_reset_reuses_first_block():
    arena = Arena(16)
    first = arena.malloc(4)
    arena.reset()
    second = arena.malloc(4)
    second[:] = b"abcd"
    assert bytes(first) == b"abcd"
    assert arena.block_count == 1


def test_arena_reset_walks_existing_blocks():
    arena = Arena(8)
    arena.malloc(8)
    arena.malloc(8)
    count = arena.block_count
    arena.reset()
    arena.malloc(8)
    arena.malloc(8)
    assert arena.block_count == count


def test_arena_rejects_oversized_request():
    arena = Arena(8)
    with pytest.raises(ValueError):
        arena.malloc(9)
    with pytest.raises(ValueError):
        Arena(BUFFER_SIZE * 2).malloc(BUFFER_SIZE + 1)


def test_arena_free_drops_everything():
    arena = Arena(8)
    arena.malloc(4)
    arena.free()
    assert arena.block_count == 0
    assert arena.free_size == 0
    with pytest.raises(ValueError):
        arena.malloc(1)


def test_arena_context_manager_frees():
    with Arena(8) as arena:
        arena.malloc(4)
        assert arena.block_count == 1
    assert arena.block_count == 0


def test_buffer_resize_at_least_doubles():
    buf = GrowableBuffer(b"abcd")
    buf.resize(5)
    assert len(buf) == 2 * 4
    assert bytes(buf)[:4] == b"abcd"


def test_buffer_resize_takes_larger_request():
    buf = GrowableBuffer(b"ab")
    buf.resize(100)
    assert buf.size == 100


def test_buffer_reserve_grows_and_returns_view():
    buf = GrowableBuffer()
    view = buf.reserve(3, 5)
    assert len(view) == 5
    assert len(buf) >= 3 + 5
    view[:] = b"hello"
    assert bytes(buf)[3:8] == b"hello"


def test_buffer_reserve_within_size_keeps_size():
    buf = GrowableBuffer(bytes(10))
    buf.reserve(2, 4)
    assert len(buf) == 10


def test_buffer_write_round_trip():
    buf = GrowableBuffer()
    payload = b"payload"
    view = buf.write(payload, 4)
    assert bytes(view) == payload
    assert bytes(buf)[4:4 + len(payload)] == payload


def test_buffer_write_from_other_buffer():
    src = GrowableBuffer(b"xyz")
    dst = GrowableBuffer(b"-" * 10)
    dst.write(src, 0)
    assert bytes(dst)[:3] == b"xyz"
    assert bytes(dst)[3:10] == b"-" * 7


def test_buffer_release_empties():
    buf = GrowableBuffer(b"data")
    buf.release()
    assert len(buf) == 0
    assert bytes(buf) == b""


def test_buffer_negative_arguments_raise():
    buf = GrowableBuffer()
    with pytest.raises(ValueError):
        buf.reserve(-1, 2)
    with pytest.raises(ValueError):
        buf.resize(-3)