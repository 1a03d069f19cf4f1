import pytest

from desafiocrack.bits import decrypt, rotate_right
from desafiocrack.solver import Method, Solution, solve, try_combination

RLE_PLAIN = b"\x00\x03a\x00\x02b"  # "aaabb"
LZ78_PLAIN = b"\x00\x00h\x00\x00e\x00\x00l\x00\x03o"  # "hello"


def _encrypt(plain: bytes, rotation: int, key: int) -> bytes:
    return bytes(rotate_right(b, 8 - rotation) ^ key for b in plain)


def test_encrypt_helper_inverts_decrypt():
    assert decrypt(_encrypt(RLE_PLAIN, 3, 0x40), 3, 0x40) == RLE_PLAIN


def test_try_combination_detects_rle():
    data = _encrypt(RLE_PLAIN, 3, 0x40)
    sol = try_combination(data, b"ab", 3, 0x40)
    assert sol is not None
    assert sol.method is Method.RLE
    assert sol.text == b"aaabb"
    assert sol.position == 2
    assert (sol.rotation, sol.key) == (3, 0x40)


def test_try_combination_detects_lz78():
    data = _encrypt(LZ78_PLAIN, 3, 0x5A)
    sol = try_combination(data, b"hello", 3, 0x5A)
    assert sol is not None
    assert sol.method is Method.LZ78
    assert sol.text == b"hello"
    assert sol.position == 0


def test_try_combination_accepts_str_hint():
    data = _encrypt(LZ78_PLAIN, 2, 7)
    sol = try_combination(data, "llo", 2, 7)
    assert sol is not None
    assert sol.hint == b"llo"
    assert sol.position == 2


def test_methods_restrict_search():
    data = _encrypt(RLE_PLAIN, 3, 0x40)
    assert try_combination(data, b"ab", 3, 0x40, (Method.LZ78,)) is None
    sol = try_combination(data, b"ab", 3, 0x40, (Method.RLE,))
    assert sol is not None and sol.method is Method.RLE


@pytest.mark.parametrize("rotation", [0, 8, -1])
def test_rotation_out_of_range_gives_none(rotation):
    assert try_combination(RLE_PLAIN, b"a", rotation, 0) is None


def test_empty_inputs_give_none():
    assert try_combination(b"", b"a", 1, 0) is None
    assert try_combination(RLE_PLAIN, b"", 1, 0) is None


def test_bad_key_raises():
    with pytest.raises(ValueError):
        try_combination(RLE_PLAIN, b"a", 1, 300)


def test_solve_finds_first_combination():
    data = _encrypt(RLE_PLAIN, 1, 0)
    sol = solve(data, b"aaabb")
    assert sol is not None
    assert (sol.rotation, sol.key) == (1, 0)
    assert sol.method is Method.RLE


def test_solve_result_is_consistent():
    data = _encrypt(LZ78_PLAIN, 5, 0x33)
    sol = solve(data, b"hello")
    assert sol is not None
    plain = decrypt(data, sol.rotation, sol.key)
    text = sol.method.decompress(plain)
    assert text == sol.text
    assert text[sol.position:sol.position + 5] == b"hello"


def test_solve_returns_none_when_hint_cannot_fit():
    data = _encrypt(RLE_PLAIN, 3, 0x40)
    assert solve(data, b"z" * 2001) is None


def test_context_clips_around_hint():
    text = b"0123456789" * 10
    sol = Solution(rotation=1, key=0, method=Method.RLE, position=50,
                   text=text, hint=b"01234")
    assert sol.context() == text[30:75]
    assert sol.context(0) == b"01234"


def test_context_at_edges():
    text = b"abcdefgh"
    sol = Solution(rotation=1, key=0, method=Method.LZ78, position=0,
                   text=text, hint=b"ab")
    assert sol.context(20) == text
    with pytest.raises(ValueError):
        sol.context(-1)


def test_method_decompress_and_names():
    assert Method.RLE.decompress(RLE_PLAIN) == b"aaabb"
    assert Method.LZ78.decompress(LZ78_PLAIN) == b"hello"
    assert Method.RLE.label == "RLE"
    assert Method.LZ78.suffix == "lz78"