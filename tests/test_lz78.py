import pytest

from desafiocrack.lz78 import decompress_lz78


def _encode(text):
    table = {}
    tokens = bytearray()
    current = b""
    for ch in text:
        candidate = current + bytes([ch])
        if candidate in table:
            current = candidate
            continue
        tokens += table.get(current, 0).to_bytes(2, "big") + bytes([ch])
        table[candidate] = len(table) + 1
        current = b""
    if current:
        tokens += table.get(current[:-1], 0).to_bytes(2, "big") + current[-1:]
    return bytes(tokens)


SOURCE_PREFIX = bytes(
    [
        0x00, 0x00, 0x6C, 0x00, 0x00, 0x61, 0x00, 0x00, 0x6D, 0x00, 0x00, 0x6F,
        0x00, 0x00, 0x6E, 0x00, 0x00, 0x74, 0x00, 0x02, 0x6E, 0x00, 0x02, 0x73,
        0x00, 0x00, 0x65, 0x00, 0x01, 0x65, 0x00, 0x00, 0x76, 0x00, 0x02, 0x63,
        0x00, 0x08, 0x61,
    ]
)


def test_source_example_prefix():
    assert decompress_lz78(SOURCE_PREFIX) == b"lamontanaselevacasa"


def test_empty_input():
    assert decompress_lz78(b"") == b""


@pytest.mark.parametrize(
    "text",
    [b"a", b"abababababab", b"la casa de la montana se eleva", b"xyz" * 50],
)
def test_round_trip(text):
    assert decompress_lz78(_encode(text)) == text


def test_zero_character_stops_stream():
    head = _encode(b"abc")
    tail = _encode(b"def")
    assert decompress_lz78(head + b"\x00\x00\x00" + tail) == b"abc"


def test_unknown_index_is_ignored():
    data = b"\x00\x00a" + b"\x00\x09b" + b"\x00\x01c"
    assert decompress_lz78(data) == b"aac"


def test_trailing_partial_token_ignored():
    data = _encode(b"hello")
    assert decompress_lz78(data + b"\x00\x00") == b"hello"


def test_output_capped_at_limit():
    text = b"abcdefgh" * 40
    result = decompress_lz78(_encode(text), limit=50)
    assert result == text[:50]


def test_no_limit_returns_everything():
    text = bytes(range(1, 256)) * 3
    assert decompress_lz78(_encode(text), limit=None) == text


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        decompress_lz78(b"\x00\x00a", limit=-5)