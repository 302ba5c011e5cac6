import pytest

from sigtalk.protocol import BITS_PER_BYTE, BitDecoder, encode_byte, encode_message


def _decode(bits):
    decoder = BitDecoder()
    return bytes(b for b in (decoder.feed(bit) for bit in bits) if b is not None)


def test_encode_byte_is_msb_first():
    assert encode_byte(0x41) == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_byte_extremes():
    assert encode_byte(0) == (0,) * BITS_PER_BYTE
    assert encode_byte(255) == (1,) * BITS_PER_BYTE


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_encode_message_appends_terminator():
    bits = list(encode_message(b"hi"))
    assert len(bits) == 3 * BITS_PER_BYTE
    assert bits[-BITS_PER_BYTE:] == [0] * BITS_PER_BYTE


def test_encode_message_round_trip():
    message = b"Hello, world!"
    assert _decode(encode_message(message)) == message + b"\0"


def test_encode_message_text_is_utf8():
    text = "héllo ✅"
    assert _decode(encode_message(text)) == text.encode("utf-8") + b"\0"


def test_encode_message_stops_at_nul():
    assert _decode(encode_message(b"ab\0cd")) == b"ab\0"


def test_empty_message_is_only_terminator():
    assert list(encode_message(b"")) == [0] * BITS_PER_BYTE


def test_decoder_returns_none_until_byte_complete():
    decoder = BitDecoder()
    bits = encode_byte(200)
    results = [decoder.feed(bit) for bit in bits]
    assert results[:-1] == [None] * (BITS_PER_BYTE - 1)
    assert results[-1] == 200
    assert decoder.count == 0


def test_decoder_reset_discards_partial_byte():
    decoder = BitDecoder()
    for bit in (1, 1, 1):
        decoder.feed(bit)
    decoder.reset()
    assert [decoder.feed(bit) for bit in encode_byte(5)][-1] == 5


def test_decoder_rejects_invalid_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)