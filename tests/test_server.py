import io

from sigtalk.protocol import (
    ACK_SIGNAL,
    BITS_PER_BYTE,
    ONE_SIGNAL,
    RECEIVED_SIGNAL,
    ZERO_SIGNAL,
    encode_byte,
    encode_message,
)
from sigtalk.server import Server

SENDER = 4242


def _server():
    sent = []
    output = io.BytesIO()
    server = Server(output, lambda pid, signum: sent.append((pid, signum)))
    return server, output, sent


def _feed(server, bits):
    for bit in bits:
        server.handle_bit(ONE_SIGNAL if bit else ZERO_SIGNAL, SENDER)


def test_message_is_written_with_newline():
    server, output, _ = _server()
    _feed(server, encode_message(b"hi"))
    assert output.getvalue() == b"hi\n"


def test_every_bit_is_acknowledged():
    server, _, sent = _server()
    bits = list(encode_message(b"abc"))
    _feed(server, bits)
    acks = [entry for entry in sent if entry == (SENDER, ACK_SIGNAL)]
    assert len(acks) == len(bits)


def test_received_notice_precedes_final_ack():
    server, _, sent = _server()
    _feed(server, encode_message(b"x"))
    assert sent[-2:] == [(SENDER, RECEIVED_SIGNAL), (SENDER, ACK_SIGNAL)]
    assert sent.count((SENDER, RECEIVED_SIGNAL)) == 1


def test_partial_byte_writes_nothing():
    server, output, sent = _server()
    _feed(server, encode_byte(ord("z"))[:-1])
    assert output.getvalue() == b""
    assert len(sent) == BITS_PER_BYTE - 1


def test_several_messages_in_sequence():
    server, output, _ = _server()
    _feed(server, encode_message(b"one"))
    _feed(server, encode_message(b"two"))
    assert output.getvalue() == b"one\ntwo\n"


def test_utf8_bytes_pass_through():
    server, output, _ = _server()
    text = "ünï ✅"
    _feed(server, encode_message(text))
    assert output.getvalue().decode("utf-8") == text + "\n"