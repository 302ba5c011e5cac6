import io

from sigtalk.client import Client, main
from sigtalk.protocol import (
    BITS_PER_BYTE,
    ONE_SIGNAL,
    ZERO_SIGNAL,
    BitDecoder,
    encode_byte,
)
from sigtalk.server import Server

SERVER_PID = 777


def _recording_client():
    sent = []
    waits = []
    client = Client(
        SERVER_PID,
        lambda pid, signum: sent.append((pid, signum)),
        lambda: waits.append(len(sent)),
    )
    return client, sent, waits


def _bits(sent):
    return [1 if signum == ONE_SIGNAL else 0 for _, signum in sent]


def test_send_byte_maps_bits_to_signals():
    client, sent, _ = _recording_client()
    client.send_byte(0x41)
    assert [signum for _, signum in sent] == [
        ONE_SIGNAL if bit else ZERO_SIGNAL for bit in encode_byte(0x41)
    ]
    assert all(pid == SERVER_PID for pid, _ in sent)


def test_waits_after_every_bit():
    client, sent, waits = _recording_client()
    client.send_byte(0x5A)
    assert waits == list(range(1, BITS_PER_BYTE + 1))
    assert len(sent) == BITS_PER_BYTE


def test_send_ends_with_nul_byte():
    client, sent, _ = _recording_client()
    client.send(b"ok")
    decoder = BitDecoder()
    decoded = [b for b in (decoder.feed(bit) for bit in _bits(sent)) if b is not None]
    assert bytes(decoded) == b"ok\0"


def test_client_and_server_together():
    output = io.BytesIO()
    replies = []
    server = Server(output, lambda pid, signum: replies.append((pid, signum)))
    client = Client(
        SERVER_PID,
        lambda pid, signum: server.handle_bit(signum, 1234),
        lambda: None,
    )
    client.send("hello there")
    assert output.getvalue() == b"hello there\n"
    assert all(pid == 1234 for pid, _ in replies)


def test_main_with_wrong_arguments_prints_usage(capsys):
    assert main(["123"]) == 0
    captured = capsys.readouterr()
    assert "Invalid Arguments." in captured.out
    assert "./client [server_pid] [message]" in captured.out


def test_main_with_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().out