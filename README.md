# sigtalk

Pass text from one process to another on the same machine using nothing but
the two user signals. Each byte is sent as eight signals, most significant bit
first: `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit. After every bit
the receiver answers with `SIGUSR2`, and the sender waits for that answer
before it sends the next bit. A zero byte closes the message. The server then
prints a newline and sends `SIGUSR1`, and the client prints a confirmation.

Signals are waited for with `signal.sigwaitinfo` and
`signal.pthread_sigmask`, so the commands need a platform that provides
those (Linux).

## Install

```
pip install .
```

## Command-line use

Start the server. It prints its process id and then waits for signals until
it is interrupted:

```
sigtalk-server
Server PID: 12345
```

In another terminal, send it a message:

```
sigtalk-client 12345 "hello there"
```

The server writes `hello there` and a newline to its standard output. The
client prints a confirmation once the server has seen the end of the message.
The client needs exactly two arguments, the server's pid and the message;
given anything else, it prints a usage note and exits. The pid is read
leniently: leading whitespace and a sign are accepted, and trailing text is
ignored. If the process cannot be signalled, the client reports the error on
standard error and exits with status 1.

Both commands can also be run as `python -m sigtalk.server` and
`python -m sigtalk.client`.

## Library use

The bit protocol in `sigtalk.protocol` works without sending any signals:

```python
from sigtalk.protocol import encode_message, BitDecoder

bits = list(encode_message("hi"))   # 24 bits: 'h', 'i', then the zero byte
decoder = BitDecoder()
received = [b for b in map(decoder.feed, bits) if b is not None]
# received == [104, 105, 0]
```

`encode_byte(value)` gives the eight bits of one byte. Text is sent as UTF-8,
and anything after an embedded NUL is dropped.

`sigtalk.client.Client(pid, notify=None, wait_ack=None)` sends with
`send_byte(value)` and `send(message)`; `send_message(pid, message)` is the
one-call form. `sigtalk.server.Server(output=None, notify=None)` receives:
`handle_bit(signum, sender)` takes one bit, and `serve_forever()` runs the
signal loop. Passing your own `notify` (and, for the client, `wait_ack`)
callables lets either side run without real signals, for example in tests.

## Helpers

The package also includes the small helpers the programs are built on:

- `sigtalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`, `to_upper`, `to_lower` on ASCII characters or codes
- `sigtalk.numbers`: `parse_int` (wraps to 32 bits), `parse_long`,
  `parse_float` (no exponents) and `format_int`
- `sigtalk.strings`: `length`, `bounded_copy`, `bounded_concat`,
  `find_char`, `find_last_char`, `compare`, `find_bounded`; searches return
  an index or `None`
- `sigtalk.transform`: `substring`, `join`, `trim`, `split` (empty words
  dropped), `map_indexed`, `for_each_indexed`
- `sigtalk.memory`: `fill`, `zero`, `allocate_zeroed`, `copy`, `move`,
  `find_byte`, `compare_bytes` on byte buffers
- `sigtalk.lines`: `LineReader(buffer_size=42, max_fd=16).read_line(fd)`
  returns the next line as bytes, newline included, or `None` at end of
  input; `iter_lines(fd)` yields every line
- `sigtalk.formatting`: `format_string(fmt, *args)` and
  `write_formatted(stream, fmt, *args)` support `%c %s %p %d %i %u %x %X %%`;
  `write_formatted` returns the number of characters counted as written
- `sigtalk.output`: `put_char`, `put_str`, `put_endl`, `put_number` write
  to a text stream
- `sigtalk.linkedlist`: `LinkedList` of `Node` objects, with `push_front`,
  `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and iteration

## Limitations

The server keeps a single decoder, so it expects one client at a time; bits
from two clients sending at once are mixed together. Messages are not
stored: each byte is written out as it arrives. The server has no way to stop
other than being interrupted.

## Tests

```
pip install ".[test]"
pytest
```