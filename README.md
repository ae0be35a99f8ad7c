# minitalk

A tiny messaging system that passes text from one process to another using
only two POSIX signals. Each byte goes out as eight signals, most significant
bit first: `SIGUSR1` for a 0 bit and `SIGUSR2` for a 1 bit. The receiver
acknowledges every bit with `SIGUSR1` before the next one is sent. A zero byte
marks the end of a message.

The client needs a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which Python provides on Linux and most other Unix
systems but not on macOS.

## Installation

```
pip install .
```

## Command line use

Start the server in one terminal. It prints its process id and then waits
until interrupted:

```
$ minitalk-server
Server ID: 4242
```

From another terminal, send it a message:

```
$ minitalk-client 4242 "hello there"
```

The server writes each byte as soon as its eighth bit arrives, and a newline
when the terminating zero byte arrives. Text is sent as UTF-8, and a message
ends at its first zero byte.

The client needs exactly two arguments, the server's process id and the
message; otherwise it prints `Provide The PID with a message please!` and
exits with status 1. If no process has that id, it prints
`No active process with this PID` and exits with status 1.

Options:

- `minitalk-server --confirm-end`: after the final zero byte of a message the
  server also sends `SIGUSR2` to the sender.
- `minitalk-client --receipt PID MESSAGE`: the client listens for that
  `SIGUSR2` and prints `>>Message recieved!<<` when it comes. Without this
  flag the client does not listen for `SIGUSR2`, so only use
  `--confirm-end` on the server together with `--receipt` on the client.

## Library use

The wire format can be used without signals at all:

```python
from minitalk.protocol import Bit, Decoder, encode_byte, message_bits

encode_byte(ord("A"))            # list of eight Bit values, most significant first
bits = list(message_bits("hi"))  # every byte of "hi" plus the zero end byte

decoder = Decoder()
for bit in bits:
    byte = decoder.feed(1234, bit)  # an int once eight bits have arrived, else None
```

`encode_byte` accepts values from -128 to 255 (negative values as their
two's-complement byte) and raises `ValueError` outside that range.
`Decoder` starts over whenever a bit comes from a different sender, so a
half-received byte from one client never mixes with another's; its
`pending_bits` property tells how many bits of the current byte are in.

`minitalk.server.Server(output=None, confirm_end=False)` writes completed
bytes to a binary stream (standard output by default). `Server.handle(sender,
signum)` processes one signal and returns the completed byte, if any;
`Server.serve_forever()` waits for real signals and never returns. The server
acknowledges through `os.kill` and ignores errors if the sender is gone.

`minitalk.client.Client(pid, send_signal=None, wait_ack=None)` sends bytes
with `send_byte(value)` and whole messages with `send_message(message)`. The
two optional callables replace `os.kill` and the wait for the acknowledgement,
so a client can be driven without real signals. A failed send raises
`minitalk.client.ProcessNotFoundError`.

The package also ships the small helpers the programs are built from:

- `minitalk.strutil`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr`, `strncmp`, `memcmp`, `strchr`, `strrchr`, `strjoin` and
  `strmapi`, with C-string behaviour (a string ends at its first NUL).
- `minitalk.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` for ASCII codes or one-character
  strings.
- `minitalk.printf`: `format_message(fmt, *args)` and
  `printf(fmt, *args, file=None)` for the `%c %s %p %d %i %u %x %X %%`
  conversions; a malformed format raises `FormatError`.
- `minitalk.linereader.LineReader(stream, buffer_size=1)`: reads a text or
  binary stream in chunks and returns one line at a time from `readline()`
  (None at the end) or by iteration.

## Running the tests

```
pip install ".[test]"
pytest
```