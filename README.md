# minitalk

A small messaging pair for POSIX systems. A server process waits for user
signals. A client sends it a text message one bit per signal: `SIGUSR1`
carries a 1 and `SIGUSR2` carries a 0. The message is encoded as UTF-8. Each
byte is sent most significant bit first, and a final NUL byte ends the
message.

## Install

```
pip install .
```

## Usage

Start the server in one terminal. It prints a short greeting that includes
its process ID. Then it waits for signals until it is interrupted:

```
minitalk-server
```

From another terminal, send a message to that process ID:

```
minitalk-client <server-pid> "hello there"
```

When the closing NUL byte arrives, the server prints:

```
Message received : hello there
```

The client takes exactly two arguments, the PID and one message. With any
other number of arguments it prints a usage line and exits with status -1.
If the PID does not parse to a positive number, it exits with status 1.
The client waits 0.3 ms after each signal.

Both commands can also be run as `python -m minitalk.server` and
`python -m minitalk.client <pid> <message>`.

## Library

### `minitalk.protocol`

- `encode_bits(message)` yields the bits of a `str` (encoded as UTF-8) or of
  `bytes`, followed by the bits of a NUL byte, most significant bit first.
- `decode_bits(bits)` returns the list of complete messages in a bit stream.
  A trailing incomplete message is dropped.
- `BitAssembler` collects bits one at a time. `feed(bit)` accepts only 0 or 1
  and raises `ValueError` for anything else. It returns the finished message
  when a NUL byte completes it and `None` otherwise. Invalid UTF-8 is decoded
  with replacement characters. `reset()` discards any partial byte and any
  partial message.

### `minitalk.client`

- `send_message(pid, message, delay=0.0003, kill=None)` sends each bit as a
  signal to `pid` and sleeps `delay` seconds after each one. `kill` defaults
  to `os.kill`. Pass another `(pid, signum)` callable to capture or redirect
  the signals.
- `main(argv=None)` is the command-line entry point. It returns the exit
  status.

### `minitalk.server`

- `Server(stream=None, pid=None)` writes to `stream`, or to standard output
  when `stream` is `None`. `pid` defaults to the current process ID.
  - `greeting()` returns the start-up banner.
  - `handle_signal(signum, frame=None)` turns `SIGUSR1` or `SIGUSR2` into a
    bit and ignores any other signal. When a message completes, it prints
    `Message received : <message>` and returns the message.
  - `install()` routes `SIGUSR1` and `SIGUSR2` to `handle_signal`.
  - `serve_forever()` prints the greeting, installs the handlers and waits
    for signals indefinitely.
- `main(argv=None)` runs a server and returns 0 when it is interrupted.

### Helpers

- `minitalk.convert` provides parsing and character tests:
  - `atoi` and `atol` parse a leading decimal integer with 32-bit and 64-bit
    integer behaviour.
  - `itoa` formats an integer as text.
  - `to_lower` and `to_upper` change the case of ASCII letters.
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` classify
    ASCII characters.
- `minitalk.printf` formats output:
  - `format_string(fmt, *args)` and `printf(fmt, *args)` support
    `%c %s %d %i %u %x %X %p %%`. `printf` writes to standard output and
    returns the number of characters written.
  - `format_int`, `format_unsigned` and `format_pointer` render a single
    value.
  - `put_number(n, stream=None)` writes an integer to a stream, and
    `put_line(text, stream=None)` writes a line.
- `minitalk.textops` provides string routines: `split`, `find_char`,
  `rfind_char`, `compare`, `compare_n`, `join`, `bounded_copy`,
  `bounded_concat`, `map_indexed`, `find_bounded`, `trim` and `substring`.

## What it does not do

- The server sends no acknowledgement. The client cannot tell whether a
  signal was received, and it relies only on the delay between signals.
  Signals that arrive too quickly may be merged, which corrupts the message.
- The server keeps a single bit stream. Messages from several clients
  sending at once become interleaved.
- It needs `SIGUSR1` and `SIGUSR2`, so it does not run on Windows.

## Tests

```
pip install ".[test]"
pytest
```