# mpdwire

Building blocks for clients that talk to a Music Player Daemon over its
line-based text protocol. mpdwire turns raw response lines into Python
objects and builds some of the command lines you send.

## What is inside

- `mpdwire.parser`: `Parser.feed(line)` classifies one response line (without
  its newline) and returns a `ParserResult`. The result is `SUCCESS` for
  `OK` / `list_OK`, `ERROR` for `ACK [code@at] {command} message`, `PAIR` for
  `name: value`, or `MALFORMED`. After the call, the parser's properties hold
  the parts of the line:
  - `discrete` after `SUCCESS`;
  - `server_error`, `at` and `message` after `ERROR`;
  - `pair`, `name` and `value` after `PAIR`.

  Reading a property that does not belong to the last result raises
  `RuntimeError`. `Pair` is a frozen dataclass with `name` and `value`.
- `mpdwire.errors`: `ErrorCode` and the `MpdError` exception. The exception
  carries `code`, `message`, `server` and `at` for server errors, and
  `system` for operating-system errors. `MpdError.from_system(errno)` and
  `MpdError.from_os_error(exc)` build system errors. `is_fatal()` is false
  only for `ARGUMENT`, `STATE` and `SERVER` errors. `copy()` returns an
  independent copy.
- `mpdwire.idle`: the `Idle` flags. `idle_name` and `parse_idle_name` convert
  between a flag and its protocol name. `parse_idle_pair` reads a
  `changed: ...` pair. `idle_mask_command(mask)` builds the `idle ...` command
  line. It raises `ValueError` for an empty mask and an `MpdError` with
  `ErrorCode.ARGUMENT` for flags that are not supported.
- `mpdwire.iso8601`: `parse_datetime("YYYY-MM-DDTHH:MM:SS[Z]")` returns a
  POSIX UTC time stamp, and `format_datetime(timestamp)` does the reverse.
  Both raise `ValueError` on bad input.
- `mpdwire.kvlist`: `KeyValueList`, an ordered list of `Pair`s whose keys may
  repeat. It has `add`, `get` (first match, or `None`), iteration and `len`.
- `mpdwire.entities`: `Message`, `Mount`, `Neighbor`, `Partition` and
  `Output`. Each one starts from its first pair with `begin(pair)`, which
  raises `ValueError` for a pair of the wrong name. All except `Partition`
  then take the following pairs with `feed(pair)`. `feed` returns `False`
  when a pair starts the next entity. `Output` also keeps its `attribute=`
  pairs: read them with `attribute(name)` or `iter_attributes()`.
- `mpdwire.fingerprint`: `FingerprintType` and `parse_fingerprint_type`.
- `mpdwire.uri`: `verify_uri` (not empty) and `verify_local_uri` (not empty,
  and no leading or trailing slash).
- `mpdwire.sockets`: `socket_cloexec_nonblock(family, type, proto)` creates a
  non-blocking socket that child processes do not inherit.

## Example

```python
from mpdwire.entities import Output
from mpdwire.parser import Parser, ParserResult

parser = Parser()
outputs = []
for line in [
    "outputid: 0",
    "outputname: My ALSA Device",
    "plugin: alsa",
    "outputenabled: 1",
    "attribute: dop=0",
    "OK",
]:
    if parser.feed(line) is not ParserResult.PAIR:
        break
    pair = parser.pair
    if outputs and outputs[-1].feed(pair):
        continue
    outputs.append(Output.begin(pair))

print(outputs[0].name, outputs[0].enabled, outputs[0].attribute("dop"))
# My ALSA Device True 0

parser.feed("ACK [50@0] {play} No such song")
print(parser.server_error, parser.at, parser.message)
# 50 0 No such song
```

## What it does not do

mpdwire has no connection object. It does not connect to a server, send
commands or read responses from a socket. It also has no models for status,
songs, playlists or statistics, and it ships no command-line program. You do
the network I/O yourself, for example with a socket from
`socket_cloexec_nonblock`, and pass each received line to `Parser.feed`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```