# podrum

Pure-Python building blocks for a Minecraft Bedrock server. The package
depends only on the standard library.

## Modules

- `podrum.binarystream`: `BinaryStream` is a byte buffer. Reads advance a
  cursor (`offset`) and writes append to the end. It reads and writes:
  - signed and unsigned bytes, shorts, triads (3 bytes), ints and longs,
    little- or big-endian;
  - 32- and 64-bit floats;
  - VarInts and VarLongs, both plain and zig-zag signed.

  `getvalue()` returns the whole buffer and `feof()` reports whether the
  cursor has reached its end. Reading past the end raises
  `EndOfStreamError`.
- `podrum.nbt`: reads and writes NBT in three layouts, chosen with
  `Endianness`: `BIG`, `LITTLE` and `NETWORK`. `NETWORK` uses zig-zag
  VarInts for ints and longs and a VarInt length for strings.
  - Tags are represented as follows. A `NamedTag` holds a `tag_type`, a
    `name` and a `value`. A compound is a `dict[str, NamedTag]`. A list tag
    is an `NbtList`, which holds an item `tag_type` and its `items`. Byte
    arrays are `bytes`. Int and long arrays are lists of ints.
  - The functions are `read_named_tag` / `write_named_tag`,
    `read_compound` / `write_compound`, `read_payload` / `write_payload` and
    `read_string` / `write_string`.
  - An unknown tag type or endianness raises `NbtError`.
- `podrum.compression`: `encode(data, level, mode)` and `decode(data, mode)`.
  `Mode` is `DEFLATE` (zlib framing), `RAW` or `GZIP`. Empty input decodes
  to `b""`. Corrupt or incomplete data raises `CompressionError`.
- `podrum.base64codec`: `b64_encode` produces padded base64. `b64_decode` is
  lenient: it tolerates missing padding and decodes characters outside the
  alphabet as zero bits.
- `podrum.jsonscalars`: parsers for strings, booleans, `null` and numbers.
  Each is called as `parse_*(text, pos)`. It returns `(value, new_pos)`, or
  `None` when the text at `pos` is not a value of that kind. Malformed input
  raises `JsonError`.
- `podrum.jsonparser`: `parse(text)` returns a dict or a list. It returns
  `None` when the text holds no object or array at the top level. The
  `JsonParser` class exposes the individual steps. The following are
  deliberate limitations:
  - Numbers are integers or decimal fractions, with no exponents.
  - A trailing comma inside an array is accepted.
  - When keys repeat, the first value is kept.
- `podrum.jwtdecode`: `jwt_decode(token)` base64url-decodes the token's
  payload and parses it as JSON. It does **not** verify the signature.
- `podrum.commands`:
  - `Command` holds a name, an executor callable and optional description,
    usage and prefix.
  - `CommandManager` registers, looks up (`get` raises
    `CommandNotFoundError`), deletes and executes commands.
  - `execute` returns `False` when no command has the given name.
- `podrum.logger`: `log_info`, `log_warning`, `log_error`, `log_success`,
  `log_emergency`, `log_notice`, `log_critical` and `log_debug`. Each prints
  a coloured `[TYPE: HH:MM:SS] message` line to standard output. The ANSI
  colours are defined in `TextFormat`.

## What it does not do

The package has no server, no network protocol handling and no command-line
entry point. It does not load game resource files such as block states or
creative items. It provides the encoding, parsing and bookkeeping pieces
only.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from podrum.binarystream import BinaryStream
from podrum.nbt import Endianness, NamedTag, TagType, read_named_tag, write_named_tag

stream = BinaryStream()
stream.put_var_int(300)
stream.put_float_le(1.5)

reader = BinaryStream(stream.getvalue())
assert reader.get_var_int() == 300
assert reader.get_float_le() == 1.5

out = BinaryStream()
root = NamedTag(
    TagType.COMPOUND,
    "root",
    {"name": NamedTag(TagType.STRING, "name", "stone")},
)
write_named_tag(out, root, Endianness.NETWORK)
print(read_named_tag(BinaryStream(out.getvalue()), Endianness.NETWORK))
```

```python
from podrum.jwtdecode import jwt_decode

claims = jwt_decode("header.eyJhIjogMX0.signature")
# {'a': 1}
```