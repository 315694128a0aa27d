"""Reading and writing NBT tags in big-endian, little-endian and network form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterator

from podrum.binarystream import BinaryStream


class TagType(IntEnum):
    """NBT tag identifiers."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


class Endianness(IntEnum):
    """Byte layouts an NBT document can use."""

    BIG = 0
    LITTLE = 1
    NETWORK = 2


class NbtError(ValueError):
    """Raised for an unknown tag type or endianness."""


@dataclass
class NbtList:
    """A list tag: items that all share one tag type."""

    tag_type: TagType
    items: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


@dataclass
class NamedTag:
    """A tag with its type, name and payload."""

    tag_type: TagType
    name: str = ""
    value: Any = None


def _as_endianness(endianness: int) -> Endianness:
    try:
        return Endianness(endianness)
    except ValueError:
        raise NbtError(f"unknown endianness {endianness!r}") from None


def _as_tag_type(tag_id: int) -> TagType:
    try:
        return TagType(tag_id)
    except ValueError:
        raise NbtError(f"unknown tag type {tag_id!r}") from None


# -- scalar readers -------------------------------------------------------

def _read_short(stream: BinaryStream, endianness: Endianness) -> int:
    if endianness is Endianness.BIG:
        return stream.get_short_be()
    return stream.get_short_le()


def _read_int(stream: BinaryStream, endianness: Endianness) -> int:
    if endianness is Endianness.BIG:
        return stream.get_int_be()
    if endianness is Endianness.LITTLE:
        return stream.get_int_le()
    return stream.get_signed_var_int()


def _read_long(stream: BinaryStream, endianness: Endianness) -> int:
    if endianness is Endianness.BIG:
        return stream.get_long_be()
    if endianness is Endianness.LITTLE:
        return stream.get_long_le()
    return stream.get_signed_var_long()


def _read_float(stream: BinaryStream, endianness: Endianness) -> float:
    if endianness is Endianness.BIG:
        return stream.get_float_be()
    return stream.get_float_le()


def _read_double(stream: BinaryStream, endianness: Endianness) -> float:
    if endianness is Endianness.BIG:
        return stream.get_double_be()
    return stream.get_double_le()


def _read_byte_array(stream: BinaryStream, endianness: Endianness) -> bytes:
    size = _read_int(stream, endianness)
    return stream.get_bytes(max(size, 0))


def _read_int_array(stream: BinaryStream, endianness: Endianness) -> list[int]:
    size = _read_int(stream, endianness)
    return [_read_int(stream, endianness) for _ in range(max(size, 0))]


def _read_long_array(stream: BinaryStream, endianness: Endianness) -> list[int]:
    size = _read_int(stream, endianness)
    return [_read_long(stream, endianness) for _ in range(max(size, 0))]


def _read_list(stream: BinaryStream, endianness: Endianness) -> NbtList:
    tag_type = _as_tag_type(stream.get_byte())
    size = _read_int(stream, endianness)
    items = [_read(stream, tag_type, endianness) for _ in range(max(size, 0))]
    return NbtList(tag_type, items)


def _read_string(stream: BinaryStream, endianness: Endianness) -> str:
    if endianness is Endianness.BIG:
        length = stream.get_unsigned_short_be()
    elif endianness is Endianness.LITTLE:
        length = stream.get_unsigned_short_le()
    else:
        length = stream.get_var_int()
    return stream.get_bytes(length).decode("utf-8", errors="surrogateescape")


def _read_compound(stream: BinaryStream, endianness: Endianness) -> dict[str, NamedTag]:
    compound: dict[str, NamedTag] = {}
    while not stream.feof():
        tag_id = stream.get_byte()
        if tag_id == TagType.END:
            break
        tag_type = _as_tag_type(tag_id)
        name = _read_string(stream, endianness)
        compound[name] = NamedTag(tag_type, name, _read(stream, tag_type, endianness))
    return compound


_READERS: dict[TagType, Callable[[BinaryStream, Endianness], Any]] = {
    TagType.END: lambda stream, endianness: None,
    TagType.BYTE: lambda stream, endianness: stream.get_byte(),
    TagType.SHORT: _read_short,
    TagType.INT: _read_int,
    TagType.LONG: _read_long,
    TagType.FLOAT: _read_float,
    TagType.DOUBLE: _read_double,
    TagType.BYTE_ARRAY: _read_byte_array,
    TagType.STRING: _read_string,
    TagType.LIST: _read_list,
    TagType.COMPOUND: _read_compound,
    TagType.INT_ARRAY: _read_int_array,
    TagType.LONG_ARRAY: _read_long_array,
}


def _read(stream: BinaryStream, tag_type: TagType, endianness: Endianness) -> Any:
    return _READERS[tag_type](stream, endianness)


# -- scalar writers -------------------------------------------------------

def _write_short(stream: BinaryStream, value: int, endianness: Endianness) -> None:
    if endianness is Endianness.BIG:
        stream.put_short_be(value)
    else:
        stream.put_short_le(value)


def _write_int(stream: BinaryStream, value: int, endianness: Endianness) -> None:
    if endianness is Endianness.BIG:
        stream.put_int_be(value)
    elif endianness is Endianness.LITTLE:
        stream.put_int_le(value)
    else:
        stream.put_signed_var_int(value)


def _write_long(stream: BinaryStream, value: int, endianness: Endianness) -> None:
    if endianness is Endianness.BIG:
        stream.put_long_be(value)
    elif endianness is Endianness.LITTLE:
        stream.put_long_le(value)
    else:
        stream.put_signed_var_long(value)


def _write_float(stream: BinaryStream, value: float, endianness: Endianness) -> None:
    if endianness is Endianness.BIG:
        stream.put_float_be(value)
    else:
        stream.put_float_le(value)


def _write_double(stream: BinaryStream, value: float, endianness: Endianness) -> None:
    if endianness is Endianness.BIG:
        stream.put_double_be(value)
    else:
        stream.put_double_le(value)


def _write_byte_array(stream: BinaryStream, value: Any, endianness: Endianness) -> None:
    data = bytes(byte & 0xFF for byte in value)
    _write_int(stream, len(data), endianness)
    stream.put_bytes(data)


def _write_int_array(stream: BinaryStream, value: list[int], endianness: Endianness) -> None:
    _write_int(stream, len(value), endianness)
    for item in value:
        _write_int(stream, item, endianness)


def _write_long_array(stream: BinaryStream, value: list[int], endianness: Endianness) -> None:
    _write_int(stream, len(value), endianness)
    for item in value:
        _write_long(stream, item, endianness)


def _write_list(stream: BinaryStream, value: NbtList, endianness: Endianness) -> None:
    tag_type = _as_tag_type(value.tag_type)
    stream.put_byte(tag_type)
    _write_int(stream, len(value.items), endianness)
    for item in value.items:
        _write(stream, tag_type, item, endianness)


def _write_string(stream: BinaryStream, value: str, endianness: Endianness) -> None:
    data = value.encode("utf-8", errors="surrogateescape")
    if endianness is Endianness.BIG:
        stream.put_unsigned_short_be(len(data))
    elif endianness is Endianness.LITTLE:
        stream.put_unsigned_short_le(len(data))
    else:
        stream.put_var_int(len(data))
    stream.put_bytes(data)


def _write_compound(
    stream: BinaryStream, compound: dict[str, NamedTag], endianness: Endianness
) -> None:
    for name, tag in compound.items():
        tag_type = _as_tag_type(tag.tag_type)
        if tag_type is TagType.END:
            break
        stream.put_byte(tag_type)
        _write_string(stream, name, endianness)
        _write(stream, tag_type, tag.value, endianness)
    stream.put_byte(TagType.END)


_WRITERS: dict[TagType, Callable[[BinaryStream, Any, Endianness], None]] = {
    TagType.END: lambda stream, value, endianness: None,
    TagType.BYTE: lambda stream, value, endianness: stream.put_byte(value),
    TagType.SHORT: _write_short,
    TagType.INT: _write_int,
    TagType.LONG: _write_long,
    TagType.FLOAT: _write_float,
    TagType.DOUBLE: _write_double,
    TagType.BYTE_ARRAY: _write_byte_array,
    TagType.STRING: _write_string,
    TagType.LIST: _write_list,
    TagType.COMPOUND: _write_compound,
    TagType.INT_ARRAY: _write_int_array,
    TagType.LONG_ARRAY: _write_long_array,
}


def _write(stream: BinaryStream, tag_type: TagType, value: Any, endianness: Endianness) -> None:
    _WRITERS[tag_type](stream, value, endianness)


# -- public API -----------------------------------------------------------

def read_string(stream: BinaryStream, endianness: int = Endianness.BIG) -> str:
    """Read a length-prefixed UTF-8 string."""
    return _read_string(stream, _as_endianness(endianness))


def write_string(stream: BinaryStream, value: str, endianness: int = Endianness.BIG) -> None:
    """Write a length-prefixed UTF-8 string."""
    _write_string(stream, value, _as_endianness(endianness))


def read_payload(stream: BinaryStream, tag_type: int, endianness: int = Endianness.BIG) -> Any:
    """Read the payload of a tag of the given type."""
    return _read(stream, _as_tag_type(tag_type), _as_endianness(endianness))


def write_payload(
    stream: BinaryStream, tag_type: int, value: Any, endianness: int = Endianness.BIG
) -> None:
    """Write the payload of a tag of the given type."""
    _write(stream, _as_tag_type(tag_type), value, _as_endianness(endianness))


def read_compound(stream: BinaryStream, endianness: int = Endianness.BIG) -> dict[str, NamedTag]:
    """Read compound entries up to an end tag or the end of the stream."""
    return _read_compound(stream, _as_endianness(endianness))


def write_compound(
    stream: BinaryStream, compound: dict[str, NamedTag], endianness: int = Endianness.BIG
) -> None:
    """Write compound entries followed by an end tag; an END entry stops early."""
    _write_compound(stream, compound, _as_endianness(endianness))


def read_named_tag(stream: BinaryStream, endianness: int = Endianness.BIG) -> NamedTag:
    """Read a tag id, and unless it is END, its name and payload."""
    order = _as_endianness(endianness)
    tag_type = _as_tag_type(stream.get_byte())
    if tag_type is TagType.END:
        return NamedTag(TagType.END)
    name = _read_string(stream, order)
    return NamedTag(tag_type, name, _read(stream, tag_type, order))


def write_named_tag(stream: BinaryStream, tag: NamedTag, endianness: int = Endianness.BIG) -> None:
    """Write a tag id, and unless it is END, its name and payload."""
    order = _as_endianness(endianness)
    tag_type = _as_tag_type(tag.tag_type)
    stream.put_byte(tag_type)
    if tag_type is not TagType.END:
        _write_string(stream, tag.name, order)
        _write(stream, tag_type, tag.value, order)