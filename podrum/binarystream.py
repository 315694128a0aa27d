"""A growable byte buffer with a read cursor and typed read/write helpers."""

from __future__ import annotations

import struct

_MASK8 = 0xFF
_MASK16 = 0xFFFF
_MASK24 = 0xFFFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class EndOfStreamError(EOFError):
    """Raised when a read needs more bytes than the stream has left."""


class BinaryStream:
    """Bytes that are read from a cursor and appended to at the end."""

    def __init__(self, data: bytes | bytearray = b"", offset: int = 0) -> None:
        self._buffer = bytearray(data)
        self.offset = offset

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the whole buffer, regardless of the read cursor."""
        return bytes(self._buffer)

    def feof(self) -> bool:
        """True when the cursor has reached the end of the buffer."""
        return self.offset >= len(self._buffer)

    # -- reading ---------------------------------------------------------

    def _read(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must not be negative")
        end = self.offset + count
        if end > len(self._buffer):
            raise EndOfStreamError(
                f"need {count} bytes at offset {self.offset}, "
                f"only {len(self._buffer) - self.offset} left"
            )
        chunk = bytes(self._buffer[self.offset:end])
        self.offset = end
        return chunk

    def _read_int(self, size: int, byteorder: str, signed: bool) -> int:
        return int.from_bytes(self._read(size), byteorder, signed=signed)

    def get_bytes(self, count: int) -> bytes:
        return self._read(count)

    def get_remaining_bytes(self) -> bytes:
        return self._read(max(len(self._buffer) - self.offset, 0))

    def get_unsigned_byte(self) -> int:
        return self._read_int(1, "little", False)

    def get_byte(self) -> int:
        return self._read_int(1, "little", True)

    def get_unsigned_short_le(self) -> int:
        return self._read_int(2, "little", False)

    def get_unsigned_short_be(self) -> int:
        return self._read_int(2, "big", False)

    def get_short_le(self) -> int:
        return self._read_int(2, "little", True)

    def get_short_be(self) -> int:
        return self._read_int(2, "big", True)

    def get_unsigned_triad_le(self) -> int:
        return self._read_int(3, "little", False)

    def get_unsigned_triad_be(self) -> int:
        return self._read_int(3, "big", False)

    def get_triad_le(self) -> int:
        # A triad is widened to 32 bits without sign extension.
        return self._read_int(3, "little", False)

    def get_triad_be(self) -> int:
        return self._read_int(3, "big", False)

    def get_unsigned_int_le(self) -> int:
        return self._read_int(4, "little", False)

    def get_unsigned_int_be(self) -> int:
        return self._read_int(4, "big", False)

    def get_int_le(self) -> int:
        return self._read_int(4, "little", True)

    def get_int_be(self) -> int:
        return self._read_int(4, "big", True)

    def get_unsigned_long_le(self) -> int:
        return self._read_int(8, "little", False)

    def get_unsigned_long_be(self) -> int:
        return self._read_int(8, "big", False)

    def get_long_le(self) -> int:
        return self._read_int(8, "little", True)

    def get_long_be(self) -> int:
        return self._read_int(8, "big", True)

    def _get_varint(self, max_shift: int, mask: int) -> int:
        value = 0
        for shift in range(0, max_shift, 7):
            byte = self.get_unsigned_byte()
            value |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return value & mask
        # An over-long encoding yields zero.
        return 0

    def get_var_int(self) -> int:
        return self._get_varint(35, _MASK32)

    def get_signed_var_int(self) -> int:
        raw = self.get_var_int()
        return (raw >> 1) ^ -(raw & 1)

    def get_var_long(self) -> int:
        return self._get_varint(70, _MASK64)

    def get_signed_var_long(self) -> int:
        raw = self.get_var_long()
        return (raw >> 1) ^ -(raw & 1)

    def get_float_le(self) -> float:
        return struct.unpack("<f", self._read(4))[0]

    def get_float_be(self) -> float:
        return struct.unpack(">f", self._read(4))[0]

    def get_double_le(self) -> float:
        return struct.unpack("<d", self._read(8))[0]

    def get_double_be(self) -> float:
        return struct.unpack(">d", self._read(8))[0]

    # -- writing ---------------------------------------------------------

    def _write_int(self, value: int, size: int, byteorder: str) -> None:
        mask = (1 << (size * 8)) - 1
        self._buffer += (value & mask).to_bytes(size, byteorder)

    def put_bytes(self, data: bytes | bytearray) -> None:
        self._buffer += data

    def put_unsigned_byte(self, value: int) -> None:
        self._write_int(value, 1, "little")

    def put_byte(self, value: int) -> None:
        self._write_int(value, 1, "little")

    def put_unsigned_short_le(self, value: int) -> None:
        self._write_int(value, 2, "little")

    def put_unsigned_short_be(self, value: int) -> None:
        self._write_int(value, 2, "big")

    def put_short_le(self, value: int) -> None:
        self._write_int(value, 2, "little")

    def put_short_be(self, value: int) -> None:
        self._write_int(value, 2, "big")

    def put_unsigned_triad_le(self, value: int) -> None:
        self._write_int(value, 3, "little")

    def put_unsigned_triad_be(self, value: int) -> None:
        self._write_int(value, 3, "big")

    def put_triad_le(self, value: int) -> None:
        self._write_int(value, 3, "little")

    def put_triad_be(self, value: int) -> None:
        self._write_int(value, 3, "big")

    def put_unsigned_int_le(self, value: int) -> None:
        self._write_int(value, 4, "little")

    def put_unsigned_int_be(self, value: int) -> None:
        self._write_int(value, 4, "big")

    def put_int_le(self, value: int) -> None:
        self._write_int(value, 4, "little")

    def put_int_be(self, value: int) -> None:
        self._write_int(value, 4, "big")

    def put_unsigned_long_le(self, value: int) -> None:
        self._write_int(value, 8, "little")

    def put_unsigned_long_be(self, value: int) -> None:
        self._write_int(value, 8, "big")

    def put_long_le(self, value: int) -> None:
        self._write_int(value, 8, "little")

    def put_long_be(self, value: int) -> None:
        self._write_int(value, 8, "big")

    def _put_varint(self, value: int, max_bytes: int) -> None:
        for _ in range(max_bytes):
            to_write = value & 0x7F
            value >>= 7
            if value:
                self._buffer.append(to_write | 0x80)
            else:
                self._buffer.append(to_write)
                break

    def put_var_int(self, value: int) -> None:
        self._put_varint(value & _MASK32, 5)

    def put_signed_var_int(self, value: int) -> None:
        raw = value << 1 if value >= 0 else ((-1 - value) << 1) | 1
        self.put_var_int(raw & _MASK32)

    def put_var_long(self, value: int) -> None:
        self._put_varint(value & _MASK64, 10)

    def put_signed_var_long(self, value: int) -> None:
        raw = value << 1 if value >= 0 else ((-1 - value) << 1) | 1
        self.put_var_long(raw & _MASK64)

    def put_float_le(self, value: float) -> None:
        self._buffer += struct.pack("<f", value)

    def put_float_be(self, value: float) -> None:
        self._buffer += struct.pack(">f", value)

    def put_double_le(self, value: float) -> None:
        self._buffer += struct.pack("<d", value)

    def put_double_be(self, value: float) -> None:
        self._buffer += struct.pack(">d", value)