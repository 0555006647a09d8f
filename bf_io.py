"""
Byte sources and sinks for the ',' and '.' instructions.

A sink has write_byte(x) and flush(); a source has read_byte().
"""
import sys

from bf_config import EOF_BYTE


class StdOutputter:
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout.buffer

    def write_byte(self, x):
        self.stream.write(bytes((x & 0xff,)))

    def flush(self):
        self.stream.flush()


class HexOutputter:
    """Writes each byte as two lowercase hex digits."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write_byte(self, x):
        self.stream.write(f"{x & 0xff:02x}")

    def flush(self):
        self.stream.flush()


class BufferOutputter:
    def __init__(self):
        self.data = bytearray()

    def write_byte(self, x):
        self.data.append(x & 0xff)

    def flush(self):
        pass


class StdInputter:
    def __init__(self, stream=None, eof_value=EOF_BYTE):
        self.stream = stream if stream is not None else sys.stdin.buffer
        self.eof_value = eof_value

    def read_byte(self):
        raw = self.stream.read(1)
        if not raw:
            return self.eof_value
        return raw[0]


class BufferInputter:
    def __init__(self, data=b"", eof_value=EOF_BYTE):
        if isinstance(data, str):
            data = data.encode("latin-1")
        self.data = bytes(data)
        self.pos = 0
        self.eof_value = eof_value

    def read_byte(self):
        if self.pos >= len(self.data):
            return self.eof_value
        x = self.data[self.pos]
        self.pos += 1
        return x
