import io
import os
import logging
import struct

import pytest


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


class ChunkyReader(io.RawIOBase):
    '''Seekable source that returns at most "chunk_size" bytes per read and,
    if asked, some empty reads before each chunk.'''

    def __init__(self, data, chunk_size=1, stalls=0):
        self._data = io.BytesIO(data)
        self.chunk_size = chunk_size
        self.stalls = stalls
        self._pending_stalls = stalls
        self.reads = 0

    def readable(self):
        return True

    def seekable(self):
        return True

    def read(self, size=-1):
        self.reads += 1
        if self._pending_stalls:
            self._pending_stalls -= 1
            return b''

        self._pending_stalls = self.stalls
        if size < 0:
            size = self.chunk_size
        return self._data.read(min(size, self.chunk_size))

    def seek(self, offset, whence=io.SEEK_SET):
        return self._data.seek(offset, whence)

    def tell(self):
        return self._data.tell()


def _encode(values, swap_endian=False):
    return b''.join(struct.pack('<I' if swap_endian else '>I', _) for _ in values)


@pytest.fixture
def encode():
    '''Returns a function encoding a list of Fields.'''
    return _encode


@pytest.fixture
def header():
    def _header(swap_endian=False, version=0):
        return _encode([0x1A412743, version], swap_endian=swap_endian)

    return _header


@pytest.fixture
def chunky():
    return ChunkyReader
