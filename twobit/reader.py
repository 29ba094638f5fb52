"""
Extraction of values from 2bit files.

The ValueReader reads every kind of value the format is made of except the
packed sequences: Fields, bytes, strings and block lists. It has no idea of
what a value means, the caller has to ask for them in the order of the layout
of the file.
"""
import io
import logging
from typing import List

from .enum import Endianess
from .fields import (
    FIELD_SIZE,
    HEADER_SIZE,
    SUPPORTED_VERSION,
    Block,
    field_from_bytes,
)
from .streams import Stream
from .exceptions import (
    FileFormatException,
    UnsupportedVersionException,
    TextDecodeException,
    TruncatedStreamException,
)


logger = logging.getLogger(__name__)


class ValueReader:
    """Read values from a 2bit stream.

    The signature and the version are checked when the instance is created:
    the byte order found there is used for every Field read afterwards.

    The stream is owned by the reader and it's closed together with it.
    """

    def __init__(self, source):
        self._stream = source if isinstance(source, Stream) else Stream(source)
        self._version = None
        self._endianess = Endianess.FORWARD

        try:
            self._handshake()
        except Exception:
            self.close()
            raise

    @classmethod
    def open(cls, path):
        '''Read the file at "path" directly from disk.'''
        return cls(open(path, 'rb'))

    @classmethod
    def from_buf(cls, buf):
        return cls(io.BytesIO(buf))

    @classmethod
    def open_and_read(cls, path):
        '''Load the whole file in memory before reading from it.'''
        with open(path, 'rb') as f:
            data = f.read()

        return cls.from_buf(data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return '<%s(%r, version=%s, endianess=%s)>' % (
            self.__class__.__name__,
            self._stream,
            self._version,
            self._endianess.name,
        )

    def _handshake(self):
        # the byte order is not known yet: the first read assumes it's forward
        try:
            signature = self.field()
        except TruncatedStreamException as e:
            raise FileFormatException('file too short for a 2bit signature', offset=0) from e

        endianess = Endianess.from_signature(signature)

        if endianess is None:
            raise FileFormatException('file does not start with 2bit signature (found 0x%08x)' % signature, offset=0)

        self._endianess = endianess
        logger.debug('signature 0x%08x, endianess %s' % (signature, endianess.name))

        version = self.field()
        if version != SUPPORTED_VERSION:
            raise UnsupportedVersionException(version, offset=FIELD_SIZE)

        self._version = version

    @property
    def version(self):
        return self._version

    @property
    def endianess(self) -> Endianess:
        return self._endianess

    @property
    def swap_endian(self) -> bool:
        return self._endianess.swap_endian

    def close(self):
        self._stream.close()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        position = self._stream.seek(offset, whence)
        logger.debug('seek(%d, %d) -> 0x%x' % (offset, whence, position))
        return position

    def seek_start(self) -> int:
        '''Go to the first byte after the header.'''
        return self.seek(HEADER_SIZE)

    def tell(self) -> int:
        return self._stream.tell()

    def stream_len(self) -> int:
        return self._stream.stream_len()

    def byte(self) -> int:
        return self._stream.read_exactly(1)[0]

    def field(self) -> int:
        raw = self._stream.read_exactly(FIELD_SIZE)
        return field_from_bytes(raw, self.swap_endian)

    def string(self, length: int) -> str:
        if length == 0:
            return ''

        offset = self._stream.tell()
        raw = self._stream.read_exactly(length)

        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TextDecodeException('invalid UTF-8 in string of %d bytes: %s' % (length, e.reason), offset=offset) from e

    def blocks(self) -> List[Block]:
        '''Read a list of blocks.

        On disk there is the count followed by two arrays, first all the
        starts and then all the lengths: they are NOT interleaved.
        '''
        n_blocks = self.field()
        logger.debug('reading %d blocks' % n_blocks)

        result = [Block(start=self.field()) for _ in range(n_blocks)]

        for block in result:
            block.length = self.field()

        return result

    def skip_blocks(self):
        n_blocks = self.field()
        skip = n_blocks * 2 * FIELD_SIZE
        logger.debug('skipping %d blocks (%d bytes)' % (n_blocks, skip))
        self._stream.seek(skip, io.SEEK_CUR)
