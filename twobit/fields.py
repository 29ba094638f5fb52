"""
A Field is the "fundamental" datatype of the 2bit format: a 32 bit unsigned
integer stored in 4 bytes. Counts, offsets, lengths, the signature and the
version are all encoded as one Field, in the same byte order for the whole file.
"""
from typing import Iterable

FIELD_SIZE = 4

# the signature in both orders: which one we find at offset 0 tells the
# byte order of the file
SIGNATURE     = 0x1A412743
REV_SIGNATURE = 0x4327411A

SUPPORTED_VERSION = 0

# signature + version, the payload starts here
HEADER_SIZE = 2 * FIELD_SIZE


def field_from_bytes(raw: Iterable[int], swap_endian: bool) -> int:
    '''Assemble a Field from its raw bytes.

    With swap_endian the bytes are consumed starting from the last one, so
    that the same numeric value comes out whichever order the file was
    written in.'''
    if swap_endian:
        raw = reversed(bytes(raw))

    result = 0
    for byte in raw:
        result = (result << 8) + byte

    return result


class Block:
    """Interval (in bases) of a masked or unknown region of a sequence."""

    __slots__ = ('_start', '_length')

    def __init__(self, start=0, length=0):
        self._start = start
        self._length = length

    start = property(fget=lambda self: self._start)

    def _set_length(self, value):
        self._length = value

    length = property(
        fget=lambda self: self._length,
        fset=_set_length,
    )

    @property
    def end(self):
        return self._start + self._length

    def __eq__(self, other):
        if not isinstance(other, Block):
            return NotImplemented

        return (self._start, self._length) == (other._start, other._length)

    def __repr__(self):
        return '<%s(start=%d, length=%d)>' % (self.__class__.__name__, self._start, self._length)
