from enum import Enum, auto

from .fields import SIGNATURE, REV_SIGNATURE


class Endianess(Enum):
    '''Byte order of every Field in a file, relative to stream order.

    FORWARD means the bytes are assembled as they come (big-endian), SWAPPED
    means they must be assembled from the last one.'''
    FORWARD = auto()
    SWAPPED = auto()

    @property
    def swap_endian(self):
        return self is Endianess.SWAPPED

    @classmethod
    def from_signature(cls, signature):
        '''Returns None when the value is not a signature in either order.'''
        if signature == SIGNATURE:
            return cls.FORWARD
        if signature == REV_SIGNATURE:
            return cls.SWAPPED

        return None
