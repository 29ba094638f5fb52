"""
# twobit: values of the 2bit genomic sequence format.

A 2bit file stores DNA sequences as packed 2 bit nucleotide codes, preceded by a
header and by per-sequence metadata. Everything in it is built from a few types

 1. Field: 32 bit unsigned integer, 4 bytes, used for counts, offsets and lengths
 2. byte
 3. string: fixed number of bytes of UTF-8 text
 4. block list: the (start, length) intervals of masked or unknown regions

The byte order is not fixed by the format: the writer uses its own and the
reader discovers it from the signature at offset 0

    offset  content
    0       signature, 0x1A412743 in the byte order of the file
    4       version, must be 0
    8       payload

A block list is a count followed by all the starts and then by all the lengths.

The ValueReader is the layer that decodes these types from a stream; what
they mean is up to whoever calls it.
"""
from .enum import Endianess
from .fields import (
    FIELD_SIZE,
    HEADER_SIZE,
    SIGNATURE,
    REV_SIGNATURE,
    SUPPORTED_VERSION,
    Block,
    field_from_bytes,
)
from .streams import Stream
from .reader import ValueReader
from .exceptions import (
    TwoBitException,
    FileFormatException,
    UnsupportedVersionException,
    TextDecodeException,
    TruncatedStreamException,
)
