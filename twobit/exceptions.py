class TwoBitException(Exception):
    '''Base class to extend in order to throw exception in twobit.

    It takes a message and, when known, the offset into the stream where
    decoding stopped.
    '''

    def __init__(self, message, offset=None):
        self.message = message
        self.offset = offset
        super().__init__(message)

    def __str__(self):
        if self.offset is None:
            return self.message

        return '%s (at offset 0x%x)' % (self.message, self.offset)


class FileFormatException(TwoBitException):
    pass


class UnsupportedVersionException(TwoBitException):

    def __init__(self, version, offset=None):
        self.version = version
        super().__init__('versions larger than 0 are not supported (found %d)' % version, offset=offset)


class TextDecodeException(TwoBitException, ValueError):
    '''Raised when bytes expected to be UTF-8 text are not.'''
    pass


class TruncatedStreamException(TwoBitException, EOFError):
    '''The source stopped delivering data before a read was satisfied.'''

    def __init__(self, expected, received, offset=None):
        self.expected = expected
        self.received = received
        super().__init__(
            'stream ended after %d of %d bytes' % (received, expected),
            offset=offset,
        )
