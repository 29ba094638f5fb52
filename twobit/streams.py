import io
import os
import logging

from .exceptions import TwoBitException, TruncatedStreamException


logger = logging.getLogger(__name__)

# consecutive reads without data tolerated before giving up
MAX_STALLED_READS = 3


class Stream(object):
    '''This is a simple wrapper around bytes/path/file objects to
    uniform their properties: whatever we receive we need something that
    can be read and seek()-ed, and reads that return exactly the amount
    of data asked for.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj
        self.closed = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_default)

        init_method()

    def __getattr__(self, name):
        if name == 'obj':
            raise AttributeError(name)
        return getattr(self.obj, name)

    def __del__(self):
        # the path could have failed to open
        if hasattr(getattr(self, 'obj', None), 'close'):
            self.close()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_default(self):
        if isinstance(self.obj, os.PathLike):
            self.obj = os.fspath(self.obj)
            return self.init_str()

        if not (hasattr(self.obj, 'read') and hasattr(self.obj, 'seek')):
            raise ValueError('\'%s\' is neither a path, bytes or a readable and seekable object' % self._type.__name__)

    def close(self):
        if self.closed:
            return
        self.closed = True
        self.obj.close()

    def seek(self, offset, whence=io.SEEK_SET):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        return self.obj.seek(offset, whence)

    def tell(self):
        return self.obj.tell()

    def stream_len(self):
        old_position = self.obj.tell()
        length = self.obj.seek(0, io.SEEK_END)

        # no need to move again if we were already at the end
        if old_position != length:
            self.obj.seek(old_position)

        return length

    def read_exactly(self, size):
        '''Read exactly "size" bytes.

        The wrapped object can return less data than asked for, so we
        keep asking for the remaining part. An empty read means no progress:
        after MAX_STALLED_READS of them in a row the data is considered missing.
        '''
        chunks = []
        received = 0
        stalled = 0

        while received < size:
            chunk = self.obj.read(size - received)

            if not chunk:
                stalled += 1
                logger.warning('no data from %r after %d of %d bytes (attempt %d)' % (
                    self, received, size, stalled))
                if stalled >= MAX_STALLED_READS:
                    raise TruncatedStreamException(size, received, offset=self.obj.tell())
                continue

            stalled = 0
            received += len(chunk)
            chunks.append(chunk)

        if received != size:
            raise TwoBitException('read %d bytes while asking for %d' % (received, size))

        return b''.join(chunks)

