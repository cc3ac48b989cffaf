"""
Forward only, field oriented reading of NITF structures from a binary stream.

The NITF header fields are fixed width runs of basic character set bytes. The
:class:`NITFReader` hands out those fields one at a time, keeping track of the
absolute position of the cursor so that failures can be reported against the
field and byte offset at which they occurred.
"""

__classification__ = "UNCLASSIFIED"

from io import BytesIO
from typing import Union, BinaryIO

from nitfband.io.general.base import NITFDecodingError
from nitfband.io.general.utils import is_file_like

_DIGITS = frozenset(b'0123456789')
# control characters and space, including NUL fill
_PADDING = bytes(range(0x21))


class NITFReader(object):
    """
    A positioned cursor over a binary stream. Every read either returns the
    requested number of bytes and advances the cursor, or raises
    :class:`NITFDecodingError`.

    The reader does not own the stream, and never closes or rewinds it.
    """

    __slots__ = ('_file_object', '_position', '_encoding')

    def __init__(self, file_object: Union[bytes, bytearray, memoryview, BinaryIO], start: int = 0, encoding: str = 'ascii'):
        """

        Parameters
        ----------
        file_object : bytes|bytearray|memoryview|BinaryIO
            The bytes to read, or a file like object opened in binary mode and
            positioned at the first byte of interest.
        start : int
            For bytes input only, the offset at which reading starts.
        encoding : str
            The encoding used to interpret text fields.
        """

        if isinstance(file_object, (bytes, bytearray, memoryview)):
            if not (0 <= start <= len(file_object)):
                raise ValueError(
                    'start must be between 0 and {}. Got {}'.format(len(file_object), start))
            file_object = BytesIO(bytes(file_object))
            file_object.seek(start)
        elif not is_file_like(file_object):
            raise TypeError(
                'file_object is required to be a bytes object or a file like object '
                'opened in binary mode. Got type {}'.format(type(file_object)))

        self._file_object = file_object
        self._encoding = encoding
        try:
            self._position = file_object.tell()
        except (AttributeError, OSError):
            # pipes and sockets do not report a position
            self._position = 0

    @property
    def encoding(self):
        """
        str: The encoding used to interpret text fields.
        """

        return self._encoding

    def tell(self) -> int:
        """
        The absolute offset of the cursor.

        Returns
        -------
        int
        """

        return self._position

    def read_bytes_raw(self, length: int, field: str = None) -> bytes:
        """
        Read exactly `length` bytes.

        Parameters
        ----------
        length : int
        field : None|str
            The name of the field being read, for error reporting.

        Returns
        -------
        bytes

        Raises
        ------
        NITFDecodingError
            If the stream ends before `length` bytes are available.
        """

        if length < 0:
            raise ValueError('length must be non-negative, got {}'.format(length))
        if length == 0:
            return b''

        offset = self._position
        chunks = []
        remaining = length
        while remaining > 0:
            chunk = self._file_object.read(remaining)
            if not chunk:
                break
            if not isinstance(chunk, bytes):
                raise TypeError(
                    'file_object must be opened in binary mode, read returned type {}'.format(type(chunk)))
            chunks.append(chunk)
            remaining -= len(chunk)
        value = b''.join(chunks)
        self._position += len(value)
        if remaining > 0:
            raise NITFDecodingError(
                'end of stream after {} of {} bytes'.format(len(value), length),
                field=field, offset=offset)
        return value

    def read_trimmed_bytes(self, length: int, field: str = None) -> str:
        """
        Read a fixed width text field, with the surrounding padding (space, NUL
        and the other control characters) removed.

        Parameters
        ----------
        length : int
        field : None|str

        Returns
        -------
        str
        """

        offset = self._position
        value = self.read_bytes_raw(length, field=field)
        try:
            return value.strip(_PADDING).decode(self._encoding)
        except UnicodeDecodeError:
            raise NITFDecodingError(
                'bytes {!r} are not valid {} text'.format(value, self._encoding),
                field=field, offset=offset)

    def read_bytes_as_integer(self, length: int, field: str = None) -> int:
        """
        Read a fixed width field of zero padded decimal digits as a
        non-negative integer.

        Parameters
        ----------
        length : int
        field : None|str

        Returns
        -------
        int
        """

        offset = self._position
        value = self.read_bytes_raw(length, field=field).strip(_PADDING)
        if len(value) == 0 or not _DIGITS.issuperset(value):
            raise NITFDecodingError(
                'bytes {!r} are not an unsigned decimal integer'.format(value),
                field=field, offset=offset)
        return int(value)

    def skip(self, length: int, field: str = None) -> None:
        """
        Consume `length` bytes without interpreting them. This reads rather
        than seeks, so that running off the end of the stream is detected.

        Parameters
        ----------
        length : int
        field : None|str
        """

        self.read_bytes_raw(length, field=field)
