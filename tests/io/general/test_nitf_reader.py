import io
import unittest

from nitfband.io.general.base import NITFDecodingError
from nitfband.io.general.nitf_reader import NITFReader


class _Trickle(io.RawIOBase):
    """A non-seekable stream handing out at most two bytes per read."""

    def __init__(self, data):
        self._data = data

    def readable(self):
        return True

    def read(self, size=-1):
        chunk, self._data = self._data[:min(size, 2)], self._data[min(size, 2):]
        return chunk

    def tell(self):
        raise io.UnsupportedOperation('tell')


class TestNITFReader(unittest.TestCase):
    def test_reads(self):
        reader = NITFReader(b'xxAB  00042 raw!', start=2)
        self.assertEqual(reader.tell(), 2)

        with self.subTest(msg='trimmed text'):
            self.assertEqual(reader.read_trimmed_bytes(4, field='TEXT'), 'AB')
            self.assertEqual(reader.tell(), 6)

        with self.subTest(msg='integer'):
            self.assertEqual(reader.read_bytes_as_integer(5, field='INT'), 42)
            self.assertEqual(reader.tell(), 11)

        with self.subTest(msg='skip'):
            reader.skip(1)
            self.assertEqual(reader.tell(), 12)

        with self.subTest(msg='raw'):
            self.assertEqual(reader.read_bytes_raw(4), b'raw!')
            self.assertEqual(reader.tell(), 16)

        with self.subTest(msg='zero length'):
            self.assertEqual(reader.read_bytes_raw(0), b'')
            self.assertEqual(reader.tell(), 16)

    def test_file_object_position(self):
        stream = io.BytesIO(b'0123456789')
        stream.seek(3)
        reader = NITFReader(stream)
        self.assertEqual(reader.tell(), 3)
        self.assertEqual(reader.read_bytes_as_integer(3), 345)
        self.assertEqual(stream.tell(), 6)
        self.assertEqual(reader.tell(), 6)

    def test_short_reads(self):
        reader = NITFReader(_Trickle(b'ABCDEFG'))
        self.assertEqual(reader.tell(), 0)
        self.assertEqual(reader.read_bytes_raw(5), b'ABCDE')
        with self.assertRaises(NITFDecodingError):
            reader.read_bytes_raw(5, field='REST')

    def test_truncated(self):
        reader = NITFReader(b'12345')
        reader.skip(3)
        with self.assertRaises(NITFDecodingError) as context:
            reader.read_bytes_as_integer(5, field='NELUT')
        self.assertEqual(context.exception.field, 'NELUT')
        self.assertEqual(context.exception.offset, 3)
        self.assertIn('NELUT', str(context.exception))

        with self.assertRaises(NITFDecodingError):
            NITFReader(b'').skip(1, field='IFC')

    def test_malformed(self):
        for value in [b'12a45', b'     ', b'-1234', b'+1234', b'1 234']:
            with self.subTest(msg='integer {!r}'.format(value)):
                with self.assertRaises(NITFDecodingError) as context:
                    NITFReader(b'xx' + value, start=2).read_bytes_as_integer(5, field='NELUT')
                self.assertEqual(context.exception.offset, 2)

        with self.subTest(msg='non-ascii text'):
            with self.assertRaises(NITFDecodingError):
                NITFReader(b'\xff\xfe').read_trimmed_bytes(2, field='IREPBAND')

    def test_padded_integer(self):
        self.assertEqual(NITFReader(b' 42  ').read_bytes_as_integer(5), 42)
        self.assertEqual(NITFReader(b'\x00\x0042\x00').read_bytes_as_integer(5), 42)

    def test_padded_text(self):
        reader = NITFReader(memoryview(b'R\x00\tAB\x00\x00'))
        self.assertEqual(reader.read_trimmed_bytes(2), 'R')
        self.assertEqual(reader.read_trimmed_bytes(5), 'AB')
        self.assertEqual(reader.tell(), 7)

    def test_encoding(self):
        reader = NITFReader('é '.encode('latin-1'), encoding='latin-1')
        self.assertEqual(reader.encoding, 'latin-1')
        self.assertEqual(reader.read_trimmed_bytes(2), 'é')

    def test_bad_arguments(self):
        with self.assertRaises(TypeError):
            NITFReader('not bytes')
        with self.assertRaises(ValueError):
            NITFReader(b'abc', start=4)
        with self.assertRaises(ValueError):
            NITFReader(b'abc').read_bytes_raw(-1)
        with self.assertRaises(TypeError):
            NITFReader(io.StringIO('text mode')).read_bytes_raw(2)
