import unittest

from nitfband.io.general.nitf_elements.base import NITFElement, _IntegerDescriptor, _StringDescriptor
from nitfband.io.general.nitf_reader import NITFReader


class _Example(NITFElement):
    _ordering = ('NAME', 'PAD', 'COUNT')
    _lengths = {'NAME': 4, 'PAD': 2, 'COUNT': 3}
    _skipped = ('PAD', )
    NAME = _StringDescriptor('NAME', 4, default_value='', docstring='The name.')
    COUNT = _IntegerDescriptor('COUNT', 3, default_value=0, docstring='The count.')


class TestNITFElement(unittest.TestCase):
    def test_from_reader(self):
        reader = NITFReader(b'AB  xx007rest')
        element = _Example.from_reader(reader)
        self.assertEqual(element.NAME, 'AB')
        self.assertEqual(element.COUNT, 7)
        self.assertEqual(reader.tell(), 9)
        self.assertEqual(element.get_bytes_length(), 9)
        self.assertEqual(_Example.minimum_length(), 9)
        self.assertEqual(dict(element.to_json()), {'NAME': 'AB', 'COUNT': 7})

    def test_reader_type(self):
        with self.assertRaises(TypeError):
            _Example.from_reader(b'AB  xx007')

    def test_defaults(self):
        element = _Example()
        self.assertEqual(element.NAME, '')
        self.assertEqual(element.COUNT, 0)

    def test_write_once(self):
        element = _Example(NAME='ABCD', COUNT=12)
        with self.assertRaises(AttributeError):
            element.NAME = 'EFGH'
        with self.assertRaises(AttributeError):
            element.COUNT = 1
        self.assertEqual(element.NAME, 'ABCD')

    def test_values(self):
        with self.subTest(msg='integer too long'):
            with self.assertRaises(ValueError):
                _Example(COUNT=1000)
        with self.subTest(msg='negative integer'):
            with self.assertRaises(ValueError):
                _Example(COUNT=-1)
        with self.subTest(msg='string truncation'):
            with self.assertLogs('nitfband', level='WARNING'):
                element = _Example(NAME='ABCDEF')
            self.assertEqual(element.NAME, 'ABCD')
        with self.subTest(msg='bytes string'):
            self.assertEqual(_Example(NAME=b' AB ').NAME, 'AB')

    def test_descriptor_docstring(self):
        self.assertTrue(_Example.NAME.__doc__.startswith('str:'))
        self.assertIn('4 bytes', _Example.NAME.__doc__)
        self.assertTrue(_Example.COUNT.__doc__.startswith('int:'))
