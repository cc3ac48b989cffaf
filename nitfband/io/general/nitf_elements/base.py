"""
Base NITF Header functionality definition.
"""

import logging
from weakref import WeakKeyDictionary
from collections import OrderedDict

from nitfband.compliance import bytes_to_string
from nitfband.io.general.nitf_reader import NITFReader


__classification__ = "UNCLASSIFIED"

logger = logging.getLogger(__name__)


# Base NITF type

class BaseNITFElement(object):

    @classmethod
    def minimum_length(cls):
        """
        The minimum size in bytes that this header element occupies.

        Returns
        -------
        int
        """

        raise NotImplementedError

    def get_bytes_length(self):
        """
        Get the number of bytes this element occupied in the stream it was
        read from.

        Returns
        -------
        int
        """

        raise NotImplementedError

    @classmethod
    def from_reader(cls, reader):
        """
        Decode the element from the current position of the reader. On success,
        the reader is left positioned at the first byte following the element.

        Parameters
        ----------
        reader : NITFReader

        Returns
        -------
        BaseNITFElement
        """

        raise NotImplementedError

    @classmethod
    def from_bytes(cls, value, start):
        """

        Parameters
        ----------
        value: bytes
            the header bytes to scrape
        start : int
            the beginning location in the bytes

        Returns
        -------
        BaseNITFElement
        """

        return cls.from_reader(NITFReader(value, start=start))

    def to_json(self):
        """
        Serialize element to a json representation. This is intended to allow
        a simple presentation of the element.

        Returns
        -------
        dict
        """

        raise NotImplementedError


# Basic input interpreters

def _parse_int(val, length, default, name, instance):
    """
    Parse and/or validate the integer input.

    Parameters
    ----------
    val : None|int|bytes
    length : int
    default : None|int

    Returns
    -------
    int
    """

    if val is None:
        return default
    else:
        val = int(val)

    if 0 <= val < 10**length:
        return val
    raise ValueError(
        'Integer {} cannot be rendered as a string of {} digits for '
        'attribute {} of class {}'.format(val, length, name, instance.__class__.__name__))


def _parse_str(val, length, default, name, instance):
    """
    Parse and/or validate the string input.

    Parameters
    ----------
    val : None|str|bytes
    length : int
    default : None|str

    Returns
    -------
    str
    """

    if val is None:
        return default

    if isinstance(val, bytes):
        val = bytes_to_string(val)
    elif not isinstance(val, str):
        val = str(val)

    val = val.strip()
    if len(val) <= length:
        return val
    else:
        logger.warning(
            'Got string input value of length {} for attribute {} of class {}, '
            'which is longer than the allowed length {}, so '
            'truncating'.format(len(val), name, instance.__class__.__name__, length))
        return val[:length]


# NITF Descriptors

class _BasicDescriptor(object):
    """
    A descriptor object for reusable write-once properties. Note that it is
    required that the calling instance is hashable.
    """
    _typ_string = None

    def __init__(self, name, length, docstring=''):
        self.data = WeakKeyDictionary()  # our instance reference dictionary
        # A reference to a particular class instance in this dictionary
        # should not be the thing keeping that instance from being destroyed.
        self.name = name
        self.length = length

        self.__doc__ = docstring
        self._format_docstring()

    def _format_docstring(self):
        docstring = self.__doc__
        if docstring is None:
            docstring = ''
        if (self._typ_string is not None) and (not docstring.startswith(self._typ_string)):
            docstring = '{} {}'.format(self._typ_string, docstring)
        self.__doc__ = '{} Fixed width of {} bytes.'.format(docstring, self.length)

    def _get_default(self, instance):
        return None

    def __get__(self, instance, owner):
        """The getter.

        Parameters
        ----------
        instance : object
            the calling class instance
        owner : object
            the type of the class - that is, the actual object to which this descriptor is assigned

        Returns
        -------
        object
            the return value
        """

        if instance is None:
            # this has been access on the class, so return the class
            return self

        fetched = self.data.get(instance, None)
        if fetched is not None:
            return fetched
        msg = 'Field {} of class {} is not populated.'.format(self.name, instance.__class__.__name__)
        raise AttributeError(msg)

    def __set__(self, instance, value):
        if instance in self.data:
            raise AttributeError(
                'Attribute {} of class {} is read only once it has been '
                'populated.'.format(self.name, instance.__class__.__name__))
        if value is None:
            value = self._get_default(instance)
            if value is None:
                raise ValueError(
                    'Attribute {} of class {} cannot be assigned None.'.format(
                        self.name, instance.__class__.__name__))
        self.data[instance] = self._parse(value, instance)

    def _parse(self, value, instance):
        raise NotImplementedError

    def read(self, reader):
        """
        Read the raw value of this field from the reader.

        Parameters
        ----------
        reader : NITFReader

        Returns
        -------
        object
        """

        raise NotImplementedError


class _StringDescriptor(_BasicDescriptor):
    """A descriptor for string type"""
    _typ_string = 'str:'

    def __init__(self, name, length, default_value='', docstring=None):
        self._default_value = default_value
        super(_StringDescriptor, self).__init__(name, length, docstring=docstring)

    def _get_default(self, instance):
        return self._default_value

    def _parse(self, value, instance):
        return _parse_str(value, self.length, self._default_value, self.name, instance)

    def read(self, reader):
        return reader.read_trimmed_bytes(self.length, field=self.name)


class _IntegerDescriptor(_BasicDescriptor):
    """A descriptor for non-negative integer type"""
    _typ_string = 'int:'

    def __init__(self, name, length, default_value=0, docstring=None):
        self._default_value = default_value
        super(_IntegerDescriptor, self).__init__(name, length, docstring=docstring)

    def _get_default(self, instance):
        return self._default_value

    def _parse(self, value, instance):
        return _parse_int(value, self.length, self._default_value, self.name, instance)

    def read(self, reader):
        return reader.read_bytes_as_integer(self.length, field=self.name)


# Concrete NITF element types

class NITFElement(BaseNITFElement):
    """
    A NITF element laid out as an ordered sequence of fields. The fields in
    `_skipped` are consumed from the stream, but are not retained.
    """

    _ordering = ()
    _lengths = {}
    _skipped = ()

    def __init__(self, **kwargs):
        for fld in self._ordering:
            if fld in self._skipped:
                continue
            try:
                setattr(self, fld, kwargs.get(fld, None))
            except (ValueError, TypeError, AttributeError):
                logger.critical('Failed setting attribute {} for class {}'.format(fld, self.__class__))
                raise

    @classmethod
    def minimum_length(cls):
        return sum(cls._lengths.values())

    def _get_attribute_length(self, fld):
        if fld not in self._ordering:
            return 0
        if fld in self._lengths:
            return self._lengths[fld]
        raise ValueError(
            'Unhandled attribute {} for class {}'.format(fld, self.__class__.__name__))

    def get_bytes_length(self):
        return sum(self._get_attribute_length(fld) for fld in self._ordering)

    @classmethod
    def _parse_attribute(cls, fields, attribute, reader):
        """
        Read a single attribute from the reader.

        Parameters
        ----------
        fields : dict
            The attribute:value dictionary.
        attribute : str
            The attribute name.
        reader : NITFReader
            The reader, positioned at the start of this attribute.

        Returns
        -------
        None
        """

        if attribute not in cls._ordering:
            raise ValueError('Unexpected attribute {}'.format(attribute))

        if attribute in cls._skipped:
            reader.skip(cls._lengths[attribute], field=attribute)
            return

        descriptor = getattr(cls, attribute, None)
        if isinstance(descriptor, _BasicDescriptor):
            fields[attribute] = descriptor.read(reader)
        else:
            raise ValueError('Cannot parse attribute {} for class {}'.format(attribute, cls))

    @classmethod
    def from_reader(cls, reader):
        if not isinstance(reader, NITFReader):
            raise TypeError('reader must be a NITFReader instance, got type {}'.format(type(reader)))

        fields = {}
        for fld in cls._ordering:
            cls._parse_attribute(fields, fld, reader)
        return cls(**fields)

    def _json_value(self, fld):
        return getattr(self, fld)

    def to_json(self):
        out = OrderedDict()
        for fld in self._ordering:
            if fld in self._skipped:
                continue
            value = self._json_value(fld)
            if value is None:
                out[fld] = ''
            elif isinstance(value, (str, int, list)):
                out[fld] = value
            elif isinstance(value, BaseNITFElement):
                out[fld] = value.to_json()
            else:
                logger.error(
                    'Got unhandled type `{}` for json serialization for '
                    'attribute `{}` of class {}'.format(type(value), fld, self.__class__))
        return out
