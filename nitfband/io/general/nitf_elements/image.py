# -*- coding: utf-8 -*-
"""
The image band definitions, as found in the band loop of the NITF 2.1 image
subheader (MIL-STD-2500C Table A-3).
"""

import logging
from typing import Union

import numpy

from .base import NITFElement, _IntegerDescriptor, _StringDescriptor


__classification__ = "UNCLASSIFIED"

logger = logging.getLogger(__name__)

_MAX_DEFINED_LUTS = 4
_MAX_LUT_ENTRIES = 65536


class ImageBandLUT(object):
    """
    A single Look-up Table (LUT) for an image band. The entries are opaque
    bytes here, their interpretation (e.g. the most or least significant byte
    of a 16 bit mapping, or one color of a color-coded band) is the concern of
    the display.
    """

    __slots__ = ('_data', )

    def __init__(self, data, length=None):
        """

        Parameters
        ----------
        data : bytes|bytearray|memoryview|numpy.ndarray
            The LUT entries. A numpy array must be one-dimensional of dtype uint8.
        length : None|int
            The expected number of entries, if known.
        """

        if isinstance(data, numpy.ndarray):
            if data.dtype.name != 'uint8':
                raise ValueError('LUT data must be a numpy array of dtype uint8, got {}'.format(data.dtype.name))
            if data.ndim != 1:
                raise ValueError('LUT data must be a one-dimensional array')
            data = data.tobytes()
        elif isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data)
        else:
            raise TypeError('LUT data requires bytes or a numpy array. Got type {}'.format(type(data)))

        if length is not None and len(data) != length:
            raise ValueError(
                'LUT data has {} entries, but {} entries are expected'.format(len(data), length))
        self._data = data

    @property
    def data(self):
        """
        bytes: The LUT entries.
        """

        return self._data

    def as_array(self):
        """
        Get the LUT entries as a (read-only) numpy array.

        Returns
        -------
        numpy.ndarray
        """

        return numpy.frombuffer(self._data, dtype=numpy.uint8)

    def __len__(self):
        return len(self._data)

    def __getitem__(self, item):  # type: (Union[int, slice]) -> Union[int, bytes]
        return self._data[item]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if isinstance(other, ImageBandLUT):
            return self._data == other._data
        return NotImplemented

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return '{}(<{} entries>)'.format(self.__class__.__name__, len(self._data))

    def to_json(self):
        return list(self._data)


class ImageBand(NITFElement):
    """
    Single image band, part of the image bands collection of the image
    subheader. The fields are read only once the band has been constructed.

    The `IFC` and `IMFLT` fields are consumed when reading, but not retained.
    """

    _ordering = ('IREPBAND', 'ISUBCAT', 'IFC', 'IMFLT', 'NLUTS', 'NELUT', 'LUTD')
    _lengths = {'IREPBAND': 2, 'ISUBCAT': 6, 'IFC': 1, 'IMFLT': 3, 'NLUTS': 1, 'NELUT': 5}
    _skipped = ('IFC', 'IMFLT')
    # open tags, values are not checked against Table A-3
    IREPBAND = _StringDescriptor(
        'IREPBAND', 2, default_value='',
        docstring='Representation. This field shall contain a valid indicator of the processing '
                  'required to display the nth band of the image with regard to the general image type '
                  'as recorded in the `IREP` field. The significance of each band in the image can be '
                  'derived from the combination of the `ICAT`, and `ISUBCAT` fields.')  # type: str
    ISUBCAT = _StringDescriptor(
        'ISUBCAT', 6, default_value='',
        docstring='Subcategory. The purpose of this field is to provide the significance of the band '
                  'of the image with regard to the specific category (`ICAT` field) '
                  'of the overall image.')  # type: str
    NLUTS = _IntegerDescriptor(
        'NLUTS', 1, default_value=0,
        docstring='Number of LUTS for the Image Band. This field shall contain the number '
                  'of LUTs associated with the nth band of the image. A monochromatic band may '
                  'carry 1 or 2 LUTs, where a second LUT maps the least significant byte of 16 bit '
                  'values. A color-coded band (`IREPBAND` of :code:`LU`) carries 3 LUTs, mapping '
                  'to red, green and blue respectively. The value 4 is reserved.')  # type: int
    NELUT = _IntegerDescriptor(
        'NELUT', 5, default_value=0,
        docstring='Number of LUT Entries for the Image Band. This field shall contain the number '
                  'of entries in each of the LUTs for the nth image band. The field is omitted '
                  'from the stream when `NLUTS` is :code:`0`, and is then '
                  ':code:`0` here.')  # type: int

    def __init__(self, **kwargs):
        self._LUTD = None
        super(ImageBand, self).__init__(**kwargs)

    @classmethod
    def minimum_length(cls):
        return 13

    @property
    def LUTD(self):
        """
        Tuple[ImageBandLUT, ...]: The Look-up Table (LUT) data, in stream order.
        """

        return self._LUTD

    @LUTD.setter
    def LUTD(self, value):
        if self._LUTD is not None:
            raise AttributeError('Attribute LUTD of class ImageBand is read only once it has been populated.')
        if value is None:
            value = ()
        luts = tuple(
            entry if isinstance(entry, ImageBandLUT) else ImageBandLUT(entry) for entry in value)

        if len(luts) != self.NLUTS:
            raise ValueError(
                'NLUTS is {}, but {} LUTs were provided'.format(self.NLUTS, len(luts)))
        if self.NLUTS == 0 and self.NELUT != 0:
            raise ValueError('NELUT must be 0 when NLUTS is 0, got {}'.format(self.NELUT))
        for i, lut in enumerate(luts):
            if len(lut) != self.NELUT:
                raise ValueError(
                    'NELUT is {}, but LUT {} has {} entries'.format(self.NELUT, i, len(lut)))
        self._LUTD = luts

    @property
    def representation(self):
        """
        str: The image representation for the band (`IREPBAND`).
        """

        return self.IREPBAND

    @property
    def subcategory(self):
        """
        str: The image band subcategory (`ISUBCAT`).
        """

        return self.ISUBCAT

    @property
    def lut_count(self):
        """
        int: The number of lookup tables (`NLUTS`).
        """

        return self.NLUTS

    @property
    def lut_entry_count(self):
        """
        int: The number of entries in each lookup table (`NELUT`).
        """

        return self.NELUT

    @property
    def luts(self):
        """
        Tuple[ImageBandLUT, ...]: The lookup tables, in stream order (0-based).
        """

        return self._LUTD

    def get_lut(self, lut_number):
        """
        Get a specific lookup table.

        Parameters
        ----------
        lut_number : int
            The index of the lookup table (1-based).

        Returns
        -------
        ImageBandLUT
        """

        return self.get_lut_zero_base(lut_number - 1)

    def get_lut_zero_base(self, lut_number_zero_base):
        """
        Get a specific lookup table.

        Parameters
        ----------
        lut_number_zero_base : int
            The index of the lookup table (0-based).

        Returns
        -------
        ImageBandLUT

        Raises
        ------
        IndexError
            If the index is outside of `[0, NLUTS)`.
        """

        if not (0 <= lut_number_zero_base < len(self._LUTD)):
            raise IndexError(
                'LUT index {} (0-based) is out of range for image band with '
                '{} LUTs'.format(lut_number_zero_base, len(self._LUTD)))
        return self._LUTD[lut_number_zero_base]

    def _get_attribute_length(self, fld):
        if fld == 'NELUT':
            return 0 if self.NLUTS == 0 else self._lengths['NELUT']
        elif fld == 'LUTD':
            return self.NLUTS*self.NELUT
        return super(ImageBand, self)._get_attribute_length(fld)

    @classmethod
    def _parse_attribute(cls, fields, attribute, reader):
        if attribute == 'NELUT':
            if fields['NLUTS'] == 0:
                fields['NELUT'] = 0
                return
        elif attribute == 'LUTD':
            nluts, neluts = fields['NLUTS'], fields['NELUT']
            if nluts > _MAX_DEFINED_LUTS:
                logger.warning(
                    'Image band {} has NLUTS {}, but values above {} are '
                    'reserved'.format(fields['IREPBAND'], nluts, _MAX_DEFINED_LUTS))
            if neluts > _MAX_LUT_ENTRIES:
                logger.warning(
                    'Image band {} has NELUT {}, which is more than {} entries'.format(
                        fields['IREPBAND'], neluts, _MAX_LUT_ENTRIES))
            fields['LUTD'] = tuple(
                ImageBandLUT(reader.read_bytes_raw(neluts, field='LUTD{}'.format(i)), length=neluts)
                for i in range(nluts))
            return
        super(ImageBand, cls)._parse_attribute(fields, attribute, reader)

    @classmethod
    def from_reader(cls, reader):
        band = super(ImageBand, cls).from_reader(reader)
        logger.debug(
            'Read image band {}/{} with {} LUTs of {} entries'.format(
                band.IREPBAND, band.ISUBCAT, band.NLUTS, band.NELUT))
        return band

    def _json_value(self, fld):
        if fld == 'LUTD':
            return [lut.to_json() for lut in self._LUTD]
        return super(ImageBand, self)._json_value(fld)

    def __repr__(self):
        return '{}(IREPBAND={!r}, ISUBCAT={!r}, NLUTS={}, NELUT={})'.format(
            self.__class__.__name__, self.IREPBAND, self.ISUBCAT, self.NLUTS, self.NELUT)
