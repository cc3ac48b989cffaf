"""
The basic error definitions for reading NITF structures from file-like objects.
"""

__classification__ = "UNCLASSIFIED"

from typing import Optional

from nitfband.compliance import NITFBandError


class NITFDecodingError(NITFBandError):
    """
    Raised when a field can not be decoded, either because the stream ended
    before the field was complete, or because the field bytes can not be
    interpreted as the declared type.
    """

    def __init__(self, message: str, field: Optional[str] = None, offset: Optional[int] = None):
        self.field = field
        self.offset = offset
        if field is not None:
            message = 'Field {} at byte offset {}: {}'.format(field, offset, message)
        super(NITFDecodingError, self).__init__(message)
