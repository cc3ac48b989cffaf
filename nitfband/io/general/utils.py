"""
Common functionality for checking file-like inputs
"""

__classification__ = "UNCLASSIFIED"


from typing import Any


###########
# general file type checks

def is_file_like(the_input: Any) -> bool:
    """
    Verify whether the provided input appear to provide a "file-like object"
    suitable for reading. In this case, we mean that there exists a callable
    attribute `read`. Writing, seeking and telling are not required, since
    all reading is forward only.

    Note that this does not check the mode (binary/string), as it is not clear
    that there is any generally accessible way to do so.

    Parameters
    ----------
    the_input

    Returns
    -------
    bool
    """

    return callable(getattr(the_input, 'read', None))
