"""
The NITF header element definitions.
"""

__classification__ = "UNCLASSIFIED"
