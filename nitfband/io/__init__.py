"""
The io package for reading NITF image band structures.
"""

__classification__ = "UNCLASSIFIED"
