""" DICOM tags and attribute values """
# coding=utf-8
from collections import namedtuple

import pydicom


class Tag(namedtuple("Tag", ["group", "element"])):
    """DICOM tag as a pair of 4-digit uppercase hex strings"""

    __slots__ = ()

    def __new__(cls, group, element):
        return super().__new__(cls, _normalize(group), _normalize(element))

    def __repr__(self):
        return f"({self.group},{self.element})"

    __str__ = __repr__

    @property
    def value(self):
        """32-bit integer tag (raises ValueError if not valid hex)"""
        return int(self.group, 16) << 16 | int(self.element, 16)

    @classmethod
    def from_int(cls, value):
        return cls(value >> 16, value & 0xFFFF)

    @classmethod
    def from_keyword(cls, keyword):
        """tag from DICOM dictionary keyword (eg. 'PatientName')"""
        value = pydicom.datadict.tag_for_keyword(keyword)
        if value is None:
            raise ValueError(f"Invalid DICOM keyword: {keyword}")
        return cls.from_int(value)

    @property
    def keyword(self):
        """DICOM dictionary keyword or '' if unknown"""
        try:
            return pydicom.datadict.keyword_for_tag(self.value)
        except ValueError:
            return ""


def _normalize(part):
    if part is None:
        raise TypeError("tag group/element cannot be None")
    if isinstance(part, int):
        return f"{part:04X}"
    return str(part).upper()


class AttributeValue(namedtuple("AttributeValue", ["tag", "value"])):
    """tag and its current string value (None and '' are distinct)"""

    __slots__ = ()
