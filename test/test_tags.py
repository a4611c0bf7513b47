""" test DICOM tags """
# coding=utf-8

import pytest

from dicomdeid.tags import Tag, AttributeValue


def test_tag_normalization():
    tag = Tag("0020", "000d")
    assert tag == Tag("0020", "000D")
    assert hash(tag) == hash(Tag("0020", "000D"))
    assert tag.group == "0020"
    assert tag.element == "000D"
    assert str(tag) == "(0020,000D)"

    # from integers
    assert Tag(0x7FE0, 0x10) == Tag("7fe0", "0010")
    assert Tag.from_int(0x00100010) == Tag("0010", "0010")

    # as dictionary key
    table = {Tag("7fe0", "0010"): "pixels"}
    assert table[Tag("7FE0", "0010")] == "pixels"


def test_tag_keyword():
    tag = Tag.from_keyword("PatientName")
    assert tag == Tag("0010", "0010")
    assert tag.keyword == "PatientName"
    assert tag.value == 0x00100010

    with pytest.raises(ValueError):
        Tag.from_keyword("NotAKeyword")


def test_tag_malformed():
    # tolerated until converted
    tag = Tag("zz10", "0010")
    assert tag.group == "ZZ10"
    with pytest.raises(ValueError):
        tag.value

    with pytest.raises(TypeError):
        Tag(None, "0010")


def test_attribute_value():
    tag = Tag("0010", "0040")
    assert AttributeValue(tag, None).value is None
    assert AttributeValue(tag, "").value == ""
    assert AttributeValue(tag, None) != AttributeValue(tag, "")
