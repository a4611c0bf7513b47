""" de-identification policy: rule table, placeholders and allow-lists """
# coding=utf-8
from .tags import Tag
from .rules import Rule, PRESERVE, SHIFT_DATE

# placeholder literals
DEFAULT_VALUE = "DEFAULT_VALUE"
DEFAULT_NAME = "DEFAULT NAME"

PATIENT_NAME = Tag("0010", "0010")
PIXEL_DATA = Tag("7FE0", "0010")

# (group, element, keyword, kind)
POLICY = [
    # patient
    ("0010", "0030", "PatientBirthDate", SHIFT_DATE),
    ("0010", "0040", "PatientSex", PRESERVE),
    # study
    ("0008", "0020", "StudyDate", SHIFT_DATE),
    ("0020", "000D", "StudyInstanceUID", PRESERVE),
    # series
    ("0008", "0060", "Modality", PRESERVE),
    # equipment
    ("0008", "0070", "Manufacturer", PRESERVE),
    ("0008", "1090", "ManufacturerModelName", PRESERVE),
    ("0018", "1020", "SoftwareVersions", PRESERVE),
    ("0018", "1164", "ImagerPixelSpacing", PRESERVE),
    # image
    ("0028", "0010", "Rows", PRESERVE),
    ("0028", "0011", "Columns", PRESERVE),
    ("0028", "0030", "PixelSpacing", PRESERVE),
    ("0028", "0100", "BitsAllocated", PRESERVE),
    ("0028", "0103", "PixelRepresentation", PRESERVE),
    ("0028", "0106", "SmallestImagePixelValue", PRESERVE),
    ("0028", "0107", "LargestImagePixelValue", PRESERVE),
    ("7FE0", "0010", "PixelData", PRESERVE),
    ("0008", "0016", "SOPClassUID", PRESERVE),
    ("0008", "0018", "SOPInstanceUID", PRESERVE),
    # other
    ("0028", "0004", "PhotometricInterpretation", PRESERVE),
    ("0028", "0101", "BitsStored", PRESERVE),
    ("0028", "0102", "HighBit", PRESERVE),
    ("0002", "0002", "MediaStorageSOPClassUID", PRESERVE),
    ("0002", "0003", "MediaStorageSOPInstanceUID", PRESERVE),
    ("0002", "0010", "TransferSyntaxUID", PRESERVE),
]

# kept by the unmapped-tag sweep
ESSENTIAL_TAGS = frozenset(
    [
        Tag("0008", "0016"),  # SOP Class UID
        Tag("0008", "0018"),  # SOP Instance UID
        Tag("0002", "0010"),  # Transfer Syntax UID
        Tag("0002", "0002"),  # Media Storage SOP Class UID
        Tag("0002", "0003"),  # Media Storage SOP Instance UID
        Tag("0008", "0060"),  # Modality
        Tag("0028", "0004"),  # Photometric Interpretation
    ]
)

ALLOWED_TAGS = frozenset(
    [
        Tag("0028", "0010"),  # Rows
        Tag("0028", "0011"),  # Columns
        Tag("0028", "0100"),  # Bits Allocated
        Tag("0028", "0101"),  # Bits Stored
        Tag("0028", "0102"),  # High Bit
        Tag("0028", "0103"),  # Pixel Representation
        PIXEL_DATA,
    ]
)

# inserted after the sweep when absent
REQUIRED_DEFAULTS = [
    (Tag("0008", "0060"), "CR"),  # Modality
    (Tag("0008", "0070"), "Anonymized"),  # Manufacturer
    (Tag("0010", "0020"), "AnonymizedPatientID"),  # Patient ID
]


def build_rules(source=None):
    """build the ordered rule set

    source: random shift source used by date rules (default: process-wide)
    """
    rules = []
    for group, element, keyword, kind in POLICY:
        tag = Tag(group, element)
        if kind == SHIFT_DATE:
            rules.append(Rule.shift_date(tag, source))
        else:
            rules.append(Rule.preserve(tag))
    return tuple(rules)


# set before writing a file when absent
ENCODE_DEFAULTS = [
    (Tag("0018", "0015"), "UNKNOWN"),  # Body Part Examined
    (Tag("0018", "5101"), "AP"),  # View Position
    (Tag("0020", "0013"), "1"),  # Instance Number
    (Tag("0020", "0011"), "1"),  # Series Number
    (Tag("0008", "0020"), "20240101"),  # Study Date
    (Tag("0008", "0030"), "120000"),  # Study Time
    (Tag("0008", "0050"), "ANON12345"),  # Accession Number
    (Tag("0008", "0090"), "Anonymized Physician"),  # Referring Physician's Name
    (Tag("0020", "0010"), "ANONStudyID"),  # Study ID
    (Tag("0028", "0002"), 1),  # Samples per Pixel
    (Tag("0010", "0030"), "20000101"),  # Patient's Birth Date
    (Tag("0010", "0040"), "O"),  # Patient's Sex
]

# generated before writing a file when absent
GENERATED_UIDS = [
    Tag("0020", "000E"),  # Series Instance UID
    Tag("0020", "000D"),  # Study Instance UID
]
