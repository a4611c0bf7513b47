""" rule-driven de-identification of DICOM files """
# coding=utf-8
from .version import __version__
from .tags import Tag, AttributeValue
from .rules import Rule, RandomShiftSource, FixedShiftSource
from .policy import build_rules
from .dataset import DicomDataset, decode, encode, CodecError, DecodeError, EncodeError
from .engine import Anonymizer, TransformReport
from .tools import anonymize_folder, anonymize_file, InputFolderError, BatchReport
