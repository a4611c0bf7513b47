""" pydicom wrapper: tag/value dataset and file codec """
# coding=utf-8
import pathlib
import logging
import pydicom
from pydicom.dataset import FileMetaDataset
from pydicom.uid import UID, ExplicitVRLittleEndian, ImplicitVRLittleEndian

from .tags import Tag
from .policy import ENCODE_DEFAULTS, GENERATED_UIDS

LOGGER = logging.getLogger(__name__)

# exceptions
InvalidDicomError = pydicom.errors.InvalidDicomError

# values that cannot be rewritten as strings
OPAQUE_VRS = {"OB", "OD", "OF", "OL", "OV", "OW", "SQ", "UN", "UT"}

# numeric strings, rules apply to each value
LIST_VRS = {"DS", "IS"}

# pydicom 3 sets encoding at write time
PYDICOM_3 = int(pydicom.__version__.split(".")[0]) >= 3

INT_VRS = {"US", "SS", "UL", "SL", "UV", "SV"}
FLOAT_VRS = {"FL", "FD"}


class CodecError(Exception):
    """raise when a DICOM file cannot be read or written"""


class DecodeError(CodecError):
    """raise when a DICOM file cannot be read"""


class EncodeError(CodecError):
    """raise when a DICOM file cannot be written"""


def is_opaque(vr):
    """True if VR cannot be safely handled as a string"""
    if not vr:
        return True
    return any(part in OPAQUE_VRS for part in str(vr).split(" or "))


def is_list(vr):
    """True if VR is a numeric string list"""
    return str(vr) in LIST_VRS


class DicomDataset:
    """mutable Tag -> string mapping on top of a pydicom dataset

    File meta elements (group 0002) are handled in the same namespace.
    """

    def __init__(self, dataset, filename=None):
        self.dataset = dataset
        self.filename = filename

    def __repr__(self):
        return f"DicomDataset({self.filename or '<memory>'}, {len(self)} elements)"

    def __len__(self):
        return len(list(iter(self)))

    def __iter__(self):
        """iterate tags: file meta first, then dataset"""
        for element in self._meta():
            yield Tag.from_int(int(element.tag))
        for element in self.dataset:
            yield Tag.from_int(int(element.tag))

    def __contains__(self, tag):
        return tag.value in self._container(tag)

    @property
    def file_meta(self):
        """file meta dataset (created if missing)"""
        meta = getattr(self.dataset, "file_meta", None)
        if meta is None:
            meta = FileMetaDataset()
            self.dataset.file_meta = meta
        return meta

    def element(self, tag):
        """pydicom data element"""
        return self._container(tag)[tag.value]

    def vr(self, tag):
        return str(self.element(tag).VR)

    def is_empty(self, tag):
        """True if tag is missing or has no value"""
        if not tag in self:
            return True
        value = self.element(tag).value
        return value is None or value == "" or value == b"" or value == []

    def get(self, tag, default=None):
        """string value of tag (multiple values are joined with '\\')"""
        if not tag in self:
            return default
        value = self.element(tag).value
        if value is None:
            return None
        elif isinstance(value, bytes):
            raise TypeError(f"Binary value for tag {tag}")
        elif isinstance(value, (pydicom.multival.MultiValue, list, tuple)):
            return "\\".join(str(item) for item in value)
        return str(value)

    def get_values(self, tag):
        """list of string values of tag"""
        value = self.element(tag).value
        if value is None or value == "":
            return []
        elif isinstance(value, (pydicom.multival.MultiValue, list, tuple)):
            return [str(item) for item in value]
        return [str(value)]

    def set(self, tag, value):
        """insert or overwrite tag's value (str or list of str)"""
        container = self._container(tag, create=True)
        if tag.value in container:
            element = container[tag.value]
            element.value = cast_value(value, element.VR)
            return
        try:
            vr = pydicom.datadict.dictionary_VR(tag.value)
        except KeyError:
            raise ValueError(f"Unknown VR for tag: {tag}")
        container.add_new(tag.value, vr, cast_value(value, vr))

    def remove(self, tag):
        del self._container(tag)[tag.value]

    def _meta(self):
        meta = getattr(self.dataset, "file_meta", None)
        return meta if meta is not None else []

    def _container(self, tag, create=False):
        if tag.group == "0002":
            if create:
                return self.file_meta
            meta = getattr(self.dataset, "file_meta", None)
            return meta if meta is not None else {}
        return self.dataset


def cast_value(value, vr):
    """cast string value(s) to VR's python type"""
    if value is None:
        return None
    elif isinstance(value, (list, tuple)):
        return [cast_value(item, vr) for item in value]
    vr = str(vr).split(" or ")[0]
    if vr in INT_VRS:
        return int(value)
    elif vr in FLOAT_VRS:
        return float(value)
    return value


def decode(path):
    """read DICOM file"""
    LOGGER.debug(f"Loading file: {path}")
    try:
        dataset = pydicom.dcmread(str(path))
    except (InvalidDicomError, OSError, EOFError, ValueError) as exc:
        raise DecodeError(f"Could not read DICOM file: {path} ({exc})") from exc
    return DicomDataset(dataset, filename=str(path))


def encode(dicom, path, fill_missing=True):
    """write DICOM file

    fill_missing: add default values for missing required attributes
    """
    path = pathlib.Path(path)
    try:
        if fill_missing:
            add_missing_attributes(dicom)
        ensure_instance_uid(dicom)
        update_file_meta(dicom)

        LOGGER.debug(f"Writing file: {path}")
        if PYDICOM_3:
            dicom.dataset.save_as(str(path), enforce_file_format=True)
        else:
            dicom.dataset.save_as(str(path), write_like_original=False)

        # check file can be read back
        pydicom.dcmread(str(path))
    except (
        InvalidDicomError,
        OSError,
        EOFError,
        ValueError,
        TypeError,
        AttributeError,
    ) as exc:
        raise EncodeError(f"Could not write DICOM file: {path} ({exc})") from exc
    return path


def add_missing_attributes(dicom):
    """set default values of missing attributes"""
    for tag, value in ENCODE_DEFAULTS:
        if not tag in dicom:
            LOGGER.debug(f"Add missing attribute {tag}: {value}")
            dicom.set(tag, value)

    for tag in GENERATED_UIDS:
        if not tag in dicom:
            LOGGER.debug(f"Add missing UID: {tag}")
            dicom.set(tag, pydicom.uid.generate_uid())


def ensure_instance_uid(dicom):
    """regenerate SOP Instance UID if missing or invalid"""
    dataset = dicom.dataset
    uid = dataset.get("SOPInstanceUID")
    if uid and UID(str(uid)).is_valid:
        return
    LOGGER.warning(f"Invalid SOP Instance UID ({uid}), regenerating.")
    dataset.SOPInstanceUID = pydicom.uid.generate_uid()


def update_file_meta(dicom):
    """make file meta information consistent with dataset"""
    dataset = dicom.dataset
    meta = dicom.file_meta

    if not "MediaStorageSOPClassUID" in meta and "SOPClassUID" in dataset:
        meta.MediaStorageSOPClassUID = dataset.SOPClassUID
    if "SOPInstanceUID" in dataset:
        meta.MediaStorageSOPInstanceUID = dataset.SOPInstanceUID

    if not "TransferSyntaxUID" in meta:
        if is_implicit(dataset):
            meta.TransferSyntaxUID = ImplicitVRLittleEndian
        else:
            meta.TransferSyntaxUID = ExplicitVRLittleEndian

    if not PYDICOM_3 and getattr(dataset, "is_little_endian", None) is None:
        syntax = UID(meta.TransferSyntaxUID)
        dataset.is_little_endian = syntax.is_little_endian
        dataset.is_implicit_VR = syntax.is_implicit_VR


def is_implicit(dataset):
    """True if dataset was read with implicit VR"""
    if PYDICOM_3:
        return getattr(dataset, "original_encoding", (None, None))[0]
    return getattr(dataset, "is_implicit_VR", None)
