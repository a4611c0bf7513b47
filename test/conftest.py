""" pytest configuration """
# coding=utf-8

import pytest
import pydicom
from pydicom.dataset import FileDataset, FileMetaDataset
from pydicom.uid import ExplicitVRLittleEndian, generate_uid

from dicomdeid.dataset import DicomDataset, PYDICOM_3

CT_IMAGE_STORAGE = "1.2.840.10008.5.1.4.1.1.2"


def write_dicom(filename, **elements):
    """write small valid DICOM file"""
    uid = generate_uid()
    file_meta = FileMetaDataset()
    file_meta.MediaStorageSOPClassUID = CT_IMAGE_STORAGE
    file_meta.MediaStorageSOPInstanceUID = uid
    file_meta.TransferSyntaxUID = ExplicitVRLittleEndian

    dataset = FileDataset(str(filename), {}, file_meta=file_meta, preamble=b"\0" * 128)
    dataset.SOPClassUID = CT_IMAGE_STORAGE
    dataset.SOPInstanceUID = uid
    for keyword, value in elements.items():
        setattr(dataset, keyword, value)

    if PYDICOM_3:
        dataset.save_as(str(filename), enforce_file_format=True)
    else:
        dataset.is_little_endian = True
        dataset.is_implicit_VR = False
        dataset.save_as(str(filename), write_like_original=False)
    return filename


@pytest.fixture()
def dicomfile(tmpdir):
    """ DICOM file with identifying attributes """
    src = tmpdir.ensure("src", dir=True)
    return write_dicom(
        src.join("image.dcm"),
        PatientName="Test^Patient",
        PatientID="123456",
        PatientBirthDate="20000101",
        PatientSex="M",
        StudyDate="20200101",
        InstitutionName="General Hospital",
        Modality="CT",
        Rows=2,
        Columns=2,
    )


@pytest.fixture()
def corruptfile(tmpdir):
    """ not a DICOM file """
    src = tmpdir.ensure("src", dir=True)
    corrupt = src.join("corrupt.dcm")
    corrupt.write_binary(b"this is not a DICOM file")
    return corrupt


@pytest.fixture()
def make_dataset():
    """ build in-memory dataset from keywords """

    def _make(**elements):
        dataset = pydicom.Dataset()
        for keyword, value in elements.items():
            setattr(dataset, keyword, value)
        return DicomDataset(dataset)

    return _make
