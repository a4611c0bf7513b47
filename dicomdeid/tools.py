""" DICOM tools """
# coding=utf-8
import pathlib
import logging

from . import dataset as codec
from .engine import Anonymizer

LOGGER = logging.getLogger(__name__)


class InputFolderError(FileNotFoundError):
    """raise when the input folder does not exist"""


class BatchReport:
    """files written and failed during a batch"""

    def __init__(self):
        self.written = []
        self.failed = []

    def __len__(self):
        return len(self.written)

    def __repr__(self):
        return f"BatchReport(written={len(self.written)}, failed={len(self.failed)})"


def anonymize_folder(src, dest, anonymizer=None, pattern="*.dcm", fill_missing=True):
    """anonymize all matching DICOM files of a folder

    Files are written in dest with their original name.
    Failed files are logged and skipped.
    """
    src = pathlib.Path(src)
    dest = pathlib.Path(dest)
    if not src.is_dir():
        raise InputFolderError(f"Input directory not found: {src}")
    if anonymizer is None:
        anonymizer = Anonymizer()

    files = sorted(file for file in src.glob(pattern) if file.is_file())
    LOGGER.info(f"Anonymizing {len(files)} files from: '{src}'")
    dest.mkdir(parents=True, exist_ok=True)

    report = BatchReport()
    for infile in files:
        outfile = dest / infile.name
        try:
            anonymize_file(infile, outfile, anonymizer, fill_missing=fill_missing)
        except codec.CodecError as exc:
            LOGGER.error(f"Error processing file: {infile} ({exc})")
            report.failed.append(infile)
            continue
        except Exception as exc:
            LOGGER.exception(f"Unexpected error processing file: {infile} ({exc})")
            report.failed.append(infile)
            continue
        LOGGER.info(f"Successfully anonymized DICOM file: {infile} and saved to {outfile}")
        report.written.append(outfile)
    return report


def anonymize_file(src, dest, anonymizer=None, fill_missing=True):
    """anonymize a single DICOM file"""
    if anonymizer is None:
        anonymizer = Anonymizer()
    dicom = codec.decode(src)
    report = anonymizer.transform(dicom)
    if report.failed:
        LOGGER.warning(f"{len(report.failed)} tags could not be processed in: {src}")
    dest = pathlib.Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    return codec.encode(dicom, dest, fill_missing=fill_missing)
