""" DICOM de-identification cli """

# coding=utf-8
import os
import logging
import argparse

from . import tools


def cli(argv=None):
    """Entry point into command-line utility"""

    # make parser
    parser = make_parser()

    # parse arguments
    args = parser.parse_args(argv)

    if not os.path.isdir(args.input_folder):
        parser.error(f"Input folder does not exist: {args.input_folder}")

    logging.basicConfig(level=logging.INFO)
    try:
        report = tools.anonymize_folder(args.input_folder, args.output_folder)
    except tools.InputFolderError as exc:
        print(f"An error occurred: {exc}")
        return

    print(
        f"Anonymization complete: {len(report.written)} files were created "
        f"in '{args.output_folder}' ({len(report.failed)} failed)"
    )


def make_parser():
    """command-line parser"""
    help = "Anonymize the DICOM files of a folder."
    parser = argparse.ArgumentParser(
        "dicom-deid", description=help, allow_abbrev=False
    )
    parser.add_argument(
        "--InputFolder",
        "--input-folder",
        dest="input_folder",
        metavar="DIR",
        required=True,
        help="Folder containing the DICOM files (*.dcm).",
    )
    parser.add_argument(
        "--OutputFolder",
        "--output-folder",
        dest="output_folder",
        metavar="DIR",
        required=True,
        help="Destination folder of the anonymized files.",
    )
    return parser


if __name__ == "__main__":
    cli()
