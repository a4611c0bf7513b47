from setuptools import setup, find_packages

with open("dicomdeid/version.py") as version_file:
    exec(version_file.read())

setup(
    name="dicomdeid",
    version=__version__,
    packages=find_packages(include=["dicomdeid", "dicomdeid.*"]),
    install_requires=["pydicom>=2.4"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["dicom-deid = dicomdeid.cli:cli"]},
    description="Rule-driven de-identification of DICOM files with pydicom",
)
