""" test command-line utility """
# coding=utf-8

import os
import pytest

from dicomdeid import cli


def test_cli(dicomfile, tmpdir, capsys):
    src = str(tmpdir.join("src"))
    dest = str(tmpdir.join("dest"))
    cli.cli(["--InputFolder", src, "--OutputFolder", dest])
    assert os.listdir(dest) == ["image.dcm"]
    out = capsys.readouterr().out
    assert "Anonymization complete" in out
    assert "1 files were created" in out

    # aliases
    dest = str(tmpdir.join("dest2"))
    cli.cli(["--input-folder", src, "--output-folder", dest])
    assert os.listdir(dest) == ["image.dcm"]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--InputFolder", "src"],
        ["--InputFolder", "src", "--OutputFolder"],
        ["--InputFolder", "src", "--OutputFolder", "dest", "--Other", "x"],
        ["--Input", "src", "--OutputFolder", "dest"],
    ],
)
def test_cli_usage(argv, tmpdir, monkeypatch):
    monkeypatch.chdir(tmpdir)
    tmpdir.mkdir("src")
    with pytest.raises(SystemExit) as exc:
        cli.cli(argv)
    assert exc.value.code == 2


def test_cli_missing_input(tmpdir):
    with pytest.raises(SystemExit) as exc:
        cli.cli(["--InputFolder", str(tmpdir.join("missing")), "--OutputFolder", str(tmpdir)])
    assert exc.value.code == 2
