import logging
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from rcopy import cli as tested
from rcopy.copying import Options
from rcopy.version import VERSION

from utils import read_tree, write_tree


def _invoke(args, **kwargs):
    return CliRunner().invoke(tested.main, [str(arg) for arg in args], **kwargs)


def test_version():
    result = _invoke(["--version"])

    assert result.exit_code == 0
    assert VERSION in result.output


def test_help():
    result = _invoke(["-h"])

    assert result.exit_code == 0
    assert "--recursive" in result.output
    assert "--interactive" in result.output


def test_missing_arguments():
    result = _invoke(["only-source"])

    assert result.exit_code == 2


def test_copy_file(tmp_path):
    source = write_tree(tmp_path, {"src.txt": "data"}) / "src.txt"
    destination = tmp_path / "dst.txt"

    result = _invoke([source, destination])

    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert destination.read_text() == "data"


def test_copy_file__verbose(tmp_path):
    source = write_tree(tmp_path, {"src.txt": "data"}) / "src.txt"
    destination = tmp_path / "dst.txt"

    result = _invoke(["-v", source, destination])

    assert result.exit_code == 0, result.output
    assert result.output == f"Copied {source} to {destination}\n"


def test_missing_source(tmp_path):
    result = _invoke([tmp_path / "missing", tmp_path / "dst", "-r"])

    assert result.exit_code == 1
    assert f"Source path does not exist: {tmp_path / 'missing'}" in result.output
    assert list(tmp_path.iterdir()) == []


def test_directory_without_recursive(tmp_path, source_tree):
    destination = tmp_path / "b"

    result = _invoke([source_tree, destination, "-v"])

    assert result.exit_code == 1
    assert "Use the -r flag to copy directories recursively" in result.output
    assert not destination.exists()


def test_recursive_verbose(tmp_path, source_tree):
    destination = tmp_path / "b"

    result = _invoke(["-rv", source_tree, destination])

    assert result.exit_code == 0, result.output
    assert read_tree(destination) == {"sub/y.txt": b"bye", "x.txt": b"hi"}
    assert result.output.splitlines() == [
        f"Copied {source_tree}/sub/y.txt to {destination}/sub/y.txt",
        f"Recursively copied directory {source_tree}/sub to {destination}/sub",
        f"Copied {source_tree}/x.txt to {destination}/x.txt",
        f"Recursively copied directory {source_tree} to {destination}",
    ]


def test_recursive_long_options(tmp_path, source_tree):
    destination = tmp_path / "b"

    result = _invoke(["--recursive", "--verbose", source_tree, destination])

    assert result.exit_code == 0, result.output
    assert read_tree(destination) == read_tree(source_tree)


@pytest.mark.parametrize("answer", ["n\n", "\n", ""])
def test_interactive__decline(tmp_path, answer):
    write_tree(tmp_path, {"src.txt": "new", "dst.txt": "old"})
    destination = tmp_path / "dst.txt"

    result = _invoke(["-i", tmp_path / "src.txt", destination], input=answer)

    assert result.exit_code == 0, result.output
    assert f"Overwrite {destination}? [y/N]: " in result.output
    assert f"Not overwriting {destination}" in result.output
    assert destination.read_text() == "old"


def test_interactive__confirm(tmp_path):
    write_tree(tmp_path, {"src.txt": "new", "dst.txt": "old content"})
    destination = tmp_path / "dst.txt"

    result = _invoke(["--interactive", "-v", tmp_path / "src.txt", destination], input="Y\n")

    assert result.exit_code == 0, result.output
    assert "Not overwriting" not in result.output
    assert f"Copied {tmp_path / 'src.txt'} to {destination}" in result.output
    assert destination.read_text() == "new"


def test_interactive__recursive(tmp_path, source_tree):
    destination = write_tree(tmp_path / "b", {"x.txt": "old x", "sub/y.txt": "old y"})

    # sub/y.txt is visited before x.txt
    result = _invoke(["-ri", source_tree, destination], input="y\nn\n")

    assert result.exit_code == 0, result.output
    assert (destination / "sub" / "y.txt").read_text() == "bye"
    assert (destination / "x.txt").read_text() == "old x"


def test_io_failure(tmp_path):
    source = write_tree(tmp_path, {"src.txt": "data"}) / "src.txt"
    destination = tmp_path / "missing-dir" / "dst.txt"

    result = _invoke([source, destination])

    assert result.exit_code == 1
    assert f"Failed to copy {source} to {destination}" in result.output


def test_symlink_loop_destination(tmp_path, source_tree):
    loop = tmp_path / "loop"
    os.symlink("loop", loop)

    result = _invoke(["-r", source_tree, loop])

    assert result.exit_code == 1
    assert f"Error: {loop}" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_run(tmp_path):
    source = write_tree(tmp_path, {"src.txt": "data"}) / "src.txt"

    assert tested.run(Options(source, tmp_path / "dst.txt")) == 0
    assert tested.run(Options(tmp_path / "missing", tmp_path / "dst.txt")) == 1


def test_setup_logging__debug_env(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")

    with patch("logging.basicConfig") as mock:
        tested._setup_logging()

    assert mock.call_args.kwargs["level"] == logging.DEBUG


def test_setup_logging__default(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)

    with patch("logging.basicConfig") as mock:
        tested._setup_logging()

    assert mock.call_args.kwargs["level"] == logging.WARNING
