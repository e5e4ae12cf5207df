"""Unit tests for the SafeWriter class in dir2tree CLI."""

import errno
from unittest.mock import patch

import pytest

from dir2tree.cli.safe_writer import SafeWriter


def test_safe_writer_init_with_fd():
    writer = SafeWriter(3)

    assert writer.file == 3
    assert writer.fd == 3
    assert writer.encoding == "utf-8"
    assert writer._file_obj is None
    assert not writer._closed


def test_safe_writer_invalid_type():
    with pytest.raises(TypeError):
        SafeWriter(3.5)


def test_write_to_file_with_encoding(tmp_path):
    target = tmp_path / "tree.txt"

    with SafeWriter(target, encoding="utf-8") as writer:
        writer.write("└── Project\n")
        writer.write("    ├── README.md\n")

    assert target.read_bytes() == "└── Project\n    ├── README.md\n".encode("utf-8")


def test_write_with_other_encoding(tmp_path):
    target = tmp_path / "tree.txt"

    with SafeWriter(target, encoding="utf-16") as writer:
        writer.write("└── Données")

    assert target.read_text(encoding="utf-16") == "└── Données"


def test_unencodable_text(tmp_path):
    with SafeWriter(tmp_path / "tree.txt", encoding="ascii") as writer:
        with pytest.raises(UnicodeEncodeError):
            writer.write("└── Project")


def test_write_after_close(tmp_path):
    writer = SafeWriter(tmp_path / "tree.txt")
    writer.close()
    writer.close()  # closing twice is harmless

    with pytest.raises(ValueError):
        writer.write("data")


def test_broken_pipe():
    writer = SafeWriter(3)
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            writer.write("data")


def test_other_os_errors_propagate():
    writer = SafeWriter(3)
    with patch("os.write", side_effect=OSError(errno.EIO, "I/O error")):
        with pytest.raises(OSError) as exc_info:
            writer.write("data")
    assert exc_info.value.errno == errno.EIO
