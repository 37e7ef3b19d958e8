import io
import os

import pytest

from llmcat.core.emitter import delimiter, emit_file
from llmcat.core.schemas import CatConfig
from llmcat.core.sniff import SAMPLE_SIZE


@pytest.fixture
def out():
    return io.BytesIO()


def test_emits_delimiter_content_and_trailing_newline(tmp_path, out):
    fp = tmp_path / "a.txt"
    fp.write_bytes(b"hello")

    res = emit_file(str(fp), CatConfig(), out)

    assert res.outcome == "emitted"
    assert res.size == 5
    assert out.getvalue() == b"\n--- " + os.fsencode(str(fp)) + b" ---\nhello\n"


def test_content_is_copied_verbatim(tmp_path, out):
    data = b"line 1\r\nline 2\n\n\ttabbed\n"
    fp = tmp_path / "crlf.txt"
    fp.write_bytes(data)

    emit_file(str(fp), CatConfig(), out)

    assert out.getvalue() == delimiter(str(fp)) + data + b"\n"


def test_names_only_never_touches_the_file(tmp_path, out):
    missing = str(tmp_path / "not-there.txt")

    res = emit_file(missing, CatConfig(names_only=True), out)

    assert res.outcome == "listed"
    assert out.getvalue() == os.fsencode(missing) + b"\n"


def test_too_large_is_skipped_without_output(tmp_path, out):
    fp = tmp_path / "big.txt"
    fp.write_bytes(b"hello")

    res = emit_file(str(fp), CatConfig(max_size=4), out)

    assert res.outcome == "too_large"
    assert res.skipped
    assert "size 5 bytes exceeds limit 4" in res.detail
    assert out.getvalue() == b""


def test_size_equal_to_limit_is_emitted(tmp_path, out):
    fp = tmp_path / "edge.txt"
    fp.write_bytes(b"hello")

    assert emit_file(str(fp), CatConfig(max_size=5), out).outcome == "emitted"


def test_zero_max_size_means_unlimited(tmp_path, out):
    fp = tmp_path / "any.txt"
    fp.write_bytes(b"x" * 4096)

    assert emit_file(str(fp), CatConfig(max_size=0), out).outcome == "emitted"


def test_binary_is_skipped_without_delimiter(tmp_path, out):
    fp = tmp_path / "blob.bin"
    fp.write_bytes(bytes(range(256)) * 8)

    res = emit_file(str(fp), CatConfig(), out)

    assert res.outcome == "binary"
    assert out.getvalue() == b""


def test_only_the_first_8k_are_sniffed(tmp_path, out):
    data = b"a" * SAMPLE_SIZE + b"\x00" * 1024
    fp = tmp_path / "tail.dat"
    fp.write_bytes(data)

    res = emit_file(str(fp), CatConfig(), out)

    assert res.outcome == "emitted"
    assert out.getvalue() == delimiter(str(fp)) + data + b"\n"


def test_empty_file_is_emitted(tmp_path, out):
    fp = tmp_path / "empty.txt"
    fp.write_bytes(b"")

    emit_file(str(fp), CatConfig(), out)

    assert out.getvalue() == delimiter(str(fp)) + b"\n"


def test_missing_file_is_an_access_error(tmp_path, out):
    res = emit_file(str(tmp_path / "gone.txt"), CatConfig(), out)

    assert res.outcome == "access_error"
    assert res.failed
    assert out.getvalue() == b""


def test_copy_failure_is_an_io_error(tmp_path, out, monkeypatch):
    fp = tmp_path / "a.txt"
    fp.write_bytes(b"hello")

    def boom(src, dst):
        raise OSError("disk on fire")

    monkeypatch.setattr("llmcat.core.emitter.shutil.copyfileobj", boom)
    res = emit_file(str(fp), CatConfig(), out)

    assert res.outcome == "io_error"
    assert "disk on fire" in res.detail


def test_directory_passed_as_file_is_an_io_error(tmp_path, out):
    res = emit_file(str(tmp_path), CatConfig(), out)

    assert res.outcome == "io_error"
    assert out.getvalue() == b""
