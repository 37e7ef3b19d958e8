from __future__ import annotations

from typing import BinaryIO

SAMPLE_SIZE = 8 << 10  # 8 KiB

_ALWAYS_OK = {0x09, 0x0A, 0x0D}  # \t \n \r


def _printable(b: int) -> bool:
    # bytes map to the Latin-1 code point of the same value
    return b != 0 and chr(b).isprintable()


def is_binary(sample: bytes) -> bool:
    """
    Heuristic: more than 10% non-printable bytes means binary.

    Only single-byte text is judged reliably; UTF-8 heavy in non-ASCII
    characters can look binary, and that is accepted.
    """
    if not sample:
        return False

    non_printable = 0
    for b in sample:
        if b in _ALWAYS_OK:
            continue
        if not _printable(b):
            non_printable += 1

    return non_printable * 10 > len(sample)


def read_sample(fh: BinaryIO, size: int = SAMPLE_SIZE) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        chunk = fh.read(size - len(buf))
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)
