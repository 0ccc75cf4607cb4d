from __future__ import annotations

import mmap

Buffer = bytes | bytearray | mmap.mmap
Source = str | Buffer


def as_buffer(source: object, *, name: str = "source") -> Buffer:
    """Return ``source`` as a UTF-8 byte buffer.

    ``str`` is encoded once; byte buffers are returned as-is and never copied.
    """
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, mmap.mmap)):
        return source
    raise TypeError(
        f"{name} must be str, bytes, bytearray or mmap, "
        f"got {type(source).__name__}"
    )


def char_width(lead: int) -> int:
    """Width in bytes of the UTF-8 sequence starting with ``lead``."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    # Continuation or invalid lead byte.
    return 1


def decode_char(buf: Buffer, offset: int, errors: str = "strict") -> tuple[str, int]:
    """Decode the character at ``offset`` and return it with its encoded width."""
    width = min(char_width(buf[offset]), len(buf) - offset)
    chunk = bytes(buf[offset : offset + width])
    if errors == "strict":
        return chunk.decode("utf-8"), width
    try:
        return chunk.decode("utf-8"), width
    except UnicodeDecodeError:
        # Resynchronise on the next byte.
        return "\ufffd", 1
