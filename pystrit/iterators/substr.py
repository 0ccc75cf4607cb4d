from __future__ import annotations

import logging

from ..config import IterConfig
from ..runtime.utf8 import Source, as_buffer, decode_char
from ..types import View
from .base import CursorIterator, ViewIterator

logger = logging.getLogger(__name__)

__all__ = ["SubstrIterator", "substr_iter"]


class SubstrIterator(CursorIterator, ViewIterator):
    """Split a buffer on occurrences of a literal needle.

    By default empty segments are skipped, so runs of delimiters collapse.
    After ``all()`` every segment is emitted, matching ``bytes.split``.
    An empty needle yields one view per character.
    """

    def __init__(
        self,
        source: Source,
        needle: str | bytes | bytearray,
        config: IterConfig | None = None,
    ) -> None:
        super().__init__(source, config)
        self._needle = as_buffer(needle, name="needle")
        self._needle_len = len(self._needle)
        self.emit_all = self.config.emit_all
        logger.debug(
            f"SubstrIterator over {self._len} bytes, needle {bytes(self._needle)!r}"
        )

    @property
    def needle(self) -> bytes:
        return bytes(self._needle)

    @property
    def exhausted(self) -> bool:
        """Always True after a pull returned ``None``.

        In default mode a trailing delimiter is only consumed by the pull
        that returns ``None``, so this can stay False after the last view.
        """
        if self._needle_len == 0:
            return self._cursor >= self._len
        return self._cursor > self._len

    def all(self) -> SubstrIterator:
        """Emit every segment, including empty ones."""
        self.emit_all = True
        logger.debug("SubstrIterator: all-mode enabled")
        return self

    def next_view(self) -> View | None:
        if self._cursor > self._len:
            return None

        if self._needle_len == 0:
            return self._next_char()

        while True:
            start = self._cursor
            pos = self._buf.find(self._needle, start)
            if pos < 0:
                # Trailing segment; park the cursor on the sentinel.
                self._cursor = self._len + 1
                logger.debug("SubstrIterator: exhausted")
                if start < self._len or self.emit_all:
                    return self._view(start, self._len)
                return None

            self._cursor = pos + self._needle_len
            if pos > start or self.emit_all:
                return self._view(start, pos)

    def _next_char(self) -> View | None:
        if self._cursor >= self._len:
            return None
        _, width = decode_char(self._buf, self._cursor, self.config.errors)
        start = self._cursor
        self._cursor += width
        return self._view(start, self._cursor)


def substr_iter(
    source: Source, needle: str | bytes | bytearray, config: IterConfig | None = None
) -> SubstrIterator:
    return SubstrIterator(source, needle, config)
