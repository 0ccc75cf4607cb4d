from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import IterConfig
from ..runtime.utf8 import Source, decode_char
from ..types import View
from .base import CursorIterator, ViewIterator

logger = logging.getLogger(__name__)

__all__ = ["FuncIterator", "func_iter"]

Predicate = Callable[[str], bool]


class FuncIterator(CursorIterator, ViewIterator):
    """Yield maximal runs of characters for which ``predicate`` is false.

    Characters matching ``predicate`` are separators. Separator runs always
    collapse, so no empty view is ever produced.
    """

    def __init__(
        self,
        source: Source,
        predicate: Predicate,
        config: IterConfig | None = None,
    ) -> None:
        if not callable(predicate):
            raise TypeError(
                f"predicate must be callable, got {type(predicate).__name__}"
            )
        super().__init__(source, config)
        self.predicate = predicate
        logger.debug(f"FuncIterator over {self._len} bytes")

    @property
    def exhausted(self) -> bool:
        """True once the cursor reached the end; trailing separators delay it."""
        return self._cursor >= self._len

    def next_view(self) -> View | None:
        if self._cursor >= self._len:
            return None

        i = self._cursor
        in_token = False
        while i < self._len:
            ch, width = decode_char(self._buf, i, self.config.errors)
            if self.predicate(ch):
                if in_token:
                    view = self._view(self._cursor, i)
                    self._cursor = i + width
                    return view
                self._cursor = i + width
            elif not in_token:
                self._cursor = i
                in_token = True
            i += width

        start = self._cursor
        self._cursor = self._len
        logger.debug("FuncIterator: exhausted")
        if in_token:
            return self._view(start, self._len)
        return None


def func_iter(
    source: Source, predicate: Predicate, config: IterConfig | None = None
) -> FuncIterator:
    return FuncIterator(source, predicate, config)
