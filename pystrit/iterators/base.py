from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Protocol

from ..config import IterConfig
from ..runtime.utf8 import Source, as_buffer
from ..types import View

logger = logging.getLogger(__name__)


class ViewIterator(Protocol):
    @property
    def exhausted(self) -> bool:
        """True once a pull has returned ``None``; may turn True earlier."""
        ...

    def next_view(self) -> View | None: ...

    def reset(self) -> None: ...

    def count(self) -> int: ...

    def for_each(self, fn: Callable[[View], object]) -> None: ...


class CursorIterator:
    """Shared state and pull protocol for iterators driven by a byte cursor.

    Subclasses provide ``next_view`` and ``exhausted``.
    """

    def __init__(self, source: Source, config: IterConfig | None = None) -> None:
        self.config = config or IterConfig()
        self._buf = as_buffer(source)
        self._len = len(self._buf)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def _view(self, start: int, end: int) -> View:
        return View(self._buf, start, end, self.config.errors)

    def reset(self) -> None:
        logger.debug(f"{type(self).__name__}: reset from cursor {self._cursor}")
        self._cursor = 0

    def __iter__(self) -> Iterator[View]:
        return self

    def __next__(self) -> View:
        view = self.next_view()
        if view is None:
            raise StopIteration
        return view

    def count(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def for_each(self, fn: Callable[[View], object]) -> None:
        for view in self:
            fn(view)
