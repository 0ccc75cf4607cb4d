from __future__ import annotations

from dataclasses import dataclass, field

from .config import DecodeErrors
from .runtime.utf8 import Buffer


@dataclass(frozen=True, eq=False)
class View:
    """A borrowed slice of a source buffer (byte offsets into ``source``).

    The source must not be mutated while views over it are in use.
    Views compare equal to other views with the same offsets and content;
    use ``text`` or ``bytes`` to compare against plain strings.
    """

    source: Buffer = field(repr=False)
    start: int
    end: int
    errors: DecodeErrors = field(default="strict", repr=False)

    @property
    def bytes(self) -> memoryview:
        return memoryview(self.source)[self.start : self.end]

    @property
    def text(self) -> str:
        return bytes(self.source[self.start : self.end]).decode("utf-8", self.errors)

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"View({self.start}, {self.end}, {self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, View):
            return NotImplemented
        return (
            self.start == other.start
            and self.end == other.end
            and self.bytes == other.bytes
        )

    def __hash__(self) -> int:
        return hash(bytes(self.bytes))
