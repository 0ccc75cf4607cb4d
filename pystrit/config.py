from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DecodeErrors = Literal["strict", "replace"]


@dataclass(frozen=True)
class IterConfig:
    """Per-iterator configuration.

    Keep this frozen+hashable so iterators can share a single instance.
    """

    # Initial all-mode for substring iterators; predicate iterators ignore it.
    emit_all: bool = False

    # Decode error policy used when stepping characters and decoding views.
    errors: DecodeErrors = "strict"

    def __post_init__(self):
        if self.errors not in ("strict", "replace"):
            raise ValueError(
                f"errors must be 'strict' or 'replace', got {self.errors!r}"
            )
