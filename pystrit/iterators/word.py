from __future__ import annotations

import regex

from ..config import IterConfig
from ..runtime.utf8 import Source
from .func import FuncIterator

# Unicode Alphabetic (including combining vowel signs) or Numeric.
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}]")


def is_word_separator(ch: str) -> bool:
    return _WORD_CHAR.fullmatch(ch) is None


def word_iter(source: Source, config: IterConfig | None = None) -> FuncIterator:
    """Iterate over runs of alphanumeric characters."""
    return FuncIterator(source, is_word_separator, config)
