"""pystrit - zero-copy substring, predicate and word iterators over text."""

from .config import IterConfig
from .iterators import (
    FuncIterator,
    SubstrIterator,
    ViewIterator,
    func_iter,
    is_word_separator,
    substr_iter,
    word_iter,
)
from .types import View

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "FuncIterator",
    "IterConfig",
    "SubstrIterator",
    "View",
    "ViewIterator",
    "func_iter",
    "is_word_separator",
    "substr_iter",
    "word_iter",
]
