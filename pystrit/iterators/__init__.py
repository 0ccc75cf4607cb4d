from .base import CursorIterator, ViewIterator
from .func import FuncIterator, func_iter
from .substr import SubstrIterator, substr_iter
from .word import is_word_separator, word_iter

__all__ = [
    "CursorIterator",
    "FuncIterator",
    "SubstrIterator",
    "ViewIterator",
    "func_iter",
    "is_word_separator",
    "substr_iter",
    "word_iter",
]
