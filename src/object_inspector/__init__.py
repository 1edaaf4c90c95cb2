"""Object inspector - key search, flattening and field diffs for object graphs."""

from __future__ import annotations

import logging

from object_inspector.api import diff, flatten, search
from object_inspector.config import IndexStyle, SearchConfig
from object_inspector.console import ConsoleLog
from object_inspector.fields import compare_field, same_value, strict_equal
from object_inspector.flattening import iter_leaves
from object_inspector.kinds import ValueKind, classify, is_iterable
from object_inspector.key_search import KeySearch

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConsoleLog",
    "IndexStyle",
    "KeySearch",
    "SearchConfig",
    "ValueKind",
    "classify",
    "compare_field",
    "diff",
    "flatten",
    "is_iterable",
    "iter_leaves",
    "same_value",
    "search",
    "strict_equal",
]
