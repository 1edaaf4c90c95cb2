"""SearchConfig and IndexStyle for key-search configuration.

SearchConfig is a frozen (immutable) dataclass holding the traversal
options.  IndexStyle selects how sequence positions are reported and
matched: as integers or as their decimal strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["IndexStyle", "SearchConfig"]


class IndexStyle(StrEnum):
    """How sequence positions appear as keys during a search.

    - INT: Positions are ``int`` (``0``, ``1``, ...).
    - STR: Positions are decimal strings (``"0"``, ``"1"``, ...), matching
           text-keyed object dumps.

    STR reproduces the key lists a JavaScript ``Object.keys`` walk would report
    for arrays.
    """

    INT = auto()
    STR = auto()


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable configuration for KeySearch.

    Attributes:
        index_style: How sequence positions are reported and matched.  Plain
            strings ("int", "str") are accepted and coerced.
        include_attributes: When True (default), plain objects are walked
            through their instance attributes.  When False, only mappings and
            sequences are descended into.
    """

    index_style: IndexStyle = IndexStyle.INT
    include_attributes: bool = True

    def __post_init__(self) -> None:
        try:
            style = IndexStyle(self.index_style)
        except ValueError:
            allowed = [s.value for s in IndexStyle]
            msg = f"index_style must be one of {allowed}, got {self.index_style!r}"
            raise ValueError(msg) from None
        # Frozen dataclass: bypass __setattr__ to store the coerced value.
        object.__setattr__(self, "index_style", style)
        if not isinstance(self.include_attributes, bool):
            msg = f"include_attributes must be a bool, got {self.include_attributes!r}"
            raise ValueError(msg)
