"""
Selection module.

Patterns and selectors deciding which generation behaviors apply to
which schema types.
"""

from __future__ import annotations

from .patterns import Pattern, PatternKind, matches
from .selectors import PatternTarget, TypeSelector

__all__ = [
    "Pattern",
    "PatternKind",
    "PatternTarget",
    "TypeSelector",
    "matches",
]
