"""
Patterns selecting files or types by name.

A pattern is a tagged union of three matchers: suffix, prefix and regular
expression. Exactly one of them is populated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ConfigurationError


class PatternKind(str, Enum):
    """Variant of a pattern."""

    SUFFIX = "suffix"
    PREFIX = "prefix"
    REGEX = "regex"


@dataclass(frozen=True)
class Pattern:
    """A suffix, prefix or regular expression matcher.

    Attributes:
        kind: Which variant is populated
        value: The suffix, prefix or expression text
    """

    kind: PatternKind
    value: str
    _compiled: re.Pattern | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ConfigurationError(f"The {self.kind.value} pattern must be a non-empty string.")
        if self.kind is PatternKind.REGEX:
            try:
                compiled = re.compile(self.value)
            except re.error as e:
                raise ConfigurationError(f"Invalid regex pattern `{self.value}`: {e}") from e
            object.__setattr__(self, "_compiled", compiled)

    @staticmethod
    def suffix(value: str) -> Pattern:
        return Pattern(PatternKind.SUFFIX, value)

    @staticmethod
    def prefix(value: str) -> Pattern:
        return Pattern(PatternKind.PREFIX, value)

    @staticmethod
    def regex(value: str) -> Pattern:
        return Pattern(PatternKind.REGEX, value)

    @staticmethod
    def from_dict(d: Any) -> Pattern:
        """
        Create a pattern from its configuration form, e.g. `{"suffix": "_events.proto"}`.

        Args:
            d: Dictionary with exactly one of the `suffix`, `prefix` or `regex` keys

        Returns:
            The pattern

        Raises:
            ConfigurationError: If no variant or more than one variant is set
        """
        if not isinstance(d, dict):
            raise ConfigurationError(f"A pattern must be an object, got {d!r}.")
        unknown = set(d) - {kind.value for kind in PatternKind}
        if unknown:
            raise ConfigurationError(f"Unknown pattern keys: {', '.join(sorted(unknown))}.")
        populated = [kind for kind in PatternKind if d.get(kind.value)]
        if not populated:
            raise ConfigurationError("A pattern must set one of `suffix`, `prefix` or `regex`.")
        if len(populated) > 1:
            names = ", ".join(kind.value for kind in populated)
            raise ConfigurationError(f"A pattern must set exactly one variant, got: {names}.")
        kind = populated[0]
        return Pattern(kind, d[kind.value])

    def to_dict(self) -> dict:
        return {self.kind.value: self.value}

    def matches(self, candidate: str) -> bool:
        """
        Check whether the candidate file path or type name matches.

        Regular expressions must match the whole candidate.
        """
        if self.kind is PatternKind.SUFFIX:
            return candidate.endswith(self.value)
        if self.kind is PatternKind.PREFIX:
            return candidate.startswith(self.value)
        return self._compiled.fullmatch(candidate) is not None

    def __str__(self) -> str:
        return f"{self.kind.value}({self.value!r})"


def matches(pattern: Pattern, candidate: str) -> bool:
    """Check whether `candidate` matches `pattern`."""
    return pattern.matches(candidate)
