"""
Type selectors combining a fixed trait with an optional pattern refinement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..descriptors.nodes import SchemaType, Trait
from ..errors import ConfigurationError
from .patterns import Pattern


class PatternTarget(str, Enum):
    """What a selector pattern is matched against."""

    FILE = "file"  # Path of the declaring schema file
    TYPE = "type"  # Fully-qualified name of the type


@dataclass(frozen=True)
class TypeSelector:
    """Decides whether a generation task applies to a schema type.

    A type is selected when it has the required trait (if any) and its
    selection key matches the pattern (if any). At least one of the two
    criteria must be present.
    """

    trait: Trait | None = None
    pattern: Pattern | None = None
    target: PatternTarget = PatternTarget.FILE

    def __post_init__(self):
        if self.trait is None and self.pattern is None:
            raise ConfigurationError("A selector must define a trait, a pattern, or both.")

    @staticmethod
    def from_dict(d: Any) -> TypeSelector:
        """
        Create a selector from its configuration form.

        Example: `{"trait": "entity_state", "pattern": {"prefix": "acme/"}, "target": "file"}`

        Raises:
            ConfigurationError: If the selector is empty or refers to unknown values
        """
        if not isinstance(d, dict):
            raise ConfigurationError(f"A selector must be an object, got {d!r}.")

        trait = None
        if d.get("trait") is not None:
            try:
                trait = Trait(d["trait"])
            except ValueError as e:
                known = ", ".join(t.value for t in Trait)
                raise ConfigurationError(f"Unknown trait `{d['trait']}`, expected one of: {known}.") from e

        pattern = Pattern.from_dict(d["pattern"]) if "pattern" in d else None

        try:
            target = PatternTarget(d.get("target", PatternTarget.FILE.value))
        except ValueError as e:
            raise ConfigurationError(f"Unknown pattern target `{d['target']}`.") from e

        return TypeSelector(trait=trait, pattern=pattern, target=target)

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"target": self.target.value}
        if self.trait is not None:
            result["trait"] = self.trait.value
        if self.pattern is not None:
            result["pattern"] = self.pattern.to_dict()
        return result

    def with_trait(self, trait: Trait) -> TypeSelector:
        """Return a selector additionally requiring `trait`."""
        if self.trait is not None and self.trait is not trait:
            raise ConfigurationError(f"Selector already requires `{self.trait.value}`, cannot also require `{trait.value}`.")
        return TypeSelector(trait=trait, pattern=self.pattern, target=self.target)

    def selection_key(self, schema_type: SchemaType) -> str:
        return schema_type.file if self.target is PatternTarget.FILE else schema_type.full_name

    def selects(self, schema_type: SchemaType) -> bool:
        if self.trait is not None and not schema_type.has_trait(self.trait):
            return False
        if self.pattern is not None and not self.pattern.matches(self.selection_key(schema_type)):
            return False
        return True

    def __str__(self) -> str:
        parts = []
        if self.trait is not None:
            parts.append(self.trait.value)
        if self.pattern is not None:
            parts.append(f"{self.target.value}~{self.pattern}")
        return " & ".join(parts)
