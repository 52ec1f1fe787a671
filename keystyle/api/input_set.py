"""Input set item value object with per-casing characters."""

from __future__ import annotations

from dataclasses import dataclass

from keystyle.api.actions import KeyboardCase


@dataclass(frozen=True, slots=True)
class InputSetItem:
    """One input-set entry with neutral, uppercased and lowercased variants."""

    neutral: str
    uppercased: str
    lowercased: str

    @classmethod
    def of(cls, char: str) -> InputSetItem:
        """Create an item whose casings derive from a single character."""
        return cls(neutral=char, uppercased=char.upper(), lowercased=char.lower())

    def character(self, casing: KeyboardCase) -> str:
        """Resolve the character to insert for a keyboard casing."""
        if casing.is_uppercased:
            return self.uppercased
        return self.lowercased


__all__ = ["InputSetItem"]
