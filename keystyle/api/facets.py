"""Facet identifiers, resolution context and override contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from keystyle.api.actions import KeyboardAction
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.style import (
    BorderStyle,
    Color,
    EdgeInsets,
    FontWeight,
    ImageRef,
    KeyboardFont,
    ShadowStyle,
)

if TYPE_CHECKING:
    from keystyle.api.resolver import StyleResolver


class Facet(StrEnum):
    """Independently resolved key style property."""

    BACKGROUND_COLOR = "background_color"
    BACKGROUND_OPACITY = "background_opacity"
    FOREGROUND_COLOR = "foreground_color"
    FONT = "font"
    FONT_SIZE = "font_size"
    FONT_WEIGHT = "font_weight"
    CORNER_RADIUS = "corner_radius"
    BORDER = "border"
    SHADOW = "shadow"
    CONTENT_INSETS = "content_insets"
    BOTTOM_MARGIN = "bottom_margin"
    ICON = "icon"
    LABEL = "label"
    ICON_SCALE_FACTOR = "icon_scale_factor"


@dataclass(frozen=True, slots=True)
class FacetContext:
    """Inputs of one facet resolution.

    `resolver` lets a rule consult other facets of the same composition
    (font size looks at the resolved icon and label).
    """

    action: KeyboardAction
    environment: EnvironmentSnapshot
    pressed: bool
    resolver: StyleResolver


type FacetRule[T] = Callable[[FacetContext], T]
type OverrideGuard = Callable[[FacetContext], bool]


@dataclass(frozen=True, slots=True)
class FacetOverride[T]:
    """Ordered exception to a base rule.

    `resolve` runs only when `guard` holds; returning None means no opinion and
    evaluation continues with the next override, then the base rule.
    """

    name: str
    facet: Facet
    guard: OverrideGuard
    resolve: Callable[[FacetContext], T | None]


@dataclass(frozen=True, slots=True)
class FacetRules:
    """Base rule per facet. Field names match `Facet` values."""

    background_color: FacetRule[Color]
    background_opacity: FacetRule[float]
    foreground_color: FacetRule[Color]
    font: FacetRule[KeyboardFont]
    font_size: FacetRule[float]
    font_weight: FacetRule[FontWeight | None]
    corner_radius: FacetRule[float | None]
    border: FacetRule[BorderStyle]
    shadow: FacetRule[ShadowStyle]
    content_insets: FacetRule[EdgeInsets]
    bottom_margin: FacetRule[float]
    icon: FacetRule[ImageRef | None]
    label: FacetRule[str | None]
    icon_scale_factor: FacetRule[float]


def parse_facet(raw: Facet | str) -> Facet:
    """Normalize a facet name; unknown names raise ValueError."""
    if isinstance(raw, Facet):
        return raw
    normalized = str(raw).strip().lower()
    try:
        return Facet(normalized)
    except ValueError:
        raise ValueError(f"unknown style facet: {raw!r}") from None


__all__ = [
    "Facet",
    "FacetContext",
    "FacetOverride",
    "FacetRule",
    "FacetRules",
    "OverrideGuard",
    "parse_facet",
]
