"""Renderer-agnostic style value types for keyboard keys and callouts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum

from keystyle.api.environment import EnvironmentSnapshot


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with channels in 0..1."""

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    @classmethod
    def from_hex(cls, raw: str) -> Color:
        """Parse `#rgb`, `#rgba`, `#rrggbb` or `#rrggbbaa`; malformed input yields opaque white."""
        normalized = str(raw).strip().lower()
        if not normalized.startswith("#"):
            return cls(1.0, 1.0, 1.0, 1.0)
        value = normalized.removeprefix("#")
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value) + "ff"
        elif len(value) == 4:
            value = "".join(ch * 2 for ch in value)
        elif len(value) == 6:
            value = value + "ff"
        if len(value) != 8:
            return cls(1.0, 1.0, 1.0, 1.0)
        try:
            r = int(value[0:2], 16)
            g = int(value[2:4], 16)
            b = int(value[4:6], 16)
            a = int(value[6:8], 16)
        except ValueError:
            return cls(1.0, 1.0, 1.0, 1.0)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @property
    def hex(self) -> str:
        r = max(0, min(255, int(round(self.red * 255.0))))
        g = max(0, min(255, int(round(self.green * 255.0))))
        b = max(0, min(255, int(round(self.blue * 255.0))))
        a = max(0, min(255, int(round(self.opacity * 255.0))))
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"

    def with_opacity(self, factor: float) -> Color:
        """Multiply the current opacity by `factor`."""
        return replace(self, opacity=self.opacity * float(factor))


CLEAR = Color(0.0, 0.0, 0.0, 0.0)
# Visually clear, but still hit-testable by the host's gesture layer.
CLEAR_INTERACTABLE = Color(0.0, 0.0, 0.0, 0.001)
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
ACCENT_BLUE = Color.from_hex("#007aff")

_BUTTON_BACKGROUND_DARK = Color.from_hex("#6b6b6b")
_DARK_BUTTON_BACKGROUND_LIGHT = Color.from_hex("#abb0ba")
_DARK_BUTTON_BACKGROUND_DARK = Color.from_hex("#474747")


def keyboard_button_background(environment: EnvironmentSnapshot) -> Color:
    """Light key background."""
    return _BUTTON_BACKGROUND_DARK if environment.has_dark_color_scheme else WHITE


def keyboard_dark_button_background(environment: EnvironmentSnapshot) -> Color:
    """Dark (system) key background."""
    if environment.has_dark_color_scheme:
        return _DARK_BUTTON_BACKGROUND_DARK
    return _DARK_BUTTON_BACKGROUND_LIGHT


def keyboard_button_foreground(environment: EnvironmentSnapshot) -> Color:
    return WHITE if environment.has_dark_color_scheme else BLACK


class FontWeight(StrEnum):
    ULTRA_LIGHT = "ultra_light"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"


@dataclass(frozen=True, slots=True)
class KeyboardFont:
    """Font family, size and optional weight. `weight=None` inherits the default."""

    size: float
    weight: FontWeight | None = None
    family: str = "system"


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    @classmethod
    def symmetric(cls, *, horizontal: float = 0.0, vertical: float = 0.0) -> EdgeInsets:
        return cls(top=vertical, leading=horizontal, bottom=vertical, trailing=horizontal)


ZERO_INSETS = EdgeInsets()


class BorderStyle(StrEnum):
    STANDARD = "standard"
    NONE = "none"


class ShadowStyle(StrEnum):
    STANDARD = "standard"
    NONE = "none"


class ImageSource(StrEnum):
    SYSTEM = "system"
    ASSET = "asset"


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Reference to an icon the renderer knows how to load."""

    name: str
    source: ImageSource = ImageSource.SYSTEM


@dataclass(frozen=True, slots=True)
class KeyStyle:
    """Complete resolved style record for one key in one state."""

    background_color: Color
    foreground_color: Color
    font: KeyboardFont
    corner_radius: float | None
    border: BorderStyle
    shadow: ShadowStyle
    content_insets: EdgeInsets
    bottom_margin: float
    icon: ImageRef | None
    label: str | None
    icon_scale_factor: float


@dataclass(frozen=True, slots=True)
class KeyboardBackgroundStyle:
    """Style applied behind the whole keyboard."""

    color: Color | None = None
    image: ImageRef | None = None


@dataclass(frozen=True, slots=True)
class CalloutStyle:
    """Shared callout bubble style."""

    background_color: Color = WHITE
    border_color: Color = field(default_factory=lambda: BLACK.with_opacity(0.5))
    button_corner_radius: float = 4.0
    button_inset: tuple[float, float] = (2.0, 5.0)
    corner_radius: float = 10.0
    curve_size: tuple[float, float] = (8.0, 15.0)
    shadow_color: Color = field(default_factory=lambda: BLACK.with_opacity(0.1))
    shadow_radius: float = 5.0
    text_color: Color = BLACK


@dataclass(frozen=True, slots=True)
class ActionCalloutStyle:
    """Style of the secondary-action callout shown on long press."""

    callout: CalloutStyle = field(default_factory=CalloutStyle)
    font: KeyboardFont = field(default_factory=lambda: KeyboardFont(20.0))
    max_button_size: tuple[float, float] = (50.0, 50.0)
    selected_background_color: Color = ACCENT_BLUE
    selected_foreground_color: Color = WHITE
    vertical_offset: float = 20.0
    vertical_text_padding: float = 6.0


@dataclass(frozen=True, slots=True)
class InputCalloutStyle:
    """Style of the magnified input callout shown while typing."""

    callout: CalloutStyle = field(default_factory=CalloutStyle)
    callout_size: tuple[float, float] = (0.0, 55.0)
    font: KeyboardFont = field(default_factory=lambda: KeyboardFont(34.0, FontWeight.LIGHT))


__all__ = [
    "ACCENT_BLUE",
    "BLACK",
    "BorderStyle",
    "CLEAR",
    "CLEAR_INTERACTABLE",
    "ActionCalloutStyle",
    "CalloutStyle",
    "Color",
    "EdgeInsets",
    "FontWeight",
    "ImageRef",
    "ImageSource",
    "InputCalloutStyle",
    "KeyStyle",
    "KeyboardBackgroundStyle",
    "KeyboardFont",
    "ShadowStyle",
    "WHITE",
    "ZERO_INSETS",
    "keyboard_button_background",
    "keyboard_button_foreground",
    "keyboard_dark_button_background",
]
