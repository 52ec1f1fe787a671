"""Immutable per-frame environment snapshot contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from keystyle.api.actions import KeyboardType

_LARGE_PHONE_PORTRAIT_SIZE = (430.0, 932.0)
_LARGE_PHONE_TOLERANCE = 10.0


class DeviceClass(StrEnum):
    """Device family the keyboard is drawn on."""

    PHONE = "phone"
    TABLET = "tablet"
    OTHER = "other"


class InterfaceOrientation(StrEnum):
    """Interface orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @property
    def is_landscape(self) -> bool:
        return self is InterfaceOrientation.LANDSCAPE


@dataclass(frozen=True, slots=True)
class ScreenSize:
    """Screen size in points."""

    width: float
    height: float

    def portrait(self) -> ScreenSize:
        """Return the size with the short edge as width."""
        return ScreenSize(min(self.width, self.height), max(self.width, self.height))

    def is_close_to(self, width: float, height: float, *, tolerance: float) -> bool:
        return abs(self.width - width) <= tolerance and abs(self.height - height) <= tolerance


@dataclass(frozen=True, slots=True)
class EnvironmentSnapshot:
    """Frame-stable device, locale and gesture state consumed by style resolution."""

    device_class: DeviceClass = DeviceClass.PHONE
    screen_size: ScreenSize = field(default_factory=lambda: ScreenSize(390.0, 844.0))
    interface_orientation: InterfaceOrientation = InterfaceOrientation.PORTRAIT
    locale: str = "en_US"
    keyboard_type: KeyboardType = field(default_factory=KeyboardType.alphabetic)
    has_dark_color_scheme: bool = False
    is_space_drag_gesture_active: bool = False
    legacy_rendering_mode_active: bool = False

    @property
    def language_code(self) -> str:
        normalized = self.locale.strip().replace("-", "_")
        return normalized.split("_", 1)[0].lower()

    @property
    def is_english_locale(self) -> bool:
        return self.locale.strip().lower().startswith("en")

    @property
    def is_georgian_locale(self) -> bool:
        return self.language_code == "ka"

    @property
    def is_large_screen_phone(self) -> bool:
        if self.device_class is not DeviceClass.PHONE:
            return False
        width, height = _LARGE_PHONE_PORTRAIT_SIZE
        return self.screen_size.portrait().is_close_to(width, height, tolerance=_LARGE_PHONE_TOLERANCE)


def create_environment_snapshot(
    *,
    device_class: DeviceClass = DeviceClass.PHONE,
    screen_size: ScreenSize | None = None,
    interface_orientation: InterfaceOrientation = InterfaceOrientation.PORTRAIT,
    locale: str = "en_US",
    keyboard_type: KeyboardType | None = None,
    has_dark_color_scheme: bool = False,
    is_space_drag_gesture_active: bool = False,
    legacy_rendering_mode_active: bool | None = None,
) -> EnvironmentSnapshot:
    """Create a snapshot, taking the legacy flag default from style configuration."""
    if legacy_rendering_mode_active is None:
        from keystyle.runtime.config import get_style_config

        legacy_rendering_mode_active = get_style_config().legacy_rendering_mode_default
    return EnvironmentSnapshot(
        device_class=device_class,
        screen_size=screen_size if screen_size is not None else ScreenSize(390.0, 844.0),
        interface_orientation=interface_orientation,
        locale=locale,
        keyboard_type=keyboard_type if keyboard_type is not None else KeyboardType.alphabetic(),
        has_dark_color_scheme=has_dark_color_scheme,
        is_space_drag_gesture_active=is_space_drag_gesture_active,
        legacy_rendering_mode_active=bool(legacy_rendering_mode_active),
    )


__all__ = [
    "DeviceClass",
    "EnvironmentSnapshot",
    "InterfaceOrientation",
    "ScreenSize",
    "create_environment_snapshot",
]
