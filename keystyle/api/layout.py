"""Keyboard layout configuration contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from keystyle.api.environment import DeviceClass, EnvironmentSnapshot
from keystyle.api.style import EdgeInsets


@dataclass(frozen=True, slots=True)
class KeyboardLayoutConfiguration:
    """Device-dependent layout constants."""

    button_corner_radius: float
    button_insets: EdgeInsets
    row_height: float


PHONE_PORTRAIT = KeyboardLayoutConfiguration(5.0, EdgeInsets.symmetric(horizontal=3.0, vertical=6.0), 56.0)
PHONE_LANDSCAPE = KeyboardLayoutConfiguration(5.0, EdgeInsets.symmetric(horizontal=3.0, vertical=4.0), 40.0)
LARGE_PHONE_PORTRAIT = KeyboardLayoutConfiguration(
    5.0, EdgeInsets.symmetric(horizontal=3.0, vertical=6.0), 58.0
)
LARGE_PHONE_LANDSCAPE = KeyboardLayoutConfiguration(
    5.0, EdgeInsets.symmetric(horizontal=3.0, vertical=4.0), 40.0
)
TABLET_PORTRAIT = KeyboardLayoutConfiguration(6.0, EdgeInsets.symmetric(horizontal=6.0, vertical=4.0), 64.0)
TABLET_LANDSCAPE = KeyboardLayoutConfiguration(7.0, EdgeInsets.symmetric(horizontal=7.0, vertical=6.0), 86.0)


class LayoutConfigurationProvider(Protocol):
    """Resolve layout constants for an environment snapshot."""

    def configuration(self, environment: EnvironmentSnapshot) -> KeyboardLayoutConfiguration:
        """Return layout configuration for the snapshot."""


class StandardLayoutConfigurationProvider:
    """Native-looking phone/tablet layout constants."""

    def configuration(self, environment: EnvironmentSnapshot) -> KeyboardLayoutConfiguration:
        landscape = environment.interface_orientation.is_landscape
        if environment.device_class is DeviceClass.TABLET:
            return TABLET_LANDSCAPE if landscape else TABLET_PORTRAIT
        if environment.is_large_screen_phone:
            return LARGE_PHONE_LANDSCAPE if landscape else LARGE_PHONE_PORTRAIT
        return PHONE_LANDSCAPE if landscape else PHONE_PORTRAIT


__all__ = [
    "KeyboardLayoutConfiguration",
    "LARGE_PHONE_LANDSCAPE",
    "LARGE_PHONE_PORTRAIT",
    "LayoutConfigurationProvider",
    "PHONE_LANDSCAPE",
    "PHONE_PORTRAIT",
    "StandardLayoutConfigurationProvider",
    "TABLET_LANDSCAPE",
    "TABLET_PORTRAIT",
]
