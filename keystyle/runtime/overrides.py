"""Device override chain for the legacy (large tablet) rendering mode.

Every override here is guarded by the snapshot's legacy rendering flag, so a
snapshot with the flag off always falls through to the base rules.
"""

from __future__ import annotations

from keystyle.api.actions import (
    BackspaceAction,
    CapsLockAction,
    KeyboardAction,
    KeyboardType,
    KeyboardTypeAction,
    KeyboardTypeKind,
    PrimaryAction,
    ReturnKeyKind,
    ShiftAction,
    TabAction,
)
from keystyle.api.classification import (
    is_alphabetic_keyboard_type_action,
    is_keyboard_type_action,
    is_system_action,
)
from keystyle.api.environment import DeviceClass, EnvironmentSnapshot, InterfaceOrientation
from keystyle.api.facets import Facet, FacetContext, FacetOverride
from keystyle.api.labels import ICON_SHIFT_CAPS_LOCK_INACTIVE, ICON_SHIFT_CAPS_LOCKED, ICON_SHIFT_LOWERCASED
from keystyle.api.localization import StandardLocalization, return_key_text
from keystyle.api.style import Color, EdgeInsets, ImageRef

LEGACY_SYSTEM_CONTENT_INSETS = EdgeInsets.symmetric(horizontal=8.0, vertical=7.0)

_ENGLISH = StandardLocalization()
_SMALL_TEXT_KEYBOARD_TYPES = (
    KeyboardTypeKind.ALPHABETIC,
    KeyboardTypeKind.NUMERIC,
    KeyboardTypeKind.SYMBOLIC,
)


def legacy_rendering_mode_active(ctx: FacetContext) -> bool:
    return ctx.environment.legacy_rendering_mode_active


def uses_small_text_for_control_buttons(environment: EnvironmentSnapshot) -> bool:
    return (
        environment.device_class is DeviceClass.TABLET
        and environment.is_english_locale
        and environment.legacy_rendering_mode_active
    )


def uses_small_text_for_keyboard_type(keyboard_type: KeyboardType, environment: EnvironmentSnapshot) -> bool:
    if not uses_small_text_for_control_buttons(environment):
        return False
    return keyboard_type.kind in _SMALL_TEXT_KEYBOARD_TYPES


def uses_small_text(action: KeyboardAction, environment: EnvironmentSnapshot) -> bool:
    """Whether a control key renders a short text label in legacy mode."""
    if not uses_small_text_for_control_buttons(environment):
        return False
    if isinstance(action, (TabAction, CapsLockAction, ShiftAction, BackspaceAction, PrimaryAction)):
        return True
    if isinstance(action, KeyboardTypeAction):
        return uses_small_text_for_keyboard_type(action.keyboard_type, environment)
    return False


def small_text_label(ctx: FacetContext) -> str | None:
    action = ctx.action
    if not uses_small_text(action, ctx.environment):
        return None
    if isinstance(action, TabAction):
        return "tab"
    if isinstance(action, CapsLockAction):
        return "caps lock"
    if isinstance(action, ShiftAction):
        return "shift"
    if isinstance(action, BackspaceAction):
        return "delete"
    if isinstance(action, PrimaryAction):
        if action.return_key_type.kind is ReturnKeyKind.NEW_LINE:
            return "return"
        return return_key_text(action.return_key_type, _ENGLISH, "en")
    return None


def caps_lock_icon(ctx: FacetContext) -> ImageRef | None:
    caps_locked = ctx.environment.keyboard_type.is_alphabetic_caps_locked
    if isinstance(ctx.action, CapsLockAction):
        return ICON_SHIFT_CAPS_LOCKED if caps_locked else ICON_SHIFT_CAPS_LOCK_INACTIVE
    if isinstance(ctx.action, ShiftAction):
        return ICON_SHIFT_LOWERCASED if caps_locked else None
    return None


def caps_lock_background_color(ctx: FacetContext) -> Color | None:
    if not ctx.environment.keyboard_type.is_alphabetic_caps_locked:
        return None
    if isinstance(ctx.action, CapsLockAction):
        return ctx.resolver.button_background_color(BackspaceAction(), True)
    if isinstance(ctx.action, ShiftAction):
        return ctx.resolver.button_background_color(BackspaceAction(), False)
    return None


def system_content_insets(ctx: FacetContext) -> EdgeInsets | None:
    if not is_system_action(ctx.action):
        return None
    return LEGACY_SYSTEM_CONTENT_INSETS


def small_text_font_size(ctx: FacetContext) -> float | None:
    if not uses_small_text(ctx.action, ctx.environment):
        return None
    return 16.0 if ctx.environment.interface_orientation is InterfaceOrientation.PORTRAIT else 20.0


def landscape_tablet_keyboard_type_font_size(ctx: FacetContext) -> float | None:
    environment = ctx.environment
    if environment.device_class is not DeviceClass.TABLET:
        return None
    if not environment.interface_orientation.is_landscape:
        return None
    action = ctx.action
    if is_alphabetic_keyboard_type_action(action):
        return 22.0
    if is_keyboard_type_action(action, KeyboardType.numeric()):
        return 22.0
    if is_keyboard_type_action(action, KeyboardType.symbolic()):
        return 20.0
    return None


def legacy_rendering_mode_overrides() -> tuple[FacetOverride[object], ...]:
    """Ordered legacy rendering mode overrides; first match per facet wins."""
    guard = legacy_rendering_mode_active
    return (
        FacetOverride("legacy.small_text_label", Facet.LABEL, guard, small_text_label),
        FacetOverride("legacy.caps_lock_icon", Facet.ICON, guard, caps_lock_icon),
        FacetOverride("legacy.caps_lock_background", Facet.BACKGROUND_COLOR, guard, caps_lock_background_color),
        FacetOverride("legacy.system_content_insets", Facet.CONTENT_INSETS, guard, system_content_insets),
        FacetOverride("legacy.small_text_font_size", Facet.FONT_SIZE, guard, small_text_font_size),
        FacetOverride(
            "legacy.landscape_tablet_keyboard_type_font_size",
            Facet.FONT_SIZE,
            guard,
            landscape_tablet_keyboard_type_font_size,
        ),
    )


__all__ = [
    "LEGACY_SYSTEM_CONTENT_INSETS",
    "caps_lock_background_color",
    "caps_lock_icon",
    "landscape_tablet_keyboard_type_font_size",
    "legacy_rendering_mode_active",
    "legacy_rendering_mode_overrides",
    "small_text_font_size",
    "small_text_label",
    "system_content_insets",
    "uses_small_text",
    "uses_small_text_for_control_buttons",
]
