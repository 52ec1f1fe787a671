"""Device-agnostic base style rules, one function per facet."""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from keystyle.api.actions import (
    BackspaceAction,
    CapsLockAction,
    CharacterAction,
    CharacterMarginAction,
    CommandAction,
    ControlAction,
    CustomAction,
    DictationAction,
    DismissKeyboardAction,
    EmojiAction,
    EscapeAction,
    FunctionAction,
    ImageAction,
    KeyboardAction,
    KeyboardType,
    KeyboardTypeAction,
    KeyboardTypeKind,
    MoveCursorBackwardAction,
    MoveCursorForwardAction,
    NextKeyboardAction,
    NextLocaleAction,
    NoneAction,
    OptionAction,
    PrimaryAction,
    SettingsAction,
    ShiftAction,
    SpaceAction,
    SystemImageAction,
    SystemSettingsAction,
    TabAction,
    UrlAction,
)
from keystyle.api.classification import (
    is_input_action,
    is_primary_action,
    is_system_action,
    is_uppercased_shift_action,
)
from keystyle.api.environment import DeviceClass, EnvironmentSnapshot
from keystyle.api.facets import FacetContext, FacetRules
from keystyle.api.style import (
    ACCENT_BLUE,
    CLEAR,
    CLEAR_INTERACTABLE,
    WHITE,
    BorderStyle,
    Color,
    EdgeInsets,
    FontWeight,
    ImageRef,
    KeyboardFont,
    ShadowStyle,
    ZERO_INSETS,
    keyboard_button_background,
    keyboard_button_foreground,
    keyboard_dark_button_background,
)

DEFAULT_CONTENT_INSETS = EdgeInsets.symmetric(horizontal=3.0, vertical=3.0)
IMAGE_FONT_SIZE = 20.0
SPACE_FONT_SIZE = 16.0
LOWERCASE_INPUT_FONT_SIZE = 26.0
SYSTEM_FONT_SIZE = 16.0
DEFAULT_FONT_SIZE = 23.0

_BOTTOM_MARGINS: dict[str, float] = {
    "-": 3.0,
    "/": 3.0,
    ":": 3.0,
    ";": 3.0,
    "@": 3.0,
    ",": 3.0,
    "(": 4.0,
    ")": 4.0,
}


class KeySurface(StrEnum):
    """How much of a key is drawn."""

    KEY = "key"
    EMOJI = "emoji"
    MARGIN = "margin"
    HIDDEN = "hidden"


def key_surface(action: KeyboardAction) -> KeySurface:
    match action:
        case NoneAction():
            return KeySurface.HIDDEN
        case CharacterMarginAction():
            return KeySurface.MARGIN
        case EmojiAction():
            return KeySurface.EMOJI
        case (
            BackspaceAction()
            | CapsLockAction()
            | CharacterAction()
            | CommandAction()
            | ControlAction()
            | CustomAction()
            | DictationAction()
            | DismissKeyboardAction()
            | EscapeAction()
            | FunctionAction()
            | ImageAction()
            | KeyboardTypeAction()
            | MoveCursorBackwardAction()
            | MoveCursorForwardAction()
            | NextKeyboardAction()
            | NextLocaleAction()
            | OptionAction()
            | PrimaryAction()
            | SettingsAction()
            | ShiftAction()
            | SpaceAction()
            | SystemImageAction()
            | SystemSettingsAction()
            | TabAction()
            | UrlAction()
        ):
            return KeySurface.KEY
        case _:
            assert_never(action)


def is_lowercased_with_uppercase_variant(text: str) -> bool:
    """Whether the text is lowercase and has a distinct uppercase form."""
    return text == text.lower() and text != text.upper()


# Colors


def background_color_for_all_states(action: KeyboardAction) -> Color | None:
    surface = key_surface(action)
    match surface:
        case KeySurface.HIDDEN:
            return CLEAR
        case KeySurface.MARGIN | KeySurface.EMOJI:
            return CLEAR_INTERACTABLE
        case KeySurface.KEY:
            return None
        case _:
            assert_never(surface)


def idle_background_color(ctx: FacetContext) -> Color:
    action, environment = ctx.action, ctx.environment
    # An uppercased shift looks pressed while idle to signal it is active.
    if is_uppercased_shift_action(action):
        return pressed_background_color(ctx)
    if is_system_action(action):
        return keyboard_dark_button_background(environment)
    if is_primary_action(action):
        return ACCENT_BLUE
    return keyboard_button_background(environment)


def pressed_background_color(ctx: FacetContext) -> Color:
    action, environment = ctx.action, ctx.environment
    dark = environment.has_dark_color_scheme
    if is_system_action(action) or is_primary_action(action):
        return keyboard_dark_button_background(environment) if dark else WHITE
    return keyboard_dark_button_background(environment)


def background_color(ctx: FacetContext) -> Color:
    color = background_color_for_all_states(ctx.action)
    if color is None:
        color = pressed_background_color(ctx) if ctx.pressed else idle_background_color(ctx)
    opacity = ctx.resolver.button_background_opacity(ctx.action, ctx.pressed)
    return color.with_opacity(opacity)


def background_opacity(ctx: FacetContext) -> float:
    environment = ctx.environment
    if environment.is_space_drag_gesture_active:
        return 0.5
    if environment.has_dark_color_scheme or ctx.pressed:
        return 1.0
    return 0.95


def foreground_color_for_all_states(action: KeyboardAction) -> Color | None:
    surface = key_surface(action)
    match surface:
        case KeySurface.HIDDEN:
            return CLEAR
        case KeySurface.MARGIN:
            return CLEAR_INTERACTABLE
        case KeySurface.KEY | KeySurface.EMOJI:
            return None
        case _:
            assert_never(surface)


def foreground_color(ctx: FacetContext) -> Color:
    fixed = foreground_color_for_all_states(ctx.action)
    if fixed is not None:
        return fixed
    standard = keyboard_button_foreground(ctx.environment)
    if is_system_action(ctx.action):
        return standard
    if is_primary_action(ctx.action):
        if not ctx.pressed:
            return WHITE
        return WHITE if ctx.environment.has_dark_color_scheme else standard
    return standard


# Font


def keyboard_type_font_size(keyboard_type: KeyboardType) -> float:
    kind = keyboard_type.kind
    match kind:
        case KeyboardTypeKind.ALPHABETIC:
            return 15.0
        case KeyboardTypeKind.NUMERIC:
            return 16.0
        case KeyboardTypeKind.SYMBOLIC:
            return 14.0
        case (
            KeyboardTypeKind.EMAIL
            | KeyboardTypeKind.EMOJIS
            | KeyboardTypeKind.IMAGES
            | KeyboardTypeKind.CUSTOM
        ):
            return 14.0
        case _:
            assert_never(kind)


def font_size(ctx: FacetContext) -> float:
    action, resolver = ctx.action, ctx.resolver
    if resolver.button_image(action) is not None:
        return IMAGE_FONT_SIZE
    if isinstance(action, KeyboardTypeAction):
        return keyboard_type_font_size(action.keyboard_type)
    if isinstance(action, SpaceAction):
        return SPACE_FONT_SIZE
    text = resolver.button_text(action) or ""
    if is_input_action(action) and is_lowercased_with_uppercase_variant(text):
        return LOWERCASE_INPUT_FONT_SIZE
    if is_system_action(action) or is_primary_action(action):
        return SYSTEM_FONT_SIZE
    return DEFAULT_FONT_SIZE


def font_weight(ctx: FacetContext) -> FontWeight | None:
    action, environment = ctx.action, ctx.environment
    if environment.keyboard_type.is_alphabetic and environment.is_georgian_locale:
        return FontWeight.REGULAR
    match action:
        case BackspaceAction():
            return FontWeight.REGULAR
        case CharacterAction(char=char):
            return FontWeight.LIGHT if is_lowercased_with_uppercase_variant(char) else None
        case _:
            # Any other key with an icon.
            return FontWeight.LIGHT if ctx.resolver.button_image(action) is not None else None


def font(ctx: FacetContext) -> KeyboardFont:
    resolver = ctx.resolver
    return KeyboardFont(
        size=resolver.button_font_size(ctx.action),
        weight=resolver.button_font_weight(ctx.action),
    )


# Shape


def corner_radius(ctx: FacetContext) -> float | None:
    return ctx.resolver.keyboard_layout_configuration.button_corner_radius


def border(ctx: FacetContext) -> BorderStyle:
    surface = key_surface(ctx.action)
    match surface:
        case KeySurface.HIDDEN | KeySurface.EMOJI:
            return BorderStyle.NONE
        case KeySurface.KEY | KeySurface.MARGIN:
            return BorderStyle.STANDARD
        case _:
            assert_never(surface)


def shadow(ctx: FacetContext) -> ShadowStyle:
    if ctx.environment.is_space_drag_gesture_active:
        return ShadowStyle.NONE
    surface = key_surface(ctx.action)
    match surface:
        case KeySurface.HIDDEN | KeySurface.MARGIN | KeySurface.EMOJI:
            return ShadowStyle.NONE
        case KeySurface.KEY:
            return ShadowStyle.STANDARD
        case _:
            assert_never(surface)


# Content


def content_insets(ctx: FacetContext) -> EdgeInsets:
    return DEFAULT_CONTENT_INSETS


def character_bottom_margin(char: str) -> float:
    return _BOTTOM_MARGINS.get(char, 0.0)


def bottom_margin(ctx: FacetContext) -> float:
    if isinstance(ctx.action, CharacterAction):
        return character_bottom_margin(ctx.action.char)
    return 0.0


def icon(ctx: FacetContext) -> ImageRef | None:
    return ctx.resolver.default_button_image(ctx.action)


def label(ctx: FacetContext) -> str | None:
    return ctx.resolver.default_button_text(ctx.action)


def icon_scale_factor(ctx: FacetContext) -> float:
    return 1.2 if ctx.environment.device_class is DeviceClass.TABLET else 1.0


# Keyboard level


def keyboard_edge_insets(environment: EnvironmentSnapshot) -> EdgeInsets:
    """Insets applied around the whole keyboard surface."""
    device_class = environment.device_class
    match device_class:
        case DeviceClass.TABLET:
            return EdgeInsets(bottom=4.0)
        case DeviceClass.PHONE:
            return EdgeInsets(bottom=-2.0) if environment.is_large_screen_phone else ZERO_INSETS
        case DeviceClass.OTHER:
            return ZERO_INSETS
        case _:
            assert_never(device_class)


BASE_RULES = FacetRules(
    background_color=background_color,
    background_opacity=background_opacity,
    foreground_color=foreground_color,
    font=font,
    font_size=font_size,
    font_weight=font_weight,
    corner_radius=corner_radius,
    border=border,
    shadow=shadow,
    content_insets=content_insets,
    bottom_margin=bottom_margin,
    icon=icon,
    label=label,
    icon_scale_factor=icon_scale_factor,
)


__all__ = [
    "BASE_RULES",
    "DEFAULT_CONTENT_INSETS",
    "KeySurface",
    "background_color",
    "background_color_for_all_states",
    "character_bottom_margin",
    "foreground_color",
    "foreground_color_for_all_states",
    "font_size",
    "font_weight",
    "idle_background_color",
    "is_lowercased_with_uppercase_variant",
    "key_surface",
    "keyboard_edge_insets",
    "keyboard_type_font_size",
    "pressed_background_color",
]
