from __future__ import annotations

import pytest

from keystyle.api.actions import (
    BackspaceAction,
    CharacterAction,
    CharacterMarginAction,
    KeyboardCase,
    KeyboardType,
    KeyboardTypeAction,
    NextLocaleAction,
    NoneAction,
    PrimaryAction,
    ReturnKeyKind,
    ReturnKeyType,
    ShiftAction,
    SpaceAction,
    TabAction,
    emoji,
)
from keystyle.api.environment import DeviceClass, InterfaceOrientation, ScreenSize
from keystyle.api.resolver import create_style_resolver
from keystyle.api.style import (
    ACCENT_BLUE,
    BLACK,
    CLEAR_INTERACTABLE,
    WHITE,
    BorderStyle,
    EdgeInsets,
    FontWeight,
    ShadowStyle,
)
from keystyle.runtime.base_rules import (
    KeySurface,
    character_bottom_margin,
    is_lowercased_with_uppercase_variant,
    key_surface,
    keyboard_edge_insets,
)

GO = PrimaryAction(ReturnKeyType(ReturnKeyKind.GO))
NEW_LINE = PrimaryAction(ReturnKeyType(ReturnKeyKind.NEW_LINE))
SYSTEM_LIGHT = "#abb0baff"


def test_key_surface() -> None:
    assert key_surface(NoneAction()) is KeySurface.HIDDEN
    assert key_surface(CharacterMarginAction("a")) is KeySurface.MARGIN
    assert key_surface(emoji("😀")) is KeySurface.EMOJI
    assert key_surface(CharacterAction("a")) is KeySurface.KEY


def test_lowercase_with_uppercase_variant() -> None:
    assert is_lowercased_with_uppercase_variant("a")
    assert not is_lowercased_with_uppercase_variant("A")
    assert not is_lowercased_with_uppercase_variant("1")
    assert not is_lowercased_with_uppercase_variant("")


def test_idle_background_colors(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot())
    assert resolver.button_background_color(CharacterAction("a")) == WHITE.with_opacity(0.95)
    assert resolver.button_background_color(BackspaceAction()).hex[:7] == SYSTEM_LIGHT[:7]
    assert resolver.button_background_color(NEW_LINE).hex[:7] == SYSTEM_LIGHT[:7]
    assert resolver.button_background_color(GO) == ACCENT_BLUE.with_opacity(0.95)


def test_uppercased_shift_looks_pressed_while_idle(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot())
    lower = resolver.button_background_color(ShiftAction(KeyboardCase.LOWERCASED))
    upper = resolver.button_background_color(ShiftAction(KeyboardCase.UPPERCASED))
    assert lower.hex[:7] == SYSTEM_LIGHT[:7]
    assert upper.hex[:7] == WHITE.hex[:7]
    assert upper.opacity == pytest.approx(0.95)


def test_pressed_background_colors(make_snapshot) -> None:
    light = create_style_resolver(make_snapshot())
    dark = create_style_resolver(make_snapshot(has_dark_color_scheme=True))
    assert light.button_background_color(CharacterAction("a"), True).hex == SYSTEM_LIGHT
    assert light.button_background_color(BackspaceAction(), True) == WHITE
    assert light.button_background_color(GO, True) == WHITE
    assert dark.button_background_color(BackspaceAction(), True).hex == "#474747ff"
    assert dark.button_background_color(GO, True).hex == "#474747ff"


def test_transparent_surfaces_stay_transparent(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot())
    margin = resolver.button_background_color(CharacterMarginAction("a"))
    assert margin.opacity == pytest.approx(CLEAR_INTERACTABLE.opacity * 0.95)
    assert resolver.button_background_color(emoji("😀"), True).opacity == pytest.approx(0.001)


def test_foreground_colors(make_snapshot) -> None:
    light = create_style_resolver(make_snapshot())
    dark = create_style_resolver(make_snapshot(has_dark_color_scheme=True))
    assert light.button_foreground_color(CharacterAction("a")) == BLACK
    assert dark.button_foreground_color(CharacterAction("a")) == WHITE
    assert light.button_foreground_color(BackspaceAction(), True) == BLACK
    assert light.button_foreground_color(GO) == WHITE
    assert light.button_foreground_color(GO, True) == BLACK
    assert dark.button_foreground_color(GO, True) == WHITE
    assert light.button_foreground_color(CharacterMarginAction("a")) == CLEAR_INTERACTABLE
    assert light.button_foreground_color(emoji("😀")) == BLACK


@pytest.mark.parametrize(
    ("action", "size"),
    [
        (BackspaceAction(), 20.0),
        (TabAction(), 20.0),
        (KeyboardTypeAction(KeyboardType.alphabetic()), 15.0),
        (KeyboardTypeAction(KeyboardType.numeric()), 16.0),
        (KeyboardTypeAction(KeyboardType.symbolic()), 14.0),
        (KeyboardTypeAction(KeyboardType.email()), 14.0),
        (KeyboardTypeAction(KeyboardType.emojis()), 20.0),
        (SpaceAction(), 16.0),
        (CharacterAction("a"), 26.0),
        (CharacterAction("A"), 23.0),
        (CharacterAction("1"), 23.0),
        (GO, 16.0),
        (NEW_LINE, 16.0),
        (NextLocaleAction(), 16.0),
        (emoji("😀"), 23.0),
    ],
)
def test_font_size_table(make_snapshot, action, size: float) -> None:
    assert create_style_resolver(make_snapshot()).button_font_size(action) == size


@pytest.mark.parametrize(
    ("action", "weight"),
    [
        (BackspaceAction(), FontWeight.REGULAR),
        (CharacterAction("a"), FontWeight.LIGHT),
        (CharacterAction("A"), None),
        (ShiftAction(KeyboardCase.LOWERCASED), FontWeight.LIGHT),
        (TabAction(), FontWeight.LIGHT),
        (SpaceAction(), None),
        (GO, None),
    ],
)
def test_font_weight(make_snapshot, action, weight: FontWeight | None) -> None:
    resolver = create_style_resolver(make_snapshot())
    assert resolver.button_font_weight(action) == weight
    assert resolver.button_font(action).weight == weight


def test_corner_radius_follows_layout(make_snapshot) -> None:
    phone = create_style_resolver(make_snapshot())
    tablet = create_style_resolver(make_snapshot(device_class=DeviceClass.TABLET))
    tablet_landscape = create_style_resolver(
        make_snapshot(device_class=DeviceClass.TABLET, interface_orientation=InterfaceOrientation.LANDSCAPE)
    )
    assert phone.button_corner_radius(CharacterAction("a")) == 5.0
    assert tablet.button_corner_radius(CharacterAction("a")) == 6.0
    assert tablet_landscape.button_corner_radius(CharacterAction("a")) == 7.0


def test_border_and_shadow(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot())
    dragging = create_style_resolver(make_snapshot(is_space_drag_gesture_active=True))
    assert resolver.button_border_style(NoneAction()) is BorderStyle.NONE
    assert resolver.button_border_style(emoji("😀")) is BorderStyle.NONE
    assert resolver.button_border_style(CharacterMarginAction("a")) is BorderStyle.STANDARD
    assert resolver.button_shadow_style(CharacterAction("a")) is ShadowStyle.STANDARD
    assert resolver.button_shadow_style(CharacterMarginAction("a")) is ShadowStyle.NONE
    assert dragging.button_shadow_style(CharacterAction("a")) is ShadowStyle.NONE


def test_bottom_margin_table() -> None:
    assert character_bottom_margin("/") == 3.0
    assert character_bottom_margin(";") == 3.0
    assert character_bottom_margin(",") == 3.0
    assert character_bottom_margin(")") == 4.0
    assert character_bottom_margin(".") == 0.0


def test_content_insets_and_icon_scale(make_snapshot) -> None:
    phone = create_style_resolver(make_snapshot())
    tablet = create_style_resolver(make_snapshot(device_class=DeviceClass.TABLET))
    assert phone.button_content_insets(BackspaceAction()) == EdgeInsets(3.0, 3.0, 3.0, 3.0)
    assert phone.button_image_scale_factor(BackspaceAction()) == 1.0
    assert tablet.button_image_scale_factor(BackspaceAction()) == 1.2


@pytest.mark.parametrize(
    ("device", "size", "insets"),
    [
        (DeviceClass.TABLET, ScreenSize(1024.0, 1366.0), EdgeInsets(bottom=4.0)),
        (DeviceClass.PHONE, ScreenSize(430.0, 932.0), EdgeInsets(bottom=-2.0)),
        (DeviceClass.PHONE, ScreenSize(932.0, 430.0), EdgeInsets(bottom=-2.0)),
        (DeviceClass.PHONE, ScreenSize(390.0, 844.0), EdgeInsets()),
        (DeviceClass.OTHER, ScreenSize(430.0, 932.0), EdgeInsets()),
    ],
)
def test_keyboard_edge_insets(make_snapshot, device: DeviceClass, size: ScreenSize, insets: EdgeInsets) -> None:
    env = make_snapshot(device_class=device, screen_size=size)
    assert keyboard_edge_insets(env) == insets
    assert create_style_resolver(env).keyboard_edge_insets == insets
