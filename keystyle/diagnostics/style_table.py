"""Export resolved key styles as deterministic JSON for inspection tools."""

from __future__ import annotations

from collections.abc import Iterable

from keystyle.api.actions import (
    BackspaceAction,
    CapsLockAction,
    CharacterAction,
    CharacterMarginAction,
    DictationAction,
    EmojiAction,
    KeyboardAction,
    KeyboardCase,
    KeyboardType,
    KeyboardTypeAction,
    NextKeyboardAction,
    NoneAction,
    PrimaryAction,
    ReturnKeyKind,
    ReturnKeyType,
    ShiftAction,
    SpaceAction,
    TabAction,
    emoji,
)
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.resolver import StyleResolver
from keystyle.api.style import Color, EdgeInsets, KeyStyle
from keystyle.diagnostics.json_codec import dumps_text

STYLE_TABLE_SCHEMA_VERSION = "keystyle.style_table.v1"

DEFAULT_SAMPLE_ACTIONS: tuple[KeyboardAction, ...] = (
    CharacterAction("a"),
    CharacterAction("A"),
    CharacterAction("-"),
    CharacterAction("("),
    CharacterMarginAction("a"),
    emoji("😀"),
    BackspaceAction(),
    CapsLockAction(),
    ShiftAction(KeyboardCase.LOWERCASED),
    ShiftAction(KeyboardCase.UPPERCASED),
    TabAction(),
    KeyboardTypeAction(KeyboardType.alphabetic()),
    KeyboardTypeAction(KeyboardType.numeric()),
    KeyboardTypeAction(KeyboardType.symbolic()),
    KeyboardTypeAction(KeyboardType.emojis()),
    NextKeyboardAction(),
    DictationAction(),
    SpaceAction(),
    PrimaryAction(ReturnKeyType(ReturnKeyKind.NEW_LINE)),
    PrimaryAction(ReturnKeyType(ReturnKeyKind.GO)),
    NoneAction(),
)


def _color_payload(color: Color | None) -> str | None:
    return None if color is None else color.hex


def _insets_payload(insets: EdgeInsets) -> list[float]:
    return [insets.top, insets.leading, insets.bottom, insets.trailing]


def style_to_payload(style: KeyStyle) -> dict[str, object]:
    """Flatten a style record into JSON-compatible values."""
    return {
        "background_color": _color_payload(style.background_color),
        "background_opacity": round(style.background_color.opacity, 4),
        "foreground_color": _color_payload(style.foreground_color),
        "font": {
            "family": style.font.family,
            "size": style.font.size,
            "weight": None if style.font.weight is None else str(style.font.weight),
        },
        "corner_radius": style.corner_radius,
        "border": str(style.border),
        "shadow": str(style.shadow),
        "content_insets": _insets_payload(style.content_insets),
        "bottom_margin": style.bottom_margin,
        "icon": None if style.icon is None else {"name": style.icon.name, "source": str(style.icon.source)},
        "label": style.label,
        "icon_scale_factor": style.icon_scale_factor,
    }


def environment_to_payload(environment: EnvironmentSnapshot) -> dict[str, object]:
    return {
        "device_class": str(environment.device_class),
        "screen_size": [environment.screen_size.width, environment.screen_size.height],
        "interface_orientation": str(environment.interface_orientation),
        "locale": environment.locale,
        "keyboard_type": environment.keyboard_type.id,
        "has_dark_color_scheme": environment.has_dark_color_scheme,
        "is_space_drag_gesture_active": environment.is_space_drag_gesture_active,
        "legacy_rendering_mode_active": environment.legacy_rendering_mode_active,
    }


def build_style_table(
    resolver: StyleResolver,
    actions: Iterable[KeyboardAction] = DEFAULT_SAMPLE_ACTIONS,
    *,
    pressed_states: tuple[bool, ...] = (False, True),
) -> dict[str, object]:
    """Resolve every action in every pressed state into one payload."""
    rows: list[dict[str, object]] = []
    for action in actions:
        for pressed in pressed_states:
            rows.append(
                {
                    "action": repr(action),
                    "pressed": pressed,
                    "style": style_to_payload(resolver.resolve(action, pressed)),
                }
            )
    return {
        "schema_version": STYLE_TABLE_SCHEMA_VERSION,
        "environment": environment_to_payload(resolver.environment),
        "keyboard": {
            "edge_insets": _insets_payload(resolver.keyboard_edge_insets),
            "button_corner_radius": resolver.keyboard_layout_configuration.button_corner_radius,
            "callout_button_corner_radius": resolver.callout_style.button_corner_radius,
        },
        "rows": rows,
    }


def export_style_table(
    resolver: StyleResolver,
    actions: Iterable[KeyboardAction] = DEFAULT_SAMPLE_ACTIONS,
    *,
    pretty: bool = False,
) -> str:
    return dumps_text(build_style_table(resolver, actions), pretty=pretty, sort_keys=True)


__all__ = [
    "DEFAULT_SAMPLE_ACTIONS",
    "STYLE_TABLE_SCHEMA_VERSION",
    "build_style_table",
    "environment_to_payload",
    "export_style_table",
    "style_to_payload",
]
