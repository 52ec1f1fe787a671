"""Pure classification predicates over keyboard actions.

Predicates overlap (an action can be input and non-system at the same time);
style rules depend on the order in which they are consulted, not on
exclusivity.
"""

from __future__ import annotations

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


def is_input_action(action: KeyboardAction) -> bool:
    """Whether the action inserts content and renders as a light key."""
    match action:
        case (
            CharacterAction()
            | CharacterMarginAction()
            | EmojiAction()
            | ImageAction()
            | SpaceAction()
            | SystemImageAction()
        ):
            return True
        case (
            BackspaceAction()
            | CapsLockAction()
            | CommandAction()
            | ControlAction()
            | CustomAction()
            | DictationAction()
            | DismissKeyboardAction()
            | EscapeAction()
            | FunctionAction()
            | KeyboardTypeAction()
            | MoveCursorBackwardAction()
            | MoveCursorForwardAction()
            | NextKeyboardAction()
            | NextLocaleAction()
            | NoneAction()
            | OptionAction()
            | PrimaryAction()
            | SettingsAction()
            | ShiftAction()
            | SystemSettingsAction()
            | TabAction()
            | UrlAction()
        ):
            return False
        case _:
            assert_never(action)


def is_system_action(action: KeyboardAction) -> bool:
    """Whether the action renders as a dark system key."""
    match action:
        case (
            BackspaceAction()
            | CapsLockAction()
            | CommandAction()
            | ControlAction()
            | DictationAction()
            | DismissKeyboardAction()
            | EscapeAction()
            | FunctionAction()
            | KeyboardTypeAction()
            | MoveCursorBackwardAction()
            | MoveCursorForwardAction()
            | NextKeyboardAction()
            | NextLocaleAction()
            | OptionAction()
            | ShiftAction()
            | SettingsAction()
            | TabAction()
        ):
            return True
        case PrimaryAction(return_key_type=return_key_type):
            return return_key_type.is_system_action
        case (
            CharacterAction()
            | CharacterMarginAction()
            | CustomAction()
            | EmojiAction()
            | ImageAction()
            | NoneAction()
            | SpaceAction()
            | SystemImageAction()
            | SystemSettingsAction()
            | UrlAction()
        ):
            return False
        case _:
            assert_never(action)


def is_primary_action(action: KeyboardAction) -> bool:
    return isinstance(action, PrimaryAction)


def is_spacer(action: KeyboardAction) -> bool:
    """Whether the action mainly serves as empty space in a row."""
    return isinstance(action, (CharacterMarginAction, NoneAction))


def is_shift_action(action: KeyboardAction) -> bool:
    return isinstance(action, ShiftAction)


def is_uppercased_shift_action(action: KeyboardAction) -> bool:
    if isinstance(action, ShiftAction):
        return action.current_casing.is_uppercased
    return False


def is_character_action(action: KeyboardAction) -> bool:
    return isinstance(action, CharacterAction)


def is_emoji_action(action: KeyboardAction) -> bool:
    return isinstance(action, EmojiAction)


def is_alphabetic_keyboard_type_action(action: KeyboardAction) -> bool:
    if isinstance(action, KeyboardTypeAction):
        return action.keyboard_type.is_alphabetic
    return False


def is_keyboard_type_action(action: KeyboardAction, keyboard_type: KeyboardType) -> bool:
    """Whether the action switches to exactly the given keyboard type."""
    if isinstance(action, KeyboardTypeAction):
        return action.keyboard_type == keyboard_type
    return False


def input_callout_text(action: KeyboardAction) -> str | None:
    """Text presented in the input callout while the key is pressed."""
    if isinstance(action, CharacterAction):
        return action.char
    if isinstance(action, EmojiAction):
        return action.emoji.char
    return None


__all__ = [
    "input_callout_text",
    "is_alphabetic_keyboard_type_action",
    "is_character_action",
    "is_emoji_action",
    "is_input_action",
    "is_keyboard_type_action",
    "is_primary_action",
    "is_shift_action",
    "is_spacer",
    "is_system_action",
    "is_uppercased_shift_action",
]
