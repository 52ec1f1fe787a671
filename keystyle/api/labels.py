"""Intrinsic key texts and icons, before any style override."""

from __future__ import annotations

from typing import Protocol, assert_never

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
    KeyboardCase,
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
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.localization import LocalizationProvider, StandardLocalization, return_key_text
from keystyle.api.style import ImageRef, ImageSource

ICON_BACKSPACE = ImageRef("delete.left")
ICON_COMMAND = ImageRef("command")
ICON_CONTROL = ImageRef("control")
ICON_DICTATION = ImageRef("mic")
ICON_DISMISS_KEYBOARD = ImageRef("keyboard.chevron.compact.down")
ICON_EMOJI_KEYBOARD = ImageRef("face.smiling")
ICON_IMAGES_KEYBOARD = ImageRef("photo")
ICON_MOVE_CURSOR_BACKWARD = ImageRef("arrow.left")
ICON_MOVE_CURSOR_FORWARD = ImageRef("arrow.right")
ICON_NEXT_KEYBOARD = ImageRef("globe")
ICON_OPTION = ImageRef("option")
ICON_SETTINGS = ImageRef("gearshape")
ICON_SHIFT_LOWERCASED = ImageRef("shift")
ICON_SHIFT_UPPERCASED = ImageRef("shift.fill")
ICON_SHIFT_CAPS_LOCKED = ImageRef("capslock.fill")
ICON_SHIFT_CAPS_LOCK_INACTIVE = ImageRef("capslock")
ICON_TAB = ImageRef("arrow.right.to.line")


class ButtonLabelProvider(Protocol):
    """Resolve the default text and icon of an action."""

    def button_text(self, action: KeyboardAction, environment: EnvironmentSnapshot) -> str | None:
        """Return intrinsic label text, if any."""

    def button_image(self, action: KeyboardAction, environment: EnvironmentSnapshot) -> ImageRef | None:
        """Return intrinsic icon, if any."""


def shift_icon(casing: KeyboardCase) -> ImageRef:
    match casing:
        case KeyboardCase.AUTO | KeyboardCase.LOWERCASED:
            return ICON_SHIFT_LOWERCASED
        case KeyboardCase.UPPERCASED:
            return ICON_SHIFT_UPPERCASED
        case KeyboardCase.CAPS_LOCKED:
            return ICON_SHIFT_CAPS_LOCKED
        case _:
            assert_never(casing)


def keyboard_type_text(keyboard_type: KeyboardType) -> str | None:
    match keyboard_type.kind:
        case KeyboardTypeKind.ALPHABETIC:
            return "ABC"
        case KeyboardTypeKind.NUMERIC:
            return "123"
        case KeyboardTypeKind.SYMBOLIC:
            return "#+="
        case KeyboardTypeKind.EMAIL:
            return "@"
        case KeyboardTypeKind.CUSTOM:
            return keyboard_type.name
        case KeyboardTypeKind.EMOJIS | KeyboardTypeKind.IMAGES:
            return None
        case _:
            assert_never(keyboard_type.kind)


def keyboard_type_image(keyboard_type: KeyboardType) -> ImageRef | None:
    if keyboard_type.kind is KeyboardTypeKind.EMOJIS:
        return ICON_EMOJI_KEYBOARD
    if keyboard_type.kind is KeyboardTypeKind.IMAGES:
        return ICON_IMAGES_KEYBOARD
    return None


class StandardButtonLabelProvider:
    """Native-looking key texts and system icons."""

    def __init__(self, localization: LocalizationProvider | None = None) -> None:
        self._localization = localization if localization is not None else StandardLocalization()

    def button_text(self, action: KeyboardAction, environment: EnvironmentSnapshot) -> str | None:
        match action:
            case CharacterAction(char=char):
                return char
            case EmojiAction(emoji=value):
                return value.char
            case KeyboardTypeAction(keyboard_type=keyboard_type):
                return keyboard_type_text(keyboard_type)
            case NextLocaleAction():
                return environment.language_code.upper()
            case PrimaryAction(return_key_type=return_key_type):
                return return_key_text(return_key_type, self._localization, environment.locale)
            case SpaceAction():
                return self._localization.text("space", environment.locale)
            case (
                BackspaceAction()
                | CapsLockAction()
                | CharacterMarginAction()
                | CommandAction()
                | ControlAction()
                | CustomAction()
                | DictationAction()
                | DismissKeyboardAction()
                | EscapeAction()
                | FunctionAction()
                | ImageAction()
                | MoveCursorBackwardAction()
                | MoveCursorForwardAction()
                | NextKeyboardAction()
                | NoneAction()
                | OptionAction()
                | SettingsAction()
                | ShiftAction()
                | SystemImageAction()
                | SystemSettingsAction()
                | TabAction()
                | UrlAction()
            ):
                return None
            case _:
                assert_never(action)

    def button_image(self, action: KeyboardAction, environment: EnvironmentSnapshot) -> ImageRef | None:
        match action:
            case BackspaceAction():
                return ICON_BACKSPACE
            case CapsLockAction():
                return ICON_SHIFT_CAPS_LOCK_INACTIVE
            case CommandAction():
                return ICON_COMMAND
            case ControlAction():
                return ICON_CONTROL
            case DictationAction():
                return ICON_DICTATION
            case DismissKeyboardAction():
                return ICON_DISMISS_KEYBOARD
            case ImageAction(keyboard_image_name=name):
                return ImageRef(name, ImageSource.ASSET)
            case KeyboardTypeAction(keyboard_type=keyboard_type):
                return keyboard_type_image(keyboard_type)
            case MoveCursorBackwardAction():
                return ICON_MOVE_CURSOR_BACKWARD
            case MoveCursorForwardAction():
                return ICON_MOVE_CURSOR_FORWARD
            case NextKeyboardAction():
                return ICON_NEXT_KEYBOARD
            case OptionAction():
                return ICON_OPTION
            case SettingsAction() | SystemSettingsAction():
                return ICON_SETTINGS
            case ShiftAction(current_casing=casing):
                return shift_icon(casing)
            case SystemImageAction(keyboard_image_name=name):
                return ImageRef(name, ImageSource.SYSTEM)
            case TabAction():
                return ICON_TAB
            case (
                CharacterAction()
                | CharacterMarginAction()
                | CustomAction()
                | EmojiAction()
                | EscapeAction()
                | FunctionAction()
                | NextLocaleAction()
                | NoneAction()
                | PrimaryAction()
                | SpaceAction()
                | UrlAction()
            ):
                return None
            case _:
                assert_never(action)


__all__ = [
    "ButtonLabelProvider",
    "ICON_BACKSPACE",
    "ICON_SHIFT_CAPS_LOCKED",
    "ICON_SHIFT_CAPS_LOCK_INACTIVE",
    "ICON_SHIFT_LOWERCASED",
    "ICON_SHIFT_UPPERCASED",
    "StandardButtonLabelProvider",
    "keyboard_type_image",
    "keyboard_type_text",
    "shift_icon",
]
