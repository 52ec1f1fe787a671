"""Localized key texts and standard accessibility labels."""

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
    KeyboardTypeAction,
    MoveCursorBackwardAction,
    MoveCursorForwardAction,
    NextKeyboardAction,
    NextLocaleAction,
    NoneAction,
    OptionAction,
    PrimaryAction,
    ReturnKeyKind,
    ReturnKeyType,
    SettingsAction,
    ShiftAction,
    SpaceAction,
    SystemImageAction,
    SystemSettingsAction,
    TabAction,
    UrlAction,
)

_ENGLISH_TEXTS: dict[str, str] = {
    "space": "space",
    "return": "return",
    "done": "done",
    "go": "go",
    "join": "join",
    "next": "next",
    "ok": "OK",
    "search": "search",
    "send": "send",
}


class LocalizationProvider(Protocol):
    """Resolve a localized text by key."""

    def text(self, key: str, locale: str) -> str:
        """Return localized text; unknown keys return the key itself."""


class StandardLocalization:
    """English key texts; other locales fall back to English."""

    def __init__(self, texts: dict[str, str] | None = None) -> None:
        self._texts = dict(_ENGLISH_TEXTS if texts is None else texts)

    def text(self, key: str, locale: str) -> str:
        return self._texts.get(key, key)


def return_key_text(
    return_key_type: ReturnKeyType,
    localization: LocalizationProvider,
    locale: str,
) -> str:
    """Standard primary key text for a return key type."""
    kind = return_key_type.kind
    if kind is ReturnKeyKind.CUSTOM:
        return return_key_type.title or ""
    if kind is ReturnKeyKind.NEW_LINE:
        return localization.text("return", locale)
    return localization.text(str(kind), locale)


def standard_accessibility_label(
    action: KeyboardAction,
    localization: LocalizationProvider,
    locale: str,
) -> str | None:
    """Default accessibility label for an action."""
    match action:
        case BackspaceAction():
            return "Backspace"
        case CapsLockAction():
            return "Capslock"
        case CharacterAction(char=char):
            return char
        case CharacterMarginAction() | NoneAction():
            return None
        case CommandAction():
            return "Command"
        case ControlAction():
            return "Control"
        case CustomAction(name=name):
            return name
        case DictationAction():
            return "Dictation"
        case DismissKeyboardAction():
            return "Dismiss Keyboard"
        case EmojiAction(emoji=value):
            return f"Emoji - {value.char}"
        case EscapeAction():
            return "Escape"
        case FunctionAction():
            return "Function"
        case ImageAction(description=description) | SystemImageAction(description=description):
            return description
        case KeyboardTypeAction(keyboard_type=keyboard_type):
            return f"Keyboard Type - {keyboard_type.id}"
        case MoveCursorBackwardAction():
            return "Move Cursor Backward"
        case MoveCursorForwardAction():
            return "Move Cursor Forward"
        case NextKeyboardAction():
            return "Next Keyboard"
        case NextLocaleAction():
            return "Next Locale"
        case OptionAction():
            return "Option"
        case PrimaryAction(return_key_type=return_key_type):
            return return_key_type.id
        case SettingsAction():
            return "Settings"
        case ShiftAction():
            return "Shift"
        case SpaceAction():
            return localization.text("space", locale)
        case SystemSettingsAction():
            return "System Settings"
        case TabAction():
            return "Tab"
        case UrlAction(url=url):
            return f"Open {url or 'invalid url'}"
        case _:
            assert_never(action)


__all__ = [
    "LocalizationProvider",
    "StandardLocalization",
    "return_key_text",
    "standard_accessibility_label",
]
