"""Closed keyboard action model and its payload types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class KeyboardCase(StrEnum):
    """Casing of an alphabetic keyboard."""

    AUTO = "auto"
    LOWERCASED = "lowercased"
    UPPERCASED = "uppercased"
    CAPS_LOCKED = "caps_locked"

    @property
    def is_uppercased(self) -> bool:
        return self in (KeyboardCase.UPPERCASED, KeyboardCase.CAPS_LOCKED)


class KeyboardTypeKind(StrEnum):
    """Keyboard type discriminator."""

    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"
    EMAIL = "email"
    EMOJIS = "emojis"
    IMAGES = "images"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class KeyboardType:
    """Keyboard type value, e.g. alphabetic(uppercased) or numeric."""

    kind: KeyboardTypeKind
    casing: KeyboardCase | None = None
    name: str | None = None

    @classmethod
    def alphabetic(cls, casing: KeyboardCase = KeyboardCase.LOWERCASED) -> KeyboardType:
        return cls(KeyboardTypeKind.ALPHABETIC, casing=casing)

    @classmethod
    def numeric(cls) -> KeyboardType:
        return cls(KeyboardTypeKind.NUMERIC)

    @classmethod
    def symbolic(cls) -> KeyboardType:
        return cls(KeyboardTypeKind.SYMBOLIC)

    @classmethod
    def email(cls) -> KeyboardType:
        return cls(KeyboardTypeKind.EMAIL)

    @classmethod
    def emojis(cls) -> KeyboardType:
        return cls(KeyboardTypeKind.EMOJIS)

    @classmethod
    def images(cls) -> KeyboardType:
        return cls(KeyboardTypeKind.IMAGES)

    @classmethod
    def custom(cls, name: str) -> KeyboardType:
        return cls(KeyboardTypeKind.CUSTOM, name=name)

    @property
    def is_alphabetic(self) -> bool:
        return self.kind is KeyboardTypeKind.ALPHABETIC

    @property
    def is_alphabetic_caps_locked(self) -> bool:
        return self.is_alphabetic and self.casing is KeyboardCase.CAPS_LOCKED

    @property
    def id(self) -> str:
        if self.kind is KeyboardTypeKind.ALPHABETIC:
            return f"alphabetic.{self.casing or KeyboardCase.AUTO}"
        if self.kind is KeyboardTypeKind.CUSTOM:
            return f"custom.{self.name or ''}"
        return str(self.kind)


class ReturnKeyKind(StrEnum):
    """Return key discriminator."""

    CUSTOM = "custom"
    DONE = "done"
    GO = "go"
    JOIN = "join"
    NEW_LINE = "new_line"
    NEXT = "next"
    OK = "ok"
    SEARCH = "search"
    SEND = "send"


@dataclass(frozen=True, slots=True)
class ReturnKeyType:
    """Primary (return) key flavor."""

    kind: ReturnKeyKind
    title: str | None = None

    @classmethod
    def custom(cls, title: str) -> ReturnKeyType:
        return cls(ReturnKeyKind.CUSTOM, title=title)

    @property
    def is_system_action(self) -> bool:
        """Only a plain new line renders as a dark system key."""
        return self.kind is ReturnKeyKind.NEW_LINE

    @property
    def id(self) -> str:
        if self.kind is ReturnKeyKind.CUSTOM:
            return self.title or ""
        return str(self.kind)


@dataclass(frozen=True, slots=True)
class Emoji:
    """Single emoji value."""

    char: str


@dataclass(frozen=True, slots=True)
class BackspaceAction:
    """Deletes backwards, repeating while held."""


@dataclass(frozen=True, slots=True)
class CapsLockAction:
    """Switches to a caps-locked keyboard."""


@dataclass(frozen=True, slots=True)
class CharacterAction:
    """Inserts a text character."""

    char: str


@dataclass(frozen=True, slots=True)
class CharacterMarginAction:
    """Inserts a character but renders as empty space."""

    char: str


@dataclass(frozen=True, slots=True)
class CommandAction:
    pass


@dataclass(frozen=True, slots=True)
class ControlAction:
    pass


@dataclass(frozen=True, slots=True)
class CustomAction:
    """Integrator-handled action."""

    name: str


@dataclass(frozen=True, slots=True)
class DictationAction:
    pass


@dataclass(frozen=True, slots=True)
class DismissKeyboardAction:
    pass


@dataclass(frozen=True, slots=True)
class EmojiAction:
    """Inserts an emoji."""

    emoji: Emoji


@dataclass(frozen=True, slots=True)
class EscapeAction:
    pass


@dataclass(frozen=True, slots=True)
class FunctionAction:
    pass


@dataclass(frozen=True, slots=True)
class ImageAction:
    """Refers to an image asset."""

    description: str
    keyboard_image_name: str
    image_name: str


@dataclass(frozen=True, slots=True)
class KeyboardTypeAction:
    """Changes the keyboard type."""

    keyboard_type: KeyboardType


@dataclass(frozen=True, slots=True)
class MoveCursorBackwardAction:
    pass


@dataclass(frozen=True, slots=True)
class MoveCursorForwardAction:
    pass


@dataclass(frozen=True, slots=True)
class NextKeyboardAction:
    pass


@dataclass(frozen=True, slots=True)
class NextLocaleAction:
    pass


@dataclass(frozen=True, slots=True)
class NoneAction:
    """Placeholder that does nothing and renders nothing."""


@dataclass(frozen=True, slots=True)
class OptionAction:
    pass


@dataclass(frozen=True, slots=True)
class PrimaryAction:
    """Return/go/search style primary key."""

    return_key_type: ReturnKeyType


@dataclass(frozen=True, slots=True)
class SettingsAction:
    pass


@dataclass(frozen=True, slots=True)
class ShiftAction:
    """Shift key carrying the keyboard's current casing."""

    current_casing: KeyboardCase


@dataclass(frozen=True, slots=True)
class SpaceAction:
    pass


@dataclass(frozen=True, slots=True)
class SystemImageAction:
    """Refers to a system symbol image."""

    description: str
    keyboard_image_name: str
    image_name: str


@dataclass(frozen=True, slots=True)
class SystemSettingsAction:
    pass


@dataclass(frozen=True, slots=True)
class TabAction:
    pass


@dataclass(frozen=True, slots=True)
class UrlAction:
    """Opens a url, optionally tagged with an id."""

    url: str | None = None
    id: str | None = None


type KeyboardAction = (
    BackspaceAction
    | CapsLockAction
    | CharacterAction
    | CharacterMarginAction
    | CommandAction
    | ControlAction
    | CustomAction
    | DictationAction
    | DismissKeyboardAction
    | EmojiAction
    | EscapeAction
    | FunctionAction
    | ImageAction
    | KeyboardTypeAction
    | MoveCursorBackwardAction
    | MoveCursorForwardAction
    | NextKeyboardAction
    | NextLocaleAction
    | NoneAction
    | OptionAction
    | PrimaryAction
    | SettingsAction
    | ShiftAction
    | SpaceAction
    | SystemImageAction
    | SystemSettingsAction
    | TabAction
    | UrlAction
)


def emoji(char: str) -> EmojiAction:
    """Create an emoji action from a raw emoji string."""
    return EmojiAction(Emoji(char))


__all__ = [
    "BackspaceAction",
    "CapsLockAction",
    "CharacterAction",
    "CharacterMarginAction",
    "CommandAction",
    "ControlAction",
    "CustomAction",
    "DictationAction",
    "DismissKeyboardAction",
    "Emoji",
    "EmojiAction",
    "EscapeAction",
    "FunctionAction",
    "ImageAction",
    "KeyboardAction",
    "KeyboardCase",
    "KeyboardType",
    "KeyboardTypeAction",
    "KeyboardTypeKind",
    "MoveCursorBackwardAction",
    "MoveCursorForwardAction",
    "NextKeyboardAction",
    "NextLocaleAction",
    "NoneAction",
    "OptionAction",
    "PrimaryAction",
    "ReturnKeyKind",
    "ReturnKeyType",
    "SettingsAction",
    "ShiftAction",
    "SpaceAction",
    "SystemImageAction",
    "SystemSettingsAction",
    "TabAction",
    "UrlAction",
    "emoji",
]
