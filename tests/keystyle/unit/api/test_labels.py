from __future__ import annotations

import pytest

from keystyle.api.actions import (
    BackspaceAction,
    CapsLockAction,
    CharacterAction,
    CharacterMarginAction,
    ImageAction,
    KeyboardCase,
    KeyboardType,
    KeyboardTypeAction,
    NextLocaleAction,
    PrimaryAction,
    ReturnKeyKind,
    ReturnKeyType,
    ShiftAction,
    SpaceAction,
    SystemImageAction,
    UrlAction,
    emoji,
)
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.labels import (
    ICON_SHIFT_CAPS_LOCKED,
    ICON_SHIFT_LOWERCASED,
    ICON_SHIFT_UPPERCASED,
    StandardButtonLabelProvider,
    keyboard_type_text,
)
from keystyle.api.localization import StandardLocalization, return_key_text, standard_accessibility_label
from keystyle.api.style import ImageRef, ImageSource


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        (CharacterAction("a"), "a"),
        (emoji("😀"), "😀"),
        (KeyboardTypeAction(KeyboardType.alphabetic()), "ABC"),
        (KeyboardTypeAction(KeyboardType.numeric()), "123"),
        (KeyboardTypeAction(KeyboardType.symbolic()), "#+="),
        (KeyboardTypeAction(KeyboardType.emojis()), None),
        (PrimaryAction(ReturnKeyType(ReturnKeyKind.NEW_LINE)), "return"),
        (PrimaryAction(ReturnKeyType(ReturnKeyKind.OK)), "OK"),
        (PrimaryAction(ReturnKeyType.custom("Send it")), "Send it"),
        (SpaceAction(), "space"),
        (BackspaceAction(), None),
        (CharacterMarginAction("a"), None),
    ],
)
def test_standard_button_text(action, expected: str | None) -> None:
    assert StandardButtonLabelProvider().button_text(action, EnvironmentSnapshot()) == expected


def test_next_locale_shows_language_code() -> None:
    provider = StandardButtonLabelProvider()
    assert provider.button_text(NextLocaleAction(), EnvironmentSnapshot(locale="sv_SE")) == "SV"


@pytest.mark.parametrize(
    ("casing", "icon"),
    [
        (KeyboardCase.AUTO, ICON_SHIFT_LOWERCASED),
        (KeyboardCase.LOWERCASED, ICON_SHIFT_LOWERCASED),
        (KeyboardCase.UPPERCASED, ICON_SHIFT_UPPERCASED),
        (KeyboardCase.CAPS_LOCKED, ICON_SHIFT_CAPS_LOCKED),
    ],
)
def test_shift_icon_tracks_casing(casing: KeyboardCase, icon: ImageRef) -> None:
    assert StandardButtonLabelProvider().button_image(ShiftAction(casing), EnvironmentSnapshot()) == icon


def test_standard_button_images() -> None:
    provider = StandardButtonLabelProvider()
    env = EnvironmentSnapshot()
    assert provider.button_image(BackspaceAction(), env) == ImageRef("delete.left")
    assert provider.button_image(CapsLockAction(), env) == ImageRef("capslock")
    assert provider.button_image(ImageAction("Cat", "cat.thumb", "cat"), env) == ImageRef(
        "cat.thumb", ImageSource.ASSET
    )
    assert provider.button_image(SystemImageAction("Star", "star", "star.fill"), env) == ImageRef("star")
    assert provider.button_image(KeyboardTypeAction(KeyboardType.emojis()), env) == ImageRef("face.smiling")
    assert provider.button_image(CharacterAction("a"), env) is None
    assert provider.button_image(SpaceAction(), env) is None


def test_keyboard_type_text_for_custom_uses_name() -> None:
    assert keyboard_type_text(KeyboardType.custom("fn")) == "fn"
    assert keyboard_type_text(KeyboardType.email()) == "@"


def test_localization_unknown_key_returns_key() -> None:
    localization = StandardLocalization()
    assert localization.text("space", "en_US") == "space"
    assert localization.text("emoji", "en_US") == "emoji"
    custom = StandardLocalization({"space": "espacio"})
    assert custom.text("space", "es_ES") == "espacio"


def test_return_key_text() -> None:
    localization = StandardLocalization()
    assert return_key_text(ReturnKeyType(ReturnKeyKind.SEARCH), localization, "en") == "search"
    assert return_key_text(ReturnKeyType(ReturnKeyKind.NEW_LINE), localization, "en") == "return"
    assert return_key_text(ReturnKeyType(ReturnKeyKind.CUSTOM), localization, "en") == ""


@pytest.mark.parametrize(
    ("action", "expected"),
    [
        (BackspaceAction(), "Backspace"),
        (CapsLockAction(), "Capslock"),
        (CharacterAction("x"), "x"),
        (CharacterMarginAction("x"), None),
        (emoji("😀"), "Emoji - 😀"),
        (KeyboardTypeAction(KeyboardType.numeric()), "Keyboard Type - numeric"),
        (PrimaryAction(ReturnKeyType(ReturnKeyKind.GO)), "go"),
        (SpaceAction(), "space"),
        (UrlAction("https://example.com"), "Open https://example.com"),
        (UrlAction(), "Open invalid url"),
    ],
)
def test_standard_accessibility_label(action, expected: str | None) -> None:
    assert standard_accessibility_label(action, StandardLocalization(), "en_US") == expected
