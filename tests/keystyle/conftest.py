from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

import pytest

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
    EscapeAction,
    FunctionAction,
    ImageAction,
    KeyboardAction,
    KeyboardCase,
    KeyboardType,
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
    emoji,
)
from keystyle.api.environment import DeviceClass, EnvironmentSnapshot, InterfaceOrientation, ScreenSize
from keystyle.runtime.config import reset_style_config

KEYSTYLE_ENV_VARS = (
    "KEYSTYLE_LEGACY_RENDERING_MODE",
    "KEYSTYLE_TRACE_RESOLUTION",
    "KEYSTYLE_LOG_LEVEL",
    "KEYSTYLE_LOG_FORMAT",
    "KEYSTYLE_LOG_FILE",
    "LOG_LEVEL",
)

# At least one instance of every action case.
ALL_ACTIONS: tuple[KeyboardAction, ...] = (
    BackspaceAction(),
    CapsLockAction(),
    CharacterAction("a"),
    CharacterAction("A"),
    CharacterAction("-"),
    CharacterMarginAction("a"),
    CommandAction(),
    ControlAction(),
    CustomAction("undo"),
    DictationAction(),
    DismissKeyboardAction(),
    emoji("😀"),
    EscapeAction(),
    FunctionAction(),
    ImageAction("Cat", "cat.thumb", "cat"),
    KeyboardTypeAction(KeyboardType.alphabetic()),
    KeyboardTypeAction(KeyboardType.numeric()),
    KeyboardTypeAction(KeyboardType.symbolic()),
    KeyboardTypeAction(KeyboardType.emojis()),
    KeyboardTypeAction(KeyboardType.custom("fn")),
    MoveCursorBackwardAction(),
    MoveCursorForwardAction(),
    NextKeyboardAction(),
    NextLocaleAction(),
    NoneAction(),
    OptionAction(),
    PrimaryAction(ReturnKeyType(ReturnKeyKind.NEW_LINE)),
    PrimaryAction(ReturnKeyType(ReturnKeyKind.GO)),
    PrimaryAction(ReturnKeyType.custom("Send it")),
    SettingsAction(),
    ShiftAction(KeyboardCase.LOWERCASED),
    ShiftAction(KeyboardCase.UPPERCASED),
    ShiftAction(KeyboardCase.CAPS_LOCKED),
    SpaceAction(),
    SystemImageAction("Star", "star", "star.fill"),
    SystemSettingsAction(),
    TabAction(),
    UrlAction("https://example.com", "home"),
    UrlAction(),
)

LARGE_PHONE_SIZE = ScreenSize(430.0, 932.0)
TABLET_SIZE = ScreenSize(1024.0, 1366.0)


@pytest.fixture(autouse=True)
def isolated_style_config(monkeypatch):
    for name in KEYSTYLE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_style_config()
    yield
    reset_style_config()


@pytest.fixture
def all_actions() -> tuple[KeyboardAction, ...]:
    return ALL_ACTIONS


@pytest.fixture
def make_snapshot() -> Callable[..., EnvironmentSnapshot]:
    def _make(**changes: object) -> EnvironmentSnapshot:
        return replace(EnvironmentSnapshot(), **changes)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def legacy_tablet(make_snapshot) -> EnvironmentSnapshot:
    return make_snapshot(
        device_class=DeviceClass.TABLET,
        screen_size=TABLET_SIZE,
        locale="en_US",
        legacy_rendering_mode_active=True,
    )


@pytest.fixture
def legacy_tablet_landscape(legacy_tablet) -> EnvironmentSnapshot:
    return replace(
        legacy_tablet,
        screen_size=ScreenSize(TABLET_SIZE.height, TABLET_SIZE.width),
        interface_orientation=InterfaceOrientation.LANDSCAPE,
    )
