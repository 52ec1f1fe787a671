"""Public keystyle API contracts."""

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
    Emoji,
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
from keystyle.api.environment import (
    DeviceClass,
    EnvironmentSnapshot,
    InterfaceOrientation,
    ScreenSize,
    create_environment_snapshot,
)
from keystyle.api.facets import Facet, FacetContext, FacetOverride, FacetRules
from keystyle.api.input_set import InputSetItem
from keystyle.api.labels import ButtonLabelProvider, StandardButtonLabelProvider
from keystyle.api.layout import (
    KeyboardLayoutConfiguration,
    LayoutConfigurationProvider,
    StandardLayoutConfigurationProvider,
)
from keystyle.api.localization import LocalizationProvider, StandardLocalization
from keystyle.api.logging import KeystyleLoggingConfig, configure_logging, setup_logging
from keystyle.api.resolver import StyleResolver, create_style_resolver, create_style_resolver_builder
from keystyle.api.style import (
    ActionCalloutStyle,
    BorderStyle,
    CalloutStyle,
    Color,
    EdgeInsets,
    FontWeight,
    ImageRef,
    ImageSource,
    InputCalloutStyle,
    KeyboardBackgroundStyle,
    KeyboardFont,
    KeyStyle,
    ShadowStyle,
)

__all__ = [
    "ActionCalloutStyle",
    "BackspaceAction",
    "BorderStyle",
    "ButtonLabelProvider",
    "CalloutStyle",
    "CapsLockAction",
    "CharacterAction",
    "CharacterMarginAction",
    "Color",
    "CommandAction",
    "ControlAction",
    "CustomAction",
    "DeviceClass",
    "DictationAction",
    "DismissKeyboardAction",
    "EdgeInsets",
    "Emoji",
    "EmojiAction",
    "EnvironmentSnapshot",
    "EscapeAction",
    "Facet",
    "FacetContext",
    "FacetOverride",
    "FacetRules",
    "FontWeight",
    "FunctionAction",
    "ImageAction",
    "ImageRef",
    "ImageSource",
    "InputCalloutStyle",
    "InputSetItem",
    "InterfaceOrientation",
    "KeyStyle",
    "KeyboardAction",
    "KeyboardBackgroundStyle",
    "KeyboardCase",
    "KeyboardFont",
    "KeyboardLayoutConfiguration",
    "KeyboardType",
    "KeyboardTypeAction",
    "KeyboardTypeKind",
    "KeystyleLoggingConfig",
    "LayoutConfigurationProvider",
    "LocalizationProvider",
    "MoveCursorBackwardAction",
    "MoveCursorForwardAction",
    "NextKeyboardAction",
    "NextLocaleAction",
    "NoneAction",
    "OptionAction",
    "PrimaryAction",
    "ReturnKeyKind",
    "ReturnKeyType",
    "ScreenSize",
    "SettingsAction",
    "ShadowStyle",
    "ShiftAction",
    "SpaceAction",
    "StandardButtonLabelProvider",
    "StandardLayoutConfigurationProvider",
    "StandardLocalization",
    "StyleResolver",
    "SystemImageAction",
    "SystemSettingsAction",
    "TabAction",
    "UrlAction",
    "configure_logging",
    "create_environment_snapshot",
    "create_style_resolver",
    "create_style_resolver_builder",
    "emoji",
    "setup_logging",
]
