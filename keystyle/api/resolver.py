"""Public style resolver contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from keystyle.api.actions import KeyboardAction
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.facets import FacetOverride, FacetRules
from keystyle.api.labels import ButtonLabelProvider
from keystyle.api.layout import KeyboardLayoutConfiguration, LayoutConfigurationProvider
from keystyle.api.localization import LocalizationProvider
from keystyle.api.style import (
    ActionCalloutStyle,
    BorderStyle,
    CalloutStyle,
    Color,
    EdgeInsets,
    FontWeight,
    ImageRef,
    InputCalloutStyle,
    KeyboardBackgroundStyle,
    KeyboardFont,
    KeyStyle,
    ShadowStyle,
)

if TYPE_CHECKING:
    from keystyle.runtime.resolver import StyleResolverBuilder


class StyleResolver(Protocol):
    """Resolve key styles for one bound environment snapshot."""

    @property
    def environment(self) -> EnvironmentSnapshot:
        """Return the bound snapshot."""

    def with_environment(self, environment: EnvironmentSnapshot) -> StyleResolver:
        """Return a resolver with the same composition bound to another snapshot."""

    def resolve(self, action: KeyboardAction, pressed: bool = False) -> KeyStyle:
        """Resolve the complete style record for an action."""

    def button_background_color(self, action: KeyboardAction, pressed: bool = False) -> Color: ...

    def button_background_opacity(self, action: KeyboardAction, pressed: bool = False) -> float: ...

    def button_foreground_color(self, action: KeyboardAction, pressed: bool = False) -> Color: ...

    def button_font(self, action: KeyboardAction) -> KeyboardFont: ...

    def button_font_size(self, action: KeyboardAction) -> float: ...

    def button_font_weight(self, action: KeyboardAction) -> FontWeight | None: ...

    def button_corner_radius(self, action: KeyboardAction) -> float | None: ...

    def button_border_style(self, action: KeyboardAction) -> BorderStyle: ...

    def button_shadow_style(self, action: KeyboardAction) -> ShadowStyle: ...

    def button_content_insets(self, action: KeyboardAction) -> EdgeInsets: ...

    def button_content_bottom_margin(self, action: KeyboardAction) -> float: ...

    def button_image(self, action: KeyboardAction) -> ImageRef | None: ...

    def button_text(self, action: KeyboardAction) -> str | None: ...

    def button_image_scale_factor(self, action: KeyboardAction) -> float: ...

    def default_button_text(self, action: KeyboardAction) -> str | None:
        """Return the label provider's text, bypassing overrides."""

    def default_button_image(self, action: KeyboardAction) -> ImageRef | None:
        """Return the label provider's icon, bypassing overrides."""

    def accessibility_label(self, action: KeyboardAction) -> str | None: ...

    @property
    def background_style(self) -> KeyboardBackgroundStyle: ...

    @property
    def foreground_color(self) -> Color | None: ...

    @property
    def keyboard_edge_insets(self) -> EdgeInsets: ...

    @property
    def keyboard_layout_configuration(self) -> KeyboardLayoutConfiguration: ...

    @property
    def callout_style(self) -> CalloutStyle: ...

    @property
    def action_callout_style(self) -> ActionCalloutStyle: ...

    @property
    def input_callout_style(self) -> InputCalloutStyle: ...


def create_style_resolver(
    environment: EnvironmentSnapshot,
    *,
    rules: FacetRules | None = None,
    overrides: tuple[FacetOverride[object], ...] | None = None,
    layout_provider: LayoutConfigurationProvider | None = None,
    label_provider: ButtonLabelProvider | None = None,
    localization: LocalizationProvider | None = None,
) -> StyleResolver:
    """Create the standard resolver; omitted collaborators use the defaults."""
    from keystyle.runtime.resolver import RuntimeStyleResolver

    return RuntimeStyleResolver.create(
        environment,
        rules=rules,
        overrides=overrides,
        layout_provider=layout_provider,
        label_provider=label_provider,
        localization=localization,
    )


def create_style_resolver_builder() -> StyleResolverBuilder:
    """Create a builder seeded with base rules and the default override chain."""
    from keystyle.runtime.resolver import StyleResolverBuilder

    return StyleResolverBuilder()


__all__ = [
    "StyleResolver",
    "create_style_resolver",
    "create_style_resolver_builder",
]
