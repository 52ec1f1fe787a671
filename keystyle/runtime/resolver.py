"""Style resolver composition: override chain first, base rule second."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Self, cast

from keystyle.api.actions import CharacterAction, KeyboardAction
from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.facets import Facet, FacetContext, FacetOverride, FacetRule, FacetRules, parse_facet
from keystyle.api.labels import ButtonLabelProvider, StandardButtonLabelProvider
from keystyle.api.layout import (
    KeyboardLayoutConfiguration,
    LayoutConfigurationProvider,
    StandardLayoutConfigurationProvider,
)
from keystyle.api.localization import (
    LocalizationProvider,
    StandardLocalization,
    standard_accessibility_label,
)
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
from keystyle.runtime.base_rules import BASE_RULES, keyboard_edge_insets
from keystyle.runtime.config import get_style_config
from keystyle.runtime.overrides import legacy_rendering_mode_overrides

_LOG = logging.getLogger(__name__)

CALLOUT_FALLBACK_CORNER_RADIUS = 5.0

type OverrideChains = dict[Facet, tuple[FacetOverride[object], ...]]


def index_overrides(overrides: tuple[FacetOverride[object], ...]) -> OverrideChains:
    """Group overrides per facet, preserving declaration order."""
    chains: dict[Facet, list[FacetOverride[object]]] = {}
    for override in overrides:
        chains.setdefault(parse_facet(override.facet), []).append(override)
    return {facet: tuple(items) for facet, items in chains.items()}


class RuntimeStyleResolver:
    """Resolve every key facet for one environment snapshot."""

    def __init__(
        self,
        environment: EnvironmentSnapshot,
        *,
        rules: FacetRules,
        overrides: tuple[FacetOverride[object], ...],
        layout_provider: LayoutConfigurationProvider,
        label_provider: ButtonLabelProvider,
        localization: LocalizationProvider,
        trace: bool = False,
    ) -> None:
        self._environment = environment
        self._rules = rules
        self._overrides = overrides
        self._chains = index_overrides(overrides)
        self._layout_provider = layout_provider
        self._label_provider = label_provider
        self._localization = localization
        self._trace = trace

    @classmethod
    def create(
        cls,
        environment: EnvironmentSnapshot,
        *,
        rules: FacetRules | None = None,
        overrides: tuple[FacetOverride[object], ...] | None = None,
        layout_provider: LayoutConfigurationProvider | None = None,
        label_provider: ButtonLabelProvider | None = None,
        localization: LocalizationProvider | None = None,
    ) -> RuntimeStyleResolver:
        localization = localization if localization is not None else StandardLocalization()
        resolver = cls(
            environment,
            rules=rules if rules is not None else BASE_RULES,
            overrides=overrides if overrides is not None else legacy_rendering_mode_overrides(),
            layout_provider=layout_provider if layout_provider is not None else StandardLayoutConfigurationProvider(),
            label_provider=(
                label_provider if label_provider is not None else StandardButtonLabelProvider(localization)
            ),
            localization=localization,
            trace=get_style_config().trace_resolution,
        )
        _LOG.debug(
            "style_resolver_created device=%s overrides=%d legacy_mode=%s",
            environment.device_class,
            len(resolver._overrides),
            environment.legacy_rendering_mode_active,
        )
        return resolver

    @property
    def environment(self) -> EnvironmentSnapshot:
        return self._environment

    @property
    def overrides(self) -> tuple[FacetOverride[object], ...]:
        return self._overrides

    def override_chain(self, facet: Facet | str) -> tuple[FacetOverride[object], ...]:
        """Return the ordered overrides consulted for a facet."""
        return self._chains.get(parse_facet(facet), ())

    def with_environment(self, environment: EnvironmentSnapshot) -> RuntimeStyleResolver:
        return RuntimeStyleResolver(
            environment,
            rules=self._rules,
            overrides=self._overrides,
            layout_provider=self._layout_provider,
            label_provider=self._label_provider,
            localization=self._localization,
            trace=self._trace,
        )

    def _resolve[T](self, facet: Facet, rule: FacetRule[T], action: KeyboardAction, pressed: bool) -> T:
        context = FacetContext(action=action, environment=self._environment, pressed=pressed, resolver=self)
        for override in self._chains.get(facet, ()):
            if not override.guard(context):
                continue
            value = override.resolve(context)
            if value is not None:
                return cast(T, value)
        return rule(context)

    # Key style

    def resolve(self, action: KeyboardAction, pressed: bool = False) -> KeyStyle:
        style = KeyStyle(
            background_color=self.button_background_color(action, pressed),
            foreground_color=self.button_foreground_color(action, pressed),
            font=self.button_font(action),
            corner_radius=self.button_corner_radius(action),
            border=self.button_border_style(action),
            shadow=self.button_shadow_style(action),
            content_insets=self.button_content_insets(action),
            bottom_margin=self.button_content_bottom_margin(action),
            icon=self.button_image(action),
            label=self.button_text(action),
            icon_scale_factor=self.button_image_scale_factor(action),
        )
        if self._trace:
            _LOG.debug("style_resolved action=%r pressed=%s style=%r", action, pressed, style)
        return style

    def button_background_color(self, action: KeyboardAction, pressed: bool = False) -> Color:
        return self._resolve(Facet.BACKGROUND_COLOR, self._rules.background_color, action, pressed)

    def button_background_opacity(self, action: KeyboardAction, pressed: bool = False) -> float:
        return self._resolve(Facet.BACKGROUND_OPACITY, self._rules.background_opacity, action, pressed)

    def button_foreground_color(self, action: KeyboardAction, pressed: bool = False) -> Color:
        return self._resolve(Facet.FOREGROUND_COLOR, self._rules.foreground_color, action, pressed)

    def button_font(self, action: KeyboardAction) -> KeyboardFont:
        return self._resolve(Facet.FONT, self._rules.font, action, False)

    def button_font_size(self, action: KeyboardAction) -> float:
        return self._resolve(Facet.FONT_SIZE, self._rules.font_size, action, False)

    def button_font_weight(self, action: KeyboardAction) -> FontWeight | None:
        return self._resolve(Facet.FONT_WEIGHT, self._rules.font_weight, action, False)

    def button_corner_radius(self, action: KeyboardAction) -> float | None:
        return self._resolve(Facet.CORNER_RADIUS, self._rules.corner_radius, action, False)

    def button_border_style(self, action: KeyboardAction) -> BorderStyle:
        return self._resolve(Facet.BORDER, self._rules.border, action, False)

    def button_shadow_style(self, action: KeyboardAction) -> ShadowStyle:
        return self._resolve(Facet.SHADOW, self._rules.shadow, action, False)

    def button_content_insets(self, action: KeyboardAction) -> EdgeInsets:
        return self._resolve(Facet.CONTENT_INSETS, self._rules.content_insets, action, False)

    def button_content_bottom_margin(self, action: KeyboardAction) -> float:
        return self._resolve(Facet.BOTTOM_MARGIN, self._rules.bottom_margin, action, False)

    def button_image(self, action: KeyboardAction) -> ImageRef | None:
        return self._resolve(Facet.ICON, self._rules.icon, action, False)

    def button_text(self, action: KeyboardAction) -> str | None:
        return self._resolve(Facet.LABEL, self._rules.label, action, False)

    def button_image_scale_factor(self, action: KeyboardAction) -> float:
        return self._resolve(Facet.ICON_SCALE_FACTOR, self._rules.icon_scale_factor, action, False)

    def default_button_text(self, action: KeyboardAction) -> str | None:
        return self._label_provider.button_text(action, self._environment)

    def default_button_image(self, action: KeyboardAction) -> ImageRef | None:
        return self._label_provider.button_image(action, self._environment)

    def accessibility_label(self, action: KeyboardAction) -> str | None:
        return standard_accessibility_label(action, self._localization, self._environment.locale)

    # Keyboard level

    @property
    def background_style(self) -> KeyboardBackgroundStyle:
        return KeyboardBackgroundStyle()

    @property
    def foreground_color(self) -> Color | None:
        return None

    @property
    def keyboard_edge_insets(self) -> EdgeInsets:
        return keyboard_edge_insets(self._environment)

    @property
    def keyboard_layout_configuration(self) -> KeyboardLayoutConfiguration:
        return self._layout_provider.configuration(self._environment)

    # Callouts

    @property
    def callout_style(self) -> CalloutStyle:
        button = self.resolve(CharacterAction(""), False)
        radius = button.corner_radius
        if radius is None:
            radius = CALLOUT_FALLBACK_CORNER_RADIUS
        return replace(CalloutStyle(), button_corner_radius=radius)

    @property
    def action_callout_style(self) -> ActionCalloutStyle:
        return replace(ActionCalloutStyle(), callout=self.callout_style)

    @property
    def input_callout_style(self) -> InputCalloutStyle:
        return replace(InputCalloutStyle(), callout=self.callout_style)


class StyleResolverBuilder:
    """Assemble a resolver from replacement facet rules and overrides.

    Facets without a replacement keep the base rules. The legacy rendering
    mode overrides are included unless `without_default_overrides` is called;
    custom overrides run before them unless appended with `first=False`.
    """

    def __init__(self) -> None:
        self._rules = BASE_RULES
        self._custom_overrides: list[FacetOverride[object]] = []
        self._appended_overrides: list[FacetOverride[object]] = []
        self._default_overrides = True
        self._layout_provider: LayoutConfigurationProvider | None = None
        self._label_provider: ButtonLabelProvider | None = None
        self._localization: LocalizationProvider | None = None

    def with_rule(self, facet: Facet | str, rule: FacetRule[Any]) -> Self:
        """Replace the base rule for one facet."""
        resolved = parse_facet(facet)
        self._rules = replace(self._rules, **cast(dict[str, Any], {resolved.value: rule}))
        return self

    def with_override(self, override: FacetOverride[object], *, first: bool = True) -> Self:
        """Register an override ahead of (or behind) the default chain."""
        parse_facet(override.facet)
        if first:
            self._custom_overrides.append(override)
        else:
            self._appended_overrides.append(override)
        return self

    def without_default_overrides(self) -> Self:
        self._default_overrides = False
        return self

    def with_layout_provider(self, provider: LayoutConfigurationProvider) -> Self:
        self._layout_provider = provider
        return self

    def with_label_provider(self, provider: ButtonLabelProvider) -> Self:
        self._label_provider = provider
        return self

    def with_localization(self, localization: LocalizationProvider) -> Self:
        self._localization = localization
        return self

    def overrides(self) -> tuple[FacetOverride[object], ...]:
        defaults = legacy_rendering_mode_overrides() if self._default_overrides else ()
        return (*self._custom_overrides, *defaults, *self._appended_overrides)

    def build(self, environment: EnvironmentSnapshot) -> RuntimeStyleResolver:
        return RuntimeStyleResolver.create(
            environment,
            rules=self._rules,
            overrides=self.overrides(),
            layout_provider=self._layout_provider,
            label_provider=self._label_provider,
            localization=self._localization,
        )


__all__ = [
    "CALLOUT_FALLBACK_CORNER_RADIUS",
    "RuntimeStyleResolver",
    "StyleResolverBuilder",
    "index_overrides",
]
