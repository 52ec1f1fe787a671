from __future__ import annotations

import pytest

from keystyle.api.environment import EnvironmentSnapshot
from keystyle.api.style import (
    ACCENT_BLUE,
    BLACK,
    WHITE,
    Color,
    EdgeInsets,
    keyboard_button_background,
    keyboard_button_foreground,
    keyboard_dark_button_background,
)


def test_color_from_hex_supports_short_and_alpha_forms() -> None:
    assert Color.from_hex("#fff") == WHITE
    assert Color.from_hex("#000000") == BLACK
    assert Color.from_hex("#00000080").opacity == pytest.approx(128 / 255)
    assert Color.from_hex("#0008").opacity == pytest.approx(0x88 / 255)


@pytest.mark.parametrize("raw", ["", "007aff", "#12", "#zzzzzz"])
def test_color_from_hex_invalid_falls_back_to_white(raw: str) -> None:
    assert Color.from_hex(raw) == WHITE


def test_color_hex_round_trip_for_accent() -> None:
    assert ACCENT_BLUE.hex == "#007affff"


def test_with_opacity_multiplies_existing_opacity() -> None:
    half = WHITE.with_opacity(0.5)
    assert half.opacity == pytest.approx(0.5)
    assert half.with_opacity(0.5).opacity == pytest.approx(0.25)
    assert half.red == 1.0


def test_scheme_aware_backgrounds() -> None:
    light = EnvironmentSnapshot()
    dark = EnvironmentSnapshot(has_dark_color_scheme=True)
    assert keyboard_button_background(light) == WHITE
    assert keyboard_button_background(dark).hex == "#6b6b6bff"
    assert keyboard_dark_button_background(light).hex == "#abb0baff"
    assert keyboard_dark_button_background(dark).hex == "#474747ff"
    assert keyboard_button_foreground(light) == BLACK
    assert keyboard_button_foreground(dark) == WHITE


def test_edge_insets_symmetric() -> None:
    insets = EdgeInsets.symmetric(horizontal=3.0, vertical=6.0)
    assert insets == EdgeInsets(top=6.0, leading=3.0, bottom=6.0, trailing=3.0)
