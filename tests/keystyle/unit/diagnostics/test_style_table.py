from __future__ import annotations

import orjson

from keystyle.api.actions import BackspaceAction, CharacterAction, NoneAction
from keystyle.api.environment import DeviceClass
from keystyle.api.resolver import create_style_resolver
from keystyle.diagnostics.style_table import (
    DEFAULT_SAMPLE_ACTIONS,
    STYLE_TABLE_SCHEMA_VERSION,
    build_style_table,
    export_style_table,
    style_to_payload,
)


def test_style_to_payload_flattens_values(make_snapshot) -> None:
    style = create_style_resolver(make_snapshot()).resolve(BackspaceAction())
    payload = style_to_payload(style)
    assert payload["background_color"] == style.background_color.hex
    assert payload["background_opacity"] == 0.95
    assert payload["font"] == {"family": "system", "size": 20.0, "weight": "regular"}
    assert payload["icon"] == {"name": "delete.left", "source": "system"}
    assert payload["label"] is None
    assert payload["content_insets"] == [3.0, 3.0, 3.0, 3.0]


def test_build_style_table_covers_actions_and_states(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot(device_class=DeviceClass.TABLET))
    table = build_style_table(resolver)
    assert table["schema_version"] == STYLE_TABLE_SCHEMA_VERSION
    rows = table["rows"]
    assert isinstance(rows, list)
    assert len(rows) == len(DEFAULT_SAMPLE_ACTIONS) * 2
    environment = table["environment"]
    assert isinstance(environment, dict)
    assert environment["device_class"] == "tablet"
    keyboard = table["keyboard"]
    assert isinstance(keyboard, dict)
    assert keyboard["edge_insets"] == [0.0, 0.0, 4.0, 0.0]
    assert keyboard["button_corner_radius"] == 6.0


def test_build_style_table_custom_actions(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot())
    table = build_style_table(resolver, [NoneAction(), CharacterAction("a")], pressed_states=(True,))
    rows = table["rows"]
    assert isinstance(rows, list)
    assert [row["pressed"] for row in rows] == [True, True]
    assert rows[0]["style"]["background_color"] == "#00000000"


def test_export_style_table_is_deterministic(make_snapshot) -> None:
    resolver = create_style_resolver(make_snapshot(has_dark_color_scheme=True))
    first = export_style_table(resolver)
    second = export_style_table(resolver)
    assert first == second
    payload = orjson.loads(first)
    assert payload["environment"]["has_dark_color_scheme"] is True
    assert "\n" in export_style_table(resolver, pretty=True)
