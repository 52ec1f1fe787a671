from __future__ import annotations

from keystyle.diagnostics.json_codec import dumps_bytes, dumps_text


def test_dumps_text_sorts_keys_compactly() -> None:
    assert dumps_text({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'


def test_dumps_text_pretty_indents() -> None:
    text = dumps_text({"a": [1, 2]}, pretty=True)
    assert "\n  " in text


def test_dumps_bytes_returns_utf8() -> None:
    raw = dumps_bytes({"label": "é"})
    assert isinstance(raw, bytes)
    assert raw.decode("utf-8") == '{"label":"é"}'


def test_dumps_text_keeps_non_ascii_labels_unescaped() -> None:
    assert dumps_text({"label": "ქ", "icon": None}, sort_keys=True) == '{"icon":null,"label":"ქ"}'
