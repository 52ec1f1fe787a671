"""Style diagnostics and export helpers."""

from keystyle.diagnostics.json_codec import dumps_bytes, dumps_text
from keystyle.diagnostics.style_table import (
    STYLE_TABLE_SCHEMA_VERSION,
    build_style_table,
    export_style_table,
    style_to_payload,
)

__all__ = [
    "STYLE_TABLE_SCHEMA_VERSION",
    "build_style_table",
    "dumps_bytes",
    "dumps_text",
    "export_style_table",
    "style_to_payload",
]
