"""Print the resolved key style table for one environment as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from keystyle.api.actions import KeyboardCase, KeyboardType
from keystyle.api.environment import (
    DeviceClass,
    EnvironmentSnapshot,
    InterfaceOrientation,
    ScreenSize,
    create_environment_snapshot,
)
from keystyle.api.logging import setup_logging
from keystyle.api.resolver import create_style_resolver
from keystyle.diagnostics.style_table import export_style_table

_LOG = logging.getLogger(__name__)

_KEYBOARD_TYPES: dict[str, KeyboardType] = {
    "alphabetic": KeyboardType.alphabetic(),
    "uppercased": KeyboardType.alphabetic(KeyboardCase.UPPERCASED),
    "capslocked": KeyboardType.alphabetic(KeyboardCase.CAPS_LOCKED),
    "numeric": KeyboardType.numeric(),
    "symbolic": KeyboardType.symbolic(),
}


def _parse_screen_size(raw: str) -> ScreenSize:
    normalized = raw.strip().lower().replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                return ScreenSize(max(1.0, float(left)), max(1.0, float(right)))
            except ValueError:
                break
    raise argparse.ArgumentTypeError(f"invalid screen size: {raw!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump resolved keyboard key styles.")
    parser.add_argument("--device", choices=[item.value for item in DeviceClass], default="phone")
    parser.add_argument("--screen", type=_parse_screen_size, default=ScreenSize(390.0, 844.0))
    parser.add_argument(
        "--orientation",
        choices=[item.value for item in InterfaceOrientation],
        default="portrait",
    )
    parser.add_argument("--locale", default="en_US")
    parser.add_argument("--keyboard-type", choices=sorted(_KEYBOARD_TYPES), default="alphabetic")
    parser.add_argument("--dark", action="store_true")
    parser.add_argument("--drag", action="store_true", help="Space drag gesture active.")
    parser.add_argument("--legacy-mode", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--pretty", action="store_true")
    parser.add_argument("--output", type=Path, default=None)
    return parser


def environment_from_args(args: argparse.Namespace) -> EnvironmentSnapshot:
    return create_environment_snapshot(
        device_class=DeviceClass(args.device),
        screen_size=args.screen,
        interface_orientation=InterfaceOrientation(args.orientation),
        locale=args.locale,
        keyboard_type=_KEYBOARD_TYPES[args.keyboard_type],
        has_dark_color_scheme=bool(args.dark),
        is_space_drag_gesture_active=bool(args.drag),
        legacy_rendering_mode_active=args.legacy_mode,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    environment = environment_from_args(args)
    payload = export_style_table(create_style_resolver(environment), pretty=bool(args.pretty))
    if args.output is None:
        sys.stdout.write(payload + "\n")
        return 0
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(payload + "\n", encoding="utf-8")
    _LOG.info("style_table_written path=%s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
