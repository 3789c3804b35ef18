"""Command line front end: inspect, validate and export keyboard profiles."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from splitmap.core.config import Config
from splitmap.core.matrix.formatting import format_grid, format_hand_map, format_matrix_map
from splitmap.core.matrix.validation import MatrixMapError
from splitmap.core.profile import (
    available_profiles,
    compile_profile,
    export_compiled,
    load_profile_file,
    select_profile,
)
from splitmap.core.profile.model import CompiledKeymap, KeyboardProfile


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def configure_logging() -> None:
    """Configure root logging for the CLI.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("SPLITMAP_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _list_profiles() -> None:
    print("Available profiles:")
    for name, source in available_profiles().items():
        print(f"  {name:<12} ({source})")


def _resolve_profile(args: argparse.Namespace, cfg: Config) -> Optional[KeyboardProfile]:
    if args.profile_file:
        return load_profile_file(Path(args.profile_file), default_capacity=cfg.capacity)
    return select_profile(requested=args.profile, configured=cfg.profile, default_capacity=cfg.capacity)


def _print_layer(compiled: CompiledKeymap, selector: str) -> bool:
    grid = compiled.layer(selector)
    if grid is None:
        print(f"Unknown layer: {selector!r}", file=sys.stderr)
        return False
    idx = compiled.profile.layer_index(selector)
    name = compiled.profile.layers[idx].name if idx is not None else selector
    print(f"Layer {idx} ({name}):")
    print(format_grid(grid))
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splitmap",
        description="Project physically ordered split-keyboard keymaps onto the scan matrix.",
    )
    parser.add_argument("--profile", help="Profile name (default: SPLITMAP_PROFILE, config, then corne)")
    parser.add_argument("--profile-file", help="Load the profile from a JSON file instead")
    parser.add_argument("--list-profiles", action="store_true", help="List profiles and exit")
    parser.add_argument("--show-map", action="store_true", help="Print the parsed matrix map")
    parser.add_argument("--layer", action="append", default=[], help="Print an electrical layer (index or name)")
    parser.add_argument("--hands", action="store_true", help="Print the hand map")
    parser.add_argument("--validate", action="store_true", help="Report validation issues; exit 1 if any")
    parser.add_argument("--strict", action="store_true", help="Fail on any validation issue")
    parser.add_argument("--export", metavar="PATH", help="Write electrical keymap + hand map JSON")
    parser.add_argument("--preview", metavar="PATH", help="Write a PNG preview of the hand map")
    parser.add_argument("--preview-layer", default=None, help="Layer whose actions are drawn into the preview")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    configure_logging()
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.list_profiles:
        _list_profiles()
        return EXIT_OK

    cfg = Config()
    profile = _resolve_profile(args, cfg)
    if profile is None:
        target = args.profile_file or args.profile or os.environ.get("SPLITMAP_PROFILE") or cfg.profile
        print(f"Unknown or unreadable profile: {target}", file=sys.stderr)
        return EXIT_USAGE

    strict = bool(args.strict or cfg.strict)
    try:
        compiled = compile_profile(profile, strict=strict, no_op=cfg.no_op)
    except MatrixMapError as exc:
        print(f"Profile '{profile.name}' is invalid: {exc}", file=sys.stderr)
        return EXIT_INVALID

    if args.show_map:
        print(format_matrix_map(compiled.coordinates))

    for selector in args.layer:
        if not _print_layer(compiled, selector):
            return EXIT_USAGE

    if args.hands:
        print("Hands:")
        print(format_hand_map(compiled.hands))

    preview_layer = None
    if args.preview_layer is not None:
        preview_layer = compiled.layer(args.preview_layer)
        if preview_layer is None:
            print(f"Unknown layer: {args.preview_layer!r}", file=sys.stderr)
            return EXIT_USAGE

    if args.export:
        try:
            path = export_compiled(compiled, Path(args.export))
        except OSError as exc:
            print(f"Failed to write {args.export}: {exc}", file=sys.stderr)
            return EXIT_USAGE
        logger.info("Exported '%s' to %s", profile.name, path)

    if args.preview:
        from splitmap.core.matrix.preview import save_matrix_preview

        try:
            path = save_matrix_preview(Path(args.preview), compiled.hands, preview_layer, no_op=cfg.no_op)
        except OSError as exc:
            print(f"Failed to write {args.preview}: {exc}", file=sys.stderr)
            return EXIT_USAGE
        logger.info("Wrote preview to %s", path)

    if args.validate:
        if compiled.issues:
            for issue in compiled.issues:
                print(f"  {issue}")
            print(f"{profile.name}: {len(compiled.issues)} issue(s)")
            return EXIT_INVALID
        print(f"{profile.name}: OK ({len(compiled.coordinates)} keys, {profile.num_layers} layers)")

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
