"""Command-line interface for SVG sprite compilation."""

import argparse
import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from .compiler import compile_sprite
from .config import SpriteConfig, apply_overrides, load_sprite_config
from .errors import NoUsableContentError, SpriteError
from .fragments import load_fragments, load_manifest
from .svg.allocator import IdentifierRegistry
from .svg.preview import write_preview
from .svg.utils import save_svg_file


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="svg_sprite",
        description="Compile exported SVG fragments into a single symbol sprite",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log per-fragment progress",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- compile subcommand ---
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile SVG files into one sprite of <symbol> elements",
    )
    compile_parser.add_argument(
        "inputs",
        type=Path,
        nargs="*",
        help="SVG files or directories of SVG files (in order)",
    )
    compile_parser.add_argument(
        "-m", "--manifest",
        type=Path,
        help="YAML manifest listing fragments by name and path or markup",
    )
    compile_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output sprite file (default: stdout)",
    )
    compile_parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to sprite config YAML",
    )
    compile_parser.add_argument(
        "--strict-ids",
        action="store_true",
        default=None,
        help="Replace every character outside [a-z0-9-] in symbol ids",
    )
    compile_parser.add_argument("--prefix", help="Prefix for every symbol id")
    compile_parser.add_argument(
        "--view-box",
        help="viewBox for fragments without one (default: '0 0 24 24')",
    )
    compile_parser.add_argument(
        "--placeholder-text",
        help="Label shown in placeholder symbols (default: 'No Content')",
    )
    compile_parser.add_argument(
        "--list-fragments",
        action="store_true",
        help="List fragments with the ids they would get and exit",
    )

    # --- preview subcommand ---
    preview_parser = subparsers.add_parser(
        "preview",
        help="Write an HTML page showing every symbol of a sprite",
    )
    preview_parser.add_argument(
        "sprite",
        type=Path,
        help="Compiled sprite SVG",
    )
    preview_parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output HTML file",
    )

    return parser


def cmd_compile(args: argparse.Namespace) -> int:
    """Execute compile subcommand."""
    # Load config, then apply CLI overrides
    try:
        config = load_sprite_config(args.config) if args.config else SpriteConfig()
        config = apply_overrides(
            config,
            strict_ids=args.strict_ids,
            id_prefix=args.prefix,
            default_view_box=args.view_box,
            placeholder_text=args.placeholder_text,
        )
    except (ValueError, ValidationError) as e:
        print(f"Error: Invalid config: {e}", file=sys.stderr)
        return 1

    # Load fragments: manifest entries first, then positional inputs
    try:
        fragments = load_manifest(args.manifest) if args.manifest else []
        fragments.extend(load_fragments(args.inputs))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, ValidationError) as e:
        print(f"Error: Invalid manifest: {e}", file=sys.stderr)
        return 1

    # List fragments mode
    if args.list_fragments:
        registry = IdentifierRegistry(strict=config.strict_ids, prefix=config.id_prefix)
        print("Fragments:")
        for fragment in fragments:
            print(f"  - {fragment.name} -> #{registry.allocate(fragment.name)}")
        return 0

    try:
        document = compile_sprite(fragments, config)
    except NoUsableContentError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        for note in e.diagnostics:
            print(f"  {note}", file=sys.stderr)
        return 1
    except SpriteError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.output is None:
        print(document.markup)
        return 0

    save_svg_file(args.output, document.markup + "\n")
    print(
        f"Compiled {len(document.symbols)} symbols "
        f"({document.placeholder_count} placeholders) to {args.output}"
    )
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Execute preview subcommand."""
    if not args.sprite.exists():
        print(f"Error: Sprite not found: {args.sprite}", file=sys.stderr)
        return 1

    try:
        count = write_preview(args.sprite, args.output)
    except ET.ParseError as e:
        print(f"Error: Sprite is not well-formed XML: {e}", file=sys.stderr)
        return 1

    print(f"Wrote preview of {count} symbols to {args.output}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "compile":
        sys.exit(cmd_compile(args))
    elif args.command == "preview":
        sys.exit(cmd_preview(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
