import argparse
import dataclasses
import logging
import os

from .engine import TagColorEngine
from .export import create_html_preview, create_swatch, export_json, generate_contrast_report
from .palette import parse_custom_colors
from .session import StaticHost, TagColorSession
from .settings import (
    LIGHTNESS_PRESETS,
    PALETTE_SIZE_CHOICES,
    SATURATION_PRESETS,
    SEED_RANGE,
    JsonStateStore,
)


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        description="Assign theme-aware, readable colors to hierarchical tags"
    )
    parser.add_argument(
        "tags",
        nargs="*",
        help="Tags to color, e.g. project/frontend/bugs",
    )
    parser.add_argument(
        "--tags-file",
        metavar="FILE",
        help="File with one tag per line (lines starting with ';' are ignored)",
    )
    parser.add_argument(
        "--state",
        metavar="JSON",
        help="Settings and known tags; created if missing, updated when tags are added",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--name",
        default="colored-tags",
        help="Base name of the generated files",
    )
    parser.add_argument(
        "--format",
        choices=("lch", "hex"),
        default="lch",
        help="Color notation used in the stylesheet",
    )
    parser.add_argument(
        "--palette-size",
        type=_positive_int,
        default=None,
        help="How many different colors are available (usually one of %s)"
        % ", ".join(str(size) for size in PALETTE_SIZE_CHOICES),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Palette shift (%d-%d), use it when some tag colors don't fit" % SEED_RANGE,
    )

    chroma = parser.add_mutually_exclusive_group()
    chroma.add_argument("--chroma", type=float, default=None, help="Base chroma")
    chroma.add_argument(
        "--saturation",
        choices=sorted(SATURATION_PRESETS),
        default=None,
        help="Named chroma preset",
    )

    lightness = parser.add_mutually_exclusive_group()
    lightness.add_argument(
        "--lightness", type=float, default=None, help="Base lightness (0-100)"
    )
    lightness.add_argument(
        "--lightness-preset",
        choices=sorted(LIGHTNESS_PRESETS),
        default=None,
        help="Named lightness preset",
    )

    custom = parser.add_mutually_exclusive_group()
    custom.add_argument(
        "--custom-colors",
        metavar="LIST",
        help="Use only these colors, separated by commas (e.g. '#FF5733, #33D2FF')",
    )
    custom.add_argument(
        "--no-custom-colors",
        action="store_true",
        help="Go back to the generated palette",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def read_tags_file(path):
    with open(path, encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith(";")]


def settings_overrides(args):
    """Collect the settings fields changed on the command line."""
    overrides = {}
    if args.palette_size is not None:
        overrides["palette"] = args.palette_size
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.chroma is not None:
        overrides["chroma"] = args.chroma
    elif args.saturation is not None:
        overrides["chroma"] = SATURATION_PRESETS[args.saturation]
    if args.lightness is not None:
        overrides["lightness"] = args.lightness
    elif args.lightness_preset is not None:
        overrides["lightness"] = LIGHTNESS_PRESETS[args.lightness_preset]
    if args.custom_colors is not None:
        overrides["enable_custom_colors"] = True
        overrides["custom_colors"] = parse_custom_colors(args.custom_colors)
    elif args.no_custom_colors:
        overrides["enable_custom_colors"] = False
    return overrides


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tags = list(args.tags)
    if args.tags_file:
        if not os.path.exists(args.tags_file):
            parser.error(f"Tags file not found: {args.tags_file}")
        tags.extend(read_tags_file(args.tags_file))

    if not tags and not args.state:
        parser.error("Give at least one tag, --tags-file or --state")

    if args.lightness is not None and not 0 <= args.lightness <= 100:
        parser.error("--lightness must be between 0 and 100")

    if args.seed is not None and not SEED_RANGE[0] <= args.seed <= SEED_RANGE[1]:
        parser.error("--seed must be between %d and %d" % SEED_RANGE)

    _run(args, tags)


def _run(args, tags):
    """Color the tags and write every export."""
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    store = JsonStateStore(args.state) if args.state else None
    engine = TagColorEngine.from_store(store) if store else TagColorEngine()

    host = StaticHost(tags)
    session = TagColorSession(host, engine=engine, color_format=args.format)
    session.register_tags()

    overrides = settings_overrides(args)
    if overrides:
        session.save_settings(dataclasses.replace(engine.settings, **overrides))
    else:
        session.reload()

    known = engine.known_tags()
    print(f"Coloring {len(known)} tags ({len(tags)} given)")

    report, issues = generate_contrast_report(engine, known)
    print("\n" + report)

    css_path = os.path.join(output_dir, f"{args.name}.css")
    json_path = os.path.join(output_dir, f"{args.name}.json")
    html_path = os.path.join(output_dir, f"{args.name}_preview.html")
    swatch_path = os.path.join(output_dir, f"{args.name}_palette.png")
    report_path = os.path.join(output_dir, f"{args.name}_contrast_report.txt")

    with open(css_path, "w", encoding="utf-8") as f:
        f.write(host.stylesheet)

    export_json(engine, json_path, known)
    create_html_preview(engine, html_path, known)
    create_swatch(engine.palettes, swatch_path)

    with open(report_path, "w", encoding="utf-8") as f:
        f.write(report)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {css_path}")
    print(f"  - {json_path}")
    print(f"  - {html_path}")
    print(f"  - {swatch_path}")
    print(f"  - {report_path}")
    if args.state:
        print(f"  - {args.state} (state)")
    if engine.hue_offset is None:
        print(f"\nPalette: {len(engine.palettes['light'])} custom colors")
    else:
        print(f"\nPalette: {len(engine.palettes['light'])} colors, hue offset {engine.hue_offset}")
    if issues:
        print(f"Contrast issues: {len(issues)}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    main()
