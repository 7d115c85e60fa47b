#!/usr/bin/env python3
"""
Command-line interface for the prototype index generator.

Usage:
  python cli.py <output-path> [prototype1] [prototype2] ...
  python cli.py dist/index.html main test-prototype-1 --variant plain
  python cli.py dist/index.html main -- -beta

Arguments after a bare "--" are taken literally as slugs, so slugs that
start with a dash must follow it. Without "--" such a slug is read as an
option and rejected.
"""

import argparse
import sys

from dotenv import load_dotenv

from prototype_index import __version__
from prototype_index.catalog import PrototypeCatalog
from prototype_index.models import PageVariant, SiteConfig
from prototype_index.pipeline.generation import generate

# Load environment variables
load_dotenv()

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

USAGE = "%(prog)s [options] <output-path> [slug ...] [-- slug ...]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prototype-index",
        usage=USAGE,
        description="Generate the landing page that lists all deployed prototypes",
        epilog="Slugs starting with \"-\" must come after a bare \"--\".",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("output_path", nargs="?", help="Where to write index.html")
    parser.add_argument("slugs", nargs="*", help="Prototype slugs to list")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in PageVariant],
        help="Page flavour (default: $PROTOTYPE_INDEX_VARIANT or rich)"
    )
    parser.add_argument("--base-url", help="Host under which prototypes are deployed")
    parser.add_argument("--metadata", help="JSON file with per-slug name/icon/description")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_literal_args(argv):
    """Split argv at the first bare "--"; everything after it is literal."""
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1:]


def parse_args(parser, argv):
    """Parse options, then append literal arguments after "--" as positionals."""
    head, literal = split_literal_args(list(argv))
    args = parser.parse_intermixed_args(head)
    if literal and not args.output_path:
        args.output_path, literal = literal[0], literal[1:]
    args.slugs = list(args.slugs) + literal
    return args


def cmd_generate(args):
    """Generate the index page from parsed arguments."""
    if not args.output_path:
        print("❌ Error: missing output path", file=sys.stderr)
        print("Usage: prototype-index <output-path> [slug ...] [-- slug ...]", file=sys.stderr)
        return EXIT_USAGE

    config = SiteConfig.from_env()
    if args.variant:
        config.variant = PageVariant.parse(args.variant)
    if args.base_url:
        config.base_url = args.base_url

    catalog = PrototypeCatalog.from_json(args.metadata) if args.metadata else None

    generate(args.output_path, args.slugs, config=config, catalog=catalog)
    return EXIT_OK


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parse_args(parser, sys.argv[1:] if argv is None else argv)

    try:
        return cmd_generate(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        print(f"❌ Error: {str(e)}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
