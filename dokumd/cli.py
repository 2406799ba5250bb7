#!/usr/bin/env python3
"""
Dokumd CLI

Command-line interface for DokuWiki to Markdown Extra conversion.

Usage:
    dokumd <source> [options]
    dokumd page.txt
    dokumd ./pages/                                   # convert a whole tree
    dokumd "https://wiki.example.com/doku.php?id=start"

Options:
    -o, --output DIR     Output directory (default: ./dokumd_output)
    --image-root DIR     DokuWiki media directory to copy images from
    --header FILE        Text file written at the top of every converted page
    --api-host HOST      API documentation host whose links are shortened
    --stdout             Print to stdout instead of saving files
"""

import argparse
import os
import sys

from . import __version__
from .converters.cleanup import API_HOST
from .core import Dokumd
from .loader import FileLoadError, load_text


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="dokumd",
        description=(
            "DokuWiki to Markdown Extra converter\n\n"
            "Converts DokuWiki pages, directory trees of pages, or pages\n"
            "fetched from a wiki into Markdown Extra. Files that already\n"
            "look like Markdown are copied unchanged."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  dokumd start.txt\n"
            "  dokumd ./data/pages/ -o ./docs --image-root ./data/media\n"
            "  dokumd page.txt --stdout\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files, directories, or wiki page URLs to convert",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./dokumd_output)",
    )
    parser.add_argument(
        "--image-root",
        default=None,
        help="DokuWiki media directory; referenced images are copied from here",
    )
    parser.add_argument(
        "--header",
        default=None,
        help="File whose contents are written at the top of every converted page",
    )
    parser.add_argument(
        "--api-host",
        default=API_HOST,
        help=f"Host of the API documentation whose links are shortened (default: {API_HOST})",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print Markdown to stdout instead of saving to files",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"dokumd {__version__}",
    )

    args = parser.parse_args(argv)

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files, directories, or URLs to convert.")
        return 1

    try:
        header = load_text(args.header) if args.header else None
    except FileLoadError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    save = not args.stdout
    engine = Dokumd(
        output_dir=args.output,
        image_root=args.image_root,
        header=header,
        api_host=args.api_host,
        quiet=args.stdout,
    )

    if save:
        print("=" * 60)
        print(f"  DOKUMD {__version__} - DokuWiki to Markdown Extra")
        print("=" * 60)
        print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            if os.path.isdir(source):
                # per-file failures are counted in the summary, not raised
                summary = engine.convert_directory(source, save=save)
                if args.stdout:
                    print(summary)
                success_count += summary.total
                error_count += summary.errors
                continue

            md_text = engine.convert(source, save=save)
            if args.stdout:
                print(md_text)
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    if save:
        print()
        print("-" * 60)
        print(f"  Done: {success_count} converted, {error_count} errors")
        print(f"  Output: {engine.output_dir}")
        print("-" * 60)

    return 1 if error_count else 0


if __name__ == "__main__":
    sys.exit(main())
