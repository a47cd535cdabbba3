#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
FastLHE command-line interface

Provides batch commands over one or more LHE files:

1. **info**    - Run the dimension scan only and print the counts
2. **parse**   - Parse fully and print the table shapes
3. **convert** - Parse and write the tables to HDF5

Usage
-----
::

    # Counts for every file in a run directory
    python -m fastlhe.cli info run_01/*.lhe

    # Full parse with debug logging
    python -m fastlhe.cli -v parse events.lhe

    # HDF5 next to each input, gzip-compressed
    python -m fastlhe.cli convert run_01/*.lhe --compression gzip

    # Single file to an explicit path
    python -m fastlhe.cli convert events.lhe -o tables/events.h5 --overwrite
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from fastlhe.exceptions import FastLHEError
from fastlhe.utils.constants import CHUNK_SIZE

logger = logging.getLogger("fastlhe.cli")


def _output_path(src: Path, args) -> Path:
    """Resolve the HDF5 path for *src*."""
    if args.output is not None:
        return Path(args.output)
    out_dir = Path(args.output_dir) if args.output_dir else src.parent
    return out_dir / f"{src.stem}.h5"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_info(args):
    """Print event, weight, and particle counts."""
    from fastlhe.readers.lhe import LHEReader

    reader = LHEReader(chunk_size=args.chunk_size)
    n_fail = 0
    for name in args.files:
        try:
            dims = reader.scan(name)
        except (FastLHEError, OSError) as exc:
            print(f"{name}: FAIL: {exc}")
            n_fail += 1
            if not args.continue_on_error:
                return 1
            continue
        print(
            f"{name}: {dims.n_events} events, {dims.n_weights} weight columns, "
            f"{dims.n_particles} particles"
        )
    return 0 if n_fail == 0 else 1


def cmd_parse(args):
    """Parse files and print table shapes."""
    from fastlhe.readers.lhe import LHEReader

    reader = LHEReader(chunk_size=args.chunk_size)
    n_fail = 0
    for name in args.files:
        print(f"  {name}", end=" ... ", flush=True)
        try:
            tables = reader.read(name, validate=not args.no_validate)
        except (FastLHEError, OSError) as exc:
            print(f"FAIL: {exc}")
            n_fail += 1
            if not args.continue_on_error:
                return 1
            continue
        shapes = ", ".join(
            f"{label}{arr.shape}"
            for label, arr in zip(
                ("int_event", "float_event", "int_particle", "float_particle"),
                tables.as_tuple(),
            )
        )
        print(f"OK {shapes}")
    return 0 if n_fail == 0 else 1


def cmd_convert(args):
    """Parse files and write HDF5 tables."""
    from fastlhe.converters.hdf5 import convert_lhe_to_hdf5

    if args.output is not None and len(args.files) > 1:
        print("ERROR: --output requires a single input file; use --output-dir")
        return 2

    n_ok = 0
    n_fail = 0
    for name in args.files:
        src = Path(name)
        out = _output_path(src, args)
        print(f"  {src.name} -> {out}", end=" ... ", flush=True)
        try:
            convert_lhe_to_hdf5(
                src,
                out,
                validate=not args.no_validate,
                overwrite=args.overwrite,
                compression=args.compression,
                chunk_size=args.chunk_size,
            )
        except (FastLHEError, OSError) as exc:
            print(f"FAIL: {exc}")
            n_fail += 1
            if not args.continue_on_error:
                return 1
            continue
        print("OK")
        n_ok += 1

    print(f"\nHDF5: {n_ok} OK, {n_fail} failed")
    return 0 if n_fail == 0 else 1


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fastlhe",
        description="FastLHE: Les Houches Event files to dense tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m fastlhe.cli info events.lhe                    # counts only
    python -m fastlhe.cli parse events.lhe                   # full parse
    python -m fastlhe.cli convert events.lhe                 # -> events.h5
    python -m fastlhe.cli convert a.lhe b.lhe -d tables      # -> tables/{a,b}.h5
""",
    )

    # Common arguments
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=CHUNK_SIZE,
        help=f"Bytes per read in the markup pass (default: {CHUNK_SIZE})",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip post-parse table consistency checks",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Continue with the next file after an error",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Subcommands
    sub = parser.add_subparsers(dest="command", help="Step to run")

    p_info = sub.add_parser("info", help="Count events, weights, and particles")
    p_info.add_argument("files", nargs="+", help="LHE files")

    p_parse = sub.add_parser("parse", help="Parse and print table shapes")
    p_parse.add_argument("files", nargs="+", help="LHE files")

    p_conv = sub.add_parser("convert", help="Write tables to HDF5")
    p_conv.add_argument("files", nargs="+", help="LHE files")
    p_conv.add_argument(
        "--output", "-o",
        default=None,
        help="Output HDF5 path (single input only)",
    )
    p_conv.add_argument(
        "--output-dir", "-d",
        default=None,
        help="Directory for output files (default: next to each input)",
    )
    p_conv.add_argument(
        "--compression",
        choices=["gzip", "lzf"],
        default=None,
        help="HDF5 compression filter (default: none)",
    )
    p_conv.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite existing output files",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    t0 = time.time()

    commands = {
        "info": cmd_info,
        "parse": cmd_parse,
        "convert": cmd_convert,
    }

    rc = commands[args.command](args)
    elapsed = time.time() - t0
    print(f"\nCompleted in {elapsed:.1f}s")
    return rc


if __name__ == "__main__":
    sys.exit(main())
