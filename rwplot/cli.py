#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""
Line-chart generator for read/write benchmark results.

Reads one CSV per benchmark run (written by the read/write benchmark script)
and draws one throughput chart per read/write ratio, all runs overlaid.

Usage:
    # Compare two runs
    rwplot before.csv after.csv --title "Compaction off vs on" -o compare

    # Vector output
    rwplot run.csv -o run -f svg

    # Try it without benchmark data
    rwplot --demo -o demo
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from rwplot import render
from rwplot.dataset import demo_datasets, load_csv_data
from rwplot.errors import RenderError
from rwplot.style import RenderConfig

PLOT_NAME = "readwrite"


def output_file(prefix: str, output_format: str) -> Path:
    return Path(f"{prefix}_{PLOT_NAME}.{output_format}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rwplot",
        description="Plot read/write benchmark throughput as log-log line charts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single run, PNG
  rwplot results.csv -o results

  # Several runs in one chart grid, two columns
  rwplot a.csv b.csv --cols 2 --title "Backend comparison" -o cmp

  # Built-in demo data
  rwplot --demo -o demo -f pdf
        """,
    )
    parser.add_argument("input_files", nargs="*",
                        help="Benchmark CSV files, one per run")
    parser.add_argument("--demo", action="store_true",
                        help="Use built-in demo data (no CSV needed)")
    parser.add_argument("-t", "--title", type=str, default="Read/Write Benchmark",
                        help="Title shown in the top-left legend")
    parser.add_argument("-o", "--output-image-file", type=str, default="rw",
                        help="Output file prefix (default: rw, writes rw_readwrite.<format>)")
    parser.add_argument("-f", "--output-format", type=str, default="png",
                        help="Output format: png, jpg, tiff, svg, pdf (default: png)")
    parser.add_argument("--cols", type=int, default=1,
                        help="Charts per row (default: 1)")
    parser.add_argument("--font", type=str, default=None,
                        help="Font family for all text (default: Liberation Sans)")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cols < 1:
        parser.error("--cols must be at least 1")

    try:
        if args.input_files:
            datasets = []
            for f in args.input_files:
                print(f"Loading data from: {f}")
                datasets.append(load_csv_data(f))
        elif args.demo:
            print("Using demo data")
            datasets = demo_datasets()
        else:
            parser.print_help()
            print("\nError: Specify input CSV files or --demo")
            return 1

        config = RenderConfig(cols=args.cols)
        if args.font:
            config = dataclasses.replace(config, font_family=(args.font,))

        out = output_file(args.output_image_file, args.output_format)
        print(f"Plotting {len(datasets)} dataset(s) to: {out}")
        render(datasets, args.title, out, args.output_format, config)
    except (RenderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"  saved {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
