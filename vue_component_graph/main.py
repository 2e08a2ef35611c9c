#!/usr/bin/env python3
"""
CLI entry point for the component dependency tree.

Usage:
    vue-component-graph src/App.vue
    vue-component-graph -r src -o html src/pages/Home.vue src/pages/About.vue > tree.html
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .generator import generate
from .models import GraphOptions, OutputFormat

LOG_FORMAT = "[vue-deps] %(levelname)s %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="vue-component-graph",
        description="Generate an ASCII or HTML tree of Vue component dependencies.",
    )
    parser.add_argument(
        "targets",
        nargs="+",
        help="Entry .vue file(s) to start from",
    )
    parser.add_argument(
        "-r", "--root",
        default=os.getcwd(),
        help="Root directory to scan for .vue files (default: current directory)",
    )
    parser.add_argument(
        "-o", "--output",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.ASCII.value,
        help="Output format (default: ascii)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log discovery details to stderr",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so they never mix with the rendered tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Build the dependency graph for the given targets and print it."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    options = GraphOptions(
        root=Path(args.root),
        targets=[Path(t) for t in args.targets],
        output=OutputFormat(args.output),
    )

    try:
        result = generate(options)
    except OSError as e:
        print(f"Error: cannot scan '{options.root}': {e}", file=sys.stderr)
        sys.exit(1)

    print(result)


if __name__ == "__main__":
    main()
