# concatener/parsing/parser.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from concatener.core.models import ConcatRequest


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Bare positional tokens are inputs: files, directories or simple
          wildcard patterns ('*.txt', 'docs/*.md', 'log*').
        - Quote wildcard patterns so the shell does not expand them first.
    """
    from concatener import __version__

    p = argparse.ArgumentParser(
        prog="concatener",
        formatter_class=argparse.RawTextHelpFormatter,
        description="concatener – concatenate files, directories and wildcard matches into one UTF-8 file",
    )

    g_io = p.add_argument_group("Input & output")
    g_misc = p.add_argument_group("Miscellaneous")

    g_io.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        required=True,
        help="Output file path. Created or truncated before the first file is written.",
    )
    g_io.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        dest="recursive",
        help=(
            "Recursively search directories for files. Also makes wildcard\n"
            "patterns match inside every subdirectory of their base directory."
        ),
    )
    g_io.add_argument(
        "inputs",
        metavar="INPUT",
        nargs="+",
        help="Input files, directories, or patterns to concatenate.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log records as JSON lines on stderr.",
    )
    verbosity = g_misc.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log every resolved input and written file.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        dest="quiet",
        help="Only log warnings and errors.",
    )
    g_misc.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p


def parse_request(argv: Sequence[str]) -> tuple[ConcatRequest, argparse.Namespace]:
    """Parse *argv* into a validated request plus the raw namespace."""
    ns = _build_parser().parse_args(list(argv))
    request = ConcatRequest(
        output_path=Path(ns.output),
        recursive=bool(ns.recursive),
        inputs=tuple(ns.inputs),
    )
    return request, ns
