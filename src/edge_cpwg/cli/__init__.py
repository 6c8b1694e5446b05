"""
Command-line interface for edge-cpwg.

    edge_coupled_cpwg d S W t h Er

With no values, or any count other than six, the usage screen is printed and
the exit status is still 0. Values are read like C ``atof``: the leading
numeric part of each token is used and anything unparsable becomes 0.0.

Examples:
    edge_coupled_cpwg 0.2 0.41 0.2 0.035 1.593 4.5
    edge_coupled_cpwg --format json 0.2 0.41 0.2 0.035 1.593 4.5
    edge_coupled_cpwg --strict --format table 0.2 0.41 0.2 0.035 1.593 4.5
"""

import argparse
import re
import sys
from typing import List, Optional, Sequence, Tuple

from edge_cpwg import __version__
from edge_cpwg.config import OUTPUT_FORMATS, Config, generate_template, show_config
from edge_cpwg.exceptions import EdgeCpwgError
from edge_cpwg.log import verbose_logging
from edge_cpwg.physics import CPWGParameters, calculate

from .report import render_json, render_table, render_text
from .usage import PROG, usage_text

__all__ = ["main", "parse_float", "split_arguments"]

PARAMETER_COUNT = 6

# Longest numeric prefix accepted by C atof (hex and decimal forms, inf, nan)
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:"
    r"0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_VALUE_OPTIONS = {"--format", "--precision"}
_FLAG_OPTIONS = {
    "-h",
    "--help",
    "--version",
    "--strict",
    "-v",
    "--verbose",
    "--init-config",
    "--show-config",
}


def parse_float(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    number = match.group(0)
    if "x" in number.lower():
        return float.fromhex(number)
    return float(number)


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate options from positional values.

    Anything that is not one of the known options is a value, so negative
    numbers in any notation (``-1e-3``, ``-inf``) and garbage tokens reach
    :func:`parse_float` instead of being rejected as unknown options.
    Unknown ``--long`` options are passed on to argparse to be reported;
    ``--5`` and the like are values (C atof reads them as 0.0).
    """
    options: List[str] = []
    values: List[str] = []
    tokens = iter(argv)

    for token in tokens:
        if token == "--":
            values.extend(tokens)
            break
        name = token.split("=", 1)[0]
        if token in _VALUE_OPTIONS:
            options.append(token)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        elif name in _VALUE_OPTIONS or token in _FLAG_OPTIONS:
            options.append(token)
        elif token.startswith("--") and not (token[2:3].isdigit() or token[2:3] == "."):
            options.append(token)
        else:
            values.append(token)

    return options, values


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Conductor-backed edge coupled coplanar waveguides calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"edge-cpwg {__version__}")
    parser.add_argument("values", nargs="*", metavar="d S W t h Er", help="Cross-section parameters")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Report format")
    parser.add_argument(
        "--precision", type=int, default=None, help="Significant digits in text/table output"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject physically invalid inputs instead of reporting NaN",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Log intermediate values"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Print a documented config file template"
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration and the file each value came from",
    )
    return parser


def _print_error(error: EdgeCpwgError) -> None:
    from rich.console import Console
    from rich.markup import escape

    console = Console(stderr=True)
    console.print(f"[red]Error:[/red] {escape(str(error))}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the calculator."""
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    options, values = split_arguments(argv)
    args = parser.parse_args(options + ["--"] + values)

    if args.init_config:
        print(generate_template(), end="")
        return 0

    # Usage is shown before any config file is read
    if len(args.values) != PARAMETER_COUNT and not args.show_config:
        print(usage_text())
        return 0

    try:
        config = Config.load()
    except EdgeCpwgError as e:
        _print_error(e)
        return 1

    if args.show_config:
        print(show_config(config))
        return 0

    fmt = args.format or config.output.format
    precision = args.precision if args.precision is not None else config.output.precision
    strict = args.strict if args.strict is not None else config.defaults.strict
    verbose = args.verbose if args.verbose is not None else config.defaults.verbose

    if precision < 1:
        parser.error(f"--precision must be at least 1, got {precision}")

    with verbose_logging(verbose):
        try:
            params = CPWGParameters(*(parse_float(value) for value in args.values))
            if strict:
                params.check()

            result = calculate(params)
        except EdgeCpwgError as e:
            _print_error(e)
            return 1

    if fmt == "json":
        print(render_json(result))
    elif fmt == "table":
        from rich.console import Console

        render_table(result, Console(), precision)
    else:
        print(render_text(result, precision))

    return 0
