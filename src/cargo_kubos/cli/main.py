"""`cargo kubos`: run a Cargo command with a Kubos target attached."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from cargo_kubos.errors import CargoKubosError, CargoNotFoundError
from cargo_kubos.invoke import run_cargo
from cargo_kubos.targets import DEFAULT_TARGET

log = logging.getLogger(__name__)

# cargo runs `cargo-kubos kubos <args...>` for `cargo kubos <args...>`.
ALIAS = "kubos"

DESCRIPTION = (
    "cargo-kubos is a helper utility for running Cargo commands with a Kubos target attached.\n"
    "It is used when building/running/testing crates which either contain a yotta module or "
    "depend on one."
)
EPILOG = """\
usage:
  cargo kubos -c [cargo command] [options] -- [cargo options]
  cargo kubos -c build -t x86-linux-native -- -vv
"""


def create_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cargo kubos",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "-c",
        "--command",
        required=True,
        metavar="COMMAND",
        help="cargo command to run",
    )
    ap.add_argument(
        "-t",
        "--target",
        default=DEFAULT_TARGET,
        metavar="NAME",
        help=f"sets (Kubos) target (default: {DEFAULT_TARGET})",
    )
    ap.add_argument("free", nargs="*", help=argparse.SUPPRESS)
    return ap


def split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first '--' into (own args, args forwarded to cargo)."""
    argv = list(argv)
    if "--" in argv:
        i = argv.index("--")
        return argv[:i], argv[i + 1 :]
    return argv, []


def strip_alias(args: Sequence[str], alias: str = ALIAS) -> list[str]:
    """Drop every `alias` token, keeping the order of the rest.

    Note: a real cargo argument spelled exactly like the alias is dropped too.
    """
    kept = [a for a in args if a != alias]
    if len(kept) != len(args):
        log.debug("Dropped %d %r token(s) from cargo args", len(args) - len(kept), alias)
    return kept


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    """Parse argv; returns (namespace, extra args for cargo with the alias removed)."""
    own, passthrough = split_passthrough(argv)
    args = create_arg_parser().parse_intermixed_args(own)
    return args, strip_alias([*args.free, *passthrough])


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point. Exits with cargo's exit code."""
    if argv is None:
        argv = sys.argv[1:]
    args, extra = parse_args(argv)
    try:
        rc = run_cargo(args.target, args.command, extra)
    except CargoNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(127)
    except CargoKubosError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc)


if __name__ == "__main__":
    main()
