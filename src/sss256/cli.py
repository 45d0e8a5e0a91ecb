"""Command line entry point: ``sss256 split | combine | version``."""

from __future__ import annotations

import argparse
import logging
import sys

from sss256 import __version__
from sss256.errors import ShamirError
from sss256.files import STDIO, combine_files, split_file
from sss256.models import CoefficientPolicy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sss256",
        description="Shamir's secret sharing over GF(256) for files and streams",
    )
    choices = ["debug", "info", "warning", "error", "critical"]
    parser.add_argument(
        "--log-level",
        choices=choices,
        default="warning",
        help="Set log level (default '%(default)s')",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    dir_args = argparse.ArgumentParser(add_help=False)
    dir_args.add_argument(
        "-p",
        "--pattern",
        default="",
        help="filename pattern used to create or search parts; '%%i' is replaced by the part index",
    )
    dir_args.add_argument(
        "-d", "--dir", default=".", help="directory where parts are stored or searched"
    )
    dir_args.add_argument(
        "-b", "--block-size", type=int, default=0, help="block size in bytes (default 16k)"
    )

    p_split = sub.add_parser("split", parents=[dir_args], help="split a secret into parts")
    p_split.add_argument("-i", "--in", dest="input", default=STDIO, help="input secret file ('-' for stdin)")
    p_split.add_argument("-c", "--count", type=int, required=True, help="number of parts")
    p_split.add_argument("-t", "--threshold", type=int, required=True, help="parts needed to combine")
    policy = p_split.add_mutually_exclusive_group()
    policy.add_argument(
        "-P",
        "--polynom-per-byte",
        dest="policy",
        action="store_const",
        const=CoefficientPolicy.PER_BYTE,
        help="draw a new polynomial for every byte (default)",
    )
    policy.add_argument(
        "--per-block",
        dest="policy",
        action="store_const",
        const=CoefficientPolicy.PER_BLOCK,
        help="reuse one polynomial's coefficients for a whole block (weaker)",
    )
    p_split.set_defaults(policy=CoefficientPolicy.PER_BYTE)

    p_combine = sub.add_parser("combine", parents=[dir_args], help="combine parts back into the secret")
    p_combine.add_argument("-o", "--out", dest="output", default=STDIO, help="output file ('-' for stdout)")

    sub.add_parser("version", help="show version and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.cmd == "split":
            split_file(
                args.input or STDIO,
                args.dir,
                args.pattern,
                args.count,
                args.threshold,
                args.block_size,
                args.policy,
            )
        elif args.cmd == "combine":
            found = combine_files(args.dir, args.pattern, args.output or STDIO, args.block_size)
            logger.info("Combined %d parts", found)
        else:
            print(f"sss256 version {__version__}")
    except (ShamirError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
