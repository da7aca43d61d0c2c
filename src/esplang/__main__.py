import argparse
import logging
import sys

from .lib.loader import ProgramLoadError, load_program
from .main import Interpreter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m esplang",
        usage="python -m esplang <program.esp>",
    )
    parser.add_argument("program")
    parser.add_argument("-v", "--verbose", action="store_true", help="log execution to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    try:
        args = parser.parse_args(args_list)
    except SystemExit as exc:
        return int(exc.code)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    print(f"The input file is {args.program}")
    try:
        code = load_program(args.program)
    except ProgramLoadError as exc:
        print(exc)
        print("No program loaded.")
        status = 2
    else:
        result = Interpreter().run(code)
        status = 0 if result.ok else 1
    print("Done.")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
