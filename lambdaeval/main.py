"""Uses the pure lambda calculus implementation/lambdaeval language to interpret files or run in command-line mode.
Also uses the error handling context manager. Called from the lambdaeval console script.
"""

import argparse
import sys

from lambdaeval.lang.error import ErrorHandler
from lambdaeval.lang.session import Session
from lambdaeval.lang.shell import Shell


def positive_int(value):
    """argparse type for --max-steps."""
    num = int(value)
    if num <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return num


def build_parser():
    parser = argparse.ArgumentParser(prog="lambdaeval", description="Untyped lambda calculus evaluator.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the named combinators (I, ADD, ...)")
    parser.add_argument("--max-steps", type=positive_int, default=None,
                        help="give up on an expression after this many reduction steps (default: no limit)")
    parser.add_argument("--no-color", action="store_true", help="do not color diagnostics")
    return parser


def main(argv=None):
    """Runs the lambdaeval interpreter. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    error_handler = ErrorHandler(fatal=False, color=not args.no_color)
    path = args.file if args.file is not None else Session.SH_FILE

    with error_handler:
        sess = Session(error_handler, path, prelude=not args.no_prelude, max_steps=args.max_steps)

        if args.file is not None:
            sess.run()
        else:
            Shell(sess).cmdloop()

    return 1 if args.file is not None and error_handler.errors else 0


if __name__ == "__main__":
    sys.exit(main())
