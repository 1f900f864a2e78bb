#!/usr/bin/env python3
import argparse
import logging
import sys

from bf_compiler import compile_bf
from bf_errors import BrainfuckError
from bf_vm import execute

logger = logging.getLogger(__name__)


def init_logging(verbose=False):
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)5s %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run_bf(code, input_stream=None, output_stream=None):
    ops = compile_bf(code)
    execute(ops, input_stream, output_stream)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run a Brainfuck program')
    parser.add_argument('file', nargs='?', default=None, help='Brainfuck source file')
    parser.add_argument('-e', '--eval', default=None, metavar='CODE', help='Run CODE instead of a file')
    parser.add_argument('-d', '--debug', action='store_true', help='Open the program in the step debugger')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    init_logging(args.verbose)

    if args.eval is not None:
        code = args.eval
    elif args.file is not None:
        try:
            with open(args.file, 'r') as f:
                code = f.read()
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
    else:
        parser.print_usage(sys.stderr)
        print("Error: a source file or -e CODE is required", file=sys.stderr)
        return 1

    logger.debug("Running %s", args.file if args.eval is None else "<eval>")
    try:
        if args.debug:
            from debugger import Debugger
            Debugger(code).run()
        else:
            run_bf(code)
    except BrainfuckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
