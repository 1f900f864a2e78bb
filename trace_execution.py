#!/usr/bin/env python3
import io
import sys

from bf_compiler import compile_bf
from bf_vm import Machine


def trace(code, steps=2000000, input_stream=None):
    """
    Run `code` for at most `steps` operations with output captured.
    Returns (finished, machine).
    """
    ops = compile_bf(code)
    vm = Machine(ops, input_stream or io.StringIO(), io.StringIO())
    print(f"Loaded {len(ops)} ops")

    for _ in range(steps):
        if not vm.run_step():
            break

    if vm.finished:
        print(f"Finished at step {vm.step_count}")
    else:
        print(f"Step limit {steps} reached")

    print(f"Final PC: {vm.pc}")
    return vm.finished, vm


USAGE = "Usage: python3 trace_execution.py <bf_file> [steps]"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print(USAGE)
        return 1
    try:
        limit = int(argv[1]) if len(argv) > 1 else 2000000
    except ValueError:
        print(USAGE)
        return 1
    with open(argv[0], 'r') as f:
        source = f.read()
    trace(source, limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
