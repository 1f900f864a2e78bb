#!/usr/bin/env python3
import sys

from bf_compiler import compile_bf
from bf_errors import BrainfuckError
from bf_vm import Machine


class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    REVERSE = '\033[7m'


class Debugger:
    def __init__(self, code, input_stream=None, output_stream=None):
        self.code_str = code
        self.ops = compile_bf(code)
        self.vm = Machine(self.ops, input_stream, output_stream)
        self.breakpoints = set()

    @property
    def pc(self):
        return self.vm.pc

    @property
    def ptr(self):
        return self.vm.ptr

    @property
    def tape(self):
        return self.vm.tape

    @property
    def step_count(self):
        return self.vm.step_count

    def run_step(self):
        return self.vm.run_step()

    def run_to_breakpoint(self):
        """
        Run until the pointer lands on a breakpoint or the program ends.
        Returns True if a breakpoint stopped execution.
        """
        while self.run_step():
            if self.pc in self.breakpoints:
                return True
        return False

    def toggle_breakpoint(self, pc):
        if pc in self.breakpoints:
            self.breakpoints.remove(pc)
            return False
        self.breakpoints.add(pc)
        return True

    def dump_memory(self, addr=None, count=20):
        """Return (index, value) pairs for up to `count` cells from `addr`.

        Addresses left of cell 0 are clamped to 0.
        """
        if addr is None:
            addr = self.ptr
        addr = max(0, addr)
        return [(i, self.tape[i]) for i in range(addr, min(len(self.tape), addr + count))]

    def tape_window(self, radius=8):
        cells = []
        for i, val in self.dump_memory(self.ptr - radius, 2 * radius + 1):
            if i == self.ptr:
                cells.append(f"{Colors.REVERSE}[{val:03}]{Colors.ENDC}")
            else:
                cells.append(f" {val:03} ")
        return " ".join(cells)

    def op_window(self, radius=2):
        lines = []
        for i in range(max(0, self.pc - radius), min(len(self.ops), self.pc + radius + 1)):
            if i == self.pc:
                lines.append(f"{Colors.GREEN}-> {i:04}: {self.ops[i]!r}{Colors.ENDC}")
            else:
                lines.append(f"   {i:04}: {self.ops[i]!r}")
        return lines

    def print_state(self):
        print(f"\n{Colors.BOLD}--- Step {self.step_count} ---{Colors.ENDC}")
        print(f"PC: {self.pc} / {len(self.ops)}  Ptr: {self.ptr}  Tape: {len(self.tape)} cells")
        print(f"Loc: {self.tape_window()}")
        for line in self.op_window():
            print(line)

    def run(self):
        print("BF Debugger started. Commands: (s)tep, (c)ontinue, (b)reak <pc>, (m)em dump, (q)uit, enter to repeat last")
        last_cmd = 's'
        while self.pc < len(self.ops):
            self.print_state()
            try:
                cmd = input(f"{Colors.BLUE}(bf-dbg){Colors.ENDC} ").strip()
            except EOFError:
                break

            if cmd == '':
                cmd = last_cmd

            last_cmd = cmd

            if cmd.startswith('s'):
                self.run_step()
            elif cmd.startswith('c'):
                if self.run_to_breakpoint():
                    print(f"Breakpoint hit at {self.pc}")
            elif cmd.startswith('q'):
                break
            elif cmd.startswith('m'):
                try:
                    parts = cmd.split()
                    addr = int(parts[1]) if len(parts) > 1 else self.ptr
                    count = int(parts[2]) if len(parts) > 2 else 20
                except ValueError:
                    print("Usage: m [addr] [count]")
                    continue
                if addr < 0:
                    print("Usage: m [addr] [count] (addr >= 0)")
                    continue
                print("Memory Dump:")
                for i, val in self.dump_memory(addr, count):
                    print(f"[{i:04}]: {val}")
            elif cmd.startswith('b'):
                try:
                    bp = int(cmd.split()[1])
                except (IndexError, ValueError):
                    print("Usage: b <pc>")
                    continue
                if self.toggle_breakpoint(bp):
                    print(f"Breakpoint set at {bp}")
                else:
                    print(f"Breakpoint removed at {bp}")
            else:
                print(f"{Colors.WARNING}Unknown command: {cmd}{Colors.ENDC}")

        print("Execution finished.")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Usage: bf-debug <bf_file>")
        return 1

    try:
        with open(argv[0], 'r') as f:
            code = f.read()
    except OSError as e:
        print(f"Error: cannot read {argv[0]}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        Debugger(code).run()
    except BrainfuckError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
