class BrainfuckError(Exception):
    """Base class for errors raised while compiling or running a program."""


class UnbalancedLoop(BrainfuckError):
    """Raised at compile time when '[' and ']' do not pair up."""


class MemoryUnderflow(BrainfuckError):
    """Raised at run time when the head would move left of cell 0."""

    def __init__(self, pc, ptr, count):
        super().__init__(
            f"Memory underflow at op {pc}: cannot move head {ptr} left by {count}"
        )
        self.pc = pc
        self.ptr = ptr
        self.count = count
