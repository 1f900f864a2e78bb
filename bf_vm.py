import logging
import sys

from bf_errors import MemoryUnderflow
from bf_lexer import Operator

logger = logging.getLogger(__name__)


class Machine:
    """Executes a compiled operation list against a growable byte tape.

    One Machine is one run: it owns the tape, the head (`ptr`) and the
    operation pointer (`pc`). Output goes to anything with `write`, input
    comes from anything with `readline`.
    """

    def __init__(self, ops, input_stream=None, output_stream=None):
        self.ops = ops
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.tape = [0]
        self.ptr = 0
        self.pc = 0
        self.step_count = 0

    @property
    def finished(self):
        return self.pc >= len(self.ops)

    @property
    def cell(self):
        return self.tape[self.ptr]

    def run_step(self):
        if self.pc >= len(self.ops):
            return False

        op = self.ops[self.pc]
        self.step_count += 1

        if op.op == Operator.MOVE_RIGHT:
            self.ptr += op.operand
            if self.ptr >= len(self.tape):
                self.tape.extend([0] * (self.ptr + 1 - len(self.tape)))
                logger.debug("Tape grown to %d cells", len(self.tape))
            self.pc += 1
        elif op.op == Operator.MOVE_LEFT:
            if self.ptr < op.operand:
                raise MemoryUnderflow(self.pc, self.ptr, op.operand)
            self.ptr -= op.operand
            self.pc += 1
        elif op.op == Operator.INCREMENT:
            self.tape[self.ptr] = (self.tape[self.ptr] + op.operand) % 256
            self.pc += 1
        elif op.op == Operator.DECREMENT:
            self.tape[self.ptr] = (self.tape[self.ptr] - op.operand) % 256
            self.pc += 1
        elif op.op == Operator.OUTPUT:
            for _ in range(op.operand):
                self.output_stream.write(chr(self.tape[self.ptr]))
            self.pc += 1
        elif op.op == Operator.INPUT:
            for _ in range(op.operand):
                self.tape[self.ptr] = self.read_cell()
            self.pc += 1
        elif op.op == Operator.LOOP_START:
            if self.tape[self.ptr] == 0:
                self.pc = op.operand
            else:
                self.pc += 1
        elif op.op == Operator.LOOP_END:
            if self.tape[self.ptr] != 0:
                self.pc = op.operand
            else:
                self.pc += 1
        return True

    def read_cell(self):
        """Read one line and return the value of its first character.

        An empty line, or an exhausted stream, reads as 0.
        """
        line = self.input_stream.readline()
        if line == '':
            logger.debug("Input exhausted at op %d, reading 0", self.pc)
            return 0
        line = line.rstrip('\r\n')
        if not line:
            return 0
        return ord(line[0]) % 256

    def run(self):
        while self.run_step():
            pass


def execute(ops, input_stream=None, output_stream=None):
    Machine(ops, input_stream, output_stream).run()
