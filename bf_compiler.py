import logging
from typing import List

from bf_errors import UnbalancedLoop
from bf_lexer import Operator, lex

logger = logging.getLogger(__name__)

LOOPS = (Operator.LOOP_START, Operator.LOOP_END)


class Operation:
    """A compiled instruction.

    For the six non-loop operators `operand` is a repeat count. For '[' it is
    the index just past the matching ']', for ']' the index just past the
    matching '['.
    """

    def __init__(self, op, operand=1):
        self.op = op
        self.operand = operand

    @property
    def char(self):
        return self.op.char

    def __eq__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return self.op == other.op and self.operand == other.operand

    def __repr__(self):
        if self.op in LOOPS:
            return f"{self.char} (target: {self.operand})"
        if self.operand > 1:
            return f"{self.char} x{self.operand}"
        return f"{self.char}"


def compile_bf(code: str) -> List[Operation]:
    ops = []
    loop_stack = []
    symbols = lex(code)

    op = next(symbols, None)
    while op is not None:
        if op == Operator.LOOP_START:
            loop_stack.append(len(ops))
            ops.append(Operation(op, 0))
            op = next(symbols, None)
        elif op == Operator.LOOP_END:
            if not loop_stack:
                raise UnbalancedLoop("Unbalanced loop: unmatched ']'")
            start_pc = loop_stack.pop()
            ops.append(Operation(op, start_pc + 1))
            # '[' jumps past its ']' when the cell is zero
            ops[start_pc].operand = len(ops)
            op = next(symbols, None)
        else:
            count = 1
            following = next(symbols, None)
            while following == op:
                count += 1
                following = next(symbols, None)
            ops.append(Operation(op, count))
            op = following

    if loop_stack:
        raise UnbalancedLoop(
            f"Unbalanced loop: {len(loop_stack)} unmatched '['"
        )

    logger.debug("Compiled %d ops", len(ops))
    return ops
