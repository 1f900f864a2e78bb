from enum import Enum
from typing import Iterator


class Operator(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_START = '['
    LOOP_END = ']'

    @property
    def char(self):
        return self.value


SYMBOLS = {op.value: op for op in Operator}


def lex(code: str) -> Iterator[Operator]:
    """Yield the instruction symbols of `code` in order.

    Any character that is not one of the eight instructions is a comment
    and is skipped.
    """
    for c in code:
        op = SYMBOLS.get(c)
        if op is not None:
            yield op
