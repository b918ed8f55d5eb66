"""
BLOOP Interpreter - Output Channel

Collects the characters produced by O. Nothing is written to a stream
while the program runs; the caller reads the buffer afterwards, which
keeps partial output available when a run stops on the step limit.
"""

from typing import List

from .alu import glyph


class OutputChannel:
    """In-memory sink for O output."""

    def __init__(self):
        # One entry per O executed
        self.tx_buffer: List[str] = []

    def emit(self, acc: int) -> str:
        """Append the character for acc and return it."""
        char = glyph(acc)
        self.tx_buffer.append(char)
        return char

    @property
    def output(self) -> str:
        """Everything emitted since the last reset."""
        return ''.join(self.tx_buffer)

    def reset(self):
        self.tx_buffer.clear()
