"""
BLOOP Interpreter
=================
An interpreter for BLOOP, an esoteric language whose whole state is one
die: a single accumulator that only ever holds 1..6.

Commands: B, L, O, P, (, ). Every other character is ignored.

Architecture:
    ┌──────────┐    ┌──────────┐    ┌──────────────┐    ┌────────────┐
    │  Source  │───>│ Decoder  │───>│   Machine    │───>│ RunResult  │
    │ (.bloop) │    │(commands)│    │ (ACC, loops) │    │(out+reason)│
    └──────────┘    └──────────┘    └──────────────┘    └────────────┘

    - decoder.py:    char → mnemonic, inert characters skipped
    - alu.py:        wrap() on the 1..6 ring, parity, command transitions
    - regs.py:       ACC / IP / step counter
    - loop_stack.py: (return IP, entry parity) records for '(' ... ')'
    - output.py:     buffered O output
    - machine.py:    step/run loop, step budget, StopReason
    - flavor.py:     CLI easter-egg text, never touches the machine
"""

__version__ = "1.0.0"

from .alu import Parity, parity, is_odd, wrap, glyph
from .config import DEFAULT_MAX_STEPS
from .decoder import COMMANDS, count_commands, is_command
from .loop_stack import LoopEntry, LoopStack
from .machine import (
    BloopError, BloopMachine, RunResult, StepLimitExceeded, StopReason, interpret,
)

__all__ = [
    'BloopError', 'BloopMachine', 'COMMANDS', 'DEFAULT_MAX_STEPS', 'LoopEntry',
    'LoopStack', 'Parity', 'RunResult', 'StepLimitExceeded', 'StopReason',
    'count_commands', 'glyph', 'interpret', 'is_command', 'is_odd', 'parity',
    'wrap',
]
