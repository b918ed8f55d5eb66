"""
BLOOP Interpreter - Accumulator Arithmetic

Every accumulator update goes through wrap(), which keeps the value on
the ring {1..6}. The command helpers below take the current value and
return the new one; parity is always read from the value *before* the
update.

Transition table:
  B: odd +1, even +2
  L: odd -1, even -2
  P: odd +1, even -1   (always crosses parity)
  O: no change; odd prints the digit, even prints the Nth letter

wrap formula:
  ((value - 1 + delta) % 6 + 6) % 6 + 1
The -1/+1 pair shifts the 1-based faces to 0..5 and back. Python's %
is already non-negative for a positive modulus; the +6 fold keeps the
result correct for any remainder convention.
"""

from enum import Enum

from .config import ACC_MIN, RING_SIZE


class Parity(Enum):
    ODD = 'ODD'
    EVEN = 'EVEN'


# ══════════════════════════════════════════════
# Ring arithmetic
# ══════════════════════════════════════════════

def wrap(value: int, delta: int) -> int:
    """Apply delta to value and fold the result back into 1..6.

    Works for any integer delta: wrap(v, d) == wrap(v, d % 6).
    """
    offset = value - ACC_MIN + delta
    return ((offset % RING_SIZE) + RING_SIZE) % RING_SIZE + ACC_MIN


def parity(value: int) -> Parity:
    """Classify an accumulator value as ODD (1, 3, 5) or EVEN (2, 4, 6)."""
    if value % 2:
        return Parity.ODD
    return Parity.EVEN


def is_odd(value: int) -> bool:
    return parity(value) is Parity.ODD


# ══════════════════════════════════════════════
# Command transitions
# ══════════════════════════════════════════════

def bump(acc: int) -> int:
    """B: odd +1, even +2."""
    return wrap(acc, 1 if is_odd(acc) else 2)


def lower(acc: int) -> int:
    """L: odd -1, even -2."""
    return wrap(acc, -1 if is_odd(acc) else -2)


def bridge(acc: int) -> int:
    """P: step across the parity boundary (1→2, 2→1, 3→4, 4→3, 5→6, 6→5)."""
    return wrap(acc, 1 if is_odd(acc) else -1)


def glyph(acc: int) -> str:
    """O: character printed for acc.

    Odd values print as decimal digits. Even values print as the letter
    at that position in the alphabet: 2 → 'B', 4 → 'D', 6 → 'F'.
    """
    if is_odd(acc):
        return str(acc)
    return chr(ord('A') - 1 + acc)
