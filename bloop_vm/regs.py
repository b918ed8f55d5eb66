"""
BLOOP Interpreter - Register Set

Register model:
  ACC    - accumulator, always one of the die faces 1..6
  IP     - instruction pointer, index into the source string
  steps  - recognized commands executed so far this run

There is no flag register. Parity of ACC plays that role and is
derived on demand instead of being stored.
"""

from .config import ACC_RESET
from .alu import Parity, parity


class Registers:
    """BLOOP machine register set."""

    __slots__ = ('ACC', 'IP', 'steps')

    def __init__(self):
        self.ACC: int = ACC_RESET  # Accumulator (1..6)
        self.IP: int = 0           # Cursor into the source
        self.steps: int = 0        # Executed command counter

    # --- Parity access ---

    @property
    def parity(self) -> Parity:
        return parity(self.ACC)

    @property
    def odd(self) -> bool:
        return self.parity is Parity.ODD

    # --- Display ---

    def display(self) -> str:
        """Format register state for trace output."""
        flag = 'O' if self.odd else 'E'
        return f"IP={self.IP:04d} ACC={self.ACC} [{flag}] STEPS={self.steps}"

    def reset(self):
        """Reset to the start-of-run state."""
        self.ACC = ACC_RESET
        self.IP = 0
        self.steps = 0
