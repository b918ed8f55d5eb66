"""
BLOOP Interpreter - Loop Control Stack

Each '(' pushes a LoopEntry; the matching ')' peeks at the top entry to
decide between jumping back and falling through. The stack is a plain
list, so nesting depth is limited only by memory.

Exit rule, fixed when the loop is entered:
  entered odd   → leave when ACC == 1
  entered even  → leave when ACC == 6
"""

from dataclasses import dataclass
from typing import List, Optional

from .alu import Parity
from .config import ACC_MAX, ACC_MIN


@dataclass(frozen=True)
class LoopEntry:
    return_ip: int       # index just after the '('
    entry_parity: Parity

    @property
    def exit_value(self) -> int:
        if self.entry_parity is Parity.ODD:
            return ACC_MIN
        return ACC_MAX

    def satisfied_by(self, acc: int) -> bool:
        return acc == self.exit_value


class LoopStack:
    """LIFO of open loops."""

    def __init__(self):
        self._entries: List[LoopEntry] = []

    def push(self, return_ip: int, entry_parity: Parity) -> LoopEntry:
        entry = LoopEntry(return_ip, entry_parity)
        self._entries.append(entry)
        return entry

    def peek(self) -> Optional[LoopEntry]:
        """Top entry, or None when no loop is open."""
        if self._entries:
            return self._entries[-1]
        return None

    def pop(self) -> LoopEntry:
        if not self._entries:
            raise IndexError('pop from empty loop stack')
        return self._entries.pop()

    @property
    def depth(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def clear(self):
        self._entries.clear()
