"""
BLOOP Interpreter - Command Decoder

Maps source characters to command mnemonics. Only six characters are
commands; everything else is inert and is skipped by the machine
without costing a step.

  B  BUMP    add (odd +1, even +2)
  L  LOWER   subtract (odd -1, even -2)
  O  OUT     print the accumulator
  P  BRIDGE  cross parity (odd +1, even -1)
  (  LOOP    open loop, remember entry parity
  )  END     close loop, repeat until exit face reached

'!' is NOT a command. The CLI reacts to it, the machine never sees it.
"""

from typing import List, Optional, Tuple


# ──────────────────────────────────────────────
# Command table
# ──────────────────────────────────────────────
# Format: char -> (mnemonic, summary)

COMMANDS = {
    'B': ('BUMP',   'odd +1, even +2'),
    'L': ('LOWER',  'odd -1, even -2'),
    'O': ('OUT',    'odd prints digit, even prints letter'),
    'P': ('BRIDGE', 'odd +1, even -1'),
    '(': ('LOOP',   'push return position + entry parity'),
    ')': ('END',    'odd entry exits on 1, even entry exits on 6'),
}

MNEMONICS = {char: mnem for char, (mnem, _) in COMMANDS.items()}


def is_command(char: str) -> bool:
    return char in COMMANDS


def decode(source: str, ip: int) -> Optional[str]:
    """Decode the character at ip.

    Returns the mnemonic, or None if the character is inert or ip is
    past the end of the source.
    """
    if ip < 0 or ip >= len(source):
        return None
    return MNEMONICS.get(source[ip])


def next_command(source: str, ip: int) -> int:
    """Index of the first command at or after ip (len(source) if none)."""
    end = len(source)
    while ip < end and source[ip] not in COMMANDS:
        ip += 1
    return ip


def count_commands(source: str) -> int:
    """Number of command characters in source."""
    return sum(1 for char in source if char in COMMANDS)


def tokens(source: str) -> List[Tuple[int, str, str]]:
    """List (position, char, mnemonic) for every command in source."""
    return [(pos, char, MNEMONICS[char])
            for pos, char in enumerate(source) if char in COMMANDS]
