"""
BLOOP Interpreter - Run Configuration
=====================================

Fixed machine constants plus the defaults the CLI falls back to when a
flag is not given. Nothing here is read from disk; overrides come from
the command line only.
"""

# =============================================================================
#  ACCUMULATOR RING
# =============================================================================
ACC_MIN = 1               # lowest die face
ACC_MAX = 6               # highest die face
ACC_RESET = 1             # value at the start of every run
RING_SIZE = ACC_MAX - ACC_MIN + 1


# =============================================================================
#  STEP BUDGET
# =============================================================================
DEFAULT_MAX_STEPS = 1_000_000

# A program containing this sequence gets its step ceiling doubled
KONAMI_CODE = "BBLLBBLL"
KONAMI_MULTIPLIER = 2


# =============================================================================
#  CLI
# =============================================================================
SOURCE_EXTENSION = ".bloop"

# Most snarky remarks printed for one program, however many '!' it has
MAX_SNARKS = 3

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STEP_LIMIT = 2
