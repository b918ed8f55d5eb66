"""
BLOOP Interpreter - Main Machine Class

This is the top-level class that integrates:
  - registers (regs.py)
  - command decoder (decoder.py)
  - accumulator arithmetic (alu.py)
  - loop control stack (loop_stack.py)
  - output channel (output.py)

Execution model:
  1. Skip inert characters at IP
  2. Decode the command at IP
  3. Execute its handler → update ACC, loop stack, output
  4. Handler returns the next IP (advance, or jump back for a loop)
     and the steps it used
  5. Count the steps
  6. Stop once the counter reaches the budget, even on the last command

Termination reasons:
  - DONE:        IP ran past the end of the source
  - STEP_LIMIT:  step counter reached max_steps

Open loops at the end of the source are not an error, and neither is
an unmatched ')', which costs no step.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import alu
from .config import DEFAULT_MAX_STEPS
from .decoder import decode, next_command
from .loop_stack import LoopStack
from .output import OutputChannel
from .regs import Registers

logger = logging.getLogger(__name__)


class StopReason(Enum):
    DONE = 'DONE'
    STEP_LIMIT = 'STEP_LIMIT'


class BloopError(Exception):
    """Base class for interpreter errors."""


class StepLimitExceeded(BloopError):
    """The step ceiling was reached before the program finished.

    Carries the partial output so callers that prefer exceptions still
    get everything the program printed.
    """

    def __init__(self, max_steps: int, steps: int, output: str):
        super().__init__(f"step limit reached ({max_steps} steps)")
        self.max_steps = max_steps
        self.steps = steps
        self.output = output


@dataclass
class RunResult:
    output: str
    reason: StopReason
    steps: int
    max_steps: int

    @property
    def ok(self) -> bool:
        return self.reason is StopReason.DONE

    @property
    def limit_exceeded(self) -> bool:
        return self.reason is StopReason.STEP_LIMIT

    def check(self) -> 'RunResult':
        """Return self, or raise StepLimitExceeded if the run was cut off."""
        if self.limit_exceeded:
            raise StepLimitExceeded(self.max_steps, self.steps, self.output)
        return self


class BloopMachine:
    """BLOOP virtual machine.

    Usage:
        vm = BloopMachine()
        vm.load("B(B)O")
        result = vm.run(max_steps=1000)
        print(result.output)  # "F"
    """

    DEFAULT_MAX_STEPS = DEFAULT_MAX_STEPS

    def __init__(self):
        self.regs = Registers()
        self.loops = LoopStack()
        self.out = OutputChannel()
        self.source = ''

        self._trace = False
        self._trace_output = []

        # Mnemonic → handler (built in _build_dispatch)
        self._dispatch = self._build_dispatch()

    # ══════════════════════════════════════════════
    # Loading
    # ══════════════════════════════════════════════

    def load(self, source):
        """Load program text and reset all run state.

        Bytes are decoded as UTF-8; undecodable bytes can only be inert
        characters, so they are replaced rather than rejected.
        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode('utf-8', errors='replace')
        self.reset()
        self.source = source

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    @property
    def finished(self) -> bool:
        """True once no command is left at or after IP."""
        return next_command(self.source, self.regs.IP) >= len(self.source)

    def step(self) -> Optional[StopReason]:
        """Execute one command. Returns StopReason.DONE at end of source, else None.

        Inert characters before the command are skipped first and do not
        count as a step.
        """
        ip = next_command(self.source, self.regs.IP)
        self.regs.IP = ip
        mnem = decode(self.source, ip)
        if mnem is None:
            return StopReason.DONE

        if self._trace:
            line = f"{ip:04d}: {self.source[ip]} {mnem:6s} {self.regs.display()}"
            self._trace_output.append(line)
            logger.debug(line)

        self.regs.IP, cost = self._dispatch[mnem](ip)
        self.regs.steps += cost
        return None

    def run(self, max_steps: int = None) -> RunResult:
        """Run until the end of the source or until the step budget is spent.

        Args:
            max_steps: Step ceiling, DEFAULT_MAX_STEPS when None

        Returns:
            RunResult with the output produced so far and the StopReason
        """
        if max_steps is None:
            max_steps = self.DEFAULT_MAX_STEPS
        if max_steps < 1:
            raise ValueError(f"max_steps must be a positive integer, got {max_steps!r}")

        reason = None
        while reason is None:
            reason = self.step()
            if reason is None and self.regs.steps >= max_steps:
                reason = StopReason.STEP_LIMIT

        if reason is StopReason.STEP_LIMIT:
            logger.info("step limit reached after %d steps (IP=%d, loop depth %d)",
                        self.regs.steps, self.regs.IP, self.loops.depth)
        else:
            logger.info("program finished after %d steps", self.regs.steps)

        return RunResult(
            output=self.out.output,
            reason=reason,
            steps=self.regs.steps,
            max_steps=max_steps,
        )

    # ══════════════════════════════════════════════
    # Instruction handlers
    # ══════════════════════════════════════════════
    # Each takes the IP of its own character and returns (next IP, steps used).
    # Only an unmatched ')' uses no step.

    def _build_dispatch(self) -> dict:
        return {
            'BUMP':   self._op_bump,
            'LOWER':  self._op_lower,
            'OUT':    self._op_out,
            'BRIDGE': self._op_bridge,
            'LOOP':   self._op_loop,
            'END':    self._op_end,
        }

    def _op_bump(self, ip):
        self.regs.ACC = alu.bump(self.regs.ACC)
        return ip + 1, 1

    def _op_lower(self, ip):
        self.regs.ACC = alu.lower(self.regs.ACC)
        return ip + 1, 1

    def _op_bridge(self, ip):
        self.regs.ACC = alu.bridge(self.regs.ACC)
        return ip + 1, 1

    def _op_out(self, ip):
        self.out.emit(self.regs.ACC)
        return ip + 1, 1

    def _op_loop(self, ip):
        entry = self.loops.push(ip + 1, self.regs.parity)
        logger.debug("loop open at %d, entry %s, exits on %d (depth %d)",
                     ip, entry.entry_parity.value, entry.exit_value, self.loops.depth)
        return ip + 1, 1

    def _op_end(self, ip):
        top = self.loops.peek()
        if top is None:
            # Unmatched ')' - tolerated as a no-op
            logger.debug("unmatched ')' at %d ignored", ip)
            return ip + 1, 0

        if top.satisfied_by(self.regs.ACC):
            self.loops.pop()
            logger.debug("loop close at %d, ACC=%d, exit (depth %d)",
                         ip, self.regs.ACC, self.loops.depth)
            return ip + 1, 1

        return top.return_ip, 1

    # ══════════════════════════════════════════════
    # Trace / Debug
    # ══════════════════════════════════════════════

    def enable_trace(self, enable: bool = True):
        """Record one line per executed command."""
        self._trace = enable

    def get_trace(self) -> str:
        return '\n'.join(self._trace_output)

    def clear_trace(self):
        self._trace_output.clear()

    def reset(self):
        """Full machine reset. The loaded source is kept."""
        self.regs.reset()
        self.loops.clear()
        self.out.reset()
        self._trace_output.clear()


def interpret(source, max_steps: int = None) -> RunResult:
    """Run source on a fresh machine."""
    vm = BloopMachine()
    vm.load(source)
    return vm.run(max_steps=max_steps)
