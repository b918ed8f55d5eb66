"""
BLOOP Interpreter - Flavor Text

Cosmetic messages the CLI prints around a run: snark for '!', laments
for the step limit, koans for programs with no commands, existential
suffixes, and the speedrun timer commentary.

None of this touches the machine. The CLI decides when to print, and
existential mode only decorates the *displayed* output; the RunResult
output is never modified. All randomness comes from the injected
random.Random so a seeded instance gives repeatable text.
"""

import random
from typing import Optional, Tuple

from .config import KONAMI_CODE, KONAMI_MULTIPLIER


SNARKY_MESSAGES = [
    "The die judges you silently.",
    "Was that supposed to do something?",
    "Even the accumulator is confused.",
    "BLOOP disapproves.",
    "That's not how dice work, but ok.",
    "Your code has the energy of a wet sock.",
    "The die has seen better programs.",
    "Somewhere, a computer scientist just cried.",
]

STEP_LIMIT_MESSAGES = [
    "I gave you a million steps and THIS is what you do?",
    "Congratulations, you've created nothing.",
    "Even the die is tired of rolling.",
    "Infinity called. It wants its loop back.",
    "Your program ran longer than your attention span.",
    "The accumulator begs for mercy.",
    "Did you really think this would terminate?",
    "Step limit reached. Hope was lost long ago.",
]

ZEN_KOANS = [
    "The unrolled die contains all faces.",
    "In emptiness, the accumulator finds peace.",
    "To BLOOP nothing is to BLOOP everything.",
    "The blank program has already finished. Have you?",
    "No commands, no bugs. Perfection.",
    "The wisest BLOOP program is the one never written.",
]

EXISTENTIAL_SUFFIXES = [
    " (but does it matter?)",
    " (in the grand scheme of things)",
    " (or so the die claims)",
    " (if you even believe in numbers)",
    " (the void stares back)",
    " (temporarily)",
]

RICK_ROLL = """\
Never gonna give you up
Never gonna let you down
Never gonna run around and desert you
Never gonna make you cry
Never gonna say goodbye
Never gonna tell a lie and hurt you"""

BLAME = "It's not a bug, it's a BLOOP."

KONAMI_NOTICE = "+30 lives! Step limit doubled."

NICE_OUTPUTS = ("69", "420")

# (upper bound in seconds, comment), checked in order
SPEEDRUN_TIERS = [
    (0.0001, "ohh your girl would be disappointed with how fast you finished"),
    (0.001,  "blink and you missed it"),
    (0.01,   "faster than your wifi"),
    (0.1,    "not bad, not bad"),
]


class Flavor:
    """Message picker backed by an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def snark(self) -> str:
        """One remark per '!' in the source text.

        The CLI asks for these before the run, so a '!' inside a loop body
        is remarked on once no matter how many times the loop repeats.
        """
        return self.rng.choice(SNARKY_MESSAGES)

    def lament(self) -> str:
        return self.rng.choice(STEP_LIMIT_MESSAGES)

    def koan(self) -> str:
        return self.rng.choice(ZEN_KOANS)

    def existential(self, output: str) -> str:
        """Follow every output character with a random suffix."""
        return ''.join(char + self.rng.choice(EXISTENTIAL_SUFFIXES)
                       for char in output)

    @staticmethod
    def speedrun_comment(elapsed: float) -> str:
        """Comment on a run time given in seconds."""
        for bound, comment in SPEEDRUN_TIERS:
            if elapsed < bound:
                return comment
        if int(elapsed * 1000) == 420:
            return "nice."
        if elapsed < 1.0:
            return "the die took a scenic route"
        return "are you running this on a potato?"

    @staticmethod
    def konami(source: str, max_steps: int) -> Tuple[int, bool]:
        """Double max_steps when source contains the Konami code.

        Returns (max_steps, triggered).
        """
        if KONAMI_CODE in source:
            return max_steps * KONAMI_MULTIPLIER, True
        return max_steps, False

    @staticmethod
    def is_nice(output: str) -> bool:
        return output in NICE_OUTPUTS
