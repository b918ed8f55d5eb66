"""
Flavor text tests - seeded randomness, no machine involved.
"""

import random
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bloop_vm import interpret
from bloop_vm.flavor import (
    EXISTENTIAL_SUFFIXES, SNARKY_MESSAGES, STEP_LIMIT_MESSAGES, ZEN_KOANS, Flavor,
)


def test_seeded_rng_repeats():
    first = Flavor(random.Random(42))
    second = Flavor(random.Random(42))
    picks_a = [first.snark(), first.lament(), first.koan()]
    picks_b = [second.snark(), second.lament(), second.koan()]
    assert picks_a == picks_b


def test_messages_come_from_tables():
    flavor = Flavor(random.Random(7))
    for _ in range(20):
        assert flavor.snark() in SNARKY_MESSAGES
        assert flavor.lament() in STEP_LIMIT_MESSAGES
        assert flavor.koan() in ZEN_KOANS


def test_existential_keeps_characters():
    flavor = Flavor(random.Random(1))
    decorated = flavor.existential("1BD")
    stripped = decorated
    for suffix in EXISTENTIAL_SUFFIXES:
        stripped = stripped.replace(suffix, "")
    assert stripped == "1BD"


def test_existential_leaves_run_result_alone():
    result = interpret("OBOBO")
    Flavor(random.Random(3)).existential(result.output)
    assert result.output == "1BD"


def test_existential_empty():
    assert Flavor().existential("") == ""


def test_speedrun_tiers():
    cases = [
        (0.00005, "ohh your girl would be disappointed with how fast you finished"),
        (0.0005, "blink and you missed it"),
        (0.005, "faster than your wifi"),
        (0.05, "not bad, not bad"),
        (0.4205, "nice."),
        (0.5, "the die took a scenic route"),
        (3.0, "are you running this on a potato?"),
    ]
    for elapsed, expected in cases:
        assert Flavor.speedrun_comment(elapsed) == expected, elapsed


def test_konami():
    assert Flavor.konami("xxBBLLBBLLxx", 100) == (200, True)
    assert Flavor.konami("BBLLBBL", 100) == (100, False)


def test_is_nice():
    assert Flavor.is_nice("69")
    assert Flavor.is_nice("420")
    assert not Flavor.is_nice("1BD")
